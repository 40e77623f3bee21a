from rest_framework.response import Response
from rest_framework.views import APIView

from files.folders import normalize_path
from files.models import Folder
from files.serializers import FolderSerializer
from sharing import policy


class ListFoldersAPIView(APIView):

    def get(self, request, role_group):
        policy.require(request.user, policy.FOLDER, "list", role_group=role_group)

        folders = Folder.objects.filter(role_group=role_group)
        category = request.query_params.get("category")
        if category and category != "all":
            folders = folders.filter(category=category)
        # an empty parent_path selects root folders
        if "parent_path" in request.query_params:
            folders = folders.filter(parent_path=normalize_path(request.query_params["parent_path"]))

        folders = folders.order_by("category", "path")
        return Response({"folders": FolderSerializer(folders, many=True).data})
