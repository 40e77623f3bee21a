from django.db.models import Count
from rest_framework.response import Response
from rest_framework.views import APIView

from files.access import requested_view, roles_by_username
from files.folders import normalize_path
from files.models import File
from files.serializers import FileSerializer
from sharing import policy


class ListFilesAPIView(APIView):

    def get(self, request):
        user = request.user
        view_as = requested_view(request)

        files = File.objects.annotate(comments_count=Count("comments")).order_by("-upload_date", "-id")
        category = request.query_params.get("category")
        if category and category != "all":
            files = files.filter(category=category)
        if "folder_path" in request.query_params:
            files = files.filter(folder_path=normalize_path(request.query_params["folder_path"]))

        visible = [f for f in files if policy.is_allowed(user, policy.FILE, "view", f, view_as=view_as)]
        roles = roles_by_username(f.uploaded_by for f in visible)
        return Response({"files": FileSerializer(visible, many=True, context={"roles": roles}).data})
