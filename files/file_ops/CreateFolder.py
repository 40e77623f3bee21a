import logging

from django.db import transaction
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from files.models import CustomTab, Folder
from files.serializers import CreateFolderSerializer, FolderSerializer
from portal_backend.exceptions import ValidationFailed
from sharing import policy

logger = logging.getLogger(__name__)


class CreateFolderAPIView(APIView):

    def post(self, request):
        serializer = CreateFolderSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        role_group = data["role_group"]
        category = data["category"]

        policy.require(
            request.user, policy.FOLDER, "create",
            message="Permission denied - Only developers and users can create folders in their own group",
            role_group=role_group,
        )

        if not CustomTab.objects.filter(role_group=role_group, tab_key=category).exists():
            raise ValidationFailed("Invalid category for this role group")

        parent = None
        if data["parent_path"]:
            parent = Folder.objects.filter(
                path=data["parent_path"], category=category, role_group=role_group
            ).first()
            if parent is None:
                raise ValidationFailed("Parent folder does not exist")

        if Folder.objects.filter(path=data["path"], category=category, role_group=role_group).exists():
            raise ValidationFailed("Folder already exists")

        with transaction.atomic():
            folder = Folder.objects.create(
                name=data["name"],
                path=data["path"],
                category=category,
                role_group=role_group,
                parent_path=data["parent_path"],
                parent=parent,
                created_by=request.user.username,
            )

        logger.info("%s created folder %s in %s/%s", request.user.username, folder.path, role_group, category)
        return Response({"success": True, "folder": FolderSerializer(folder).data}, status=status.HTTP_201_CREATED)
