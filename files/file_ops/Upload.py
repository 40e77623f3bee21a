import logging

from django.db import transaction
from rest_framework import status
from rest_framework.parsers import FormParser, MultiPartParser
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.permissions import CanUploadFiles
from files.models import CustomTab, File, SHARE_ALL, SHARE_GROUP
from files.serializers import FileSerializer, UploadFileSerializer
from files.storage import delete_blob, save_upload, uploads_root
from notifications.models import TYPE_FILE_UPLOAD
from notifications.utils import notify, privileged_recipients
from portal_backend.exceptions import ValidationFailed
from sharing import policy

logger = logging.getLogger(__name__)


class UploadFileAPIView(APIView):
    parser_classes = [MultiPartParser, FormParser]
    permission_classes = [IsAuthenticated, CanUploadFiles]

    def post(self, request, *args, **kwargs):
        serializer = UploadFileSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        user = request.user
        uploaded = data["file"]
        category = data["category"]
        folder_path = data["folder_path"]
        role_group = policy.effective_role(user, data.get("target_role"))

        # nothing touches the disk until the category is known to exist
        if not CustomTab.objects.filter(role_group=role_group, tab_key=category).exists():
            raise ValidationFailed("Invalid category for this role group")

        root = uploads_root()
        filename = save_upload(uploaded, root)
        try:
            with transaction.atomic():
                file_obj = File.objects.create(
                    filename=filename,
                    original_name=uploaded.name,
                    file_type=uploaded.content_type or "application/octet-stream",
                    file_size=uploaded.size,
                    category=category,
                    role_group=role_group,
                    shared_with=role_group if data["shared_with"] == SHARE_GROUP else SHARE_ALL,
                    uploaded_by=user.username,
                    folder_path=folder_path,
                )
        except Exception:
            delete_blob(root, filename)
            raise

        logger.info("%s uploaded %s as %s (%s/%s)", user.username, uploaded.name, filename, role_group, category)

        location = f" in {folder_path}" if folder_path else ""
        notify(
            privileged_recipients(exclude=user),
            TYPE_FILE_UPLOAD,
            "New File Uploaded",
            f"{user.username} uploaded {uploaded.name}{location}",
            related_id=file_obj.id,
        )

        return Response({
            "success": True,
            "fileId": file_obj.id,
            "file": FileSerializer(file_obj, context={"roles": {user.username: user.role}}).data,
        }, status=status.HTTP_201_CREATED)
