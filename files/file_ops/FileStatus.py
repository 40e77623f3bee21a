import logging

from django.contrib.auth import get_user_model
from django.shortcuts import get_object_or_404
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.permissions import CanSetFileStatus
from files.models import File
from files.serializers import FileStatusSerializer
from notifications.models import TYPE_FILE_STATUS
from notifications.utils import notify

logger = logging.getLogger(__name__)


class FileStatusAPIView(APIView):
    permission_classes = [IsAuthenticated, CanSetFileStatus]

    def put(self, request, file_id):
        serializer = FileStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        new_status = serializer.validated_data["status"]

        file_obj = get_object_or_404(File, pk=file_id)
        file_obj.status = new_status
        file_obj.save(update_fields=["status"])
        logger.info("%s set file %s to %s", request.user.username, file_obj.id, new_status)

        uploader = get_user_model().objects.filter(username=file_obj.uploaded_by).first()
        if uploader is not None:
            notify(
                [uploader],
                TYPE_FILE_STATUS,
                f"File {new_status.capitalize()}",
                f'Your file "{file_obj.original_name}" has been {new_status}',
                related_id=file_obj.id,
            )

        return Response({"success": True, "status": new_status})
