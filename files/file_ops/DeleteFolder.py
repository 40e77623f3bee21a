import logging

from django.db import transaction
from django.shortcuts import get_object_or_404
from rest_framework.response import Response
from rest_framework.views import APIView

from files.folders import subtree_ids
from files.models import File, Folder
from files.storage import delete_blobs, uploads_root
from sharing import policy

logger = logging.getLogger(__name__)


class DeleteFolderAPIView(APIView):
    """
    Delete a folder with every folder and file beneath it.

    Only rows in the folder's own (category, role_group) are touched. Rows go
    in one transaction; blobs are removed afterwards and missing blobs are
    skipped.
    """

    def delete(self, request, folder_id):
        folder = get_object_or_404(Folder, pk=folder_id)
        policy.require(
            request.user, policy.FOLDER, "delete", folder,
            message="Permission denied - You can only delete folders you created",
        )

        with transaction.atomic():
            scoped_files = File.objects.filter(category=folder.category, role_group=folder.role_group)
            files = File.objects.filter(pk__in=subtree_ids(scoped_files, "folder_path", folder.path))
            blob_names = list(files.values_list("filename", flat=True))
            files.delete()

            scoped_folders = Folder.objects.filter(category=folder.category, role_group=folder.role_group)
            folder_ids = subtree_ids(scoped_folders, "path", folder.path)
            Folder.objects.filter(pk__in=folder_ids).delete()

        blobs_removed = delete_blobs(uploads_root(), blob_names)
        logger.info(
            "%s deleted folder %s (%d folders, %d files, %d blobs removed)",
            request.user.username, folder.path, len(folder_ids), len(blob_names), blobs_removed,
        )
        return Response({
            "success": True,
            "message": "Folder and all contents deleted successfully",
            "deleted_folders": len(folder_ids),
            "deleted_files": len(blob_names),
        })
