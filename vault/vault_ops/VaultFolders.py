import logging

from django.db import transaction
from django.shortcuts import get_object_or_404
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.permissions import IsCollector
from files.folders import normalize_path, subtree_ids
from files.serializers import FolderInputSerializer
from files.storage import delete_blobs, vault_root
from portal_backend.exceptions import ValidationFailed
from vault.models import VaultCustomTab, VaultFile, VaultFolder
from vault.serializers import VaultFolderSerializer

logger = logging.getLogger(__name__)


class VaultFoldersAPIView(APIView):
    permission_classes = [IsAuthenticated, IsCollector]

    def get(self, request):
        folders = VaultFolder.objects.filter(collector=request.user)
        category = request.query_params.get("category")
        if category and category != "all":
            folders = folders.filter(category=category)
        if "parent_path" in request.query_params:
            folders = folders.filter(parent_path=normalize_path(request.query_params["parent_path"]))
        folders = folders.order_by("category", "path")
        return Response({"folders": VaultFolderSerializer(folders, many=True).data})

    def post(self, request):
        serializer = FolderInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        collector = request.user
        category = data["category"]

        if not VaultCustomTab.objects.filter(collector=collector, tab_key=category).exists():
            raise ValidationFailed("Invalid category for vault")

        parent = None
        if data["parent_path"]:
            parent = VaultFolder.objects.filter(
                path=data["parent_path"], category=category, collector=collector
            ).first()
            if parent is None:
                raise ValidationFailed("Parent folder does not exist")

        if VaultFolder.objects.filter(path=data["path"], category=category, collector=collector).exists():
            raise ValidationFailed("Vault folder already exists")

        with transaction.atomic():
            folder = VaultFolder.objects.create(
                name=data["name"],
                path=data["path"],
                category=category,
                collector=collector,
                parent_path=data["parent_path"],
                parent=parent,
                created_by=collector.username,
            )
        return Response({"success": True, "folder": VaultFolderSerializer(folder).data},
                        status=status.HTTP_201_CREATED)


class DeleteVaultFolderAPIView(APIView):
    permission_classes = [IsAuthenticated, IsCollector]

    def delete(self, request, folder_id):
        collector = request.user
        folder = get_object_or_404(VaultFolder, pk=folder_id, collector=collector)

        with transaction.atomic():
            scoped_files = VaultFile.objects.filter(collector=collector, category=folder.category)
            files = VaultFile.objects.filter(pk__in=subtree_ids(scoped_files, "folder_path", folder.path))
            blob_names = list(files.values_list("filename", flat=True))
            files.delete()

            scoped_folders = VaultFolder.objects.filter(collector=collector, category=folder.category)
            folder_ids = subtree_ids(scoped_folders, "path", folder.path)
            VaultFolder.objects.filter(pk__in=folder_ids).delete()

        delete_blobs(vault_root(collector.id), blob_names)
        logger.info("Collector %s deleted vault folder %s (%d folders, %d files)",
                    collector.username, folder.path, len(folder_ids), len(blob_names))
        return Response({
            "success": True,
            "message": "Vault folder and all contents deleted successfully",
            "deleted_folders": len(folder_ids),
            "deleted_files": len(blob_names),
        })
