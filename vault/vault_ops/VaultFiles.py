import logging

from django.db import transaction
from django.db.models import Count
from django.shortcuts import get_object_or_404
from rest_framework import status
from rest_framework.parsers import FormParser, MultiPartParser
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.permissions import IsCollector
from files.folders import normalize_path
from files.storage import blob_response, delete_blob, save_upload, vault_root
from portal_backend.exceptions import ValidationFailed
from vault.models import VaultCustomTab, VaultFile
from vault.serializers import VaultFileSerializer, VaultUploadSerializer

logger = logging.getLogger(__name__)


def get_own_vault_file(request, file_id):
    # another collector's file is indistinguishable from a missing one
    return get_object_or_404(VaultFile.objects.select_related("collector"), pk=file_id, collector=request.user)


class VaultFileListAPIView(APIView):
    permission_classes = [IsAuthenticated, IsCollector]

    def get(self, request):
        files = (
            VaultFile.objects
            .filter(collector=request.user, folder_path=normalize_path(request.query_params.get("folderPath")))
            .select_related("collector")
            .annotate(comments_count=Count("comments"))
            .order_by("-upload_date", "-id")
        )
        category = request.query_params.get("category")
        if category and category != "all":
            files = files.filter(category=category)
        return Response({"files": VaultFileSerializer(files, many=True).data})


class VaultUploadAPIView(APIView):
    parser_classes = [MultiPartParser, FormParser]
    permission_classes = [IsAuthenticated, IsCollector]

    def post(self, request):
        serializer = VaultUploadSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        collector = request.user
        uploaded = data["file"]

        if not VaultCustomTab.objects.filter(collector=collector, tab_key=data["category"]).exists():
            raise ValidationFailed("Invalid category for vault")

        root = vault_root(collector.id)
        filename = save_upload(uploaded, root)
        try:
            with transaction.atomic():
                vault_file = VaultFile.objects.create(
                    filename=filename,
                    original_name=uploaded.name,
                    file_type=uploaded.content_type or "application/octet-stream",
                    file_size=uploaded.size,
                    category=data["category"],
                    collector=collector,
                    folder_path=data["folder_path"],
                )
        except Exception:
            delete_blob(root, filename)
            raise

        logger.info("Collector %s stored %s in the vault", collector.username, uploaded.name)
        return Response({
            "success": True,
            "fileId": vault_file.id,
            "file": VaultFileSerializer(vault_file).data,
        }, status=status.HTTP_201_CREATED)


class VaultFileDetailAPIView(APIView):
    permission_classes = [IsAuthenticated, IsCollector]

    def get(self, request, file_id):
        vault_file = get_own_vault_file(request, file_id)
        return Response({"file": VaultFileSerializer(vault_file).data})

    def delete(self, request, file_id):
        vault_file = get_own_vault_file(request, file_id)
        filename = vault_file.filename

        with transaction.atomic():
            vault_file.delete()

        delete_blob(vault_root(request.user.id), filename)
        logger.info("Collector %s deleted vault file %s", request.user.username, file_id)
        return Response({"success": True, "message": "Vault file deleted successfully"})


class VaultDownloadAPIView(APIView):
    permission_classes = [IsAuthenticated, IsCollector]

    def get(self, request, file_id):
        vault_file = get_own_vault_file(request, file_id)
        return blob_response(vault_root(request.user.id), vault_file.filename, content_type=vault_file.file_type,
                             download_name=vault_file.original_name, as_attachment=True)
