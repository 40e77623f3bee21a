from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.permissions import IsCollector
from files.serializers import CreateCommentSerializer
from vault.models import VaultComment
from vault.serializers import VaultCommentSerializer
from vault.vault_ops.VaultFiles import get_own_vault_file


class VaultCommentsAPIView(APIView):
    permission_classes = [IsAuthenticated, IsCollector]

    def get(self, request, file_id):
        vault_file = get_own_vault_file(request, file_id)
        comments = vault_file.comments.order_by("created_at", "id")
        return Response({"comments": VaultCommentSerializer(comments, many=True).data})

    def post(self, request, file_id):
        vault_file = get_own_vault_file(request, file_id)
        serializer = CreateCommentSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        comment = VaultComment.objects.create(
            vault_file=vault_file,
            content=serializer.validated_data["content"],
            author=request.user.username,
        )
        return Response({
            "id": comment.id,
            "message": "Vault comment added successfully",
            "comment": VaultCommentSerializer(comment).data,
        }, status=status.HTTP_201_CREATED)
