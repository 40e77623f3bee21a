from django.contrib.auth import get_user_model
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from files.access import get_file_for
from files.models import Comment
from files.serializers import CommentSerializer, CreateCommentSerializer
from notifications.models import TYPE_FILE_COMMENT
from notifications.utils import notify


class FileCommentsAPIView(APIView):
    """Comments need the same access as viewing the file itself."""

    def get(self, request, file_id):
        file_obj = get_file_for(request, file_id, "view")
        comments = file_obj.comments.order_by("created_at", "id")
        return Response({"comments": CommentSerializer(comments, many=True).data})

    def post(self, request, file_id):
        file_obj = get_file_for(request, file_id, "comment")
        serializer = CreateCommentSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user = request.user
        comment = Comment.objects.create(
            file=file_obj,
            content=serializer.validated_data["content"],
            author=user.username,
        )

        if file_obj.uploaded_by != user.username:
            uploader = get_user_model().objects.filter(username=file_obj.uploaded_by).first()
            if uploader is not None:
                notify(
                    [uploader],
                    TYPE_FILE_COMMENT,
                    "New Comment",
                    f'{user.username} commented on "{file_obj.original_name}"',
                    related_id=file_obj.id,
                )

        return Response({"success": True, "comment": CommentSerializer(comment).data},
                        status=status.HTTP_201_CREATED)
