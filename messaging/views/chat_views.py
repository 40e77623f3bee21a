# messaging/views/chat_views.py

from django.db.models import Q
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from messaging.models import CHAT_PAGE_SIZE, ChatMessage, VISIBILITY_EVERYONE
from messaging.serializers import ChatMessageSerializer, PostChatMessageSerializer
from sharing import policy


class ChatMessagesView(APIView):
    """
    Team chat, partitioned by role group.

    Ordinary users read their own group plus messages posted to everyone.
    Developers and collectors read everything, or one group when ``view`` is
    given.
    """

    def get(self, request):
        user = request.user
        policy.require(user, policy.CHAT, "read")

        messages = ChatMessage.objects.all()
        view_as = request.query_params.get("view") or None
        if not policy.is_privileged(user) or view_as:
            group = policy.effective_role(user, view_as)
            messages = messages.filter(Q(author_role=group) | Q(visibility=VISIBILITY_EVERYONE))

        latest = list(messages.order_by("-created_at", "-id")[:CHAT_PAGE_SIZE])
        latest.reverse()
        return Response({"messages": ChatMessageSerializer(latest, many=True).data})

    def post(self, request):
        user = request.user
        policy.require(user, policy.CHAT, "post")

        serializer = PostChatMessageSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        message = ChatMessage.objects.create(
            content=data["content"],
            author=user.username,
            author_role=policy.effective_role(user, data.get("target_role")),
            visibility=data["visibility"],
        )
        return Response({"success": True, "message": ChatMessageSerializer(message).data},
                        status=status.HTTP_201_CREATED)
