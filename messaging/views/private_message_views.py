# messaging/views/private_message_views.py
import logging

from django.contrib.auth import get_user_model
from django.db import transaction
from django.db.models import Count, Q
from django.utils import timezone
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from messaging.models import MessageReadStatus, PrivateMessage
from messaging.serializers import (
    BroadcastSerializer,
    ContactSerializer,
    PrivateMessageSerializer,
    SendPrivateMessageSerializer,
)
from notifications.models import Notification, TYPE_PRIVATE_MESSAGE
from notifications.utils import deliver, notify
from portal_backend.exceptions import NotFound, ValidationFailed

logger = logging.getLogger(__name__)


class ContactListView(APIView):
    def get(self, request):
        users = get_user_model().objects.exclude(pk=request.user.pk).order_by("username")
        return Response({"users": ContactSerializer(users, many=True).data})


class SendPrivateMessageView(APIView):
    def post(self, request):
        serializer = SendPrivateMessageSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        receiver = get_user_model().objects.filter(pk=serializer.validated_data["receiver_id"]).first()
        if receiver is None:
            raise NotFound("Receiver not found")

        user = request.user
        message = PrivateMessage.objects.create(
            sender=user,
            receiver=receiver,
            content=serializer.validated_data["content"],
        )
        notify(
            [receiver],
            TYPE_PRIVATE_MESSAGE,
            "New Private Message",
            f"{user.username} sent you a message",
            related_id=message.id,
        )
        return Response({"success": True, "message": PrivateMessageSerializer(message).data},
                        status=status.HTTP_201_CREATED)


class ConversationView(APIView):
    def get(self, request, user_id):
        me = request.user.pk
        messages = (
            PrivateMessage.objects
            .filter(Q(sender_id=me, receiver_id=user_id) | Q(sender_id=user_id, receiver_id=me))
            .select_related("sender")
            .order_by("created_at", "id")
        )
        return Response({"messages": PrivateMessageSerializer(messages, many=True).data})


class MarkConversationReadView(APIView):
    def put(self, request, user_id):
        user = request.user
        read_at = timezone.now()
        message_ids = list(
            PrivateMessage.objects.filter(sender_id=user_id, receiver=user).values_list("id", flat=True)
        )
        with transaction.atomic():
            for message_id in message_ids:
                MessageReadStatus.objects.update_or_create(
                    user=user,
                    message_id=message_id,
                    defaults={"is_read": True, "read_at": read_at},
                )
        return Response({"success": True, "marked": len(message_ids)})


class UnreadCountsView(APIView):
    def get(self, request):
        user = request.user
        read_ids = MessageReadStatus.objects.filter(user=user, is_read=True).values("message_id")
        rows = (
            PrivateMessage.objects
            .filter(receiver=user)
            .exclude(id__in=read_ids)
            .values("sender_id")
            .annotate(count=Count("id"))
        )
        return Response({"unreadCounts": {str(row["sender_id"]): row["count"] for row in rows}})


class BroadcastView(APIView):
    def post(self, request):
        serializer = BroadcastSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        content = serializer.validated_data["content"]

        user = request.user
        recipients = list(get_user_model().objects.exclude(pk=user.pk))
        if not recipients:
            raise ValidationFailed("No users to send message to")

        with transaction.atomic():
            messages = [
                PrivateMessage.objects.create(sender=user, receiver=recipient, content=content)
                for recipient in recipients
            ]

        deliver(
            Notification(
                user=message.receiver,
                type=TYPE_PRIVATE_MESSAGE,
                title="Broadcast Message",
                message=f"{user.username} sent a message to everyone",
                related_id=message.id,
            )
            for message in messages
        )
        logger.info("%s broadcast a message to %d users", user.username, len(messages))
        return Response({
            "success": True,
            "message": f"Message sent to {len(messages)} users",
            "count": len(messages),
        })
