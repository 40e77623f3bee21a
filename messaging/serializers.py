from rest_framework import serializers

from accounts.models import CustomUser, ROLE_GROUPS
from messaging.models import (
    ChatMessage,
    MAX_MESSAGE_LENGTH,
    PrivateMessage,
    VISIBILITY_CHOICES,
    VISIBILITY_GROUP,
)

CONTENT_ERRORS = {
    "required": "Message content is required",
    "blank": "Message content is required",
    "null": "Message content is required",
    "max_length": f"Message too long (max {MAX_MESSAGE_LENGTH} characters)",
}


class MessageContentField(serializers.CharField):
    """Trimmed, non-empty text of at most ``MAX_MESSAGE_LENGTH`` characters."""

    def __init__(self, **kwargs):
        kwargs.setdefault("max_length", MAX_MESSAGE_LENGTH)
        kwargs.setdefault("error_messages", CONTENT_ERRORS)
        super().__init__(**kwargs)


class ChatMessageSerializer(serializers.ModelSerializer):
    class Meta:
        model = ChatMessage
        fields = ("id", "content", "author", "author_role", "visibility", "created_at")


class PostChatMessageSerializer(serializers.Serializer):
    content = MessageContentField()
    visibility = serializers.ChoiceField(choices=VISIBILITY_CHOICES, default=VISIBILITY_GROUP,
                                         error_messages={"invalid_choice": "Invalid visibility"})
    target_role = serializers.ChoiceField(choices=ROLE_GROUPS, required=False, allow_blank=True, allow_null=True,
                                          error_messages={"invalid_choice": "Invalid target role"})


class ContactSerializer(serializers.ModelSerializer):
    class Meta:
        model = CustomUser
        fields = ("id", "username", "role", "profile_picture")


class PrivateMessageSerializer(serializers.ModelSerializer):
    sender_id = serializers.IntegerField(read_only=True)
    receiver_id = serializers.IntegerField(read_only=True)
    sender_username = serializers.CharField(source="sender.username", read_only=True)
    sender_role = serializers.CharField(source="sender.role", read_only=True)

    class Meta:
        model = PrivateMessage
        fields = ("id", "sender_id", "receiver_id", "sender_username", "sender_role", "content", "created_at")


class SendPrivateMessageSerializer(serializers.Serializer):
    receiver_id = serializers.IntegerField(error_messages={
        "required": "Receiver is required",
        "invalid": "Receiver is required",
    })
    content = MessageContentField()


class BroadcastSerializer(serializers.Serializer):
    content = MessageContentField()
