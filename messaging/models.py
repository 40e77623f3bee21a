from django.conf import settings
from django.db import models

MAX_MESSAGE_LENGTH = 1000
CHAT_PAGE_SIZE = 100

VISIBILITY_GROUP = "group"
VISIBILITY_EVERYONE = "everyone"
VISIBILITY_CHOICES = [
    (VISIBILITY_GROUP, "Own group"),
    (VISIBILITY_EVERYONE, "Everyone"),
]


class ChatMessage(models.Model):
    content = models.TextField()
    author = models.CharField(max_length=150)
    # group the message was posted to; developers and collectors may post as another group
    author_role = models.CharField(max_length=20)
    visibility = models.CharField(max_length=20, choices=VISIBILITY_CHOICES, default=VISIBILITY_GROUP)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["created_at", "id"]
        indexes = [
            models.Index(fields=["author_role", "created_at"], name="chat_role_created_idx"),
        ]


class PrivateMessage(models.Model):
    sender = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="sent_messages")
    receiver = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="received_messages")
    content = models.TextField()
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["created_at", "id"]
        indexes = [
            models.Index(fields=["sender", "receiver"], name="pm_sender_receiver_idx"),
        ]


class MessageReadStatus(models.Model):
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="message_reads")
    message = models.ForeignKey(PrivateMessage, on_delete=models.CASCADE, related_name="read_statuses")
    is_read = models.BooleanField(default=False)
    read_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        constraints = [
            models.UniqueConstraint(fields=["user", "message"], name="unique_read_status"),
        ]
