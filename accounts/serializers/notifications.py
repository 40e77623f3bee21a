# accounts/serializers/notifications.py

from rest_framework import serializers
from notifications.models import Notification


class NotificationSerializer(serializers.ModelSerializer):
    class Meta:
        model = Notification
        fields = [
            "id", "user_id", "type", "title", "message",
            "related_id", "is_read", "created_at"
        ]
