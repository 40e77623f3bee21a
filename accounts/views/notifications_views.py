# accounts/views/notifications_views.py

from django.shortcuts import get_object_or_404
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.serializers.notifications import NotificationSerializer
from notifications.models import NOTIFICATION_PAGE_SIZE, Notification


class NotificationListView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request):
        notifications = Notification.objects.filter(user=request.user).order_by("-created_at", "-id")
        unread = notifications.filter(is_read=False).count()
        serializer = NotificationSerializer(notifications[:NOTIFICATION_PAGE_SIZE], many=True)
        return Response({"notifications": serializer.data, "unreadCount": unread})

    def delete(self, request):
        deleted, _ = Notification.objects.filter(user=request.user).delete()
        return Response({"success": True, "deleted": deleted})


class DeleteNotificationView(APIView):
    permission_classes = [IsAuthenticated]

    def delete(self, request, notification_id):
        # another user's notification is reported as missing
        notification = get_object_or_404(Notification, pk=notification_id, user=request.user)
        notification.delete()
        return Response({"success": True})


class MarkNotificationReadView(APIView):
    permission_classes = [IsAuthenticated]

    def put(self, request, notification_id):
        notification = get_object_or_404(Notification, pk=notification_id, user=request.user)
        if not notification.is_read:
            notification.is_read = True
            notification.save(update_fields=["is_read"])
        return Response({"success": True})


class MarkAllNotificationsReadView(APIView):
    permission_classes = [IsAuthenticated]

    def put(self, request):
        updated = Notification.objects.filter(user=request.user, is_read=False).update(is_read=True)
        return Response({"success": True, "updated": updated})
