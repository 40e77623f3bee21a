from django.conf import settings
from django.db import models

TYPE_FILE_UPLOAD = "file_upload"
TYPE_FILE_STATUS = "file_status"
TYPE_FILE_COMMENT = "file_comment"
TYPE_PRIVATE_MESSAGE = "private_message"

NOTIFICATION_PAGE_SIZE = 50


class Notification(models.Model):
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="notifications")
    type = models.CharField(max_length=50)
    title = models.CharField(max_length=255)
    message = models.TextField()
    # id of the file / message the notification is about, depending on type
    related_id = models.BigIntegerField(null=True, blank=True)
    is_read = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at", "-id"]
        indexes = [
            models.Index(fields=["user", "is_read"], name="notif_user_read_idx"),
        ]

    def __str__(self):
        return f"{self.type} for {self.user_id}: {self.title}"
