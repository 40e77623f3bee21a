from django.db import models

STATUS_PENDING = "pending"
STATUS_APPROVED = "approved"
STATUS_REJECTED = "rejected"
STATUS_CHOICES = [
    (STATUS_PENDING, "Pending"),
    (STATUS_APPROVED, "Approved"),
    (STATUS_REJECTED, "Rejected"),
]

SHARE_GROUP = "group"
SHARE_ALL = "all"

DEFAULT_TABS = {
    "user1": [("All Files", "all"), ("Daily", "daily"), ("Weekly", "weekly"), ("Monthly", "monthly")],
    "user2": [("All Files", "all"), ("Forms", "forms"), ("Announcements", "announcements"), ("Leave", "leave")],
}


class CustomTab(models.Model):
    role_group = models.CharField(max_length=20)
    tab_name = models.CharField(max_length=100)
    tab_key = models.CharField(max_length=100)
    display_order = models.IntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["display_order", "tab_key"]
        constraints = [
            models.UniqueConstraint(fields=["role_group", "tab_key"], name="unique_tab_per_role_group"),
        ]

    def __str__(self):
        return f"{self.role_group}:{self.tab_key}"


class Folder(models.Model):
    name = models.CharField(max_length=255)
    path = models.CharField(max_length=1024)
    category = models.CharField(max_length=100)
    role_group = models.CharField(max_length=20)
    parent_path = models.CharField(max_length=1024, blank=True, default="")
    parent = models.ForeignKey('self', on_delete=models.CASCADE, null=True, blank=True, related_name='children')
    created_by = models.CharField(max_length=150)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["category", "path"]
        constraints = [
            models.UniqueConstraint(fields=["path", "category", "role_group"], name="unique_folder_path"),
        ]
        indexes = [
            models.Index(fields=["role_group", "category", "parent_path"], name="files_folder_scope_idx"),
        ]

    def __str__(self):
        return f"{self.role_group}/{self.category}/{self.path}"


class File(models.Model):
    filename = models.CharField(max_length=255)
    original_name = models.CharField(max_length=255)
    file_type = models.CharField(max_length=255, blank=True, default="application/octet-stream")
    file_size = models.BigIntegerField(default=0)
    category = models.CharField(max_length=100)
    role_group = models.CharField(max_length=20)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=STATUS_PENDING)
    shared_with = models.CharField(max_length=20, default=SHARE_ALL)
    uploaded_by = models.CharField(max_length=150)
    folder_path = models.CharField(max_length=1024, blank=True, default="")
    upload_date = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-upload_date", "-id"]
        indexes = [
            models.Index(fields=["role_group", "category", "folder_path"], name="files_file_scope_idx"),
            models.Index(fields=["uploaded_by"], name="files_file_uploader_idx"),
        ]

    def __str__(self):
        return self.original_name


class Comment(models.Model):
    file = models.ForeignKey(File, on_delete=models.CASCADE, related_name='comments')
    content = models.TextField()
    author = models.CharField(max_length=150)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["created_at", "id"]
