from django.conf import settings
from django.db import models

from files.models import STATUS_APPROVED, STATUS_CHOICES

# files in the vault are never shared; listings report this value
SHARED_WITH_VAULT = "vault"


class VaultCustomTab(models.Model):
    collector = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="vault_tabs")
    tab_name = models.CharField(max_length=100)
    tab_key = models.CharField(max_length=100)
    display_order = models.IntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["display_order", "tab_key"]
        constraints = [
            models.UniqueConstraint(fields=["collector", "tab_key"], name="unique_vault_tab_per_collector"),
        ]


class VaultFolder(models.Model):
    name = models.CharField(max_length=255)
    path = models.CharField(max_length=1024)
    category = models.CharField(max_length=100)
    collector = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="vault_folders")
    parent_path = models.CharField(max_length=1024, blank=True, default="")
    parent = models.ForeignKey('self', on_delete=models.CASCADE, null=True, blank=True, related_name='children')
    created_by = models.CharField(max_length=150)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["category", "path"]
        constraints = [
            models.UniqueConstraint(fields=["path", "category", "collector"], name="unique_vault_folder_path"),
        ]


class VaultFile(models.Model):
    filename = models.CharField(max_length=255)
    original_name = models.CharField(max_length=255)
    file_type = models.CharField(max_length=255, blank=True, default="application/octet-stream")
    file_size = models.BigIntegerField(default=0)
    category = models.CharField(max_length=100)
    collector = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="vault_files")
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=STATUS_APPROVED)
    folder_path = models.CharField(max_length=1024, blank=True, default="")
    upload_date = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-upload_date", "-id"]
        indexes = [
            models.Index(fields=["collector", "category", "folder_path"], name="vault_file_scope_idx"),
        ]


class VaultComment(models.Model):
    vault_file = models.ForeignKey(VaultFile, on_delete=models.CASCADE, related_name="comments")
    content = models.TextField()
    author = models.CharField(max_length=150)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["created_at", "id"]
