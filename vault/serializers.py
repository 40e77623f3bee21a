from rest_framework import serializers

from files.folders import normalize_path
from vault.models import SHARED_WITH_VAULT, VaultComment, VaultCustomTab, VaultFile, VaultFolder


class VaultTabSerializer(serializers.ModelSerializer):
    collector_id = serializers.IntegerField(read_only=True)

    class Meta:
        model = VaultCustomTab
        fields = ("id", "collector_id", "tab_name", "tab_key", "display_order", "created_at")


class VaultFolderSerializer(serializers.ModelSerializer):
    collector_id = serializers.IntegerField(read_only=True)
    parent_id = serializers.IntegerField(read_only=True)

    class Meta:
        model = VaultFolder
        fields = ("id", "name", "path", "category", "collector_id", "parent_path", "parent_id",
                  "created_by", "created_at")


class VaultFileSerializer(serializers.ModelSerializer):
    """Vault files only ever belong to the requesting collector."""
    collector_id = serializers.IntegerField(read_only=True)
    comments_count = serializers.IntegerField(read_only=True, default=0)
    uploaded_by = serializers.CharField(source="collector.username", read_only=True)
    uploaded_by_role = serializers.CharField(source="collector.role", read_only=True)
    shared_with = serializers.SerializerMethodField()

    class Meta:
        model = VaultFile
        fields = ("id", "filename", "original_name", "file_type", "file_size", "category", "collector_id",
                  "status", "folder_path", "upload_date", "comments_count", "uploaded_by", "uploaded_by_role",
                  "shared_with")

    def get_shared_with(self, obj):
        return SHARED_WITH_VAULT


class VaultUploadSerializer(serializers.Serializer):
    file = serializers.FileField(error_messages={"required": "File and category are required"})
    category = serializers.CharField(max_length=100, error_messages={
        "required": "File and category are required",
        "blank": "File and category are required",
    })
    folder_path = serializers.CharField(max_length=1024, required=False, allow_blank=True, default="")

    def validate_folder_path(self, value):
        return normalize_path(value)


class VaultCommentSerializer(serializers.ModelSerializer):
    vault_file_id = serializers.IntegerField(read_only=True)

    class Meta:
        model = VaultComment
        fields = ("id", "vault_file_id", "content", "author", "created_at")


class VaultAccessSerializer(serializers.Serializer):
    password = serializers.CharField(trim_whitespace=False, error_messages={
        "required": "Vault password is required",
        "blank": "Vault password is required",
    })
