# files/serializers.py
from rest_framework import serializers

from accounts.models import ROLE_GROUPS
from files.folders import join_path, normalize_path
from files.models import (
    Comment,
    CustomTab,
    File,
    Folder,
    SHARE_ALL,
    SHARE_GROUP,
    STATUS_CHOICES,
)


class CustomTabSerializer(serializers.ModelSerializer):
    class Meta:
        model = CustomTab
        fields = ("id", "role_group", "tab_name", "tab_key", "display_order", "created_at")


class CreateTabSerializer(serializers.Serializer):
    tab_name = serializers.CharField(max_length=100, error_messages={
        "required": "Tab name and key are required",
        "blank": "Tab name and key are required",
    })
    tab_key = serializers.CharField(max_length=100, error_messages={
        "required": "Tab name and key are required",
        "blank": "Tab name and key are required",
    })


class FolderSerializer(serializers.ModelSerializer):
    parent_id = serializers.IntegerField(read_only=True)

    class Meta:
        model = Folder
        fields = ("id", "name", "path", "category", "role_group", "parent_path", "parent_id",
                  "created_by", "created_at")


class FolderInputSerializer(serializers.Serializer):
    """
    Name, category and placement of a new folder.

    ``path`` is derived from ``parent_path`` and ``name``; a client that sends
    its own ``path`` must send exactly that value.
    """
    name = serializers.CharField(max_length=255, error_messages={"required": "Missing required fields"})
    path = serializers.CharField(max_length=1024, required=False, allow_blank=True)
    category = serializers.CharField(max_length=100, error_messages={"required": "Missing required fields"})
    parent_path = serializers.CharField(max_length=1024, required=False, allow_blank=True, allow_null=True)

    def validate_name(self, value):
        if "/" in value:
            raise serializers.ValidationError("Folder name cannot contain '/'")
        return value

    def validate(self, attrs):
        parent_path = normalize_path(attrs.get("parent_path"))
        expected = join_path(parent_path, attrs["name"])
        supplied = attrs.get("path")
        if supplied and normalize_path(supplied) != expected:
            raise serializers.ValidationError({"path": f"Path must be '{expected}'"})
        attrs["parent_path"] = parent_path
        attrs["path"] = expected
        return attrs


class CreateFolderSerializer(FolderInputSerializer):
    role_group = serializers.CharField(max_length=20, error_messages={"required": "Missing required fields"})


class FileSerializer(serializers.ModelSerializer):
    comments_count = serializers.IntegerField(read_only=True, default=0)
    uploaded_by_role = serializers.SerializerMethodField()

    class Meta:
        model = File
        fields = ("id", "filename", "original_name", "file_type", "file_size", "category", "role_group",
                  "status", "shared_with", "uploaded_by", "uploaded_by_role", "folder_path", "upload_date",
                  "comments_count")

    def get_uploaded_by_role(self, obj):
        return self.context.get("roles", {}).get(obj.uploaded_by)


class UploadFileSerializer(serializers.Serializer):
    file = serializers.FileField(error_messages={"required": "File and category are required"})
    category = serializers.CharField(max_length=100, error_messages={
        "required": "File and category are required",
        "blank": "File and category are required",
    })
    shared_with = serializers.ChoiceField(choices=(SHARE_GROUP, SHARE_ALL), default=SHARE_ALL)
    target_role = serializers.ChoiceField(choices=ROLE_GROUPS, required=False, allow_blank=True,
                                          error_messages={"invalid_choice": "Invalid target role"})
    folder_path = serializers.CharField(max_length=1024, required=False, allow_blank=True, default="")

    def validate_folder_path(self, value):
        return normalize_path(value)


class FileStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=STATUS_CHOICES, error_messages={
        "required": "Invalid status",
        "invalid_choice": "Invalid status",
    })


class CommentSerializer(serializers.ModelSerializer):
    file_id = serializers.IntegerField(read_only=True)

    class Meta:
        model = Comment
        fields = ("id", "file_id", "content", "author", "created_at")


class CreateCommentSerializer(serializers.Serializer):
    content = serializers.CharField(error_messages={
        "required": "Comment content is required",
        "blank": "Comment content is required",
    })
