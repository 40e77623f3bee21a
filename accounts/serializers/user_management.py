from rest_framework import serializers
from accounts.models import UserProfile


class UserProfileSerializer(serializers.ModelSerializer):
    full_name = serializers.CharField(max_length=255, required=False, allow_blank=True, default="")
    email = serializers.EmailField(required=False, allow_blank=True, default="")

    class Meta:
        model = UserProfile
        fields = ["full_name", "email"]


class ChangePasswordSerializer(serializers.Serializer):
    currentPassword = serializers.CharField(write_only=True, trim_whitespace=False,
                                            error_messages={"required": "Current and new passwords are required"})
    newPassword = serializers.CharField(write_only=True, trim_whitespace=False,
                                        error_messages={"required": "Current and new passwords are required"})

    def validate_currentPassword(self, value):
        user = self.context["request"].user
        if not user.check_password(value):
            raise serializers.ValidationError("Current password is incorrect")
        return value

    def save(self, **kwargs):
        user = self.context["request"].user
        user.set_password(self.validated_data["newPassword"])
        user.save(update_fields=["password"])
        return user


class ProfilePictureSerializer(serializers.Serializer):
    profilePicture = serializers.FileField(error_messages={"required": "Profile picture is required"})

    def validate_profilePicture(self, value):
        content_type = getattr(value, "content_type", "") or ""
        if not content_type.startswith("image/"):
            raise serializers.ValidationError("File must be an image")
        return value
