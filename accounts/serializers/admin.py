from rest_framework import serializers
from accounts.models import CustomUser, ASSIGNABLE_ROLES


class UserListSerializer(serializers.ModelSerializer):
    class Meta:
        model = CustomUser
        fields = ["id", "username", "role", "created_at", "profile_picture"]


class CreateUserSerializer(serializers.Serializer):
    username = serializers.CharField(max_length=150, error_messages={"required": "All fields are required"})
    password = serializers.CharField(write_only=True, trim_whitespace=False,
                                     error_messages={"required": "All fields are required"})
    role = serializers.ChoiceField(choices=ASSIGNABLE_ROLES, error_messages={
        "required": "All fields are required",
        "invalid_choice": "Invalid role",
    })

    def validate_username(self, value):
        if CustomUser.objects.filter(username=value).exists():
            raise serializers.ValidationError("Username already exists")
        return value

    def create(self, validated_data):
        return CustomUser.objects.create_user(
            validated_data["username"],
            validated_data["password"],
            role=validated_data["role"],
        )


class UpdateUserSerializer(serializers.Serializer):
    username = serializers.CharField(max_length=150, error_messages={"required": "Username and role are required"})
    password = serializers.CharField(write_only=True, required=False, allow_blank=True, trim_whitespace=False)
    role = serializers.ChoiceField(choices=ASSIGNABLE_ROLES, error_messages={
        "required": "Username and role are required",
        "invalid_choice": "Invalid role",
    })

    def validate_username(self, value):
        if CustomUser.objects.filter(username=value).exclude(pk=self.instance.pk).exists():
            raise serializers.ValidationError("Username already exists")
        return value

    def update(self, instance, validated_data):
        instance.username = validated_data["username"]
        instance.role = validated_data["role"]
        if validated_data.get("password"):
            instance.set_password(validated_data["password"])
        instance.save()
        return instance
