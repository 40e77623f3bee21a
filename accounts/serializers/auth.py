import logging

from rest_framework import serializers
from django.contrib.auth import get_user_model
from django.contrib.auth.hashers import check_password

from portal_backend.exceptions import Unauthenticated

logger = logging.getLogger(__name__)


class LoginSerializer(serializers.Serializer):
    username = serializers.CharField(error_messages={
        "required": "Username and password are required",
        "blank": "Username and password are required",
    })
    password = serializers.CharField(write_only=True, trim_whitespace=False, error_messages={
        "required": "Username and password are required",
        "blank": "Username and password are required",
    })

    def validate(self, data):
        User = get_user_model()
        user = User.objects.filter(username=data['username']).first()

        if user is None or not user.password or not check_password(data['password'], user.password):
            logger.warning("Failed login for %s", data['username'])
            raise Unauthenticated("Invalid credentials")

        if not user.is_active:
            logger.warning("Login attempt for inactive account %s", user.username)
            raise Unauthenticated("Account inactive. Contact your admin.")

        self.user = user
        return data


class SessionUserSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    username = serializers.CharField()
    role = serializers.CharField()
    profile_picture = serializers.CharField(allow_null=True)
