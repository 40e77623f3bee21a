import logging

from django.db import transaction
from django.shortcuts import get_object_or_404
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.models import CustomUser, ROLE_COLLECTOR
from accounts.permissions import IsDeveloper
from accounts.serializers.admin import CreateUserSerializer, UpdateUserSerializer, UserListSerializer
from portal_backend.exceptions import ValidationFailed
from vault.defaults import ensure_default_vault_tabs

logger = logging.getLogger(__name__)


class UserListCreateView(APIView):
    permission_classes = [IsAuthenticated, IsDeveloper]

    def get(self, request):
        users = CustomUser.objects.order_by("-created_at", "-id")
        return Response({"users": UserListSerializer(users, many=True).data})

    def post(self, request):
        serializer = CreateUserSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        with transaction.atomic():
            user = serializer.save()
            if user.role == ROLE_COLLECTOR:
                ensure_default_vault_tabs(user)

        logger.info("%s created user %s (%s)", request.user.username, user.username, user.role)
        return Response({"success": True, "user": UserListSerializer(user).data}, status=status.HTTP_201_CREATED)


class UserDetailView(APIView):
    permission_classes = [IsAuthenticated, IsDeveloper]

    def put(self, request, user_id):
        target = get_object_or_404(CustomUser, pk=user_id)
        serializer = UpdateUserSerializer(target, data=request.data)
        serializer.is_valid(raise_exception=True)

        with transaction.atomic():
            user = serializer.save()
            if user.role == ROLE_COLLECTOR:
                ensure_default_vault_tabs(user)

        logger.info("%s updated user %s (%s)", request.user.username, user.username, user.role)
        return Response({"success": True, "user": UserListSerializer(user).data})

    def delete(self, request, user_id):
        if request.user.pk == user_id:
            raise ValidationFailed("Cannot delete your own account")

        target = get_object_or_404(CustomUser, pk=user_id)
        username = target.username
        # sessions, profile, notifications and private messages cascade
        with transaction.atomic():
            target.delete()

        logger.info("%s deleted user %s", request.user.username, username)
        return Response({"success": True})
