import logging

from django.db import transaction
from django.db.models import Max
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from files.models import CustomTab
from files.serializers import CreateTabSerializer, CustomTabSerializer
from portal_backend.exceptions import ValidationFailed
from sharing import policy

logger = logging.getLogger(__name__)


class CustomTabsAPIView(APIView):
    """Categories of one role group. Append-only: no rename or delete."""

    def get(self, request, role_group):
        policy.require(request.user, policy.CATEGORY, "list", role_group=role_group)
        tabs = CustomTab.objects.filter(role_group=role_group).order_by("display_order", "tab_key")
        return Response({"tabs": CustomTabSerializer(tabs, many=True).data})

    def post(self, request, role_group):
        policy.require(request.user, policy.CATEGORY, "create", role_group=role_group)

        serializer = CreateTabSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        tab_key = serializer.validated_data["tab_key"]

        if CustomTab.objects.filter(role_group=role_group, tab_key=tab_key).exists():
            raise ValidationFailed("Category already exists")

        with transaction.atomic():
            max_order = CustomTab.objects.filter(role_group=role_group).aggregate(m=Max("display_order"))["m"]
            tab = CustomTab.objects.create(
                role_group=role_group,
                tab_name=serializer.validated_data["tab_name"],
                tab_key=tab_key,
                display_order=(max_order or 0) + 1,
            )

        logger.info("%s added category %s to %s", request.user.username, tab_key, role_group)
        return Response({"success": True, "tab": CustomTabSerializer(tab).data}, status=status.HTTP_201_CREATED)
