from django.db import transaction
from django.db.models import Max
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.permissions import IsCollector
from files.serializers import CreateTabSerializer
from portal_backend.exceptions import ValidationFailed
from sharing import policy
from vault.models import VaultCustomTab
from vault.serializers import VaultTabSerializer


class VaultTabsAPIView(APIView):
    """The requesting collector's own vault categories. Append-only."""
    permission_classes = [IsAuthenticated, IsCollector]

    def get(self, request):
        tabs = VaultCustomTab.objects.filter(collector=request.user).order_by("display_order", "tab_key")
        return Response({"tabs": VaultTabSerializer(tabs, many=True).data})

    def post(self, request):
        serializer = CreateTabSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        tab_key = serializer.validated_data["tab_key"]
        collector = request.user

        if VaultCustomTab.objects.filter(collector=collector, tab_key=tab_key).exists():
            raise ValidationFailed("Vault category already exists")

        with transaction.atomic():
            max_order = VaultCustomTab.objects.filter(collector=collector).aggregate(m=Max("display_order"))["m"]
            tab = VaultCustomTab.objects.create(
                collector=collector,
                tab_name=serializer.validated_data["tab_name"],
                tab_key=tab_key,
                display_order=(max_order or 0) + 1,
            )
        return Response({"success": True, "tab": VaultTabSerializer(tab).data}, status=status.HTTP_201_CREATED)


class CollectorVaultTabsAPIView(APIView):
    """Read-only view of one collector's vault categories."""

    def get(self, request, collector_id):
        policy.require(request.user, policy.VAULT, "list_tabs", message="Access denied", collector_id=collector_id)
        tabs = VaultCustomTab.objects.filter(collector_id=collector_id).order_by("display_order", "tab_key")
        return Response({"tabs": VaultTabSerializer(tabs, many=True).data})
