import logging

from django.conf import settings
from django.utils.crypto import constant_time_compare
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.permissions import CanUnlockVault
from portal_backend.exceptions import ValidationFailed
from vault.serializers import VaultAccessSerializer

logger = logging.getLogger(__name__)


class VaultAccessAPIView(APIView):
    """Check the vault password configured for the caller's role."""
    permission_classes = [IsAuthenticated, CanUnlockVault]

    def post(self, request):
        serializer = VaultAccessSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user = request.user
        expected = settings.VAULT_PASSWORDS.get(user.role)
        if not expected or not constant_time_compare(serializer.validated_data["password"], expected):
            logger.warning("Rejected vault password for %s", user.username)
            raise ValidationFailed("Invalid vault password")

        return Response({"success": True, "message": "Vault access granted", "role": user.role})
