from rest_framework.permissions import BasePermission

from sharing import policy


def policy_permission(kind, action, message="Permission denied"):
    """
    Build a DRF permission class that asks the central policy whether the
    request user may perform ``action`` on ``kind`` (no resource, no context).
    """

    class PolicyPermission(BasePermission):
        def has_permission(self, request, view):
            return policy.is_allowed(request.user, kind, action)

    PolicyPermission.message = message
    PolicyPermission.__name__ = f"Can_{kind}_{action}"
    return PolicyPermission


IsDeveloper = policy_permission(policy.USER_ADMIN, "manage", "Permission denied - Developers only")
IsCollector = policy_permission(policy.VAULT, "use", "Access denied - Collectors only")
CanUploadFiles = policy_permission(policy.FILE, "create", "Permission denied - Invalid role")
CanSetFileStatus = policy_permission(policy.FILE, "set_status")
CanUnlockVault = policy_permission(policy.VAULT, "unlock", "Access denied")
CanListCollectors = policy_permission(policy.VAULT, "list_collectors", "Access denied")
