"""
Access-control rules for every resource kind.

All role and ownership decisions go through ``is_allowed`` (or ``require``,
which raises ``PermissionDenied``). Each kind has one rule function taking
``(actor, action, resource, ctx)``; resources are only read through plain
attributes (``uploaded_by``, ``shared_with``, ``created_by``) so the rules can
be evaluated against model instances and lightweight stand-ins alike.
"""
from accounts.models import (
    ROLE_ADMIN,
    ROLE_COLLECTOR,
    ROLE_DEVELOPER,
    ROLE_USER1,
    ROLE_USER2,
    PRIVILEGED_ROLES,
)
from portal_backend.exceptions import PermissionDenied

SHARED_WITH_ALL = "all"

FILE = "file"
FOLDER = "folder"
CATEGORY = "category"
CHAT = "chat"
VAULT = "vault"
USER_ADMIN = "user_admin"

FILE_UPLOAD_ROLES = (ROLE_USER1, ROLE_USER2, ROLE_DEVELOPER, ROLE_COLLECTOR)
FOLDER_CREATE_ROLES = (ROLE_DEVELOPER, ROLE_USER1, ROLE_USER2)
VAULT_READ_ROLES = (ROLE_DEVELOPER, ROLE_ADMIN)
VAULT_UNLOCK_ROLES = (ROLE_COLLECTOR, ROLE_DEVELOPER, ROLE_ADMIN)


def is_privileged(actor):
    return getattr(actor, "role", None) in PRIVILEGED_ROLES


def effective_role(actor, requested=None):
    """
    Role group an actor reads and writes as.

    Developers and collectors may act "as" another group; everybody else is
    pinned to their own role and ``requested`` is ignored.
    """
    if is_privileged(actor) and requested:
        return requested
    return actor.role


def can_view_file(actor, file, view_as=None):
    if file.uploaded_by == actor.username:
        return True
    if is_privileged(actor) and not view_as:
        return True
    role = effective_role(actor, view_as)
    return file.shared_with == SHARED_WITH_ALL or file.shared_with == role


def _in_own_group(actor, role_group):
    return is_privileged(actor) or role_group == actor.role


def file_rule(actor, action, resource, ctx):
    if action == "create":
        return actor.role in FILE_UPLOAD_ROLES
    if action in ("view", "comment"):
        return can_view_file(actor, resource, ctx.get("view_as"))
    if action == "delete":
        return resource.uploaded_by == actor.username or is_privileged(actor)
    if action == "set_status":
        return is_privileged(actor)
    return False


def folder_rule(actor, action, resource, ctx):
    if action == "create":
        if actor.role not in FOLDER_CREATE_ROLES:
            return False
        return _in_own_group(actor, ctx.get("role_group"))
    if action == "list":
        return _in_own_group(actor, ctx.get("role_group"))
    if action == "delete":
        return resource.created_by == actor.username or is_privileged(actor)
    return False


def category_rule(actor, action, resource, ctx):
    if action in ("list", "create"):
        return _in_own_group(actor, ctx.get("role_group"))
    return False


def chat_rule(actor, action, resource, ctx):
    return action in ("read", "post")


def vault_rule(actor, action, resource, ctx):
    if action == "use":
        return actor.role == ROLE_COLLECTOR
    if action == "list_tabs":
        if actor.role == ROLE_COLLECTOR:
            return actor.id == ctx.get("collector_id")
        return actor.role in VAULT_READ_ROLES
    if action == "list_collectors":
        return actor.role in VAULT_READ_ROLES
    if action == "unlock":
        return actor.role in VAULT_UNLOCK_ROLES
    return False


def user_admin_rule(actor, action, resource, ctx):
    return action == "manage" and actor.role == ROLE_DEVELOPER


RULES = {
    FILE: file_rule,
    FOLDER: folder_rule,
    CATEGORY: category_rule,
    CHAT: chat_rule,
    VAULT: vault_rule,
    USER_ADMIN: user_admin_rule,
}


def is_allowed(actor, kind, action, resource=None, **ctx):
    if actor is None or not getattr(actor, "is_authenticated", False):
        return False
    try:
        rule = RULES[kind]
    except KeyError:
        raise ValueError(f"Unknown resource kind: {kind}")
    return bool(rule(actor, action, resource, ctx))


def require(actor, kind, action, resource=None, message=None, **ctx):
    if not is_allowed(actor, kind, action, resource, **ctx):
        raise PermissionDenied(message)
