import logging
from datetime import timedelta
from uuid import UUID

from django.conf import settings
from django.utils.timezone import now

from accounts.models import UserSessions
from accounts.utils.jwe_utils import TokenDecodeError, open_payload, seal_payload

logger = logging.getLogger(__name__)

SESSION_TOKEN_TYPE = "session"


def create_session(user):
    """Store a new session row and return it with its opaque cookie value."""
    expires_at = now() + timedelta(days=settings.PORTAL_SESSION_TTL_DAYS)
    session = UserSessions.objects.create(user=user, expires_at=expires_at)
    token = seal_payload({"sid": str(session.id), "type": SESSION_TOKEN_TYPE})
    return session, token


def session_id_from_token(token):
    if not token:
        return None
    try:
        payload = open_payload(token)
    except TokenDecodeError:
        return None
    if payload.get("type") != SESSION_TOKEN_TYPE:
        return None
    try:
        return UUID(str(payload.get("sid")))
    except ValueError:
        return None


def resolve_user(token):
    """
    Map a session cookie value to its user.

    Returns None for a missing, undecodable, unknown or expired token. Expired
    rows are removed when they are found; tokens are never renewed.
    """
    session_id = session_id_from_token(token)
    if session_id is None:
        return None

    session = UserSessions.objects.select_related("user").filter(id=session_id).first()
    if session is None:
        return None

    if session.is_expired():
        logger.info("Session %s for %s expired", session.id, session.user.username)
        session.delete()
        return None

    return session.user


def revoke_session(token):
    session_id = session_id_from_token(token)
    if session_id is None:
        return 0
    deleted, _ = UserSessions.objects.filter(id=session_id).delete()
    return deleted
