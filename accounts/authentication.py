from django.conf import settings
from rest_framework.authentication import BaseAuthentication

from accounts.utils.token_utils import resolve_user


class SessionCookieAuthentication(BaseAuthentication):
    """
    Resolve the opaque ``session`` cookie to a user.

    Fails open: a missing, unknown or expired token simply leaves the request
    unauthenticated and the view's permission classes answer with 401.
    """

    def authenticate(self, request):
        token = request.COOKIES.get(settings.PORTAL_SESSION_COOKIE)
        if not token:
            return None

        user = resolve_user(token)
        if user is None or not user.is_active:
            return None

        return (user, token)

    def authenticate_header(self, request):
        return 'Session realm="api"'
