import logging

from django.conf import settings
from django.utils.decorators import method_decorator
from rest_framework import status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.serializers.auth import LoginSerializer, SessionUserSerializer
from accounts.utils.ratelimit import custom_ratelimit, ip_key
from accounts.utils.token_utils import create_session, revoke_session

logger = logging.getLogger(__name__)


def login_rate():
    return settings.LOGIN_RATE_LIMIT


@method_decorator(custom_ratelimit(key_func=ip_key, rate=login_rate, block=True), name='dispatch')
class LoginView(APIView):
    permission_classes = [AllowAny]

    def post(self, request):
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = serializer.user

        session, token = create_session(user)
        logger.info("User %s logged in (session %s)", user.username, session.id)

        response = Response({
            "success": True,
            "user": SessionUserSerializer(user).data,
        }, status=status.HTTP_200_OK)
        response.set_cookie(
            settings.PORTAL_SESSION_COOKIE,
            token,
            max_age=settings.PORTAL_SESSION_TTL_DAYS * 24 * 60 * 60,
            httponly=True,
            secure=settings.PORTAL_SESSION_COOKIE_SECURE,
            samesite="Lax",
        )
        return response


class LogoutView(APIView):
    permission_classes = [AllowAny]

    def post(self, request):
        token = request.COOKIES.get(settings.PORTAL_SESSION_COOKIE)
        if token and revoke_session(token):
            logger.info("Session closed for %s", getattr(request.user, "username", None) or "unknown user")

        response = Response({"success": True})
        response.delete_cookie(settings.PORTAL_SESSION_COOKIE, samesite="Lax")
        return response


class MeView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request):
        return Response({"user": SessionUserSerializer(request.user).data})
