import logging

from rest_framework import status
from rest_framework.parsers import FormParser, MultiPartParser
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.models import UserProfile
from accounts.serializers.user_management import (
    ChangePasswordSerializer,
    ProfilePictureSerializer,
    UserProfileSerializer,
)
from files.storage import delete_blob, save_upload, uploads_root

logger = logging.getLogger(__name__)

PROFILE_PICTURE_URL = "/api/files/profile/"


class ProfileView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request):
        profile = UserProfile.objects.filter(user=request.user).first()
        if profile is None:
            return Response({"profile": {"full_name": "", "email": ""}})
        return Response({"profile": UserProfileSerializer(profile).data})

    def put(self, request):
        profile = UserProfile.objects.filter(user=request.user).first()
        serializer = UserProfileSerializer(profile, data=request.data)
        serializer.is_valid(raise_exception=True)
        profile = serializer.save(user=request.user)
        return Response({"success": True, "profile": UserProfileSerializer(profile).data})


class ChangePasswordView(APIView):
    permission_classes = [IsAuthenticated]

    def put(self, request):
        serializer = ChangePasswordSerializer(data=request.data, context={"request": request})
        serializer.is_valid(raise_exception=True)
        serializer.save()
        logger.info("User %s changed their password", request.user.username)
        return Response({"success": True, "message": "Password updated successfully"}, status=status.HTTP_200_OK)


class ProfilePictureUploadView(APIView):
    parser_classes = [MultiPartParser, FormParser]
    permission_classes = [IsAuthenticated]

    def put(self, request):
        serializer = ProfilePictureSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user = request.user
        previous = user.profile_picture
        filename = save_upload(serializer.validated_data["profilePicture"], uploads_root(),
                               prefix=f"profile_{user.id}_")
        user.profile_picture = f"{PROFILE_PICTURE_URL}{filename}"
        user.save(update_fields=["profile_picture"])

        if previous and previous.startswith(PROFILE_PICTURE_URL):
            delete_blob(uploads_root(), previous[len(PROFILE_PICTURE_URL):].strip("/"))

        return Response({"success": True, "profile_picture": user.profile_picture})
