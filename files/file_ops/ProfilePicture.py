import os

from rest_framework.views import APIView

from files.storage import blob_response, uploads_root
from portal_backend.exceptions import NotFound

PROFILE_PREFIX = "profile_"
PICTURE_TYPES = {
    "png": "image/png",
    "gif": "image/gif",
    "webp": "image/webp",
}


class ProfilePictureAPIView(APIView):

    def get(self, request, filename):
        if os.path.basename(filename) != filename or not filename.startswith(PROFILE_PREFIX):
            raise NotFound("File not found")
        extension = os.path.splitext(filename)[1].lstrip(".").lower()
        response = blob_response(uploads_root(), filename, content_type=PICTURE_TYPES.get(extension, "image/jpeg"))
        response["Cache-Control"] = "public, max-age=31536000"
        return response
