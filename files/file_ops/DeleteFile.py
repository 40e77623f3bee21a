import logging

from django.db import transaction
from rest_framework.response import Response
from rest_framework.views import APIView

from files.access import get_file_for
from files.storage import delete_blob, uploads_root

logger = logging.getLogger(__name__)


class DeleteFileAPIView(APIView):

    def delete(self, request, file_id):
        file_obj = get_file_for(request, file_id, "delete")
        filename = file_obj.filename

        with transaction.atomic():
            file_obj.delete()

        delete_blob(uploads_root(), filename)
        logger.info("%s deleted file %s (%s)", request.user.username, file_id, file_obj.original_name)
        return Response({"success": True})
