from rest_framework.views import APIView

from files.access import get_file_for
from files.storage import blob_response, uploads_root


class PreviewFileAPIView(APIView):

    def get(self, request, file_id):
        file_obj = get_file_for(request, file_id, "view")
        response = blob_response(uploads_root(), file_obj.filename, content_type=file_obj.file_type,
                                 download_name=file_obj.original_name)
        response["Cache-Control"] = "private, max-age=3600"
        return response


class DownloadFileAPIView(APIView):

    def get(self, request, file_id):
        file_obj = get_file_for(request, file_id, "view")
        return blob_response(uploads_root(), file_obj.filename, content_type=file_obj.file_type,
                             download_name=file_obj.original_name, as_attachment=True)
