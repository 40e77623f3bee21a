# files/urls.py
from django.urls import path, re_path
from .file_ops.CustomTabs import CustomTabsAPIView
from .file_ops.CreateFolder import CreateFolderAPIView
from .file_ops.ListFolders import ListFoldersAPIView
from .file_ops.DeleteFolder import DeleteFolderAPIView
from .file_ops.ListFiles import ListFilesAPIView
from .file_ops.Upload import UploadFileAPIView
from .file_ops.DeleteFile import DeleteFileAPIView
from .file_ops.FileStatus import FileStatusAPIView
from .file_ops.Comments import FileCommentsAPIView
from .file_ops.Download import PreviewFileAPIView, DownloadFileAPIView
from .file_ops.ProfilePicture import ProfilePictureAPIView

urlpatterns = [
    path('custom-tabs/<str:role_group>/', CustomTabsAPIView.as_view(), name='custom-tabs'),
    path('folders/', CreateFolderAPIView.as_view(), name='create-folder'),
    path('folders/delete/<int:folder_id>/', DeleteFolderAPIView.as_view(), name='delete-folder'),
    path('folders/<str:role_group>/', ListFoldersAPIView.as_view(), name='list-folders'),
    path('files/', ListFilesAPIView.as_view(), name='list-files'),
    path('files/upload/', UploadFileAPIView.as_view(), name='file-upload'),
    re_path(r'^files/profile/(?P<filename>[^/]+)/?$', ProfilePictureAPIView.as_view(), name='profile-picture-file'),
    path('files/<int:file_id>/', DeleteFileAPIView.as_view(), name='file-detail'),
    path('files/<int:file_id>/status/', FileStatusAPIView.as_view(), name='file-status'),
    path('files/<int:file_id>/comments/', FileCommentsAPIView.as_view(), name='file-comments'),
    path('files/<int:file_id>/preview/', PreviewFileAPIView.as_view(), name='file-preview'),
    path('files/<int:file_id>/download/', DownloadFileAPIView.as_view(), name='file-download'),
]
