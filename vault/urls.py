# vault/urls.py
from django.urls import path
from .vault_ops.Access import VaultAccessAPIView
from .vault_ops.Collectors import CollectorListAPIView
from .vault_ops.VaultTabs import VaultTabsAPIView, CollectorVaultTabsAPIView
from .vault_ops.VaultFiles import VaultFileListAPIView, VaultUploadAPIView
from .vault_ops.VaultFiles import VaultFileDetailAPIView, VaultDownloadAPIView
from .vault_ops.VaultComments import VaultCommentsAPIView
from .vault_ops.VaultFolders import VaultFoldersAPIView, DeleteVaultFolderAPIView

urlpatterns = [
    path('access/', VaultAccessAPIView.as_view(), name='vault-access'),
    path('collectors/', CollectorListAPIView.as_view(), name='vault-collectors'),
    path('custom-tabs/', VaultTabsAPIView.as_view(), name='vault-custom-tabs'),
    path('custom-tabs/<int:collector_id>/', CollectorVaultTabsAPIView.as_view(), name='vault-collector-tabs'),
    path('files/', VaultFileListAPIView.as_view(), name='vault-files'),
    path('files/upload/', VaultUploadAPIView.as_view(), name='vault-upload'),
    path('files/<int:file_id>/', VaultFileDetailAPIView.as_view(), name='vault-file-detail'),
    path('files/<int:file_id>/download/', VaultDownloadAPIView.as_view(), name='vault-download'),
    path('files/<int:file_id>/comments/', VaultCommentsAPIView.as_view(), name='vault-comments'),
    path('folders/', VaultFoldersAPIView.as_view(), name='vault-folders'),
    path('folders/delete/<int:folder_id>/', DeleteVaultFolderAPIView.as_view(), name='vault-delete-folder'),
]
