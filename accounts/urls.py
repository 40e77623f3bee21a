# accounts/urls.py
from django.urls import path
from accounts.views.user_views import LoginView, LogoutView, MeView
from accounts.views.admin_views import UserListCreateView, UserDetailView
from accounts.views.user_management_views import ProfileView, ChangePasswordView, ProfilePictureUploadView
from accounts.views.notifications_views import NotificationListView, DeleteNotificationView
from accounts.views.notifications_views import MarkNotificationReadView, MarkAllNotificationsReadView

urlpatterns = [
    # Authentication
    path("auth/login/", LoginView.as_view(), name="login"),
    path("auth/logout/", LogoutView.as_view(), name="logout"),
    path("auth/me/", MeView.as_view(), name="me"),

    # Profile
    path("profile/", ProfileView.as_view(), name="profile"),
    path("profile/password/", ChangePasswordView.as_view(), name="change-password"),
    path("profile/picture/", ProfilePictureUploadView.as_view(), name="profile-picture"),

    # Admin
    path("admin/users/", UserListCreateView.as_view(), name="admin-users"),
    path("admin/users/<int:user_id>/", UserDetailView.as_view(), name="admin-user-detail"),

    # notification
    path("notifications/", NotificationListView.as_view(), name="notification-list"),
    path("notifications/read-all/", MarkAllNotificationsReadView.as_view(), name="mark-all-notifications-read"),
    path("notifications/<int:notification_id>/", DeleteNotificationView.as_view(), name="delete-notification"),
    path("notifications/<int:notification_id>/read/", MarkNotificationReadView.as_view(), name="mark-notification-read"),
]
