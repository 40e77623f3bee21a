# messaging/urls.py
from django.urls import path
from messaging.views.chat_views import ChatMessagesView
from messaging.views.private_message_views import ContactListView, SendPrivateMessageView
from messaging.views.private_message_views import ConversationView, MarkConversationReadView
from messaging.views.private_message_views import UnreadCountsView, BroadcastView

urlpatterns = [
    # Team chat
    path("chat/messages/", ChatMessagesView.as_view(), name="chat-messages"),

    # Private messages
    path("private-messages/", SendPrivateMessageView.as_view(), name="send-private-message"),
    path("private-messages/users/", ContactListView.as_view(), name="private-message-users"),
    path("private-messages/unread-counts/", UnreadCountsView.as_view(), name="private-message-unread-counts"),
    path("private-messages/broadcast/", BroadcastView.as_view(), name="private-message-broadcast"),
    path("private-messages/<int:user_id>/", ConversationView.as_view(), name="private-conversation"),
    path("private-messages/<int:user_id>/mark-read/", MarkConversationReadView.as_view(), name="private-conversation-read"),
]
