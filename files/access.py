from django.contrib.auth import get_user_model
from django.shortcuts import get_object_or_404

from files.models import File
from sharing import policy


def requested_view(request):
    """Role group a developer or collector is browsing as, if any."""
    return request.query_params.get("view") or None


def get_file_for(request, file_id, action="view", message=None):
    file = get_object_or_404(File, pk=file_id)
    policy.require(request.user, policy.FILE, action, file, message=message, view_as=requested_view(request))
    return file


def roles_by_username(usernames):
    User = get_user_model()
    return dict(User.objects.filter(username__in=set(usernames)).values_list("username", "role"))
