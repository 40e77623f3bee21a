import logging

from django.contrib.auth import get_user_model
from django.db import DatabaseError, transaction

from accounts.models import PRIVILEGED_ROLES
from notifications.models import Notification

logger = logging.getLogger(__name__)


def deliver(notifications):
    """
    Insert prepared ``Notification`` rows.

    Called after the primary action has been written and runs in its own
    savepoint: a failure here is logged and leaves the primary action in
    place. Returns the number of rows written.
    """
    notifications = list(notifications)
    if not notifications:
        return 0

    try:
        with transaction.atomic():
            Notification.objects.bulk_create(notifications)
    except DatabaseError:
        logger.exception("Failed to deliver %d notification(s) of type %s",
                         len(notifications), notifications[0].type)
        return 0
    return len(notifications)


def notify(recipients, type, title, message, related_id=None):
    """One notification with the same text for every recipient."""
    return deliver(
        Notification(user=recipient, type=type, title=title, message=message, related_id=related_id)
        for recipient in recipients
    )


def privileged_recipients(exclude=None):
    """Developers and collectors, optionally without the acting user."""
    User = get_user_model()
    qs = User.objects.filter(role__in=PRIVILEGED_ROLES)
    if exclude is not None:
        qs = qs.exclude(pk=exclude.pk)
    return qs
