"""
Default accounts and categories for a fresh portal database.

Every step is idempotent: existing users keep their passwords and existing
categories are left alone, so seeding can run on every deploy.
"""
import logging

from django.conf import settings
from django.db import transaction

from accounts.models import (
    CustomUser,
    UserProfile,
    ROLE_COLLECTOR,
    ROLE_DEVELOPER,
    ROLE_USER1,
    ROLE_USER2,
)
from files.models import CustomTab, DEFAULT_TABS
from vault.defaults import ensure_default_vault_tabs

logger = logging.getLogger(__name__)

DEFAULT_USERS = [
    ("developer", ROLE_DEVELOPER),
    ("collector", ROLE_COLLECTOR),
    ("user1", ROLE_USER1),
    ("user2", ROLE_USER2),
]


def seed_users(passwords=None):
    passwords = passwords or settings.SEED_PASSWORDS
    created = []
    for username, role in DEFAULT_USERS:
        if CustomUser.objects.filter(username=username).exists():
            continue
        CustomUser.objects.create_user(username, passwords[username], role=role)
        created.append(username)
    return created


def seed_tabs():
    created = 0
    for role_group, tabs in DEFAULT_TABS.items():
        for order, (tab_name, tab_key) in enumerate(tabs, start=1):
            _, was_created = CustomTab.objects.get_or_create(
                role_group=role_group,
                tab_key=tab_key,
                defaults={"tab_name": tab_name, "display_order": order},
            )
            created += was_created
    return created


def seed_vault_tabs():
    return sum(
        ensure_default_vault_tabs(collector)
        for collector in CustomUser.objects.filter(role=ROLE_COLLECTOR)
    )


def seed_profiles():
    created = 0
    for user in CustomUser.objects.filter(profile__isnull=True):
        UserProfile.objects.create(user=user, full_name=user.username)
        created += 1
    return created


@transaction.atomic
def seed_portal(passwords=None):
    summary = {
        "users": seed_users(passwords),
        "tabs": seed_tabs(),
        "vault_tabs": seed_vault_tabs(),
        "profiles": seed_profiles(),
    }
    logger.info("Seeded portal: %s", summary)
    return summary
