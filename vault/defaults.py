from vault.models import VaultCustomTab

DEFAULT_VAULT_TABS = [
    ("All Files", "all"),
    ("Confidential", "confidential"),
    ("Archives", "archives"),
    ("Reports", "reports"),
]


def ensure_default_vault_tabs(collector):
    """Give a collector the default vault categories it does not have yet."""
    created = 0
    for order, (tab_name, tab_key) in enumerate(DEFAULT_VAULT_TABS, start=1):
        _, was_created = VaultCustomTab.objects.get_or_create(
            collector=collector,
            tab_key=tab_key,
            defaults={"tab_name": tab_name, "display_order": order},
        )
        created += was_created
    return created
