from django.db.models import Q


def normalize_path(value):
    """Collapse repeated and surrounding slashes: ``"/a//b/"`` -> ``"a/b"``."""
    return "/".join(part for part in (value or "").split("/") if part)


def join_path(parent_path, name):
    return f"{parent_path}/{name}" if parent_path else name


def subtree_q(field, path):
    """Rows whose ``field`` is ``path`` itself or lies anywhere beneath it."""
    return Q(**{field: path}) | Q(**{f"{field}__startswith": f"{path}/"})


def in_subtree(value, path):
    return value == path or value.startswith(f"{path}/")


def subtree_ids(queryset, field, path):
    """
    Primary keys of ``queryset`` rows in the subtree rooted at ``path``.

    The database prefix match is case-insensitive on SQLite, so candidates are
    re-checked exactly before anything is deleted.
    """
    rows = queryset.filter(subtree_q(field, path)).values_list("pk", field)
    return [pk for pk, value in rows if in_subtree(value, path)]
