"""
Local disk storage for uploaded blobs.

Blobs are always stored under a generated ``<uuid>.<ext>`` name; the name a
client uploaded with is kept in the database only and never becomes part of a
filesystem path.
"""
import logging
import os
from pathlib import Path
from uuid import uuid4

from django.conf import settings
from django.http import FileResponse

from portal_backend.exceptions import Internal, NotFound

logger = logging.getLogger(__name__)


def uploads_root():
    return Path(settings.UPLOADS_DIR)


def vault_root(collector_id):
    return Path(settings.VAULT_UPLOADS_DIR) / f"collector-{collector_id}"


def generated_name(original_name, prefix=""):
    extension = os.path.splitext(original_name or "")[1]
    return f"{prefix}{uuid4()}{extension}"


def save_upload(uploaded_file, directory, prefix=""):
    """
    Write an uploaded file to ``directory`` under a generated name.

    Returns the generated name. Raises ``Internal`` when the disk write fails;
    a partially written blob is removed first.
    """
    directory = Path(directory)
    filename = generated_name(uploaded_file.name, prefix)
    target = directory / filename
    try:
        directory.mkdir(parents=True, exist_ok=True)
        with open(target, "wb") as destination:
            for chunk in uploaded_file.chunks():
                destination.write(chunk)
    except OSError as exc:
        logger.error("Failed to save %s to %s: %s", uploaded_file.name, target, exc)
        target.unlink(missing_ok=True)
        raise Internal("Failed to save file to disk")
    return filename


def delete_blob(directory, filename):
    """Remove a stored blob. A blob that is already gone is not an error."""
    target = Path(directory) / filename
    try:
        target.unlink()
    except FileNotFoundError:
        logger.info("Blob %s already missing", target)
        return False
    except OSError as exc:
        logger.error("Failed to remove blob %s: %s", target, exc)
        return False
    return True


def delete_blobs(directory, filenames):
    return sum(1 for filename in filenames if delete_blob(directory, filename))


def blob_response(directory, filename, content_type=None, download_name=None, as_attachment=False):
    target = Path(directory) / filename
    if not target.is_file():
        raise NotFound("File not found on disk")
    return FileResponse(
        open(target, "rb"),
        content_type=content_type or "application/octet-stream",
        as_attachment=as_attachment,
        filename=download_name or filename,
    )
