"""
Upload storage service

A single policy governs every upload path (generic attachments and avatars):
a size cap, no content-type filter. Stored names are
<unix-millis>-<random><ext>, which is unique in practice but not guaranteed
under heavy concurrent load.
"""
import logging
import random
import time
from dataclasses import dataclass
from pathlib import Path, PurePath
from typing import Optional
from fastapi import HTTPException, UploadFile, status
from app.core.config import settings
from app.constants import UPLOADS_URL_PREFIX, AVATARS_SUBDIR

logger = logging.getLogger(__name__)

CHUNK_SIZE = 1024 * 1024


@dataclass(frozen=True)
class UploadPolicy:
    max_bytes: int


def get_upload_policy() -> UploadPolicy:
    """Upload policy from settings"""
    return UploadPolicy(max_bytes=settings.MAX_UPLOAD_BYTES)


def has_file(upload: Optional[UploadFile]) -> bool:
    """Browsers send an empty part with no filename when nothing was picked."""
    return upload is not None and bool(upload.filename)


def generate_filename(original_filename: Optional[str], prefix: str = "") -> str:
    """
    Build a stored filename keeping the original extension

    Args:
        original_filename: Client-supplied name, only its extension is kept
        prefix: Prepended as-is (e.g. "avatar-7-")

    Returns:
        Filename such as "1718000000000-123456789.pdf"
    """
    ext = PurePath(original_filename or "").suffix
    unique_suffix = f"{int(time.time() * 1000)}-{random.randint(0, 10**9)}"
    return f"{prefix}{unique_suffix}{ext}"


async def save_upload(upload: UploadFile, directory: Path, filename: str, policy: UploadPolicy) -> Path:
    """
    Stream an upload to directory/filename, creating the directory on demand

    Raises:
        HTTPException: 413 if the file exceeds policy.max_bytes (partial file removed)
    """
    directory.mkdir(parents=True, exist_ok=True)
    target = directory / filename
    written = 0
    try:
        with open(target, "wb") as out:
            while True:
                chunk = await upload.read(CHUNK_SIZE)
                if not chunk:
                    break
                written += len(chunk)
                if written > policy.max_bytes:
                    raise HTTPException(
                        status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
                        detail=f"File exceeds the {policy.max_bytes} byte limit"
                    )
                out.write(chunk)
    except BaseException:
        target.unlink(missing_ok=True)
        raise

    logger.info(f"Stored upload {filename} ({written} bytes) in {directory}")
    return target


async def store_upload(upload: UploadFile, upload_root: Path, policy: UploadPolicy) -> str:
    """Store a generic attachment and return its URL under /uploads"""
    filename = generate_filename(upload.filename)
    await save_upload(upload, upload_root, filename, policy)
    return f"{UPLOADS_URL_PREFIX}/{filename}"


async def store_avatar(upload: UploadFile, upload_root: Path, employee_id: int, policy: UploadPolicy) -> str:
    """Store a profile picture under avatars/ and return its URL"""
    filename = generate_filename(upload.filename, prefix=f"avatar-{employee_id}-")
    await save_upload(upload, upload_root / AVATARS_SUBDIR, filename, policy)
    return f"{UPLOADS_URL_PREFIX}/{AVATARS_SUBDIR}/{filename}"
