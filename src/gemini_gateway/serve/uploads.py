"""Staging of multipart uploads to disk with guaranteed removal."""
from __future__ import annotations
import logging
import shutil
import uuid
from contextlib import asynccontextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import AsyncIterator

from fastapi import UploadFile
from starlette.concurrency import run_in_threadpool

from gemini_gateway.common.errors import MissingUploadError
from gemini_gateway.common.schema import BinaryAttachment

LOGGER = logging.getLogger("gemini_gateway.uploads")

@dataclass(frozen=True)
class StagedUpload:
    path: Path
    mime_type: str | None

    async def read_attachment(self) -> BinaryAttachment:
        raw = await run_in_threadpool(self.path.read_bytes)
        return BinaryAttachment(raw_bytes=raw, mime_type=self.mime_type)

def _write(upload: UploadFile, dest: Path) -> None:
    dest.parent.mkdir(parents=True, exist_ok=True)
    upload.file.seek(0)
    with open(dest, "wb") as f:
        shutil.copyfileobj(upload.file, f)

def _remove(path: Path) -> None:
    path.unlink(missing_ok=True)

@asynccontextmanager
async def staged_upload(
    upload: UploadFile | None, field: str, upload_dir: Path
) -> AsyncIterator[StagedUpload]:
    """
    Write an upload to a uniquely named file and delete it on exit.

    Args:
        upload: The multipart file, or None when the field was not sent.
        field: Form field name, used in the error message.
        upload_dir: Directory holding staged files.

    Raises:
        MissingUploadError: when ``upload`` is None.
    """
    if upload is None:
        raise MissingUploadError(field)

    suffix = Path(upload.filename or "").suffix
    dest = upload_dir / f"{uuid.uuid4().hex}{suffix}"
    try:
        await run_in_threadpool(_write, upload, dest)
        LOGGER.debug("Staged %s upload at %s", field, dest)
        yield StagedUpload(path=dest, mime_type=upload.content_type)
    finally:
        await run_in_threadpool(_remove, dest)
