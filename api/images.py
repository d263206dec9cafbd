"""On-disk storage for uploaded employee images.

Files are saved under a generated name (short stem + timestamp + original
extension) so two uploads of ``photo.jpg`` never collide.  The generated name
is what gets persisted in ``employees.image_name``.
"""
import re
from datetime import datetime
from pathlib import Path

from fastapi import UploadFile

from config import IMAGES_PATH
from logger_config import setup_logger

logger = setup_logger("api.images")

_IMAGES_PATH = IMAGES_PATH


def images_dir() -> Path:
    _IMAGES_PATH.mkdir(parents=True, exist_ok=True)
    return _IMAGES_PATH


def make_image_name(filename: str, now: datetime | None = None) -> str:
    """Build the stored name: first 10 chars of the stem with anything outside
    ``[A-Za-z0-9_-]`` turned into a dash, then a year/minute/second/millisecond
    stamp (``yyMMssfff``) and the original extension."""
    original = Path(filename or "image")
    stem = re.sub(r"[^A-Za-z0-9_-]", "-", original.stem[:10])
    suffix = re.sub(r"[^A-Za-z0-9.]", "", original.suffix)
    now = now or datetime.now()
    stamp = f"{now:%y%M%S}{now.microsecond // 1000:03d}"
    return f"{stem}{stamp}{suffix}"


def save_image(upload: UploadFile) -> str:
    image_name = make_image_name(upload.filename or "")
    base = Path(image_name)
    target = images_dir() / image_name
    n = 0
    while target.exists():  # same stem uploaded within one millisecond
        n += 1
        image_name = f"{base.stem}-{n}{base.suffix}"
        target = target.with_name(image_name)
    with target.open("wb") as fh:
        fh.write(upload.file.read())
    logger.info(f"Saved image {image_name}")
    return image_name


def delete_image(image_name: str) -> None:
    if not image_name:
        return
    target = images_dir() / Path(image_name).name
    if target.exists():
        target.unlink()
        logger.info(f"Deleted image {image_name}")
