"""Media classification rules and thumbnail/full-resolution pairing."""

import os
from dataclasses import dataclass
from typing import Iterable, Optional

# File type classification
IMAGE_EXTENSIONS = {
    ".jpg",
    ".jpeg",
    ".png",
    ".gif",
    ".webp",
}

VIDEO_EXTENSIONS = {
    ".mp4",
    ".webm",
    ".mov",
}

DOCUMENT_EXTENSIONS = {
    ".pdf",
}

# Non-image files appended to the gallery after the images
EXTRA_MEDIA_EXTENSIONS = VIDEO_EXTENSIONS | DOCUMENT_EXTENSIONS

# Naming conventions (matched against the lowercased filename)
FULL_INFIX = ".full."
FULL_SUFFIX = ".full"
PREVIEW_VIDEO_PREFIX = "preview."
PREVIEW_IMAGE_PREFIX = "preview_pic."

# Files never classified
DEFAULT_IGNORE_FILES = {
    ".DS_Store",
    "Thumbs.db",
    "desktop.ini",
}

MEDIA_KIND_IMAGE = "image"
MEDIA_KIND_VIDEO = "video"
MEDIA_KIND_PDF = "pdf"


def extension_of(filename: str) -> str:
    """Return the lowercased extension of a filename, with the dot."""
    return os.path.splitext(filename)[1].lower()


def is_ignored(filename: str) -> bool:
    return filename in DEFAULT_IGNORE_FILES or filename.startswith(".")


def is_image(filename: str) -> bool:
    return extension_of(filename) in IMAGE_EXTENSIONS


def is_full_variant(filename: str) -> bool:
    """True for files like ``shot.full.png`` that only exist to be paired."""
    return FULL_INFIX in filename.lower()


def is_standard_image(filename: str) -> bool:
    """An image that can be listed in a gallery as a thumbnail."""
    return is_image(filename) and not is_full_variant(filename)


def is_extra_media(filename: str) -> bool:
    return extension_of(filename) in EXTRA_MEDIA_EXTENSIONS


def is_preview_video(filename: str) -> bool:
    return (
        filename.lower().startswith(PREVIEW_VIDEO_PREFIX)
        and extension_of(filename) in VIDEO_EXTENSIONS
    )


def is_preview_image(filename: str) -> bool:
    return filename.lower().startswith(PREVIEW_IMAGE_PREFIX) and is_image(filename)


def media_kind(filename: str) -> str:
    """Classify a gallery file as ``image``, ``video`` or ``pdf``."""
    ext = extension_of(filename)
    if ext in VIDEO_EXTENSIONS:
        return MEDIA_KIND_VIDEO
    if ext in DOCUMENT_EXTENSIONS:
        return MEDIA_KIND_PDF
    return MEDIA_KIND_IMAGE


def full_variant_name(filename: str) -> str:
    """
    Name of the full-resolution sibling of an image.

    ``shot.png`` becomes ``shot.full.png``. The extension keeps its
    original case so the lookup stays an exact filename match.
    """
    base, ext = os.path.splitext(filename)
    return f"{base}{FULL_SUFFIX}{ext}"


def asset_path(base_path: str, filename: str) -> str:
    """Join a public base path and a filename without touching the filesystem."""
    return f"{base_path}/{filename}"


@dataclass(frozen=True)
class MediaRef:
    """A thumbnail/full-resolution path pair for one visual asset."""

    thumbnail: str  # Public path of the display asset
    full: str  # Public path of the high-resolution copy (== thumbnail if none)

    @property
    def kind(self) -> str:
        return media_kind(self.thumbnail)

    @property
    def has_full_variant(self) -> bool:
        return self.full != self.thumbnail

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "thumbnail": self.thumbnail,
            "full": self.full,
            "kind": self.kind,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "MediaRef":
        """Deserialize from dictionary."""
        thumbnail = data["thumbnail"]
        return cls(thumbnail=thumbnail, full=data.get("full", thumbnail))


def pair_image(filename: str, siblings: Iterable[str], base_path: str) -> MediaRef:
    """
    Build the MediaRef for a standard image.

    Args:
        filename: Image filename, e.g. ``shot.png``.
        siblings: Every filename in the same directory.
        base_path: Public path of the directory, e.g. ``/Projects/my-app``.

    Returns:
        MediaRef whose ``full`` points to ``shot.full.png`` when that exact
        sibling exists, otherwise to the image itself.
    """
    thumbnail = asset_path(base_path, filename)
    full_name = full_variant_name(filename)
    if full_name in set(siblings):
        return MediaRef(thumbnail=thumbnail, full=asset_path(base_path, full_name))
    return MediaRef(thumbnail=thumbnail, full=thumbnail)


def single_asset(filename: str, base_path: str) -> MediaRef:
    """MediaRef for a file with no resolution variants (video, PDF)."""
    path = asset_path(base_path, filename)
    return MediaRef(thumbnail=path, full=path)


def find_first(filenames: Iterable[str], predicate) -> Optional[str]:
    """Return the first filename accepted by ``predicate``, in the given order."""
    for name in filenames:
        if predicate(name):
            return name
    return None

