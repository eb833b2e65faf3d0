"""Content root scanner: one entry per subdirectory."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from .description import Link, find_description_file, parse_description, read_description
from .media import (
    MediaRef,
    asset_path,
    find_first,
    is_extra_media,
    is_ignored,
    is_preview_image,
    is_preview_video,
    is_standard_image,
    pair_image,
    single_asset,
)

logger = logging.getLogger(__name__)

ENTRY_KIND_PROJECT = "project"
ENTRY_KIND_EXPERIENCE = "experience"
ENTRY_KINDS = (ENTRY_KIND_PROJECT, ENTRY_KIND_EXPERIENCE)

# Separator in directory names that reads as a space in titles
SLUG_SEPARATOR = "-"


@dataclass
class Entry:
    """One content item, backed by one subdirectory of a content root."""

    slug: str  # Directory name, unmodified
    description: str = ""
    images: list[MediaRef] = field(default_factory=list)

    @property
    def title(self) -> str:
        return self.slug.replace(SLUG_SEPARATOR, " ")

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "slug": self.slug,
            "title": self.title,
            "description": self.description,
            "images": [img.to_dict() for img in self.images],
        }


@dataclass
class Experience(Entry):
    """An experience record: description plus cycling gallery images."""

    @classmethod
    def from_dict(cls, data: dict) -> "Experience":
        """Deserialize from dictionary."""
        return cls(
            slug=data["slug"],
            description=data.get("description", ""),
            images=[MediaRef.from_dict(i) for i in data.get("images", [])],
        )


@dataclass
class Project(Entry):
    """A project card with optional preview media and links."""

    preview_video: Optional[str] = None  # Public path of the hover clip
    preview_image: Optional[MediaRef] = None  # Explicit cover override
    links: list[Link] = field(default_factory=list)

    @property
    def cover(self) -> Optional[MediaRef]:
        """Cover art: the preview override, else the first gallery item."""
        if self.preview_image is not None:
            return self.preview_image
        return self.images[0] if self.images else None

    def to_dict(self) -> dict:
        """Serialize to dictionary (camelCase keys for the web front end)."""
        d = super().to_dict()
        if self.preview_video:
            d["previewVideo"] = self.preview_video
        if self.preview_image:
            d["previewImage"] = self.preview_image.to_dict()
        d["links"] = [link.to_dict() for link in self.links]
        return d

    @classmethod
    def from_dict(cls, data: dict) -> "Project":
        """Deserialize from dictionary."""
        preview_image = data.get("previewImage")
        return cls(
            slug=data["slug"],
            description=data.get("description", ""),
            images=[MediaRef.from_dict(i) for i in data.get("images", [])],
            preview_video=data.get("previewVideo"),
            preview_image=MediaRef.from_dict(preview_image) if preview_image else None,
            links=[Link.from_dict(link) for link in data.get("links", [])],
        )


class ContentScanner:
    """Scans a content root and classifies each subdirectory as an entry."""

    def __init__(
        self,
        root_dir: Path,
        kind: str = ENTRY_KIND_PROJECT,
        url_prefix: Optional[str] = None,
        sort: bool = False,
    ):
        """
        Args:
            root_dir: Content root holding one subdirectory per entry.
            kind: ``"project"`` or ``"experience"``.
            url_prefix: Public path of the root (default: ``/<root name>``).
            sort: Sort entries and files by name instead of keeping the
                filesystem enumeration order.
        """
        if kind not in ENTRY_KINDS:
            raise ValueError(f"Unknown entry kind: {kind!r} (expected one of {ENTRY_KINDS})")
        self.root_dir = Path(root_dir)
        self.kind = kind
        self.url_prefix = (url_prefix or f"/{self.root_dir.name}").rstrip("/")
        self.sort = sort

    def scan(self) -> list[Entry]:
        """
        Scan the content root.

        Returns:
            List of Project or Experience entries. Empty when the root does
            not exist. Errors enumerating an existing root propagate.
        """
        if not self.root_dir.is_dir():
            logger.debug("Content root %s not found, nothing to scan", self.root_dir)
            return []

        directories = [
            child
            for child in self.root_dir.iterdir()
            if child.is_dir() and not child.is_symlink() and not child.name.startswith(".")
        ]
        if self.sort:
            directories.sort(key=lambda d: d.name)

        entries: list[Entry] = []
        for directory in directories:
            entry = self.scan_entry(directory)
            if entry is not None:
                entries.append(entry)

        logger.debug("Scanned %d %s entries in %s", len(entries), self.kind, self.root_dir)
        return entries

    def scan_entry(self, entry_dir: Path) -> Optional[Entry]:
        """Classify a single entry directory. Returns None if it cannot be listed."""
        try:
            files = self._list_files(entry_dir)
        except OSError as e:
            logger.warning("Skipping %s: %s", entry_dir, e)
            return None

        if self.kind == ENTRY_KIND_PROJECT:
            return self._build_project(entry_dir, files)
        return self._build_experience(entry_dir, files)

    def _list_files(self, directory: Path) -> list[str]:
        """List the classifiable files of a directory (non-recursive)."""
        names = [
            child.name
            for child in directory.iterdir()
            if child.is_file() and not is_ignored(child.name)
        ]
        if self.sort:
            names.sort()
        return names

    def _base_path(self, slug: str) -> str:
        return f"{self.url_prefix}/{slug}"

    def _read_raw_description(self, entry_dir: Path, files: list[str]) -> str:
        desc_file = find_description_file(files)
        if desc_file is None:
            return ""
        return read_description(entry_dir / desc_file)

    def _gallery_images(self, files: list[str], base_path: str) -> list[MediaRef]:
        return [
            pair_image(name, files, base_path) for name in files if is_standard_image(name)
        ]

    def _build_experience(self, entry_dir: Path, files: list[str]) -> Experience:
        slug = entry_dir.name
        return Experience(
            slug=slug,
            description=self._read_raw_description(entry_dir, files),
            images=self._gallery_images(files, self._base_path(slug)),
        )

    def _build_project(self, entry_dir: Path, files: list[str]) -> Project:
        slug = entry_dir.name
        base_path = self._base_path(slug)

        description, links = parse_description(self._read_raw_description(entry_dir, files))

        preview_video_file = find_first(files, is_preview_video)
        preview_video = asset_path(base_path, preview_video_file) if preview_video_file else None

        images = self._gallery_images(files, base_path)

        preview_image = None
        preview_pic_file = find_first(files, is_preview_image)
        if preview_pic_file:
            suffix = f"/{preview_pic_file}"
            preview_image = next(
                (img for img in images if img.thumbnail.endswith(suffix)),
                None,
            )
            if preview_image is None:
                preview_image = pair_image(preview_pic_file, files, base_path)

        extra_media = [
            single_asset(name, base_path)
            for name in files
            if is_extra_media(name) and name != preview_video_file
        ]

        return Project(
            slug=slug,
            description=description,
            images=images + extra_media,
            preview_video=preview_video,
            preview_image=preview_image,
            links=links,
        )


def scan_projects(
    root_dir: Path, url_prefix: Optional[str] = None, sort: bool = False
) -> list[Project]:
    """Scan a projects root."""
    return ContentScanner(root_dir, ENTRY_KIND_PROJECT, url_prefix=url_prefix, sort=sort).scan()


def scan_experiences(
    root_dir: Path, url_prefix: Optional[str] = None, sort: bool = False
) -> list[Experience]:
    """Scan an experience root."""
    return ContentScanner(root_dir, ENTRY_KIND_EXPERIENCE, url_prefix=url_prefix, sort=sort).scan()
