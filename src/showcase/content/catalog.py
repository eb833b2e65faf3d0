"""Portfolio catalog: the read-only content queries used by the site."""

import json
import logging
from collections import Counter
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING

from .scanner import Experience, Project, scan_experiences, scan_projects

if TYPE_CHECKING:
    from showcase.config import Settings

logger = logging.getLogger(__name__)

SNAPSHOT_VERSION = "1.0"
SNAPSHOT_FILENAME = "content.json"

DEFAULT_PROJECTS_ROOT = "Projects"
DEFAULT_EXPERIENCE_ROOT = "Experience"


class PortfolioCatalog:
    """
    Read-only view of the content stored under a public directory.

    Every query rescans the filesystem; nothing is cached between calls,
    so a new entry directory shows up on the next call.
    """

    def __init__(
        self,
        public_dir: Path,
        projects_root: str = DEFAULT_PROJECTS_ROOT,
        experience_root: str = DEFAULT_EXPERIENCE_ROOT,
        sort: bool = False,
    ):
        self.public_dir = Path(public_dir)
        self.projects_root = projects_root
        self.experience_root = experience_root
        self.sort = sort

    @classmethod
    def from_settings(cls, settings: "Settings") -> "PortfolioCatalog":
        """Build a catalog from the configured public directory and roots."""
        return cls(
            settings.public_dir,
            projects_root=settings.projects_root,
            experience_root=settings.experience_root,
            sort=settings.sort_entries,
        )

    @property
    def projects_dir(self) -> Path:
        return self.public_dir / self.projects_root

    @property
    def experience_dir(self) -> Path:
        return self.public_dir / self.experience_root

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_projects(self) -> list[Project]:
        """List all projects."""
        return scan_projects(self.projects_dir, url_prefix=f"/{self.projects_root}", sort=self.sort)

    def list_experiences(self) -> list[Experience]:
        """List all experience entries."""
        return scan_experiences(
            self.experience_dir, url_prefix=f"/{self.experience_root}", sort=self.sort
        )

    @staticmethod
    def compute_stats(projects: list[Project], experiences: list[Experience]) -> dict:
        """Aggregate counts over one scan result."""
        by_kind: Counter = Counter()
        for entry in [*projects, *experiences]:
            for media in entry.images:
                by_kind[media.kind] += 1

        return {
            "projects": len(projects),
            "experiences": len(experiences),
            "media_by_kind": dict(by_kind),
            "with_preview_video": sum(1 for p in projects if p.preview_video),
            "with_preview_image": sum(1 for p in projects if p.preview_image),
            "links": sum(len(p.links) for p in projects),
        }

    def get_stats(self) -> dict:
        """Scan both roots and return summary counts."""
        return self.compute_stats(self.list_projects(), self.list_experiences())

    # ------------------------------------------------------------------
    # Snapshot / Export (JSON)
    # ------------------------------------------------------------------

    def snapshot(self) -> dict:
        """
        Scan both roots and return a JSON-serializable snapshot.

        Both roots are scanned exactly once; stats are computed from the
        same result.
        """
        projects = self.list_projects()
        experiences = self.list_experiences()
        return {
            "version": SNAPSHOT_VERSION,
            "generated_at": datetime.now(timezone.utc).isoformat(),
            "public_dir": str(self.public_dir),
            "stats": self.compute_stats(projects, experiences),
            "projects": [p.to_dict() for p in projects],
            "experiences": [e.to_dict() for e in experiences],
        }

    def export(self, path: Path) -> Path:
        """
        Write the snapshot as JSON for a static-site build.

        Args:
            path: Target file, or a directory to write ``content.json`` into.

        Returns:
            Path to the written file.
        """
        path = Path(path)
        if path.is_dir():
            path = path / SNAPSHOT_FILENAME
        path.parent.mkdir(parents=True, exist_ok=True)

        data = self.snapshot()
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)

        logger.info(
            "Exported %d projects and %d experience entries to %s",
            data["stats"]["projects"],
            data["stats"]["experiences"],
            path,
        )
        return path
