"""Content discovery for the portfolio site."""

from .catalog import PortfolioCatalog
from .description import Link
from .media import MediaRef
from .scanner import ContentScanner, Experience, Project, scan_experiences, scan_projects

__all__ = [
    "ContentScanner",
    "Experience",
    "Link",
    "MediaRef",
    "PortfolioCatalog",
    "Project",
    "scan_experiences",
    "scan_projects",
]
