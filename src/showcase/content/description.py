"""Description files and the links embedded in them."""

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional

logger = logging.getLogger(__name__)

DESCRIPTION_FILENAMES = ("description.md", "description.txt")

# One link per line: "Label: https://url". The label is letters, digits and
# spaces; the URL runs until the first whitespace character.
LINK_PATTERN = re.compile(r"^([a-zA-Z0-9 ]+):\s*(https?://[^\s]+)", re.MULTILINE)


@dataclass(frozen=True)
class Link:
    """A labelled URL extracted from a description."""

    label: str
    url: str

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"label": self.label, "url": self.url}

    @classmethod
    def from_dict(cls, data: dict) -> "Link":
        """Deserialize from dictionary."""
        return cls(label=data["label"], url=data["url"])


def find_description_file(filenames: Iterable[str]) -> Optional[str]:
    """Return the first ``description.md``/``description.txt`` (any case)."""
    for name in filenames:
        if name.lower() in DESCRIPTION_FILENAMES:
            return name
    return None


def read_description(path: Path) -> str:
    """
    Read a description file as UTF-8, dropping a leading byte-order mark.

    Unreadable or undecodable files yield an empty string so that one bad
    entry never aborts the scan of its siblings.
    """
    try:
        return path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Could not read description %s: %s", path, e)
        return ""


def extract_links(text: str) -> list[Link]:
    """Collect every ``Label: https://...`` line, in order of appearance."""
    return [
        Link(label=match.group(1).strip(), url=match.group(2).strip())
        for match in LINK_PATTERN.finditer(text)
    ]


def strip_links(text: str) -> str:
    """Remove all link matches from the text and trim the result."""
    return LINK_PATTERN.sub("", text).strip()


def parse_description(text: str) -> tuple[str, list[Link]]:
    """
    Split raw description text into prose and structured links.

    Returns:
        Tuple of (description without link lines, list of Link)
    """
    return strip_links(text), extract_links(text)
