"""Directory listing: the file-system side of tree rendering."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

logger = logging.getLogger(__name__)

EntryKind = Literal["D", "F"]
Order = Literal["asc", "desc", "none"]


@dataclass(frozen=True, slots=True)
class Entry:
    """A single filesystem entry from one directory listing.

    Attributes:
        name: Basename of the entry.
        is_dir: Whether the entry is a directory (symlinks are not followed).
        path: Parent path joined with ``name``.
    """

    name: str
    is_dir: bool
    path: Path

    @property
    def kind(self) -> EntryKind:
        return classify(self)


def classify(entry: Entry) -> EntryKind:
    """Return ``"D"`` for directories and ``"F"`` for everything else."""
    return "D" if entry.is_dir else "F"


def list_children(path: Path, order: Order = "asc") -> list[Entry]:
    """List the direct children of ``path``.

    Args:
        path: Directory to list.
        order: ``asc``/``desc`` sort by name; ``none`` keeps the order the
            operating system returned.

    Returns:
        list[Entry]: Child entries.

    Raises:
        OSError: If the directory cannot be listed.
    """
    with os.scandir(path) as it:
        raw_entries = list(it)

    if order != "none":
        raw_entries.sort(key=lambda e: e.name, reverse=order == "desc")

    entries: list[Entry] = []
    for dir_entry in raw_entries:
        try:
            is_dir = dir_entry.is_dir(follow_symlinks=False)
        except OSError:
            logger.debug("Cannot stat: %s", dir_entry.path)
            is_dir = False
        entries.append(
            Entry(name=dir_entry.name, is_dir=is_dir, path=Path(dir_entry.path))
        )
    return entries
