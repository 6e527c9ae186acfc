"""Markdown document framing around the rendered tree."""

from __future__ import annotations

import logging
from pathlib import Path

from ftg import REPOSITORY, FtgError
from ftg.renderer import RenderStats, TextSink, TreeRenderer
from ftg.scanner import Entry

logger = logging.getLogger(__name__)

FENCE = "```"


def format_header(root_display: str, repository: str = REPOSITORY) -> str:
    """Build the document heading and the opening ``sh`` fence.

    Args:
        root_display: Root path as shown to the user.
        repository: Project URL for the star line.

    Returns:
        str: Header text ending with a newline.
    """
    return (
        f"# File Tree for {root_display}\n\n"
        f"## Give the project a star at {repository}\n"
        f"{FENCE}sh\n"
    )


def write_document(
    renderer: TreeRenderer,
    root: Path,
    sink: TextSink,
    root_display: str | None = None,
    entries: list[Entry] | None = None,
) -> RenderStats:
    """Write the complete markdown document for ``root``.

    The root is listed before anything is written, so an unreadable root
    leaves the sink untouched.

    Args:
        renderer: Configured tree renderer.
        root: Directory to draw.
        sink: Open text sink.
        root_display: Root path for the heading. Defaults to ``str(root)``.
        entries: Root children when already listed by the caller.

    Returns:
        RenderStats: Statistics of the tree body.

    Raises:
        FtgError: If the root cannot be listed or the header cannot be
            written.
    """
    if entries is None:
        entries = renderer.list_root(root)
    header = format_header(root_display if root_display is not None else str(root))
    try:
        sink.write(header)
    except (OSError, UnicodeError) as exc:
        raise FtgError(f"error writing to output file: {exc}") from exc

    stats = renderer.render(root, sink, entries)

    try:
        sink.write(f"{FENCE}\n")
    except (OSError, UnicodeError) as exc:
        logger.error("Error writing to output file: %s", exc)
        stats.write_errors += 1
    return stats
