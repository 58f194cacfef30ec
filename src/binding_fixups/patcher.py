"""Apply the fixed text patch to a generated loader file.

Matching is by string suffix and substring only. Nothing in the target is
parsed, and a missing anchor is not an error.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from binding_fixups import (
    ANCHOR,
    APPENDED_SNIPPET,
    DECLARATION_SUFFIX,
    ENTRY_POINT_SUFFIX,
    INSERTED_BLOCK,
)


class TargetKind(str, Enum):
    ENTRY_POINT = "entry_point"
    DECLARATION = "declaration"
    OTHER = "other"


def classify_target(path: Path | str) -> TargetKind:
    """Classify a path by the suffix of its full string form."""
    name = str(path)
    if name.endswith(ENTRY_POINT_SUFFIX):
        return TargetKind.ENTRY_POINT
    if name.endswith(DECLARATION_SUFFIX):
        return TargetKind.DECLARATION
    return TargetKind.OTHER


def patch_entry_point_text(content: str) -> str:
    """Return loader text with the global binding appended and the anchor expanded.

    Only the first occurrence of the anchor is expanded. Running this on its
    own output expands again, since the expanded block starts with the anchor.
    """
    content += APPENDED_SNIPPET
    return content.replace(ANCHOR, INSERTED_BLOCK, 1)


def fix_index_js(path: Path | str) -> None:
    """Patch a generated ``index.js`` in place.

    Args:
        path: Path to the loader file.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        IsADirectoryError: If the path is a directory.
        PermissionError: If the file can't be read or written.
    """
    file_path = Path(path)
    # newline="" keeps the generator's line endings byte for byte
    with open(file_path, encoding="utf-8", newline="") as f:
        content = f.read()

    content = patch_entry_point_text(content)

    with open(file_path, "w", encoding="utf-8", newline="") as f:
        f.write(content)


def fix_index_dts(path: Path | str) -> None:
    """No fix is currently needed for the declaration file."""


def patch(path: Path | str) -> None:
    """Apply whichever fix matches ``path``, if any."""
    kind = classify_target(path)
    if kind is TargetKind.ENTRY_POINT:
        fix_index_js(path)
    elif kind is TargetKind.DECLARATION:
        fix_index_dts(path)
