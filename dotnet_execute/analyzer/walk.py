from __future__ import annotations

import fnmatch
import os
from pathlib import Path
from typing import Generator, Iterable, List, Optional


def match_files(root: str | Path, patterns: Iterable[str]) -> List[Path]:
    """Files directly inside root whose name matches any pattern, sorted by name."""
    root_path = Path(root)
    if not root_path.is_dir():
        return []
    matches: List[Path] = []
    for entry in sorted(root_path.iterdir()):
        if not entry.is_file():
            continue
        if any(fnmatch.fnmatch(entry.name, pat) for pat in patterns):
            matches.append(entry)
    return matches


def find_first(root: str | Path, patterns: Iterable[str]) -> Optional[Path]:
    # pattern order wins over name order
    for pat in patterns:
        matches = match_files(root, [pat])
        if matches:
            return matches[0]
    return None


def iter_entries(root: str | Path) -> Generator[Path, None, None]:
    """Every directory and file below root, parents before children. Root itself is skipped."""

    def _raise(err: OSError) -> None:
        raise err

    root_path = Path(root)
    for dirpath, dirnames, filenames in os.walk(root_path, onerror=_raise):
        dirnames.sort()
        for name in dirnames:
            yield Path(dirpath) / name
        for name in sorted(filenames):
            yield Path(dirpath) / name
