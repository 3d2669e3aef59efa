"""Comparison of file system paths."""

from __future__ import annotations

import ntpath
import os


def _clean_posix(path: str) -> str:
    """Return the shortest equivalent of a slash-separated path."""
    if not path:
        return "."
    rooted = path.startswith("/")
    parts: list[str] = []
    for part in path.split("/"):
        if part in ("", "."):
            continue
        if part == "..":
            if parts and parts[-1] != "..":
                parts.pop()
            elif not rooted:
                parts.append("..")
            continue
        parts.append(part)
    joined = "/".join(parts)
    if rooted:
        return "/" + joined
    return joined or "."


def _split_volume(path: str) -> tuple[str, str]:
    """Clean ``path`` and split it into its volume name and the rest."""
    if os.name == "nt":
        cleaned = ntpath.normpath(path) if path else "."
        volume, rest = ntpath.splitdrive(cleaned)
        return volume, rest
    return "", _clean_posix(path)


def path_equals(path1: str, path2: str) -> bool:
    """Return True when both paths name the same location.

    Volume names compare case-insensitively; the rest of the path is
    compared exactly after cleaning.
    """
    volume1, rest1 = _split_volume(path1)
    volume2, rest2 = _split_volume(path2)
    return volume1.casefold() == volume2.casefold() and rest1 == rest2