"""Numeric ordering of dot-separated version strings."""

from functools import cmp_to_key
from typing import Iterable, List


def _component(part: str) -> int:
    # Garbage components count as zero rather than failing the comparison.
    try:
        return int(part)
    except ValueError:
        return 0


def compare_versions(a: str, b: str) -> int:
    """Compare two version strings.

    Returns a negative number if ``a < b``, zero if they are equal and a
    positive number if ``a > b``. Missing trailing components compare as zero,
    so ``"10.1"`` equals ``"10.1.0"``.
    """
    a_parts = [_component(p) for p in a.split(".")]
    b_parts = [_component(p) for p in b.split(".")]

    for i in range(max(len(a_parts), len(b_parts))):
        a_val = a_parts[i] if i < len(a_parts) else 0
        b_val = b_parts[i] if i < len(b_parts) else 0
        if a_val != b_val:
            return a_val - b_val
    return 0


def sort_versions(versions: Iterable[str]) -> List[str]:
    """Return a new list of versions in ascending numeric order."""
    return sorted(versions, key=cmp_to_key(compare_versions))


def major_version(version: str) -> int:
    return _component(version.split(".")[0])
