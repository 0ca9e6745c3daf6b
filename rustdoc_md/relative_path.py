"""Logic for computing relative paths between output directories."""

from collections.abc import Sequence


def common_prefix_len(left: Sequence[str], right: Sequence[str]) -> int:
    """Count the leading segments shared by two paths."""
    d = 0
    for a, b in zip(left, right):
        if a != b:
            break
        d += 1
    return d


def relative_path(from_dir: Sequence[str], to_dir: Sequence[str]) -> list[str]:
    """Return the segments leading from ``from_dir`` to ``to_dir``.

    Both are module directories in the same output tree, e.g.
    ``["pkg", "mod_a", "sub"]`` -> ``["pkg", "mod_b"]`` gives
    ``["..", "..", "mod_b"]``. Segments compare by exact string equality.
    """
    d = common_prefix_len(from_dir, to_dir)
    return [".."] * (len(from_dir) - d) + list(to_dir[d:])
