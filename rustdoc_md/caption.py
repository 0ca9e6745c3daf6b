"""Utility for extracting the one-line caption of a doc comment."""


def caption(docs: str | None) -> str:
    """Return the first non-blank line of ``docs``."""
    for line in (docs or "").splitlines():
        if line.strip():
            return line.strip()
    return ""
