"""Logic for hiding rustdoc setup lines inside fenced code blocks."""

import re

CODE_FENCE_RE = re.compile(r"^\s*(?P<fence>`{3,})\s*(?P<info>[^`]*?)\s*$")


def is_rust_fence(info: str) -> bool:
    """Check if a fence info string is empty or labeled ``rust``."""
    tokens = [t for t in re.split(r"[\s,]+", info) if t]
    return not tokens or tokens[0] == "rust"


def is_hidden_line(line: str) -> bool:
    """Check if a Rust code line is hidden boilerplate (``# setup();``)."""
    # Attributes stay visible
    return line.startswith("#") and not line.startswith("#[")


def hide_code_block_lines(docs: str) -> str:
    """Remove hidden lines from Rust code blocks and normalize their fences."""
    out: list[str] = []
    fence_len = 0  # backtick run of the open block, 0 outside blocks
    in_rust = False

    for line in docs.splitlines():
        fence = CODE_FENCE_RE.match(line)
        if not fence_len:
            if fence is None:
                out.append(line)
                continue
            fence_len = len(fence.group("fence"))
            in_rust = is_rust_fence(fence.group("info"))
            out.append("```rust" if in_rust else line)
        elif (
            fence is not None
            and not fence.group("info")
            and len(fence.group("fence")) >= fence_len
        ):
            out.append(line)
            fence_len = 0
        elif not in_rust or not is_hidden_line(line):
            out.append(line)

    return "\n".join(out)
