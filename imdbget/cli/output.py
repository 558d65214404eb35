"""Deliver normalized lines to stdout or a file."""
from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable, Optional, Sequence, TextIO


def _render(lines: Sequence[str]) -> str:
    return "".join(f"{line}\n" for line in lines)


def write_output(
    lines: Sequence[str],
    destination: Optional[Path],
    *,
    append: bool = False,
    quiet: bool = False,
    confirm: Optional[Callable[[str], bool]] = None,
    stream: Optional[TextIO] = None,
) -> bool:
    """Write ``lines`` according to the destination policy.

    Without a destination the lines go to ``stream`` (stdout). With
    ``append`` they are added to the end of the file. In quiet mode an
    existing file is overwritten silently; otherwise ``confirm`` is asked
    first. Returns ``False`` when the overwrite was declined.
    """

    text = _render(lines)

    if destination is None:
        (stream or sys.stdout).write(text)
        return True

    destination = destination.expanduser()
    if append:
        with destination.open("a", encoding="utf-8") as handle:
            handle.write(text)
        return True

    if destination.exists() and not quiet and confirm is not None:
        if not confirm(f"overwrite {destination}?"):
            return False

    destination.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = destination.with_suffix(destination.suffix + ".tmp")
    try:
        tmp_path.write_text(text, encoding="utf-8")
        tmp_path.replace(destination)
    finally:
        tmp_path.unlink(missing_ok=True)
    return True
