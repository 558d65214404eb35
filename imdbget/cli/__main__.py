"""Entry point for ``imdb-get`` and ``python -m imdbget.cli``."""
from __future__ import annotations

from .app import PROG_NAME, app


def main() -> None:
    """Run the imdb-get command under its installed name."""

    app(prog_name=PROG_NAME)


if __name__ == "__main__":
    main()
