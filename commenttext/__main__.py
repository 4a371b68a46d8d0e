"""Module entrypoint for running commenttext as ``python -m commenttext``."""

from __future__ import annotations

from commenttext.cli import main


if __name__ == "__main__":
    main()
