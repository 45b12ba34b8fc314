"""Module entrypoint for running kdocfmt as ``python -m kdocfmt``."""

from __future__ import annotations

from kdocfmt.cli import main


if __name__ == "__main__":
    main()
