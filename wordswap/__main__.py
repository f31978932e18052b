"""Module entrypoint for running wordswap as ``python -m wordswap``."""

from __future__ import annotations

from wordswap.cli import main


if __name__ == "__main__":
    main()
