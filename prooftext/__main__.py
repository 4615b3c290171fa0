"""Module entrypoint for running prooftext as ``python -m prooftext``."""

from __future__ import annotations

from prooftext.cli import main


if __name__ == "__main__":
    main()
