"""bondkit CLI bootstrap."""

from __future__ import annotations

from bondkit.cli import main

if __name__ == "__main__":
    main()
