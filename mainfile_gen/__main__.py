"""Entry point: python -m mainfile_gen -o <path> -m <module> -t <type>

Writes the @main Swift file for a Swift executable target.
"""

from __future__ import annotations

from .cli import main

if __name__ == "__main__":
    main()
