"""Interactive lookup of one environment variable."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from .environment import getenv
from .formatting import printf, scanf


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Ask for a variable name on standard input and print its value."""
    printf("Variable name: ")
    name = scanf("%s")
    printf("Value: %s\n", getenv(name))
    return 0


if __name__ == "__main__":
    sys.exit(main())