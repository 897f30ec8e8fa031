"""Compiler driver that runs gcc against the library headers and objects.

``LD_PATHS`` names the include directory and ``SO_PATHS`` a colon-separated
list of objects appended after the user's arguments.
"""

from __future__ import annotations

import os
import subprocess
import sys
from itertools import islice
from typing import Iterable, Mapping, Optional, Sequence

MAX_ARGS = 1024


def build_command(args: Iterable[str], environ: Optional[Mapping[str, str]] = None) -> list[str]:
    """Return the gcc command line for ``args``; raise LookupError if a variable is unset."""
    env = os.environ if environ is None else environ
    lib_paths = env.get("LD_PATHS")
    if lib_paths is None:
        raise LookupError("LD_PATHS environment variable not set")

    limit = MAX_ARGS - 1
    command = ["gcc", "-Wno-builtin-declaration-mismatch", "-I", lib_paths]
    command.extend(islice(args, max(0, limit - len(command))))

    so_paths = env.get("SO_PATHS")
    if so_paths is None:
        raise LookupError("SO_PATHS environment variable not set")
    tokens = (token for token in so_paths.split(":") if token)
    command.extend(islice(tokens, max(0, limit - len(command))))
    return command


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run gcc with the built command line and return its exit status."""
    args = sys.argv[1:] if argv is None else argv
    try:
        command = build_command(args)
    except LookupError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    try:
        completed = subprocess.run(command, check=False)
    except OSError as exc:
        print(f"execvp failed: {exc}", file=sys.stderr)
        return 1
    return completed.returncode if completed.returncode >= 0 else 1


if __name__ == "__main__":
    sys.exit(main())