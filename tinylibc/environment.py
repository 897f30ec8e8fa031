"""Lookup and update of environment variables."""

from __future__ import annotations

import os
from typing import MutableMapping, Optional


def getenv(name: Optional[str], environ: Optional[MutableMapping[str, str]] = None) -> Optional[str]:
    """Return the value of ``name`` in ``environ`` (the process environment by default), or None."""
    if name is None:
        return None
    env = os.environ if environ is None else environ
    return env.get(name)


def setenv(
    name: str,
    value: str,
    overwrite: bool = True,
    environ: Optional[MutableMapping[str, str]] = None,
) -> None:
    """Set ``name`` to ``value``; an existing variable is kept unless ``overwrite`` is true."""
    env = os.environ if environ is None else environ
    if getenv(name, env) is not None and not overwrite:
        return
    env[name] = value