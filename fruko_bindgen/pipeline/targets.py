"""
Compilation target registry.

Maps a target identifier, as given on the command line, to the backend that
generates code for it. The table is fixed; lookups are case sensitive.
"""

from __future__ import annotations

import logging
from enum import Enum

from .backends import CodeBackend, CXXBackend, TSMobXBackend, UnknownTargetError

logger = logging.getLogger(__name__)


class CompilationTarget(str, Enum):
    """The supported compilation targets."""

    CXX = "cxx"
    TS_MOBX = "ts-mobx"


# Accepted spellings for each target
TARGET_ALIASES: dict[str, CompilationTarget] = {
    "cxx": CompilationTarget.CXX,
    "cpp": CompilationTarget.CXX,
    "c++": CompilationTarget.CXX,
    "ts-mobx": CompilationTarget.TS_MOBX,
    "typescript-mobx": CompilationTarget.TS_MOBX,
}

BACKENDS: dict[CompilationTarget, type[CodeBackend]] = {
    CompilationTarget.CXX: CXXBackend,
    CompilationTarget.TS_MOBX: TSMobXBackend,
}


def available_targets() -> list[str]:
    """All accepted target identifiers, in table order."""
    return list(TARGET_ALIASES)


def parse_target(name: str) -> CompilationTarget:
    """
    Resolve a target identifier to a CompilationTarget.

    Args:
        name: Target identifier, e.g. "cpp" or "ts-mobx"

    Raises:
        UnknownTargetError: If name is not a known identifier
    """
    if name not in TARGET_ALIASES:
        raise UnknownTargetError(name, available_targets())
    return TARGET_ALIASES[name]


def resolve_target(name: str) -> CodeBackend:
    """
    Resolve a target identifier to a new backend instance.

    Args:
        name: Target identifier

    Returns:
        The backend generating code for the target

    Raises:
        UnknownTargetError: If name is not a known identifier
    """
    target = parse_target(name)
    logger.debug("Resolved target '%s' to %s", name, target.name)
    return BACKENDS[target]()
