"""
Base exception for the bindgen pipeline.

Each stage defines its own error family next to the code that raises it
(lexer, parser, backends, output writer); they all derive from
FrukoBindgenError so callers can catch the whole family at once.
"""

from __future__ import annotations


class FrukoBindgenError(Exception):
    """Base exception for all pipeline errors."""

    pass
