"""Exit-code constants used by the CLI layer.

Centralised here so that every exit path uses a well-known, tested
value rather than magic integers scattered across the codebase.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Valid pizza, or help/version shown."""

GENERAL_ERROR: int = 1
"""Invalid pizza, unreadable file, malformed JSON, bad arguments, or any
unexpected failure."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C.  Follows POSIX convention (128 + SIGINT=2)."""
