"""Configuration constants."""

from __future__ import annotations

# Mode for every directory copy_dir creates; the process umask still applies.
DIR_MODE: int = 0o777
