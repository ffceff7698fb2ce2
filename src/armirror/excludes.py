from __future__ import annotations

from .config import DEFAULT_CONFIG, MirrorConfig


def is_excluded_file_name(name: str, config: MirrorConfig = DEFAULT_CONFIG) -> bool:
    # Exact name match, no globbing.
    return name in config.excluded_file_names
