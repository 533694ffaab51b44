"""Where: src/tagread/config/settings.py
What: Reader limits sourced from the configuration loaded at import time.
Why: Give the readers defaults without file I/O on every construction.
Assumptions: - ``Config`` has already replaced non-positive values with defaults.
Trade-offs: - Values are fixed at import; the CLI passes its freshly loaded ones explicitly.
"""

from __future__ import annotations

from tagread.config.config import config as app_config

# How far into a file an ID3 marker may start. Most tags sit at offset 0;
# the horizon bounds the scan for files with junk before the tag.
ID3_SEARCH_HORIZON: int = app_config.id3_search_horizon

# Guard against hostile or corrupt atom trees recursing without bound.
MP4_MAX_ATOM_DEPTH: int = app_config.mp4_max_atom_depth


__all__ = [
    "ID3_SEARCH_HORIZON",
    "MP4_MAX_ATOM_DEPTH",
]
