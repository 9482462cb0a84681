from __future__ import annotations

from .search_state import Move, SearchState

__all__ = ["Move", "SearchState"]
