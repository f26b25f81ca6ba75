"""Configuration defaults for lazygraph algorithms."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class SearchConfig:
    """Defaults shared by path enumeration and DOT export."""

    # Cap on completed paths in simple_paths; None enumerates exhaustively
    max_simple_paths: Optional[int] = None

    # Indentation of statements inside the DOT body
    dot_indent: str = "   "

    # Optional name placed after the ``digraph`` keyword
    dot_graph_name: str = ""

    def effective_max_paths(self, override: Optional[int] = None) -> Optional[int]:
        """Resolve an explicit cap against the configured default.

        Raises:
            ValueError: If the resolved cap is negative.
        """
        limit = self.max_simple_paths if override is None else override
        if limit is not None and limit < 0:
            raise ValueError(f"max_paths must be non-negative, got {limit}")
        return limit


# Global configuration instance, read at call time
SEARCH_CONFIG = SearchConfig()
