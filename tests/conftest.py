"""Global pytest configuration.

Graph fixtures shared by the algorithm tests live in
``tests/algorithms/conftest.py``; this file only resets package-wide state.
"""

from __future__ import annotations

import pytest

from lazygraph.config import SEARCH_CONFIG


@pytest.fixture(autouse=True)
def _restore_search_config():
    """Tests may tweak the global config; put the defaults back afterwards."""
    saved = (
        SEARCH_CONFIG.max_simple_paths,
        SEARCH_CONFIG.dot_indent,
        SEARCH_CONFIG.dot_graph_name,
    )
    yield
    (
        SEARCH_CONFIG.max_simple_paths,
        SEARCH_CONFIG.dot_indent,
        SEARCH_CONFIG.dot_graph_name,
    ) = saved
