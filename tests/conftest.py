from __future__ import annotations

import pytest

from cfdrain.utils.console import Console


@pytest.fixture(autouse=True)
def clear_singleton_instance() -> None:
    Console._instance = None
