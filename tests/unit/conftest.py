# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Shared pytest configuration for semver unit tests.

Applies the ``unit`` marker to every test collected under tests/unit so the
suite can be selected with ``pytest -m unit``. A module-level ``pytestmark``
in conftest.py would not reach tests in other files, hence the hook.
"""

from pathlib import Path

import pytest

_UNIT_DIR = Path(__file__).parent


def pytest_collection_modifyitems(
    config: pytest.Config,
    items: list[pytest.Item],
) -> None:
    """Add the unit marker to tests located under tests/unit."""
    for item in items:
        if _UNIT_DIR in item.path.parents and item.get_closest_marker("unit") is None:
            item.add_marker(pytest.mark.unit)
