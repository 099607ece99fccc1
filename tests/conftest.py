"""Global pytest fixtures for TRACKLY."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine


pytest_plugins = [
    "tests.fixtures.sqlite",
    "tests.fixtures.datagen",
]

TESTS_ROOT = Path(__file__).parent.resolve()

#: Default mark for every test under each top-level test directory.
DIRECTORY_MARKS = {
    TESTS_ROOT / "unit": "unit",
    TESTS_ROOT / "integration": "integration",
    TESTS_ROOT / "contract": "contract",
    TESTS_ROOT / "e2e": "e2e",
}


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config,  # pylint: disable=unused-argument
    items: list[pytest.Item],
) -> None:
    """Mark items by the directory they live in, unless already marked."""
    for item in items:
        path = item.path.resolve()
        for root, mark in DIRECTORY_MARKS.items():
            if root in path.parents and not any(
                marker.name == mark for marker in item.iter_markers()
            ):
                item.add_marker(getattr(pytest.mark, mark))


# Helper to route to an existing engine fixture by name
@pytest.fixture
def engine(request: pytest.FixtureRequest) -> Engine:
    """Indirection fixture to parametrize over engine-providing fixtures.

    Example:
        ```py
        @pytest.mark.parametrize(
            "engine", ["sqlite_engine_memory", "sqlite_engine_file"], indirect=True
        )
        def test_something(engine): ...
        ```
    """
    return request.getfixturevalue(request.param)
