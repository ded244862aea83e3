"""Default marks for tests under `tests/unit/`.

Every test here gets the `unit` mark; tests in `*_props.py` modules also get
the `property` mark so the slower Hypothesis runs can be deselected.
"""

from pathlib import Path

import pytest

# pylint: disable=unused-argument

UNIT_ROOT = Path(__file__).parent.resolve()
PROPERTY_SUFFIX = "_props"


def _has_marker(item: pytest.Item, name: str) -> bool:
    return any(marker.name == name for marker in item.iter_markers())


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Add default `unit` (and `property`) marks to items in `tests/unit/`."""
    for item in items:
        path = item.path.resolve()
        if UNIT_ROOT not in path.parents:
            continue
        if not _has_marker(item, "unit"):
            item.add_marker(pytest.mark.unit)
        if path.stem.endswith(PROPERTY_SUFFIX) and not _has_marker(item, "property"):
            item.add_marker(pytest.mark.property)
