from __future__ import annotations

import pytest

from seedgen.core.models import GenState
from seedgen.lcg import mk_seed


def pytest_addoption(parser: pytest.Parser) -> None:
    parser.addoption(
        "--verification-level",
        action="store",
        default="standard",
        choices=("fast", "standard"),
        help=(
            "Select test verification level: "
            "fast (skip slow property tests), "
            "standard (run all)."
        ),
    )


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    level = config.getoption("--verification-level")

    if level == "standard":
        return

    skip_slow = pytest.mark.skip(reason="skipped in fast verification level")

    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip_slow)


@pytest.fixture
def state42() -> GenState:
    return GenState(seed=mk_seed(42), size=10)
