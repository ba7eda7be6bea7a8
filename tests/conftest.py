from __future__ import annotations

from collections.abc import Iterator

import pytest

from dungeonkit.util import rng


@pytest.fixture(autouse=True)
def seeded_rng_streams() -> Iterator[None]:
    """Give every test the same deterministic shared RNG streams."""
    rng.init("test-seed")
    yield
    rng.init("test-seed")
