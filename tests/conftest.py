from __future__ import annotations

from typing import Any

import pytest

from surrogate import GeneratedValue, ValueGenerator


@pytest.fixture(scope="session")
def generator() -> ValueGenerator:
    return ValueGenerator()


@pytest.fixture
def gen(generator: ValueGenerator) -> Any:
    def _gen(kind: str, **params: Any) -> GeneratedValue:
        return generator.generate(kind, **params)

    return _gen
