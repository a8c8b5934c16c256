from __future__ import annotations

import pytest

from iterkit import Strings


@pytest.fixture
def words() -> Strings:
    return Strings(["abc", "bbc", "abccd", "abcdd"])


@pytest.fixture
def mixed() -> Strings:
    return Strings(["a", "1", "b", "2"])
