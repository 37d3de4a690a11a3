# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
import sys
from pathlib import Path

import pytest


def _add_src_to_path() -> None:
    root = Path(__file__).resolve().parents[1]
    src_path = root / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))


_add_src_to_path()


@pytest.fixture
def sample_js() -> str:
    """Four-line JavaScript source with two functions and two classes."""
    return "\n".join(
        [
            "function testFunction1() {}",
            "const testFunction2 = () => {};",
            "class TestClass1 {}",
            "class TestClass2 {}",
        ]
    )
