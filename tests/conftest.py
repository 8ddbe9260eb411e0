from __future__ import annotations

import pytest

from scanline.canvas import Canvas


@pytest.fixture
def canvas() -> Canvas:
    return Canvas(10, 10, "test.png")
