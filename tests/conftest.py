from __future__ import annotations

import pytest

SAMPLE = ["L68", "L30", "R48", "L5", "R60", "L55", "L1", "L99", "R14", "L82"]


@pytest.fixture
def sample_input(tmp_path):
    path = tmp_path / "day1_input_test.txt"
    path.write_text("\n".join(SAMPLE) + "\n")
    return path
