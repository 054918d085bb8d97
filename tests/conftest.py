from pathlib import Path
from typing import Dict, List

import pytest


@pytest.fixture
def make_logs(tmp_path):
    """Build a log directory from {file_index: [line, ...]}."""

    def _make(files: Dict[int, List[str]]) -> Path:
        for index, lines in files.items():
            (tmp_path / f"access{index}.log").write_text(
                "".join(line + "\n" for line in lines)
            )
        return tmp_path

    return _make


@pytest.fixture
def three_logs(make_logs):
    return make_logs(
        {
            1: ['10.0.0.1 - - "GET / HTTP/1.1" 200 10'],
            2: ['10.0.0.1 - - "GET /a HTTP/1.1" 200 10'],
            3: ['10.0.0.2 - - "GET /b HTTP/1.1" 404 0'],
        }
    )
