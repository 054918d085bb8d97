from pathlib import Path

import pytest

tomllib = pytest.importorskip("tomllib")

PYPROJECT = Path(__file__).resolve().parent.parent / "pyproject.toml"


def test_example_script_is_not_installed():
    with open(PYPROJECT, "rb") as f:
        config = tomllib.load(f)
    modules = config["tool"]["setuptools"]["py-modules"]
    assert "example_access_logs" not in modules
    assert "count_ips" in modules
