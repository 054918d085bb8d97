import os

import pytest

from ipcount_types import ConfigurationError
from log_source import LogSource


def test_counts_regular_files_only(tmp_path):
    for i in range(1, 4):
        (tmp_path / f"access{i}.log").write_text("10.0.0.1\n")
    (tmp_path / "nested").mkdir()
    assert LogSource(tmp_path).count() == 3


def test_symlinks_are_not_counted(tmp_path):
    (tmp_path / "access1.log").write_text("10.0.0.1\n")
    os.symlink(tmp_path / "access1.log", tmp_path / "access2.log")
    assert LogSource(tmp_path).count() == 1


def test_empty_directory(tmp_path):
    assert LogSource(tmp_path).count() == 0


def test_missing_directory(tmp_path):
    with pytest.raises(ConfigurationError):
        LogSource(tmp_path / "nope").count()


def test_path_for(tmp_path):
    assert LogSource(tmp_path).path_for(12) == tmp_path / "access12.log"
    assert LogSource(str(tmp_path)).path_for(1) == tmp_path / "access1.log"
