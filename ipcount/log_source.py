"""Log directory enumeration and file naming."""

import os
from pathlib import Path
from typing import Union

from ipcount_types import ConfigurationError


class LogSource:
    """A directory of access logs named access1.log .. accessN.log."""

    def __init__(self, directory: Union[str, Path]):
        self.directory = Path(directory)

    def count(self) -> int:
        """Count the regular files in the directory (symlinks and subdirectories excluded)."""
        try:
            with os.scandir(self.directory) as entries:
                return sum(1 for entry in entries if entry.is_file(follow_symlinks=False))
        except OSError as exc:
            raise ConfigurationError(
                f"cannot open directory ({self.directory}): {exc.strerror or exc}"
            ) from exc

    def path_for(self, file_index: int) -> Path:
        return self.directory / f"access{file_index}.log"

    def __str__(self):
        return f"LogSource({self.directory})"
