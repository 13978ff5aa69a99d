"""Filesystem adapter for the config file."""

from __future__ import annotations

import os
from pathlib import Path


class FileConfigStorage:
    def __init__(self, config_dir: Path, config_file: Path):
        self._dir = Path(config_dir)
        self._file = Path(config_file)

    def ensure_dir(self) -> None:
        self._dir.mkdir(parents=True, exist_ok=True)

    def exists(self) -> bool:
        return self._file.exists()

    def read_text(self) -> str:
        with self._file.open("r", encoding="utf-8") as handle:
            return handle.read()

    def write_text(self, text: str) -> None:
        with self._file.open("w", encoding="utf-8") as handle:
            handle.write(text)
            handle.flush()
            os.fsync(handle.fileno())

    def describe(self) -> str:
        return str(self._file)
