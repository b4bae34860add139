# SPDX-License-Identifier: MIT

import logging
from pathlib import Path

from boojo import configuration

logger = logging.getLogger(__name__)


class UnknownLogCategoryError(ValueError):
    def __init__(self, category: str) -> None:
        super().__init__(
            f"Unknown log type '{category}'. "
            f"Use --log <{'|'.join(configuration.LOG_CATEGORIES)}>"
        )
        self.category = category


class LogFileRepository:
    def get_log_path(self, category: str) -> Path:
        if category not in configuration.LOG_CATEGORIES:
            raise UnknownLogCategoryError(category)
        return configuration.DATA_PATH / f"{category}.txt"

    def read_log(self, category: str) -> str:
        """Read the whole log file of a category; OSError propagates.

        Bytes that are not valid UTF-8 become U+FFFD instead of failing.
        """
        path = self.get_log_path(category)
        logger.debug("reading %s log from %s", category, path)
        return path.read_text(encoding="utf-8", errors="replace")


LOG_FILE_REPO = LogFileRepository()
