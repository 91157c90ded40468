# SPDX-License-Identifier: MIT

import logging
import sys
from pathlib import Path
from typing import Union


class _ConsoleNoiseFilter(logging.Filter):
    """
    Keep the terminal readable:
    - zentodo records pass at the console level
    - third-party records only at ERROR and above
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name == "zentodo" or record.name.startswith("zentodo."):
            return True
        return record.levelno >= logging.ERROR


def setup_logging(
    log_dir: Union[str, Path],
    console_level: Union[int, str] = logging.WARNING,
    file_level: Union[int, str] = logging.DEBUG,
) -> None:
    """
    Configure a filtered stderr handler and a full debug log file.

    Call this once, before the first command runs.
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "zentodo.log"

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    # Remove any pre-existing handlers to avoid duplicates.
    for handler in list(root.handlers):
        root.removeHandler(handler)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(fmt)
    console_handler.addFilter(_ConsoleNoiseFilter())
    root.addHandler(console_handler)

    file_handler = logging.FileHandler(str(log_file), encoding="utf-8")
    file_handler.setLevel(file_level)
    file_handler.setFormatter(fmt)
    root.addHandler(file_handler)

    logging.captureWarnings(True)
