"""
common/io_utils.py
------------------
Logging and JSON helpers shared by the arrange engine, the CLI and the API.
"""

import os
import json
import logging
from pathlib import Path
from typing import Any, Dict, Union, Optional


# -------------------------------------------------------
# Logging utilities
# -------------------------------------------------------

LOGGER_NAME = "arrange"


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None
) -> None:
    """Configure logging with optional file output"""
    format_str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

    logging.basicConfig(
        level=level,
        format=format_str,
        handlers=[
            logging.StreamHandler(),
            *([] if not log_file else [logging.FileHandler(log_file)])
        ]
    )


def log(message: str, level: str = "INFO") -> None:
    """Log through the shared 'arrange' logger"""
    logger = logging.getLogger(LOGGER_NAME)
    level_map = {
        "INFO": logging.INFO,
        "ERROR": logging.ERROR,
        "WARNING": logging.WARNING,
        "WARN": logging.WARNING,
        "DEBUG": logging.DEBUG,
        "OK": logging.INFO
    }
    logger.log(level_map.get(level, logging.INFO), message)


# -------------------------------------------------------
# JSON / file utilities
# -------------------------------------------------------

def read_json(filepath: Union[str, Path]) -> Dict[str, Any]:
    """Read JSON file with UTF-8 encoding"""
    with open(filepath, 'r', encoding='utf-8') as f:
        return json.load(f)


def write_json(
    data: Dict[str, Any],
    filepath: Union[str, Path],
    pretty: bool = True
) -> None:
    """Write JSON file with UTF-8 encoding, creating parent directories"""
    parent = os.path.dirname(str(filepath))
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(filepath, 'w', encoding='utf-8') as f:
        json.dump(
            data,
            f,
            indent=2 if pretty else None,
            ensure_ascii=False
        )
