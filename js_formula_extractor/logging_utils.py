from __future__ import annotations

import logging
import os
from typing import Optional

from rich.logging import RichHandler

LOG_LEVEL_ENV_VAR = 'JS_FORMULA_EXTRACTOR_LOG_LEVEL'


def setup_logging(level: Optional[str] = None) -> None:
    """Route the package's loggers through a rich console handler."""
    level = (level or os.environ.get(LOG_LEVEL_ENV_VAR) or 'INFO').upper()
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
        force=True,
    )
