"""Console logging for ``scanline`` runs started from the command line.

Library modules only call ``logging.getLogger(__name__)``; handlers are
attached here, by the CLI, and never when scanline is imported.
"""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_default_logging(level: int | str = logging.INFO) -> None:
    """Attach a stderr handler at ``level`` unless the root logger already has one."""
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    if logging.getLogger().handlers:
        return
    logging.basicConfig(level=int(level), format=LOG_FORMAT)
