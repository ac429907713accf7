import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """Install the root handler once; ``level`` comes from ``Settings.log_level``."""
    resolved = (level or "INFO").upper()
    if logging.getLevelName(resolved) == f"Level {resolved}":
        resolved = "INFO"
    logging.basicConfig(level=resolved, format=LOG_FORMAT)
    # uvicorn installs its own handlers; only align their levels.
    for name in ("uvicorn", "uvicorn.access", "uvicorn.error"):
        logging.getLogger(name).setLevel(resolved)
