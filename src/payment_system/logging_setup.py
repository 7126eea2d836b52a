from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: str = "INFO") -> None:
    lvl = getattr(logging, (level or "INFO").upper(), None)
    if not isinstance(lvl, int):
        lvl = logging.INFO

    logging.basicConfig(level=lvl, format=LOG_FORMAT, force=True)

    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(max(lvl, logging.WARNING))
