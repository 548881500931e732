import logging
import os
from typing import Optional

DEFAULT_NOISY_LIBS = {"pymongo": logging.WARNING, "testcontainers": logging.WARNING}


def setup_logging(level: Optional[str] = None, noisy_libs: Optional[dict[str, int]] = None) -> None:
    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S")
    )
    logging.basicConfig(
        level=(level or os.getenv("LOG_LEVEL", "INFO")).upper(),
        handlers=[handler],
        force=True,
    )

    for lib, lib_level in (noisy_libs if noisy_libs is not None else DEFAULT_NOISY_LIBS).items():
        logging.getLogger(lib).setLevel(lib_level)
