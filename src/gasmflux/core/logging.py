# gasmflux/core/logging.py

import logging
import os

# Third-party loggers that drown out ours at DEBUG level
NOISY_LOGGERS = ("httpx", "httpcore")

def is_debug_enabled(debug: bool = False) -> bool:
    """True if debug output was requested by flag or by GASMFLUX_DEBUG=true."""
    return debug or os.environ.get("GASMFLUX_DEBUG", "false").lower() == "true"

def setup_logging(debug: bool = False) -> None:
    """Configure root logging; DEBUG for gasmflux when debugging, WARNING otherwise."""
    level = logging.DEBUG if is_debug_enabled(debug) else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s - %(name)s - %(message)s",
        handlers=[logging.StreamHandler()]
    )
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
