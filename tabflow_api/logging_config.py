from __future__ import annotations

import logging


def configure_app_logging(level: str = "INFO") -> None:
    """
    Minimal logging configuration for this repo.

    Notes:
    - Uvicorn already configures handlers; this function mainly sets levels for our package.
    - Set `APP_LOG_LEVEL=DEBUG` (or INFO/WARNING/ERROR) to control verbosity.
    - urllib3 logs full request lines at DEBUG. The tokeninfo request line
      contains the access token, so urllib3 is held at WARNING regardless.
    """

    normalized = level.upper()
    logging.getLogger("tabflow_api").setLevel(normalized)
    logging.getLogger("tabflow_api").propagate = True
    logging.getLogger("urllib3").setLevel(logging.WARNING)
