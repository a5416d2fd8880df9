"""Structured (JSON) log output."""

import logging
from pythonjsonlogger import jsonlogger


def setup_logger(level: str = 'INFO') -> None:
    """Send JSON-formatted records from all loggers to stderr."""
    root = logging.getLogger()
    if any(getattr(handler, '_captcha_authorizer', False)
           for handler in root.handlers):
        return
    logHandler = logging.StreamHandler()
    formatter = jsonlogger.JsonFormatter('%(asctime)s %(levelname)s %(name)s %(message)s',
                                         rename_fields={'levelname': 'level', 'asctime': 'timestamp'})
    logHandler.setFormatter(formatter)
    logHandler._captcha_authorizer = True  # type: ignore
    root.addHandler(logHandler)
    root.setLevel(level)
