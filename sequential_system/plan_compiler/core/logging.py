import logging

from plan_compiler.core.config import settings


def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        fmt = logging.Formatter("[%(levelname)s] %(name)s: %(message)s")
        handler.setFormatter(fmt)
        logger.addHandler(handler)
        logger.setLevel((settings.LOG_LEVEL or "INFO").upper())
    return logger


def safe_snippet(text: str, n: int = None) -> str:
    n = settings.LOG_SNIPPET_CHARS if n is None else n
    return (text or "")[:n].replace("\n", "\\n").replace("\r", "\\r")


"""
Logging setup and it configures:
- Log format
- Log level
- Snippets of untrusted text that are safe to put on one log line

The main purpose:
Standardized application logging.
"""
