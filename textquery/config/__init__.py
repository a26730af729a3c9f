"""Configuration module for textquery.

Public API:
----------
settings: Settings instance
    Pydantic settings object with nested configuration

get_logger(name: str) -> Logger
    Get a context-aware logger for your module

setup_loguru_logger(verbose: bool = False) -> None
    Configure Loguru logger for the application

Usage:
------
```python
from textquery.config import settings
count = settings.commands.default_limit_count

from textquery.config import get_logger
logger = get_logger(__name__)
logger.info("Running query")
```
"""

from .logging import get_logger, setup_loguru_logger
from .settings import settings

__all__ = [
    "get_logger",
    "settings",
    "setup_loguru_logger",
]
