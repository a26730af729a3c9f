import pytest
from loguru import logger


@pytest.fixture
def log_records():
    """Capture Loguru records emitted during a test."""
    records = []
    handler_id = logger.add(records.append, level="DEBUG", format="{message}")
    yield records
    logger.remove(handler_id)
