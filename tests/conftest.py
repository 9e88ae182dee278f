import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def _drop_log_handlers():
    yield
    # CliRunner closes the streams a sink may still point at
    logger.remove()
