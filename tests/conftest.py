import logging

import pytest


@pytest.fixture(autouse=True)
def _reset_rowdb_logger():
    """main() installs handlers on the 'rowdb' logger; drop them between tests."""
    yield
    logger = logging.getLogger("rowdb")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
