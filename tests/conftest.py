import logging

import pytest


@pytest.fixture(autouse=True)
def _restore_log_handlers():
    root = logging.getLogger("textscrape")
    before = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler not in before:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
