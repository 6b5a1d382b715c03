import logging
import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parent.parent))


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    # Settings are read from the environment; start every test from defaults.
    monkeypatch.delenv("SORTED_LIST_LOG_LEVEL", raising=False)
    monkeypatch.delenv("SORTED_LIST_FAIL_FAST", raising=False)
    package_logger = logging.getLogger("sorted_linked_list")
    handlers = list(package_logger.handlers)
    level = package_logger.level
    yield
    package_logger.handlers[:] = handlers
    package_logger.setLevel(level)
