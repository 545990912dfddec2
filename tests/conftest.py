import logging

import pytest

from label_translator.logging import configure_logging


@pytest.fixture(autouse=True)
def reset_package_logger():
    yield
    configure_logging(level=logging.NOTSET, log_dir="")
