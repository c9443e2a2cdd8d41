import logging

import matplotlib
import pytest

matplotlib.use("Agg")


@pytest.fixture(autouse=True)
def reset_package_logger():
    yield
    logger = logging.getLogger("physics_equations")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
