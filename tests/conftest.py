import logging

import pytest

from tests.helpers import K, V


@pytest.fixture
def square_path():
    """Unit square as a path node."""
    return V(K("path"),
             K("M"), V(0, 0),
             K("L"), V(1, 0),
             K("L"), V(1, 1),
             K("L"), V(0, 1),
             K("Z"))


@pytest.fixture
def glisp_caplog(caplog):
    """caplog capturing the glisp loggers at DEBUG."""
    caplog.set_level(logging.DEBUG, logger="glisp")
    return caplog
