import socket

import matplotlib

matplotlib.use("Agg")

import pytest

from tests.helpers import FakeExecutor


@pytest.fixture
def fake_executor():
    return FakeExecutor()


@pytest.fixture
def unused_port():
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind(("127.0.0.1", 0))
        return s.getsockname()[1]
