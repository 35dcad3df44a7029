import pytest

from bigcolor import BigColor


@pytest.fixture
def red():
    return BigColor.parse("red")


@pytest.fixture
def blue():
    return BigColor.parse("blue")


@pytest.fixture
def white():
    return BigColor(255, 255, 255)


@pytest.fixture
def black():
    return BigColor(0, 0, 0)

