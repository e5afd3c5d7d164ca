import logging

import pytest

from critpath.input_parser import sample_records


@pytest.fixture
def diamond():
    """A(2) → B(3), C(1) → D(4)"""
    return [
        ("A", 2, "-"),
        ("B", 3, "A"),
        ("C", 1, "A"),
        ("D", 4, "B,C"),
    ]


@pytest.fixture
def demo():
    return sample_records()


@pytest.fixture
def two_cycle():
    return [("X", 1, "Y"), ("Y", 2, "X")]


@pytest.fixture(autouse=True)
def restore_root_logging():
    """setup_logging replaces the root handlers; put them back after each test"""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
