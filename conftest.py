"""Configures pytest further, and shares the classroom key pairs between test modules."""
import pytest

from rsateach import keygen

# Distinct prime pairs as a learner would pick them, from the textbook 11/13 up to five digits.
CLASSROOM_PAIRS = [(11, 13), (61, 53), (3, 5), (2, 3), (101, 103), (7919, 7907)]


def pytest_addoption(parser):
    parser.addoption("--skip-slow", action="store_true", default=False, help="skip slower tests")
    parser.addoption("--run-extreme", action="store_true", default=False, help="run extremely slow primality tests")


def pytest_collection_modifyitems(config, items):
    skipdict = {}
    if config.getoption("--skip-slow"):
        skipdict["slow"] = pytest.mark.skip(reason="Slow test: needs no --skip-slow option")
    if not config.getoption("--run-extreme"):
        skipdict["extreme"] = pytest.mark.skip(reason="Extreme test: needs --run-extreme option")
    for item in items:
        for k, v in skipdict.items():
            if k in item.keywords:
                item.add_marker(v)


@pytest.fixture(scope="session")
def textbook_keys() -> keygen.KeyMaterial:
    return keygen.generate_keys(11, 13).value


@pytest.fixture(scope="session", params=CLASSROOM_PAIRS, ids=lambda pair: f"{pair[0]}x{pair[1]}")
def classroom_keys(request) -> keygen.KeyMaterial:
    return keygen.generate_keys(*request.param).value
