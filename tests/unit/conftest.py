import pytest

from qshell.initializer import init_properties
from qshell.runtime import global_vars


def setup():
    init_properties()


def teardown():
    global_vars.property_registry = None


@pytest.fixture(scope='session', autouse=True)
def run_before_and_after_test_case():
    setup()

    yield

    teardown()
