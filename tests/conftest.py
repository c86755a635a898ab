import pytest

from contract_cost.logging_config import reset_logging


def pytest_configure(config):
    """
    Register custom markers to avoid pytest warnings.
    """
    config.addinivalue_line("markers", "unit: mark a test as a unit test")
    config.addinivalue_line("markers", "integration: mark a test as an integration test")


@pytest.fixture
def single_step_group():
    # headcount=2, union=$100,000, mgmt=$90,000
    return {
        "name": "Attorneys",
        "union_raise": 10,
        "mgmt_raise": 5,
        "steps": "2\t$100,000\t$90,000",
    }


@pytest.fixture
def attorney_steps_text():
    return "3\t$83,500\t$80,659.71\n0\t$85,500\t$82,782.34\n4\t$88,666\t$84,904.96\n"


@pytest.fixture
def clean_logging():
    reset_logging()
    yield
    reset_logging()
