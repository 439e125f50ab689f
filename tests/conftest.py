import pytest

from samples import make_metrics


@pytest.fixture
def neutral_metrics():
    return make_metrics()
