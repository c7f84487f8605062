import matplotlib

# Headless runs must not open a window
matplotlib.use("Agg")

import pytest

from ll1 import grammars


@pytest.fixture
def expression():
    return grammars.expression


@pytest.fixture(params=sorted(grammars.SAMPLES))
def sample(request):
    return grammars.SAMPLES[request.param]
