import pytest
from heatgradient.colors import RED, GREEN, BLUE
from heatgradient.gradients import GradientSpec


@pytest.fixture
def rgb_gradient():
    """RED -> GREEN -> BLUE over a ten-entry colormap."""
    return GradientSpec([RED, GREEN, BLUE], [0.0, 0.5, 1.0], size=10)


@pytest.fixture
def faded_gradient():
    """Leading fade-in below 0.25 and a flat tail above 0.75."""
    return GradientSpec([GREEN, RED], [0.25, 0.75], size=100)
