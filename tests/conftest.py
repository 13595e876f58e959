"""Test configuration and fixtures for colorkit tests."""

import numpy as np
import pytest
from hypothesis import settings

from colorkit.types import Color

# Configure hypothesis settings for faster tests
settings.register_profile("fast", max_examples=50, deadline=None)
settings.load_profile("fast")


@pytest.fixture
def primary_colors() -> dict[str, Color]:
    """Provide primary and secondary colors by name."""
    return {
        "red": Color(1.0, 0.0, 0.0),
        "green": Color(0.0, 1.0, 0.0),
        "blue": Color(0.0, 0.0, 1.0),
        "cyan": Color(0.0, 1.0, 1.0),
        "magenta": Color(1.0, 0.0, 1.0),
        "yellow": Color(1.0, 1.0, 0.0),
    }


@pytest.fixture(autouse=True)
def reset_random_seed():
    """Reset numpy random seed before each test for reproducibility."""
    np.random.seed(42)


class FixedRng:
    """Random source that always returns the same value and records calls."""

    def __init__(self, value: float) -> None:
        self.value = value
        self.calls: list[tuple[float, float]] = []

    def uniform(self, low: float, high: float) -> float:
        self.calls.append((low, high))
        return self.value


@pytest.fixture
def fixed_rng():
    """Factory for random sources returning a fixed value."""
    return FixedRng


class ColorTestHelpers:
    """Helper class with utility methods for color testing."""

    @staticmethod
    def colors_approximately_equal(
        color1: tuple[float, ...], color2: tuple[float, ...], tolerance: float = 1e-6
    ) -> bool:
        """Check if the RGB channels of two colors are equal within tolerance."""
        return all(abs(c1 - c2) < tolerance for c1, c2 in zip(color1[:3], color2[:3]))

    @staticmethod
    def hue_distance(h1: float, h2: float) -> float:
        """Circular distance between two hues in turns."""
        d = abs(h1 - h2) % 1.0
        return min(d, 1.0 - d)


@pytest.fixture
def color_helpers() -> ColorTestHelpers:
    """Provide helper methods for color testing."""
    return ColorTestHelpers()
