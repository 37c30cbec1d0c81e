import random

import pytest

from cube import RubiksCube


@pytest.fixture
def cube():
    return RubiksCube()


@pytest.fixture
def rng():
    return random.Random(1234)
