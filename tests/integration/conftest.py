"""
Shared fixtures for integration tests.
"""

import pytest
from itertools import count


@pytest.fixture(autouse=True)
def reset_individual_ids():
    """Reset the Individual ID generator so IDs start from 0 in each test."""
    from tetrineat.phenotype.individual import Individual
    Individual._id_generator = count(0)


@pytest.fixture
def game_config(tmp_path):
    """A configuration file as a game-playing run would use it."""
    path = tmp_path / 'tetris.ini'
    path.write_text("[NETWORK]\n"
                    "activation = identity\n"
                    "\n"
                    "[CONTROLLER]\n"
                    "use_bias   = True\n"
                    "bias_value = 1.0\n"
                    "\n"
                    "[EVALUATION]\n"
                    "num_jobs     = 1\n"
                    "num_episodes = 2\n")
    return str(path)
