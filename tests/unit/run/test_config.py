"""
Unit tests for Config class.
"""

import pytest
from tetrineat.run.config import Config


# ============================================================================
# Fixtures
# ============================================================================

@pytest.fixture
def write_config(tmp_path):
    """Return a helper writing an INI file and returning its path."""
    def _write(text, name='config.ini'):
        path = tmp_path / name
        path.write_text(text)
        return str(path)
    return _write


FULL_CONFIG = """
[NETWORK]
activation = tanh

[CONTROLLER]
use_bias   = False
bias_value = 0.5

[EVALUATION]
num_jobs               = 4
num_episodes           = 3
reset_between_episodes = False
invalid_genome_fitness = -1.0
"""


# ============================================================================
# Test Config Initialization
# ============================================================================

class TestConfigInit:
    """Test Config initialization."""

    def test_init_without_file_creates_default_config(self):
        """Test that Config() without file holds the default values."""
        config = Config()

        assert config.activation == 'logistic'
        assert config.use_bias is True
        assert config.bias_value == 1.0
        assert config.num_jobs == 1
        assert config.num_episodes == 1
        assert config.reset_between_episodes is True
        assert config.invalid_genome_fitness == 0.0

    def test_init_with_nonexistent_file_raises_error(self):
        """Test that Config with nonexistent file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError, match="Configuration file .* not found"):
            Config('nonexistent_file.ini')

    def test_init_with_empty_file_uses_defaults(self, write_config):
        """Every key is optional."""
        config = Config(write_config(""))

        assert config.activation == 'logistic'
        assert config.use_bias is True
        assert config.num_episodes == 1

    def test_init_with_full_config(self, write_config):
        config = Config(write_config(FULL_CONFIG))

        assert config.activation == 'tanh'
        assert config.use_bias is False
        assert config.bias_value == 0.5
        assert config.num_jobs == 4
        assert config.num_episodes == 3
        assert config.reset_between_episodes is False
        assert config.invalid_genome_fitness == -1.0


# ============================================================================
# Test Config Validation
# ============================================================================

class TestConfigValidation:
    """Test validation of configuration values."""

    def test_invalid_activation_in_file(self, write_config):
        with pytest.raises(ValueError, match="Invalid activation function 'bogus'"):
            Config(write_config("[NETWORK]\nactivation = bogus\n"))

    def test_invalid_activation_assigned(self):
        config = Config()
        with pytest.raises(ValueError, match="Invalid activation function"):
            config.activation = 'legendre'

    def test_activation_assignment_strips_whitespace(self):
        config = Config()
        config.activation = '  relu '
        assert config.activation == 'relu'

    def test_num_episodes_must_be_positive(self, write_config):
        with pytest.raises(ValueError, match="'num_episodes' must be at least 1"):
            Config(write_config("[EVALUATION]\nnum_episodes = 0\n"))

    def test_zero_num_jobs_rejected(self, write_config):
        with pytest.raises(ValueError, match="'num_jobs' must be non-zero"):
            Config(write_config("[EVALUATION]\nnum_jobs = 0\n"))

    def test_negative_num_jobs_accepted(self, write_config):
        """Negative values follow joblib: -1 means all CPU cores."""
        assert Config(write_config("[EVALUATION]\nnum_jobs = -1\n")).num_jobs == -1

    def test_malformed_number_raises(self, write_config):
        with pytest.raises(ValueError):
            Config(write_config("[EVALUATION]\nnum_jobs = many\n"))

    def test_boolean_spellings(self, write_config):
        config = Config(write_config("[CONTROLLER]\nuse_bias = no\n"))
        assert config.use_bias is False

    def test_other_attributes_unvalidated(self):
        config = Config()
        config.num_jobs = -1
        assert config.num_jobs == -1
