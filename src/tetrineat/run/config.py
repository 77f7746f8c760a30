import configparser
import os
from tetrineat.activations import activations, DEFAULT_ACTIVATION

class Config:

    @staticmethod
    def _parse_activation(raw_name):
        """
        Validate an activation function name.

        Parameters:
            raw_name: Name of an entry in the activations registry

        Returns:
            The name, stripped of surrounding whitespace
        """
        name = raw_name.strip()
        if name not in activations:
            raise ValueError(f"Invalid activation function '{name}' in configuration")
        return name

    def __init__(self, config_file: str | None = None):
        """
        Initialize Config by parsing an INI file, or create a default Config.

        Parameters:
            config_file: Path to the INI configuration file.
                         If None, creates a Config holding default values,
                         for testing and manual attribute setting.
        """

        # Default config for testing/manual setup
        if config_file is None:
            self.activation = DEFAULT_ACTIVATION

            self.use_bias   = True
            self.bias_value = 1.0

            self.num_jobs               = 1
            self.num_episodes           = 1
            self.reset_between_episodes = True
            self.invalid_genome_fitness = 0.0

            return

        if not os.path.exists(config_file):
            raise FileNotFoundError(f"Configuration file '{config_file}' not found")

        parser = configparser.ConfigParser()
        parser.read(config_file)

        # Sentinel for missing default values
        _NO_DEFAULT = object()

        # Helper function to safely parse values
        def get_value(section, key, value_type, default=_NO_DEFAULT):
            try:
                raw_value = parser.get(section, key)
                if raw_value.lower() == 'none':
                    return None
                if value_type == int:
                    return parser.getint(section, key)
                elif value_type == float:
                    return parser.getfloat(section, key)
                elif value_type == bool:
                    return parser.getboolean(section, key)
                elif value_type == str:
                    return raw_value
            except (configparser.NoSectionError, configparser.NoOptionError):
                if default is not _NO_DEFAULT:
                    return default
                raise

        # [NETWORK]

        # Activation function applied at every hidden and output node.
        # Options: any key of the activations registry (see 'basic_activations.py').
        self.activation = get_value('NETWORK', 'activation', str, default=DEFAULT_ACTIVATION)

        # [CONTROLLER]

        # Whether a constant bias term is appended to the flattened board
        # when building the network's input vector.
        self.use_bias = get_value('CONTROLLER', 'use_bias', bool, default=True)

        # The value of the constant bias term (only applicable if 'use_bias' is 'True').
        self.bias_value = get_value('CONTROLLER', 'bias_value', float, default=1.0)

        # [EVALUATION]

        # Number of parallel processes used to evaluate genomes.
        #   1 = serial, -1 = all available CPU cores, >1 = that many processes
        self.num_jobs = get_value('EVALUATION', 'num_jobs', int, default=1)

        # Number of episodes (games) to average over for fitness evaluation.
        self.num_episodes = get_value('EVALUATION', 'num_episodes', int, default=1)

        # Whether to clear the network's recurrent state before each episode.
        self.reset_between_episodes = get_value('EVALUATION', 'reset_between_episodes', bool, default=True)

        # The fitness assigned to a genome that fails to decode.
        self.invalid_genome_fitness = get_value('EVALUATION', 'invalid_genome_fitness', float, default=0.0)

        if self.num_jobs == 0:
            raise ValueError("'num_jobs' must be non-zero (1 = serial, -1 = all CPU cores)")
        if self.num_episodes < 1:
            raise ValueError(f"'num_episodes' must be at least 1, got {self.num_episodes}")

    def __setattr__(self, name, value):
        """
        Override 'setattr' to validate the activation name whenever it is set,
        whether read from a file or assigned by hand.
        """
        if name == 'activation':
            value = self._parse_activation(value)
        super().__setattr__(name, value)
