"""
Tetrineat Evaluator Module

This module computes the fitness of many genomes, serially or in parallel
using joblib. Evaluations are independent: each one decodes its own network,
so no value buffer is ever shared between two evaluations.

A genome that fails to decode is not fatal to the run: it is logged and
given the configured penalty fitness, so the evolutionary loop can discard it.

Classes:
    Evaluator: Fitness evaluation of genomes and individuals
"""

import logging
from joblib     import Parallel, delayed
from statistics import mean
from typing     import Callable, Sequence, TYPE_CHECKING

from tetrineat.activations import get_activation
from tetrineat.errors      import InvalidGenomeError
from tetrineat.phenotype   import decode

if TYPE_CHECKING:
    from tetrineat.genotype  import Genome
    from tetrineat.phenotype import Individual, NeuralNetwork
    from tetrineat.run.config import Config

logger = logging.getLogger(__name__)

FitnessFunction = Callable[['NeuralNetwork'], float]

class Evaluator:
    """
    Evaluates the fitness of genomes with a user-supplied fitness function.

    The fitness function receives a decoded network, plays one episode with it
    (typically one game, calling 'feed_forward' once per tick) and returns a
    score. The fitness of a genome is the mean score over 'num_episodes'
    episodes. When 'reset_between_episodes' is set, the network's recurrent
    state is cleared before each episode.

    For parallel evaluation the fitness function must be picklable.

    Parallelization of fitness evaluation:
        num_jobs=1:  Serial evaluation (no parallelization)
        num_jobs>1:  Use specified number of parallel processes
        num_jobs=-1: Use all available CPU cores

    Public Methods:
        evaluate(genomes, num_jobs):                Return the fitness of each genome
        evaluate_individuals(individuals, num_jobs): Set the fitness of each individual
    """

    def __init__(self, config: 'Config', fitness_fn: FitnessFunction):
        """
        Parameters:
            config:     Configuration parameters ([NETWORK] and [EVALUATION] sections)
            fitness_fn: Plays one episode with a network and returns its score
        """
        self._config     = config
        self._fitness_fn = fitness_fn
        self._activation = get_activation(config.activation)

    def evaluate(self, genomes: Sequence['Genome'], num_jobs: int | None = None) -> list[float]:
        """
        Evaluate the fitness of each genome.

        Parameters:
            genomes:  The genomes to evaluate
            num_jobs: Number of parallel processes (defaults to 'config.num_jobs')

        Returns:
            One fitness per genome, in the same order
        """
        num_jobs = self._config.num_jobs if num_jobs is None else num_jobs
        settings = self._settings()

        if num_jobs == 1:
            return [_evaluate_genome(genome, *settings) for genome in genomes]
        return Parallel(num_jobs)(delayed(_evaluate_genome)(genome, *settings) for genome in genomes)

    def evaluate_individuals(self, individuals: Sequence['Individual'], num_jobs: int | None = None) -> None:
        """
        Evaluate the fitness of each individual and store it in 'individual.fitness'.

        Each individual runs its own network, decoded with the activation it was
        created with. When run serially, the network cached on the individual is used.

        Parameters:
            individuals: The individuals to evaluate
            num_jobs:    Number of parallel processes (defaults to 'config.num_jobs')
        """
        num_jobs = self._config.num_jobs if num_jobs is None else num_jobs
        settings = self._settings()[1:]

        if num_jobs == 1:
            for individual in individuals:
                individual.fitness = _evaluate_individual(individual, *settings)
        else:
            fitness_all = Parallel(num_jobs)(delayed(_evaluate_individual)(i, *settings) for i in individuals)
            for individual, fitness in zip(individuals, fitness_all):
                individual.fitness = fitness

    def _settings(self) -> tuple:
        return (self._activation,
                self._fitness_fn,
                self._config.num_episodes,
                self._config.reset_between_episodes,
                self._config.invalid_genome_fitness)

def _evaluate_genome(genome, activation, fitness_fn, num_episodes, reset, invalid_fitness) -> float:
    try:
        network = decode(genome, activation)
    except InvalidGenomeError as error:
        logger.warning("Invalid genome given fitness %s: %s", invalid_fitness, error)
        return invalid_fitness
    return _run_episodes(network, fitness_fn, num_episodes, reset)

def _evaluate_individual(individual, fitness_fn, num_episodes, reset, invalid_fitness) -> float:
    try:
        network = individual.network
    except InvalidGenomeError as error:
        logger.warning("Individual %d given fitness %s: %s", individual.ID, invalid_fitness, error)
        return invalid_fitness
    return _run_episodes(network, fitness_fn, num_episodes, reset)

def _run_episodes(network, fitness_fn, num_episodes, reset) -> float:
    scores = []
    for _ in range(num_episodes):
        if reset:
            network.reset()
        scores.append(float(fitness_fn(network)))
    return mean(scores)
