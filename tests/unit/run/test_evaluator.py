"""
Unit tests for Evaluator class.
"""

import logging
import pytest
from joblib import parallel_config

from tetrineat.activations  import identity_activation
from tetrineat.genotype     import ConnectionGene, Genome
from tetrineat.phenotype    import Individual
from tetrineat.run.config   import Config
from tetrineat.run.evaluator import Evaluator


# ============================================================================
# Fitness functions
# ============================================================================

def first_output(network):
    """One pass with a unit input, scored by the first output."""
    return network.feed_forward([1.0])[0]

def second_pass_output(network):
    """Two passes with a unit input, scored by the first output of the second pass."""
    network.feed_forward([1.0])
    return network.feed_forward([1.0])[0]


# ============================================================================
# Fixtures
# ============================================================================

@pytest.fixture
def config():
    config = Config()
    config.activation = 'identity'
    return config


@pytest.fixture
def weighted_genomes():
    """Single input, single output genomes whose output equals their weight."""
    return [Genome(1, 1, genes=[ConnectionGene(0, 1, weight)]) for weight in (0.5, -2.0, 3.0, 0.0)]


@pytest.fixture
def invalid_genome():
    return Genome(1, 1, genes=[ConnectionGene(0, 5, 1.0)])


# ============================================================================
# Tests
# ============================================================================

class TestEvaluate:

    def test_serial(self, config, weighted_genomes):
        evaluator = Evaluator(config, first_output)
        assert evaluator.evaluate(weighted_genomes) == [0.5, -2.0, 3.0, 0.0]

    def test_parallel_matches_serial(self, config, weighted_genomes):
        evaluator = Evaluator(config, first_output)
        serial = evaluator.evaluate(weighted_genomes, num_jobs=1)
        with parallel_config(backend='threading'):
            parallel = evaluator.evaluate(weighted_genomes, num_jobs=2)
        assert parallel == serial

    def test_empty(self, config):
        assert Evaluator(config, first_output).evaluate([]) == []

    def test_uses_configured_activation(self, weighted_genomes):
        config = Config()
        config.activation = 'relu'
        assert Evaluator(config, first_output).evaluate(weighted_genomes) == [0.5, 0.0, 3.0, 0.0]

    def test_invalid_genome_gets_penalty(self, config, weighted_genomes, invalid_genome, caplog):
        config.invalid_genome_fitness = -100.0
        evaluator = Evaluator(config, first_output)

        with caplog.at_level(logging.WARNING, logger='tetrineat.run.evaluator'):
            fitness = evaluator.evaluate([weighted_genomes[0], invalid_genome])

        assert fitness == [0.5, -100.0]
        assert 'Invalid genome' in caplog.text

    def test_fitness_function_errors_propagate(self, config, weighted_genomes):
        def broken(network):
            raise RuntimeError("game crashed")
        with pytest.raises(RuntimeError, match="game crashed"):
            Evaluator(config, broken).evaluate(weighted_genomes)


class TestEpisodes:
    """
    Input 0, output 1, hidden 2, with a loop between 1 and 2. With identity
    activation and unit input, the output of successive passes is 0, 1, 1.5, 1.75.
    """

    def test_single_episode(self, config, recurrent_genome):
        assert Evaluator(config, second_pass_output).evaluate([recurrent_genome]) == [1.0]

    def test_reset_between_episodes(self, config, recurrent_genome):
        config.num_episodes = 2
        assert Evaluator(config, second_pass_output).evaluate([recurrent_genome]) == [1.0]

    def test_state_carries_across_episodes(self, config, recurrent_genome):
        config.num_episodes = 2
        config.reset_between_episodes = False
        assert Evaluator(config, second_pass_output).evaluate([recurrent_genome]) == [1.375]


class TestEvaluateIndividuals:

    def test_sets_fitness(self, config, weighted_genomes):
        individuals = [Individual(genome, identity_activation) for genome in weighted_genomes]
        Evaluator(config, first_output).evaluate_individuals(individuals)
        assert [i.fitness for i in individuals] == [0.5, -2.0, 3.0, 0.0]

    def test_uses_cached_network(self, config, recurrent_genome):
        config.reset_between_episodes = False
        individual = Individual(recurrent_genome, identity_activation)
        evaluator  = Evaluator(config, second_pass_output)

        evaluator.evaluate_individuals([individual])
        assert individual.fitness == 1.0
        evaluator.evaluate_individuals([individual])
        assert individual.fitness == 1.75

    def test_parallel(self, config, weighted_genomes):
        individuals = [Individual(genome, identity_activation) for genome in weighted_genomes]
        with parallel_config(backend='threading'):
            Evaluator(config, first_output).evaluate_individuals(individuals, num_jobs=2)
        assert [i.fitness for i in individuals] == [0.5, -2.0, 3.0, 0.0]

    def test_invalid_individual_gets_penalty(self, config, invalid_genome):
        config.invalid_genome_fitness = -1.0
        individual = Individual(invalid_genome)
        Evaluator(config, first_output).evaluate_individuals([individual])
        assert individual.fitness == -1.0
