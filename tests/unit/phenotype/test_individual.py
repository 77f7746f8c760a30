"""
Unit tests for Individual class.
"""

import pytest
from itertools import count

from tetrineat.activations import identity_activation
from tetrineat.errors      import InvalidGenomeError
from tetrineat.genotype    import ConnectionGene, Genome
from tetrineat.phenotype   import Individual, NeuralNetwork


@pytest.fixture(autouse=True)
def reset_individual_id_generator():
    """Reset Individual ID generator before each test."""
    Individual._id_generator = count(0)
    yield
    Individual._id_generator = count(0)


class TestIndividual:
    """Test Individual creation and lazy decoding."""

    def test_ids_unique_and_sequential(self, multi_layer_genome):
        individuals = [Individual(multi_layer_genome) for _ in range(3)]
        assert [i.ID for i in individuals] == [0, 1, 2]

    def test_fitness_initially_none(self, multi_layer_genome):
        assert Individual(multi_layer_genome).fitness is None

    def test_genome(self, multi_layer_genome):
        assert Individual(multi_layer_genome).genome is multi_layer_genome

    def test_network_decoded_and_cached(self, multi_layer_genome):
        individual = Individual(multi_layer_genome)
        network = individual.network
        assert isinstance(network, NeuralNetwork)
        assert individual.network is network

    def test_activation_passed_to_network(self, multi_layer_genome):
        individual = Individual(multi_layer_genome, identity_activation)
        assert individual.network.activation is identity_activation

    def test_invalid_genome_raises_on_access(self):
        individual = Individual(Genome(1, 1, genes=[ConnectionGene(0, 7, 1.0)]))
        with pytest.raises(InvalidGenomeError):
            individual.network

    def test_individuals_own_separate_networks(self, recurrent_genome):
        individual1 = Individual(recurrent_genome)
        individual2 = Individual(recurrent_genome)
        assert individual1.network is not individual2.network

    def test_str(self, multi_layer_genome):
        individual = Individual(multi_layer_genome)
        assert str(individual).startswith("ID=0, fitness=None\n")
        individual.fitness = 1.5
        assert str(individual).startswith("ID=0, fitness=1.5000\n")

    def test_repr(self, multi_layer_genome):
        assert repr(Individual(multi_layer_genome)).startswith("Individual(genome=Genome(")
