"""
Tetrineat Individual Module

This module implements the Individual class, pairing a genome with the network
decoded from it and the fitness the network earned.

Classes:
    Individual: A genome, its lazily decoded network, and a fitness
"""

from itertools import count
from typing    import Callable, Optional, TYPE_CHECKING

from tetrineat.phenotype.builder import decode

if TYPE_CHECKING:
    from tetrineat.genotype          import Genome
    from tetrineat.phenotype.network import NeuralNetwork

class Individual:
    """
    An individual organism of an evolving population.

    You can regard an individual as a thin wrapper around the network that
    powers it, to which it adds a unique ID and a fitness. The network is
    decoded on first use and then cached, so one network serves every tick of
    every game the individual plays; it is discarded with the individual.

    Public Attributes:
        ID:      Unique identifier for this individual
        fitness: Fitness score (None until evaluated)

    Public Properties:
        genome:  The genome this individual was created from
        network: The decoded network (raises InvalidGenomeError for a malformed genome)
    """

    _id_generator = count(0)

    def __init__(self,
                 genome    : 'Genome',
                 activation: Callable[[float], float] | None = None):
        """
        Parameters:
            genome:     The Genome encoding the neural network that powers this Individual
            activation: Activation function for the network (decoder default if None)
        """
        self.ID     : int             = next(Individual._id_generator)
        self.fitness: Optional[float] = None

        self._genome     = genome
        self._activation = activation
        self._network: Optional['NeuralNetwork'] = None

    @property
    def genome(self) -> 'Genome':
        return self._genome

    @property
    def network(self) -> 'NeuralNetwork':
        if self._network is None:
            self._network = decode(self._genome, self._activation)
        return self._network

    def __str__(self):
        fitness = "None" if self.fitness is None else f"{self.fitness:.4f}"
        return f"ID={self.ID}, fitness={fitness}\n{self._genome}"

    def __repr__(self):
        return f"Individual(genome={repr(self._genome)})"
