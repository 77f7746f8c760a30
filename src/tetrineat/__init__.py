"""
Tetrineat - NEAT genome decoding and evaluation for game-playing agents.

This package turns NEAT genomes (variable-topology, possibly cyclic encodings
of neural networks) into executable networks and runs them deterministically,
many times per second, across a population of independently evolving genomes.
The evolutionary algorithm and the game itself live elsewhere: this package
consumes finished genomes and produces actions and fitness values.

Main components:
- genotype:    Genetic encoding (genomes, connection genes)
- phenotype:   Decoding and execution (decode, NeuralNetwork, Individual)
- activations: Activation functions for neural networks
- run:         Configuration, environment controller, fitness evaluation

Example:
    >>> from tetrineat import ConnectionGene, Genome, decode
    >>> genome  = Genome(1, 1, genes=[ConnectionGene(0, 1, 1.0)])
    >>> network = decode(genome)
    >>> outputs = network.feed_forward([0.5])
"""

__version__ = "0.1.0"

# Import main classes for convenient access
from tetrineat.errors    import InvalidGenomeError, InputLengthMismatchError, TetrineatError
from tetrineat.genotype  import ConnectionGene, Genome
from tetrineat.phenotype import decode, Individual, NeuralNetwork, NonInputNode
from tetrineat.run       import Config, Evaluator, NetworkController

__all__ = [
    "Config",
    "ConnectionGene",
    "decode",
    "Evaluator",
    "Genome",
    "Individual",
    "InputLengthMismatchError",
    "InvalidGenomeError",
    "NetworkController",
    "NeuralNetwork",
    "NonInputNode",
    "TetrineatError",
]
