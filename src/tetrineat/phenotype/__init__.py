"""
Tetrineat Phenotype Package

This package implements the phenotype: the executable network expressed by a
genome. Decoding resolves a possibly-cyclic genome into a flat list of nodes in
evaluation order, with recurrent edges marked explicitly; the resulting network
runs one propagation pass per call.

Modules:
    network:    NonInputNode and NeuralNetwork classes
    builder:    The decode() function
    individual: Individual class

Exported:
    decode:        Build the NeuralNetwork encoded by a genome
    Individual:    A genome, its decoded network, and a fitness
    NeuralNetwork: A decoded network with its own value buffer
    NonInputNode:  A hidden or output node with its incoming edges
"""

from tetrineat.phenotype.network    import NeuralNetwork, NonInputNode
from tetrineat.phenotype.builder    import decode
from tetrineat.phenotype.individual import Individual

__all__ = ['decode',
           'Individual',
           'NeuralNetwork',
           'NonInputNode']
