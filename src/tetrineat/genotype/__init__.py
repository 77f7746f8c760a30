"""
Tetrineat Genotype Package

This package implements the genotype representation: the declarative, possibly
cyclic encoding of a neural network produced by the (external) evolutionary
algorithm and consumed by the decoder.

Nodes are not encoded as genes. They are implied by the genome's node counts:
- Input nodes:  [0, num_inputs)
- Output nodes: [num_inputs, num_inputs + num_outputs)
- Hidden nodes: [num_inputs + num_outputs, num_inputs + num_outputs + num_hidden)

Modules:
    connection_gene: ConnectionGene class
    genome:          Genome class

Exported Classes:
    ConnectionGene: Gene encoding a weighted connection between nodes
    Genome:         Node counts plus ordered connection genes
"""

from tetrineat.genotype.connection_gene import ConnectionGene
from tetrineat.genotype.genome          import Genome

__all__ = ['ConnectionGene',
           'Genome']
