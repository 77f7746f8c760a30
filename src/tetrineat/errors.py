"""
Tetrineat Errors Module

This module defines the exceptions raised when a caller breaks the data
contract of the decoder or of a decoded network. Both conditions are caller
errors, not transient faults: they are raised where detected and never retried.

Classes:
    TetrineatError:           Common base class
    InvalidGenomeError:       A gene references a node outside the genome
    InputLengthMismatchError: A network was fed the wrong number of inputs
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tetrineat.genotype import ConnectionGene

class TetrineatError(ValueError):
    """Base class for all errors raised by this package."""

class InvalidGenomeError(TetrineatError):
    """
    Raised at decode time when an enabled gene references a node ID
    outside [0, number_nodes) for the genome's declared node counts.

    Public Attributes:
        gene:         The offending connection gene
        number_nodes: Total node count of the genome being decoded
    """

    def __init__(self, gene: 'ConnectionGene', number_nodes: int):
        self.gene         = gene
        self.number_nodes = number_nodes
        super().__init__(f"Connection {gene.source}=>{gene.target} references a node "
                         f"outside the genome's {number_nodes} nodes")

class InputLengthMismatchError(TetrineatError):
    """
    Raised when a network receives an input vector of the wrong length.

    Public Attributes:
        expected: Number of input nodes in the network
        actual:   Length of the input vector received
    """

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual   = actual
        super().__init__(f"Expected {expected} inputs, got {actual}")
