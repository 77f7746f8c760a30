"""
Tetrineat Connection Gene Module

This module implements the ConnectionGene class, the edge record out of
which genomes are built.

Classes:
    ConnectionGene: Gene encoding a weighted connection between nodes

Functions:
    whole_number(name, value): Validate a node ID, node count or lineage ID
"""

import numbers
import numpy as np

def whole_number(name: str, value) -> int:
    """
    Return 'value' as an int, refusing anything that is not a whole number.

    Integers (including numpy integers) pass through, floats are accepted only
    when they have no fractional part. Booleans and non-numbers are rejected.

    Raises:
        TypeError:  If 'value' is not a real number
        ValueError: If 'value' has a fractional part (or is not finite)
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Real):
        raise TypeError(f"'{name}' must be an integer, got {type(value).__name__}")
    if not isinstance(value, numbers.Integral) and not float(value).is_integer():
        raise ValueError(f"'{name}' must be a whole number, got {value}")
    return int(value)

class ConnectionGene:
    """
    A gene describing a weighted connection between two nodes in a Neural Network.

    Each connection gene represents a directed edge in the neural network graph,
    connecting a source node to a target node with an associated weight. The
    lineage ID is the historical marker used by the evolutionary algorithm to
    align genes during crossover; the decoder ignores it.

    Connections can be enabled or disabled. Disabled connections are kept in the
    genome for the evolutionary algorithm's bookkeeping but never reach the
    decoded network.

    A gene is read-only once constructed. It carries no guarantee that its
    endpoints exist: that is checked when the owning genome is decoded.

    Public Properties:
        source:     ID of the source node
        target:     ID of the target node
        weight:     Weight of the connection
        enabled:    Whether this connection is active in the network
        lineage_id: Historical marker identifying this connection
    """

    __slots__ = ('_source', '_target', '_weight', '_enabled', '_lineage_id')

    def __init__(self,
                 source    : int,
                 target    : int,
                 weight    : float,
                 enabled   : bool = True,
                 lineage_id: int  = 0):
        """
        Initialize a connection gene.

        Parameters:
            source:     ID of the source node
            target:     ID of the target node
            weight:     Weight of the connection
            enabled:    Whether this connection is active in the network
            lineage_id: Historical marker identifying this connection

        Raises:
            TypeError:  If a field has the wrong type ('enabled' must be a bool)
            ValueError: If a node ID or the lineage ID is not a whole number
        """
        if isinstance(weight, (bool, np.bool_)) or not isinstance(weight, numbers.Real):
            raise TypeError(f"'weight' must be a number, got {type(weight).__name__}")
        if not isinstance(enabled, (bool, np.bool_)):
            raise TypeError(f"'enabled' must be a bool, got {type(enabled).__name__}")

        self._source    : int   = whole_number("source", source)
        self._target    : int   = whole_number("target", target)
        self._weight    : float = float(weight)
        self._enabled   : bool  = bool(enabled)
        self._lineage_id: int   = whole_number("lineage_id", lineage_id)

    @property
    def source(self) -> int:
        """The ID of the node representing the connection start."""
        return self._source

    @property
    def target(self) -> int:
        """The ID of the node representing the connection end."""
        return self._target

    @property
    def weight(self) -> float:
        """The weight associated with this connection."""
        return self._weight

    @property
    def enabled(self) -> bool:
        """Whether the connection is enabled."""
        return self._enabled

    @property
    def lineage_id(self) -> int:
        """The historical marker associated with this connection."""
        return self._lineage_id

    def _key(self) -> tuple:
        return (self._source, self._target, self._weight, self._enabled, self._lineage_id)

    def __eq__(self, other):
        if not isinstance(other, ConnectionGene):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def __repr__(self):
        return (f"ConnectionGene(source={self._source:03d}, target={self._target:03d}, "
                f"weight={self._weight:+.6f}, enabled={self._enabled}, lineage_id={self._lineage_id:03d})")

    def __str__(self):
        s  = f"[{self._lineage_id:03d},{'E' if self._enabled else 'D'},"
        s += f"{self._source:02d}=>{self._target:02d},{self._weight:+.02f}]"
        return s
