"""
Tetrineat Genome Module

This module implements the Genome class, the declarative description of a
network's shape that the decoder turns into an executable network.

Classes:
    Genome: Node counts plus an ordered collection of connection genes
"""

from typing import Iterable

from tetrineat.genotype.connection_gene import ConnectionGene, whole_number

class Genome:
    """
    A NEAT genome describing a neural network by its node counts and connection genes.

    Unlike a full NEAT genome, nodes are not stored as genes: they are implied by
    the declared counts and a fixed numbering convention. Connections are kept in
    the order they were given, which is the order the decoder sees them in.

    Node numbering convention:
        - Input nodes:  [0, num_inputs)
        - Output nodes: [num_inputs, num_inputs + num_outputs)
        - Hidden nodes: [num_inputs + num_outputs, num_inputs + num_outputs + num_hidden)

    The genome is read-only once constructed and may be shared between any number
    of decoders. It does not check that gene endpoints respect the numbering
    convention: the decoder does, so that a malformed genome fails the moment
    anyone tries to run it.

    Public Properties:
        num_inputs:    Number of input nodes
        num_outputs:   Number of output nodes
        num_hidden:    Number of hidden nodes
        number_nodes:  Total number of nodes
        genes:         Tuple of all connection genes (enabled and disabled), in order
        enabled_genes: Tuple of the enabled connection genes, in order
        input_ids:     IDs of the input nodes
        output_ids:    IDs of the output nodes
        hidden_ids:    IDs of the hidden nodes

    Public Methods:
        to_dict(): Convert genome to dictionary representation

    Class Methods:
        from_dict(genome_dict): Create a genome from a dictionary description
    """

    def __init__(self,
                 num_inputs : int,
                 num_outputs: int,
                 num_hidden : int = 0,
                 genes      : Iterable[ConnectionGene] = ()):
        """
        Parameters:
            num_inputs:  Number of input nodes
            num_outputs: Number of output nodes
            num_hidden:  Number of hidden nodes
            genes:       Connection genes, in order

        Raises:
            ValueError: If a node count is negative or not a whole number
            TypeError:  If a node count is not a number, or an element of 'genes' is not a ConnectionGene
        """
        counts = {name: whole_number(name, value)
                  for name, value in (("num_inputs", num_inputs), ("num_outputs", num_outputs), ("num_hidden", num_hidden))}
        for name, value in counts.items():
            if value < 0:
                raise ValueError(f"'{name}' must be non-negative, got {value}")

        genes = tuple(genes)
        for gene in genes:
            if not isinstance(gene, ConnectionGene):
                raise TypeError(f"Expected ConnectionGene, got {type(gene).__name__}")

        self._num_inputs : int = counts["num_inputs"]
        self._num_outputs: int = counts["num_outputs"]
        self._num_hidden : int = counts["num_hidden"]
        self._genes: tuple[ConnectionGene, ...] = genes

    @classmethod
    def from_dict(cls, genome_dict: dict) -> 'Genome':
        """
        Create a Genome from a dictionary description.

        Dictionary format:
            {
                "num_inputs":  2,
                "num_outputs": 1,
                "num_hidden":  1,        # Optional, defaults to 0
                "connections": [
                    {"from": 0, "to": 3, "weight":  0.5, "enabled": true, "lineage": 1},
                    {"from": 1, "to": 3, "weight": -0.3},
                    {"from": 3, "to": 2, "weight":  1.5}
                ]
            }

        "enabled" defaults to true. "lineage" defaults to the position of the
        connection in the list.

        Parameters:
            genome_dict: Dictionary describing the genome structure

        Returns:
            A new Genome object with the specified structure

        Raises:
            KeyError:   If required fields are missing from the dictionary
            ValueError: If a node count is negative, or a node ID is not a whole number
            TypeError:  If a field has the wrong type (for example a non-boolean "enabled")
        """
        genes = []
        for position, conn_data in enumerate(genome_dict.get("connections", [])):
            genes.append(ConnectionGene(conn_data["from"],
                                        conn_data["to"],
                                        conn_data["weight"],
                                        enabled    = conn_data.get("enabled", True),
                                        lineage_id = conn_data.get("lineage", position)))

        return cls(genome_dict["num_inputs"],
                   genome_dict["num_outputs"],
                   genome_dict.get("num_hidden", 0),
                   genes)

    def to_dict(self) -> dict:
        """
        Convert the genome to a dictionary representation.

        This is the inverse operation of from_dict().
        """
        connections = []
        for gene in self._genes:
            connections.append({
                "from"   : gene.source,
                "to"     : gene.target,
                "weight" : gene.weight,
                "enabled": gene.enabled,
                "lineage": gene.lineage_id
            })

        return {
            "num_inputs" : self._num_inputs,
            "num_outputs": self._num_outputs,
            "num_hidden" : self._num_hidden,
            "connections": connections
        }

    @property
    def num_inputs(self) -> int:
        return self._num_inputs

    @property
    def num_outputs(self) -> int:
        return self._num_outputs

    @property
    def num_hidden(self) -> int:
        return self._num_hidden

    @property
    def number_nodes(self) -> int:
        """Total number of nodes (input, output and hidden)."""
        return self._num_inputs + self._num_outputs + self._num_hidden

    @property
    def genes(self) -> tuple[ConnectionGene, ...]:
        return self._genes

    @property
    def enabled_genes(self) -> tuple[ConnectionGene, ...]:
        return tuple(gene for gene in self._genes if gene.enabled)

    @property
    def input_ids(self) -> range:
        return range(0, self._num_inputs)

    @property
    def output_ids(self) -> range:
        return range(self._num_inputs, self._num_inputs + self._num_outputs)

    @property
    def hidden_ids(self) -> range:
        return range(self._num_inputs + self._num_outputs, self.number_nodes)

    def __eq__(self, other):
        if not isinstance(other, Genome):
            return NotImplemented
        return (self._num_inputs, self._num_outputs, self._num_hidden, self._genes) == \
               (other._num_inputs, other._num_outputs, other._num_hidden, other._genes)

    def __hash__(self):
        return hash((self._num_inputs, self._num_outputs, self._num_hidden, self._genes))

    def __str__(self):
        nodes_str = f"I={self._num_inputs},O={self._num_outputs},H={self._num_hidden}"
        conn_genes_str = ''.join(str(gene) for gene in self._genes)
        return f"Nodes: {nodes_str}\nConns: {conn_genes_str}"

    def __repr__(self):
        return (f"Genome(num_inputs={self._num_inputs}, num_outputs={self._num_outputs}, "
                f"num_hidden={self._num_hidden}, genes={len(self._genes)})")
