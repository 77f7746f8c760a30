"""
Tetrineat Network Module

This module implements the phenotype: the decoded, executable form of a genome.
Networks are produced by 'tetrineat.phenotype.builder.decode' and should not
normally be constructed by hand.

Classes:
    NonInputNode:  A hidden or output node with its index-aligned incoming edges
    NeuralNetwork: A decoded network running one propagation pass per call
"""

import numpy as np
import graphviz  # type: ignore
from typing import Callable, Sequence, TYPE_CHECKING

from tetrineat.activations import activation_codes, activation_name
from tetrineat.errors import InputLengthMismatchError

if TYPE_CHECKING:
    from tetrineat.genotype import Genome

class NonInputNode:
    """
    A hidden or output node of a decoded network.

    The incoming edges are stored as three index-aligned tuples: position k of
    'source_node_nums' pairs with position k of 'source_node_weights' and of
    'recurrent'. An edge is recurrent when its source is evaluated after this
    node, in which case it reads the value the source had at the end of the
    previous propagation pass.

    Public Attributes:
        number:              ID of this node
        source_node_nums:    IDs of the nodes feeding this node
        source_node_weights: Weight of each incoming edge
        recurrent:           Whether each incoming edge is recurrent
    """

    __slots__ = ('number', 'source_node_nums', 'source_node_weights', 'recurrent')

    def __init__(self,
                 number             : int,
                 source_node_nums   : Sequence[int],
                 source_node_weights: Sequence[float],
                 recurrent          : Sequence[bool] | None = None):
        if len(source_node_nums) != len(source_node_weights):
            raise ValueError(f"Node {number}: {len(source_node_nums)} sources but "
                             f"{len(source_node_weights)} weights")
        if recurrent is None:
            recurrent = (False,) * len(source_node_nums)
        elif len(recurrent) != len(source_node_nums):
            raise ValueError(f"Node {number}: {len(source_node_nums)} sources but "
                             f"{len(recurrent)} recurrent flags")

        self.number             : int                = number
        self.source_node_nums   : tuple[int, ...]    = tuple(source_node_nums)
        self.source_node_weights: tuple[float, ...]  = tuple(source_node_weights)
        self.recurrent          : tuple[bool, ...]   = tuple(recurrent)

    def __repr__(self):
        return (f"NonInputNode(number={self.number}, source_node_nums={list(self.source_node_nums)}, "
                f"source_node_weights={list(self.source_node_weights)}, recurrent={list(self.recurrent)})")

class NeuralNetwork:
    """
    The executable form of a genome.

    A network holds its non-input nodes in evaluation order and a value buffer
    with one slot per node, addressed by node ID. The buffer is the network's
    only mutable state: it persists between calls to 'feed_forward' so that
    recurrent edges can read the previous pass's values. Every network owns its
    buffer exclusively, so networks decoded from the same genome can be run
    concurrently without interfering.

    One activation function is applied at every non-input node.

    Public Attributes:
        num_inputs:      Number of input nodes
        num_outputs:     Number of output nodes
        num_hidden:      Number of hidden nodes
        non_input_nodes: Tuple of NonInputNode, in evaluation order
        activation:      The scalar activation function

    Public Properties:
        genome:                     The genome this network was decoded from
        values:                     Copy of the value buffer
        evaluation_order:           Node IDs in the order they are evaluated
        is_recurrent:               Whether any edge reads a stale value
        number_nodes:               Total number of nodes in the network
        number_nodes_hidden:        Number of hidden nodes in the network
        number_connections:         Total number of connection genes in the genome
        number_connections_enabled: Number of edges in the decoded network

    Public Methods:
        feed_forward(inputs): Run one propagation pass and return the outputs
        reset():              Zero the value buffer
        visualize(view):      Render the decoded network with Graphviz
    """

    def __init__(self,
                 genome         : 'Genome',
                 non_input_nodes: Sequence[NonInputNode],
                 activation     : Callable[[float], float]):
        """
        Parameters:
            genome:          The Genome the network is decoded from
            non_input_nodes: Hidden and output nodes, in evaluation order
            activation:      Function applied to the weighted sum at each non-input node
        """
        self._genome    = genome
        self.num_inputs : int = genome.num_inputs
        self.num_outputs: int = genome.num_outputs
        self.num_hidden : int = genome.num_hidden
        self.non_input_nodes: tuple[NonInputNode, ...] = tuple(non_input_nodes)
        self.activation : Callable[[float], float] = activation

        self._values = np.zeros(genome.number_nodes, dtype=np.float64)

    @property
    def genome(self) -> 'Genome':
        return self._genome

    @property
    def values(self) -> np.ndarray:
        """Copy of the value buffer, indexed by node ID."""
        return self._values.copy()

    @property
    def evaluation_order(self) -> list[int]:
        return [node.number for node in self.non_input_nodes]

    @property
    def is_recurrent(self) -> bool:
        return any(any(node.recurrent) for node in self.non_input_nodes)

    @property
    def number_nodes(self) -> int:
        """Total number of nodes in the network."""
        return len(self._values)

    @property
    def number_nodes_hidden(self) -> int:
        """Number of hidden nodes in the network."""
        return self.num_hidden

    @property
    def number_connections(self) -> int:
        """Total number of connection genes, enabled or not."""
        return len(self._genome.genes)

    @property
    def number_connections_enabled(self) -> int:
        """Number of edges that survived decoding."""
        return sum(len(node.source_node_nums) for node in self.non_input_nodes)

    def feed_forward(self, inputs: Sequence[float]) -> list[float]:
        """
        Perform one propagation pass through the network.

        Non-recurrent edges read values computed earlier in this same pass.
        Recurrent edges read whatever their source held at the end of the
        previous pass (0.0 before the first pass or after 'reset').

        Parameters:
            inputs: The network inputs (exactly as many as input nodes)

        Returns:
            The value of each output node, in ascending node ID order

        Raises:
            InputLengthMismatchError: If the number of inputs is wrong
        """
        if len(inputs) != self.num_inputs:
            raise InputLengthMismatchError(self.num_inputs, len(inputs))

        values = self._values
        values[:self.num_inputs] = inputs

        activation = self.activation
        for node in self.non_input_nodes:
            weighted_sum = sum(weight * values[source]
                               for source, weight in zip(node.source_node_nums, node.source_node_weights))
            values[node.number] = activation(weighted_sum)

        # Outputs are addressed by node ID, not by evaluation position
        return values[self.num_inputs:self.num_inputs + self.num_outputs].tolist()

    def reset(self) -> None:
        """Forget all state left over from previous passes."""
        self._values.fill(0.0)

    def visualize(self, view: bool = False) -> graphviz.Digraph:
        """
        Visualize the decoded network using Graphviz.

        Disabled genes are not part of the network and are not drawn.
        Recurrent edges are drawn dashed. Hidden and output nodes show their ID and
        evaluation position, followed by the 3-letter activation code.

        Parameters:
            view: If True, automatically open the visualization after rendering

        Returns:
            graphviz.Digraph object representing the network
        """
        dot = graphviz.Digraph()
        dot.attr(rankdir='LR')  # Left to right layout
        dot.attr('graph', labelloc='t')

        base_attrs = {'color': 'black', 'style': 'filled', 'shape': 'circle', 'penwidth': '0.5',
                      'fontsize': '5', 'width': '0.5', 'height': '0.5', 'fixedsize': 'true'}
        position   = {number: i for i, number in enumerate(self.evaluation_order)}
        # Activation code shown on every non-input node, "???" for an unregistered function
        act_code   = activation_codes.get(activation_name(self.activation), "???")

        with dot.subgraph(name='cluster_input') as input_cluster:
            input_cluster.attr(rank='source', label='Inputs', style='invisible')
            for node_id in self._genome.input_ids:
                input_cluster.node(str(node_id), label=f"id={node_id}", fillcolor='lightgrey', **base_attrs)

        if self.num_hidden:
            with dot.subgraph(name='cluster_hidden') as hidden_cluster:
                hidden_cluster.attr(rank='same', label='Hidden', style='invisible')
                for node_id in self._genome.hidden_ids:
                    hidden_cluster.node(str(node_id), label=f"id={node_id}\\nord={position[node_id]}\\n{act_code}",
                                        fillcolor='lightblue', **base_attrs)

        with dot.subgraph(name='cluster_output') as output_cluster:
            output_cluster.attr(rank='sink', label='Outputs', style='invisible')
            for node_id in self._genome.output_ids:
                output_cluster.node(str(node_id), label=f"id={node_id}\\nord={position[node_id]}\\n{act_code}",
                                    fillcolor='white', **base_attrs)

        for node in self.non_input_nodes:
            for source, weight, recurrent in zip(node.source_node_nums, node.source_node_weights, node.recurrent):
                dot.edge(str(source), str(node.number),
                         label      = f"w={weight:.2f}",
                         fontsize   = '5',
                         penwidth   = '0.5',
                         arrowsize  = '0.5',
                         labelfloat = 'false',
                         color      = 'black',
                         style      = 'dashed' if recurrent else 'solid')

        if view:
            dot.view(cleanup=True)

        return dot

    def __str__(self):
        lines = []
        for node in self.non_input_nodes:
            edges = ", ".join(f"{src:02d}{'~' if rec else ''}*{w:+.2f}"
                              for src, w, rec in zip(node.source_node_nums, node.source_node_weights, node.recurrent))
            lines.append(f"  Node {node.number}: [{edges}]")
        return "\n".join(lines)

    def __repr__(self):
        return (f"NeuralNetwork(nodes={self.number_nodes}, "
                f"hidden={self.number_nodes_hidden}, "
                f"connections={self.number_connections_enabled}/{self.number_connections})")
