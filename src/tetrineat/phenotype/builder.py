"""
Tetrineat Phenotype Builder Module

This module turns a genome into an executable NeuralNetwork. Decoding is a pure
function of the genome: it validates node references, drops disabled genes,
groups the remaining edges by target node and computes the order in which
non-input nodes are evaluated.

The evaluation order comes from a variant of Kahn's topological sort over the
non-input nodes (input nodes are always ready). When the genome contains a
cycle, the sort gets stuck: the smallest-numbered unscheduled node is then
scheduled anyway, and each of its edges whose source has not been scheduled
yet becomes a recurrent edge, reading the previous pass's value. On acyclic
genomes this reduces to a plain topological sort with ties broken by ascending
node ID; on cyclic ones it still terminates after one step per non-input node.

Functions:
    decode(genome, activation): Build the NeuralNetwork encoded by a genome
"""

import heapq
import logging
from collections import defaultdict
from typing      import Callable, TYPE_CHECKING

from tetrineat.activations        import DEFAULT_ACTIVATION, get_activation
from tetrineat.errors             import InvalidGenomeError
from tetrineat.phenotype.network  import NeuralNetwork, NonInputNode

if TYPE_CHECKING:
    from tetrineat.genotype import ConnectionGene, Genome

logger = logging.getLogger(__name__)

def decode(genome    : 'Genome',
           activation: Callable[[float], float] | None = None) -> NeuralNetwork:
    """
    Decode a genome into an executable network.

    Every output and hidden node gets exactly one NonInputNode, including nodes
    with no incoming edges (those always evaluate to activation(0)).

    Parameters:
        genome:     The genome to decode; it is not modified
        activation: Function applied at every non-input node
                    (defaults to the DEFAULT_ACTIVATION entry of the registry)

    Returns:
        A NeuralNetwork with a zero-initialized value buffer

    Raises:
        InvalidGenomeError: If an enabled gene references a node outside the genome
    """
    if activation is None:
        activation = get_activation(DEFAULT_ACTIVATION)

    enabled_genes = _validated_enabled_genes(genome)
    incoming      = _group_by_target(enabled_genes)
    order         = _evaluation_order(genome, incoming)

    scheduled = set()
    nodes     = []
    for number in order:
        sources, weights = incoming.get(number, ([], []))
        recurrent = [source >= genome.num_inputs and source not in scheduled for source in sources]
        nodes.append(NonInputNode(number, sources, weights, recurrent))
        scheduled.add(number)

    network = NeuralNetwork(genome, nodes, activation)
    logger.debug("Decoded genome with %d nodes: %d enabled edges (%d recurrent), order %s",
                 genome.number_nodes,
                 network.number_connections_enabled,
                 sum(sum(node.recurrent) for node in nodes),
                 order)
    return network

def _validated_enabled_genes(genome: 'Genome') -> list['ConnectionGene']:
    """
    Return the enabled genes of 'genome', in order, after checking that each of
    them references existing nodes. Disabled genes are not checked.
    """
    number_nodes = genome.number_nodes
    enabled      = []
    for gene in genome.genes:
        if not gene.enabled:
            continue
        if not (0 <= gene.source < number_nodes and 0 <= gene.target < number_nodes):
            raise InvalidGenomeError(gene, number_nodes)
        enabled.append(gene)
    return enabled

def _group_by_target(genes: list['ConnectionGene']) -> dict[int, tuple[list[int], list[float]]]:
    """
    Build the index-aligned (sources, weights) lists of every target node.

    Edges keep the relative order of their genes. When several genes connect
    the same (source, target) pair, the edge keeps the position of the first
    one and the weight of the last one.
    """
    incoming: dict[int, tuple[list[int], list[float]]] = {}
    position: dict[tuple[int, int], int] = {}

    for gene in genes:
        sources, weights = incoming.setdefault(gene.target, ([], []))
        key = (gene.source, gene.target)
        if key in position:
            logger.warning("Duplicate enabled connection %d=>%d: weight %+.4f replaced by %+.4f",
                           gene.source, gene.target, weights[position[key]], gene.weight)
            weights[position[key]] = gene.weight
        else:
            position[key] = len(sources)
            sources.append(gene.source)
            weights.append(gene.weight)

    return incoming

def _evaluation_order(genome  : 'Genome',
                      incoming: dict[int, tuple[list[int], list[float]]]) -> list[int]:
    """
    Compute the order in which the non-input nodes are evaluated.

    A node is ready once all its non-input sources are scheduled. The smallest
    ready node is always scheduled next. When no node is ready, the smallest
    unscheduled node is scheduled regardless.

    Returns:
        List of all output and hidden node IDs, each exactly once
    """
    first_non_input = genome.num_inputs
    non_input_ids   = range(first_non_input, genome.number_nodes)

    # For each node: how many distinct non-input sources are not yet scheduled
    pending   : dict[int, int]       = {}
    dependents: dict[int, list[int]] = defaultdict(list)
    for node_id in non_input_ids:
        sources = {s for s in incoming.get(node_id, ([], []))[0] if s >= first_non_input}
        pending[node_id] = len(sources)
        for source in sources:
            dependents[source].append(node_id)

    ready = [node_id for node_id in non_input_ids if pending[node_id] == 0]
    heapq.heapify(ready)

    scheduled = set()
    order     = []
    fallback  = iter(non_input_ids)   # ascending scan used to break cycles

    while len(order) < len(non_input_ids):
        if ready:
            node_id = heapq.heappop(ready)
        else:
            # Stuck on a cycle: the smallest unscheduled node goes next
            node_id = next(n for n in fallback if n not in scheduled)
            logger.debug("Cycle detected, scheduling node %d with recurrent inputs", node_id)

        scheduled.add(node_id)
        order.append(node_id)

        for dependent in dependents.get(node_id, ()):
            pending[dependent] -= 1
            if pending[dependent] == 0 and dependent not in scheduled:
                heapq.heappush(ready, dependent)

    return order
