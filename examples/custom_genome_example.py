"""
Example: Decoding Custom Genomes

This example builds genomes from dictionary descriptions with Genome.from_dict(),
decodes them into networks and runs them, including a genome with a cycle whose
output depends on the previous decision tick.
"""

import logging

from tetrineat import ConnectionGene, Genome, NetworkController, decode
from tetrineat.activations import get_activation

logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

# Example 1: network with two hidden nodes
print("="*60)
print("Example 1: network with two hidden nodes")
print("="*60)

two_hidden = {
    # Inputs are nodes [0, 2), outputs [2, 3), hidden nodes [3, 5)
    "num_inputs" : 2,
    "num_outputs": 1,
    "num_hidden" : 2,
    "connections": [
        {"from": 0, "to": 3, "weight":  0.5},
        {"from": 1, "to": 3, "weight": -0.3},
        {"from": 0, "to": 4, "weight":  0.8},
        {"from": 1, "to": 4, "weight":  0.2},
        {"from": 3, "to": 2, "weight":  1.5},
        {"from": 4, "to": 2, "weight": -1.2}
    ]
}

genome1  = Genome.from_dict(two_hidden)
network1 = decode(genome1, get_activation("tanh"))
print(f"{genome1}\n")
print(f"{network1!r}, evaluation order {network1.evaluation_order}")
for inputs in ([0.0, 0.0], [0.0, 1.0], [1.0, 0.0], [1.0, 1.0]):
    print(f"  {inputs} -> {network1.feed_forward(inputs)}")

# Example 2: disabled connections are not part of the network
print("="*60)
print("Example 2: network with a disabled connection")
print("="*60)

genome2 = Genome.from_dict({
    "num_inputs" : 2,
    "num_outputs": 1,
    "connections": [
        {"from": 0, "to": 2, "weight":  1.0, "enabled": True},
        {"from": 1, "to": 2, "weight": -0.5, "enabled": False}
    ]
})
network2 = decode(genome2)
print(f"{len(genome2.genes)} genes, {len(genome2.enabled_genes)} enabled")
print(f"{network2!r}\n{network2}\n")

# Example 3: a cycle between the output and a hidden node
print("="*60)
print("Example 3: recurrent network")
print("="*60)

genome3  = Genome(num_inputs=1, num_outputs=1, num_hidden=1,
                  genes=[ConnectionGene(0, 2, 1.0, True, 1),
                         ConnectionGene(2, 1, 1.0, True, 2),
                         ConnectionGene(1, 2, 0.5, True, 3)])
network3 = decode(genome3, get_activation("identity"))
print(f"Recurrent: {network3.is_recurrent} ('~' marks recurrent edges)\n{network3}")
for tick in range(4):
    print(f"  tick {tick}: {network3.feed_forward([1.0])}")
network3.reset()
print(f"  after reset: {network3.feed_forward([1.0])}\n")

# Example 4: choosing actions on a board
print("="*60)
print("Example 4: controller")
print("="*60)

# Two-cell board plus bias; action 0 follows cell 0, action 1 follows cell 1
genome4 = Genome(num_inputs=NetworkController.required_inputs(2), num_outputs=2,
                 genes=[ConnectionGene(0, 3, 1.0), ConnectionGene(1, 4, 1.0)])
controller = NetworkController(decode(genome4))
for board in ([[1.0, 0.0]], [[0.0, 1.0]], [[-1.0, -1.0]]):
    print(f"  board {board} -> action {controller.choose_action(board)}")
