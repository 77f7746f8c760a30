#!/usr/bin/env python3
"""
Utility script to visualize decoded NEAT networks.

The genome is read from a JSON file holding the dictionary description
accepted by 'Genome.from_dict'.

Usage:
    python scripts/visualize_network.py --genome genome.json
"""

import sys
import json
import argparse
from pathlib import Path

# Add the source root to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from tetrineat.activations import activations, get_activation, DEFAULT_ACTIVATION
from tetrineat.errors import TetrineatError
from tetrineat.genotype import Genome
from tetrineat.phenotype import decode


def visualize_genome(genome, activation_name=DEFAULT_ACTIVATION, output_file='network', format='png', view=True):
    """
    Decode a genome and render the resulting network.

    Args:
        genome: The genome to visualize
        activation_name: Name of the activation function used for decoding
        output_file: Output filename (without extension)
        format: Output format (png, pdf, svg, etc.)
        view: Whether to automatically open the generated file
    """
    network = decode(genome, get_activation(activation_name))
    print(repr(network))
    print(network)

    dot = network.visualize()
    dot.format = format
    dot.render(output_file, view=view, cleanup=True)
    print(f"Network visualization saved to {output_file}.{format}")


def main():
    parser = argparse.ArgumentParser(description='Visualize decoded NEAT networks')
    parser.add_argument('--genome', type=str, required=True,
                        help='Path to a JSON genome description')
    parser.add_argument('--activation', type=str, default=DEFAULT_ACTIVATION,
                        choices=sorted(activations),
                        help='Activation function applied at non-input nodes')
    parser.add_argument('--output', type=str, default='network',
                        help='Output filename (without extension)')
    parser.add_argument('--format', type=str, default='png',
                        choices=['png', 'pdf', 'svg'],
                        help='Output format')
    parser.add_argument('--no-view', action='store_true',
                        help='Do not automatically open the generated file')

    args = parser.parse_args()

    # Load genome
    with open(args.genome) as f:
        description = json.load(f)

    try:
        genome = Genome.from_dict(description)
        visualize_genome(genome, args.activation, args.output, args.format, not args.no_view)
    except (KeyError, TetrineatError) as error:
        print(f"Error: {error}")
        sys.exit(1)


if __name__ == '__main__':
    main()
