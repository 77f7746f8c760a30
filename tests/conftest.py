"""Pytest configuration and shared fixtures."""

import pytest
import sys
from pathlib import Path

# Add the source root to the Python path
src_dir = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_dir))


@pytest.fixture
def multi_layer_genome():
    """
    Two inputs (0, 1), three outputs (2, 3, 4), two hidden nodes (5, 6),
    unit weights: 0=>2, 0=>5, 0=>6, 1=>5, 5=>6, 5=>3, 6=>3, 5=>4.
    """
    from tetrineat.genotype import ConnectionGene, Genome
    edges = [(0, 2), (0, 5), (0, 6), (1, 5), (5, 6), (5, 3), (6, 3), (5, 4)]
    genes = [ConnectionGene(src, dst, 1.0, True, lineage) for lineage, (src, dst) in enumerate(edges)]
    return Genome(num_inputs=2, num_outputs=3, num_hidden=2, genes=genes)


@pytest.fixture
def recurrent_genome():
    """
    Input 0, output 1, hidden 2, with a loop between 1 and 2:
    0=>2 (1.0), 2=>1 (1.0), 1=>2 (0.5).
    """
    from tetrineat.genotype import ConnectionGene, Genome
    genes = [ConnectionGene(0, 2, 1.0, True, 1),
             ConnectionGene(2, 1, 1.0, True, 2),
             ConnectionGene(1, 2, 0.5, True, 3)]
    return Genome(num_inputs=1, num_outputs=1, num_hidden=1, genes=genes)


@pytest.fixture
def sample_genome_dict():
    """Dictionary description of a small genome with one disabled connection."""
    return {
        'num_inputs' : 2,
        'num_outputs': 1,
        'num_hidden' : 1,
        'connections': [
            {'from': 0, 'to': 3, 'weight':  0.5, 'enabled': True,  'lineage': 1},
            {'from': 1, 'to': 3, 'weight': -0.3, 'enabled': True,  'lineage': 2},
            {'from': 3, 'to': 2, 'weight':  1.5, 'enabled': True,  'lineage': 3},
            {'from': 0, 'to': 2, 'weight':  2.0, 'enabled': False, 'lineage': 4},
        ]
    }
