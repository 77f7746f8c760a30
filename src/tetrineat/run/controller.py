"""
Tetrineat Controller Module

This module adapts a decoded network to a game environment. The environment
exposes its board as a grid of cell values; the controller flattens the grid
into the network's input vector (optionally appending a constant bias term),
runs one propagation pass per decision tick, and picks the action whose output
scored highest. Nothing here depends on what the cells or the actions mean.

Constants:
    BLOCK_SQUARE:  Cell value of a square of the falling block
    EMPTY_SPACE:   Cell value of an empty square
    LOCKED_SQUARE: Cell value of a square of a block that has come to rest

Classes:
    NetworkController: Chooses actions for an environment using a NeuralNetwork
"""

import numpy as np
from typing import Sequence, TYPE_CHECKING

if TYPE_CHECKING:
    from tetrineat.phenotype import NeuralNetwork
    from tetrineat.run.config import Config

BLOCK_SQUARE  =  1.0
EMPTY_SPACE   =  0.0
LOCKED_SQUARE = -1.0

class NetworkController:
    """
    Drives an environment with a neural network, one decision per tick.

    The network must have one input per board cell, plus one if a bias term is
    used, and one output per candidate action.

    Public Attributes:
        network:    The network making the decisions
        use_bias:   Whether a constant bias term is appended to the inputs
        bias_value: The value of the bias term

    Public Methods:
        build_inputs(board):  Flatten a board into the network's input vector
        scores(board):        One score per action for a board
        choose_action(board): Index of the best-scoring action for a board

    Static Methods:
        required_inputs(num_cells, use_bias): Input nodes needed for a board
    """

    def __init__(self,
                 network   : 'NeuralNetwork',
                 use_bias  : bool  = True,
                 bias_value: float = 1.0):
        """
        Parameters:
            network:    The network making the decisions
            use_bias:   Whether a constant bias term is appended to the inputs
            bias_value: The value of the bias term
        """
        self.network   : 'NeuralNetwork' = network
        self.use_bias  : bool            = use_bias
        self.bias_value: float           = bias_value

    @classmethod
    def from_config(cls, network: 'NeuralNetwork', config: 'Config') -> 'NetworkController':
        """Create a controller with the bias settings of a Config."""
        return cls(network, use_bias=config.use_bias, bias_value=config.bias_value)

    @staticmethod
    def required_inputs(num_cells: int, use_bias: bool = True) -> int:
        """Number of input nodes a network needs to read a board of 'num_cells' cells."""
        return num_cells + (1 if use_bias else 0)

    def build_inputs(self, board: Sequence) -> np.ndarray:
        """
        Flatten a board (any nesting of rows and columns) in row-major order.

        Parameters:
            board: Grid of cell values

        Returns:
            1D array of inputs, with the bias term last if enabled
        """
        inputs = np.asarray(board, dtype=np.float64).ravel()
        if self.use_bias:
            inputs = np.append(inputs, self.bias_value)
        return inputs

    def scores(self, board: Sequence) -> list[float]:
        """
        Run one decision tick.

        Raises:
            InputLengthMismatchError: If the board does not fit the network's inputs
        """
        return self.network.feed_forward(self.build_inputs(board))

    def choose_action(self, board: Sequence) -> int:
        """
        Run one decision tick and pick an action.

        Returns:
            Index of the highest-scoring output (the lowest such index on ties)
        """
        scores = self.scores(board)
        if not scores:
            raise ValueError("Network has no outputs to choose an action from")
        return int(np.argmax(scores))

    def __repr__(self):
        return f"NetworkController(network={self.network!r}, use_bias={self.use_bias}, bias_value={self.bias_value})"
