"""
Tetrineat Run Package

This package connects decoded networks to the collaborators around them: the
game environment that feeds them inputs and the evolutionary loop that needs
their fitness.

Modules:
    config:     Config class (INI configuration)
    controller: NetworkController class and board cell constants
    evaluator:  Evaluator class (serial or joblib-parallel fitness evaluation)
"""

from tetrineat.run.config     import Config
from tetrineat.run.controller import NetworkController
from tetrineat.run.evaluator  import Evaluator

__all__ = ['Config',
           'Evaluator',
           'NetworkController']
