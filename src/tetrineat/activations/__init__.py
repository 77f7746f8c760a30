"""
Activations Package

This package provides the scalar activation functions applied at every
non-input node of a decoded network. A network uses exactly one of them,
injected at decode time.

Exported:
    activations:        Dictionary mapping activation function names to functions
    activation_codes:   Dictionary mapping activation function names to 3-letter codes
    DEFAULT_ACTIVATION: Name of the activation used when none is injected
    get_activation:     Resolve an activation function by name
    activation_name:    Reverse lookup of a registered activation function
    Individual activation functions: identity_activation, clamped_activation, relu_activation,
                                     logistic_activation, sigmoid_activation, tanh_activation
"""

from tetrineat.activations.basic_activations import (
    DEFAULT_ACTIVATION,
    activation_codes,
    activation_name,
    activations,
    get_activation,
    identity_activation,
    clamped_activation,
    relu_activation,
    logistic_activation,
    sigmoid_activation,
    tanh_activation
)

__all__ = [
    'DEFAULT_ACTIVATION',
    'activation_codes',
    'activation_name',
    'activations',
    'get_activation',
    'identity_activation',
    'clamped_activation',
    'relu_activation',
    'logistic_activation',
    'sigmoid_activation',
    'tanh_activation'
]
