import autograd.numpy as np  # type: ignore

def identity_activation(z):
    return z

def clamped_activation(z):
    return np.clip(z, -1.0, 1.0)

def relu_activation(z):
    return np.maximum(0.0, z)

def logistic_activation(z):
    # Clip to keep exp() finite; the result saturates long before |z| = 500
    z_clipped = np.clip(z, -500, 500)
    return 1.0 / (1.0 + np.exp(-z_clipped))

def sigmoid_activation(z):
    K = 10
    Z = K * z
    Z = np.clip(Z, -100, 100)   # to prevent under/overflow when calculating exp
    return 1.0 / (1.0 + np.exp(-Z))

def tanh_activation(z):
    return np.tanh(z)

def sin_activation(z):
    return np.sin(z)

def square_activation(z):
    # Clip input to avoid overflow (±1e154 squared stays within float64 range)
    z_clipped = np.clip(z, -1e154, 1e154)
    return z_clipped ** 2

def cubed_activation(z):
    # Clip input to avoid overflow (±1e102 cubed stays within float64 range)
    z_clipped = np.clip(z, -1e102, 1e102)
    return z_clipped ** 3

def log_activation(z):
    # Returns log(1e-7) ≈ -16.1 for z <= 0
    z_safe = np.maximum(z, 1e-7)
    return np.log(z_safe)

def inverse_activation(z):
    # Returns 1e7 for z=0, and caps magnitude at 1e7 for |z| < 1e-7
    z_safe = np.where(z == 0, 1e-7, z)
    z_safe = np.where(np.abs(z_safe) < 1e-7, np.sign(z_safe) * 1e-7, z_safe)
    return 1.0 / z_safe

def exponential_activation(z):
    # exp(100) ≈ 2.7e43, exp(-100) ≈ 3.7e-44
    z_clipped = np.clip(z, -100, 100)
    return np.exp(z_clipped)

def abs_activation(z):
    return np.abs(z)

activations = {
    "identity"   : identity_activation,
    "clamped"    : clamped_activation,
    "relu"       : relu_activation,
    "logistic"   : logistic_activation,
    "sigmoid"    : sigmoid_activation,
    "tanh"       : tanh_activation,
    "sin"        : sin_activation,
    "square"     : square_activation,
    "cubed"      : cubed_activation,
    "log"        : log_activation,
    "inverse"    : inverse_activation,
    "exponential": exponential_activation,
    "abs"        : abs_activation
    }

# 3-letter identifiers for each activation function
activation_codes = {
    "identity"   : "IDN",
    "clamped"    : "CLP",
    "relu"       : "RLU",
    "logistic"   : "LGS",
    "sigmoid"    : "SIG",
    "tanh"       : "TNH",
    "sin"        : "SIN",
    "square"     : "SQR",
    "cubed"      : "CUB",
    "log"        : "LOG",
    "inverse"    : "INV",
    "exponential": "EXP",
    "abs"        : "ABS"
    }

# Used by the decoder when no activation is injected
DEFAULT_ACTIVATION = "logistic"

def get_activation(name: str):
    """
    Look up an activation function by name.

    Parameters:
        name: Key into the 'activations' registry

    Returns:
        The scalar activation function

    Raises:
        ValueError: If no activation function has that name
    """
    try:
        return activations[name]
    except KeyError:
        raise ValueError(f"Invalid activation function '{name}'") from None

def activation_name(func) -> str | None:
    """Reverse lookup: the registry name of an activation function, or None."""
    for name, registered in activations.items():
        if registered is func:
            return name
    return None
