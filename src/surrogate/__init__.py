"""Synthetic field values generated under strict length budgets.

The package draws realistic looking emails, usernames, names and addresses
from static corpora, splitting a maximum length between the parts of each
composite value and falling back to simpler forms when the budget is tight.
"""

from .engine import ValueGenerator, default_registry, generate, generate_request
from .generate import GeneratedValue, GenerationRequest, Stage, ValueKind
from .utils.errors import (
    CorpusExhaustedError,
    GenerationError,
    InvalidParameterError,
    LengthInfeasibleError,
    RegistryError,
)

__version__ = "0.1.0"

__all__ = [
    "CorpusExhaustedError",
    "GeneratedValue",
    "GenerationError",
    "GenerationRequest",
    "InvalidParameterError",
    "LengthInfeasibleError",
    "RegistryError",
    "Stage",
    "ValueGenerator",
    "ValueKind",
    "__version__",
    "default_registry",
    "generate",
    "generate_request",
]
