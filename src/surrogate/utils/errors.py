"""Typed exceptions raised while generating values or building the catalog."""


class GenerationError(ValueError):
    """Base class for value generation failures."""


class LengthInfeasibleError(GenerationError):
    """Raised when no composition, fallbacks included, fits the length budget."""


class CorpusExhaustedError(GenerationError):
    """Raised when the exclusion set removes every entry under a ceiling."""


class InvalidParameterError(GenerationError):
    """Raised for malformed or out-of-range request parameters."""


class RegistryError(ValueError):
    """Raised when the catalog or generator registry cannot be built."""
