class BitEvoError(Exception):
    """Base for all BitEvo exceptions."""

    pass


# High-level families
class ValidationError(BitEvoError):
    """Data validation failures."""

    pass


class EvolutionError(BitEvoError):
    """Evolution process failures."""

    pass


# Validation subtypes
class PopulationConfigError(ValidationError, ValueError):
    """Raised when population parameters are inconsistent."""

    pass


# Evolution subtypes
class SelectionError(EvolutionError):
    """Raised when no candidate can be picked (remaining score sum is zero)."""

    pass


class EmptyBreedingPoolError(EvolutionError):
    """Raised when crossover runs with no selected parents."""

    pass
