"""
Custom exception classes for contract cost calculations.

Callers catch ContractCostError to handle every failure the package raises;
the subclasses tell apart bad parameters, missing groups and I/O problems.
"""


class ContractCostError(Exception):
    """Base exception for all contract cost errors."""

    pass


class InvalidConfiguration(ContractCostError):
    """Raised when contract years or raise percentages are missing or invalid."""

    pass


class EmptyInput(ContractCostError):
    """Raised when a calculation is requested with no groups at all."""

    pass


class ConfigLoadError(ContractCostError):
    """Raised when a scenario file cannot be found, parsed or validated."""

    pass


class DataReadError(ContractCostError):
    """Raised when a step file cannot be read."""

    pass


class DataWriteError(ContractCostError):
    """Raised when a report table or chart cannot be written."""

    pass
