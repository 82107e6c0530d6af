"""
Custom exceptions for primepath
"""

class PrimePathError(Exception):
    """Base exception for primepath"""
    pass

class ConfigurationError(PrimePathError):
    """Configuration-related errors"""
    pass

class InputError(PrimePathError):
    """Malformed pyramid input"""
    pass

class InputExhaustedError(InputError):
    """The value supplier ran out before the pyramid was complete"""
    pass

class PyramidShapeError(InputError):
    """Row counts or cell coordinates that do not form a triangle"""
    pass

class InvalidCellError(InputError):
    """A cell value that is not a non-negative integer"""
    pass

class SourceUnavailableError(PrimePathError):
    """The input file could not be opened"""
    pass
