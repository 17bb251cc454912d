"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class UnsupportedDimensionError(DomainException):
    """Requested grouping dimension is not one the aggregation supports"""

    pass
