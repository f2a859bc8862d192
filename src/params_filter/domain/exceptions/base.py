"""Base exceptions for params_filter domain."""


class ParamsFilterError(Exception):
    """Root exception for all params_filter errors.

    All domain exceptions inherit from this.
    Allows catching all params_filter-specific errors.
    """
