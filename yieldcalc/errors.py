"""
Error Definitions Module.

The calculator has a single error kind: a parameter outside its physical or
economic domain. Arithmetic edge cases that are well defined (zero good dies,
zero defect density) are returned as results, never raised.
"""


class InvalidParameter(ValueError):
    """Raised when an input value lies outside its allowed domain."""

    def __init__(self, field, constraint, value):
        self.field = field
        self.constraint = constraint
        self.value = value
        super().__init__(f"{field} must be {constraint}, got {value}")
