"""Exceptions raised by the matrix kernel."""


class InvalidDimension(ValueError):
    """A matrix operand has an unsupported or mismatched order."""


class NotInvertible(ValueError):
    """A matrix has a determinant of exactly zero and cannot be inverted."""
