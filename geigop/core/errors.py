"""Exceptions raised by geigop."""


class GeigopError(Exception):
    """Base class for geigop errors."""


class InvalidDimension(GeigopError, ValueError):
    """The matrix handed to an operator is not square."""

    def __init__(self, rows: int, cols: int):
        self.rows = rows
        self.cols = cols
        super().__init__(
            f"Matrix must be square, got {rows} rows and {cols} columns"
        )
