"""Custom exception hierarchy for maze generation."""


class MazeError(Exception):
    """Base exception for generator failures."""


class InvalidArgumentError(MazeError, ValueError):
    """Raised when a grid is constructed with unusable parameters."""


class ValidationError(MazeError):
    """Raised when the maze integrity checks fail."""
