"""Exceptions raised by the navigation core."""

from __future__ import annotations


class GridNavError(Exception):
    """Base class for navigation errors."""


class FieldError(GridNavError, ValueError):
    pass


class InvalidStartError(GridNavError, LookupError):
    def __init__(self, coordinate: tuple[int, int]) -> None:
        super().__init__(f"start {coordinate} is not a node in the graph")
        self.coordinate = coordinate


class InvalidGoalError(GridNavError, LookupError):
    def __init__(self, coordinate: tuple[int, int]) -> None:
        super().__init__(f"goal {coordinate} is not a node in the graph")
        self.coordinate = coordinate


class StaleGraphError(GridNavError):
    """The node graph was rebuilt after the caller captured it."""


class EmptyFrontierError(GridNavError, IndexError):
    pass


class MapLoadError(GridNavError):
    pass
