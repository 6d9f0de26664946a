"""Exceptions raised by flatCAD."""


class GeometryError(ValueError):
    """Base class for flatCAD geometry and topology failures."""

    def __init__(self, message, details=None):
        super().__init__(message)
        self.details = details or {}


class InvalidPrecondition(GeometryError):
    """A mutation or query was called with arguments that violate its
    preconditions; nothing was changed."""


class UnsupportedShapeKind(GeometryError, TypeError):
    """Intersection or distance requested for shapes outside the
    supported set of shape kinds."""


class TopologyError(GeometryError):
    """The face/edge structure is inconsistent with what an algorithm
    requires."""


__all__ = [
    'GeometryError',
    'InvalidPrecondition',
    'UnsupportedShapeKind',
    'TopologyError',
]
