"""
SceneGraph Core Module

Contains the scene graph node types:
- Page: Root container, accepts any component
- CompoundShape: Groups shapes, refuses pages
- Shapes: Circle, Rectangle
"""

# Import order matters - shapes first, then containers
from .shapes import (
    Point, NodeKind, Component, Shape, Circle, Rectangle,
    SceneGraphError, InvalidChildError, UnsupportedOperationError
)
from .container import Container, CompoundShape
from .page import Page

__all__ = [
    'Point', 'NodeKind', 'Component', 'Shape', 'Circle', 'Rectangle',
    'SceneGraphError', 'InvalidChildError', 'UnsupportedOperationError',
    'Container', 'CompoundShape',
    'Page'
]
