"""
SceneGraph

A page/shape scene graph with pluggable export visitors.
"""

__version__ = "0.1.0"

from .core import (
    Point, NodeKind, Component, Shape, Circle, Rectangle,
    Container, CompoundShape, Page,
    SceneGraphError, InvalidChildError, UnsupportedOperationError
)
from .export import (
    ExportVisitor, XmlExportVisitor, JsonExportVisitor,
    RasterExportVisitor, RasterSettings
)

__all__ = [
    'Point', 'NodeKind', 'Component', 'Shape', 'Circle', 'Rectangle',
    'Container', 'CompoundShape', 'Page',
    'SceneGraphError', 'InvalidChildError', 'UnsupportedOperationError',
    'ExportVisitor', 'XmlExportVisitor', 'JsonExportVisitor',
    'RasterExportVisitor', 'RasterSettings',
]
