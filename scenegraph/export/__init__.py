"""
SceneGraph Export Module

Visitors that turn a scene graph into an output representation.
"""

from .visitor import ExportVisitor
from .xml_export import XmlExportVisitor, format_number
from .json_export import JsonExportVisitor
from .raster_export import RasterExportVisitor, RasterSettings

__all__ = [
    'ExportVisitor',
    'XmlExportVisitor', 'format_number',
    'JsonExportVisitor',
    'RasterExportVisitor', 'RasterSettings',
]
