"""
JSON Export for SceneGraph

Renders a scene as nested dictionaries ready for json.dump.
"""

from typing import Any, Dict

from ..core.shapes import Circle, Point, Rectangle
from ..core.container import Container, CompoundShape
from ..core.page import Page
from .visitor import ExportVisitor


def point_to_dict(point: Point) -> Dict[str, Any]:
    return {'x': point.x, 'y': point.y}


class JsonExportVisitor(ExportVisitor[Dict[str, Any]]):
    """Export nodes as JSON-compatible dictionaries."""

    def visit_page(self, page: Page) -> Dict[str, Any]:
        return self._container(page)

    def visit_compound_shape(self, compound: CompoundShape) -> Dict[str, Any]:
        return self._container(compound)

    def visit_circle(self, circle: Circle) -> Dict[str, Any]:
        return {
            'center': point_to_dict(circle.center),
            'radius': circle.radius
        }

    def visit_rectangle(self, rectangle: Rectangle) -> Dict[str, Any]:
        return {
            'position': point_to_dict(rectangle.position),
            'width': rectangle.width,
            'height': rectangle.height
        }

    def _container(self, container: Container) -> Dict[str, Any]:
        return {
            'children': [child.accept(self) for child in container.get_children()]
        }
