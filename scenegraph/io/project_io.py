"""
Project File I/O for SceneGraph

Handles saving and loading scene project files, and writing exports to disk.
Projects use JSON with a "type" tag on every node so Page and CompoundShape
can be told apart when loading.
"""

import json
import logging
import numbers
from datetime import datetime
from typing import Any, Dict, Optional

from PIL import Image

from ..core.shapes import (
    Component, Circle, Rectangle, Point, NodeKind, SceneGraphError
)
from ..core.container import Container, CompoundShape
from ..core.page import Page
from ..export.visitor import ExportVisitor
from ..export.xml_export import XmlExportVisitor
from ..export.json_export import JsonExportVisitor, point_to_dict
from ..export.raster_export import RasterExportVisitor, RasterSettings

logger = logging.getLogger(__name__)

PROJECT_VERSION = '1.0'


class ProjectFormatError(SceneGraphError, ValueError):
    """Raised when a project document cannot be turned into a scene."""


class _ProjectVisitor(ExportVisitor[Dict[str, Any]]):
    """Serialize nodes to tagged dictionaries."""

    def visit_page(self, page: Page) -> Dict[str, Any]:
        return self._container(page)

    def visit_compound_shape(self, compound: CompoundShape) -> Dict[str, Any]:
        return self._container(compound)

    def visit_circle(self, circle: Circle) -> Dict[str, Any]:
        return {
            'type': circle.kind.value,
            'center': point_to_dict(circle.center),
            'radius': circle.radius
        }

    def visit_rectangle(self, rectangle: Rectangle) -> Dict[str, Any]:
        return {
            'type': rectangle.kind.value,
            'position': point_to_dict(rectangle.position),
            'width': rectangle.width,
            'height': rectangle.height
        }

    def _container(self, container: Container) -> Dict[str, Any]:
        return {
            'type': container.kind.value,
            'children': [child.accept(self) for child in container.get_children()]
        }


def component_to_dict(component: Component) -> Dict[str, Any]:
    """Convert a Component (and its subtree) to a dictionary."""
    return component.accept(_ProjectVisitor())


def _number(value: Any, name: str) -> float:
    """Return value if it is a real number (bool excluded)."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ProjectFormatError(f"{name} must be a number, got {value!r}")
    return value


def dict_to_point(point_dict: Any) -> Point:
    """Convert dictionary to Point."""
    try:
        x, y = point_dict['x'], point_dict['y']
    except (KeyError, TypeError) as e:
        raise ProjectFormatError(f"Invalid point: {point_dict!r}") from e
    return Point(_number(x, 'x'), _number(y, 'y'))


def dict_to_component(node_dict: Dict[str, Any]) -> Component:
    """
    Convert dictionary to Component.

    Raises:
        ProjectFormatError: If the node or any descendant is malformed
    """
    if not isinstance(node_dict, dict):
        raise ProjectFormatError(f"Expected an object, got {node_dict!r}")

    type_name = node_dict.get('type')
    try:
        kind = NodeKind(type_name)
    except ValueError:
        raise ProjectFormatError(f"Unknown node type: {type_name!r}") from None

    try:
        if kind is NodeKind.RECTANGLE:
            return Rectangle(
                dict_to_point(node_dict['position']),
                _number(node_dict['width'], 'width'),
                _number(node_dict['height'], 'height')
            )
        if kind is NodeKind.CIRCLE:
            return Circle(
                dict_to_point(node_dict['center']),
                _number(node_dict['radius'], 'radius')
            )
    except KeyError as e:
        raise ProjectFormatError(
            f"{type_name} is missing field {e.args[0]!r}"
        ) from None

    children = node_dict.get('children', [])
    if not isinstance(children, list):
        raise ProjectFormatError(
            f"{type_name} children must be a list, got {children!r}"
        )

    container = Page() if kind is NodeKind.PAGE else CompoundShape()
    for child_dict in children:
        # InvalidChildError propagates for a Page nested in a CompoundShape
        container.add(dict_to_component(child_dict))
    return container


def save_scene(root: Component, filepath: str) -> None:
    """
    Save a scene to a project file.

    Args:
        root: The root node to save
        filepath: Path to save the file
    """
    project = {
        'version': PROJECT_VERSION,
        'saved_at': datetime.now().isoformat(),
        'root': component_to_dict(root)
    }
    with open(filepath, 'w', encoding='utf-8') as f:
        json.dump(project, f, indent=2, ensure_ascii=False)
    logger.info("Saved scene to %s", filepath)


def load_scene(filepath: str) -> Component:
    """
    Load a scene from a project file.

    Args:
        filepath: Path to the project file

    Returns:
        The root node of the scene
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        try:
            project = json.load(f)
        except json.JSONDecodeError as e:
            raise ProjectFormatError(f"{filepath} is not valid JSON: {e}") from e

    if not isinstance(project, dict) or 'root' not in project:
        raise ProjectFormatError(f"{filepath} has no scene root")

    version = project.get('version')
    if version != PROJECT_VERSION:
        logger.warning("Project version %r differs from %r; loading anyway",
                       version, PROJECT_VERSION)

    return dict_to_component(project['root'])


def export_xml(root: Component, filepath: str) -> None:
    """Export a scene to an XML file."""
    with open(filepath, 'w', encoding='utf-8') as f:
        f.write(root.accept(XmlExportVisitor()))


def export_json(root: Component, filepath: str) -> None:
    """Export a scene to a JSON file."""
    with open(filepath, 'w', encoding='utf-8') as f:
        json.dump(root.accept(JsonExportVisitor()), f, indent=2)


def export_png(root: Component, filepath: str,
               settings: Optional[RasterSettings] = None) -> None:
    """Export a scene preview to a PNG file."""
    pixels = root.accept(RasterExportVisitor(settings))
    Image.fromarray(pixels).save(filepath, format='PNG')
