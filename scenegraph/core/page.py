"""
SceneGraph Page

The Page is the root container of a scene and accepts any component.
"""

from typing import TYPE_CHECKING

from .container import Container
from .shapes import NodeKind

if TYPE_CHECKING:
    from ..export.visitor import ExportVisitor


class Page(Container):
    """A document page holding shapes, groups, or other pages."""

    kind = NodeKind.PAGE

    def accept(self, visitor: 'ExportVisitor'):
        return visitor.visit_page(self)
