"""
SceneGraph Container Nodes

Components that hold an ordered, duplicate-free set of children.
"""

from typing import Dict, Tuple, TYPE_CHECKING
import logging

from .shapes import Component, InvalidChildError, NodeKind

if TYPE_CHECKING:
    from ..export.visitor import ExportVisitor

logger = logging.getLogger(__name__)


class Container(Component):
    """
    Base class for components that contain other components.

    Children are kept in insertion order and a given instance is held
    at most once. Adding a child points its parent at this container;
    removing it clears the parent if it still points here.
    """

    def __init__(self):
        super().__init__()
        # dict keys give an insertion-ordered identity set
        self._children: Dict[Component, None] = {}

    def get_children(self) -> Tuple[Component, ...]:
        return tuple(self._children)

    def check_child(self, component: Component) -> None:
        """Raise InvalidChildError if this container refuses the component."""
        pass

    def add(self, component: Component) -> None:
        """Add a child. Adding a child that is already present is a no-op."""
        self.check_child(component)
        if self.contains(component):
            logger.debug("%r already contains %r", self, component)
        else:
            self._children[component] = None
        component.set_parent(self)

    def remove(self, component: Component) -> None:
        """Remove a child. Removing an absent child is a no-op."""
        if not self.contains(component):
            logger.debug("%r does not contain %r", self, component)
            return
        del self._children[component]
        if component.get_parent() is self:
            component.set_parent(None)

    def contains(self, component: Component) -> bool:
        """Check if the component is a direct child."""
        return component in self._children


class CompoundShape(Container):
    """
    A group of shapes.

    A compound shape models a grouped drawing, so it refuses to hold a Page.
    """

    kind = NodeKind.COMPOUND_SHAPE

    def check_child(self, component: Component) -> None:
        if component.kind is NodeKind.PAGE:
            raise InvalidChildError(
                f"add: {self.kind.value} cannot contain a {component.kind.value}"
            )

    def accept(self, visitor: 'ExportVisitor'):
        return visitor.visit_compound_shape(self)
