"""
SceneGraph Core Shapes Module

Defines the fundamental node classes: Point, NodeKind, Component and the
leaf shapes Circle and Rectangle.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, TYPE_CHECKING
import weakref

if TYPE_CHECKING:
    from ..export.visitor import ExportVisitor


class SceneGraphError(Exception):
    """Base class for scene graph errors."""


class InvalidChildError(SceneGraphError, ValueError):
    """Raised when a container refuses a child of the given kind."""


class UnsupportedOperationError(SceneGraphError, TypeError):
    """Raised when a leaf shape is asked to manage children."""


@dataclass(frozen=True)
class Point:
    """A 2D point."""
    x: float
    y: float

    def __add__(self, other: 'Point') -> 'Point':
        return Point(self.x + other.x, self.y + other.y)


class NodeKind(Enum):
    """Closed set of node kinds in a scene graph."""
    PAGE = "Page"
    COMPOUND_SHAPE = "CompoundShape"
    CIRCLE = "Circle"
    RECTANGLE = "Rectangle"


class Component(ABC):
    """
    Abstract base class for all scene graph nodes.

    Every component carries its NodeKind and a weak reference to the
    container it was most recently added to.
    """

    kind: NodeKind

    def __init__(self):
        self._parent: Optional[weakref.ref] = None

    def set_parent(self, parent: Optional['Component']) -> None:
        """Record the enclosing container (None clears it)."""
        self._parent = weakref.ref(parent) if parent is not None else None

    def get_parent(self) -> Optional['Component']:
        """Return the enclosing container, or None."""
        if self._parent is None:
            return None
        return self._parent()

    @abstractmethod
    def get_children(self) -> Optional[Tuple['Component', ...]]:
        """
        Return the children of a container, in insertion order.

        Leaves return None so callers can tell leaf from composite
        without inspecting types.
        """
        pass

    @abstractmethod
    def add(self, component: 'Component') -> None:
        pass

    @abstractmethod
    def remove(self, component: 'Component') -> None:
        pass

    @abstractmethod
    def accept(self, visitor: 'ExportVisitor'):
        """Dispatch to the visitor method matching this node's kind."""
        pass

    @property
    def is_leaf(self) -> bool:
        return self.get_children() is None

    def __repr__(self) -> str:
        return f"<{self.kind.value} at 0x{id(self):x}>"


class Shape(Component):
    """
    Abstract base class for leaf shapes.

    A shape has a fixed position and never contains other components.
    """

    def __init__(self, position: Point):
        super().__init__()
        self._position = position

    @property
    def position(self) -> Point:
        return self._position

    def get_children(self) -> None:
        return None

    def add(self, component: Component) -> None:
        raise UnsupportedOperationError(
            f"add: shapes cannot contain components ({self.kind.value})"
        )

    def remove(self, component: Component) -> None:
        raise UnsupportedOperationError(
            f"remove: shapes cannot contain components ({self.kind.value})"
        )


class Circle(Shape):
    """A circle given by its center and radius."""

    kind = NodeKind.CIRCLE

    def __init__(self, center: Point, radius: float):
        super().__init__(center)
        self._radius = radius

    @property
    def center(self) -> Point:
        return self._position

    @property
    def radius(self) -> float:
        return self._radius

    def accept(self, visitor: 'ExportVisitor'):
        return visitor.visit_circle(self)


class Rectangle(Shape):
    """A rectangle given by its top-left corner, width and height."""

    kind = NodeKind.RECTANGLE

    def __init__(self, position: Point, width: float, height: float):
        super().__init__(position)
        self._width = width
        self._height = height

    @property
    def width(self) -> float:
        return self._width

    @property
    def height(self) -> float:
        return self._height

    @property
    def bottom_right(self) -> Point:
        return self._position + Point(self._width, self._height)

    def accept(self, visitor: 'ExportVisitor'):
        return visitor.visit_rectangle(self)
