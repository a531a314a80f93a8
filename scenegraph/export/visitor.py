"""
Export Visitor Interface

An export visitor has one method per node kind. Adding a new export format
means writing a new visitor; the node classes never change.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar, TYPE_CHECKING

if TYPE_CHECKING:
    from ..core.shapes import Circle, Rectangle
    from ..core.container import CompoundShape
    from ..core.page import Page

T = TypeVar('T')


class ExportVisitor(ABC, Generic[T]):
    """
    Abstract base class for export visitors.

    Every visitor must implement:
    - visit_page(): Export a Page and its children
    - visit_compound_shape(): Export a CompoundShape and its children
    - visit_circle(): Export a Circle
    - visit_rectangle(): Export a Rectangle

    Container methods export children by calling child.accept(self),
    in the container's child order.
    """

    @abstractmethod
    def visit_page(self, page: 'Page') -> T:
        pass

    @abstractmethod
    def visit_compound_shape(self, compound: 'CompoundShape') -> T:
        pass

    @abstractmethod
    def visit_circle(self, circle: 'Circle') -> T:
        pass

    @abstractmethod
    def visit_rectangle(self, rectangle: 'Rectangle') -> T:
        pass
