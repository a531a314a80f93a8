"""
XML Export for SceneGraph

Renders a scene as a compact XML string, one element per node.
"""

import math
from decimal import Decimal
from typing import Union

from ..core.shapes import Circle, Rectangle, NodeKind
from ..core.container import Container, CompoundShape
from ..core.page import Page
from .visitor import ExportVisitor


def format_number(value: Union[int, float]) -> str:
    """
    Format a number for an XML attribute the way JavaScript prints numbers.

    - Integral values have no decimal point: 40.0 -> "40"
    - Non-finite values: "NaN", "Infinity", "-Infinity"
    - Magnitudes >= 1e21 or < 1e-6 use exponent form: "1e+21", "1.5e-7"
    - Anything else uses plain decimal notation: 0.00001 -> "0.00001"
    """
    if isinstance(value, int) and abs(value) < 10**21:
        return str(value)

    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"

    magnitude = abs(value)
    if value.is_integer() and magnitude < 1e21:
        return str(int(value))

    # repr gives the shortest round-trip digits, same as JavaScript
    text = repr(value)
    if magnitude >= 1e21 or magnitude < 1e-6:
        mantissa, _, exponent = text.partition('e')
        exp = int(exponent)
        return f"{mantissa}e{'+' if exp >= 0 else '-'}{abs(exp)}"
    if 'e' in text:
        return format(Decimal(text), 'f')
    return text


class XmlExportVisitor(ExportVisitor[str]):
    """Export nodes as XML elements."""

    def visit_page(self, page: Page) -> str:
        return self._container(page)

    def visit_compound_shape(self, compound: CompoundShape) -> str:
        return self._container(compound)

    def visit_circle(self, circle: Circle) -> str:
        # Area is truncated, not rounded: r=20 gives 1256
        area = circle.radius * circle.radius * math.pi
        if math.isfinite(area):
            area = math.floor(area)
        return self._element(
            NodeKind.CIRCLE,
            centerX=circle.center.x,
            centerY=circle.center.y,
            radius=circle.radius,
            area=area,
        )

    def visit_rectangle(self, rectangle: Rectangle) -> str:
        corner = rectangle.bottom_right
        return self._element(
            NodeKind.RECTANGLE,
            left=rectangle.position.x,
            top=rectangle.position.y,
            right=corner.x,
            bottom=corner.y,
            width=rectangle.width,
            height=rectangle.height,
            area=rectangle.width * rectangle.height,
        )

    def _container(self, container: Container) -> str:
        tag = container.kind.value
        body = ''.join(child.accept(self) for child in container.get_children())
        return f'<{tag}>{body}</{tag}>'

    @staticmethod
    def _element(kind: NodeKind, **attributes) -> str:
        attrs = ' '.join(
            f'{name}="{format_number(value)}"' for name, value in attributes.items()
        )
        return f'<{kind.value} {attrs}/>'
