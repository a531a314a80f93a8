"""
Raster Export for SceneGraph

Renders a scene as a grayscale preview bitmap.

Each leaf is drawn onto its own blank canvas with Pillow; containers
merge their children's canvases with an element-wise minimum, so the
darkest ink wins wherever outlines overlap.
"""

from dataclasses import dataclass
from typing import Tuple
import logging

import numpy as np
from PIL import Image, ImageDraw

from ..core.shapes import Circle, Rectangle
from ..core.container import Container, CompoundShape
from ..core.page import Page
from .visitor import ExportVisitor

logger = logging.getLogger(__name__)


@dataclass
class RasterSettings:
    """Canvas parameters for raster export."""
    width: int = 200             # Canvas width in pixels
    height: int = 200            # Canvas height in pixels
    scale: float = 1.0           # Pixels per scene unit
    background: int = 255        # Gray level 0-255
    stroke: int = 0              # Outline gray level 0-255
    line_width: int = 1          # Outline width in pixels

    def validate(self) -> Tuple[bool, str]:
        """
        Validate settings.

        Returns:
            Tuple of (is_valid, error_message)
        """
        if self.width <= 0 or self.height <= 0:
            return False, "Canvas size must be positive"
        if self.scale <= 0:
            return False, "Scale must be positive"
        for name in ('background', 'stroke'):
            level = getattr(self, name)
            if not 0 <= level <= 255:
                return False, f"{name.capitalize()} must be between 0 and 255"
        if self.line_width < 1:
            return False, "Line width must be at least 1"
        return True, ""


class RasterExportVisitor(ExportVisitor[np.ndarray]):
    """
    Export nodes as grayscale images.

    Every method returns a uint8 array of shape (height, width).

    Example:
        >>> visitor = RasterExportVisitor(RasterSettings(width=64, height=64))
        >>> pixels = page.accept(visitor)
        >>> Image.fromarray(pixels).save("preview.png")
    """

    def __init__(self, settings: RasterSettings = None):
        self.settings = settings or RasterSettings()

        is_valid, error = self.settings.validate()
        if not is_valid:
            raise ValueError(error)

    def blank(self) -> np.ndarray:
        """Return an empty canvas."""
        s = self.settings
        return np.full((s.height, s.width), s.background, dtype=np.uint8)

    def visit_page(self, page: Page) -> np.ndarray:
        return self._container(page)

    def visit_compound_shape(self, compound: CompoundShape) -> np.ndarray:
        return self._container(compound)

    def visit_circle(self, circle: Circle) -> np.ndarray:
        k = self.settings.scale
        cx, cy = circle.center.x * k, circle.center.y * k
        r = abs(circle.radius * k)
        return self._draw(lambda draw: draw.ellipse(
            [cx - r, cy - r, cx + r, cy + r],
            outline=self.settings.stroke, width=self.settings.line_width
        ))

    def visit_rectangle(self, rectangle: Rectangle) -> np.ndarray:
        k = self.settings.scale
        corner = rectangle.bottom_right
        x0, x1 = sorted((rectangle.position.x * k, corner.x * k))
        y0, y1 = sorted((rectangle.position.y * k, corner.y * k))
        # Negative sizes extend left/up from the position
        return self._draw(lambda draw: draw.rectangle(
            [x0, y0, x1, y1],
            outline=self.settings.stroke, width=self.settings.line_width
        ))

    def _draw(self, paint) -> np.ndarray:
        s = self.settings
        img = Image.new('L', (s.width, s.height), s.background)
        paint(ImageDraw.Draw(img))
        return np.array(img, dtype=np.uint8)

    def _container(self, container: Container) -> np.ndarray:
        canvas = self.blank()
        for child in container.get_children():
            np.minimum(canvas, child.accept(self), out=canvas)
        logger.debug("Rasterized %r (%d children)", container,
                     len(container.get_children()))
        return canvas
