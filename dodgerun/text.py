"""Bitmap-font text drawn glyph by glyph through the image bank."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from .images import ImageBank, Rect
from .math3d import Transform, Vec3

DEFAULT_FONT = "char.png"
DEFAULT_CHAR_WIDTH = 16
DEFAULT_CHAR_HEIGHT = 32
DEFAULT_ROW_LENGTH = 16


@dataclass(frozen=True)
class Glyph:
    """One drawn character: its clip rectangle and its screen position."""

    rect: Rect
    position: Vec3


class Text:
    """Draws strings and integers from a font sheet whose first glyph is ``!``."""

    def __init__(
        self,
        images: ImageBank,
        screen_size: tuple[int, int] = (800, 600),
        file_name: str = DEFAULT_FONT,
        char_width: int = DEFAULT_CHAR_WIDTH,
        char_height: int = DEFAULT_CHAR_HEIGHT,
        row_length: int = DEFAULT_ROW_LENGTH,
    ) -> None:
        width, height = screen_size
        if width <= 0 or height <= 0:
            raise ValueError("screen size must be positive")
        if char_width <= 0 or char_height <= 0 or row_length <= 0:
            raise ValueError("glyph size and row length must be positive")
        self._images = images
        self._screen_width = int(width)
        self._screen_height = int(height)
        self.file_name = file_name
        self.char_width = int(char_width)
        self.char_height = int(char_height)
        self.row_length = int(row_length)
        self._handle: Optional[int] = None

    @property
    def handle(self) -> Optional[int]:
        return self._handle

    def initialize(self) -> int:
        """Load the font sheet and return its image handle."""
        self._handle = self._images.load(self.file_name)
        return self._handle

    def draw(self, x: int, y: int, value: Union[str, int, float]) -> list[Glyph]:
        """Draw ``value`` with its top-left corner at pixel (x, y)."""
        if self._handle is None:
            raise RuntimeError("text is not initialized")
        if isinstance(value, str):
            text = value
        elif isinstance(value, (int, float)):
            text = "%d" % int(value)
        else:
            raise TypeError(f"cannot draw a value of type {type(value).__name__}")

        half_w = self._screen_width / 2.0
        half_h = self._screen_height / 2.0
        px = float(x - self._screen_width // 2) / half_w
        py = float(-y + self._screen_height // 2) / half_h

        glyphs: list[Glyph] = []
        for char in text:
            index = ord(char) - ord("!")
            column = index % self.row_length
            row = index // self.row_length
            transform = Transform()
            transform.position = Vec3(px, py, 0.0)
            self._images.set_transform(self._handle, transform)
            rect = Rect(
                self.char_width * column,
                self.char_height * row,
                self.char_width,
                self.char_height,
            )
            self._images.set_rect(self._handle, rect.left, rect.top, rect.width, rect.height)
            self._images.draw(self._handle)
            glyphs.append(Glyph(rect, Vec3(px, py, 0.0)))
            px += self.char_width / half_w
        return glyphs

    def release(self) -> None:
        """Free the font sheet's image slot."""
        if self._handle is not None:
            self._images.release(self._handle)
            self._handle = None