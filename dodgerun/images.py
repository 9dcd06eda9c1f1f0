"""A bank of 2D images addressed by handle, with clipping, alpha and placement."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

from PIL import Image as _PilImage

from .math3d import Transform


def _image_size(path: str) -> tuple[int, int]:
    with _PilImage.open(path) as img:
        return img.size


@dataclass
class Rect:
    """Clip region of an image: origin plus width and height in pixels."""

    left: int = 0
    top: int = 0
    width: int = 0
    height: int = 0


@dataclass
class _Sprite:
    file_name: str
    size: tuple[int, int]


@dataclass
class ImageData:
    """One loaded image slot; slots loaded from the same file share a sprite."""

    sprite: _Sprite
    file_name: str = ""
    rect: Rect = field(default_factory=Rect)
    alpha: float = 1.0
    transform: Transform = field(default_factory=Transform)

    @property
    def texture_size(self) -> tuple[int, int]:
        return self.sprite.size


class ImageBank:
    """Loaded images; invalid handles are ignored by the setters, as by draw."""

    def __init__(
        self,
        loader: Callable[[str], tuple[int, int]] = _image_size,
        renderer: Optional[Callable[[ImageData], None]] = None,
    ) -> None:
        self._loader = loader
        self._renderer = renderer
        self._datas: list[Optional[ImageData]] = []

    def __len__(self) -> int:
        return len(self._datas)

    def __getitem__(self, handle: int) -> ImageData:
        data = self._get(handle)
        if data is None:
            raise IndexError(f"no image with handle {handle}")
        return data

    def _get(self, handle: int) -> Optional[ImageData]:
        if not 0 <= handle < len(self._datas):
            return None
        return self._datas[handle]

    def load(self, file_name: Union[str, Path]) -> int:
        """Load an image and return a new handle; the picture is read once per file."""
        name = str(file_name)
        sprite = next(
            (d.sprite for d in self._datas if d is not None and d.file_name == name),
            None,
        )
        if sprite is None:
            width, height = self._loader(name)
            sprite = _Sprite(name, (int(width), int(height)))
        data = ImageData(sprite, name)

        for handle, existing in enumerate(self._datas):
            if existing is None:
                self._datas[handle] = data
                self.reset_rect(handle)
                return handle
        self._datas.append(data)
        handle = len(self._datas) - 1
        self.reset_rect(handle)
        return handle

    def draw(self, handle: int) -> Optional[ImageData]:
        """Hand the image to the renderer; returns what was drawn, or None."""
        data = self._get(handle)
        if data is None:
            return None
        if self._renderer is not None:
            self._renderer(data)
        return data

    def release(self, handle: int) -> None:
        """Free one slot so that a later load may reuse its handle."""
        if self._get(handle) is None:
            return
        self._datas[handle] = None

    def release_all(self) -> None:
        self._datas.clear()

    def set_rect(self, handle: int, x: int, y: int, width: int, height: int) -> None:
        data = self._get(handle)
        if data is not None:
            data.rect = Rect(x, y, width, height)

    def reset_rect(self, handle: int) -> None:
        """Show the whole picture."""
        data = self._get(handle)
        if data is not None:
            width, height = data.texture_size
            data.rect = Rect(0, 0, width, height)

    def set_alpha(self, handle: int, alpha: int) -> None:
        """Opacity given as 0..255."""
        data = self._get(handle)
        if data is not None:
            data.alpha = alpha / 255.0

    def set_transform(self, handle: int, transform: Transform) -> None:
        data = self._get(handle)
        if data is not None:
            data.transform = transform.copy()