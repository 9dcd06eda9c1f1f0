"""A bank of 3D models addressed by handle, with frame-based animation."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, Union

from .math3d import Transform


def _check_file(path: str) -> Path:
    model = Path(path)
    if not model.is_file():
        raise FileNotFoundError(path)
    return model


@dataclass
class ModelData:
    """One loaded model slot; slots loaded from the same file share the model."""

    model: Any
    file_name: str = ""
    transform: Transform = field(default_factory=Transform)
    now_frame: float = 0.0
    anim_speed: float = 0.0
    start_frame: int = 0
    end_frame: int = 0

    def set_anim_frame(self, start: int, end: int, speed: float) -> None:
        """Play frames ``start``..``end`` at ``speed`` frames per draw, from the start."""
        self.now_frame = float(start)
        self.start_frame = start
        self.end_frame = end
        self.anim_speed = speed


class ModelBank:
    """Loaded models; ``loader`` reads a file, ``renderer`` draws a slot at a frame."""

    def __init__(
        self,
        loader: Callable[[str], Any] = _check_file,
        renderer: Optional[Callable[[ModelData, int], None]] = None,
    ) -> None:
        self._loader = loader
        self._renderer = renderer
        self._datas: list[Optional[ModelData]] = []

    def __len__(self) -> int:
        return len(self._datas)

    def __getitem__(self, handle: int) -> ModelData:
        data = self._get(handle)
        if data is None:
            raise IndexError(f"no model with handle {handle}")
        return data

    def _get(self, handle: int) -> Optional[ModelData]:
        if not 0 <= handle < len(self._datas):
            return None
        return self._datas[handle]

    def load(self, file_name: Union[str, Path]) -> int:
        """Load a model and return a new handle; each file is read once."""
        name = str(file_name)
        model = next(
            (d.model for d in self._datas if d is not None and d.file_name == name),
            None,
        )
        if model is None:
            model = self._loader(name)
        data = ModelData(model, name)
        for handle, existing in enumerate(self._datas):
            if existing is None:
                self._datas[handle] = data
                return handle
        self._datas.append(data)
        return len(self._datas) - 1

    def draw(self, handle: int) -> Optional[ModelData]:
        """Advance the animation, render, and return the slot; None for a bad handle."""
        data = self._get(handle)
        if data is None:
            return None
        data.now_frame += data.anim_speed
        if data.now_frame > float(data.end_frame):
            data.now_frame = float(data.start_frame)
        if self._renderer is not None:
            self._renderer(data, int(data.now_frame))
        return data

    def release(self, handle: int) -> None:
        """Free one slot so that a later load may reuse its handle."""
        if self._get(handle) is None:
            return
        self._datas[handle] = None

    def release_all(self) -> None:
        self._datas.clear()

    def set_anim_frame(self, handle: int, start_frame: int, end_frame: int, speed: float) -> None:
        self[handle].set_anim_frame(start_frame, end_frame, speed)

    def anim_frame(self, handle: int) -> int:
        """The current animation frame, truncated to a whole frame."""
        return int(self[handle].now_frame)

    def set_transform(self, handle: int, transform: Transform) -> None:
        data = self._get(handle)
        if data is not None:
            data.transform = transform.copy()