"""The shared services a running game hands to its objects."""

from __future__ import annotations

import random
from typing import Optional

from .audio import AudioBank
from .camera import Camera
from .controls import InputState
from .images import ImageBank
from .models import ModelBank
from .vfx import ParticleSystem


class GameContext:
    """Input, camera, asset banks, effects and randomness for one game."""

    def __init__(
        self,
        screen_width: int = 800,
        screen_height: int = 600,
        *,
        images: Optional[ImageBank] = None,
        models: Optional[ModelBank] = None,
        audio: Optional[AudioBank] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.screen_width = screen_width
        self.screen_height = screen_height
        self.camera = Camera(screen_width, screen_height)
        self.input = InputState()
        self.images = images if images is not None else ImageBank()
        self.models = models if models is not None else ModelBank()
        self.audio = audio if audio is not None else AudioBank()
        self.rng = rng if rng is not None else random.Random()
        self.vfx = ParticleSystem(self.rng)

    @property
    def screen_size(self) -> tuple[int, int]:
        return (self.screen_width, self.screen_height)

    def release_scene_assets(self) -> None:
        """Forget everything a scene loaded: sounds, models and images."""
        self.audio.release()
        self.models.release_all()
        self.images.release_all()

    def release_all(self) -> None:
        """Shut down effects and every asset bank."""
        self.vfx.release()
        self.release_scene_assets()