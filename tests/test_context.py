import random
import wave

import pytest

from dodgerun.context import GameContext
from dodgerun.images import ImageBank
from dodgerun.models import ModelBank
from dodgerun.vfx import EmitterData


def _write_wav(path):
    with wave.open(str(path), "wb") as out:
        out.setnchannels(1)
        out.setsampwidth(1)
        out.setframerate(8000)
        out.writeframes(bytes(80))


def _context():
    return GameContext(
        images=ImageBank(loader=lambda name: (4, 4)),
        models=ModelBank(loader=lambda name: object()),
        rng=random.Random(1),
    )


def test_release_scene_assets_empties_banks(tmp_path):
    ctx = _context()
    wav = tmp_path / "se.wav"
    _write_wav(wav)
    ctx.audio.load(wav)
    ctx.images.load("title.png")
    ctx.models.load("road.fbx")
    ctx.release_scene_assets()
    assert len(ctx.audio) == 0
    assert len(ctx.images) == 0
    assert len(ctx.models) == 0


def test_release_all_clears_effects():
    ctx = _context()
    ctx.vfx.start(EmitterData(delay=0))
    ctx.vfx.update()
    ctx.release_all()
    assert ctx.vfx.emitters == ()
    assert ctx.vfx.particles == ()


def test_default_screen_size():
    ctx = GameContext()
    assert ctx.screen_size == (800, 600)


def test_camera_starts_at_default_eye():
    ctx = GameContext(1024, 768)
    assert tuple(ctx.camera.position) == (0.0, 3.0, -10.0)


def test_invalid_screen_size():
    with pytest.raises(ValueError):
        GameContext(0, 600)


def test_input_starts_idle():
    ctx = GameContext()
    assert ctx.input.is_key(0x39) is False
    ctx.input.update(keys=[0x39])
    assert ctx.input.is_key_down(0x39) is True