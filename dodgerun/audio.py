"""WAV loading and a bank of sounds played through a fixed number of voices."""

from __future__ import annotations

import io
import struct
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, Union


@dataclass(frozen=True)
class WaveFormat:
    """The fields of a WAV ``fmt `` chunk."""

    format_tag: int
    channels: int
    samples_per_sec: int
    avg_bytes_per_sec: int
    block_align: int
    bits_per_sample: int


@dataclass(frozen=True)
class WaveData:
    """A parsed WAV file: its format and raw sample bytes."""

    format: WaveFormat
    samples: bytes

    @property
    def duration(self) -> float:
        """Length in seconds."""
        if self.format.avg_bytes_per_sec == 0:
            return 0.0
        return len(self.samples) / self.format.avg_bytes_per_sec


def _read(stream: io.BytesIO, size: int) -> bytes:
    chunk = stream.read(size)
    if len(chunk) != size:
        raise ValueError("truncated wave data")
    return chunk


def _read_u32(stream: io.BytesIO) -> int:
    return struct.unpack("<I", _read(stream, 4))[0]


def parse_wave(data: bytes) -> WaveData:
    """Parse RIFF/WAVE bytes, skipping chunks other than ``fmt `` and ``data``."""
    stream = io.BytesIO(data)
    if _read(stream, 4) != b"RIFF":
        raise ValueError("not a RIFF file")
    _read_u32(stream)
    if _read(stream, 4) != b"WAVE":
        raise ValueError("not a WAVE file")

    while not _read(stream, 4).startswith(b"f"):
        pass
    fmt_size = _read_u32(stream)
    fmt = WaveFormat(*struct.unpack("<HHIIHH", _read(stream, 16)))
    if fmt_size > 16:
        _read(stream, fmt_size - 16)

    while True:
        chunk_id = _read(stream, 4)
        if chunk_id == b"data":
            break
        _read(stream, _read_u32(stream))

    size = _read_u32(stream)
    return WaveData(fmt, _read(stream, size))


def _mixer_ready() -> bool:
    try:
        import pygame.mixer
    except (ImportError, NotImplementedError):
        return False
    return bool(pygame.mixer.get_init())


@dataclass
class _Sound:
    file_name: str
    wave: WaveData
    loop: bool
    voices: list[Optional[float]]
    output: Any = field(default=None, repr=False)


class AudioBank:
    """Loaded sounds addressed by handle; each has a fixed number of voices."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._sounds: list[_Sound] = []

    def __len__(self) -> int:
        return len(self._sounds)

    def load(self, file_name: Union[str, Path], loop: bool = False, voices: int = 1) -> int:
        """Load a WAV file, or return the handle of the same file already loaded."""
        name = str(file_name)
        for handle, sound in enumerate(self._sounds):
            if sound.file_name == name:
                return handle
        if voices < 1:
            raise ValueError("a sound needs at least one voice")
        wave = parse_wave(Path(name).read_bytes())
        output = None
        if _mixer_ready():
            import pygame.mixer

            output = pygame.mixer.Sound(name)
        self._sounds.append(_Sound(name, wave, loop, [None] * voices, output))
        return len(self._sounds) - 1

    def _sound(self, handle: int) -> _Sound:
        if not 0 <= handle < len(self._sounds):
            raise IndexError(f"no sound with handle {handle}")
        return self._sounds[handle]

    def _busy(self, sound: _Sound, started: Optional[float]) -> bool:
        if started is None:
            return False
        return sound.loop or self._clock() - started < sound.wave.duration

    def play(self, handle: int) -> Optional[int]:
        """Start the sound on its first idle voice; return that voice, or None if all are busy."""
        sound = self._sound(handle)
        for voice, started in enumerate(sound.voices):
            if not self._busy(sound, started):
                sound.voices[voice] = self._clock()
                if sound.output is not None:
                    sound.output.play(loops=-1 if sound.loop else 0)
                return voice
        return None

    def stop(self, handle: int) -> None:
        """Stop every voice of the sound."""
        sound = self._sound(handle)
        sound.voices = [None] * len(sound.voices)
        if sound.output is not None:
            sound.output.stop()

    def release(self) -> None:
        """Stop and forget every loaded sound."""
        for sound in self._sounds:
            if sound.output is not None:
                sound.output.stop()
        self._sounds.clear()