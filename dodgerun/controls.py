"""Keyboard, mouse and game-pad state with edge detection between frames."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import IntEnum, IntFlag

from .math3d import Vec3

MAX_PAD_NUM = 4
STICK_MAX = 32767
TRIGGER_MAX = 255
LEFT_THUMB_DEADZONE = 7849
RIGHT_THUMB_DEADZONE = 8689
TRIGGER_THRESHOLD = 30


class Key(IntEnum):
    """Keyboard scan codes used by the game."""

    ESCAPE = 0x01
    A = 0x1E
    SPACE = 0x39
    LEFT = 0xCB
    RIGHT = 0xCD


class PadButton(IntFlag):
    """Game-pad button bits."""

    DPAD_UP = 0x0001
    DPAD_DOWN = 0x0002
    DPAD_LEFT = 0x0004
    DPAD_RIGHT = 0x0008
    START = 0x0010
    BACK = 0x0020
    LEFT_THUMB = 0x0040
    RIGHT_THUMB = 0x0080
    LEFT_SHOULDER = 0x0100
    RIGHT_SHOULDER = 0x0200
    A = 0x1000
    B = 0x2000
    X = 0x4000
    Y = 0x8000


@dataclass(frozen=True)
class PadState:
    """A snapshot of one game pad."""

    buttons: int = 0
    thumb_lx: int = 0
    thumb_ly: int = 0
    thumb_rx: int = 0
    thumb_ry: int = 0
    left_trigger: int = 0
    right_trigger: int = 0


def analog_value(raw: float, maximum: float, dead_zone: float) -> float:
    """Scale a raw axis reading to -1..1, treating the dead zone as zero."""
    result = float(raw)
    if result > 0:
        if result < dead_zone:
            return 0.0
        return (result - dead_zone) / (maximum - dead_zone)
    if result > -dead_zone:
        return 0.0
    return (result + dead_zone) / (maximum - dead_zone)


def _idle_pads() -> list[PadState]:
    return [PadState() for _ in range(MAX_PAD_NUM)]


class InputState:
    """Current and previous frame of every input device."""

    def __init__(self) -> None:
        self._keys: frozenset[int] = frozenset()
        self._prev_keys: frozenset[int] = frozenset()
        self._mouse: frozenset[int] = frozenset()
        self._prev_mouse: frozenset[int] = frozenset()
        self._mouse_move = Vec3()
        self._mouse_pos = Vec3()
        self._pads = _idle_pads()
        self._prev_pads = _idle_pads()

    def update(
        self,
        keys: Iterable[int] = (),
        mouse_buttons: Iterable[int] = (),
        mouse_move: Iterable[float] = (0.0, 0.0, 0.0),
        pads: Sequence[PadState] = (),
    ) -> None:
        """Start a new frame: the current state becomes the previous one."""
        pad_list = list(pads)
        if len(pad_list) > MAX_PAD_NUM:
            raise ValueError(f"at most {MAX_PAD_NUM} pads are supported")
        self._prev_keys = self._keys
        self._keys = frozenset(int(k) for k in keys)
        self._prev_mouse = self._mouse
        self._mouse = frozenset(int(b) for b in mouse_buttons)
        self._mouse_move = Vec3(*mouse_move)
        self._prev_pads = self._pads
        self._pads = pad_list + [PadState() for _ in range(MAX_PAD_NUM - len(pad_list))]

    # keyboard
    def is_key(self, key: int) -> bool:
        return int(key) in self._keys

    def is_key_down(self, key: int) -> bool:
        """Pressed this frame but not the previous one."""
        return self.is_key(key) and int(key) not in self._prev_keys

    def is_key_up(self, key: int) -> bool:
        """Released this frame after being held the previous one."""
        return not self.is_key(key) and int(key) in self._prev_keys

    # mouse
    def is_mouse_button(self, button: int) -> bool:
        return int(button) in self._mouse

    def is_mouse_button_down(self, button: int) -> bool:
        return self.is_mouse_button(button) and int(button) not in self._prev_mouse

    def is_mouse_button_up(self, button: int) -> bool:
        return not self.is_mouse_button(button) and int(button) in self._prev_mouse

    def mouse_position(self) -> Vec3:
        return self._mouse_pos.copy()

    def set_mouse_position(self, x: int, y: int) -> None:
        self._mouse_pos = Vec3(float(x), float(y), 0.0)

    def mouse_move(self) -> Vec3:
        """Movement on x and y, wheel rotation on z, for this frame."""
        return self._mouse_move.copy()

    # game pads
    @staticmethod
    def _check_pad(pad_id: int) -> None:
        if not 0 <= pad_id < MAX_PAD_NUM:
            raise IndexError(f"pad id {pad_id} out of range")

    def _pad(self, pad_id: int) -> PadState:
        self._check_pad(pad_id)
        return self._pads[pad_id]

    def _prev_pad(self, pad_id: int) -> PadState:
        self._check_pad(pad_id)
        return self._prev_pads[pad_id]

    def is_pad_button(self, button: int, pad_id: int = 0) -> bool:
        return bool(self._pad(pad_id).buttons & int(button))

    def is_pad_button_down(self, button: int, pad_id: int = 0) -> bool:
        return self.is_pad_button(button, pad_id) and not (
            self._prev_pad(pad_id).buttons & int(button)
        )

    def is_pad_button_up(self, button: int, pad_id: int = 0) -> bool:
        return not self.is_pad_button(button, pad_id) and bool(
            self._prev_pad(pad_id).buttons & int(button)
        )

    def pad_stick_l(self, pad_id: int = 0) -> Vec3:
        pad = self._pad(pad_id)
        return Vec3(
            analog_value(pad.thumb_lx, STICK_MAX, LEFT_THUMB_DEADZONE),
            analog_value(pad.thumb_ly, STICK_MAX, LEFT_THUMB_DEADZONE),
            0.0,
        )

    def pad_stick_r(self, pad_id: int = 0) -> Vec3:
        pad = self._pad(pad_id)
        return Vec3(
            analog_value(pad.thumb_rx, STICK_MAX, RIGHT_THUMB_DEADZONE),
            analog_value(pad.thumb_ry, STICK_MAX, RIGHT_THUMB_DEADZONE),
            0.0,
        )

    def pad_trigger_l(self, pad_id: int = 0) -> float:
        return analog_value(self._pad(pad_id).left_trigger, TRIGGER_MAX, TRIGGER_THRESHOLD)

    def pad_trigger_r(self, pad_id: int = 0) -> float:
        return analog_value(self._pad(pad_id).right_trigger, TRIGGER_MAX, TRIGGER_THRESHOLD)