import pytest

from dodgerun.math3d import Transform, Vec3
from dodgerun.models import ModelBank


class _Loader:
    def __init__(self):
        self.calls = []

    def __call__(self, name):
        self.calls.append(name)
        return object()


def test_same_file_loaded_once_and_shared():
    loader = _Loader()
    bank = ModelBank(loader=loader)
    a = bank.load("car.fbx")
    b = bank.load("car.fbx")
    assert a != b
    assert loader.calls == ["car.fbx"]
    assert bank[a].model is bank[b].model


def test_released_handle_is_reused():
    bank = ModelBank(loader=_Loader())
    first = bank.load("a.fbx")
    bank.load("b.fbx")
    bank.release(first)
    assert bank.load("c.fbx") == first


def test_loader_error_propagates():
    bank = ModelBank()
    with pytest.raises(FileNotFoundError):
        bank.load("missing-model.fbx")
    assert len(bank) == 0


def test_default_loader_accepts_existing_file(tmp_path):
    path = tmp_path / "tree.fbx"
    path.write_bytes(b"model")
    bank = ModelBank()
    handle = bank.load(path)
    assert bank[handle].file_name == str(path)


def test_animation_wraps_to_start():
    frames = []
    bank = ModelBank(loader=_Loader(), renderer=lambda data, frame: frames.append(frame))
    handle = bank.load("m.fbx")
    bank.set_anim_frame(handle, 0, 2, 1.0)
    for _ in range(4):
        bank.draw(handle)
    assert frames == [1, 2, 0, 1]
    assert bank.anim_frame(handle) == 1


def test_draw_bad_handle_returns_none():
    bank = ModelBank(loader=_Loader())
    assert bank.draw(3) is None
    assert bank.draw(-1) is None


def test_set_anim_frame_bad_handle():
    bank = ModelBank(loader=_Loader())
    with pytest.raises(IndexError):
        bank.set_anim_frame(0, 0, 10, 1.0)


def test_set_transform_copies():
    bank = ModelBank(loader=_Loader())
    handle = bank.load("m.fbx")
    transform = Transform()
    transform.position = Vec3(1.0, 2.0, 3.0)
    bank.set_transform(handle, transform)
    transform.position.x = 9.0
    assert bank[handle].transform.position == Vec3(1.0, 2.0, 3.0)


def test_release_all_empties_bank():
    bank = ModelBank(loader=_Loader())
    bank.load("a.fbx")
    bank.load("b.fbx")
    bank.release_all()
    assert len(bank) == 0
    with pytest.raises(IndexError):
        bank[0]