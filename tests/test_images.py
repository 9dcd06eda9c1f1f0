import pytest
from PIL import Image

from dodgerun.images import ImageBank, Rect
from dodgerun.math3d import Transform, Vec3


class FakeLoader:
    def __init__(self, size=(64, 32)):
        self.size = size
        self.calls = []

    def __call__(self, name):
        self.calls.append(name)
        return self.size


def test_load_reads_each_file_once_but_gives_new_handles():
    loader = FakeLoader()
    bank = ImageBank(loader)
    assert bank.load("a.png") == 0
    assert bank.load("a.png") == 1
    assert loader.calls == ["a.png"]
    assert bank[0].sprite is bank[1].sprite


def test_load_sets_full_rect():
    bank = ImageBank(FakeLoader((64, 32)))
    handle = bank.load("a.png")
    assert bank[handle].rect == Rect(0, 0, 64, 32)
    assert bank[handle].alpha == 1.0


def test_set_rect_and_reset():
    bank = ImageBank(FakeLoader((64, 32)))
    handle = bank.load("a.png")
    bank.set_rect(handle, 16, 0, 16, 32)
    assert bank[handle].rect == Rect(16, 0, 16, 32)
    bank.reset_rect(handle)
    assert bank[handle].rect == Rect(0, 0, 64, 32)


def test_set_alpha_scales_from_255():
    bank = ImageBank(FakeLoader())
    handle = bank.load("a.png")
    bank.set_alpha(handle, 0)
    assert bank[handle].alpha == 0.0
    bank.set_alpha(handle, 255)
    assert bank[handle].alpha == pytest.approx(1.0)


def test_set_transform_copies():
    bank = ImageBank(FakeLoader())
    handle = bank.load("a.png")
    transform = Transform(position=Vec3(1.0, 2.0, 3.0))
    bank.set_transform(handle, transform)
    transform.position.x = 9.0
    assert bank[handle].transform.position == Vec3(1.0, 2.0, 3.0)


def test_release_frees_handle_for_reuse():
    bank = ImageBank(FakeLoader())
    bank.load("a.png")
    bank.load("b.png")
    bank.release(0)
    with pytest.raises(IndexError):
        bank[0]
    assert bank.load("c.png") == 0
    assert bank[0].file_name == "c.png"


def test_draw_passes_data_to_renderer():
    drawn = []
    bank = ImageBank(FakeLoader(), renderer=drawn.append)
    handle = bank.load("a.png")
    result = bank.draw(handle)
    assert drawn == [bank[handle]]
    assert result is bank[handle]


def test_draw_invalid_handle_returns_none():
    drawn = []
    bank = ImageBank(FakeLoader(), renderer=drawn.append)
    assert bank.draw(3) is None
    assert bank.draw(-1) is None
    assert drawn == []


def test_setters_ignore_invalid_handles():
    bank = ImageBank(FakeLoader())
    bank.set_alpha(5, 10)
    bank.set_rect(-1, 0, 0, 1, 1)
    bank.reset_rect(2)
    assert len(bank) == 0


def test_release_all_empties_bank():
    bank = ImageBank(FakeLoader())
    bank.load("a.png")
    bank.load("b.png")
    bank.release_all()
    assert len(bank) == 0


def test_default_loader_reads_real_png(tmp_path):
    path = tmp_path / "pic.png"
    Image.new("RGBA", (20, 10)).save(path)
    bank = ImageBank()
    handle = bank.load(path)
    assert bank[handle].texture_size == (20, 10)
    assert bank[handle].rect == Rect(0, 0, 20, 10)


def test_missing_file_raises(tmp_path):
    bank = ImageBank()
    with pytest.raises(FileNotFoundError):
        bank.load(tmp_path / "missing.png")
    assert len(bank) == 0