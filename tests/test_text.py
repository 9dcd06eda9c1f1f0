import pytest

from dodgerun.images import ImageBank, Rect
from dodgerun.text import Text


def _bank(calls=None, drawn=None):
    def loader(name):
        if calls is not None:
            calls.append(name)
        return (256, 256)

    def renderer(data):
        if drawn is not None:
            drawn.append((data.rect, data.transform.position.copy()))

    return ImageBank(loader=loader, renderer=renderer)


def test_initialize_loads_default_font():
    calls = []
    text = Text(_bank(calls))
    handle = text.initialize()
    assert calls == ["char.png"]
    assert text.handle == handle


def test_glyph_rects_follow_sheet_layout():
    text = Text(_bank())
    text.initialize()
    glyphs = text.draw(0, 0, '!"1')
    assert glyphs[0].rect == Rect(0, 0, 16, 32)
    assert glyphs[1].rect == Rect(16, 0, 16, 32)
    assert glyphs[2].rect == Rect(0, 32, 16, 32)


def test_top_left_maps_to_screen_corner():
    text = Text(_bank(), screen_size=(800, 600))
    text.initialize()
    glyph = text.draw(0, 0, "!")[0]
    assert glyph.position.x == pytest.approx(-1.0)
    assert glyph.position.y == pytest.approx(1.0)


def test_glyphs_advance_by_one_char_width():
    text = Text(_bank(), screen_size=(800, 600))
    text.initialize()
    glyphs = text.draw(100, 50, "ABC")
    steps = [b.position.x - a.position.x for a, b in zip(glyphs, glyphs[1:])]
    assert steps == pytest.approx([16 / 400.0, 16 / 400.0])
    assert {g.position.y for g in glyphs} == {glyphs[0].position.y}


def test_renderer_receives_each_glyph():
    drawn = []
    text = Text(_bank(drawn=drawn))
    text.initialize()
    glyphs = text.draw(10, 20, "AB")
    assert [rect for rect, _ in drawn] == [g.rect for g in glyphs]


def test_integer_drawn_as_decimal():
    text = Text(_bank())
    text.initialize()
    assert text.draw(5, 5, 42) == text.draw(5, 5, "42")


def test_float_is_truncated():
    text = Text(_bank())
    text.initialize()
    assert text.draw(5, 5, 3.9) == text.draw(5, 5, "3")


def test_custom_sheet():
    calls = []
    text = Text(_bank(calls), file_name="font.png", char_width=8, char_height=8, row_length=4)
    text.initialize()
    glyph = text.draw(0, 0, "%")[0]
    assert calls == ["font.png"]
    assert glyph.rect == Rect(0, 8, 8, 8)


def test_draw_before_initialize_fails():
    with pytest.raises(RuntimeError):
        Text(_bank()).draw(0, 0, "A")


def test_release_frees_slot():
    bank = _bank()
    text = Text(bank)
    handle = text.initialize()
    text.release()
    assert text.handle is None
    with pytest.raises(IndexError):
        bank[handle]


def test_bad_value_type():
    text = Text(_bank())
    text.initialize()
    with pytest.raises(TypeError):
        text.draw(0, 0, [1])