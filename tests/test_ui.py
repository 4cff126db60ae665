import io

from caro.colors import Color, ansi_sequence
from caro.geometry import Point
from caro.screen import Screen
from caro.ui import SlotBoard, UIBound, UIComponent
from caro.utility import rectangle_content


def make_screen():
    return Screen(stream=io.StringIO())


def drawn(anchor, content, color):
    ref = make_screen()
    ref.draw(anchor, content, color)
    return ref.stream.getvalue()


def test_from_file_reads_spec(tmp_path):
    path = tmp_path / "comp.txt"
    path.write_text("240 3 4\nab\n\ncd\n")
    comp = UIComponent.from_file(path, make_screen())
    assert comp.content == ["ab", "cd"]
    assert comp.anchor == Point(3, 4)
    assert comp.color == Color.WHITE_BLACK


def test_from_file_missing_gives_default(tmp_path):
    comp = UIComponent.from_file(tmp_path / "nope.txt", make_screen())
    assert comp.content == []
    assert comp.anchor == Point(0, 0)
    assert comp.color == Color.DEFAULT


def test_show_matches_screen_draw():
    screen = make_screen()
    comp = UIComponent(["x y"], Point(2, 3), Color.RED_RED, screen)
    comp.show()
    out = screen.stream.getvalue()
    assert out == drawn(Point(2, 3), ["x y"], Color.RED_RED)
    assert ansi_sequence(Color.RED_RED) in out


def test_hide_uses_default_color():
    screen = make_screen()
    comp = UIComponent(["ab"], Point(1, 1), Color.RED_RED, screen)
    comp.hide()
    assert screen.stream.getvalue() == drawn(Point(1, 1), ["ab"], Color.DEFAULT)


def test_hide_uses_replace_color():
    screen = make_screen()
    comp = UIComponent(["ab"], Point(1, 1), Color.RED_RED, screen)
    comp.hide(Color.GRAY_GRAY)
    assert screen.stream.getvalue() == drawn(Point(1, 1), ["ab"], Color.GRAY_GRAY)


def test_make_bound_frames_content():
    bound = UIBound(["abc", "de"], Point(5, 5), Color.WHITE_BLACK, make_screen())
    bound.make_bound(Point(2, 1), Color.GREEN_GREEN)
    assert bound.bound.content == rectangle_content(["abc", "de"], Point(2, 1))
    assert bound.bound.anchor == Point(5, 5) - Point(2, 1)
    assert bound.bound.color == Color.GREEN_GREEN


def test_draw_bound_builds_default_frame():
    screen = make_screen()
    bound = UIBound(["abc"], Point(5, 5), Color.WHITE_BLACK, screen)
    bound.draw_bound()
    assert bound.bound.color == Color.RED_RED
    assert bound.bound.anchor == Point(5, 5) - Point(1, 1)
    expected = drawn(bound.bound.anchor, bound.bound.content, Color.RED_RED)
    assert screen.stream.getvalue() == expected


def test_clear_bound_without_frame_writes_nothing():
    screen = make_screen()
    UIBound(["abc"], Point(5, 5), Color.WHITE_BLACK, screen).clear_bound()
    assert screen.stream.getvalue() == ""


def test_clear_bound_draws_over_frame():
    screen = make_screen()
    bound = UIBound(["abc"], Point(5, 5), Color.WHITE_BLACK, screen)
    bound.make_bound()
    bound.clear_bound(Color.GRAY_GRAY)
    expected = drawn(bound.bound.anchor, bound.bound.content, Color.GRAY_GRAY)
    assert screen.stream.getvalue() == expected


def make_slot(screen):
    return SlotBoard(
        content=["+--+"],
        anchor=Point(0, 0),
        color=Color.WHITEGRAY_WHITEGRAY,
        screen=screen,
        x_shape=["X"],
        o_shape=["O"],
    )


def test_slot_has_yellow_frame():
    slot = make_slot(make_screen())
    assert slot.bound.color == Color.YELLOW_YELLOW
    assert slot.bound.content == rectangle_content(["+--+"], Point(1, 1))
    assert slot.mark == 0


def test_set_mark_accepts_only_known_marks():
    slot = make_slot(make_screen())
    assert slot.set_mark(1) is True
    assert slot.mark == 1
    assert slot.set_mark(3) is False
    assert slot.set_mark(-1) is False
    assert slot.mark == 1


def test_draw_mark_empty_writes_nothing():
    screen = make_screen()
    make_slot(screen).draw_mark()
    assert screen.stream.getvalue() == ""


def test_draw_mark_x_is_red():
    screen = make_screen()
    slot = make_slot(screen)
    slot.set_mark(1)
    slot.draw_mark()
    assert screen.stream.getvalue() == drawn(Point(1, 0), ["X"], Color.RED_RED)


def test_draw_mark_o_is_green():
    screen = make_screen()
    slot = make_slot(screen)
    slot.set_mark(2)
    slot.draw_mark()
    assert screen.stream.getvalue() == drawn(Point(1, 0), ["O"], Color.GREEN_GREEN)