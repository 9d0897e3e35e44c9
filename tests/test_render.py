from __future__ import annotations

import io

import pyfiglet
from rich.console import Console

from group_types import GroupSet
from render import (
    GROUP_COLORS,
    Renderer,
    box_width,
    chunk_rows,
    gradient_text,
    groups_per_row,
)


def _renderer(*, animate: bool = False, sleeps=None, width: int = 80) -> Renderer:
    console = Console(file=io.StringIO(), width=width, color_system=None)
    sleep = sleeps.append if sleeps is not None else (lambda seconds: None)
    return Renderer(console, animate=animate, sleep=sleep)


def _output(renderer: Renderer) -> str:
    return renderer.console.file.getvalue()


def test_box_width_is_clamped():
    assert box_width([["Al", "Bo"]]) == 10
    assert box_width([["Christopher"]]) == 15
    assert box_width([["A" * 40]]) == 20
    assert box_width([]) == 10


def test_groups_per_row_fits_terminal():
    assert groups_per_row(10, 80) == 6
    assert groups_per_row(20, 80) == 3
    assert groups_per_row(20, 12) == 1


def test_chunk_rows():
    assert chunk_rows(list(range(7)), 3) == [[0, 1, 2], [3, 4, 5], [6]]


def test_gradient_text_keeps_plain_text():
    text = gradient_text("Name Shuffler")
    assert text.plain == "Name Shuffler"
    assert len(text.spans) == len("NameShuffler")


def test_group_panels_cycle_colors():
    renderer = _renderer()
    panels = [renderer.group_panel(index, ["x"], 10) for index in range(8)]
    assert [panel.border_style for panel in panels] == [
        GROUP_COLORS[index % len(GROUP_COLORS)] for index in range(8)
    ]


def test_groups_render_every_name_in_order():
    renderer = _renderer()
    group_set = GroupSet.from_lists(
        [["Alice", "Carol", "Eve"], ["Bob", "Dave", "Frank"], ["Grace", "Heidi"]]
    )
    renderer.groups(group_set)
    output = _output(renderer)

    assert "RESULTS" in output
    assert "People: 8" in output
    assert "Groups: 3" in output
    for label in ("G1", "G2", "G3"):
        assert label in output
    assert output.index("Alice") < output.index("Carol") < output.index("Eve")
    assert output.index("Bob") < output.index("Dave") < output.index("Frank")


def test_groups_wrap_into_rows_on_narrow_terminals():
    renderer = _renderer(width=30)
    group_set = GroupSet.from_lists([["Ann"], ["Ben"], ["Cat"], ["Dan"]])
    renderer.groups(group_set)
    output = _output(renderer)

    assert output.index("G1") < output.index("G3")
    line_with_g1 = next(line for line in output.splitlines() if "G1" in line)
    assert "G2" in line_with_g1
    assert "G3" not in line_with_g1


def test_names_with_markup_characters_render_literally():
    renderer = _renderer()
    renderer.groups(GroupSet.from_lists([["[bold]Al"], ["Bo"]]))
    assert "[bold]Al" in _output(renderer)


def test_animation_pauses_follow_stages():
    sleeps = []
    renderer = _renderer(animate=True, sleeps=sleeps)
    renderer.title()
    renderer.names_received(6)
    renderer.shuffling()

    assert sleeps == [0.5, 0.5, 0.7, 0.5, 0.3]
    output = _output(renderer)
    assert "6 names received!" in output
    assert "Names shuffled successfully!" in output


def test_no_pauses_without_animation():
    sleeps = []
    renderer = _renderer(animate=False, sleeps=sleeps)
    renderer.title()
    renderer.names_received(2)
    renderer.shuffling()
    assert sleeps == []


def test_goodbye_and_error_messages():
    renderer = _renderer()
    renderer.goodbye()
    renderer.error(RuntimeError("boom"))
    output = _output(renderer)
    assert "Thank you for using Name Shuffler! Goodbye!" in output
    assert "An error occurred:" in output
    assert "boom" in output


def test_title_is_figlet_ascii_art():
    renderer = _renderer()
    renderer.title()
    output = _output(renderer)

    art = [
        line.rstrip()
        for line in pyfiglet.figlet_format("Name Shuffler", font="standard").splitlines()
        if line.strip()
    ]
    printed = [line.rstrip() for line in output.splitlines() if line.strip()]
    assert len(printed) >= 4
    assert printed == art
    assert "Name Shuffler" not in output
