"""Terminal presentation for shuffle results, built on rich."""

from __future__ import annotations

import time
from contextlib import contextmanager
from typing import Callable, Iterator, List, Optional, Sequence, Tuple

import pyfiglet
from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from group_types import GroupSet


TITLE = "Name Shuffler"
GOODBYE = "Thank you for using Name Shuffler! Goodbye! \N{WAVING HAND SIGN}"
GROUP_COLORS: Sequence[str] = ("green", "magenta", "blue", "red", "cyan", "yellow")
PASTEL_STOPS: Sequence[Tuple[int, int, int]] = (
    (116, 235, 213),
    (116, 166, 235),
    (172, 182, 229),
    (255, 175, 189),
)
MAX_TERMINAL_WIDTH = 80
BOX_GAP = 2
MIN_BOX_WIDTH = 10
MAX_BOX_WIDTH = 20

SHUFFLE_STAGES: Sequence[Tuple[str, float]] = (
    ("Initializing shuffle algorithm...", 0.7),
    ("Randomizing names...", 0.5),
    ("Balancing groups...", 0.3),
)


def gradient_text(text: str, stops: Sequence[Tuple[int, int, int]] = PASTEL_STOPS) -> Text:
    """Color ``text`` character by character along a linear RGB gradient."""

    result = Text()
    visible = [index for index, char in enumerate(text) if not char.isspace()]
    span = max(len(visible) - 1, 1)
    segments = len(stops) - 1
    position = {index: order / span for order, index in enumerate(visible)}
    for index, char in enumerate(text):
        if index not in position or segments <= 0:
            result.append(char)
            continue
        scaled = position[index] * segments
        segment = min(int(scaled), segments - 1)
        local = scaled - segment
        start, end = stops[segment], stops[segment + 1]
        red, green, blue = (
            round(a + (b - a) * local) for a, b in zip(start, end)
        )
        result.append(char, style=f"bold #{red:02x}{green:02x}{blue:02x}")
    return result


def box_width(groups: Sequence[Sequence[str]]) -> int:
    longest = max((len(name) for group in groups for name in group), default=0)
    return max(MIN_BOX_WIDTH, min(MAX_BOX_WIDTH, longest + 4))


def groups_per_row(width: int, terminal_width: int) -> int:
    return max(1, (terminal_width - BOX_GAP) // (width + BOX_GAP))


def chunk_rows(items: Sequence, size: int) -> List[Sequence]:
    return [items[index : index + size] for index in range(0, len(items), size)]


class Renderer:
    """Draws progress feedback and the final groups on a rich console.

    The renderer only ever receives finished values (counts and a
    :class:`GroupSet`); it never calls back into the shuffling code.
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        *,
        animate: bool = True,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.console = console or Console()
        self.animate = animate
        self._sleep = sleep

    def _pause(self, seconds: float) -> None:
        if self.animate and seconds > 0:
            self._sleep(seconds)

    # Screens --------------------------------------------------------
    def title(self) -> None:
        self.console.clear()
        banner = pyfiglet.figlet_format(TITLE, font="standard").rstrip("\n")
        for line in banner.splitlines():
            self.console.print(gradient_text(line), overflow="crop", no_wrap=True)
        self._pause(0.5)

    def goodbye(self) -> None:
        self.console.clear()
        self.console.print()
        self.console.print(gradient_text(GOODBYE))
        self.console.print()

    def invalid(self, error: Exception) -> None:
        self.console.print(Text(str(error), style="bold red"))

    def error(self, error: BaseException) -> None:
        self.console.print(Text("An error occurred:", style="red"), Text(repr(error)))

    # Progress feedback ---------------------------------------------
    def succeed(self, message: Text) -> None:
        self.console.print(Text("\N{HEAVY CHECK MARK} ", style="green") + message)

    @contextmanager
    def spinner(self, message: str) -> Iterator[Callable[[str], None]]:
        """Show a spinner while the body runs; yields a function to change its text."""

        with self.console.status(Text(message), spinner="dots", spinner_style="cyan") as status:
            yield lambda text: status.update(Text(text))

    def names_received(self, count: int) -> None:
        with self.spinner("Processing names..."):
            self._pause(0.5)
        self.succeed(Text.assemble((str(count), "green"), " names received!"))

    def shuffling(self) -> None:
        with self.spinner(SHUFFLE_STAGES[0][0]) as update:
            for message, seconds in SHUFFLE_STAGES:
                update(message)
                self._pause(seconds)
        self.succeed(Text("Names shuffled successfully!", style="green"))

    # Results --------------------------------------------------------
    def summary_panel(self, group_set: GroupSet) -> Panel:
        body = Text.assemble(
            ("RESULTS", "bold yellow"),
            "\n\n",
            ("People: ", "white"),
            (str(group_set.total), "cyan"),
            (" \N{BULLET} Groups: ", "white"),
            (str(len(group_set)), "cyan"),
            justify="center",
        )
        return Panel.fit(body, box=box.ROUNDED, border_style="yellow", padding=1)

    def group_panel(self, index: int, names: Sequence[str], width: int) -> Panel:
        color = GROUP_COLORS[index % len(GROUP_COLORS)]
        body = Text(f"G{index + 1}", style=f"bold {color}")
        body.append("\n")
        for name in names:
            body.append("\n")
            body.append(name, style="bold white")
        return Panel(
            body,
            box=box.ROUNDED,
            border_style=color,
            width=width,
            padding=(0, 1, 1, 1),
        )

    def terminal_width(self) -> int:
        return min(self.console.width or MAX_TERMINAL_WIDTH, MAX_TERMINAL_WIDTH)

    def groups(self, group_set: GroupSet) -> None:
        self.console.print(self.summary_panel(group_set))
        width = box_width(group_set.groups)
        per_row = groups_per_row(width, self.terminal_width())
        panels = [
            self.group_panel(index, names, width)
            for index, names in enumerate(group_set.groups)
        ]
        rows = chunk_rows(panels, per_row)
        for row_index, row in enumerate(rows):
            grid = Table.grid(padding=(0, BOX_GAP, 0, 0))
            for _ in row:
                grid.add_column(width=width)
            grid.add_row(*row)
            self.console.print(grid)
            if row_index < len(rows) - 1:
                self.console.print()


__all__ = [
    "BOX_GAP",
    "GROUP_COLORS",
    "Renderer",
    "box_width",
    "chunk_rows",
    "gradient_text",
    "groups_per_row",
]
