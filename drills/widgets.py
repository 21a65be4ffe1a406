"""A tiny text GUI: labels, buttons and windows drawn as ASCII art."""

from __future__ import annotations

import argparse
import io
from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import TextIO


class Widget(ABC):
    """Something that can be drawn as text."""

    @abstractmethod
    def width(self) -> int:
        """Natural width of the widget."""

    @abstractmethod
    def draw_into(self, buffer: TextIO) -> None:
        """Write the widget into a text buffer."""

    def draw(self) -> None:
        """Draw the widget on standard output."""
        buffer = io.StringIO()
        self.draw_into(buffer)
        print(buffer.getvalue())


class Label(Widget):
    """Plain text, possibly over several lines."""

    def __init__(self, label: str) -> None:
        self.label = label

    def width(self) -> int:
        return max((len(line) for line in self.label.splitlines()), default=0)

    def draw_into(self, buffer: TextIO) -> None:
        buffer.write(f"{self.label}\n")


class Button(Widget):
    """A label inside a padded frame."""

    def __init__(self, label: str) -> None:
        self.label = Label(label)

    def width(self) -> int:
        return self.label.width() + 8

    def draw_into(self, buffer: TextIO) -> None:
        width = self.width()
        label = io.StringIO()
        self.label.draw_into(label)
        border = "+" + "-" * width + "+\n"
        buffer.write(border)
        for line in label.getvalue().splitlines():
            buffer.write(f"|{line:^{width}}|\n")
        buffer.write(border)


class Window(Widget):
    """A titled frame holding other widgets one above the other."""

    def __init__(self, title: str) -> None:
        self.title = title
        self._widgets: list[Widget] = []

    def add_widget(self, widget: Widget) -> None:
        """Append a widget to the window."""
        self._widgets.append(widget)

    def _inner_width(self) -> int:
        widest = max((widget.width() for widget in self._widgets), default=0)
        return max(len(self.title), widest)

    def width(self) -> int:
        return self._inner_width() + 4

    def draw_into(self, buffer: TextIO) -> None:
        inner = io.StringIO()
        for widget in self._widgets:
            widget.draw_into(inner)

        width = self._inner_width()
        border = "+-" + "-" * width + "-+\n"
        buffer.write(border)
        buffer.write(f"| {self.title:^{width}} |\n")
        buffer.write("+=" + "=" * width + "=+\n")
        for line in inner.getvalue().splitlines():
            buffer.write(f"| {line:<{width}} |\n")
        buffer.write(border)


def main(argv: Sequence[str] | None = None) -> int:
    """Draw a demo window."""
    parser = argparse.ArgumentParser(description="Draw a demo text GUI window.")
    parser.add_argument("--title", default="Text GUI Demo 1.23")
    args = parser.parse_args(argv)

    window = Window(args.title)
    window.add_widget(Label("This is a small text GUI demo."))
    window.add_widget(Button("Click me!"))
    window.draw()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())