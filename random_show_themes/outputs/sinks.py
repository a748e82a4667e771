"""Result sinks: where sampled themes are written."""

import csv
import shutil
from typing import Callable, Optional, Protocol, TextIO, TypeVar

import click
from rich import box
from rich.console import Console
from rich.table import Table

from ..config import OutputMode
from ..constants.output import (
    DEFAULT_TABLE_HEIGHT,
    DEFAULT_TABLE_WIDTH,
    READABLE_LINE_PATTERN,
    RESULT_HEADERS,
)
from ..models.draw import ThemeDraw

T = TypeVar("T")


class OutputError(Exception):
    """Raised when a result cannot be written."""


class ResultSink(Protocol):
    """Receives results in the order they were drawn."""

    def open(self) -> None:
        """Write anything that precedes the first result (headers)."""

    def emit(self, draw: ThemeDraw) -> None:
        """Write one result. Raises OutputError on failure."""

    def close(self) -> None:
        """Finish the output (render, flush)."""


def _guarded(action: Callable[[], T]) -> T:
    # ValueError covers unencodable text and closed streams
    try:
        return action()
    except (OSError, ValueError, csv.Error) as exc:
        raise OutputError(f"couldn't write output: {exc}") from exc


def terminal_width() -> int:
    """Width of the attached terminal, or the default table width."""
    return shutil.get_terminal_size((DEFAULT_TABLE_WIDTH, DEFAULT_TABLE_HEIGHT)).columns


class TableSink:
    """Collects results into a rounded table rendered on close."""

    def __init__(self, stream: TextIO, width: Optional[int] = None):
        self.stream = stream
        self.width = width or terminal_width()
        self.table = Table(box=box.ROUNDED, show_lines=True)

    def open(self) -> None:
        for header in RESULT_HEADERS:
            self.table.add_column(header, overflow="fold")

    def emit(self, draw: ThemeDraw) -> None:
        self.table.add_row(draw.theme, draw.show.title, draw.category.value)

    def close(self) -> None:
        console = Console(file=self.stream, width=self.width, highlight=False, markup=False, emoji=False)
        _guarded(lambda: console.print(self.table))


class ReadableSink:
    """Writes one human readable line per result."""

    def __init__(self, stream: TextIO):
        self.stream = stream

    def open(self) -> None:
        pass

    def emit(self, draw: ThemeDraw) -> None:
        line = READABLE_LINE_PATTERN.format(
            theme=draw.theme,
            category=draw.category.value,
            title=draw.show.title,
        )
        _guarded(lambda: click.echo(line, file=self.stream))

    def close(self) -> None:
        pass


class CsvSink:
    """Writes a CSV header and flushes after every row."""

    def __init__(self, stream: TextIO):
        self.stream = stream
        self.writer = csv.writer(stream, lineterminator="\n")

    def _write(self, row) -> None:
        self.writer.writerow(row)
        self.stream.flush()

    def open(self) -> None:
        _guarded(lambda: self._write(RESULT_HEADERS))

    def emit(self, draw: ThemeDraw) -> None:
        _guarded(lambda: self._write([draw.theme, draw.show.title, draw.category.value]))

    def close(self) -> None:
        _guarded(self.stream.flush)


def create_sink(mode: OutputMode, stream: TextIO, table_width: Optional[int] = None) -> ResultSink:
    """
    Build the sink for an output mode.

    Args:
        mode: Output mode selected on the command line
        stream: Text stream results are written to
        table_width: Table width override, only used in table mode

    Returns:
        A sink implementing open/emit/close
    """
    if mode is OutputMode.TABLE:
        return TableSink(stream, width=table_width)
    if mode is OutputMode.CSV:
        return CsvSink(stream)
    return ReadableSink(stream)
