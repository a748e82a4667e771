"""Shared fixtures for catalog and list files."""

import json

import pytest

from random_show_themes.models.show import Show


def make_show(show_id: int, title: str, opening=(), ending=(), other=()) -> Show:
    return Show(
        id=show_id,
        title=title,
        opening_themes=list(opening),
        ending_themes=list(ending),
        other_soundtrack=list(other),
    )


class RecordingSink:
    """Sink that keeps every draw in memory."""

    def __init__(self, fail_on=()):
        self.opened = False
        self.closed = False
        self.draws = []
        self.fail_on = set(fail_on)
        self.calls = 0

    def open(self):
        self.opened = True

    def emit(self, draw):
        from random_show_themes.outputs.sinks import OutputError

        self.calls += 1
        if self.calls in self.fail_on:
            raise OutputError("couldn't write output: disk full")
        self.draws.append(draw)

    def close(self):
        self.closed = True


@pytest.fixture
def write_json(tmp_path):
    def _write(name, payload):
        path = tmp_path / name
        path.write_text(json.dumps(payload), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def catalog_payload():
    return {
        "1": {"mal_id": 1, "title": "Cowboy Bebop", "opening_themes": ["Tank!"], "ending_themes": ["The Real Folk Blues"]},
        "2": {"id": 2, "title": "Trigun", "opening_themes": ["H.T."], "url": "https://example.com/trigun"},
        "3": {"id": 3, "title": "FLCL", "soundtrack": ["Ride on Shooting Star"], "score": 8.1},
    }
