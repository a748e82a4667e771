"""Tests for the run entry point."""

import io

import pytest
from pydantic import ValidationError

from random_show_themes.config import OutputMode, RunConfig
from random_show_themes.runner import EXIT_FAILURE, EXIT_OK, run


class FailingAfterHeader(io.StringIO):
    """Accepts the CSV header, then fails every write."""

    def __init__(self):
        super().__init__()
        self.writes = 0

    def write(self, s):
        self.writes += 1
        if self.writes > 1:
            raise OSError(5, "Input/output error")
        return super().write(s)


@pytest.fixture
def paths(write_json, catalog_payload):
    return write_json("shows.json", catalog_payload), write_json("list.json", [1, 2, 3])


def test_run_writes_requested_results(paths):
    shows, ids = paths
    stream = io.StringIO()
    config = RunConfig(count=2, catalog_path=shows, list_path=ids, seed=3)

    assert run(config, stream) == EXIT_OK
    assert len(stream.getvalue().splitlines()) == 2


def test_sink_errors_keep_partial_output_and_respect_hard_fail(paths):
    shows, ids = paths

    soft = FailingAfterHeader()
    config = RunConfig(count=3, catalog_path=shows, list_path=ids, output_mode=OutputMode.CSV)
    assert run(config, soft) == EXIT_OK
    assert soft.getvalue() == "Song,Show,Type\n"

    hard = FailingAfterHeader()
    config = config.model_copy(update={"hard_fail": True})
    assert run(config, hard) == EXIT_FAILURE
    assert hard.getvalue() == "Song,Show,Type\n"


def test_table_width_only_with_table_mode(paths):
    shows, ids = paths
    with pytest.raises(ValidationError):
        RunConfig(count=1, catalog_path=shows, list_path=ids, table_width=40)
    RunConfig(count=1, catalog_path=shows, list_path=ids, output_mode=OutputMode.TABLE, table_width=40)
