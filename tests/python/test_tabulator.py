import logging
import sys
from pathlib import Path

import pytest

ROOT_DIR = Path(__file__).resolve().parents[2]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from tabvars.exceptions import TabulationError
from tabvars.tabulator import (
    TabulationRequest,
    column_width,
    format_table,
    parse_tabulation_args,
    tabulate_variables,
)

LONG_NAME = "THIS_NAME_IS_THIRTY_FIVE_CHARS_LONG"


class RecordingLogger:
    """Logger stub that records status calls."""

    def __init__(self):
        self.messages = []

    def status(self, msg):
        self.messages.append(msg)


def test_rows_are_right_aligned_on_minimum_width():
    output = tabulate_variables("A", "BB", scope={"A": "1", "BB": "2"}, logger=RecordingLogger())

    assert output.splitlines() == [" " * 29 + "A = 1", " " * 28 + "BB = 2"]
    assert all(len(line.split(" = ")[0]) == 30 for line in output.splitlines())


def test_one_row_per_name_without_title():
    names = ["CMAKE_VERSION", "CMAKE_BUILD_TYPE", "CMAKE_GENERATOR"]
    output = format_table(TabulationRequest(names=tuple(names)), {"CMAKE_VERSION": "3.25.2"})

    lines = output.splitlines()
    assert len(lines) == len(names)
    for name, line in zip(names, lines):
        assert line.lstrip().startswith(f"{name} = ")
    assert output.endswith("\n")


def test_long_name_sets_width_without_padding():
    output = tabulate_variables(LONG_NAME, scope={LONG_NAME: "x"}, logger=RecordingLogger())

    assert output == f"{LONG_NAME} = x\n"


def test_long_name_widens_other_rows():
    output = tabulate_variables("A", LONG_NAME, scope={"A": "1"}, logger=RecordingLogger())

    assert output.splitlines()[0] == " " * 34 + "A = 1"


def test_title_is_first_line_and_rows_unchanged():
    scope = {"A": "1", "BB": "2"}
    without_title = tabulate_variables("A", "BB", scope=scope, logger=RecordingLogger())
    with_title = tabulate_variables("TITLE", "My Variables:", "A", "BB", scope=scope,
                                    logger=RecordingLogger())

    assert with_title == "My Variables:\n" + without_title


def test_empty_request_has_no_rows():
    assert tabulate_variables(logger=RecordingLogger()) == ""
    assert tabulate_variables("TITLE", "Nothing here", logger=RecordingLogger()) == "Nothing here\n"
    assert column_width([]) == 30


def test_unresolved_names_render_empty_values():
    output = tabulate_variables("MISSING", "NONE", scope={"NONE": None}, logger=RecordingLogger())

    assert output.splitlines() == [" " * 23 + "MISSING = ", " " * 26 + "NONE = "]


def test_duplicates_keep_order():
    output = tabulate_variables("B", "A", "B", scope={"A": "1", "B": "2"}, logger=RecordingLogger())

    assert [line.strip() for line in output.splitlines()] == ["B = 2", "A = 1", "B = 2"]


def test_non_string_values_are_converted():
    output = tabulate_variables("JOBS", scope={"JOBS": 8}, logger=RecordingLogger())

    assert output.strip() == "JOBS = 8"


def test_indent_prefixes_every_row():
    output = tabulate_variables("TITLE", "T", "A", scope={"A": "1"}, indent=2,
                                logger=RecordingLogger())

    assert output.splitlines() == ["T", " " * 31 + "A = 1"]


def test_custom_min_width():
    output = tabulate_variables("A", scope={"A": "1"}, min_width=4, logger=RecordingLogger())

    assert output == "   A = 1\n"


def test_block_is_emitted_in_a_single_status_call():
    logger = RecordingLogger()
    output = tabulate_variables("TITLE", "T", "A", "B", logger=logger)

    assert logger.messages == [output]


def test_default_channel_is_module_logger(caplog):
    caplog.set_level(logging.INFO, logger="tabvars.tabulator")

    output = tabulate_variables("A", scope={"A": "1"})

    records = [r for r in caplog.records if r.name == "tabvars.tabulator"]
    assert len(records) == 1
    assert records[0].getMessage() == output


def test_repeated_calls_are_identical():
    scope = {"A": "1", "BB": "2"}

    first = tabulate_variables("TITLE", "T", "A", "BB", scope=scope, logger=RecordingLogger())
    second = tabulate_variables("TITLE", "T", "A", "BB", scope=scope, logger=RecordingLogger())

    assert first == second


def test_parse_title_marker():
    request = parse_tabulation_args(["TITLE", "Vars:", "A", "B"])

    assert request.title == "Vars:"
    assert request.names == ("A", "B")


def test_parse_without_title():
    request = parse_tabulation_args(["A", "TITLE", "B"])

    assert request.title is None
    assert request.names == ("A", "TITLE", "B")


def test_title_marker_without_title_is_rejected():
    with pytest.raises(TabulationError):
        parse_tabulation_args(["TITLE"])

    with pytest.raises(ValueError):
        tabulate_variables("TITLE", logger=RecordingLogger())
