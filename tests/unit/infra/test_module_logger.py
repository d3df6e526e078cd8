from __future__ import annotations

"""
Unit tests for the Module-Tagged Logger Facade.

Verifies message piece rendering, module name derivation and the mapping
of each method onto a logging severity.
"""

import logging

import pytest

from helperkit.infra.logging import TRACE, ModuleLogger, represent
from helperkit.infra.logging.module_logger import module_name


def test_represent_pieces() -> None:
    assert represent("text") == "text"
    assert represent(42) == "42"
    assert represent(None) == "null"
    assert represent({"a": 1}) == '{\n    "a": 1\n}'
    assert represent([1, 2]) == "[\n    1,\n    2\n]"


@pytest.mark.parametrize("raw, expected", [
    ("walker", "walker"),
    ("/srv/app/jobs/sync.py", "sync"),
    ("C:\\app\\jobs\\sync.pyc", "sync"),
    ("reports/data.json", "data.json"),
])
def test_module_name_keeps_last_component(raw: str, expected: str) -> None:
    assert module_name(raw) == expected
    assert ModuleLogger(raw).name == expected


def test_module_logger_is_not_nested_under_stem() -> None:
    """A tag taken from a file name is a single logger, not 'stem' -> 'py'."""
    log = ModuleLogger("/srv/app/walker.py")

    assert log._logger.name == "walker"
    assert log._logger.parent is logging.getLogger()


def test_methods_map_to_levels(caplog: pytest.LogCaptureFixture) -> None:
    log = ModuleLogger("/tmp/levels.py")

    with caplog.at_level(TRACE, logger="levels"):
        log.trace("t")
        log.info("i")
        log.warn("w")
        log.error("e")

    levels = [(r.levelno, r.getMessage()) for r in caplog.records if r.name == "levels"]
    assert levels == [
        (TRACE, "t"),
        (logging.INFO, "i"),
        (logging.WARNING, "w"),
        (logging.ERROR, "e"),
    ]


def test_pieces_are_joined_with_spaces(caplog: pytest.LogCaptureFixture) -> None:
    log = ModuleLogger("joined")

    with caplog.at_level(logging.INFO, logger="joined"):
        log.info("copied", 3, "files", None)

    assert caplog.records[-1].getMessage() == "copied 3 files null"


def test_trace_is_filtered_at_info(caplog: pytest.LogCaptureFixture) -> None:
    log = ModuleLogger("quiet")

    with caplog.at_level(logging.INFO, logger="quiet"):
        log.trace("noise")

    assert not [r for r in caplog.records if r.name == "quiet"]


def test_error_object(caplog: pytest.LogCaptureFixture) -> None:
    log = ModuleLogger("errors")

    try:
        raise ValueError("broken input")
    except ValueError as e:
        with caplog.at_level(logging.ERROR, logger="errors"):
            log.error_object(e)
            log.error_object(e, stack_trace=True)

    short, full = [r.getMessage() for r in caplog.records if r.name == "errors"]
    assert short == "ValueError: broken input"
    assert full.startswith("Traceback (most recent call last):")
    assert full.endswith("ValueError: broken input")
