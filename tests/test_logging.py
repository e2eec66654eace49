"""Tests for logging setup"""
import io
import logging

import pytest

from git_branch_sweeper.utils.logging import LevelColorFormatter, get_logger, setup_logging


@pytest.fixture(autouse=True)
def restore_logging():
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_logger_names_drop_package_prefix():
    assert get_logger("git_branch_sweeper.services.merge_classifier").name == "merge_classifier"
    assert get_logger("git_branch_sweeper.core.sweeper").name == "core.sweeper"


@pytest.mark.parametrize(
    "verbose,debug,expected",
    [(False, False, logging.WARNING), (True, False, logging.INFO)],
)
def test_levels(verbose, debug, expected):
    setup_logging(verbose=verbose, debug=debug, stream=io.StringIO())
    assert logging.getLogger().level == expected


def test_warnings_are_labelled_without_color_off_terminal():
    stream = io.StringIO()
    setup_logging(stream=stream)
    get_logger("git_branch_sweeper.services.ref_inventory").warning("could not list")
    get_logger("git_branch_sweeper.services.ref_inventory").info("hidden")

    assert stream.getvalue() == "WARNING: [ref_inventory] could not list\n"


def test_info_is_not_labelled():
    formatter = LevelColorFormatter("%(message)s", stream=io.StringIO())
    record = logging.LogRecord("x", logging.INFO, __file__, 1, "queued", None, None)
    assert formatter.format(record) == "queued"
