import pytest

from sysfetch.modules.base import FactModule, FactError, COLOUR, RESET
from sysfetch.ui.banner import banner_lines, banner_width
from sysfetch.ui.report import FetchReport, BANNER_GAP


class StaticModule(FactModule):

    def __init__(self, name, lines):
        super().__init__(name, name.title())
        self.lines = lines

    def run(self):
        return dict(self.lines)


class BrokenModule(FactModule):

    def __init__(self, name, error):
        super().__init__(name, name.title())
        self.error = error

    def run(self):
        raise self.error


def modules():
    return [
        StaticModule("hostname", [("hostname", "me@box")]),
        BrokenModule("os", FactError("unrecognised os")),
        StaticModule("shell", [("shell", "zsh")]),
        BrokenModule("uptime", RuntimeError("boom")),
        StaticModule("colours", [("normal", "row1"), ("bright", " row2")]),
    ]


def test_failed_facts_are_omitted_in_order():
    assert FetchReport(modules()).collect() == ["me@box", "zsh", "row1", " row2"]


def test_plain_layout():
    assert FetchReport(modules()).generate() == "me@box\nzsh\nrow1\n row2"


def test_failures_are_logged_at_debug(caplog):
    with caplog.at_level("DEBUG", logger="sysfetch.report"):
        FetchReport(modules()).collect()

    messages = [r.getMessage() for r in caplog.records]
    assert "Skipping os (Os): unrecognised os" in messages
    assert "Skipping uptime (Uptime): boom" in messages
    assert all(r.levelname == "DEBUG" for r in caplog.records)


def test_banner_above():
    lines = FetchReport(modules(), banner="above").generate().splitlines()
    art = banner_lines()

    assert lines[:len(art)] == [f"{COLOUR}{line}{RESET}" for line in art]
    assert lines[len(art):] == ["me@box", "zsh", "row1", " row2"]


def test_banner_beside():
    lines = FetchReport(modules(), banner="beside").generate().splitlines()
    art = banner_lines()
    width = banner_width()

    assert len(lines) == max(len(art), 4)
    assert lines[0] == f"{COLOUR}{art[0].ljust(width)}{RESET}{BANNER_GAP}me@box"
    assert lines[3] == f"{COLOUR}{art[3].ljust(width)}{RESET}{BANNER_GAP} row2"
    assert lines[4] == f"{COLOUR}{art[4]}{RESET}"


def test_banner_beside_with_more_facts_than_art():
    facts = [f"fact{i}" for i in range(len(banner_lines()) + 2)]
    rows = FetchReport.side_by_side(facts)

    assert len(rows) == len(facts)
    assert rows[-1] == f"{COLOUR}{' ' * banner_width()}{RESET}{BANNER_GAP}{facts[-1]}"


def test_unknown_layout():
    with pytest.raises(ValueError):
        FetchReport([], banner="sideways")


def test_banner_is_decoded_once():
    assert banner_lines() is banner_lines()
    assert all("\n" not in line for line in banner_lines())
    assert banner_width() == max(len(line) for line in banner_lines())
