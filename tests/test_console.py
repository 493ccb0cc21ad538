import io
import sys
from datetime import datetime

from bbsetup.core.console import Console, supports_color


def fixed():
    return datetime(2026, 1, 2, 3, 4, 5)


class FakeTTY(io.StringIO):
    def isatty(self):
        return True


def test_tagged_lines_plain(capsys):
    c = Console(color=False, clock=fixed)
    c.info("hello")
    c.ok("done")
    c.log("Starting")
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "[2026-01-02 03:04:05] INFO  hello",
        "[2026-01-02 03:04:05] OK    done",
        "[2026-01-02 03:04:05] Starting",
    ]


def test_warn_and_error_go_to_stderr(capsys):
    c = Console(color=False, clock=fixed)
    c.warn("careful")
    c.error("broken")
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.splitlines() == [
        "[2026-01-02 03:04:05] WARN  careful",
        "[2026-01-02 03:04:05] ERROR broken",
    ]


def test_color_adds_ansi(capsys):
    Console(color=True, clock=fixed).ok("done")
    out = capsys.readouterr().out
    assert "\x1b[" in out
    assert "done" in out


def test_detail_is_indented(capsys):
    Console(color=False).detail("fatal: one\nfatal: two")
    assert capsys.readouterr().err.splitlines() == ["    fatal: one", "    fatal: two"]


def test_supports_color():
    assert supports_color(stream=FakeTTY()) is True
    assert supports_color(no_color=True, stream=FakeTTY()) is False
    assert supports_color(stream=io.StringIO()) is False


def test_color_is_decided_per_stream(monkeypatch):
    out, err = FakeTTY(), io.StringIO()
    monkeypatch.setattr(sys, "stdout", out)
    monkeypatch.setattr(sys, "stderr", err)
    c = Console(clock=fixed)
    c.ok("done")
    c.error("broken")
    assert "\x1b[" in out.getvalue()
    assert "\x1b[" not in err.getvalue()
    assert err.getvalue() == "[2026-01-02 03:04:05] ERROR broken\n"


def test_no_color_wins_over_tty(monkeypatch):
    out = FakeTTY()
    monkeypatch.setattr(sys, "stdout", out)
    Console(no_color=True, clock=fixed).info("hello")
    assert out.getvalue() == "[2026-01-02 03:04:05] INFO  hello\n"
