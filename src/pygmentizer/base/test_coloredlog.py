import io
import logging

from .coloredlog import COLOR_SEQ, RESET_SEQ, Formatter, RED


def make_record(level: int, message: str) -> logging.LogRecord:
    return logging.LogRecord("test", level, __file__, 1, message, None, None)


class TestFormatter:
    def test_error(self) -> None:
        formatted = Formatter("%(message)s").format(make_record(logging.ERROR, "boom"))
        assert (COLOR_SEQ % (40 + RED)) in formatted
        assert formatted.endswith("boom" + RESET_SEQ)

    def test_is_supported(self, monkeypatch) -> None:
        monkeypatch.delenv("NO_COLOR", raising=False)
        assert not Formatter.is_supported(io.StringIO())

    def test_no_color(self, monkeypatch) -> None:
        monkeypatch.setenv("NO_COLOR", "1")

        class Terminal(io.StringIO):
            def isatty(self) -> bool:
                return True

        assert not Formatter.is_supported(Terminal())
