import re

import pytest

from pygmentizer import (
    AsyncHighlighter,
    Highlighter,
    LaunchError,
    ProcessFailed,
    ProcessTimedOut,
)

from .fixtures import resource_path

RE_HIGHLIGHTED = re.compile(r'<div class="highlight">.*<pre>.*<span class="[^"]+">', re.S)


def read_resource(filename: str) -> str:
    with open(resource_path(filename), encoding="utf-8") as file:
        return file.read()


@pytest.mark.parametrize("filename", ["class.php", "inline.php"])
def test_highlight(highlighter: Highlighter, filename: str) -> None:
    code = read_resource(filename)

    assert RE_HIGHLIGHTED.search(highlighter.highlight(code, "php", "html"))
    assert RE_HIGHLIGHTED.search(
        highlighter.highlight(code, "php", "html", {"startinline": True})
    )


@pytest.mark.parametrize("filename", ["class.php", "inline.php"])
def test_highlight_guess(highlighter: Highlighter, filename: str) -> None:
    code = read_resource(filename)
    assert RE_HIGHLIGHTED.search(highlighter.highlight(code, None, "html"))


def test_get_css(highlighter: Highlighter) -> None:
    assert ".hll {" in highlighter.get_css()
    assert ".mycode .hll {" in highlighter.get_css("monokai", ".mycode")


def test_get_lexers(highlighter: Highlighter) -> None:
    lexers = highlighter.get_lexers()
    assert "python" in lexers
    assert lexers["php"] == lexers["php5"]


def test_get_formatters(highlighter: Highlighter) -> None:
    assert "html" in highlighter.get_formatters()


def test_get_styles(highlighter: Highlighter) -> None:
    assert "monokai" in highlighter.get_styles()


def test_guess_lexer(highlighter: Highlighter) -> None:
    assert highlighter.guess_lexer("index.php") == "php"
    assert highlighter.guess_lexer("main.go") == "go"


def test_version(highlighter: Highlighter) -> None:
    version = highlighter.version()
    assert version is not None
    assert re.match(r"\d+\.\d+", version)


def test_sequential_calls(highlighter: Highlighter) -> None:
    assert highlighter.guess_lexer("main.go") == "go"
    assert ".hll {" in highlighter.get_css()
    assert highlighter.guess_lexer("index.php") == "php"
    assert "monokai" in highlighter.get_styles()


def test_unknown_lexer(highlighter: Highlighter) -> None:
    with pytest.raises(ProcessFailed) as excinfo:
        highlighter.highlight("x", "no-such-lexer", "html")
    assert excinfo.value.returncode != 0
    assert "no-such-lexer" in excinfo.value.stderr


def test_unknown_style(highlighter: Highlighter) -> None:
    with pytest.raises(ProcessFailed):
        highlighter.get_css("no-such-style")


def test_missing_executable(tmp_path) -> None:
    with pytest.raises(LaunchError):
        Highlighter(str(tmp_path / "pygmentize")).guess_lexer("main.go")


def test_null_byte_in_filename(highlighter: Highlighter) -> None:
    with pytest.raises(LaunchError) as excinfo:
        highlighter.guess_lexer("main\0.go")
    assert isinstance(excinfo.value.reason, ValueError)


def test_timeout(pygmentize: str) -> None:
    # Starting the interpreter alone takes far longer than a microsecond.
    with pytest.raises(ProcessTimedOut):
        Highlighter(pygmentize, timeout=1e-6).get_lexers()


@pytest.mark.asyncio
async def test_async(async_highlighter: AsyncHighlighter) -> None:
    code = read_resource("class.php")
    assert RE_HIGHLIGHTED.search(await async_highlighter.highlight(code, "php", "html"))
    assert await async_highlighter.guess_lexer("main.go") == "go"
    assert "python" in await async_highlighter.get_lexers()
    assert ".mycode .hll {" in await async_highlighter.get_css("monokai", ".mycode")
