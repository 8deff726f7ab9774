"""Tests for CSS syntax checking and minification."""

import pytest

from assetpipe.css import check_syntax, minify_css, minify_file
from assetpipe.models import CssParseError
from tests.helpers import rules


SAMPLE = """
/*! keep me */
/* drop me */
body, html {
    margin: 0;
    padding: 0;
}

@media screen and (max-width: 600px) {
    .nav > li { display: block; }
}

a[href^="http"]::after { content: " \\2197"; }
"""


def test_minify_removes_whitespace_and_plain_comments():
    out = minify_css(SAMPLE)
    assert "drop me" not in out
    assert "\n    " not in out
    assert len(out) < len(SAMPLE)


def test_minify_keeps_bang_comments_by_default():
    assert "/*! keep me */" in minify_css(SAMPLE)
    assert "keep me" not in minify_css(SAMPLE, keep_bang_comments=False)


def test_minify_preserves_rules():
    css = ".a { color: red; }\n.b , .c { color : blue ; margin: 0 auto }\n"
    assert rules(minify_css(css)) == rules(css)


@pytest.mark.parametrize(
    "css",
    [
        "",
        ".a { color: red; }",
        "@charset \"utf-8\";\n.a{}",
        "@import url(\"base.css\");",
        "@media print { .a { display: none } }",
        "a[title='}'] { content: '{'; }",
        ".a { background: url(data:image/png;base64,AAAA); }",
        "/* only a comment */",
        ".\\31 0 { color: red }",
    ],
)
def test_check_syntax_accepts_valid_css(css):
    check_syntax(css)


@pytest.mark.parametrize(
    "css,line,reason",
    [
        (".a { color: red;", 1, "'{' is never closed"),
        (".a { color: red; }\n}", 2, "unexpected '}'"),
        (".a { color: red; )", 1, "does not close"),
        ("/* open\n.a {}", 1, "unterminated comment"),
        (".a { content: \"oops }\n", 1, "unterminated string"),
        (".a { color: red; }\n.b", 2, "expected '{' after selector"),
        ("color: red;", 1, "declaration outside of a rule"),
        ("{ color: red; }", 1, "block without a selector"),
    ],
)
def test_check_syntax_rejects_broken_css(css, line, reason):
    with pytest.raises(CssParseError) as exc:
        check_syntax(css, "broken.css")
    assert exc.value.line == line
    assert reason in exc.value.reason
    assert str(exc.value).startswith("broken.css:")


def test_minify_file_strips_bom(tmp_path):
    path = tmp_path / "bom.css"
    path.write_bytes("\ufeff.a { color: red; }".encode("utf-8"))
    assert minify_file(path).startswith(".a{")


def test_minify_file_reports_path(tmp_path):
    path = tmp_path / "bad.css"
    path.write_text(".a {\n  color: red;\n")
    with pytest.raises(CssParseError) as exc:
        minify_file(path)
    assert exc.value.path == path


def test_escaped_newline_outside_string_counts_lines():
    css = ".a\\\nb { color: red; }\n.c { color: blue;\n"
    with pytest.raises(CssParseError) as exc:
        check_syntax(css)
    assert exc.value.line == 3
