from __future__ import annotations

from minimark.conversion.inline import replace_dashes, sanitize, transform_line, transform_text


def test_sanitize_escapes_ampersand_and_less_than() -> None:
    assert sanitize("a&b<c") == "a&amp;b&lt;c"


def test_sanitize_leaves_other_characters_alone() -> None:
    assert sanitize('a > b "q"') == 'a > b "q"'


def test_sanitize_is_stable_without_raw_specials() -> None:
    text = "plain words > arrows"
    assert sanitize(sanitize(text)) == sanitize(text)


def test_transform_line_trims_trailing_whitespace() -> None:
    assert transform_line("  a  \t") == "  a"


def test_line_break_marker() -> None:
    assert transform_line("a\\\\b") == "a<br/>b"


def test_style_markers_apply_in_order() -> None:
    assert transform_line("**b** **c** //__i__//") == "<b>b</b> <b>c</b> <em><u>i</u></em>"


def test_code_span_and_dash() -> None:
    assert transform_line("~~a--b~~") == "<code>a&mdash;b</code>"


def test_unbalanced_marker_is_left_literal() -> None:
    assert transform_line("**a") == "**a"


def test_replace_dashes_does_not_overlap() -> None:
    assert replace_dashes("a--b--c") == "a&mdash;b--c"
    assert replace_dashes("a--b c--d") == "a&mdash;b c&mdash;d"


def test_replace_dashes_ignores_rules_and_edges() -> None:
    assert replace_dashes("---") == "---"
    assert replace_dashes("x---y") == "x---y"
    assert replace_dashes("--a") == "--a"
    assert replace_dashes("a--") == "a--"


def test_replace_dashes_with_spaces() -> None:
    assert replace_dashes("a -- b") == "a &mdash; b"


def test_transform_text_works_per_line() -> None:
    assert transform_text("**a\nb**") == "**a\nb**"
    assert transform_text("**a**  \n//b//") == "<b>a</b>\n<em>b</em>"
