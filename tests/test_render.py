from __future__ import annotations

from pathlib import Path

import pytest

from minimark import Callbacks, render, render_file


@pytest.mark.parametrize(
    ("markup", "html"),
    [
        ("", ""),
        ("a", "<p>a </p>"),
        ("# h", "<h1>h</h1>"),
        ("a\\\\b", "<p>a<br/>b </p>"),
        ("**b** **c** //__i__//", "<p><b>b</b> <b>c</b> <em><u>i</u></em> </p>"),
        ("~~a--b~~", "<p><code>a&mdash;b</code> </p>"),
        ("---HR", "<hr/>"),
        (" ---HR", "<p>---HR </p>"),
        ("* A", "<p><ul><li>A</li></ul></p>"),
        ("* A\n* B", "<p><ul><li>A</li><li>B</li></ul></p>"),
        ("+ A\n+B", "<p><ol><li>A</li><li>B</li></ol></p>"),
        ("[[a|b]]", '<p><img style="width:b" src="a" alt=""/> </p>'),
        ("((a|b))", '<p><a target="_blank" href="b"/>a</a> </p>'),
        ("(((a|b|v)))", "<p>a </p>"),
    ],
)
def test_render(markup: str, html: str) -> None:
    assert render(markup) == html


def test_block_marker_wins_over_inline_bold() -> None:
    assert render("*a*") == "<p><ul><li>a*</li></ul></p>"


def test_sanitized_text_survives() -> None:
    html = render("a&b<c")
    assert html == "<p>a&amp;b&lt;c </p>"


def test_paragraphs_join_lines_and_split_on_blank() -> None:
    assert render("one  \ntwo\n\n\nthree") == "<p>one two </p><p>three </p>"
    assert render("\n  \n") == ""


def test_heading_closes_paragraph() -> None:
    assert render("text\n## Sub") == "<p>text </p><h2>Sub</h2>"


def test_text_after_list_joins_same_paragraph() -> None:
    assert render("* a\nb") == "<p><ul><li>a</li></ul>b </p>"


def test_table() -> None:
    assert render("|a|b\n|c|d") == (
        "<p><table><tr><td>a</td><td>b</td></tr><tr><td>c</td><td>d</td></tr></table></p>"
    )


def test_unbalanced_containers_are_closed() -> None:
    assert render("{{ :\n{{ *\n}}\nx") == '<div class="center"><div class="bold"></div><p>x </p></div>'


def test_bare_container_marker_is_text() -> None:
    assert render("{{") == "<p>{{ </p>"


def test_container_flags_ignore_link_and_image_markup() -> None:
    assert render("{{ ((x|y))\n}}") == "<div></div>"
    assert render("{{ : [[a.png|50%]]\nx\n}}") == '<div class="center"><p>x </p></div>'


def test_less_than_sentinel_is_restored() -> None:
    assert render("a\x01b") == "<p>a<b </p>"
    html = render("(((t|i|v)))", {"arg": lambda tag, img, value: "\x01span>x"})
    assert html == "<p><span>x </p>"


def test_styled_container() -> None:
    assert render("{{ :*\n# T\n}}") == '<div class="center bold"><h1>T</h1></div>'


def test_argument_callback() -> None:
    html = render("(((a|b|v)))", {"arg": lambda tag, img, value: f"[{tag},{img}]"})
    assert html == "<p>[a,b] </p>"


def test_argument_value_spanning_lines() -> None:
    html = render("(((t|i|x\ny)))", Callbacks(arg=lambda tag, img, value: value))
    assert html == "<p>x\\ny </p>"


def test_argument_tuple_output_is_not_escaped() -> None:
    html = render("(((t|i|v)))", {"arg": lambda tag, img, value: "<span>&</span>"})
    assert html == "<p><span>&</span> </p>"


def test_callback_errors_propagate() -> None:
    def broken(src: str) -> str:
        raise RuntimeError("no image store")

    with pytest.raises(RuntimeError, match="no image store"):
        render("[[a.png]]", {"img": broken})


def test_inline_dash_in_running_text() -> None:
    assert render("a -- b") == "<p>a &mdash; b </p>"


def test_render_file(tmp_path: Path) -> None:
    source = tmp_path / "doc.mm"
    source.write_text("# Title\nbody\n", encoding="utf-8")
    assert render_file(source) == "<h1>Title</h1><p>body </p>"
