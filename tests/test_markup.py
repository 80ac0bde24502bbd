"""Tests for tajweed markup parsing, stripping, conversion and rendering."""

from mushaf.markup import (
    ANSI_RESET,
    MarkupSpan,
    convert_tajweed_notation,
    parse_tajweed,
    render_ansi,
    strip_markup,
)


def test_parse_plain_text():
    assert parse_tajweed("بِسْمِ") == [MarkupSpan(text="بِسْمِ")]


def test_parse_empty_text():
    assert parse_tajweed("") == []


def test_parse_rule_spans():
    markup = '<span class="tajweed-ham_wasl">ٱ</span>لْحَمْدُ لِ<span class="tajweed-laam_shamsiyah">ل</span>'

    spans = parse_tajweed(markup)

    assert spans == [
        MarkupSpan(text="ٱ", rule="ham_wasl"),
        MarkupSpan(text="لْحَمْدُ لِ"),
        MarkupSpan(text="ل", rule="laam_shamsiyah"),
    ]
    assert not spans[0].is_plain
    assert spans[1].is_plain


def test_parse_unquoted_and_single_quoted_classes():
    spans = parse_tajweed("<span class=tajweed-ghunnah>نّ</span><span class='tajweed-qalaqah'>د</span>")
    assert [s.rule for s in spans] == ["ghunnah", "qalaqah"]


def test_unrecognized_span_passes_through():
    markup = 'رَبِّ<span class="end">٢</span>'

    assert parse_tajweed(markup) == [MarkupSpan(text=markup)]


def test_other_markup_passes_through_and_merges():
    markup = '<b>a</b><span class="tajweed-iqlab">m</span><i>b</i><span class="x">c</span>'

    spans = parse_tajweed(markup)

    assert spans == [
        MarkupSpan(text="<b>a</b>"),
        MarkupSpan(text="m", rule="iqlab"),
        MarkupSpan(text='<i>b</i><span class="x">c</span>'),
    ]


def test_bare_prefix_is_not_a_rule():
    markup = '<span class="tajweed-">x</span>'
    assert parse_tajweed(markup) == [MarkupSpan(text=markup)]


def test_custom_prefix():
    markup = '<span class="tj-madda_normal">ا</span><span class="tajweed-ghunnah">ن</span>'

    spans = parse_tajweed(markup, prefix="tj-")

    assert spans[0] == MarkupSpan(text="ا", rule="madda_normal")
    assert spans[1].is_plain


def test_strip_markup():
    assert strip_markup('<span class="tajweed-ham_wasl">ٱ</span>لْحَمْدُ') == "ٱلْحَمْدُ"
    assert strip_markup("no tags") == "no tags"


def test_convert_notation():
    text = "[h:9421[ٱ]لْحَمْدُ لِلَّهِ"

    converted = convert_tajweed_notation(text)

    assert converted == '<span class="tajweed-ham_wasl">ٱ</span>لْحَمْدُ لِلَّهِ'
    assert strip_markup(converted) == "ٱلْحَمْدُ لِلَّهِ"


def test_convert_notation_without_id_and_custom_prefix():
    assert convert_tajweed_notation("رَبِّ [n[ـٰ]", prefix="tj-") == 'رَبِّ <span class="tj-madda_normal">ـٰ</span>'


def test_convert_notation_keeps_unknown_rules():
    assert convert_tajweed_notation("[z[x]") == "[z[x]"
    assert convert_tajweed_notation("plain") == "plain"


def test_converted_notation_round_trips_through_parser():
    spans = parse_tajweed(convert_tajweed_notation("[q[د]ين"))
    assert spans == [MarkupSpan(text="د", rule="qalaqah"), MarkupSpan(text="ين")]


def test_render_ansi_colours_known_rules_only():
    rendered = render_ansi([
        MarkupSpan(text="ٱ", rule="ham_wasl"),
        MarkupSpan(text="لْحَمْدُ"),
        MarkupSpan(text="?", rule="not_a_rule"),
    ])

    assert rendered.startswith("\x1b[38;5;")
    assert "ٱ" + ANSI_RESET + "لْحَمْدُ?" in rendered
