"""Tests for quoted literal encoding."""

import struct

from codemodel.quoting import CHAR_ESCAPE, CHAR_MACRO, quotify

# (name, quote, input, expected)
CASES: list[tuple[str, str, str, str]] = [
    ("empty", '"', "", '""'),
    ("empty_single", "'", "", "''"),
    ("plain", '"', "hello", '"hello"'),
    ("backspace", '"', "\b", '"\\b"'),
    ("tab", '"', "a\tb", '"a\\tb"'),
    ("newline", '"', "a\nb", '"a\\nb"'),
    ("form_feed", '"', "\f", '"\\f"'),
    ("carriage_return", '"', "\r\n", '"\\r\\n"'),
    ("double_quote", '"', 'say "hi"', '"say \\"hi\\""'),
    ("single_quote", "'", "'", "'\\''"),
    ("single_quote_in_string", '"', "it's", '"it\\\'s"'),
    ("backslash", '"', "C:\\dir", '"C:\\\\dir"'),
    ("nul", '"', "\x00", '"\\u0000"'),
    ("vertical_tab", '"', "\x0b", '"\\u000b"'),
    ("unit_separator", '"', "\x1f", '"\\u001f"'),
    ("space", '"', " ", '" "'),
    ("tilde", '"', "~", '"~"'),
    ("delete", '"', "\x7f", '"\\u007f"'),
    ("latin1", '"', "caf\u00e9", '"caf\\u00e9"'),
    ("cjk", '"', "\u4e2d", '"\\u4e2d"'),
    ("uppercase_hex_digits_lowered", '"', "\uabcd", '"\\uabcd"'),
    ("astral_is_surrogate_pair", '"', "\U0001f600", '"\\ud83d\\ude00"'),
    ("lone_surrogate", '"', "\ud800", '"\\ud800"'),
    ("max_unit", '"', "\uffff", '"\\uffff"'),
]


def pytest_generate_tests(metafunc):
    """Parametrize over the CASES table."""
    if "quote_case" in metafunc.fixturenames:
        metafunc.parametrize("quote_case", CASES, ids=[c[0] for c in CASES])


def test_quotify(quote_case):
    _, quote, text, expected = quote_case
    assert quotify(quote, text) == expected


def _unescape(quoted: str) -> str:
    """Reverse quotify: strip quotes and decode escapes back to code units."""
    body = quoted[1:-1]
    units: list[int] = []
    i = 0
    while i < len(body):
        c = body[i]
        if c != "\\":
            units.append(ord(c))
            i += 1
            continue
        nxt = body[i + 1]
        if nxt == "u":
            units.append(int(body[i + 2 : i + 6], 16))
            i += 6
        else:
            units.append(ord(CHAR_ESCAPE[CHAR_MACRO.index(nxt)]))
            i += 2
    raw = struct.pack("<" + str(len(units)) + "H", *units)
    return raw.decode("utf-16-le", "surrogatepass")


def test_escape_tables_paired():
    assert len(CHAR_ESCAPE) == len(CHAR_MACRO) == 8


def test_wrapped_in_quote():
    for quote in ('"', "'", "`"):
        for text in ("", "x", "\n", "\u00ff", '"'):
            out = quotify(quote, text)
            assert out.startswith(quote)
            assert out.endswith(quote)
            assert len(out) >= 2


def test_every_code_unit_has_exactly_one_form():
    for c in range(0x10000):
        body = quotify('"', chr(c))[1:-1]
        if chr(c) in CHAR_ESCAPE:
            assert body == "\\" + CHAR_MACRO[CHAR_ESCAPE.index(chr(c))]
        elif c < 0x20 or c > 0x7E:
            assert body == f"\\u{c:04x}"
        else:
            assert body == chr(c)


def test_mnemonics_take_precedence_over_printable_range():
    # " ' and \ are printable but still get the short escape
    assert quotify("'", '"') == "'\\\"'"
    assert quotify("'", "\\") == "'\\\\'"
    assert quotify('"', "'") == '"\\\'"'


def test_round_trip_printable_ascii():
    text = "".join(chr(c) for c in range(0x20, 0x7F))
    assert _unescape(quotify('"', text)) == text


def test_round_trip_mnemonics():
    assert _unescape(quotify('"', CHAR_ESCAPE)) == CHAR_ESCAPE


def test_round_trip_non_ascii():
    for text in ("\u00e9t\u00e9", "\u4e2d\u6587", "\U0001f600", "\x00\x7f\x80", "\ud800x"):
        assert _unescape(quotify('"', text)) == text


def test_output_is_ascii():
    out = quotify('"', "\u00e9\U0001f600\u2028")
    assert out.isascii()
