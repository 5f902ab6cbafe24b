from datetime import datetime, timezone

import pytest

from cprlite.util import (
    CaseInsensitiveDict,
    Cookie,
    is_true,
    parse_cookies,
    parse_header,
    secure_clear,
    split,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("a,b,c", ["a", "b", "c"]),
        ("a,,b", ["a", "", "b"]),
        ("a,b,", ["a", "b"]),
        ("a,,", ["a", ""]),
        (",a", ["", "a"]),
        ("", []),
    ],
)
def test_split(text, expected):
    assert split(text, ",") == expected


def test_split_rejects_long_delimiter():
    with pytest.raises(ValueError):
        split("a--b", "--")


@pytest.mark.parametrize(
    "text, expected",
    [("true", True), ("TRUE", True), ("TrUe", True), ("false", False), ("yes", False), ("", False)],
)
def test_is_true(text, expected):
    assert is_true(text) is expected


def test_parse_cookies_full_line():
    line = "127.0.0.1\tFALSE\t/\tTRUE\t3905119080\tSID\t31d4d96e407aad42"
    cookies = parse_cookies([line])
    assert cookies == [
        Cookie(
            name="SID",
            value="31d4d96e407aad42",
            domain="127.0.0.1",
            include_subdomains=False,
            path="/",
            https_only=True,
            expires=datetime(2093, 9, 30, 3, 18, tzinfo=timezone.utc),
        )
    ]


def test_parse_cookies_pads_missing_fields():
    cookies = parse_cookies(["example.com\tTRUE\t/docs\tFALSE\t0\tlang"])
    assert len(cookies) == 1
    cookie = cookies[0]
    assert cookie.name == "lang"
    assert cookie.value == ""
    assert cookie.include_subdomains is True
    assert cookie.path == "/docs"
    assert cookie.expires == datetime.fromtimestamp(0, tz=timezone.utc)


def test_parse_cookies_keeps_order():
    lines = [
        "127.0.0.1\tFALSE\t/\tTRUE\t0\tSID\tone",
        "127.0.0.1\tFALSE\t/\tTRUE\t0\tlang\ten-US",
    ]
    assert [c.name for c in parse_cookies(lines)] == ["SID", "lang"]


def test_parse_cookies_missing_expiry_raises():
    with pytest.raises(ValueError):
        parse_cookies(["example.com\tTRUE\t/"])


def test_parse_header_basic():
    raw = "HTTP/1.1 200 OK\r\nContent-Type: text/html\r\nContent-Length: 12\r\n\r\n"
    parsed = parse_header(raw)
    assert parsed.status_line == "HTTP/1.1 200 OK"
    assert parsed.reason == "OK"
    assert parsed.header["content-type"] == "text/html"
    assert parsed.header["CONTENT-LENGTH"] == "12"
    assert len(parsed.header) == 2


def test_parse_header_keeps_only_last_response():
    raw = (
        "HTTP/1.1 301 Moved Permanently\r\n"
        "Location: hello.html\r\n"
        "\r\n"
        "HTTP/1.1 200 OK\r\n"
        "Content-Type: text/html\r\n"
        "\r\n"
    )
    parsed = parse_header(raw)
    assert parsed.status_line == "HTTP/1.1 200 OK"
    assert "Location" not in parsed.header
    assert parsed.header["Content-Type"] == "text/html"


def test_parse_header_reason_with_spaces():
    parsed = parse_header("HTTP/1.1 405 Method Not Allowed\r\n")
    assert parsed.reason == "Method Not Allowed"


def test_parse_header_trims_values():
    parsed = parse_header("X-Thing: \t  padded value \t\r\n")
    assert parsed.header["x-thing"] == "padded value"
    assert parsed.status_line == ""


def test_parse_header_value_with_colon():
    parsed = parse_header("Location: http://127.0.0.1:61936/hello.html\r\n")
    assert parsed.header["location"] == "http://127.0.0.1:61936/hello.html"


def test_case_insensitive_dict_keeps_first_spelling():
    d = CaseInsensitiveDict()
    d["Content-Type"] = "text/html"
    d["content-type"] = "application/json"
    assert list(d) == ["Content-Type"]
    assert d["CONTENT-TYPE"] == "application/json"


def test_case_insensitive_dict_equality_and_delete():
    d = CaseInsensitiveDict({"Accept": "*/*", "Host": "localhost"})
    assert d == {"accept": "*/*", "host": "localhost"}
    del d["HOST"]
    assert "host" not in d
    assert len(d) == 1


def test_secure_clear_empties_buffer():
    buf = bytearray(b"secret")
    secure_clear(buf)
    assert buf == bytearray()


def test_secure_clear_rejects_immutable():
    with pytest.raises(TypeError):
        secure_clear(b"secret")