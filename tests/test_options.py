from datetime import timedelta

import pytest

from cprlite.options import HttpVersion, HttpVersionCode, Timeout, UnixSocket, UserAgent


def test_timeout_from_int():
    assert Timeout(1000).milliseconds() == 1000


def test_timeout_from_timedelta():
    assert Timeout(timedelta(milliseconds=5000)).milliseconds() == 5000


def test_timeout_zero():
    assert Timeout(0).milliseconds() == 0


def test_timeout_overflow():
    with pytest.raises(OverflowError, match="overflow"):
        Timeout(2**63).milliseconds()


def test_timeout_underflow():
    with pytest.raises(OverflowError, match="underflow"):
        Timeout(-(2**63) - 1).milliseconds()


def test_timeout_at_limit():
    assert Timeout(2**63 - 1).milliseconds() == 2**63 - 1


def test_timeout_rejects_other_types():
    with pytest.raises(TypeError):
        Timeout("1000")


def test_unix_socket_path():
    sock = UnixSocket("/tmp/app.sock")
    assert sock.socket_path() == "/tmp/app.sock"


def test_http_version_default():
    assert HttpVersion().code is HttpVersionCode.VERSION_NONE


def test_http_version_explicit():
    assert HttpVersion(HttpVersionCode.VERSION_2_0).code is HttpVersionCode.VERSION_2_0


def test_http_version_codes_ordered():
    codes = [HttpVersion(code).code for code in HttpVersionCode]
    names = [code.name for code in codes]
    assert names[0] == "VERSION_NONE"
    assert names[-1] == "VERSION_3_0"
    assert codes[0] is HttpVersion().code
    assert len(names) == len(set(code.value for code in codes))


def test_user_agent_behaves_as_string():
    agent = UserAgent("cprlite-test/1.0")
    assert agent == "cprlite-test/1.0"
    assert agent.upper() == "CPRLITE-TEST/1.0"


def test_user_agent_default_empty():
    assert UserAgent() == ""