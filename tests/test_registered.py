"""Tests for registrable domain extraction and cookie domain matching."""

import pytest

from regdom.registered import RegisteredDomain


@pytest.mark.parametrize(
    "host, expected",
    [
        ("example.com", "example.com"),
        ("sub.example.com", "example.com"),
        ("sub3.sub2.sub1.com", "sub1.com"),
        ("www.example.co.uk", "example.co.uk"),
        ("https://example.com/path", "example.com"),
        ("www.bbc.co.uk", "bbc.co.uk"),
        ("www.parliament.uk", "parliament.uk"),
        ("city.kawasaki.jp", "city.kawasaki.jp"),
        ("sub.city.kawasaki.jp", "city.kawasaki.jp"),
        ("a.b.c.kobe.jp", "b.c.kobe.jp"),
        ("www.ck", "www.ck"),
        ("sub.www.ck", "www.ck"),
        ("example.example", "example.example"),
        ("www.münchen.de", "münchen.de"),
        ("www.xn--mnchen-3ya.de", "münchen.de"),
        ("食狮.com.cn", "食狮.com.cn"),
        ("www.食狮.公司.cn", "食狮.公司.cn"),
        ("www.xn--85x722f.xn--55qx5d.cn", "食狮.公司.cn"),
        ("test.公司.cn", "test.公司.cn"),
        ("test.xn--55qx5d.cn", "test.公司.cn"),
        ("example.com:8080", "example.com"),
        ("example.com.", "example.com"),
    ],
)
def test_get_registered_domain(regdom, host, expected):
    assert regdom.get_registered_domain(host) == expected


@pytest.mark.parametrize(
    "host",
    ["com", "co.uk", "公司.cn", "anything.ck", "", "localhost", "192.168.1.1", "[::1]:443", "a..com"],
)
def test_get_registered_domain_absent(regdom, host):
    assert regdom.get_registered_domain(host) is None


def test_get_registered_domain_ascii_output(regdom):
    assert regdom.get_registered_domain("www.münchen.de", prefer_unicode=False) == "xn--mnchen-3ya.de"


def test_get_registered_domain_is_case_invariant(regdom):
    assert regdom.get_registered_domain("WWW.EXAMPLE.COM") == regdom.get_registered_domain("www.example.com")


@pytest.mark.parametrize("suffix", ["com", "co.uk", "something.ck", "c.kobe.jp", "xn--55qx5d.cn"])
def test_public_suffix_has_no_registered_domain(regdom, suffix):
    assert regdom.psl.is_public_suffix(suffix)
    assert regdom.get_registered_domain(suffix) is None


@pytest.mark.parametrize(
    "host, domain, expected",
    [
        ("example.com", "example.com", True),
        ("sub.example.com", "example.com", True),
        ("www.example.com", "example.com", True),
        ("example.com", "", True),
        ("192.168.0.1", "", True),
        ("192.168.0.1", "192.168.0.1", False),
        ("localhost", "", True),
        ("localhost", "localhost", False),
        ("example.com", "com", False),
        ("example.co.uk", "co.uk", False),
        ("WWW.EXAMPLE.COM", "example.com", True),
        ("example.com", ".example.com", True),
        ("example.com:8080", "example.com", True),
        ("münchen.de", "münchen.de", True),
        ("www.xn--mnchen-3ya.de", "münchen.de", True),
        ("google.com", "facebook.com", False),
        ("google.co.uk", "amazon.co.uk", False),
        ("example.com", "www.example.com", False),
        ("notexample.com", "example.com", False),
        ("[::1]:443", "::1", False),
        ("１２７.０.０.１", "0.0.1", False),
        ("localhost", "ｌｏｃａｌｈｏｓｔ", False),
    ],
)
def test_domain_matches(regdom, host, domain, expected):
    assert regdom.domain_matches(host, domain) is expected


def test_domain_matches_without_psl_enforcement(psl):
    lenient = RegisteredDomain(psl, enforce_psl=False)
    assert lenient.domain_matches("example.com", "com") is True
    assert lenient.domain_matches("localhost", "localhost") is False
    assert lenient.domain_matches("10.0.0.1", "10.0.0.1") is False
    assert lenient.domain_matches("localhost", "ｌｏｃａｌｈｏｓｔ") is False
    assert lenient.domain_matches("１２７.０.０.１", "0.0.1") is False
