"""Tests for suffix list rule parsing."""

from regdom.rules import Rule, RuleKind, load_rules, parse_rule, parse_rules


def test_parse_normal_rule():
    rule = parse_rule("co.uk")
    assert rule == Rule(labels=("co", "uk"), kind=RuleKind.NORMAL)
    assert rule.suffix_labels == ("co", "uk")


def test_parse_wildcard_rule():
    rule = parse_rule("*.kawasaki.jp")
    assert rule.kind is RuleKind.WILDCARD
    assert rule.labels == ("*", "kawasaki", "jp")


def test_parse_exception_rule_drops_leftmost_label_for_suffix():
    rule = parse_rule("!city.kawasaki.jp")
    assert rule.kind is RuleKind.EXCEPTION
    assert rule.labels == ("city", "kawasaki", "jp")
    assert rule.suffix_labels == ("kawasaki", "jp")
    assert str(rule) == "!city.kawasaki.jp"


def test_comments_and_blank_lines_are_ignored():
    assert parse_rule("// a comment") is None
    assert parse_rule("   ") is None
    assert parse_rule("") is None


def test_only_first_token_is_read():
    assert parse_rule("com.au   some trailing text").labels == ("com", "au")


def test_unicode_rule_is_stored_as_punycode():
    assert parse_rule("公司.cn").labels == ("xn--55qx5d", "cn")


def test_rules_are_lowercased():
    assert parse_rule("CO.UK").labels == ("co", "uk")


def test_malformed_rules_are_skipped(caplog):
    assert parse_rule("a..com") is None
    assert parse_rule("foo.*.com") is None
    assert parse_rule("!*.ck") is None
    assert parse_rule("!ck") is None
    assert "Skipping" in caplog.text


def test_parse_rules_counts(psl_text):
    rules = parse_rules(psl_text)
    kinds = [r.kind for r in rules]
    assert kinds.count(RuleKind.WILDCARD) == 3
    assert kinds.count(RuleKind.EXCEPTION) == 3
    assert kinds.count(RuleKind.NORMAL) == 14


def test_load_rules_from_file(tmp_path, psl_text):
    path = tmp_path / "public_suffix_list.dat"
    path.write_text(psl_text, encoding="utf-8")
    assert load_rules(path) == parse_rules(psl_text)
