"""Tests placeholders : extraction, substitution, non-récursivité, syntaxe mal formée."""
from email_composer.core.placeholders import (
    extract_ordered,
    extract_variables,
    format_placeholder,
    substitute,
    unresolved_variables,
)


# ── extract ──────────────────────────────────────────────────────────────────

def test_extract_exact_set():
    assert extract_variables("Hi {{userName}}, you earned {{amount}}") == {"userName", "amount"}


def test_extract_dedupes():
    assert extract_variables("{{a}} {{a}} {{b}}") == {"a", "b"}


def test_extract_empty_and_none():
    assert extract_variables("") == set()
    assert extract_variables(None) == set()


def test_extract_ignores_malformed_syntax():
    text = "{{ spaced }} {single} {{dotted.path}} {{unclosed {{ok_1}}"
    assert extract_variables(text) == {"ok_1"}


def test_extract_ordered_first_seen_across_texts():
    assert extract_ordered("Payment: {{amount}}", "<p>{{userName}} {{amount}}</p>") == ["amount", "userName"]


def test_format_placeholder():
    assert format_placeholder("otpCode") == "{{otpCode}}"


# ── substitute ───────────────────────────────────────────────────────────────

def test_unknown_name_left_untouched():
    assert substitute("{{unknown}}", {}) == "{{unknown}}"
    assert substitute("{{unknown}}", {"other": "x"}) == "{{unknown}}"


def test_all_occurrences_replaced():
    assert substitute("{{a}} and {{a}}", {"a": "X"}) == "X and X"


def test_no_recursive_expansion():
    out = substitute("{{a}} {{b}}", {"a": "{{b}}", "b": "B"})
    assert out == "{{b}} B"


def test_none_value_counts_as_missing():
    assert substitute("Hi {{userName}}", {"userName": None}) == "Hi {{userName}}"


def test_non_string_values():
    assert substitute("{{n}} stars", {"n": 5}) == "5 stars"
    assert substitute("{{kw}}", {"kw": ["spam", "scam"]}) == "spam, scam"


def test_braces_in_prose_are_inert():
    text = "Use {curly} or {{ not a var }} freely"
    assert substitute(text, {"curly": "X"}) == text


def test_substitute_empty_input():
    assert substitute("", {"a": "b"}) == ""
    assert substitute(None, {"a": "b"}) == ""


def test_unresolved_after_partial_substitution():
    out = substitute("{{a}} {{b}} {{c}}", {"a": "1"})
    assert unresolved_variables(out) == {"b", "c"}
    assert unresolved_variables(out, known=["b"]) == {"c"}
