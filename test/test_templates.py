"""Tests for template variable extraction."""

import pytest

from utils.templates import extract_variables_from_template, extract_variables_from_templates


@pytest.mark.parametrize(
    "template,expected",
    [
        ("Hello {{name}}", ["name"]),
        ("Hello {{ name }} from {{city}}", ["name", "city"]),
        ("{{ user.name }} and {{ items[0] }}", ["user", "items"]),
        ("{{ text | truncate(length=10) }}", ["text"]),
        ("{{ 'literal' }} {{ 42 }}", []),
        ("{% if premium %}Hi{% endif %}", ["premium"]),
        ("{% for item in items %}{{ item }}{% endfor %}", ["items"]),
        ("{% set greeting = salutation %}{{ greeting }}", ["salutation"]),
        ("{# {{ hidden }} #}Plain", []),
        ("{{- trimmed -}}", ["trimmed"]),
        ("No variables here", []),
        ("{{ a }} {{ a }}", ["a"]),
        ("{% if x and not y %}{% endif %}", ["x", "y"]),
        ("{% raw %}{{ not_a_var }}{% endraw %}", []),
        ("{% raw %}{{ literal }}{% endraw %} {{ real }}", ["real"]),
        ("{% for row in rows %}{{ loop.index }}{% endfor %}", ["rows"]),
    ],
)
def test_extract_variables_from_template(template, expected):
    assert extract_variables_from_template(template) == expected


def test_extract_variables_from_templates_keeps_first_seen_order():
    templates = ["{{ b }} {{ a }}", "{{ a }} {{ c }}", "plain"]
    assert extract_variables_from_templates(templates) == ["b", "a", "c"]


def test_extract_variables_from_templates_empty():
    assert extract_variables_from_templates([]) == []
    assert extract_variables_from_templates(["just text"]) == []


def test_unparseable_template_reports_no_variables():
    assert extract_variables_from_template("{% if %} {{ name }}") == []
