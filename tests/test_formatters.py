"""Tests for value and template formatting"""

import pytest

from transport_logger.core.call_site import CallSite
from transport_logger.core.log_level import LogLevel
from transport_logger.formatters import (
    TemplateFormatter,
    build_tokens,
    format_value,
    format_values,
)


class Unprintable:
    def __repr__(self):
        raise RuntimeError("no repr")

    def __str__(self):
        raise RuntimeError("no str")


class BadString(str):
    def __str__(self):
        raise RuntimeError("no str")


class TestFormatValue:
    """Test rendering of individual values."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("text", "text"),
            (4, "4"),
            (1.5, "1.5"),
            (False, "False"),
            (None, "None"),
        ],
    )
    def test_primitives(self, value, expected):
        assert format_value(value) == expected

    def test_containers_use_inspection(self):
        assert format_value({"user_id": "..."}) == "{'user_id': '...'}"
        assert format_value([1, "a"]) == "[1, 'a']"

    def test_long_structures_are_pretty_printed(self):
        value = {f"key{i}": "x" * 10 for i in range(10)}
        assert "\n" in format_value(value)

    def test_unrepresentable_value_falls_back(self):
        text = format_value(Unprintable())
        assert text.startswith("<")
        assert "Unprintable object at" in text

    def test_unprintable_primitive_falls_back(self):
        assert "BadString object at" in format_value(BadString("x"))

    def test_format_values(self):
        assert format_values(["a", 1, ["b"]]) == "a 1 ['b']"
        assert format_values([]) == ""


class TestTemplateFormatter:
    """Test token substitution."""

    def test_render(self):
        formatter = TemplateFormatter("{time} | {name} | {content}")
        line = formatter.render({"time": "12:00", "name": "svc", "content": "hi"})
        assert line == "12:00 | svc | hi"

    def test_first_occurrence_only(self):
        formatter = TemplateFormatter("{content}-{content}")
        assert formatter.render({"content": "x"}) == "x-{content}"

    def test_unknown_tokens_left_verbatim(self):
        formatter = TemplateFormatter("{content} {request_id} {}")
        assert formatter.render({"content": "x"}) == "x {request_id} {}"

    def test_values_are_not_rescanned(self):
        formatter = TemplateFormatter("{content}|{name}")
        assert formatter.render({"content": "{name}", "name": "svc"}) == "{name}|svc"

    def test_render_pair(self):
        formatter = TemplateFormatter("{level}|{name}|{content}")
        raw, formatted = formatter.render_pair(
            LogLevel.ERROR, {"name": "svc", "content": "boom"}
        )
        assert raw == " error |svc|boom"
        assert formatted == "\033[91m error \033[0m|svc|boom"

    def test_repr(self):
        assert "{content}" in repr(TemplateFormatter("{content}"))


class TestBuildTokens:
    """Test token collection."""

    def test_without_call_site(self):
        tokens = build_tokens("now", "svc", "hi")
        assert tokens == {"time": "now", "name": "svc", "content": "hi"}

    def test_with_call_site(self):
        site = CallSite("app.py", 12, "handler", 5)
        tokens = build_tokens("now", "svc", "hi", site)
        assert tokens["fileName"] == "app.py"
        assert tokens["lineNumber"] == "12"
        assert tokens["functionName"] == "handler"
        assert tokens["columnNumber"] == "5"

    def test_missing_column(self):
        site = CallSite("app.py", 12, "handler")
        tokens = build_tokens("now", "svc", "hi", site)
        assert "columnNumber" not in tokens
