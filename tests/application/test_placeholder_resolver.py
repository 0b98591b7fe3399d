"""
Tests for placeholder resolution.
"""

import pytest

from nodechain.application.adapter import PlaceholderResolver, resolve, resolve_any


class TestResolve:
    """Test cases for resolve()."""

    def test_template_without_placeholders_is_unchanged(self):
        template = "plain text with $ and {braces} and $notaplaceholder"

        assert resolve(template, {"notaplaceholder": "x"}) == template

    def test_missing_placeholder_binds_to_empty_string(self):
        assert resolve("pre-${missing}-post", {}) == "pre--post"

    def test_fully_bound_template_leaves_no_markers(self):
        result = resolve("${a}/${b.c}/${d-e_f}", {"a": "1", "b.c": "2", "d-e_f": "3"})

        assert result == "1/2/3"
        assert "${" not in result

    def test_literal_text_passes_through(self):
        assert resolve("Hello, ${name}!", {"name": "Ari"}) == "Hello, Ari!"

    def test_repeated_placeholders(self):
        assert resolve("${x}${x}${x}", {"x": "ab"}) == "ababab"

    @pytest.mark.parametrize("value", ["\\1", "$1", "\\g<0>", "a\\b", "${other}"])
    def test_replacement_text_is_literal(self, value):
        """Test that special characters in values are neither interpreted nor re-scanned."""
        assert resolve("[${v}]", {"v": value, "other": "nope"}) == f"[{value}]"

    def test_invalid_identifiers_are_left_alone(self):
        assert resolve("${not valid} ${}", {"not valid": "x"}) == "${not valid} ${}"

    def test_non_string_values(self):
        bindings = {"n": 3, "f": 1.5, "t": True, "none": None, "m": {"a": 1}, "l": [1, 2]}

        assert resolve("${n} ${f} ${t} [${none}]", bindings) == "3 1.5 true []"
        assert resolve("${m} ${l}", bindings) == '{"a":1} [1,2]'

    def test_unencodable_values_fall_back_to_str(self):
        class Thing:
            def __str__(self):
                return "thing"

        assert resolve("${t}", {"t": Thing()}) == "thing"

    def test_resolver_class_matches_function(self):
        resolver = PlaceholderResolver()

        assert resolver.resolve("a${b}c", {"b": "-"}) == resolve("a${b}c", {"b": "-"})


class TestResolveAny:
    """Test cases for resolve_any()."""

    def test_exact_placeholder_preserves_type(self):
        assert resolve_any("${rows}", {"rows": [1, 2]}) == [1, 2]
        assert resolve_any(" ${code} ", {"code": 200}) == 200

    def test_exact_placeholder_unbound_is_empty_string(self):
        assert resolve_any("${missing}", {}) == ""

    def test_nested_structures(self):
        value = {"body": {"email": "${email}", "tags": ["${tag}", "static"]}, "code": 200}

        resolved = resolve_any(value, {"email": "x@y.com", "tag": "new"})

        assert resolved == {"body": {"email": "x@y.com", "tags": ["new", "static"]}, "code": 200}

    def test_interpolated_strings(self):
        assert resolve_any("Hello ${name}", {"name": "Ari"}) == "Hello Ari"

    def test_does_not_mutate_input(self):
        value = {"a": "${x}"}
        resolve_any(value, {"x": 1})

        assert value == {"a": "${x}"}
