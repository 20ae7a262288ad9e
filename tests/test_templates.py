"""
Unit tests for the template engine wrapper.
"""

import pytest

from pb_modelgen.codegen.core.templates import (
    TemplateError,
    create_template_engine,
    dart_string,
)


class TestDartString:
    """Dart single-quoted literal escaping."""

    def test_plain(self):
        assert dart_string("draft") == "'draft'"

    def test_quote_and_interpolation_are_escaped(self):
        assert dart_string("it's $5") == "'it\\'s \\$5'"

    def test_backslash_and_newline(self):
        assert dart_string("a\\b\nc") == "'a\\\\b\\nc'"


class TestTemplateEngine:
    """In-memory templates and filters."""

    def test_render_string_with_filters(self):
        engine = create_template_engine()
        rendered = engine.render_string(
            "{{ name | pascal_case }} {{ name | camel_case }} {{ name | dart_string }}",
            {"name": "first_name"},
        )
        assert rendered == "FirstName firstName 'first_name'"

    def test_add_template(self):
        engine = create_template_engine()
        engine.add_template("greeting", "hello {{ who }}")
        assert engine.template_exists("greeting")
        assert engine.render_template("greeting", {"who": "dart"}) == "hello dart"

    def test_missing_template(self):
        engine = create_template_engine()
        assert not engine.template_exists("nope.j2")
        with pytest.raises(TemplateError):
            engine.render_template("nope.j2", {})

    def test_undefined_variables_fail(self):
        engine = create_template_engine()
        with pytest.raises(TemplateError):
            engine.render_string("{{ missing }}", {})

    def test_in_memory_template_shadows_file(self, generator):
        engine = generator.template_engine
        assert engine.template_exists("header.dart.j2")
        engine.add_template("header.dart.j2", "// custom")
        assert engine.render_template("header.dart.j2", {}) == "// custom"
        assert engine.template_exists("fields.dart.j2")
