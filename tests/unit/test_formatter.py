"""
Unit tests for the structural formatter.

Tests cover:
- Breaking and indenting object types and unions
- Separators nested in generics, parentheses and tuples
- Unbalanced input
- Wrapping of over-long lines
- Idempotence
"""

import random

import pytest

from tsprettify.formatter import TypeFormatter, check_format, format_type


# Fragments for generated, mostly malformed expressions
_FRAGMENTS = [
    "{", "}", "|", ";", ",", "<", ">", "(", ")", "[", "]", "=>", "&", ":",
    " ", "  ", "\n", "a", "bb", "'x'", "Array",
]


def _malformed(seed: int) -> str:
    rng = random.Random(seed)
    return "".join(rng.choice(_FRAGMENTS) for _ in range(rng.randint(0, 40)))


class TestFormatType:
    """Tests for format_type."""

    def test_object_type(self):
        """Test that each property goes on its own indented line."""
        assert format_type("{ a: string; b: number; }") == "{\n  a: string;\n  b: number;\n}"

    def test_nested_object(self):
        """Test indentation of a nested object type."""
        assert format_type("{ a: string; b: { c: number; }; }") == (
            "{\n"
            "  a: string;\n"
            "  b: {\n"
            "    c: number;\n"
            "  };\n"
            "}"
        )

    def test_union(self):
        """Test that a top-level union is broken after each separator."""
        assert format_type("string | number | boolean") == "string |\nnumber |\nboolean"

    def test_generic_comma_stays_inline(self):
        """Test that commas inside generic arguments do not break the line."""
        assert format_type("Map<string, number> | Set<string>") == (
            "Map<string, number> |\nSet<string>"
        )

    def test_object_inside_generic_stays_inline(self):
        """Test that braces inside a generic argument do not open a block."""
        assert format_type("Promise<{ ok: boolean; value: string }>") == (
            "Promise<{ ok: boolean; value: string }>"
        )

    def test_function_type(self):
        """Test spacing around an arrow and inside a parameter list."""
        assert format_type("(x: number,y: string)=>void") == "(x: number, y: string) => void"

    def test_custom_indent(self, config_factory):
        """Test formatting with a four-space indent."""
        config = config_factory(indent="    ")
        assert format_type("{ a: string; b: number; }", config) == (
            "{\n    a: string;\n    b: number;\n}"
        )


class TestFastPath:
    """Tests for inputs returned unchanged."""

    @pytest.mark.parametrize("source", ["string", "Array<string>", "number[]", "'a' & 'b'"])
    def test_short_simple_input(self, source):
        """Test that short input without braces, semicolons or pipes is unchanged."""
        assert format_type(source) == source

    @pytest.mark.parametrize("source", ["", None])
    def test_empty_input(self, source):
        """Test that empty input gives an empty string."""
        assert format_type(source) == ""

    def test_short_union_is_formatted(self):
        """Test that a pipe disables the fast path."""
        assert format_type("A | B") == "A |\nB"


class TestUnbalanced:
    """Tests for unbalanced braces."""

    def test_extra_closing_braces(self):
        """Test that surplus closing braces never indent negatively."""
        assert format_type("}}} a; {") == "}\n}\n}a;\n{"

    def test_unclosed_braces(self):
        """Test that unclosed braces still indent their content."""
        assert format_type("{ a: { b: string;") == "{\n  a: {\n    b: string;"

    def test_state_reset_between_calls(self):
        """Test that one formatter does not carry depth between expressions."""
        formatter = TypeFormatter()
        formatter.format("{ a: { b: {")
        assert formatter.format("{ a: string; b: number; }") == (
            "{\n  a: string;\n  b: number;\n}"
        )

    def test_generated_input(self):
        """Test that generated malformed input never indents unevenly or loses text."""
        for seed in range(200):
            source = _malformed(seed).replace("\n", " ").strip()
            result = format_type(source)
            assert "".join(result.split()) == "".join(source.split())
            for line in result.split("\n"):
                indent = line[: len(line) - len(line.lstrip())]
                assert set(indent) <= {" "}
                assert len(indent) % 2 == 0


class TestWrapping:
    """Tests for lines longer than the maximum length."""

    def test_long_line_wrapped_at_pipes(self, config_factory):
        """Test that an over-long line is split at union separators."""
        config = config_factory(max_line_length=20)
        result = format_type("{ value: Array<'aaaa' | 'bbbb' | 'cccc'>; }", config)
        assert result == (
            "{\n"
            "  value: Array<'aaaa'\n"
            "  | 'bbbb'\n"
            "  | 'cccc'>;\n"
            "}"
        )

    def test_line_without_pipe_kept(self, config_factory):
        """Test that a long line without a pipe is left alone."""
        config = config_factory(max_line_length=20)
        result = format_type("{ averyveryverylongpropertyname: string; }", config)
        assert "  averyveryverylongpropertyname: string;" in result.split("\n")


IDEMPOTENCE_SAMPLES = [
    "{ a: string; b: number; }",
    "{ a: string; b: { c: number; d: Array<{ e: boolean }> }; }",
    "string | number | { kind: 'circle'; radius: number } | undefined",
    "Map<string, Set<number>> | Record<'a' | 'b', [number, string]>",
    "(x: number, cb: (err: Error | null) => void) => Promise<void>",
    "}}} { a; ;; | |",
    "Promise<x & {a: b}>",
    "{ value: Array<'aaaa' | 'bbbb' | 'cccc' | 'dddd' | 'eeee' | 'ffff' | 'gggg' | 'hhhh'>; }",
    "   {   spaced  :   out  ;   }   ",
]


class TestIdempotence:
    """Formatting formatted text must not change it."""

    @pytest.mark.parametrize("source", IDEMPOTENCE_SAMPLES)
    def test_default_config(self, source):
        """Test idempotence with the default configuration."""
        once = format_type(source)
        assert format_type(once) == once

    @pytest.mark.parametrize("source", IDEMPOTENCE_SAMPLES)
    def test_narrow_config(self, source, config_factory):
        """Test idempotence with a narrow line length and tab indent."""
        config = config_factory(max_line_length=20, indent="\t")
        once = format_type(source, config)
        assert format_type(once, config) == once

    def test_check_format(self):
        """Test detection of already-formatted text."""
        assert not check_format("{ a: string; }")
        assert check_format(format_type("{ a: string; }"))

    def test_empty_union_segments_kept(self, config_factory):
        """Test that wrapping keeps the separator of an empty union segment."""
        config = config_factory(max_line_length=20)
        once = format_type("['x'||{&{])=>", config)
        assert once == "['x'\n|\n| { & { ]) =>"
        assert format_type(once, config) == once

    @pytest.mark.parametrize("seed", range(100))
    def test_generated_input(self, seed, config_factory):
        """Test idempotence on generated malformed and unbalanced input."""
        source = _malformed(seed)
        for config in (None, config_factory(max_line_length=20)):
            once = format_type(source, config)
            assert format_type(once, config) == once
