"""
Unit tests for the prompt processor.
"""

import pytest

from promptgen.domain.processor import generate_content


class TestGenerateContent:
    def test_empty_instructions(self):
        """Test the canonical example with empty instructions."""
        assert (
            generate_content("Hello, world!", "")
            == "Processed Prompt: Hello, world! with "
        )

    def test_instructions_default_to_empty(self):
        """Test instructions can be omitted."""
        assert generate_content("Hello, world!") == "Processed Prompt: Hello, world! with "

    def test_prompt_and_instructions_substituted_in_order(self):
        """Test both inputs land in the template in order."""
        assert generate_content("Test", "Example") == "Processed Prompt: Test with Example"

    def test_empty_prompt(self):
        """Test an empty prompt is accepted."""
        assert generate_content("", "") == "Processed Prompt:  with "

    @pytest.mark.parametrize(
        "prompt, instructions",
        [
            ("  padded  ", "\ttabbed\n"),
            ("<b>html</b>", "& 'quotes' \"too\""),
            ("{instructions}", "{prompt}"),
            ("héllo wörld", "日本語"),
            ("multi\nline", "with with with"),
        ],
    )
    def test_inputs_inserted_verbatim(self, prompt, instructions):
        """Test inputs are neither trimmed, escaped nor re-formatted."""
        result = generate_content(prompt, instructions)

        assert result == "Processed Prompt: " + prompt + " with " + instructions

    def test_long_inputs(self):
        """Test large inputs are processed without truncation."""
        prompt = "p" * 100_000
        instructions = "i" * 50_000

        result = generate_content(prompt, instructions)

        assert result.startswith("Processed Prompt: " + prompt)
        assert result.endswith(" with " + instructions)

    def test_deterministic(self):
        """Test identical inputs give identical outputs."""
        first = generate_content("Same", "inputs")
        second = generate_content("Same", "inputs")

        assert first == second

    @pytest.mark.parametrize("bad_value", [None, 42, 1.5, ["a"], {"a": 1}, b"bytes"])
    def test_non_text_prompt_raises_type_error(self, bad_value):
        """Test non-text prompt is rejected."""
        with pytest.raises(TypeError, match="prompt must be str"):
            generate_content(bad_value, "")

    @pytest.mark.parametrize("bad_value", [None, 42, ["a"]])
    def test_non_text_instructions_raises_type_error(self, bad_value):
        """Test non-text instructions are rejected."""
        with pytest.raises(TypeError, match="instructions must be str"):
            generate_content("prompt", bad_value)
