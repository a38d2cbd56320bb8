"""
Domain validators for prompt input.
"""

from typing import Optional


class PromptValidators:
    @staticmethod
    def validate_prompt(prompt: str, max_length: Optional[int] = None) -> None:
        """Validate prompt type and, when configured, its length."""
        if not isinstance(prompt, str):
            raise TypeError(f"Prompt must be text, not {type(prompt).__name__}")

        if max_length is not None and len(prompt) > max_length:
            raise ValueError(f"Prompt cannot exceed {max_length} characters")

    @staticmethod
    def validate_instructions(
        instructions: str, max_length: Optional[int] = None
    ) -> None:
        """Validate instructions type and, when configured, its length."""
        if not isinstance(instructions, str):
            raise TypeError(
                f"Instructions must be text, not {type(instructions).__name__}"
            )

        if max_length is not None and len(instructions) > max_length:
            raise ValueError(f"Instructions cannot exceed {max_length} characters")
