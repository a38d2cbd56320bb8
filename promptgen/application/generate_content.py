"""
Use Case: Generate Content

Validates the caller's prompt and instructions against the configured
limits, then runs them through the prompt processor.
"""

from typing import Optional

from promptgen.domain.exceptions import InputTooLongError
from promptgen.domain.processor import generate_content
from promptgen.domain.validators import PromptValidators
from promptgen.infra.config.logging_config import get_logger


class GenerateContentUseCase:
    """Use case producing the processed response for one request."""

    def __init__(
        self,
        max_prompt_length: Optional[int] = None,
        max_instructions_length: Optional[int] = None,
    ):
        self.max_prompt_length = max_prompt_length
        self.max_instructions_length = max_instructions_length
        self._log = get_logger("usecase.generate_content")

    def execute(self, prompt: str, instructions: str = "") -> str:
        """
        Execute the generate content use case.

        Args:
            prompt: Caller supplied prompt text
            instructions: Caller supplied instructions, possibly empty

        Returns:
            The processed response text

        Raises:
            InputTooLongError: if a configured length limit is exceeded
            TypeError: if either input is not text
        """
        try:
            PromptValidators.validate_prompt(prompt, self.max_prompt_length)
            PromptValidators.validate_instructions(
                instructions, self.max_instructions_length
            )
        except ValueError as e:
            self._log.warning("usecase.generate_content.rejected", reason=str(e))
            raise InputTooLongError(str(e)) from e

        content = generate_content(prompt, instructions)

        self._log.info(
            "usecase.generate_content.success",
            prompt_len=len(prompt),
            instructions_len=len(instructions),
            content_len=len(content),
        )
        return content
