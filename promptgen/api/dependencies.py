"""
FastAPI dependencies.
"""

from fastapi import Depends

from promptgen.application.generate_content import GenerateContentUseCase
from promptgen.infra.config.settings import Settings, get_settings


def get_generate_content_use_case(
    settings: Settings = Depends(get_settings),
) -> GenerateContentUseCase:
    """Build the generate content use case from settings."""
    return GenerateContentUseCase(
        max_prompt_length=settings.max_prompt_length,
        max_instructions_length=settings.max_instructions_length,
    )
