"""
Content generation endpoint.
"""

from fastapi import APIRouter, Depends

from promptgen.api.dependencies import get_generate_content_use_case
from promptgen.api.schemas import ErrorResponse, GenerateRequest, GenerateResponse
from promptgen.application.generate_content import GenerateContentUseCase
from promptgen.infra.config.logging_config import get_logger

router = APIRouter(tags=["generate"])
log = get_logger("api.generate")


@router.post(
    "/generate",
    response_model=GenerateResponse,
    responses={422: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def generate(
    request: GenerateRequest,
    use_case: GenerateContentUseCase = Depends(get_generate_content_use_case),
) -> GenerateResponse:
    """Process a prompt with its instructions and return the content."""
    log.info(
        "generate.request",
        prompt_len=len(request.prompt),
        has_instructions=bool(request.instructions),
    )
    content = use_case.execute(
        prompt=request.prompt, instructions=request.instructions
    )
    return GenerateResponse(content=content)
