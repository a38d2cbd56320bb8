"""
Prompt processor.

Turns a prompt and its instructions into the response text returned by
the generate endpoint.
"""

RESPONSE_TEMPLATE = "Processed Prompt: {prompt} with {instructions}"


def generate_content(prompt: str, instructions: str = "") -> str:
    """Substitute prompt and instructions into the response template.

    Both values are inserted verbatim; nothing is trimmed or escaped.

    Raises:
        TypeError: if either argument is not a ``str``.
    """
    if not isinstance(prompt, str):
        raise TypeError(f"prompt must be str, not {type(prompt).__name__}")
    if not isinstance(instructions, str):
        raise TypeError(
            f"instructions must be str, not {type(instructions).__name__}"
        )

    return RESPONSE_TEMPLATE.format(prompt=prompt, instructions=instructions)
