class DomainError(Exception):
    """Base class for domain-specific errors."""

    def __init__(self, message: str, code: str = "DOMAIN_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)


class InputTooLongError(DomainError):
    """Raised when a prompt or instructions exceed the configured limit."""

    def __init__(self, reason: str):
        super().__init__(reason, "INPUT_TOO_LONG")
