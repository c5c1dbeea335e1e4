"""Errors raised when the host hands over inconsistent declarations."""


class HostContractError(Exception):
    """Raised when a declaration references something the host never declared."""

    def __init__(self, message: str, name: str | None = None) -> None:
        self.name = name
        super().__init__(message)
