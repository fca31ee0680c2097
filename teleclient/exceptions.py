"""Exception hierarchy for the teleclient Bot API binding."""

from typing import Any, Dict, Optional


class TelegramError(Exception):
    """Base class for every error raised by teleclient itself."""


class APIException(TelegramError):
    """Raised when the Bot API answers with a non-2xx status or ``ok: false``.

    Attributes:
        status_code: HTTP status code returned by the API.
        response_body: Decoded response body as a dict, when available.
    """

    def __init__(self, status_code: int, response_body: Optional[Dict[str, Any]] = None) -> None:
        """Initialise with the HTTP status code and optional body."""
        self.status_code = status_code
        self.response_body = response_body or {}
        description = self.response_body.get("description", "Unknown error")
        super().__init__(f"API error {status_code}: {description}")

    @property
    def description(self) -> str:
        return self.response_body.get("description", "Unknown error")

    @property
    def retry_after(self) -> Optional[int]:
        """Seconds to wait before retrying, when the API reported flood control."""
        parameters = self.response_body.get("parameters") or {}
        return parameters.get("retry_after")


class TelegramArgumentError(TelegramError, ValueError):
    """Raised locally, before any network call, for invalid arguments."""


class AttachmentTypeError(TelegramArgumentError, TypeError):
    """An attachment parameter was neither a local file nor a string reference."""

    def __init__(self, field: str, value: Any, allow_reference: bool = True) -> None:
        self.field = field
        self.value = value
        if allow_reference:
            expected = "a local file (InputFile or path) or a string file_id / URL"
        else:
            expected = "a local file (InputFile or path)"
        super().__init__(f"Attribute '{field}' must be {expected}, got {type(value).__name__}")


class NotOwnedMessageError(TelegramError):
    """An edit call returned ``true`` instead of the edited message.

    The API does this for messages the bot did not send itself (inline
    messages); the edit was still applied server side.
    """

    def __init__(self, method: str) -> None:
        self.method = method
        super().__init__(f"{method}: edited message is not owned by this client")
