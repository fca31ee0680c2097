"""teleclient -- a typed client for the Telegram Bot API."""

from teleclient.aio import AsyncTelegramClient
from teleclient.client import TelegramClient
from teleclient.exceptions import (
    APIException,
    AttachmentTypeError,
    NotOwnedMessageError,
    TelegramArgumentError,
    TelegramError,
)
from teleclient.files import InputFile

__all__ = [
    "APIException",
    "AsyncTelegramClient",
    "AttachmentTypeError",
    "InputFile",
    "NotOwnedMessageError",
    "TelegramArgumentError",
    "TelegramClient",
    "TelegramError",
]

__version__ = "0.1.0"
