"""Attachment resolution: local file uploads versus string references.

Every Bot API parameter that carries binary content accepts either a local
file, uploaded as a multipart part, or a string (a ``file_id`` already stored
on Telegram's servers, or an HTTP URL Telegram should fetch).  This module is
the single place where that decision is made.
"""

from __future__ import annotations

import contextlib
import os
from dataclasses import dataclass
from pathlib import Path
from typing import IO, Any, Dict, MutableMapping, Optional, Tuple, Union

from teleclient.exceptions import AttachmentTypeError


@dataclass(frozen=True)
class InputFile:
    """A local file to upload.

    Args:
        path: Location of the file on disk.
        filename: Name announced in the multipart part.  Defaults to the
            path's basename; Telegram rejects parts with an empty filename.
    """

    path: Path
    filename: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", Path(self.path))

    @classmethod
    def coerce(cls, value: Any) -> Optional["InputFile"]:
        """Return *value* as an :class:`InputFile`, or ``None`` if it is not a local file."""
        if isinstance(value, InputFile):
            return value
        if isinstance(value, os.PathLike):
            return cls(Path(value))
        return None

    @property
    def upload_name(self) -> str:
        if self.filename:
            return self.filename
        return self.path.name or str(self.path.stat().st_size)


Attachment = Union[InputFile, os.PathLike, str]


def resolve_attachment(
    field: str,
    value: Any,
    params: MutableMapping[str, Any],
    files: MutableMapping[str, InputFile],
    allow_reference: bool = True,
) -> None:
    """Route one attachment parameter into *params* or *files*.

    ``None`` is ignored so optional attachments can be passed straight
    through.  Local files go to *files*; strings go to *params* unless
    *allow_reference* is false (file-only parameters such as a chat photo).

    Raises:
        AttachmentTypeError: If *value* is neither a local file nor, where
            allowed, a string.
    """
    if value is None:
        return
    local = InputFile.coerce(value)
    if local is not None:
        files[field] = local
    elif isinstance(value, str) and allow_reference:
        params[field] = value
    else:
        raise AttachmentTypeError(field, value, allow_reference)


def attach_media(media: Any, files: MutableMapping[str, InputFile]) -> Any:
    """Move local files referenced by an ``InputMedia*`` model into *files*.

    The returned copy points at the uploaded parts through ``attach://<name>``
    references; string ``media`` / ``thumb`` values are kept as they are.
    """
    update: Dict[str, str] = {}
    for attr in ("media", "thumb"):
        local = InputFile.coerce(getattr(media, attr, None))
        if local is None:
            continue
        name = f"attach{len(files)}"
        files[name] = local
        update[attr] = f"attach://{name}"
    if not update:
        return media
    return media.model_copy(update=update)


def open_parts(
    files: Dict[str, InputFile], stack: contextlib.ExitStack
) -> Dict[str, Tuple[str, IO[bytes]]]:
    """Open every file for a multipart body; *stack* owns the handles."""
    parts: Dict[str, Tuple[str, IO[bytes]]] = {}
    for field, input_file in files.items():
        handle = stack.enter_context(open(input_file.path, "rb"))
        parts[field] = (input_file.upload_name, handle)
    return parts
