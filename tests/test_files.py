"""Tests for attachment resolution."""

import contextlib
import sys
import os
from pathlib import Path

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from teleclient.exceptions import AttachmentTypeError
from teleclient.files import InputFile, attach_media, open_parts, resolve_attachment
from teleclient.models import InputMediaVideo


@pytest.fixture()
def clip(tmp_path) -> Path:
    path = tmp_path / "clip.mp4"
    path.write_bytes(b"0123456789")
    return path


# ── InputFile ────────────────────────────────────────────────────────────────


class TestInputFile:
    """Validate the local-file attachment type."""

    def test_path_coerced(self, clip: Path) -> None:
        assert InputFile(str(clip)).path == clip

    def test_upload_name_defaults_to_basename(self, clip: Path) -> None:
        assert InputFile(clip).upload_name == "clip.mp4"

    def test_upload_name_override(self, clip: Path) -> None:
        assert InputFile(clip, filename="movie.mp4").upload_name == "movie.mp4"

    def test_coerce(self, clip: Path) -> None:
        assert InputFile.coerce(clip) == InputFile(clip)
        assert InputFile.coerce("file_id") is None
        assert InputFile.coerce(None) is None


# ── resolve_attachment ───────────────────────────────────────────────────────


class TestResolveAttachment:
    """Validate routing into params or files."""

    def test_local_file_goes_to_files(self, clip: Path) -> None:
        params, files = {}, {}
        resolve_attachment("video", clip, params, files)
        assert params == {}
        assert files == {"video": InputFile(clip)}

    def test_string_goes_to_params(self) -> None:
        params, files = {}, {}
        resolve_attachment("video", "https://example.com/clip.mp4", params, files)
        assert params == {"video": "https://example.com/clip.mp4"}
        assert files == {}

    def test_none_ignored(self) -> None:
        params, files = {}, {}
        resolve_attachment("thumb", None, params, files)
        assert params == {} and files == {}

    def test_wrong_type(self) -> None:
        with pytest.raises(AttachmentTypeError) as exc_info:
            resolve_attachment("video", b"raw bytes", {}, {})
        assert exc_info.value.field == "video"
        assert "'video'" in str(exc_info.value)

    def test_file_only_rejects_string(self) -> None:
        with pytest.raises(AttachmentTypeError, match="must be a local file"):
            resolve_attachment("certificate", "file_id", {}, {}, allow_reference=False)


# ── InputMedia attachments ───────────────────────────────────────────────────


class TestAttachMedia:
    """Validate ``attach://`` rewriting of media descriptors."""

    def test_local_media_and_thumb(self, clip: Path, tmp_path) -> None:
        thumb = tmp_path / "t.jpg"
        thumb.write_bytes(b"t")
        files = {}
        original = InputMediaVideo(media=clip, thumb=thumb)

        attached = attach_media(original, files)

        assert attached.media == "attach://attach0"
        assert attached.thumb == "attach://attach1"
        assert files == {"attach0": InputFile(clip), "attach1": InputFile(thumb)}
        assert original.media == clip

    def test_remote_media_untouched(self) -> None:
        files = {}
        media = InputMediaVideo(media="file_id")
        assert attach_media(media, files) is media
        assert files == {}

    def test_names_continue_across_items(self, clip: Path) -> None:
        files = {"attach0": InputFile(clip)}
        attached = attach_media(InputMediaVideo(media=clip), files)
        assert attached.media == "attach://attach1"


# ── open_parts ───────────────────────────────────────────────────────────────


class TestOpenParts:
    """Validate multipart part construction."""

    def test_handles_closed_with_stack(self, clip: Path) -> None:
        with contextlib.ExitStack() as stack:
            parts = open_parts({"video": InputFile(clip)}, stack)
            name, handle = parts["video"]
            assert name == "clip.mp4"
            assert handle.read() == b"0123456789"
        assert handle.closed
