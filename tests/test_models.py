"""Tests for the pydantic Bot API models."""

import json
import sys
import os
from pathlib import Path

import pytest

# Ensure the project root is importable.
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from teleclient.files import InputFile
from teleclient.models import (
    CallbackQuery,
    Chat,
    ChatPermissions,
    ForceReply,
    InlineKeyboardButton,
    InlineKeyboardMarkup,
    InlineQueryResultCachedSticker,
    InlineQueryResultPhoto,
    InputMediaDocument,
    InputMediaPhoto,
    Message,
    PassportElementErrorDataField,
    Poll,
    ReplyKeyboardRemove,
    Update,
    User,
    WebhookInfo,
)
from pydantic import ValidationError


# ── User ─────────────────────────────────────────────────────────────────────


class TestUserModel:
    """Validate the User schema."""

    def test_minimal_user(self) -> None:
        u = User(id=42, is_bot=False, first_name="Ada")
        assert u.id == 42
        assert u.last_name is None
        assert u.username is None

    def test_missing_required_raises(self) -> None:
        with pytest.raises(ValidationError):
            User(id=1, is_bot=False)  # missing first_name

    def test_unknown_keys_ignored(self) -> None:
        """Fields added by newer API versions must not break decoding."""
        u = User.from_json({"id": 1, "is_bot": False, "first_name": "Ada", "is_premium": True})
        assert not hasattr(u, "is_premium")


# ── Message / from alias ─────────────────────────────────────────────────────


class TestMessageModel:
    """Validate the ``from`` alias and nested decoding."""

    RAW = {
        "message_id": 10,
        "date": 1600000000,
        "chat": {"id": -100, "type": "supergroup", "title": "Group"},
        "from": {"id": 7, "is_bot": False, "first_name": "Bob"},
        "text": "/start",
        "entities": [{"type": "bot_command", "offset": 0, "length": 6}],
        "reply_to_message": {"message_id": 9, "date": 1600000000, "chat": {"id": -100, "type": "supergroup"}},
    }

    def test_from_alias_decodes(self) -> None:
        msg = Message.from_json(self.RAW)
        assert msg.from_field.first_name == "Bob"
        assert msg.chat.title == "Group"
        assert msg.entities[0].type == "bot_command"
        assert msg.reply_to_message.message_id == 9

    def test_from_json_string(self) -> None:
        msg = Message.from_json(json.dumps(self.RAW))
        assert msg.message_id == 10

    def test_to_json_uses_alias_and_drops_none(self) -> None:
        msg = Message(
            message_id=1,
            date=0,
            chat=Chat(id=1, type="private"),
            from_field=User(id=2, is_bot=False, first_name="A"),
        )
        data = json.loads(msg.to_json())
        assert data["from"] == {"id": 2, "is_bot": False, "first_name": "A"}
        assert "from_field" not in data
        assert "text" not in data

    def test_callback_query_requires_sender(self) -> None:
        with pytest.raises(ValidationError):
            CallbackQuery.from_json({"id": "1", "chat_instance": "c"})


# ── Updates ──────────────────────────────────────────────────────────────────


class TestUpdateModel:
    """Validate Update and related envelopes."""

    def test_callback_update(self) -> None:
        upd = Update.from_json(
            {
                "update_id": 3,
                "callback_query": {
                    "id": "cb",
                    "from": {"id": 1, "is_bot": False, "first_name": "A"},
                    "chat_instance": "x",
                    "data": "approve:1",
                },
            }
        )
        assert upd.message is None
        assert upd.callback_query.data == "approve:1"

    def test_webhook_info(self) -> None:
        info = WebhookInfo.from_json({"url": "", "has_custom_certificate": False, "pending_update_count": 0})
        assert info.url == ""

    def test_poll(self) -> None:
        poll = Poll.from_json(
            {
                "id": "p",
                "question": "?",
                "options": [{"text": "a", "voter_count": 2}],
                "total_voter_count": 2,
                "is_closed": True,
                "is_anonymous": True,
                "type": "regular",
                "allows_multiple_answers": False,
            }
        )
        assert poll.options[0].voter_count == 2


# ── Keyboards ────────────────────────────────────────────────────────────────


class TestKeyboards:
    """Validate reply markup encoding."""

    def test_inline_keyboard(self) -> None:
        markup = InlineKeyboardMarkup(
            inline_keyboard=[[InlineKeyboardButton(text="Yes", callback_data="y")]]
        )
        assert markup.to_dict() == {"inline_keyboard": [[{"text": "Yes", "callback_data": "y"}]]}

    def test_markup_json_round_trip(self) -> None:
        markup = InlineKeyboardMarkup(
            inline_keyboard=[
                [InlineKeyboardButton(text="Site", url="https://example.com")],
                [InlineKeyboardButton(text="A", callback_data="a"), InlineKeyboardButton(text="B", pay=True)],
            ]
        )
        assert InlineKeyboardMarkup.from_json(markup.to_json()) == markup

    def test_flag_markups_default_true(self) -> None:
        assert ReplyKeyboardRemove().to_dict() == {"remove_keyboard": True}
        assert ForceReply(selective=True).to_dict() == {"force_reply": True, "selective": True}

    def test_permissions_drop_unset(self) -> None:
        assert ChatPermissions(can_send_messages=True).to_dict() == {"can_send_messages": True}


# ── Tagged families ──────────────────────────────────────────────────────────


class TestTaggedFamilies:
    """``type`` / ``source`` tags are filled in automatically."""

    def test_input_media_type(self) -> None:
        assert InputMediaPhoto(media="id").type == "photo"
        assert InputMediaDocument(media="id").type == "document"

    def test_input_media_accepts_local_file(self, tmp_path) -> None:
        media = InputMediaPhoto(media=tmp_path / "a.jpg")
        assert isinstance(media.media, Path)
        media = InputMediaPhoto(media=InputFile(tmp_path / "a.jpg"))
        assert isinstance(media.media, InputFile)

    def test_inline_results(self) -> None:
        photo = InlineQueryResultPhoto(id="1", photo_url="https://x/p.jpg", thumb_url="https://x/t.jpg")
        assert photo.to_dict()["type"] == "photo"
        assert InlineQueryResultCachedSticker(id="2", sticker_file_id="s").to_dict() == {
            "type": "sticker",
            "id": "2",
            "sticker_file_id": "s",
        }

    def test_passport_error_source(self) -> None:
        err = PassportElementErrorDataField(
            type="passport", message="bad", field_name="document_no", data_hash="h"
        )
        assert err.to_dict()["source"] == "data"
