"""TelegramClient -- one method per Telegram Bot API endpoint.

Arguments are plain Python values and :mod:`teleclient.models` objects.
Optional arguments default to ``None`` and are left out of the request.
Results are decoded into the matching pydantic model.  Blocking HTTP goes
through :class:`~teleclient.transport.HttpTransport`; see
:mod:`teleclient.aio` for the coroutine flavour.
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Optional, Sequence, Union

from teleclient.config import DEFAULT_API_HOST, DEFAULT_TIMEOUT, load_settings
from teleclient.exceptions import NotOwnedMessageError, TelegramArgumentError
from teleclient.files import Attachment, InputFile, attach_media, resolve_attachment
from teleclient.logger import TeleclientLogger
from teleclient.models import (
    BotCommand,
    Chat,
    ChatMember,
    ChatPermissions,
    File,
    GameHighScore,
    InlineKeyboardMarkup,
    InlineQueryResult,
    InputMedia,
    LabeledPrice,
    MaskPosition,
    Message,
    MessageEntity,
    MessageId,
    PassportElementError,
    Poll,
    ReplyMarkup,
    ShippingOption,
    StickerSet,
    TelegramObject,
    Update,
    User,
    UserProfilePhotos,
    WebhookInfo,
)
from teleclient.transport import HttpTransport

ChatId = Union[int, str]


# ── Parameter encoding ───────────────────────────────────────────────────────


def _plain(value: Any) -> Any:
    if isinstance(value, TelegramObject):
        return value.to_dict()
    if isinstance(value, (list, tuple)):
        return [_plain(item) for item in value]
    if isinstance(value, dict):
        return {key: _plain(item) for key, item in value.items() if item is not None}
    return value


def _encode(value: Any) -> str:
    """Encode one parameter value as a form field."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, TelegramObject):
        return value.to_json()
    return json.dumps(_plain(value), separators=(",", ":"), ensure_ascii=False)


def _form(**params: Any) -> Dict[str, str]:
    """Build a form from keyword arguments, dropping every ``None``."""
    return {key: _encode(value) for key, value in params.items() if value is not None}


class TelegramClient:
    """Blocking client for the Telegram Bot API.

    Each public method maps to exactly one API method.  Local validation
    failures raise :class:`TelegramArgumentError` before any request is made;
    API failures raise :class:`APIException`; transport failures surface as
    ``requests`` exceptions.

    Usage::

        client = TelegramClient.from_env()
        me = client.get_me()
        client.send_message(chat_id=42, text=f"Hi, I am {me.first_name}")
    """

    _DEFAULT_TIMEOUT: int = DEFAULT_TIMEOUT

    def __init__(
        self,
        token: str,
        api_host: str = DEFAULT_API_HOST,
        timeout: int = _DEFAULT_TIMEOUT,
        transport: Optional[HttpTransport] = None,
    ) -> None:
        """Create a client for the bot identified by *token*.

        Args:
            token: Bot token issued by @BotFather.
            api_host: Bot API host, e.g. a self-hosted Bot API server.
            timeout: Default request timeout in seconds.
            transport: Transport to use; a :class:`HttpTransport` by default.
        """
        if not token:
            raise TelegramArgumentError("A bot token is required")
        self._token = token
        self._api_host = api_host.rstrip("/")
        self._timeout = timeout
        self._transport = transport or HttpTransport(timeout=timeout)

    @classmethod
    def from_env(cls) -> "TelegramClient":
        """Build a client from ``BOT_TOKEN`` and the other environment settings.

        ``LOG_LEVEL`` / ``LOG_DIR`` are applied to the shared logger even when
        it already exists.

        Raises:
            TelegramArgumentError: If ``BOT_TOKEN`` is not set.
        """
        settings = load_settings()
        logger = TeleclientLogger.configure(settings.log_level, settings.log_dir)
        if not settings.bot_token:
            logger.error("BOT_TOKEN is NOT set -- cannot build a client")
            raise TelegramArgumentError("BOT_TOKEN is not set")
        logger.debug("Client configured", extra={"api_host": settings.api_host, "timeout": settings.timeout})
        return cls(settings.bot_token, api_host=settings.api_host, timeout=settings.timeout)

    # ------------------------------------------------------------------
    #  Internal helpers
    # ------------------------------------------------------------------

    def _method_url(self, method: str) -> str:
        return f"https://{self._api_host}/bot{self._token}/{method}"

    def _call(
        self,
        method: str,
        params: Optional[Dict[str, str]] = None,
        files: Optional[Dict[str, InputFile]] = None,
        use_get: bool = False,
        timeout: Optional[float] = None,
    ) -> Any:
        """Send *method* and return the raw ``result`` value.

        Multipart is used whenever *files* is non-empty.
        """
        url = self._method_url(method)
        if use_get:
            return self._transport.get(url, params, timeout=timeout)
        if files:
            return self._transport.post_multipart(url, params, files, timeout=timeout)
        return self._transport.post(url, params, timeout=timeout)

    def _send(self, method: str, params: Dict[str, str], files: Optional[Dict[str, InputFile]] = None) -> Message:
        return Message.from_json(self._call(method, params, files))

    @staticmethod
    def _require_message_target(
        chat_id: Optional[ChatId], message_id: Optional[int], inline_message_id: Optional[str]
    ) -> None:
        if inline_message_id is None and (chat_id is None or message_id is None):
            raise TelegramArgumentError("Require either 'chat_id' and 'message_id', or 'inline_message_id'")

    @staticmethod
    def _edited(method: str, result: Any) -> Message:
        # ``true`` means the edit went through on a message this bot did not send
        if result is True:
            raise NotOwnedMessageError(method)
        return Message.from_json(result)

    @staticmethod
    def _sticker_files(
        png_sticker: Optional[Attachment], tgs_sticker: Optional[Any], params: Dict[str, str]
    ) -> Dict[str, InputFile]:
        if (png_sticker is None) == (tgs_sticker is None):
            raise TelegramArgumentError("Exactly one of 'png_sticker' and 'tgs_sticker' is required")
        files: Dict[str, InputFile] = {}
        resolve_attachment("png_sticker", png_sticker, params, files)
        resolve_attachment("tgs_sticker", tgs_sticker, params, files, allow_reference=False)
        return files

    # ------------------------------------------------------------------
    #  Getting updates
    # ------------------------------------------------------------------

    def get_updates(
        self,
        offset: Optional[int] = None,
        limit: Optional[int] = None,
        timeout: Optional[int] = None,
        allowed_updates: Optional[List[str]] = None,
    ) -> List[Update]:
        """Receive incoming updates by long polling.

        The HTTP read timeout is *timeout* plus the client's own timeout, so
        the server-side poll can run its full length.
        """
        params = _form(offset=offset, limit=limit, timeout=timeout, allowed_updates=allowed_updates)
        read_timeout = (timeout or 0) + self._timeout
        result = self._call("getUpdates", params, use_get=True, timeout=read_timeout)
        return [Update.from_json(item) for item in result]

    def set_webhook(
        self,
        url: str,
        certificate: Optional[Union[InputFile, Any]] = None,
        ip_address: Optional[str] = None,
        max_connections: Optional[int] = None,
        allowed_updates: Optional[List[str]] = None,
        drop_pending_updates: Optional[bool] = None,
    ) -> bool:
        """Register *url* as the webhook. *certificate* must be a local file."""
        params = _form(
            url=url,
            ip_address=ip_address,
            max_connections=max_connections,
            allowed_updates=allowed_updates,
            drop_pending_updates=drop_pending_updates,
        )
        files: Dict[str, InputFile] = {}
        resolve_attachment("certificate", certificate, params, files, allow_reference=False)
        return self._call("setWebhook", params, files)

    def delete_webhook(self, drop_pending_updates: Optional[bool] = None) -> bool:
        return self._call("deleteWebhook", _form(drop_pending_updates=drop_pending_updates), use_get=True)

    def get_webhook_info(self) -> WebhookInfo:
        return WebhookInfo.from_json(self._call("getWebhookInfo", use_get=True))

    # ------------------------------------------------------------------
    #  Bot
    # ------------------------------------------------------------------

    def get_me(self) -> User:
        """Return the bot's own :class:`User`; a cheap way to check the token."""
        return User.from_json(self._call("getMe", use_get=True))

    def log_out(self) -> bool:
        return self._call("logOut")

    def close(self) -> bool:
        return self._call("close")

    def set_my_commands(self, commands: Sequence[BotCommand]) -> bool:
        return self._call("setMyCommands", _form(commands=list(commands)))

    def get_my_commands(self) -> List[BotCommand]:
        return [BotCommand.from_json(item) for item in self._call("getMyCommands")]

    # ------------------------------------------------------------------
    #  Sending messages
    # ------------------------------------------------------------------

    def send_message(
        self,
        chat_id: ChatId,
        text: str,
        parse_mode: Optional[str] = None,
        entities: Optional[List[MessageEntity]] = None,
        disable_web_page_preview: Optional[bool] = None,
        disable_notification: Optional[bool] = None,
        reply_to_message_id: Optional[int] = None,
        allow_sending_without_reply: Optional[bool] = None,
        reply_markup: Optional[ReplyMarkup] = None,
    ) -> Message:
        """Send a text message."""
        params = _form(
            chat_id=chat_id,
            text=text,
            parse_mode=parse_mode,
            entities=entities,
            disable_web_page_preview=disable_web_page_preview,
            disable_notification=disable_notification,
            reply_to_message_id=reply_to_message_id,
            allow_sending_without_reply=allow_sending_without_reply,
            reply_markup=reply_markup,
        )
        return self._send("sendMessage", params)

    def forward_message(
        self,
        chat_id: ChatId,
        from_chat_id: ChatId,
        message_id: int,
        disable_notification: Optional[bool] = None,
    ) -> Message:
        params = _form(
            chat_id=chat_id,
            from_chat_id=from_chat_id,
            message_id=message_id,
            disable_notification=disable_notification,
        )
        return self._send("forwardMessage", params)

    def copy_message(
        self,
        chat_id: ChatId,
        from_chat_id: ChatId,
        message_id: int,
        caption: Optional[str] = None,
        parse_mode: Optional[str] = None,
        caption_entities: Optional[List[MessageEntity]] = None,
        disable_notification: Optional[bool] = None,
        reply_to_message_id: Optional[int] = None,
        allow_sending_without_reply: Optional[bool] = None,
        reply_markup: Optional[ReplyMarkup] = None,
    ) -> MessageId:
        """Copy a message without a link back to the original. Returns only the new id."""
        params = _form(
            chat_id=chat_id,
            from_chat_id=from_chat_id,
            message_id=message_id,
            caption=caption,
            parse_mode=parse_mode,
            caption_entities=caption_entities,
            disable_notification=disable_notification,
            reply_to_message_id=reply_to_message_id,
            allow_sending_without_reply=allow_sending_without_reply,
            reply_markup=reply_markup,
        )
        return MessageId.from_json(self._call("copyMessage", params))

    def send_photo(
        self,
        chat_id: ChatId,
        photo: Attachment,
        caption: Optional[str] = None,
        parse_mode: Optional[str] = None,
        caption_entities: Optional[List[MessageEntity]] = None,
        disable_notification: Optional[bool] = None,
        reply_to_message_id: Optional[int] = None,
        allow_sending_without_reply: Optional[bool] = None,
        reply_markup: Optional[ReplyMarkup] = None,
    ) -> Message:
        """Send a photo.

        *photo* is either a local file (:class:`InputFile` or a path), which is
        uploaded, or a string ``file_id`` / HTTP URL.
        """
        params = _form(
            chat_id=chat_id,
            caption=caption,
            parse_mode=parse_mode,
            caption_entities=caption_entities,
            disable_notification=disable_notification,
            reply_to_message_id=reply_to_message_id,
            allow_sending_without_reply=allow_sending_without_reply,
            reply_markup=reply_markup,
        )
        files: Dict[str, InputFile] = {}
        resolve_attachment("photo", photo, params, files)
        return self._send("sendPhoto", params, files)

    def send_audio(
        self,
        chat_id: ChatId,
        audio: Attachment,
        caption: Optional[str] = None,
        parse_mode: Optional[str] = None,
        caption_entities: Optional[List[MessageEntity]] = None,
        duration: Optional[int] = None,
        performer: Optional[str] = None,
        title: Optional[str] = None,
        thumb: Optional[Attachment] = None,
        disable_notification: Optional[bool] = None,
        reply_to_message_id: Optional[int] = None,
        allow_sending_without_reply: Optional[bool] = None,
        reply_markup: Optional[ReplyMarkup] = None,
    ) -> Message:
        """Send an MP3 / M4A file to be shown in the music player."""
        params = _form(
            chat_id=chat_id,
            caption=caption,
            parse_mode=parse_mode,
            caption_entities=caption_entities,
            duration=duration,
            performer=performer,
            title=title,
            disable_notification=disable_notification,
            reply_to_message_id=reply_to_message_id,
            allow_sending_without_reply=allow_sending_without_reply,
            reply_markup=reply_markup,
        )
        files: Dict[str, InputFile] = {}
        resolve_attachment("audio", audio, params, files)
        resolve_attachment("thumb", thumb, params, files)
        return self._send("sendAudio", params, files)

    def send_document(
        self,
        chat_id: ChatId,
        document: Attachment,
        thumb: Optional[Attachment] = None,
        caption: Optional[str] = None,
        parse_mode: Optional[str] = None,
        caption_entities: Optional[List[MessageEntity]] = None,
        disable_content_type_detection: Optional[bool] = None,
        disable_notification: Optional[bool] = None,
        reply_to_message_id: Optional[int] = None,
        allow_sending_without_reply: Optional[bool] = None,
        reply_markup: Optional[ReplyMarkup] = None,
    ) -> Message:
        params = _form(
            chat_id=chat_id,
            caption=caption,
            parse_mode=parse_mode,
            caption_entities=caption_entities,
            disable_content_type_detection=disable_content_type_detection,
            disable_notification=disable_notification,
            reply_to_message_id=reply_to_message_id,
            allow_sending_without_reply=allow_sending_without_reply,
            reply_markup=reply_markup,
        )
        files: Dict[str, InputFile] = {}
        resolve_attachment("document", document, params, files)
        resolve_attachment("thumb", thumb, params, files)
        return self._send("sendDocument", params, files)

    def send_video(
        self,
        chat_id: ChatId,
        video: Attachment,
        duration: Optional[int] = None,
        width: Optional[int] = None,
        height: Optional[int] = None,
        thumb: Optional[Attachment] = None,
        caption: Optional[str] = None,
        parse_mode: Optional[str] = None,
        caption_entities: Optional[List[MessageEntity]] = None,
        supports_streaming: Optional[bool] = None,
        disable_notification: Optional[bool] = None,
        reply_to_message_id: Optional[int] = None,
        allow_sending_without_reply: Optional[bool] = None,
        reply_markup: Optional[ReplyMarkup] = None,
    ) -> Message:
        params = _form(
            chat_id=chat_id,
            duration=duration,
            width=width,
            height=height,
            caption=caption,
            parse_mode=parse_mode,
            caption_entities=caption_entities,
            supports_streaming=supports_streaming,
            disable_notification=disable_notification,
            reply_to_message_id=reply_to_message_id,
            allow_sending_without_reply=allow_sending_without_reply,
            reply_markup=reply_markup,
        )
        files: Dict[str, InputFile] = {}
        resolve_attachment("video", video, params, files)
        resolve_attachment("thumb", thumb, params, files)
        return self._send("sendVideo", params, files)

    def send_animation(
        self,
        chat_id: ChatId,
        animation: Attachment,
        duration: Optional[int] = None,
        width: Optional[int] = None,
        height: Optional[int] = None,
        thumb: Optional[Attachment] = None,
        caption: Optional[str] = None,
        parse_mode: Optional[str] = None,
        caption_entities: Optional[List[MessageEntity]] = None,
        disable_notification: Optional[bool] = None,
        reply_to_message_id: Optional[int] = None,
        allow_sending_without_reply: Optional[bool] = None,
        reply_markup: Optional[ReplyMarkup] = None,
    ) -> Message:
        """Send a GIF or a soundless H.264 / MPEG-4 AVC video."""
        params = _form(
            chat_id=chat_id,
            duration=duration,
            width=width,
            height=height,
            caption=caption,
            parse_mode=parse_mode,
            caption_entities=caption_entities,
            disable_notification=disable_notification,
            reply_to_message_id=reply_to_message_id,
            allow_sending_without_reply=allow_sending_without_reply,
            reply_markup=reply_markup,
        )
        files: Dict[str, InputFile] = {}
        resolve_attachment("animation", animation, params, files)
        resolve_attachment("thumb", thumb, params, files)
        return self._send("sendAnimation", params, files)

    def send_voice(
        self,
        chat_id: ChatId,
        voice: Attachment,
        caption: Optional[str] = None,
        parse_mode: Optional[str] = None,
        caption_entities: Optional[List[MessageEntity]] = None,
        duration: Optional[int] = None,
        disable_notification: Optional[bool] = None,
        reply_to_message_id: Optional[int] = None,
        allow_sending_without_reply: Optional[bool] = None,
        reply_markup: Optional[ReplyMarkup] = None,
    ) -> Message:
        """Send an OGG/OPUS voice message."""
        params = _form(
            chat_id=chat_id,
            caption=caption,
            parse_mode=parse_mode,
            caption_entities=caption_entities,
            duration=duration,
            disable_notification=disable_notification,
            reply_to_message_id=reply_to_message_id,
            allow_sending_without_reply=allow_sending_without_reply,
            reply_markup=reply_markup,
        )
        files: Dict[str, InputFile] = {}
        resolve_attachment("voice", voice, params, files)
        return self._send("sendVoice", params, files)

    def send_video_note(
        self,
        chat_id: ChatId,
        video_note: Attachment,
        duration: Optional[int] = None,
        length: Optional[int] = None,
        thumb: Optional[Attachment] = None,
        disable_notification: Optional[bool] = None,
        reply_to_message_id: Optional[int] = None,
        allow_sending_without_reply: Optional[bool] = None,
        reply_markup: Optional[ReplyMarkup] = None,
    ) -> Message:
        params = _form(
            chat_id=chat_id,
            duration=duration,
            length=length,
            disable_notification=disable_notification,
            reply_to_message_id=reply_to_message_id,
            allow_sending_without_reply=allow_sending_without_reply,
            reply_markup=reply_markup,
        )
        files: Dict[str, InputFile] = {}
        resolve_attachment("video_note", video_note, params, files)
        resolve_attachment("thumb", thumb, params, files)
        return self._send("sendVideoNote", params, files)

    def send_media_group(
        self,
        chat_id: ChatId,
        media: Sequence[InputMedia],
        disable_notification: Optional[bool] = None,
        reply_to_message_id: Optional[int] = None,
        allow_sending_without_reply: Optional[bool] = None,
    ) -> List[Message]:
        """Send 2-10 photos / videos (or documents, or audios) as an album.

        Local files in ``media`` / ``thumb`` are uploaded as extra parts and
        referenced with ``attach://``.
        """
        files: Dict[str, InputFile] = {}
        attached = [attach_media(item, files) for item in media]
        params = _form(
            chat_id=chat_id,
            media=attached,
            disable_notification=disable_notification,
            reply_to_message_id=reply_to_message_id,
            allow_sending_without_reply=allow_sending_without_reply,
        )
        result = self._call("sendMediaGroup", params, files)
        return [Message.from_json(item) for item in result]

    def send_location(
        self,
        chat_id: ChatId,
        latitude: float,
        longitude: float,
        horizontal_accuracy: Optional[float] = None,
        live_period: Optional[int] = None,
        heading: Optional[int] = None,
        proximity_alert_radius: Optional[int] = None,
        disable_notification: Optional[bool] = None,
        reply_to_message_id: Optional[int] = None,
        allow_sending_without_reply: Optional[bool] = None,
        reply_markup: Optional[ReplyMarkup] = None,
    ) -> Message:
        """Send a point on the map; with *live_period* it becomes a live location."""
        params = _form(
            chat_id=chat_id,
            latitude=latitude,
            longitude=longitude,
            horizontal_accuracy=horizontal_accuracy,
            live_period=live_period,
            heading=heading,
            proximity_alert_radius=proximity_alert_radius,
            disable_notification=disable_notification,
            reply_to_message_id=reply_to_message_id,
            allow_sending_without_reply=allow_sending_without_reply,
            reply_markup=reply_markup,
        )
        return self._send("sendLocation", params)

    def edit_message_live_location(
        self,
        latitude: float,
        longitude: float,
        chat_id: Optional[ChatId] = None,
        message_id: Optional[int] = None,
        inline_message_id: Optional[str] = None,
        horizontal_accuracy: Optional[float] = None,
        heading: Optional[int] = None,
        proximity_alert_radius: Optional[int] = None,
        reply_markup: Optional[InlineKeyboardMarkup] = None,
    ) -> Message:
        self._require_message_target(chat_id, message_id, inline_message_id)
        params = _form(
            chat_id=chat_id,
            message_id=message_id,
            inline_message_id=inline_message_id,
            latitude=latitude,
            longitude=longitude,
            horizontal_accuracy=horizontal_accuracy,
            heading=heading,
            proximity_alert_radius=proximity_alert_radius,
            reply_markup=reply_markup,
        )
        return self._edited("editMessageLiveLocation", self._call("editMessageLiveLocation", params))

    def stop_message_live_location(
        self,
        chat_id: Optional[ChatId] = None,
        message_id: Optional[int] = None,
        inline_message_id: Optional[str] = None,
        reply_markup: Optional[InlineKeyboardMarkup] = None,
    ) -> Message:
        self._require_message_target(chat_id, message_id, inline_message_id)
        params = _form(
            chat_id=chat_id,
            message_id=message_id,
            inline_message_id=inline_message_id,
            reply_markup=reply_markup,
        )
        return self._edited("stopMessageLiveLocation", self._call("stopMessageLiveLocation", params))

    def send_venue(
        self,
        chat_id: ChatId,
        latitude: float,
        longitude: float,
        title: str,
        address: str,
        foursquare_id: Optional[str] = None,
        foursquare_type: Optional[str] = None,
        google_place_id: Optional[str] = None,
        google_place_type: Optional[str] = None,
        disable_notification: Optional[bool] = None,
        reply_to_message_id: Optional[int] = None,
        allow_sending_without_reply: Optional[bool] = None,
        reply_markup: Optional[ReplyMarkup] = None,
    ) -> Message:
        params = _form(
            chat_id=chat_id,
            latitude=latitude,
            longitude=longitude,
            title=title,
            address=address,
            foursquare_id=foursquare_id,
            foursquare_type=foursquare_type,
            google_place_id=google_place_id,
            google_place_type=google_place_type,
            disable_notification=disable_notification,
            reply_to_message_id=reply_to_message_id,
            allow_sending_without_reply=allow_sending_without_reply,
            reply_markup=reply_markup,
        )
        return self._send("sendVenue", params)

    def send_contact(
        self,
        chat_id: ChatId,
        phone_number: str,
        first_name: str,
        last_name: Optional[str] = None,
        vcard: Optional[str] = None,
        disable_notification: Optional[bool] = None,
        reply_to_message_id: Optional[int] = None,
        allow_sending_without_reply: Optional[bool] = None,
        reply_markup: Optional[ReplyMarkup] = None,
    ) -> Message:
        params = _form(
            chat_id=chat_id,
            phone_number=phone_number,
            first_name=first_name,
            last_name=last_name,
            vcard=vcard,
            disable_notification=disable_notification,
            reply_to_message_id=reply_to_message_id,
            allow_sending_without_reply=allow_sending_without_reply,
            reply_markup=reply_markup,
        )
        return self._send("sendContact", params)

    def send_poll(
        self,
        chat_id: ChatId,
        question: str,
        options: Sequence[str],
        is_anonymous: Optional[bool] = None,
        type: Optional[str] = None,
        allows_multiple_answers: Optional[bool] = None,
        correct_option_id: Optional[int] = None,
        explanation: Optional[str] = None,
        explanation_parse_mode: Optional[str] = None,
        explanation_entities: Optional[List[MessageEntity]] = None,
        open_period: Optional[int] = None,
        close_date: Optional[int] = None,
        is_closed: Optional[bool] = None,
        disable_notification: Optional[bool] = None,
        reply_to_message_id: Optional[int] = None,
        allow_sending_without_reply: Optional[bool] = None,
        reply_markup: Optional[ReplyMarkup] = None,
    ) -> Message:
        """Send a native poll; *options* is sent as a JSON array of strings."""
        params = _form(
            chat_id=chat_id,
            question=question,
            options=list(options),
            is_anonymous=is_anonymous,
            type=type,
            allows_multiple_answers=allows_multiple_answers,
            correct_option_id=correct_option_id,
            explanation=explanation,
            explanation_parse_mode=explanation_parse_mode,
            explanation_entities=explanation_entities,
            open_period=open_period,
            close_date=close_date,
            is_closed=is_closed,
            disable_notification=disable_notification,
            reply_to_message_id=reply_to_message_id,
            allow_sending_without_reply=allow_sending_without_reply,
            reply_markup=reply_markup,
        )
        return self._send("sendPoll", params)

    def send_dice(
        self,
        chat_id: ChatId,
        emoji: Optional[str] = None,
        disable_notification: Optional[bool] = None,
        reply_to_message_id: Optional[int] = None,
        allow_sending_without_reply: Optional[bool] = None,
        reply_markup: Optional[ReplyMarkup] = None,
    ) -> Message:
        params = _form(
            chat_id=chat_id,
            emoji=emoji,
            disable_notification=disable_notification,
            reply_to_message_id=reply_to_message_id,
            allow_sending_without_reply=allow_sending_without_reply,
            reply_markup=reply_markup,
        )
        return self._send("sendDice", params)

    def send_chat_action(self, chat_id: ChatId, action: str) -> bool:
        """Show a status such as ``typing`` or ``upload_photo`` for up to 5 seconds."""
        return self._call("sendChatAction", _form(chat_id=chat_id, action=action))

    # ------------------------------------------------------------------
    #  Users and files
    # ------------------------------------------------------------------

    def get_user_profile_photos(
        self, user_id: int, offset: Optional[int] = None, limit: Optional[int] = None
    ) -> UserProfilePhotos:
        params = _form(user_id=user_id, offset=offset, limit=limit)
        return UserProfilePhotos.from_json(self._call("getUserProfilePhotos", params))

    def get_file(self, file_id: str) -> File:
        """Prepare a file for download; fetch it with :meth:`download_file`."""
        return File.from_json(self._call("getFile", _form(file_id=file_id)))

    def file_url(self, file_path: str) -> str:
        """Return the download URL for a ``File.file_path``. The URL embeds the token."""
        return f"https://{self._api_host}/file/bot{self._token}/{file_path.lstrip('/')}"

    def download_file(self, file: Union[File, str], timeout: Optional[float] = None) -> bytes:
        """Download the content of *file* (a :class:`File` or its ``file_path``).

        Raises:
            TelegramArgumentError: If a :class:`File` without ``file_path`` is given.
            requests.HTTPError: If the HTTP response status is not 2xx.
        """
        file_path = file.file_path if isinstance(file, File) else file
        if not file_path:
            raise TelegramArgumentError("File has no file_path; call get_file first")
        return self._transport.download(self.file_url(file_path), timeout=timeout)

    # ------------------------------------------------------------------
    #  Chat administration
    # ------------------------------------------------------------------

    def kick_chat_member(self, chat_id: ChatId, user_id: int, until_date: Optional[int] = None) -> bool:
        return self._call("kickChatMember", _form(chat_id=chat_id, user_id=user_id, until_date=until_date))

    def unban_chat_member(self, chat_id: ChatId, user_id: int, only_if_banned: Optional[bool] = None) -> bool:
        params = _form(chat_id=chat_id, user_id=user_id, only_if_banned=only_if_banned)
        return self._call("unbanChatMember", params)

    def restrict_chat_member(
        self,
        chat_id: ChatId,
        user_id: int,
        permissions: ChatPermissions,
        until_date: Optional[int] = None,
    ) -> bool:
        """Restrict a supergroup member to *permissions*, optionally until *until_date*."""
        params = _form(chat_id=chat_id, user_id=user_id, permissions=permissions, until_date=until_date)
        return self._call("restrictChatMember", params)

    def promote_chat_member(
        self,
        chat_id: ChatId,
        user_id: int,
        is_anonymous: Optional[bool] = None,
        can_change_info: Optional[bool] = None,
        can_post_messages: Optional[bool] = None,
        can_edit_messages: Optional[bool] = None,
        can_delete_messages: Optional[bool] = None,
        can_invite_users: Optional[bool] = None,
        can_restrict_members: Optional[bool] = None,
        can_pin_messages: Optional[bool] = None,
        can_promote_members: Optional[bool] = None,
    ) -> bool:
        """Promote or demote a member. Pass ``False`` for every right to demote."""
        params = _form(
            chat_id=chat_id,
            user_id=user_id,
            is_anonymous=is_anonymous,
            can_change_info=can_change_info,
            can_post_messages=can_post_messages,
            can_edit_messages=can_edit_messages,
            can_delete_messages=can_delete_messages,
            can_invite_users=can_invite_users,
            can_restrict_members=can_restrict_members,
            can_pin_messages=can_pin_messages,
            can_promote_members=can_promote_members,
        )
        return self._call("promoteChatMember", params)

    def set_chat_administrator_custom_title(self, chat_id: ChatId, user_id: int, custom_title: str) -> bool:
        params = _form(chat_id=chat_id, user_id=user_id, custom_title=custom_title)
        return self._call("setChatAdministratorCustomTitle", params)

    def set_chat_permissions(self, chat_id: ChatId, permissions: ChatPermissions) -> bool:
        return self._call("setChatPermissions", _form(chat_id=chat_id, permissions=permissions))

    def export_chat_invite_link(self, chat_id: ChatId) -> str:
        """Generate a new primary invite link; the previous one is revoked."""
        return self._call("exportChatInviteLink", _form(chat_id=chat_id))

    def set_chat_photo(self, chat_id: ChatId, photo: Union[InputFile, Any]) -> bool:
        """Set a new chat photo. *photo* must be a local file."""
        params = _form(chat_id=chat_id)
        files: Dict[str, InputFile] = {}
        resolve_attachment("photo", photo, params, files, allow_reference=False)
        return self._call("setChatPhoto", params, files)

    def delete_chat_photo(self, chat_id: ChatId) -> bool:
        return self._call("deleteChatPhoto", _form(chat_id=chat_id))

    def set_chat_title(self, chat_id: ChatId, title: str) -> bool:
        return self._call("setChatTitle", _form(chat_id=chat_id, title=title))

    def set_chat_description(self, chat_id: ChatId, description: Optional[str] = None) -> bool:
        return self._call("setChatDescription", _form(chat_id=chat_id, description=description))

    def pin_chat_message(
        self, chat_id: ChatId, message_id: int, disable_notification: Optional[bool] = None
    ) -> bool:
        params = _form(chat_id=chat_id, message_id=message_id, disable_notification=disable_notification)
        return self._call("pinChatMessage", params)

    def unpin_chat_message(self, chat_id: ChatId, message_id: Optional[int] = None) -> bool:
        """Unpin *message_id*, or the most recent pinned message when omitted."""
        return self._call("unpinChatMessage", _form(chat_id=chat_id, message_id=message_id))

    def unpin_all_chat_messages(self, chat_id: ChatId) -> bool:
        return self._call("unpinAllChatMessages", _form(chat_id=chat_id))

    def leave_chat(self, chat_id: ChatId) -> bool:
        return self._call("leaveChat", _form(chat_id=chat_id))

    def get_chat(self, chat_id: ChatId) -> Chat:
        return Chat.from_json(self._call("getChat", _form(chat_id=chat_id)))

    def get_chat_administrators(self, chat_id: ChatId) -> List[ChatMember]:
        """Return every administrator except other bots."""
        result = self._call("getChatAdministrators", _form(chat_id=chat_id))
        return [ChatMember.from_json(item) for item in result]

    def get_chat_members_count(self, chat_id: ChatId) -> int:
        return self._call("getChatMembersCount", _form(chat_id=chat_id))

    def get_chat_member(self, chat_id: ChatId, user_id: int) -> ChatMember:
        return ChatMember.from_json(self._call("getChatMember", _form(chat_id=chat_id, user_id=user_id)))

    def set_chat_sticker_set(self, chat_id: ChatId, sticker_set_name: str) -> bool:
        params = _form(chat_id=chat_id, sticker_set_name=sticker_set_name)
        return self._call("setChatStickerSet", params)

    def delete_chat_sticker_set(self, chat_id: ChatId) -> bool:
        return self._call("deleteChatStickerSet", _form(chat_id=chat_id))

    def answer_callback_query(
        self,
        callback_query_id: str,
        text: Optional[str] = None,
        show_alert: Optional[bool] = None,
        url: Optional[str] = None,
        cache_time: Optional[int] = None,
    ) -> bool:
        """Acknowledge a callback query so the client stops showing a spinner."""
        params = _form(
            callback_query_id=callback_query_id,
            text=text,
            show_alert=show_alert,
            url=url,
            cache_time=cache_time,
        )
        return self._call("answerCallbackQuery", params)

    # ------------------------------------------------------------------
    #  Updating messages
    # ------------------------------------------------------------------

    def edit_message_text(
        self,
        text: str,
        chat_id: Optional[ChatId] = None,
        message_id: Optional[int] = None,
        inline_message_id: Optional[str] = None,
        parse_mode: Optional[str] = None,
        entities: Optional[List[MessageEntity]] = None,
        disable_web_page_preview: Optional[bool] = None,
        reply_markup: Optional[InlineKeyboardMarkup] = None,
    ) -> Message:
        """Edit the text of a message.

        Target either ``chat_id`` + ``message_id`` or ``inline_message_id``.

        Raises:
            TelegramArgumentError: If neither target is complete.
            NotOwnedMessageError: If the API confirmed the edit with ``true``
                instead of returning the message (the edit was applied).
        """
        self._require_message_target(chat_id, message_id, inline_message_id)
        params = _form(
            chat_id=chat_id,
            message_id=message_id,
            inline_message_id=inline_message_id,
            text=text,
            parse_mode=parse_mode,
            entities=entities,
            disable_web_page_preview=disable_web_page_preview,
            reply_markup=reply_markup,
        )
        return self._edited("editMessageText", self._call("editMessageText", params))

    def edit_message_caption(
        self,
        chat_id: Optional[ChatId] = None,
        message_id: Optional[int] = None,
        inline_message_id: Optional[str] = None,
        caption: Optional[str] = None,
        parse_mode: Optional[str] = None,
        caption_entities: Optional[List[MessageEntity]] = None,
        reply_markup: Optional[InlineKeyboardMarkup] = None,
    ) -> Message:
        self._require_message_target(chat_id, message_id, inline_message_id)
        params = _form(
            chat_id=chat_id,
            message_id=message_id,
            inline_message_id=inline_message_id,
            caption=caption,
            parse_mode=parse_mode,
            caption_entities=caption_entities,
            reply_markup=reply_markup,
        )
        return self._edited("editMessageCaption", self._call("editMessageCaption", params))

    def edit_message_media(
        self,
        media: InputMedia,
        chat_id: Optional[ChatId] = None,
        message_id: Optional[int] = None,
        inline_message_id: Optional[str] = None,
        reply_markup: Optional[InlineKeyboardMarkup] = None,
    ) -> Message:
        """Replace the media of a message; local files in *media* are uploaded."""
        self._require_message_target(chat_id, message_id, inline_message_id)
        files: Dict[str, InputFile] = {}
        params = _form(
            chat_id=chat_id,
            message_id=message_id,
            inline_message_id=inline_message_id,
            media=attach_media(media, files),
            reply_markup=reply_markup,
        )
        return self._edited("editMessageMedia", self._call("editMessageMedia", params, files))

    def edit_message_reply_markup(
        self,
        chat_id: Optional[ChatId] = None,
        message_id: Optional[int] = None,
        inline_message_id: Optional[str] = None,
        reply_markup: Optional[InlineKeyboardMarkup] = None,
    ) -> Message:
        self._require_message_target(chat_id, message_id, inline_message_id)
        params = _form(
            chat_id=chat_id,
            message_id=message_id,
            inline_message_id=inline_message_id,
            reply_markup=reply_markup,
        )
        return self._edited("editMessageReplyMarkup", self._call("editMessageReplyMarkup", params))

    def stop_poll(
        self, chat_id: ChatId, message_id: int, reply_markup: Optional[InlineKeyboardMarkup] = None
    ) -> Poll:
        """Stop a poll sent by the bot and return its final state."""
        params = _form(chat_id=chat_id, message_id=message_id, reply_markup=reply_markup)
        return Poll.from_json(self._call("stopPoll", params))

    def delete_message(self, chat_id: ChatId, message_id: int) -> bool:
        return self._call("deleteMessage", _form(chat_id=chat_id, message_id=message_id))

    # ------------------------------------------------------------------
    #  Stickers
    # ------------------------------------------------------------------

    def send_sticker(
        self,
        chat_id: ChatId,
        sticker: Attachment,
        disable_notification: Optional[bool] = None,
        reply_to_message_id: Optional[int] = None,
        allow_sending_without_reply: Optional[bool] = None,
        reply_markup: Optional[ReplyMarkup] = None,
    ) -> Message:
        params = _form(
            chat_id=chat_id,
            disable_notification=disable_notification,
            reply_to_message_id=reply_to_message_id,
            allow_sending_without_reply=allow_sending_without_reply,
            reply_markup=reply_markup,
        )
        files: Dict[str, InputFile] = {}
        resolve_attachment("sticker", sticker, params, files)
        return self._send("sendSticker", params, files)

    def get_sticker_set(self, name: str) -> StickerSet:
        return StickerSet.from_json(self._call("getStickerSet", _form(name=name)))

    def upload_sticker_file(self, user_id: int, png_sticker: Union[InputFile, Any]) -> File:
        """Upload a PNG for later use in sticker-set calls. *png_sticker* must be a local file."""
        params = _form(user_id=user_id)
        files: Dict[str, InputFile] = {}
        resolve_attachment("png_sticker", png_sticker, params, files, allow_reference=False)
        return File.from_json(self._call("uploadStickerFile", params, files))

    def create_new_sticker_set(
        self,
        user_id: int,
        name: str,
        title: str,
        emojis: str,
        png_sticker: Optional[Attachment] = None,
        tgs_sticker: Optional[Union[InputFile, Any]] = None,
        contains_masks: Optional[bool] = None,
        mask_position: Optional[MaskPosition] = None,
    ) -> bool:
        """Create a sticker set owned by *user_id*.

        Set names must end in ``_by_<bot username>``; the suffix is appended
        here (via :meth:`get_me`) when *name* does not already carry it.
        Exactly one of *png_sticker* and *tgs_sticker* must be given.

        Raises:
            TelegramArgumentError: If the sticker arguments are invalid, checked
                before any request, or if the bot has no username.
        """
        params = _form(
            user_id=user_id,
            title=title,
            emojis=emojis,
            contains_masks=contains_masks,
            mask_position=mask_position,
        )
        files = self._sticker_files(png_sticker, tgs_sticker, params)
        username = self.get_me().username
        if not username:
            raise TelegramArgumentError("Bot has no username; cannot build the sticker set name")
        suffix = f"_by_{username}"
        params["name"] = name if name.endswith(suffix) else name + suffix
        return self._call("createNewStickerSet", params, files)

    def add_sticker_to_set(
        self,
        user_id: int,
        name: str,
        emojis: str,
        png_sticker: Optional[Attachment] = None,
        tgs_sticker: Optional[Union[InputFile, Any]] = None,
        mask_position: Optional[MaskPosition] = None,
    ) -> bool:
        """Add a sticker to a set created by the bot; give exactly one of *png_sticker* / *tgs_sticker*."""
        params = _form(user_id=user_id, name=name, emojis=emojis, mask_position=mask_position)
        files = self._sticker_files(png_sticker, tgs_sticker, params)
        return self._call("addStickerToSet", params, files)

    def set_sticker_position_in_set(self, sticker: str, position: int) -> bool:
        return self._call("setStickerPositionInSet", _form(sticker=sticker, position=position))

    def delete_sticker_from_set(self, sticker: str) -> bool:
        return self._call("deleteStickerFromSet", _form(sticker=sticker))

    def set_sticker_set_thumb(self, name: str, user_id: int, thumb: Optional[Attachment] = None) -> bool:
        params = _form(name=name, user_id=user_id)
        files: Dict[str, InputFile] = {}
        resolve_attachment("thumb", thumb, params, files)
        return self._call("setStickerSetThumb", params, files)

    # ------------------------------------------------------------------
    #  Inline mode
    # ------------------------------------------------------------------

    def answer_inline_query(
        self,
        inline_query_id: str,
        results: Sequence[InlineQueryResult],
        cache_time: Optional[int] = None,
        is_personal: Optional[bool] = None,
        next_offset: Optional[str] = None,
        switch_pm_text: Optional[str] = None,
        switch_pm_parameter: Optional[str] = None,
    ) -> bool:
        """Send at most 50 results for an inline query."""
        params = _form(
            inline_query_id=inline_query_id,
            results=list(results),
            cache_time=cache_time,
            is_personal=is_personal,
            next_offset=next_offset,
            switch_pm_text=switch_pm_text,
            switch_pm_parameter=switch_pm_parameter,
        )
        return self._call("answerInlineQuery", params)

    # ------------------------------------------------------------------
    #  Payments
    # ------------------------------------------------------------------

    def send_invoice(
        self,
        chat_id: int,
        title: str,
        description: str,
        payload: str,
        provider_token: str,
        start_parameter: str,
        currency: str,
        prices: Sequence[LabeledPrice],
        provider_data: Optional[str] = None,
        photo_url: Optional[str] = None,
        photo_size: Optional[int] = None,
        photo_width: Optional[int] = None,
        photo_height: Optional[int] = None,
        need_name: Optional[bool] = None,
        need_phone_number: Optional[bool] = None,
        need_email: Optional[bool] = None,
        need_shipping_address: Optional[bool] = None,
        send_phone_number_to_provider: Optional[bool] = None,
        send_email_to_provider: Optional[bool] = None,
        is_flexible: Optional[bool] = None,
        disable_notification: Optional[bool] = None,
        reply_to_message_id: Optional[int] = None,
        allow_sending_without_reply: Optional[bool] = None,
        reply_markup: Optional[InlineKeyboardMarkup] = None,
    ) -> Message:
        params = _form(
            chat_id=chat_id,
            title=title,
            description=description,
            payload=payload,
            provider_token=provider_token,
            start_parameter=start_parameter,
            currency=currency,
            prices=list(prices),
            provider_data=provider_data,
            photo_url=photo_url,
            photo_size=photo_size,
            photo_width=photo_width,
            photo_height=photo_height,
            need_name=need_name,
            need_phone_number=need_phone_number,
            need_email=need_email,
            need_shipping_address=need_shipping_address,
            send_phone_number_to_provider=send_phone_number_to_provider,
            send_email_to_provider=send_email_to_provider,
            is_flexible=is_flexible,
            disable_notification=disable_notification,
            reply_to_message_id=reply_to_message_id,
            allow_sending_without_reply=allow_sending_without_reply,
            reply_markup=reply_markup,
        )
        return self._send("sendInvoice", params)

    def answer_shipping_query(
        self,
        shipping_query_id: str,
        ok: bool,
        shipping_options: Optional[Sequence[ShippingOption]] = None,
        error_message: Optional[str] = None,
    ) -> bool:
        """Reply to a shipping query from a flexible invoice.

        Raises:
            TelegramArgumentError: If *ok* is true without *shipping_options*,
                or false without *error_message*.
        """
        if ok and not shipping_options:
            raise TelegramArgumentError("Attribute 'shipping_options' is required when 'ok' is true")
        if not ok and not error_message:
            raise TelegramArgumentError("Attribute 'error_message' is required when 'ok' is false")
        params = _form(
            shipping_query_id=shipping_query_id,
            ok=ok,
            shipping_options=list(shipping_options) if shipping_options else None,
            error_message=error_message,
        )
        return self._call("answerShippingQuery", params)

    def answer_pre_checkout_query(
        self, pre_checkout_query_id: str, ok: bool, error_message: Optional[str] = None
    ) -> bool:
        """Confirm or reject an order; must be answered within 10 seconds."""
        if not ok and not error_message:
            raise TelegramArgumentError("Attribute 'error_message' is required when 'ok' is false")
        params = _form(pre_checkout_query_id=pre_checkout_query_id, ok=ok, error_message=error_message)
        return self._call("answerPreCheckoutQuery", params)

    # ------------------------------------------------------------------
    #  Telegram Passport
    # ------------------------------------------------------------------

    def set_passport_data_errors(self, user_id: int, errors: Sequence[PassportElementError]) -> bool:
        return self._call("setPassportDataErrors", _form(user_id=user_id, errors=list(errors)))

    # ------------------------------------------------------------------
    #  Games
    # ------------------------------------------------------------------

    def send_game(
        self,
        chat_id: int,
        game_short_name: str,
        disable_notification: Optional[bool] = None,
        reply_to_message_id: Optional[int] = None,
        allow_sending_without_reply: Optional[bool] = None,
        reply_markup: Optional[InlineKeyboardMarkup] = None,
    ) -> Message:
        params = _form(
            chat_id=chat_id,
            game_short_name=game_short_name,
            disable_notification=disable_notification,
            reply_to_message_id=reply_to_message_id,
            allow_sending_without_reply=allow_sending_without_reply,
            reply_markup=reply_markup,
        )
        return self._send("sendGame", params)

    def set_game_score(
        self,
        user_id: int,
        score: int,
        force: Optional[bool] = None,
        disable_edit_message: Optional[bool] = None,
        chat_id: Optional[int] = None,
        message_id: Optional[int] = None,
        inline_message_id: Optional[str] = None,
    ) -> Message:
        """Set a user's score in a game message; returns the edited game message."""
        self._require_message_target(chat_id, message_id, inline_message_id)
        params = _form(
            user_id=user_id,
            score=score,
            force=force,
            disable_edit_message=disable_edit_message,
            chat_id=chat_id,
            message_id=message_id,
            inline_message_id=inline_message_id,
        )
        return self._edited("setGameScore", self._call("setGameScore", params))

    def get_game_high_scores(
        self,
        user_id: int,
        chat_id: Optional[int] = None,
        message_id: Optional[int] = None,
        inline_message_id: Optional[str] = None,
    ) -> List[GameHighScore]:
        """Return the high-score table around *user_id* for a game message."""
        self._require_message_target(chat_id, message_id, inline_message_id)
        params = _form(
            user_id=user_id,
            chat_id=chat_id,
            message_id=message_id,
            inline_message_id=inline_message_id,
        )
        return [GameHighScore.from_json(item) for item in self._call("getGameHighScores", params)]
