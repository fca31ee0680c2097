"""Pydantic models mirroring the Telegram Bot API object schemas.

Every class derives from :class:`TelegramObject`, which gives it a
deterministic two-way JSON mapping (``from_json`` / ``to_json``).  Result
objects are decoded with these models by :class:`~teleclient.client.TelegramClient`;
parameter objects (keyboards, media descriptors, inline results, ...) are
encoded with ``to_json`` before they go on the wire.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from teleclient.files import InputFile


class TelegramObject(BaseModel):
    """Base class for every Bot API object."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @classmethod
    def from_json(cls, data: Union[str, bytes, Dict[str, Any]]):
        """Build the model from a decoded dict or a raw JSON document."""
        if isinstance(data, (str, bytes)):
            return cls.model_validate_json(data)
        return cls.model_validate(data)

    def to_dict(self) -> Dict[str, Any]:
        """Return the wire representation: aliases applied, ``None`` fields dropped."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True)


# ── Updates ──────────────────────────────────────────────────────────────────


class Update(TelegramObject):
    """An incoming update. At most one of the optional fields is present."""

    update_id: int
    message: Optional[Message] = None
    edited_message: Optional[Message] = None
    channel_post: Optional[Message] = None
    edited_channel_post: Optional[Message] = None
    inline_query: Optional[InlineQuery] = None
    chosen_inline_result: Optional[ChosenInlineResult] = None
    callback_query: Optional[CallbackQuery] = None
    shipping_query: Optional[ShippingQuery] = None
    pre_checkout_query: Optional[PreCheckoutQuery] = None
    poll: Optional[Poll] = None
    poll_answer: Optional[PollAnswer] = None


class WebhookInfo(TelegramObject):
    """Current status of a webhook; ``url`` is empty when polling is used."""

    url: str
    has_custom_certificate: bool
    pending_update_count: int
    ip_address: Optional[str] = None
    last_error_date: Optional[int] = None
    last_error_message: Optional[str] = None
    max_connections: Optional[int] = None
    allowed_updates: Optional[List[str]] = None


class ResponseParameters(TelegramObject):
    migrate_to_chat_id: Optional[int] = None
    retry_after: Optional[int] = None


# ── Users, chats and messages ────────────────────────────────────────────────


class User(TelegramObject):
    """A Telegram user or bot."""

    id: int
    is_bot: bool
    first_name: str
    last_name: Optional[str] = None
    username: Optional[str] = None
    language_code: Optional[str] = None
    can_join_groups: Optional[bool] = None
    can_read_all_group_messages: Optional[bool] = None
    supports_inline_queries: Optional[bool] = None


class ChatPhoto(TelegramObject):
    small_file_id: str
    small_file_unique_id: str
    big_file_id: str
    big_file_unique_id: str


class ChatPermissions(TelegramObject):
    """Actions a non-administrator member is allowed to take in a chat."""

    can_send_messages: Optional[bool] = None
    can_send_media_messages: Optional[bool] = None
    can_send_polls: Optional[bool] = None
    can_send_other_messages: Optional[bool] = None
    can_add_web_page_previews: Optional[bool] = None
    can_change_info: Optional[bool] = None
    can_invite_users: Optional[bool] = None
    can_pin_messages: Optional[bool] = None


class ChatLocation(TelegramObject):
    location: Location
    address: str


class Chat(TelegramObject):
    """A private chat, group, supergroup or channel."""

    id: int
    type: str
    title: Optional[str] = None
    username: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    photo: Optional[ChatPhoto] = None
    bio: Optional[str] = None
    description: Optional[str] = None
    invite_link: Optional[str] = None
    pinned_message: Optional[Message] = None
    permissions: Optional[ChatPermissions] = None
    slow_mode_delay: Optional[int] = None
    sticker_set_name: Optional[str] = None
    can_set_sticker_set: Optional[bool] = None
    linked_chat_id: Optional[int] = None
    location: Optional[ChatLocation] = None


class ChatMember(TelegramObject):
    """One member of a chat, with the rights that apply to their status."""

    user: User
    status: str
    custom_title: Optional[str] = None
    is_anonymous: Optional[bool] = None
    can_be_edited: Optional[bool] = None
    can_post_messages: Optional[bool] = None
    can_edit_messages: Optional[bool] = None
    can_delete_messages: Optional[bool] = None
    can_restrict_members: Optional[bool] = None
    can_promote_members: Optional[bool] = None
    can_change_info: Optional[bool] = None
    can_invite_users: Optional[bool] = None
    can_pin_messages: Optional[bool] = None
    is_member: Optional[bool] = None
    can_send_messages: Optional[bool] = None
    can_send_media_messages: Optional[bool] = None
    can_send_polls: Optional[bool] = None
    can_send_other_messages: Optional[bool] = None
    can_add_web_page_previews: Optional[bool] = None
    until_date: Optional[int] = None


class MessageEntity(TelegramObject):
    """A special entity in a text: hashtag, mention, URL, code block, ..."""

    type: str
    offset: int
    length: int
    url: Optional[str] = None
    user: Optional[User] = None
    language: Optional[str] = None


class Message(TelegramObject):
    """A message. The sender is exposed as ``from_field`` (wire key ``from``)."""

    message_id: int
    date: int
    chat: Chat
    from_field: Optional[User] = Field(None, alias="from")
    sender_chat: Optional[Chat] = None
    forward_from: Optional[User] = None
    forward_from_chat: Optional[Chat] = None
    forward_from_message_id: Optional[int] = None
    forward_signature: Optional[str] = None
    forward_sender_name: Optional[str] = None
    forward_date: Optional[int] = None
    reply_to_message: Optional[Message] = None
    via_bot: Optional[User] = None
    edit_date: Optional[int] = None
    media_group_id: Optional[str] = None
    author_signature: Optional[str] = None
    text: Optional[str] = None
    entities: Optional[List[MessageEntity]] = None
    animation: Optional[Animation] = None
    audio: Optional[Audio] = None
    document: Optional[Document] = None
    photo: Optional[List[PhotoSize]] = None
    sticker: Optional[Sticker] = None
    video: Optional[Video] = None
    video_note: Optional[VideoNote] = None
    voice: Optional[Voice] = None
    caption: Optional[str] = None
    caption_entities: Optional[List[MessageEntity]] = None
    contact: Optional[Contact] = None
    dice: Optional[Dice] = None
    game: Optional[Game] = None
    poll: Optional[Poll] = None
    venue: Optional[Venue] = None
    location: Optional[Location] = None
    new_chat_members: Optional[List[User]] = None
    left_chat_member: Optional[User] = None
    new_chat_title: Optional[str] = None
    new_chat_photo: Optional[List[PhotoSize]] = None
    delete_chat_photo: Optional[bool] = None
    group_chat_created: Optional[bool] = None
    supergroup_chat_created: Optional[bool] = None
    channel_chat_created: Optional[bool] = None
    migrate_to_chat_id: Optional[int] = None
    migrate_from_chat_id: Optional[int] = None
    pinned_message: Optional[Message] = None
    invoice: Optional[Invoice] = None
    successful_payment: Optional[SuccessfulPayment] = None
    connected_website: Optional[str] = None
    passport_data: Optional[PassportData] = None
    proximity_alert_triggered: Optional[ProximityAlertTriggered] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None


class MessageId(TelegramObject):
    message_id: int


# ── Media ────────────────────────────────────────────────────────────────────


class PhotoSize(TelegramObject):
    """One size of a photo, or a file / sticker thumbnail."""

    file_id: str
    file_unique_id: str
    width: int
    height: int
    file_size: Optional[int] = None


class Animation(TelegramObject):
    file_id: str
    file_unique_id: str
    width: int
    height: int
    duration: int
    thumb: Optional[PhotoSize] = None
    file_name: Optional[str] = None
    mime_type: Optional[str] = None
    file_size: Optional[int] = None


class Audio(TelegramObject):
    file_id: str
    file_unique_id: str
    duration: int
    performer: Optional[str] = None
    title: Optional[str] = None
    file_name: Optional[str] = None
    mime_type: Optional[str] = None
    file_size: Optional[int] = None
    thumb: Optional[PhotoSize] = None


class Document(TelegramObject):
    file_id: str
    file_unique_id: str
    thumb: Optional[PhotoSize] = None
    file_name: Optional[str] = None
    mime_type: Optional[str] = None
    file_size: Optional[int] = None


class Video(TelegramObject):
    file_id: str
    file_unique_id: str
    width: int
    height: int
    duration: int
    thumb: Optional[PhotoSize] = None
    file_name: Optional[str] = None
    mime_type: Optional[str] = None
    file_size: Optional[int] = None


class VideoNote(TelegramObject):
    file_id: str
    file_unique_id: str
    length: int
    duration: int
    thumb: Optional[PhotoSize] = None
    file_size: Optional[int] = None


class Voice(TelegramObject):
    file_id: str
    file_unique_id: str
    duration: int
    mime_type: Optional[str] = None
    file_size: Optional[int] = None


class File(TelegramObject):
    """A file ready to be downloaded from ``/file/bot<token>/<file_path>``."""

    file_id: str
    file_unique_id: str
    file_size: Optional[int] = None
    file_path: Optional[str] = None


class UserProfilePhotos(TelegramObject):
    total_count: int
    photos: List[List[PhotoSize]]


# ── Contacts, locations, polls ───────────────────────────────────────────────


class Contact(TelegramObject):
    phone_number: str
    first_name: str
    last_name: Optional[str] = None
    user_id: Optional[int] = None
    vcard: Optional[str] = None


class Dice(TelegramObject):
    emoji: str
    value: int


class Location(TelegramObject):
    longitude: float
    latitude: float
    horizontal_accuracy: Optional[float] = None
    live_period: Optional[int] = None
    heading: Optional[int] = None
    proximity_alert_radius: Optional[int] = None


class Venue(TelegramObject):
    location: Location
    title: str
    address: str
    foursquare_id: Optional[str] = None
    foursquare_type: Optional[str] = None
    google_place_id: Optional[str] = None
    google_place_type: Optional[str] = None


class ProximityAlertTriggered(TelegramObject):
    traveler: User
    watcher: User
    distance: int


class PollOption(TelegramObject):
    text: str
    voter_count: int


class PollAnswer(TelegramObject):
    """A user's answer in a non-anonymous poll."""

    poll_id: str
    user: User
    option_ids: List[int]


class Poll(TelegramObject):
    id: str
    question: str
    options: List[PollOption]
    total_voter_count: int
    is_closed: bool
    is_anonymous: bool
    type: str
    allows_multiple_answers: bool
    correct_option_id: Optional[int] = None
    explanation: Optional[str] = None
    explanation_entities: Optional[List[MessageEntity]] = None
    open_period: Optional[int] = None
    close_date: Optional[int] = None


# ── Keyboards ────────────────────────────────────────────────────────────────


class KeyboardButtonPollType(TelegramObject):
    type: Optional[str] = None


class KeyboardButton(TelegramObject):
    """One button of a reply keyboard."""

    text: str
    request_contact: Optional[bool] = None
    request_location: Optional[bool] = None
    request_poll: Optional[KeyboardButtonPollType] = None


class ReplyKeyboardMarkup(TelegramObject):
    """A custom keyboard with reply options."""

    keyboard: List[List[KeyboardButton]]
    resize_keyboard: Optional[bool] = None
    one_time_keyboard: Optional[bool] = None
    selective: Optional[bool] = None


class ReplyKeyboardRemove(TelegramObject):
    remove_keyboard: bool = True
    selective: Optional[bool] = None


class ForceReply(TelegramObject):
    force_reply: bool = True
    selective: Optional[bool] = None


class LoginUrl(TelegramObject):
    url: str
    forward_text: Optional[str] = None
    bot_username: Optional[str] = None
    request_write_access: Optional[bool] = None


class CallbackGame(TelegramObject):
    """Placeholder; holds no information."""


class InlineKeyboardButton(TelegramObject):
    """One inline keyboard button. Exactly one optional field must be set."""

    text: str
    url: Optional[str] = None
    login_url: Optional[LoginUrl] = None
    callback_data: Optional[str] = None
    switch_inline_query: Optional[str] = None
    switch_inline_query_current_chat: Optional[str] = None
    callback_game: Optional[CallbackGame] = None
    pay: Optional[bool] = None


class InlineKeyboardMarkup(TelegramObject):
    """An inline keyboard attached to a message."""

    inline_keyboard: List[List[InlineKeyboardButton]]


ReplyMarkup = Union[InlineKeyboardMarkup, ReplyKeyboardMarkup, ReplyKeyboardRemove, ForceReply]


class CallbackQuery(TelegramObject):
    """A callback from an inline keyboard button."""

    id: str
    from_field: User = Field(..., alias="from")
    chat_instance: str
    message: Optional[Message] = None
    inline_message_id: Optional[str] = None
    data: Optional[str] = None
    game_short_name: Optional[str] = None


class BotCommand(TelegramObject):
    command: str
    description: str


# ── Input media ──────────────────────────────────────────────────────────────
#
# ``media`` and ``thumb`` may hold a local file (``InputFile`` or ``Path``);
# the client uploads it as a separate multipart part and rewrites the field
# to an ``attach://<name>`` reference before encoding.

MediaSource = Union[str, Path, InputFile]


class InputMedia(TelegramObject):
    """Common base of the media descriptors used by sendMediaGroup / editMessageMedia."""

    type: str
    media: MediaSource
    caption: Optional[str] = None
    parse_mode: Optional[str] = None
    caption_entities: Optional[List[MessageEntity]] = None


class InputMediaPhoto(InputMedia):
    type: Literal["photo"] = "photo"


class InputMediaVideo(InputMedia):
    type: Literal["video"] = "video"
    thumb: Optional[MediaSource] = None
    width: Optional[int] = None
    height: Optional[int] = None
    duration: Optional[int] = None
    supports_streaming: Optional[bool] = None


class InputMediaAnimation(InputMedia):
    type: Literal["animation"] = "animation"
    thumb: Optional[MediaSource] = None
    width: Optional[int] = None
    height: Optional[int] = None
    duration: Optional[int] = None


class InputMediaAudio(InputMedia):
    type: Literal["audio"] = "audio"
    thumb: Optional[MediaSource] = None
    duration: Optional[int] = None
    performer: Optional[str] = None
    title: Optional[str] = None


class InputMediaDocument(InputMedia):
    type: Literal["document"] = "document"
    thumb: Optional[MediaSource] = None
    disable_content_type_detection: Optional[bool] = None


# ── Stickers ─────────────────────────────────────────────────────────────────


class MaskPosition(TelegramObject):
    """Where on a face a mask sticker is placed by default."""

    point: str
    x_shift: float
    y_shift: float
    scale: float


class Sticker(TelegramObject):
    file_id: str
    file_unique_id: str
    width: int
    height: int
    is_animated: bool
    thumb: Optional[PhotoSize] = None
    emoji: Optional[str] = None
    set_name: Optional[str] = None
    mask_position: Optional[MaskPosition] = None
    file_size: Optional[int] = None


class StickerSet(TelegramObject):
    name: str
    title: str
    is_animated: bool
    contains_masks: bool
    stickers: List[Sticker]
    thumb: Optional[PhotoSize] = None


# ── Inline mode ──────────────────────────────────────────────────────────────


class InlineQuery(TelegramObject):
    id: str
    from_field: User = Field(..., alias="from")
    query: str
    offset: str
    location: Optional[Location] = None


class ChosenInlineResult(TelegramObject):
    result_id: str
    from_field: User = Field(..., alias="from")
    query: str
    location: Optional[Location] = None
    inline_message_id: Optional[str] = None


class InputTextMessageContent(TelegramObject):
    message_text: str
    parse_mode: Optional[str] = None
    entities: Optional[List[MessageEntity]] = None
    disable_web_page_preview: Optional[bool] = None


class InputLocationMessageContent(TelegramObject):
    latitude: float
    longitude: float
    horizontal_accuracy: Optional[float] = None
    live_period: Optional[int] = None
    heading: Optional[int] = None
    proximity_alert_radius: Optional[int] = None


class InputVenueMessageContent(TelegramObject):
    latitude: float
    longitude: float
    title: str
    address: str
    foursquare_id: Optional[str] = None
    foursquare_type: Optional[str] = None
    google_place_id: Optional[str] = None
    google_place_type: Optional[str] = None


class InputContactMessageContent(TelegramObject):
    phone_number: str
    first_name: str
    last_name: Optional[str] = None
    vcard: Optional[str] = None


InputMessageContent = Union[
    InputTextMessageContent,
    InputLocationMessageContent,
    InputVenueMessageContent,
    InputContactMessageContent,
]


class InlineQueryResult(TelegramObject):
    """Fields shared by every inline query result."""

    type: str
    id: str
    reply_markup: Optional[InlineKeyboardMarkup] = None


class _CaptionedResult(InlineQueryResult):
    caption: Optional[str] = None
    parse_mode: Optional[str] = None
    caption_entities: Optional[List[MessageEntity]] = None
    input_message_content: Optional[InputMessageContent] = None


class _ThumbedResult(InlineQueryResult):
    input_message_content: Optional[InputMessageContent] = None
    thumb_url: Optional[str] = None
    thumb_width: Optional[int] = None
    thumb_height: Optional[int] = None


class InlineQueryResultArticle(_ThumbedResult):
    type: Literal["article"] = "article"
    title: str
    input_message_content: InputMessageContent
    url: Optional[str] = None
    hide_url: Optional[bool] = None
    description: Optional[str] = None


class InlineQueryResultPhoto(_CaptionedResult):
    type: Literal["photo"] = "photo"
    photo_url: str
    thumb_url: str
    photo_width: Optional[int] = None
    photo_height: Optional[int] = None
    title: Optional[str] = None
    description: Optional[str] = None


class InlineQueryResultGif(_CaptionedResult):
    type: Literal["gif"] = "gif"
    gif_url: str
    thumb_url: str
    gif_width: Optional[int] = None
    gif_height: Optional[int] = None
    gif_duration: Optional[int] = None
    thumb_mime_type: Optional[str] = None
    title: Optional[str] = None


class InlineQueryResultMpeg4Gif(_CaptionedResult):
    type: Literal["mpeg4_gif"] = "mpeg4_gif"
    mpeg4_url: str
    thumb_url: str
    mpeg4_width: Optional[int] = None
    mpeg4_height: Optional[int] = None
    mpeg4_duration: Optional[int] = None
    thumb_mime_type: Optional[str] = None
    title: Optional[str] = None


class InlineQueryResultVideo(_CaptionedResult):
    type: Literal["video"] = "video"
    video_url: str
    mime_type: str
    thumb_url: str
    title: str
    video_width: Optional[int] = None
    video_height: Optional[int] = None
    video_duration: Optional[int] = None
    description: Optional[str] = None


class InlineQueryResultAudio(_CaptionedResult):
    type: Literal["audio"] = "audio"
    audio_url: str
    title: str
    performer: Optional[str] = None
    audio_duration: Optional[int] = None


class InlineQueryResultVoice(_CaptionedResult):
    type: Literal["voice"] = "voice"
    voice_url: str
    title: str
    voice_duration: Optional[int] = None


class InlineQueryResultDocument(_CaptionedResult):
    type: Literal["document"] = "document"
    title: str
    document_url: str
    mime_type: str
    description: Optional[str] = None
    thumb_url: Optional[str] = None
    thumb_width: Optional[int] = None
    thumb_height: Optional[int] = None


class InlineQueryResultLocation(_ThumbedResult):
    type: Literal["location"] = "location"
    latitude: float
    longitude: float
    title: str
    horizontal_accuracy: Optional[float] = None
    live_period: Optional[int] = None
    heading: Optional[int] = None
    proximity_alert_radius: Optional[int] = None


class InlineQueryResultVenue(_ThumbedResult):
    type: Literal["venue"] = "venue"
    latitude: float
    longitude: float
    title: str
    address: str
    foursquare_id: Optional[str] = None
    foursquare_type: Optional[str] = None
    google_place_id: Optional[str] = None
    google_place_type: Optional[str] = None


class InlineQueryResultContact(_ThumbedResult):
    type: Literal["contact"] = "contact"
    phone_number: str
    first_name: str
    last_name: Optional[str] = None
    vcard: Optional[str] = None


class InlineQueryResultGame(InlineQueryResult):
    type: Literal["game"] = "game"
    game_short_name: str


class InlineQueryResultCachedPhoto(_CaptionedResult):
    type: Literal["photo"] = "photo"
    photo_file_id: str
    title: Optional[str] = None
    description: Optional[str] = None


class InlineQueryResultCachedGif(_CaptionedResult):
    type: Literal["gif"] = "gif"
    gif_file_id: str
    title: Optional[str] = None


class InlineQueryResultCachedMpeg4Gif(_CaptionedResult):
    type: Literal["mpeg4_gif"] = "mpeg4_gif"
    mpeg4_file_id: str
    title: Optional[str] = None


class InlineQueryResultCachedSticker(InlineQueryResult):
    type: Literal["sticker"] = "sticker"
    sticker_file_id: str
    input_message_content: Optional[InputMessageContent] = None


class InlineQueryResultCachedDocument(_CaptionedResult):
    type: Literal["document"] = "document"
    title: str
    document_file_id: str
    description: Optional[str] = None


class InlineQueryResultCachedVideo(_CaptionedResult):
    type: Literal["video"] = "video"
    video_file_id: str
    title: str
    description: Optional[str] = None


class InlineQueryResultCachedVoice(_CaptionedResult):
    type: Literal["voice"] = "voice"
    voice_file_id: str
    title: str


class InlineQueryResultCachedAudio(_CaptionedResult):
    type: Literal["audio"] = "audio"
    audio_file_id: str


# ── Payments ─────────────────────────────────────────────────────────────────


class LabeledPrice(TelegramObject):
    """A portion of the price, in the smallest units of the currency."""

    label: str
    amount: int


class Invoice(TelegramObject):
    title: str
    description: str
    start_parameter: str
    currency: str
    total_amount: int


class ShippingAddress(TelegramObject):
    country_code: str
    state: str
    city: str
    street_line1: str
    street_line2: str
    post_code: str


class OrderInfo(TelegramObject):
    name: Optional[str] = None
    phone_number: Optional[str] = None
    email: Optional[str] = None
    shipping_address: Optional[ShippingAddress] = None


class ShippingOption(TelegramObject):
    id: str
    title: str
    prices: List[LabeledPrice]


class SuccessfulPayment(TelegramObject):
    currency: str
    total_amount: int
    invoice_payload: str
    telegram_payment_charge_id: str
    provider_payment_charge_id: str
    shipping_option_id: Optional[str] = None
    order_info: Optional[OrderInfo] = None


class ShippingQuery(TelegramObject):
    id: str
    from_field: User = Field(..., alias="from")
    invoice_payload: str
    shipping_address: ShippingAddress


class PreCheckoutQuery(TelegramObject):
    id: str
    from_field: User = Field(..., alias="from")
    currency: str
    total_amount: int
    invoice_payload: str
    shipping_option_id: Optional[str] = None
    order_info: Optional[OrderInfo] = None


# ── Telegram Passport ────────────────────────────────────────────────────────


class PassportFile(TelegramObject):
    file_id: str
    file_unique_id: str
    file_size: int
    file_date: int


class EncryptedPassportElement(TelegramObject):
    type: str
    hash: str
    data: Optional[str] = None
    phone_number: Optional[str] = None
    email: Optional[str] = None
    files: Optional[List[PassportFile]] = None
    front_side: Optional[PassportFile] = None
    reverse_side: Optional[PassportFile] = None
    selfie: Optional[PassportFile] = None
    translation: Optional[List[PassportFile]] = None


class EncryptedCredentials(TelegramObject):
    data: str
    hash: str
    secret: str


class PassportData(TelegramObject):
    data: List[EncryptedPassportElement]
    credentials: EncryptedCredentials


class PassportElementError(TelegramObject):
    """An error in a submitted Passport element that the user must resolve."""

    source: str
    type: str
    message: str


class PassportElementErrorDataField(PassportElementError):
    source: Literal["data"] = "data"
    field_name: str
    data_hash: str


class PassportElementErrorFrontSide(PassportElementError):
    source: Literal["front_side"] = "front_side"
    file_hash: str


class PassportElementErrorReverseSide(PassportElementError):
    source: Literal["reverse_side"] = "reverse_side"
    file_hash: str


class PassportElementErrorSelfie(PassportElementError):
    source: Literal["selfie"] = "selfie"
    file_hash: str


class PassportElementErrorFile(PassportElementError):
    source: Literal["file"] = "file"
    file_hash: str


class PassportElementErrorFiles(PassportElementError):
    source: Literal["files"] = "files"
    file_hashes: List[str]


class PassportElementErrorTranslationFile(PassportElementError):
    source: Literal["translation_file"] = "translation_file"
    file_hash: str


class PassportElementErrorTranslationFiles(PassportElementError):
    source: Literal["translation_files"] = "translation_files"
    file_hashes: List[str]


class PassportElementErrorUnspecified(PassportElementError):
    source: Literal["unspecified"] = "unspecified"
    element_hash: str


# ── Games ────────────────────────────────────────────────────────────────────


class Game(TelegramObject):
    title: str
    description: str
    photo: List[PhotoSize]
    text: Optional[str] = None
    text_entities: Optional[List[MessageEntity]] = None
    animation: Optional[Animation] = None


class GameHighScore(TelegramObject):
    position: int
    user: User
    score: int


for _model in list(globals().values()):
    if isinstance(_model, type) and issubclass(_model, TelegramObject):
        _model.model_rebuild()
del _model
