"""Models to represent Discord webhook messages.

The models are plain data holders with chainable setters, so that a
message can be assembled in one expression::

    message = (
        Message()
        .set_content("A new release is out!")
        .embed(lambda embed: embed.set_title("v1.2.0").add_field("Changes", "Many"))
        .action_row(lambda row: row.link_button(lambda button: button.set_url(url)))
    )

Every setter mutates the instance it is called on and returns it. None
of the models check Discord's limits, that is done by
`webhook_client.validation` right before a message is sent.
"""

from __future__ import annotations

import enum
from collections.abc import Callable
from typing import Self, TypeAlias, TypeVar

import arrow
import attrs
from attrs import validators

_optional_string = validators.optional(validators.instance_of(str))
_optional_int = validators.optional(validators.instance_of(int))
_optional_arrow = validators.optional(validators.instance_of(arrow.Arrow))
_bool = validators.instance_of(bool)

_T = TypeVar("_T")
Build: TypeAlias = Callable[[_T], object]


class NonLinkButtonStyle(enum.IntEnum):
    """The styles of buttons that carry a custom id.

    Link buttons always use style 5 and are modelled by `LinkButton`.
    """

    PRIMARY = 1
    SECONDARY = 2
    SUCCESS = 3
    DANGER = 4


@attrs.define
class PartialEmoji:
    """An emoji shown on a button."""

    name: str | None = attrs.field(default=None, validator=_optional_string)
    id: str | None = attrs.field(default=None, validator=_optional_string)
    animated: bool = attrs.field(default=False, validator=_bool)


_optional_emoji = validators.optional(validators.instance_of(PartialEmoji))


class _ButtonSetters:
    """Setters shared by both kinds of buttons."""

    __slots__ = ()

    label: str | None
    emoji: PartialEmoji | None
    disabled: bool

    def set_label(self, label: str) -> Self:
        self.label = label
        return self

    def set_emoji(self, name: str, *, emoji_id: str | None = None, animated: bool = False) -> Self:
        """Show an emoji on the button.

        :param name: The unicode emoji or the name of a custom emoji
        :param emoji_id: The id of a custom emoji
        :param animated: Whether the custom emoji is animated
        """
        self.emoji = PartialEmoji(name=name, id=emoji_id, animated=animated)
        return self

    def set_disabled(self, disabled: bool = True) -> Self:  # noqa: FBT001, FBT002
        self.disabled = disabled
        return self


@attrs.define
class LinkButton(_ButtonSetters):
    """A button that opens a url; it has no custom id."""

    url: str | None = attrs.field(default=None, validator=_optional_string)
    label: str | None = attrs.field(default=None, validator=_optional_string)
    emoji: PartialEmoji | None = attrs.field(default=None, validator=_optional_emoji)
    disabled: bool = attrs.field(default=False, validator=_bool)

    def set_url(self, url: str) -> LinkButton:
        self.url = url
        return self


@attrs.define
class RegularButton(_ButtonSetters):
    """A button that sends an interaction identified by its custom id."""

    style: NonLinkButtonStyle | None = attrs.field(
        default=None, validator=validators.optional(validators.instance_of(NonLinkButtonStyle))
    )
    custom_id: str | None = attrs.field(default=None, validator=_optional_string)
    label: str | None = attrs.field(default=None, validator=_optional_string)
    emoji: PartialEmoji | None = attrs.field(default=None, validator=_optional_emoji)
    disabled: bool = attrs.field(default=False, validator=_bool)

    def set_style(self, style: NonLinkButtonStyle) -> RegularButton:
        self.style = style
        return self

    def set_custom_id(self, custom_id: str) -> RegularButton:
        self.custom_id = custom_id
        return self


Button: TypeAlias = LinkButton | RegularButton


@attrs.define
class ActionRow:
    """A row of up to five buttons below a message."""

    components: list[Button] = attrs.field(factory=list)

    def add_component(self, component: Button) -> ActionRow:
        self.components.append(component)
        return self

    def link_button(self, build: Build[LinkButton]) -> ActionRow:
        """Append a link button configured by `build`.

        :param build: A callable that receives a new, empty button
        :return: This action row
        """
        button = LinkButton()
        build(button)
        return self.add_component(button)

    def regular_button(self, build: Build[RegularButton]) -> ActionRow:
        """Append a regular button configured by `build`.

        :param build: A callable that receives a new, empty button
        :return: This action row
        """
        button = RegularButton()
        build(button)
        return self.add_component(button)


@attrs.define
class EmbedField:
    """An embed field."""

    name: str = attrs.field(validator=validators.instance_of(str))
    value: str = attrs.field(validator=validators.instance_of(str))
    inline: bool = attrs.field(default=False, validator=_bool)


@attrs.define
class EmbedFooter:
    """The footer of a Discord embed."""

    text: str = attrs.field(validator=validators.instance_of(str))
    icon_url: str | None = attrs.field(default=None, validator=_optional_string)


@attrs.define
class EmbedAuthor:
    """The author of a Discord embed."""

    name: str = attrs.field(validator=validators.instance_of(str))
    url: str | None = attrs.field(default=None, validator=_optional_string)
    icon_url: str | None = attrs.field(default=None, validator=_optional_string)


@attrs.define
class EmbedImage:
    """An image shown in a Discord embed."""

    url: str = attrs.field(validator=validators.instance_of(str))
    height: int | None = attrs.field(default=None, validator=_optional_int)
    width: int | None = attrs.field(default=None, validator=_optional_int)


@attrs.define
class EmbedThumbnail:
    """The thumbnail of a Discord embed."""

    url: str = attrs.field(validator=validators.instance_of(str))
    height: int | None = attrs.field(default=None, validator=_optional_int)
    width: int | None = attrs.field(default=None, validator=_optional_int)


@attrs.define
class EmbedVideo:
    """A video shown in a Discord embed."""

    url: str = attrs.field(validator=validators.instance_of(str))
    height: int | None = attrs.field(default=None, validator=_optional_int)
    width: int | None = attrs.field(default=None, validator=_optional_int)


@attrs.define
class Embed:
    """A Discord embed."""

    title: str | None = attrs.field(default=None, validator=_optional_string)
    description: str | None = attrs.field(default=None, validator=_optional_string)
    url: str | None = attrs.field(default=None, validator=_optional_string)
    timestamp: arrow.Arrow | None = attrs.field(default=None, validator=_optional_arrow)
    color: int | None = attrs.field(default=None, validator=_optional_int)
    footer: EmbedFooter | None = attrs.field(default=None)
    image: EmbedImage | None = attrs.field(default=None)
    thumbnail: EmbedThumbnail | None = attrs.field(default=None)
    video: EmbedVideo | None = attrs.field(default=None)
    author: EmbedAuthor | None = attrs.field(default=None)
    fields: list[EmbedField] = attrs.field(factory=list)

    def set_title(self, title: str) -> Embed:
        self.title = title
        return self

    def set_description(self, description: str) -> Embed:
        self.description = description
        return self

    def set_url(self, url: str) -> Embed:
        self.url = url
        return self

    def set_timestamp(self, timestamp: arrow.Arrow | str) -> Embed:
        """Set the timestamp shown in the footer of the embed.

        :param timestamp: An `arrow.Arrow` instance or an ISO 8601 string
        :return: This embed
        """
        self.timestamp = arrow.get(timestamp)
        return self

    def set_color(self, color: int) -> Embed:
        self.color = color
        return self

    def set_footer(self, text: str, *, icon_url: str | None = None) -> Embed:
        self.footer = EmbedFooter(text=text, icon_url=icon_url)
        return self

    def set_image(self, url: str, *, height: int | None = None, width: int | None = None) -> Embed:
        self.image = EmbedImage(url=url, height=height, width=width)
        return self

    def set_thumbnail(self, url: str, *, height: int | None = None, width: int | None = None) -> Embed:
        self.thumbnail = EmbedThumbnail(url=url, height=height, width=width)
        return self

    def set_video(self, url: str, *, height: int | None = None, width: int | None = None) -> Embed:
        self.video = EmbedVideo(url=url, height=height, width=width)
        return self

    def set_author(self, name: str, *, url: str | None = None, icon_url: str | None = None) -> Embed:
        self.author = EmbedAuthor(name=name, url=url, icon_url=icon_url)
        return self

    def add_field(self, name: str, value: str, *, inline: bool = False) -> Embed:
        self.fields.append(EmbedField(name=name, value=value, inline=inline))
        return self


@attrs.define
class Message:
    """A message to send to a Discord webhook."""

    content: str | None = attrs.field(default=None, validator=_optional_string)
    username: str | None = attrs.field(default=None, validator=_optional_string)
    avatar_url: str | None = attrs.field(default=None, validator=_optional_string)
    tts: bool = attrs.field(default=False, validator=_bool)
    embeds: list[Embed] = attrs.field(factory=list)
    action_rows: list[ActionRow] = attrs.field(factory=list)
    # Never ping anyone, unless explicitly requested
    allowed_mentions: dict[str, list[str]] = attrs.field(factory=lambda: {"parse": []})

    def set_content(self, content: str) -> Message:
        self.content = content
        return self

    def set_username(self, username: str) -> Message:
        self.username = username
        return self

    def set_avatar_url(self, avatar_url: str) -> Message:
        self.avatar_url = avatar_url
        return self

    def set_tts(self, tts: bool = True) -> Message:  # noqa: FBT001, FBT002
        self.tts = tts
        return self

    def add_embed(self, embed: Embed) -> Message:
        self.embeds.append(embed)
        return self

    def embed(self, build: Build[Embed]) -> Message:
        """Append an embed configured by `build`.

        :param build: A callable that receives a new, empty embed
        :return: This message
        """
        embed = Embed()
        build(embed)
        return self.add_embed(embed)

    def add_action_row(self, action_row: ActionRow) -> Message:
        self.action_rows.append(action_row)
        return self

    def action_row(self, build: Build[ActionRow]) -> Message:
        """Append an action row configured by `build`.

        :param build: A callable that receives a new, empty action row
        :return: This message
        """
        action_row = ActionRow()
        build(action_row)
        return self.add_action_row(action_row)
