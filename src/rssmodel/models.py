# ABOUTME: Pydantic models mirroring the RSS 2.0 schema plus Media RSS extensions.
# ABOUTME: Field annotations carry the XML bindings used by the decoder.

from typing import Annotated

from pydantic import BaseModel, ConfigDict

from rssmodel.binding import Attr, CharData, Element

# Plain <description> tags are renamed before parsing to avoid <media:description>.
DESCRIPTION_TAG = "articledescription"


class RSSModel(BaseModel):
    """Base for decoded feed records; instances are immutable."""

    model_config = ConfigDict(frozen=True)


class Cloud(RSSModel):
    """Update notification endpoint declared by <cloud>."""

    domain: Annotated[str, Attr("domain")] = ""
    port: Annotated[int, Attr("port")] = 0
    path: Annotated[str, Attr("path")] = ""
    register_procedure: Annotated[str, Attr("registerProcedure")] = ""
    protocol: Annotated[str, Attr("protocol")] = ""


class TextInput(RSSModel):
    """Text input box shown with the channel."""

    title: Annotated[str, Element("title")] = ""
    name: Annotated[str, Element("name")] = ""
    link: Annotated[str, Element("link")] = ""
    description: Annotated[str, Element(DESCRIPTION_TAG)] = ""


class SkipHours(RSSModel):
    """Hours (0-23) during which aggregators may skip reading the feed."""

    hours: Annotated[tuple[int, ...], Element("hour")] = ()


class SkipDays(RSSModel):
    """Days during which aggregators may skip reading the feed."""

    days: Annotated[tuple[str, ...], Element("day")] = ()


class Image(RSSModel):
    """Representative image of the channel."""

    title: Annotated[str, Element("title")] = ""
    url: Annotated[str, Element("url")] = ""
    link: Annotated[str, Element("link")] = ""
    width: Annotated[int, Element("width")] = 0
    height: Annotated[int, Element("height")] = 0
    description: Annotated[str, Element(DESCRIPTION_TAG)] = ""


class Category(RSSModel):
    value: Annotated[str, CharData()] = ""
    domain: Annotated[str, Attr("domain")] = ""


class MediaTitle(RSSModel):
    """<media:title> text together with its type (plain or html)."""

    value: Annotated[str, CharData()] = ""
    type: Annotated[str, Attr("type")] = ""


class MediaContent(RSSModel):
    url: Annotated[str, Attr("url")] = ""
    medium: Annotated[str, Attr("medium")] = ""
    width: Annotated[int, Attr("width")] = 0
    height: Annotated[int, Attr("height")] = 0
    type: Annotated[str, Attr("type")] = ""
    title: Annotated[MediaTitle, Element("title")] = MediaTitle()


class MediaThumbnail(RSSModel):
    url: Annotated[str, Attr("url")] = ""
    width: Annotated[int, Attr("width")] = 0
    height: Annotated[int, Attr("height")] = 0


class Source(RSSModel):
    """Channel the item came from."""

    value: Annotated[str, CharData()] = ""
    url: Annotated[str, Attr("url")] = ""


class Enclosure(RSSModel):
    """Media object attached to an item; length is in bytes."""

    url: Annotated[str, Attr("url")] = ""
    type: Annotated[str, Attr("type")] = ""
    length: Annotated[int, Attr("length")] = 0


class Item(RSSModel):
    """A single entry of a channel."""

    title: Annotated[str, Element("title")] = ""
    description: Annotated[str, Element(DESCRIPTION_TAG)] = ""
    author: Annotated[str, Element("author")] = ""
    creator: Annotated[str, Element("creator")] = ""
    link: Annotated[str, Element("link")] = ""
    categories: Annotated[tuple[Category, ...], Element("category")] = ()
    comments: Annotated[str, Element("comments")] = ""
    media_content: Annotated[tuple[MediaContent, ...], Element("content")] = ()
    media_thumbnail: Annotated[MediaThumbnail, Element("thumbnail")] = MediaThumbnail()
    guid: Annotated[str, Element("guid")] = ""
    pub_date: Annotated[str, Element("pubDate")] = ""
    source: Annotated[Source, Element("source")] = Source()
    enclosure: Annotated[Enclosure, Element("enclosure")] = Enclosure()


class Channel(RSSModel):
    """Metadata and items of one <channel>."""

    title: Annotated[str, Element("title")] = ""
    link: Annotated[str, Element("link")] = ""
    description: Annotated[str, Element(DESCRIPTION_TAG)] = ""
    language: Annotated[str, Element("language")] = ""
    copyright: Annotated[str, Element("copyright")] = ""
    pub_date: Annotated[str, Element("pubDate")] = ""
    managing_editor: Annotated[str, Element("managingEditor")] = ""
    web_master: Annotated[str, Element("webMaster")] = ""
    last_build_date: Annotated[str, Element("lastBuildDate")] = ""
    categories: Annotated[tuple[str, ...], Element("category")] = ()
    ttl: Annotated[int, Element("ttl")] = 0
    generator: Annotated[str, Element("generator")] = ""
    docs: Annotated[str, Element("docs")] = ""
    cloud: Annotated[Cloud, Element("cloud")] = Cloud()
    rating: Annotated[str, Element("rating")] = ""
    text_input: Annotated[TextInput, Element("textInput")] = TextInput()
    skip_hours: Annotated[SkipHours, Element("skipHours")] = SkipHours()
    skip_days: Annotated[SkipDays, Element("skipDays")] = SkipDays()
    image: Annotated[Image, Element("image")] = Image()
    items: Annotated[tuple[Item, ...], Element("item")] = ()


class Feed(RSSModel):
    """Root of a decoded <rss> document."""

    version: Annotated[str, Attr("version")] = ""
    channels: Annotated[tuple[Channel, ...], Element("channel")] = ()
