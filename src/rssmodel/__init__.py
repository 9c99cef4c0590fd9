# ABOUTME: Main package for rssmodel, a typed RSS 2.0 decoder.
# ABOUTME: Exports the decode/fetch/load_feed entry points, models and errors.

from rssmodel.config import Settings, get_settings
from rssmodel.errors import DecodeError, FetchError, RSSError
from rssmodel.feeds import FeedFetcher, decode, fetch, load_feed
from rssmodel.models import (
    Category,
    Channel,
    Cloud,
    Enclosure,
    Feed,
    Image,
    Item,
    MediaContent,
    MediaThumbnail,
    MediaTitle,
    SkipDays,
    SkipHours,
    Source,
    TextInput,
)

__all__ = [
    "Category",
    "Channel",
    "Cloud",
    "DecodeError",
    "Enclosure",
    "Feed",
    "FeedFetcher",
    "FetchError",
    "Image",
    "Item",
    "MediaContent",
    "MediaThumbnail",
    "MediaTitle",
    "RSSError",
    "Settings",
    "SkipDays",
    "SkipHours",
    "Source",
    "TextInput",
    "decode",
    "fetch",
    "get_settings",
    "load_feed",
]
