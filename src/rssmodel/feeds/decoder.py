# ABOUTME: Decodes RSS 2.0 text into the typed Feed model.
# ABOUTME: Applies the literal <description> tag rewrite, then builds an ElementTree with expat.

import xml.etree.ElementTree as ET
from xml.parsers import expat

import structlog

from rssmodel.binding import bind, local_name
from rssmodel.errors import DecodeError
from rssmodel.models import DESCRIPTION_TAG, Feed

log = structlog.get_logger()

ROOT_TAG = "rss"

_JUNK_AFTER_ROOT = expat.errors.codes[expat.errors.XML_ERROR_JUNK_AFTER_DOC_ELEMENT]


def rewrite_description_tags(content: str) -> str:
    """Rename every literal ``<description>``/``</description>`` tag.

    This is a plain text substitution: occurrences inside CDATA, comments or
    escaped text are rewritten too, while tags carrying attributes or a
    namespace prefix (``<media:description>``) are left alone.
    """
    content = content.replace("<description>", f"<{DESCRIPTION_TAG}>")
    return content.replace("</description>", f"</{DESCRIPTION_TAG}>")


def parse_document(content: str) -> ET.Element:
    """Parse ``content`` into an element tree without namespace processing.

    Tags and attributes keep their ``prefix:`` as written, so undeclared
    prefixes are accepted. Anything after the root element is ignored.

    Raises:
        DecodeError: If the text up to the end of the root element is not
            well-formed XML.
    """
    builder = ET.TreeBuilder()
    depth = 0
    root_closed = False

    def start(tag: str, attrs: dict[str, str]) -> None:
        nonlocal depth
        depth += 1
        builder.start(tag, attrs)

    def end(tag: str) -> None:
        nonlocal depth, root_closed
        depth -= 1
        builder.end(tag)
        if depth == 0:
            root_closed = True

    parser = expat.ParserCreate()
    parser.buffer_text = True
    parser.StartElementHandler = start
    parser.EndElementHandler = end
    parser.CharacterDataHandler = builder.data

    try:
        parser.Parse(content, True)
    except expat.ExpatError as e:
        if not (root_closed and e.code == _JUNK_AFTER_ROOT):
            raise DecodeError(str(e), position=(e.lineno, e.offset)) from e

    return builder.close()


def decode(content: str) -> Feed:
    """Decode the content of a feed into a Feed.

    Args:
        content: RSS 2.0 document text.

    Returns:
        The fully populated Feed.

    Raises:
        DecodeError: If the text is not well-formed XML or its root is not <rss>.
    """
    log.debug("decoding_feed", size=len(content))

    content = rewrite_description_tags(content)
    # expat rejects anything in front of the XML declaration
    content = content.lstrip("\ufeff \t\r\n")

    root = parse_document(content)

    root_name = local_name(root.tag)
    if root_name != ROOT_TAG:
        raise DecodeError(f"expected element type <{ROOT_TAG}> but have <{root_name}>")

    feed = bind(Feed, root)
    log.debug(
        "feed_decoded",
        channels=len(feed.channels),
        items=sum(len(channel.items) for channel in feed.channels),
    )
    return feed
