# ABOUTME: Pytest fixtures and configuration for rssmodel tests.
# ABOUTME: Provides test settings and the end-to-end RSS fixture document.

import logging
from collections.abc import Iterator

import pytest
import structlog

from rssmodel.config import Settings

SAMPLE_ITEM = """
		<item>
			<title>Title</title>
			<description>Description</description>
			<author>Author</author>
			<dc:creator>Creator</dc:creator>
			<link>Link</link>
			<category domain="Domain">Value</category>
			<category domain="Domain">Value</category>
			<comments>Comments</comments>
			<media:content url="URL" medium="Medium" width="80" height="80" type="Type">
				<media:title type="html">Title</media:title>
			</media:content>
			<media:thumbnail url="URL" width="80" height="80" />
			<guid>Guid</guid>
			<pubDate>PubDate</pubDate>
			<source url="URL">Value</source>
			<enclosure url="URL" type="Type" length="80" />
		</item>
"""

SAMPLE_RSS = (
    """
<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0" xmlns:dc="http://purl.org/dc/elements/1.1/" xmlns:atom="http://www.w3.org/2005/Atom" xmlns:media="http://search.yahoo.com/mrss/" xmlns:itunes="http://www.itunes.com/dtds/podcast-1.0.dtd">
	<channel>
		<title>Title</title>
		<link>Link</link>
		<description>Description</description>
		<copyright>Copyright</copyright>
		<pubDate>PubDate</pubDate>
		<language>Language</language>
		<managingEditor>ManagingEditor</managingEditor>
		<webMaster>WebMaster</webMaster>
		<lastBuildDate>LastBuildDate</lastBuildDate>
		<category>Category 1</category>
		<category>Category 2</category>
		<ttl>20</ttl>
		<generator>Generator</generator>
		<docs>Docs</docs>
		<cloud domain="Domain" port="8080"
			path="/path" registerProcedure="RegisterProcedure"
			protocol="Protocol" />
		<rating>Rating</rating>
		<textInput>
			<title>Title</title>
			<name>Name</name>
			<link>Link</link>
			<description>Description</description>
		</textInput>
		<skipHours>
			<hour>1</hour>
			<hour>2</hour>
			<hour>3</hour>
			<hour>4</hour>
		</skipHours>
		<skipDays>
			<day>monday</day>
			<day>tuesday</day>
		</skipDays>
		<image>
			<title>Title</title>
			<url>URL</url>
			<link>Link</link>
			<width>80</width>
			<height>80</height>
			<description>Description</description>
		</image>
"""
    + SAMPLE_ITEM
    + SAMPLE_ITEM
    + """
	</channel>
</rss>
"""
)

@pytest.fixture
def sample_rss() -> str:
    """The full RSS fixture document with two identical items."""
    return SAMPLE_RSS


@pytest.fixture
def mock_settings() -> Settings:
    """Create mock settings for testing."""
    return Settings(
        feed_timeout=5,
        feed_user_agent="rssmodel-test/1.0",
        feed_follow_redirects=True,
        feed_headers={"Accept": "application/rss+xml"},
        log_level="DEBUG",
    )


@pytest.fixture(autouse=True)
def silent_logging() -> Iterator[None]:
    """Keep structlog output out of captured stdout; capture_logs still works."""
    structlog.configure(
        processors=[],
        wrapper_class=structlog.make_filtering_bound_logger(logging.DEBUG),
        logger_factory=structlog.ReturnLoggerFactory(),
    )
    yield
    structlog.reset_defaults()
