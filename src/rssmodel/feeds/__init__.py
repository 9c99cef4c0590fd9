# ABOUTME: Feed processing module for RSS fetching and decoding.
# ABOUTME: Exposes the decoder, the HTTP fetcher and the load_feed composition.

from rssmodel.feeds.decoder import decode, rewrite_description_tags
from rssmodel.feeds.fetcher import FeedFetcher, fetch, load_feed

__all__ = ["FeedFetcher", "decode", "fetch", "load_feed", "rewrite_description_tags"]
