"""
External service integrations
"""

from .arxiv import ArxivClient, build_search_query, parse_feed
