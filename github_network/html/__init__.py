"""Scraping of GitHub's HTML-only dependency network pages."""

from .client import GitHubHtmlClient

__all__ = ["GitHubHtmlClient"]
