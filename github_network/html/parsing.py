"""Parsers for GitHub's dependency network pages.

These functions operate on an already parsed ``BeautifulSoup`` document and
perform no I/O, so they can be exercised against saved fixture pages.

Selectors target the markup GitHub serves at
``https://github.com/<owner>/<repo>/network/dependents``:

- Package picker entries: ``a.select-menu-item`` whose ``href`` carries a
  ``package_id`` query parameter and whose first ``span`` holds the name.
- Totals: the first ``a.btn-link:nth-child(1)`` reads ``"1,234 Repositories"``.
- Dependent rows: ``div.Box-row > span`` reads ``"owner / name"``.
- Pagination: the ``a.btn:nth-child(2)`` link is "Next"; on the last page the
  button is rendered disabled (not an anchor).
"""

from __future__ import annotations

import re
from typing import List, Optional, Set, Tuple
from urllib.parse import unquote_plus, urljoin

from bs4 import BeautifulSoup
from bs4.element import Tag

from ..base.models import Package

COUNT_PATTERN = re.compile(r"^\s*([0-9,]+)\s+Repositories\s*$")
REPO_PATTERN = re.compile(r"^\s*(\S+)\s*/\s*(\S+)\s*$")
PACKAGE_ID_PATTERN = re.compile(r"[?&]package_id=([a-zA-Z0-9=]+)")

PACKAGE_ITEM_SELECTOR = "a.select-menu-item"
COUNT_SELECTOR = "a.btn-link:nth-child(1)"
DEPENDENT_ROW_SELECTOR = "div.Box-row > span"
NEXT_PAGE_SELECTOR = "a.btn:nth-child(2)"


def parse_html(text: str) -> BeautifulSoup:
    """Parse page markup with the stdlib-backed ``html.parser`` tree builder."""
    return BeautifulSoup(text, "html.parser")


def element_text(el: Tag) -> str:
    """Return the element's text with whitespace runs collapsed to one space."""
    return " ".join(el.get_text(" ").split())


def parse_packages(doc: BeautifulSoup) -> Set[Package]:
    """Extract the packages offered by the dependents page's package picker.

    Items whose decoded ``href`` has no ``package_id``, that lack a ``span``,
    or whose name is blank are skipped.
    """
    packages: Set[Package] = set()
    for item in doc.select(PACKAGE_ITEM_SELECTOR):
        href = item.get("href")
        if not href:
            continue
        m = PACKAGE_ID_PATTERN.search(unquote_plus(str(href)))
        if not m:
            continue
        label = item.select_one("span")
        if label is None:
            continue
        name = element_text(label)
        if name:
            packages.add(Package(id=m.group(1), name=name))
    return packages


def parse_count_text(text: str) -> Optional[int]:
    """Parse ``"12,345 Repositories"`` into ``12345``; ``None`` if it does not match."""
    m = COUNT_PATTERN.match(text)
    if not m:
        return None
    digits = m.group(1).replace(",", "")
    return int(digits) if digits else None


def parse_dependents_count(doc: BeautifulSoup) -> int:
    """Return the repository dependents total shown on the page.

    Pages without the totals toggle (dependency graph disabled, no detected
    manifests) or with unexpected text yield ``0``.
    """
    el = doc.select_one(COUNT_SELECTOR)
    if el is None:
        return 0
    count = parse_count_text(element_text(el))
    return count if count is not None else 0


def parse_dependent_rows(doc: BeautifulSoup) -> List[Tuple[str, str]]:
    """Return ``(owner, name)`` pairs for the dependent rows in page order."""
    rows: List[Tuple[str, str]] = []
    for span in doc.select(DEPENDENT_ROW_SELECTOR):
        m = REPO_PATTERN.match(element_text(span))
        if m:
            rows.append((m.group(1), m.group(2)))
    return rows


def parse_next_page(doc: BeautifulSoup, page_url: str) -> Optional[str]:
    """Return the absolute URL of the next listing page, or ``None`` on the last page."""
    link = doc.select_one(NEXT_PAGE_SELECTOR)
    if link is None:
        return None
    href = link.get("href")
    if not href:
        return None
    return urljoin(page_url, str(href))


__all__ = [
    "COUNT_PATTERN",
    "REPO_PATTERN",
    "PACKAGE_ID_PATTERN",
    "parse_html",
    "element_text",
    "parse_packages",
    "parse_count_text",
    "parse_dependents_count",
    "parse_dependent_rows",
    "parse_next_page",
]
