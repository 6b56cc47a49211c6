# document.py
"""
Loaded spec page with a small query interface.

The extractor only needs CSS selection, text content, ids and resolved link
targets, so the page is parsed with BeautifulSoup instead of being rendered.
"""

from typing import List, Optional, Union
from urllib.parse import urljoin, urlsplit

import requests
from bs4 import BeautifulSoup, Tag


def base_url_of(url: str) -> str:
    """Origin + path of ``url`` (query and fragment dropped)."""
    parts = urlsplit(url)
    return f"{parts.scheme}://{parts.netloc}{parts.path}"


class SpecNode:
    """One element of a SpecDocument."""

    def __init__(self, tag: Tag, document: "SpecDocument"):
        self._tag = tag
        self._document = document

    def __repr__(self) -> str:
        return f"SpecNode(<{self._tag.name} id={self.id!r}>)"

    @property
    def id(self) -> Optional[str]:
        return self._tag.get("id") or None

    @property
    def text(self) -> str:
        # textContent with runs of whitespace collapsed
        return " ".join(self._tag.get_text().split())

    @property
    def href(self) -> Optional[str]:
        raw = self._tag.get("href")
        if raw is None:
            return None
        return urljoin(self._document.base_url, raw)

    @property
    def parent(self) -> Optional["SpecNode"]:
        parent = self._tag.parent
        if not isinstance(parent, Tag) or isinstance(parent, BeautifulSoup):
            return None
        return SpecNode(parent, self._document)

    @property
    def next_element_sibling(self) -> Optional["SpecNode"]:
        sib = self._tag.find_next_sibling()
        return SpecNode(sib, self._document) if sib is not None else None

    def select(self, selector: str) -> List["SpecNode"]:
        return [SpecNode(t, self._document) for t in self._tag.select(selector)]

    def select_one(self, selector: str) -> Optional["SpecNode"]:
        t = self._tag.select_one(selector)
        return SpecNode(t, self._document) if t is not None else None


class SpecDocument:
    """Parsed spec page plus the address it was loaded from."""

    def __init__(self, soup: BeautifulSoup, url: str):
        self._soup = soup
        self.base_url = base_url_of(url)

    @classmethod
    def from_html(cls, html: Union[str, bytes], url: str) -> "SpecDocument":
        return cls(BeautifulSoup(html, "html.parser"), url)

    def to_ref(self, local_id: str) -> str:
        return f"{self.base_url}#{local_id}"

    def select(self, selector: str) -> List[SpecNode]:
        return [SpecNode(t, self) for t in self._soup.select(selector)]

    def select_one(self, selector: str) -> Optional[SpecNode]:
        t = self._soup.select_one(selector)
        return SpecNode(t, self) if t is not None else None


def load_document(url: str, timeout: Optional[float] = None) -> SpecDocument:
    """Fetch ``url`` and parse it. Network and HTTP errors propagate."""
    resp = requests.get(url, timeout=timeout)
    resp.raise_for_status()
    # raw bytes so BeautifulSoup honours the page's <meta charset>;
    # refs resolve against where we landed after redirects
    return SpecDocument.from_html(resp.content, resp.url or url)


def load_document_file(path: str, url: str) -> SpecDocument:
    """Parse a saved copy of the page, treating ``url`` as its address."""
    with open(path, "r", encoding="utf-8") as f:
        return SpecDocument.from_html(f.read(), url)
