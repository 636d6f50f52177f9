"""
Read-only document model over BeautifulSoup.

Rules only see `Document` and `Element`. Attribute access never raises: a missing
attribute reads as "" so every check stays a total function over the tree.
"""
from typing import Callable, Iterable, Iterator, List, Optional, Union

from bs4 import BeautifulSoup
from bs4.element import Tag

TagNames = Union[str, Iterable[str]]
Predicate = Callable[["Element"], bool]


def _names(tags: TagNames) -> List[str]:
    if isinstance(tags, str):
        return [tags.lower()]
    return [t.lower() for t in tags]


class Element:
    __slots__ = ("_tag",)

    def __init__(self, tag: Tag):
        self._tag = tag

    def __eq__(self, other) -> bool:
        return isinstance(other, Element) and other._tag is self._tag

    def __hash__(self) -> int:
        return id(self._tag)

    def __repr__(self) -> str:
        return f"<Element {self.name}>"

    @property
    def name(self) -> str:
        return (self._tag.name or "").lower()

    @property
    def attrs(self) -> dict:
        return {k.lower(): (v if isinstance(v, str) else " ".join(v)) for k, v in self._tag.attrs.items()}

    def has_attr(self, name: str) -> bool:
        return name.lower() in self.attrs

    def attr(self, name: str, default: str = "") -> str:
        return self.attrs.get(name.lower(), default)

    @property
    def text(self) -> str:
        """Trimmed text content including all descendants."""
        return self._tag.get_text().strip()

    @property
    def parent(self) -> Optional["Element"]:
        parent = self._tag.parent
        if isinstance(parent, Tag) and not isinstance(parent, BeautifulSoup):
            return Element(parent)
        return None

    def ancestors(self) -> Iterator["Element"]:
        node = self.parent
        while node is not None:
            yield node
            node = node.parent

    def closest(self, predicate: Predicate) -> Optional["Element"]:
        """First ancestor (nearest first) matching predicate."""
        for node in self.ancestors():
            if predicate(node):
                return node
        return None

    def find_all(
        self,
        tags: TagNames,
        with_attr: Optional[str] = None,
        without_attr: Optional[str] = None,
        attr_equals: Optional[tuple] = None,
    ) -> List["Element"]:
        return _select(self._tag, tags, with_attr, without_attr, attr_equals)

    def first_descendant(self, predicate: Predicate) -> Optional["Element"]:
        for tag in self._tag.find_all(True):
            el = Element(tag)
            if predicate(el):
                return el
        return None


def _select(root, tags, with_attr, without_attr, attr_equals) -> List[Element]:
    wanted = set(_names(tags))
    found = []
    for tag in root.find_all(True):
        el = Element(tag)
        if el.name not in wanted:
            continue
        if with_attr and not el.has_attr(with_attr):
            continue
        if without_attr and el.has_attr(without_attr):
            continue
        if attr_equals and el.attr(attr_equals[0]) != attr_equals[1]:
            continue
        found.append(el)
    return found


class Document:
    """Parsed page. Built once per scan; rules must not modify it."""

    def __init__(self, markup: str):
        self.markup = markup or ""
        self._soup = BeautifulSoup(self.markup, "html.parser", multi_valued_attributes=None)

    @property
    def root(self) -> Optional[Element]:
        html = self._soup.find("html")
        return Element(html) if html is not None else None

    @property
    def text(self) -> str:
        """All text with tags stripped."""
        return self._soup.get_text()

    def find_all(
        self,
        tags: TagNames,
        with_attr: Optional[str] = None,
        without_attr: Optional[str] = None,
        attr_equals: Optional[tuple] = None,
    ) -> List[Element]:
        """Elements named `tags` in document order, optionally filtered on one attribute."""
        return _select(self._soup, tags, with_attr, without_attr, attr_equals)

    def find_where(self, predicate: Predicate) -> List[Element]:
        return [el for el in (Element(t) for t in self._soup.find_all(True)) if predicate(el)]

    def first(self, predicate: Predicate) -> Optional[Element]:
        for tag in self._soup.find_all(True):
            el = Element(tag)
            if predicate(el):
                return el
        return None


def parse(markup: str) -> Document:
    return Document(markup)
