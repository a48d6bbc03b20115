"""
Region handles: the capability surface the codecs work against.

A region is an editable content area owned by the caller. The core only
reads and mutates it through the methods below and never keeps a reference
past the call that received it.
"""

import re
from abc import ABC, abstractmethod
from enum import Enum
from typing import Iterator, List, Optional, Union

from bs4 import BeautifulSoup, NavigableString, Tag

KIND_ATTRIBUTE = "data-type"


class RegionKind(str, Enum):
    PLAIN = "plain"
    LIST = "list"
    NUMERIC = "numeric"

    @classmethod
    def from_declared(cls, value: Optional[str]) -> "RegionKind":
        """Resolve the kind from the declared ``data-type`` value."""
        if value == "list":
            return cls.LIST
        if value == "number":
            return cls.NUMERIC
        return cls.PLAIN


class Region(ABC):
    """Abstract editable region."""

    @property
    @abstractmethod
    def tag_name(self) -> str: ...

    @property
    @abstractmethod
    def classes(self) -> List[str]: ...

    @abstractmethod
    def add_class(self, name: str) -> None: ...

    @abstractmethod
    def remove_class(self, name: str) -> None: ...

    @property
    @abstractmethod
    def element_id(self) -> Optional[str]: ...

    @property
    @abstractmethod
    def kind(self) -> RegionKind: ...

    @property
    @abstractmethod
    def inner_html(self) -> str: ...

    @inner_html.setter
    @abstractmethod
    def inner_html(self, markup: str) -> None: ...

    @property
    @abstractmethod
    def text(self) -> str: ...

    @text.setter
    @abstractmethod
    def text(self, value: str) -> None: ...

    @abstractmethod
    def children(self) -> Iterator[Union[Tag, NavigableString]]:
        """Yield the immediate element and text nodes, in document order."""

    @abstractmethod
    def get_attribute(self, name: str) -> Optional[str]: ...

    @abstractmethod
    def set_attribute(self, name: str, value: str) -> None: ...

    @abstractmethod
    def remove_attribute(self, name: str) -> None: ...

    @abstractmethod
    def set_style_property(self, name: str, value: str) -> None: ...

    @abstractmethod
    def remove_style_property(self, name: str) -> None: ...

    @abstractmethod
    def closest_class(self, *names: str) -> bool:
        """True if this region or any ancestor carries one of ``names``."""

    def has_class(self, name: str) -> bool:
        return name in self.classes


def node_text(node: Union[Tag, NavigableString]) -> str:
    """Text content of a node, the way a browser's ``textContent`` reads it."""
    if isinstance(node, Tag):
        return node.get_text()
    return str(node)


_STYLE_SPLIT = re.compile(r";\s*")


class SoupRegion(Region):
    """Region backed by a BeautifulSoup ``Tag``."""

    def __init__(self, tag: Tag):
        self.tag = tag

    def __repr__(self) -> str:
        return f"SoupRegion(<{self.tag_name}> id={self.element_id!r} classes={self.classes!r})"

    @property
    def tag_name(self) -> str:
        return self.tag.name

    @property
    def classes(self) -> List[str]:
        value = self.tag.get("class") or []
        if isinstance(value, str):
            value = value.split()
        return list(value)

    def add_class(self, name: str) -> None:
        classes = self.classes
        if name not in classes:
            classes.append(name)
            self.tag["class"] = classes

    def remove_class(self, name: str) -> None:
        classes = [c for c in self.classes if c != name]
        if classes:
            self.tag["class"] = classes
        elif self.tag.has_attr("class"):
            del self.tag["class"]

    @property
    def element_id(self) -> Optional[str]:
        return self.tag.get("id") or None

    @property
    def kind(self) -> RegionKind:
        return RegionKind.from_declared(self.tag.get(KIND_ATTRIBUTE))

    @property
    def inner_html(self) -> str:
        return self.tag.decode_contents()

    @inner_html.setter
    def inner_html(self, markup: str) -> None:
        self.tag.clear()
        fragment = BeautifulSoup(markup, "html.parser")
        for node in list(fragment.contents):
            self.tag.append(node.extract())

    @property
    def text(self) -> str:
        return self.tag.get_text()

    @text.setter
    def text(self, value: str) -> None:
        self.tag.clear()
        if value:
            self.tag.append(NavigableString(value))

    def children(self) -> Iterator[Union[Tag, NavigableString]]:
        for node in self.tag.children:
            # Comments, CDATA, doctypes are NavigableString subclasses
            if isinstance(node, Tag) or type(node) is NavigableString:
                yield node

    def get_attribute(self, name: str) -> Optional[str]:
        value = self.tag.get(name)
        if isinstance(value, list):
            return " ".join(value)
        return value

    def set_attribute(self, name: str, value: str) -> None:
        self.tag[name] = value

    def remove_attribute(self, name: str) -> None:
        if self.tag.has_attr(name):
            del self.tag[name]

    def _style_items(self) -> List[List[str]]:
        raw = self.get_attribute("style") or ""
        items = []
        for decl in _STYLE_SPLIT.split(raw.strip()):
            if ":" not in decl:
                continue
            prop, val = decl.split(":", 1)
            items.append([prop.strip(), val.strip()])
        return items

    def _write_style(self, items: List[List[str]]) -> None:
        if items:
            self.tag["style"] = "; ".join(f"{p}: {v}" for p, v in items) + ";"
        else:
            self.remove_attribute("style")

    def set_style_property(self, name: str, value: str) -> None:
        items = self._style_items()
        for item in items:
            if item[0] == name:
                item[1] = value
                break
        else:
            items.append([name, value])
        self._write_style(items)

    def remove_style_property(self, name: str) -> None:
        self._write_style([item for item in self._style_items() if item[0] != name])

    def get_style_property(self, name: str) -> Optional[str]:
        for prop, val in self._style_items():
            if prop == name:
                return val
        return None

    def closest_class(self, *names: str) -> bool:
        wanted = set(names)
        node = self.tag
        while isinstance(node, Tag):
            classes = node.get("class") or []
            if isinstance(classes, str):
                classes = classes.split()
            if wanted.intersection(classes):
                return True
            node = node.parent
        return False
