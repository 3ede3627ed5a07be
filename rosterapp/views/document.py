# rosterapp/views/document.py
"""
The page document: a handful of named regions whose children are HTML
fragments. Renders replace a region's children wholesale; each region that
takes user input has exactly one delegated handler.
"""
from __future__ import annotations

import html
import logging
import re
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, Mapping, Optional, Tuple

logger = logging.getLogger(__name__)

FORM_ID = "new-player-form"

_EVENT_RE = re.compile(r"^(?P<action>[a-z_]+)(?::(?P<id>\d+))?$")


class RenderError(RuntimeError):
    """A region the render needs is not in the document."""


@dataclass(frozen=True)
class RegionEvent:
    region: str
    action: str
    player_id: Optional[int] = None
    fields: Mapping[str, str] = field(default_factory=dict)


Handler = Callable[[RegionEvent], None]


def parse_event(raw: str) -> Tuple[str, Optional[int]]:
    """'details:7' -> ('details', 7); 'return' -> ('return', None)."""
    m = _EVENT_RE.match((raw or "").strip())
    if not m:
        raise ValueError(f"Malformed event {raw!r}")
    pid = m.group("id")
    return m.group("action"), int(pid) if pid is not None else None


@dataclass
class Region:
    name: str
    tag: str
    element_id: Optional[str] = None
    event_path: Optional[str] = None   # where the region's controls post to
    children: Tuple[str, ...] = ()
    hidden: bool = False
    handler: Optional[Handler] = field(default=None, repr=False)

    def replace_children(self, *fragments: str) -> None:
        self.children = tuple(fragments)

    def inner_html(self) -> str:
        return "".join(self.children)

    def to_html(self) -> str:
        attrs = ""
        if self.element_id:
            attrs += f' id="{html.escape(self.element_id)}"'
        if self.tag == "form" and self.event_path:
            attrs += f' method="post" action="{html.escape(self.event_path)}"'
        if self.hidden:
            attrs += " hidden"
        body = self.inner_html()
        if self.tag != "form" and self.event_path:
            # one form around the whole region: every control posts to the same handler
            body = f'<form method="post" action="{html.escape(self.event_path)}">{body}</form>'
        return f"<{self.tag}{attrs}>{body}</{self.tag}>"


class Document:
    def __init__(self, regions: Iterable[Region]):
        self._regions: Dict[str, Region] = {}
        for region in regions:
            self._regions[region.name] = region

    @classmethod
    def host(cls) -> "Document":
        """The host page: header, creation form, main."""
        return cls([
            Region("header", "header"),
            Region("form", "form", element_id=FORM_ID, event_path="/events/form"),
            Region("main", "main", event_path="/events/main"),
        ])

    def query(self, selector: str) -> Region:
        name = selector
        if selector.startswith("#"):
            name = next((r.name for r in self._regions.values() if r.element_id == selector[1:]), selector)
        region = self._regions.get(name)
        if region is None:
            raise RenderError(f"No element matches {selector!r}")
        return region

    def bind(self, selector: str, handler: Handler) -> None:
        """Install the region's single delegated handler, replacing any previous one."""
        self.query(selector).handler = handler

    def dispatch(self, selector: str, raw_event: str, fields: Optional[Mapping[str, str]] = None) -> bool:
        """
        Route one user event to the region's handler. Unknown regions, unbound
        regions and malformed events are logged and dropped.
        """
        try:
            region = self.query(selector)
            action, player_id = parse_event(raw_event)
        except (RenderError, ValueError):
            logger.warning("Dropping event %r for %r", raw_event, selector, exc_info=True)
            return False
        if region.handler is None:
            logger.warning("No handler bound on %r; dropping %r", selector, raw_event)
            return False
        region.handler(RegionEvent(region.name, action, player_id, dict(fields or {})))
        return True

    def to_html(self, title: str = "") -> str:
        body = "".join(r.to_html() for r in self._regions.values())
        return (
            "<!DOCTYPE html>"
            f'<html lang="en"><head><meta charset="utf-8" /><title>{html.escape(title)}</title></head>'
            f"<body>{body}</body></html>"
        )
