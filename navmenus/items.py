"""
Menu item schema.

A ``MenuItem`` is a single node of a menu: a plain link, a dropdown that
contains nested items, a header or a divider. The kind is derived from the
item's ``name`` and ``children`` rather than from a type tag, so the same
record serves every kind. Fields the rendering pipeline depends on are typed;
anything else a caller passes ends up in ``extra``.
"""

import copy
from dataclasses import dataclass, field, fields

from django.urls import reverse

from .exceptions import MalformedItemError
from .matching import normalize, path_matches

DIVIDER = "divider"
HEADER = "header"

# Properties that are not part of the flat property mapping.
_STRUCTURAL = ("children", "extra")


@dataclass
class MenuItem:
    """A single menu node."""
    title: str = ""
    url: str = None
    route: tuple = None
    parameters: dict = field(default_factory=dict)
    order: object = None
    visible: object = True
    name: str = None
    attributes: dict = field(default_factory=dict)
    icon: str = None
    active_paths: tuple = field(default_factory=tuple)
    extra: dict = field(default_factory=dict)
    children: list = field(default_factory=list)

    @classmethod
    def make(cls, properties=None):
        item = cls()
        item.fill(properties or {})
        return item

    @classmethod
    def property_names(cls):
        return tuple(f.name for f in fields(cls) if f.name not in _STRUCTURAL)

    # ------------------------------------------------------------------
    # Property bag
    # ------------------------------------------------------------------

    def fill(self, properties):
        """Merge ``properties`` into the item, overwriting existing values."""
        known = self.property_names()
        for key, value in properties.items():
            if key in known:
                setattr(self, key, value)
            elif key == "children":
                self.children = list(value)
            else:
                self.extra[key] = value
        return self

    def get_properties(self):
        properties = {key: getattr(self, key) for key in self.property_names()}
        properties.update(self.extra)
        return properties

    def get(self, key, default=None):
        if key in self.property_names() or key == "children":
            return getattr(self, key)
        return self.extra.get(key, default)

    def snapshot(self):
        """Return a working copy that can be resolved without touching this item."""
        clone = copy.copy(self)
        clone.parameters = dict(self.parameters)
        clone.attributes = dict(self.attributes)
        clone.extra = dict(self.extra)
        clone.children = [child.snapshot() for child in self.children]
        return clone

    # ------------------------------------------------------------------
    # Kind
    # ------------------------------------------------------------------

    def has_sub_menu(self):
        return bool(self.children)

    def is_header(self):
        return self.name == HEADER

    def is_divider(self):
        return self.name == DIVIDER

    def validate(self):
        """Raise ``MalformedItemError`` when the item's shape contradicts its kind."""
        if self.is_divider() or self.is_header():
            if self.children:
                raise MalformedItemError(f"A {self.name} item cannot have children.")
            if self.url or self.route:
                raise MalformedItemError(f"A {self.name} item cannot link anywhere.")
        elif self.children and self.url:
            raise MalformedItemError(
                f"Dropdown '{self.title}' cannot have a url; link its children instead."
            )
        return self

    # ------------------------------------------------------------------
    # Children (populated from a dropdown callback)
    # ------------------------------------------------------------------

    def _append(self, child):
        self.children.append(child.validate())
        return child

    def add(self, **properties):
        return self._append(MenuItem.make(properties))

    def add_url(self, url, title, order=0, attributes=None, visible=True):
        return self.add(
            url=url, title=title, order=order, attributes=attributes or {}, visible=visible
        )

    def add_route(self, route, title, parameters=None, order=None, attributes=None, visible=True):
        return self.add(
            route=(route, parameters or {}),
            title=title,
            parameters=parameters or {},
            order=order,
            attributes=attributes or {},
            visible=visible,
        )

    def add_dropdown(self, title, callback, order=0, attributes=None, visible=True):
        child = MenuItem.make(dict(attributes or {}, title=title, order=order, visible=visible))
        callback(child)
        if not child.children:
            raise MalformedItemError(f"Dropdown '{title}' was added without any children.")
        return self._append(child)

    def add_divider(self, order=None, visible=True):
        return self.add(name=DIVIDER, order=order, visible=visible)

    def add_header(self, title, order=None, visible=True):
        return self.add(name=HEADER, title=title, order=order, visible=visible)

    divider = add_divider
    header = add_header
    dropdown = add_dropdown

    # ------------------------------------------------------------------
    # Presentation helpers
    # ------------------------------------------------------------------

    def get_url(self):
        if self.route:
            route_name, parameters = self.route
            if isinstance(parameters, dict):
                return reverse(route_name, kwargs=parameters or None)
            return reverse(route_name, args=parameters)
        return normalize(self.url) or "#"

    def is_active(self, path):
        if not path:
            return False
        if any(path_matches(path, pattern) for pattern in self.active_paths):
            return True
        if not self.has_sub_menu() and (self.url or self.route):
            target = self.get_url()
            if target == "/":
                return path == "/"
            return path_matches(path, target)
        return any(child.is_active(path) for child in self.children)

    def as_dict(self):
        if self.has_sub_menu():
            kind = "dropdown"
        elif self.is_header():
            kind = HEADER
        elif self.is_divider():
            kind = DIVIDER
        else:
            kind = "link"
        return {
            "type": kind,
            "title": self.title,
            "url": None if kind != "link" else self.get_url(),
            "order": self.order,
            "attributes": self.attributes,
            "icon": self.icon,
            "active_paths": self.active_paths,
            "children": tuple(child.as_dict() for child in self.children),
            **self.extra,
        }


__all__ = [
    "DIVIDER",
    "HEADER",
    "MenuItem",
]
