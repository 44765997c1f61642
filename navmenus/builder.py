"""
Menu builder.

Collects menu items and renders them through a presenter::

    menu = MenuBuilder("main")
    menu.add_url("/", "Home", order=0)
    menu.add_dropdown("Account", lambda sub: (
        sub.add_header("{user.username}"),
        sub.add_route("profile", "Profile"),
        sub.add_divider(),
        sub.add_url("/logout/", "Log out"),
    ), order=10, visible=lambda item, ctx: ctx.auth is not None)
    menu.set_bindings({"user": request.user})
    html = menu.render("navbar", path=request.path)

Every render works on snapshots of the stored items. The filtering pipeline
runs visibility first (predicates see the raw, unresolved items), binding
resolution second, and ordering last so the resolved ``order`` values are
the ones sorted on.
"""

import logging

from django.template.loader import render_to_string
from django.utils.module_loading import import_string

from . import conf
from .bindings import BindingResolver
from .exceptions import MalformedItemError
from .items import DIVIDER, HEADER, MenuItem
from .ordering import order_items
from .visibility import filter_visible

logger = logging.getLogger(__name__)


class MenuBuilder:
    """An ordered collection of menu items with its render configuration."""

    def __init__(self, name, styles=None, presenter=None):
        self.name = name
        self.items = []
        self.styles = dict(styles) if styles else {}
        self.presenter = presenter
        self.prefix_url = None
        self.view = None
        self.ordering = False
        self.bindings = {}

    def __len__(self):
        return self.count()

    def __iter__(self):
        return iter(self.items)

    def __repr__(self):
        return f"<MenuBuilder {self.name!r}: {self.count()} items>"

    def get_name(self):
        return self.name

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def _push(self, item):
        self.items.append(item.validate())
        return item

    def add(self, **attributes):
        return self._push(MenuItem.make(attributes))

    def add_dropdown(self, title, callback, order=0, attributes=None, visible=True):
        item = MenuItem.make(dict(attributes or {}, title=title, order=order, visible=visible))
        callback(item)
        if not item.has_sub_menu():
            raise MalformedItemError(f"Dropdown '{title}' was added without any children.")
        self._push(item)
        return self

    def add_route(self, route, title, parameters=None, order=None, attributes=None, visible=True):
        return self._push(MenuItem.make({
            "route": (route, parameters or {}),
            "title": title,
            "parameters": parameters or {},
            "order": order,
            "attributes": attributes or {},
            "visible": visible,
        }))

    def format_url(self, url):
        uri = url if self.prefix_url is None else self.prefix_url + url
        return "/" if uri == "/" else uri.strip("/")

    def add_url(self, url, title, order=0, attributes=None, visible=True):
        return self.add_raw_url(self.format_url(url), title, order, attributes, visible)

    def add_raw_url(self, url, title, order=0, attributes=None, visible=True):
        return self._push(MenuItem.make({
            "url": url,
            "title": title,
            "order": order,
            "attributes": attributes or {},
            "visible": visible,
        }))

    def add_divider(self, order=None, visible=True):
        self._push(MenuItem.make({"name": DIVIDER, "order": order, "visible": visible}))
        return self

    def add_header(self, title, order=None, visible=True):
        self._push(MenuItem.make({
            "name": HEADER,
            "title": title,
            "order": order,
            "visible": visible,
        }))
        return self

    dropdown = add_dropdown
    route = add_route
    url = add_url

    def header(self, title, visible=True):
        return self.add_header(title, visible=visible)

    def divider(self, visible=True):
        return self.add_divider(visible=visible)

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def set_bindings(self, bindings):
        self.bindings = dict(bindings)
        return self

    def set_prefix_url(self, prefix_url):
        self.prefix_url = prefix_url
        return self

    def set_view(self, view):
        self.view = view
        return self

    def set_styles(self, styles):
        self.styles = dict(styles)
        return self

    def get_styles(self):
        return self.styles or conf.get_styles()

    def has_style(self, name):
        return name is not None and name in self.get_styles()

    def get_style(self, name):
        return self.get_styles()[name]

    def style(self, name):
        if self.has_style(name):
            self.set_presenter(self.get_style(name))
        return self

    def set_presenter(self, presenter):
        self.presenter = presenter
        return self

    def get_presenter(self, path=None, presenter=None):
        presenter = presenter or self.presenter or conf.get_default_presenter()
        if isinstance(presenter, str):
            presenter = import_string(presenter)
        return presenter(current_path=path)

    def enable_ordering(self):
        self.ordering = True
        return self

    def disable_ordering(self):
        self.ordering = False
        return self

    def ordering_enabled(self):
        return self.ordering or conf.ordering_enabled()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def count(self):
        return len(self.items)

    def get_items(self):
        return list(self.items)

    def find_by(self, key, value):
        return next((item for item in self.items if item.get(key) == value), None)

    def where_title(self, title, callback=None):
        item = self.find_by("title", title)
        if callback is not None:
            return callback(item)
        return item

    def as_list(self):
        return [item.as_dict() for item in self.items]

    def destroy(self):
        self.items = []
        return self

    # ------------------------------------------------------------------
    # Filtering pipeline
    # ------------------------------------------------------------------

    def filter_items(self, items, resolver=None):
        resolver = resolver or BindingResolver(self.bindings)
        items = filter_visible(items, self.bindings)
        resolved = []
        for item in items:
            item = resolver.resolve_item(item.snapshot())
            if item.children:
                item.children = self.filter_items(item.children, resolver)
                # A dropdown whose children are all hidden is hidden too.
                if not item.children:
                    continue
            resolved.append(item)
        return order_items(resolved, self.ordering_enabled())

    def get_filtered_items(self):
        return self.filter_items(list(self.items))

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(self, presenter=None, path=None):
        if self.view is not None:
            return self.render_view(presenter)

        if self.has_style(presenter):
            presenter = self.get_style(presenter)

        return self.render_menu(path, presenter)

    def render_view(self, template=None):
        template = template or self.view
        logger.debug("Rendering menu %r with template %s", self.name, template)
        return render_to_string(template, {
            "items": self.get_filtered_items(),
            "menu": self,
        })

    def render_menu(self, path=None, presenter=None):
        presenter = self.get_presenter(path, presenter)
        logger.debug("Rendering menu %r with %s", self.name, type(presenter).__name__)
        return presenter.render(self.get_filtered_items())


__all__ = [
    "MenuBuilder",
]
