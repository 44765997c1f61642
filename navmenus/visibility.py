"""
Visibility filtering.

An item's ``visible`` property is either a literal or a predicate called as
``predicate(item, context)``. The context is a read-only mapping over the
bindings that also exposes ``context.auth`` (the authenticated user) and
``context.item``, and every binding as an attribute::

    menu.add_url("/admin/", "Admin", visible=lambda item, ctx: ctx.auth and ctx.auth.is_staff)
"""

import logging
from collections.abc import Mapping

from .auth import get_current_user

logger = logging.getLogger(__name__)

_UNSET = object()


class VisibilityContext(Mapping):
    """Bindings seen by a visibility predicate, plus ``auth`` and ``item``."""

    def __init__(self, bindings, auth=None, item=None):
        self._bindings = dict(bindings)
        self.auth = auth
        self.item = item

    def __getitem__(self, key):
        return self._bindings[key]

    def __iter__(self):
        return iter(self._bindings)

    def __len__(self):
        return len(self._bindings)

    def __getattr__(self, name):
        # Only called for names that are not real attributes.
        try:
            return self.__dict__["_bindings"][name]
        except KeyError:
            raise AttributeError(name) from None

    def for_item(self, item):
        return VisibilityContext(self._bindings, auth=self.auth, item=item)


def is_visible(item, context):
    visible = item.visible
    if callable(visible):
        return bool(visible(item, context.for_item(item)))
    return bool(visible)


def filter_visible(items, bindings=None, auth=_UNSET):
    """Return the items whose visibility evaluates truthy, in their original order."""
    if auth is _UNSET:
        auth = get_current_user()
    context = VisibilityContext(bindings or {}, auth=auth)

    visible = []
    for item in items:
        if is_visible(item, context):
            visible.append(item)
        else:
            logger.debug("Hiding menu item %r", item.title or item.name)
    return visible


__all__ = [
    "VisibilityContext",
    "filter_visible",
    "is_visible",
]
