"""
Named menus.

``menus`` is the process-wide registry templates render from::

    from navmenus.registry import menus

    menus.create("main", lambda menu: menu.add_url("/", "Home"))
    menus.render("main", "navbar")
"""

import logging

from .builder import MenuBuilder

logger = logging.getLogger(__name__)


class MenuRegistry:

    def __init__(self, styles=None):
        self.styles = styles
        self._menus = {}

    def create(self, name, callback=None):
        """Create (or reuse) the menu ``name`` and let ``callback`` populate it."""
        menu = self._menus.get(name)
        if menu is None:
            menu = self._menus[name] = MenuBuilder(name, styles=self.styles)
            logger.debug("Created menu %r", name)
        if callback is not None:
            callback(menu)
        return menu

    def has(self, name):
        return name in self._menus

    def get(self, name):
        return self._menus[name]

    def instance(self, name):
        return self._menus.get(name)

    def render(self, name, presenter=None, path=None):
        return self.get(name).render(presenter, path=path)

    def all(self):
        return dict(self._menus)

    def count(self):
        return len(self._menus)

    def destroy(self):
        self._menus = {}


menus = MenuRegistry()
