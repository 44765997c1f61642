"""
Menu settings lookup.

Reads the ``MENUS`` dict from the Django settings and merges it with the
built-in fallbacks, so a project only has to declare what it overrides::

    MENUS = {
        "ordering": True,
        "styles": {"navbar": "navmenus.presenters.bootstrap.NavbarPresenter"},
    }
"""

from django.conf import settings as django_settings

_PRESENTERS = "navmenus.presenters.bootstrap"

# ---------------------------------------------------------------------------
# Built-in fallbacks (used when MENUS is missing or incomplete)
# ---------------------------------------------------------------------------
FALLBACK_STYLES = {
    "navbar": f"{_PRESENTERS}.NavbarPresenter",
    "navbar-right": f"{_PRESENTERS}.NavbarRightPresenter",
    "nav-pills": f"{_PRESENTERS}.NavPillsPresenter",
    "nav-tab": f"{_PRESENTERS}.NavTabPresenter",
    "sidebar": f"{_PRESENTERS}.SidebarPresenter",
}
_FALLBACK_SETTINGS = {
    "styles": FALLBACK_STYLES,
    "default_presenter": f"{_PRESENTERS}.NavbarPresenter",
    "ordering": False,
}


def get_menu_settings() -> dict:
    """Return ``settings.MENUS`` merged with fallback defaults."""
    section = getattr(django_settings, "MENUS", None) or {}
    return {
        key: section.get(key, default) for key, default in _FALLBACK_SETTINGS.items()
    }


def get_styles() -> dict:
    return get_menu_settings()["styles"]


def get_default_presenter():
    return get_menu_settings()["default_presenter"]


def ordering_enabled() -> bool:
    return bool(get_menu_settings()["ordering"])
