from django import template

from navmenus.matching import path_matches
from navmenus.registry import menus

register = template.Library()


@register.simple_tag(takes_context=True)
def render_menu(context, name, presenter=None):
    """
    Render the registered menu ``name``.

    The request path (when a request is in the context) marks the active
    entries. ``presenter`` may be a style alias ("navbar", "sidebar") or a
    dotted presenter path.
    """
    request = context.get("request")
    path = request.path if request else None
    return menus.render(name, presenter, path=path)


@register.simple_tag(takes_context=True)
def active_path(context, base):
    """
    Return "active" when the current request path matches ``base``.

    See ``navmenus.matching`` for the accepted forms of ``base``.
    """
    request = context.get("request")
    if not request:
        return ""
    return "active" if path_matches(request.path, base) else ""
