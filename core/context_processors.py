"""
Context processors for the navmenus project.

Exposes the menu registry to templates so any registered menu can be
rendered (``{{ menus.main.render }}``) or iterated.
"""

from navmenus.registry import menus as registry


def menus(_request):
    """
    Add the menu registry to the template context.

    Returns a dictionary with a ``menus`` key mapping menu names to their
    builders.
    """
    return {
        "menus": registry.all(),
    }
