from django.http import Http404
from django.shortcuts import render

from navmenus.registry import menus


def menu_view(request, name):
    """Render the registered menu ``name`` as a plain list."""
    menu = menus.instance(name)
    if menu is None:
        raise Http404(f"No menu named '{name}'.")

    return render(request, "navmenus/list.html", {
        "items": menu.get_filtered_items(),
        "menu": menu,
    })
