from django.core.checks import Error, register
from django.utils.module_loading import import_string

from .conf import get_menu_settings


@register()
def check_menu_settings(app_configs, **kwargs):
    """Ensure every configured presenter can be imported."""
    settings = get_menu_settings()
    styles = settings["styles"]
    errors = []

    if not isinstance(styles, dict):
        return [
            Error(
                "MENUS['styles'] must be a dict mapping style names to presenters.",
                id="navmenus.E001",
            )
        ]

    candidates = dict(styles, default_presenter=settings["default_presenter"])
    for name, presenter in candidates.items():
        if not isinstance(presenter, str):
            continue
        try:
            import_string(presenter)
        except ImportError:
            errors.append(
                Error(
                    f"Presenter '{presenter}' for '{name}' cannot be imported.",
                    hint="Check the dotted path in MENUS.",
                    id="navmenus.E002",
                )
            )
    return errors
