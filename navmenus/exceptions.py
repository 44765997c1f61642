"""
Exceptions raised while building and rendering menus.
"""


class MenuError(Exception):
    """Base class for every menu error."""


class BindingLookupError(MenuError, LookupError):
    """A dotted placeholder references a binding or attribute that does not exist."""

    def __init__(self, placeholder, segment):
        self.placeholder = placeholder
        self.segment = segment
        super().__init__(
            f"Cannot resolve '{segment}' while expanding placeholder '{placeholder}'"
        )


class MalformedItemError(MenuError, ValueError):
    """A menu item lacks (or carries) properties that its kind forbids."""
