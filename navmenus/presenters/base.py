"""
The presenter contract.

A presenter turns an already filtered, resolved and ordered item sequence
into markup. ``render()`` emits the open wrapper, one emission per item
chosen by the item's kind, then the close wrapper. Dropdown wrappers render
their children through ``render_items()`` so nested menus use the same
dispatch.
"""

from abc import ABC, abstractmethod

from django.utils.html import format_html
from django.utils.safestring import mark_safe


class Presenter(ABC):

    def __init__(self, current_path=None):
        self.current_path = current_path

    def render(self, items):
        return mark_safe(
            self.get_open_tag_wrapper()
            + self.render_items(items)
            + self.get_close_tag_wrapper()
        )

    def render_items(self, items):
        return mark_safe("".join(self.render_item(item) for item in items))

    def render_item(self, item):
        if item.has_sub_menu():
            return self.get_menu_with_dropdown_wrapper(item)
        if item.is_header():
            return self.get_header_wrapper(item)
        if item.is_divider():
            return self.get_divider_wrapper(item)
        return self.get_menu_without_dropdown_wrapper(item)

    def get_child_menu_items(self, item):
        return self.render_items(item.children)

    def is_active(self, item):
        return item.is_active(self.current_path)

    def get_icon(self, item):
        if not item.icon:
            return ""
        return format_html('<i class="{}"></i> ', item.icon)

    @abstractmethod
    def get_open_tag_wrapper(self):
        """Markup opening the menu."""

    @abstractmethod
    def get_close_tag_wrapper(self):
        """Markup closing the menu."""

    @abstractmethod
    def get_menu_without_dropdown_wrapper(self, item):
        """Markup for a plain link."""

    @abstractmethod
    def get_menu_with_dropdown_wrapper(self, item):
        """Markup for a dropdown, including its rendered children."""

    @abstractmethod
    def get_header_wrapper(self, item):
        """Markup for a header."""

    @abstractmethod
    def get_divider_wrapper(self, item):
        """Markup for a divider."""
