"""
Bootstrap flavoured presenters.

``NavbarPresenter`` is the default; the others only change the wrapping
``<ul>`` (and, for the sidebar, how dropdowns open).
"""

from django.forms.utils import flatatt
from django.utils.html import format_html
from django.utils.safestring import mark_safe

from .base import Presenter


class NavbarPresenter(Presenter):
    css_class = "nav navbar-nav"

    def get_open_tag_wrapper(self):
        return format_html('<ul class="{}">', self.css_class)

    def get_close_tag_wrapper(self):
        return mark_safe("</ul>")

    def active_class(self, item):
        return " active" if self.is_active(item) else ""

    def item_attrs(self, item):
        return flatatt({"class": "active"} if self.is_active(item) else {})

    def get_menu_without_dropdown_wrapper(self, item):
        return format_html(
            '<li{}><a href="{}"{}>{}{}</a></li>',
            self.item_attrs(item),
            item.get_url(),
            flatatt(item.attributes),
            self.get_icon(item),
            item.title,
        )

    def get_divider_wrapper(self, item):
        return mark_safe('<li class="divider"></li>')

    def get_header_wrapper(self, item):
        return format_html('<li class="dropdown-header">{}</li>', item.title)

    def get_menu_with_dropdown_wrapper(self, item):
        return format_html(
            '<li class="dropdown{}">'
            '<a href="#" class="dropdown-toggle" data-toggle="dropdown"{}>{}{} <b class="caret"></b></a>'
            '<ul class="dropdown-menu">{}</ul>'
            "</li>",
            self.active_class(item),
            flatatt(item.attributes),
            self.get_icon(item),
            item.title,
            self.get_child_menu_items(item),
        )


class NavbarRightPresenter(NavbarPresenter):
    css_class = "nav navbar-nav navbar-right"


class NavPillsPresenter(NavbarPresenter):
    css_class = "nav nav-pills"


class NavTabPresenter(NavbarPresenter):
    css_class = "nav nav-tabs"


class SidebarPresenter(NavbarPresenter):
    css_class = "nav nav-sidebar"

    def get_menu_with_dropdown_wrapper(self, item):
        # Submenus are always expanded in the sidebar.
        return format_html(
            '<li{}>'
            "<span{}>{}{}</span>"
            '<ul class="nav nav-sub">{}</ul>'
            "</li>",
            self.item_attrs(item),
            flatatt(item.attributes),
            self.get_icon(item),
            item.title,
            self.get_child_menu_items(item),
        )
