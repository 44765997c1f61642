"""
Tests for the menu template tags.

Covers:
- render_menu renders a registered menu with the request path
- active_path supports single paths, comma-separated lists and regexes
"""

from django.template import Context, Template
from django.test import RequestFactory, SimpleTestCase

from navmenus.registry import menus


def _render(source, path=None):
    request = RequestFactory().get(path) if path else None
    context = Context({"request": request} if request else {})
    return Template("{% load menu_tags %}" + source).render(context)


class RenderMenuTagTests(SimpleTestCase):

    def setUp(self):
        menus.create("main", lambda m: (m.add_url("/users/", "Users"), m.add_url("/assets/", "Assets")))

    def tearDown(self):
        menus.destroy()

    def test_renders_with_request_path(self):
        html = _render('{% render_menu "main" "nav-pills" %}', "/assets/12/")
        self.assertEqual(
            html,
            '<ul class="nav nav-pills">'
            '<li><a href="/users">Users</a></li>'
            '<li class="active"><a href="/assets">Assets</a></li>'
            "</ul>",
        )

    def test_renders_without_request(self):
        html = _render('{% render_menu "main" %}')
        self.assertNotIn("active", html)
        self.assertTrue(html.startswith('<ul class="nav navbar-nav">'))


class ActivePathTagTests(SimpleTestCase):

    def test_prefix_match(self):
        self.assertEqual(_render('{% active_path "/users/" %}', "/users/3/"), "active")

    def test_segment_match_without_trailing_slash(self):
        self.assertEqual(_render('{% active_path "/assets" %}', "/assets/1/"), "active")
        self.assertEqual(_render('{% active_path "/assets" %}', "/assets-old/"), "")

    def test_comma_separated(self):
        self.assertEqual(_render('{% active_path "/users/,/assets/" %}', "/assets/"), "active")

    def test_regex(self):
        self.assertEqual(_render('{% active_path "r/^/assets/\\d+/$" %}', "/assets/12/"), "active")
        self.assertEqual(_render('{% active_path "r/^/assets/\\d+/$" %}', "/assets/new/"), "")

    def test_invalid_regex_is_no_match(self):
        self.assertEqual(_render('{% active_path "r/(" %}', "/assets/"), "")

    def test_no_request(self):
        self.assertEqual(_render('{% active_path "/users/" %}'), "")
