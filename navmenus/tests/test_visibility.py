"""
Tests for visibility filtering.

Covers:
- Literal visibility values
- Predicates called with the item and a VisibilityContext
- The context exposes auth, item and every binding
- The current user comes from thread-local storage unless given
- Survivors keep their relative order
"""

from unittest.mock import Mock

from django.test import SimpleTestCase

from navmenus.auth import set_current_user
from navmenus.items import MenuItem
from navmenus.visibility import VisibilityContext, filter_visible, is_visible


def _item(title, visible=True):
    return MenuItem.make({"title": title, "visible": visible})


class LiteralVisibilityTests(SimpleTestCase):

    def test_falsy_literals_are_removed(self):
        items = [_item("a"), _item("b", False), _item("c", None), _item("d", 0)]
        self.assertEqual([i.title for i in filter_visible(items, auth=None)], ["a"])

    def test_truthy_literals_are_kept(self):
        items = [_item("a", True), _item("b", 1), _item("c", "yes")]
        self.assertEqual(len(filter_visible(items, auth=None)), 3)

    def test_survivors_keep_their_order(self):
        items = [_item(str(n), n % 2 == 0) for n in range(6)]
        self.assertEqual(
            [i.title for i in filter_visible(items, auth=None)], ["0", "2", "4"]
        )

    def test_input_list_is_not_modified(self):
        items = [_item("a"), _item("b", False)]
        filter_visible(items, auth=None)
        self.assertEqual(len(items), 2)


class PredicateVisibilityTests(SimpleTestCase):

    def tearDown(self):
        set_current_user(None)

    def test_predicate_receives_item_and_bindings(self):
        calls = []

        def predicate(item, context):
            calls.append((item, dict(context)))
            return True

        item = _item("a", predicate)
        filter_visible([item], {"role": "admin"}, auth=None)
        self.assertEqual(calls, [(item, {"role": "admin"})])

    def test_predicate_result_decides(self):
        items = [
            _item("admin", lambda item, ctx: ctx["role"] == "admin"),
            _item("staff", lambda item, ctx: ctx.role == "staff"),
        ]
        visible = filter_visible(items, {"role": "staff"}, auth=None)
        self.assertEqual([i.title for i in visible], ["staff"])

    def test_context_exposes_auth_and_item(self):
        user = Mock(is_authenticated=True)
        seen = {}

        def predicate(item, context):
            seen["auth"] = context.auth
            seen["item"] = context.item
            return True

        item = _item("a", predicate)
        filter_visible([item], auth=user)
        self.assertIs(seen["auth"], user)
        self.assertIs(seen["item"], item)

    def test_auth_defaults_to_current_user(self):
        user = Mock(is_authenticated=True)
        set_current_user(user)
        items = [_item("members", lambda item, ctx: ctx.auth is not None)]
        self.assertEqual(len(filter_visible(items)), 1)

    def test_anonymous_user_is_not_auth(self):
        set_current_user(Mock(is_authenticated=False))
        items = [_item("members", lambda item, ctx: ctx.auth is not None)]
        self.assertEqual(filter_visible(items), [])

    def test_predicate_errors_propagate(self):
        def predicate(item, context):
            raise RuntimeError("boom")

        with self.assertRaises(RuntimeError):
            filter_visible([_item("a", predicate)], auth=None)


class VisibilityContextTests(SimpleTestCase):

    def test_mapping_interface(self):
        context = VisibilityContext({"a": 1, "b": 2})
        self.assertEqual(context["a"], 1)
        self.assertEqual(len(context), 2)
        self.assertEqual(sorted(context), ["a", "b"])

    def test_unknown_attribute_raises_attribute_error(self):
        with self.assertRaises(AttributeError):
            VisibilityContext({}).missing

    def test_for_item_keeps_bindings_and_auth(self):
        item = _item("a")
        context = VisibilityContext({"a": 1}, auth="user").for_item(item)
        self.assertEqual(context.a, 1)
        self.assertEqual(context.auth, "user")
        self.assertIs(context.item, item)

    def test_is_visible(self):
        context = VisibilityContext({})
        self.assertTrue(is_visible(_item("a"), context))
        self.assertFalse(is_visible(_item("a", lambda item, ctx: 0), context))
