"""
Tests for CurrentUserMiddleware.

Covers:
- The request user is available to visibility predicates during the request
- The user is cleared after the response, even when the view raises
"""

from unittest.mock import Mock

from django.http import HttpResponse
from django.test import RequestFactory, SimpleTestCase

from core.middleware import CurrentUserMiddleware
from navmenus.auth import get_current_user, set_current_user


class CurrentUserMiddlewareTests(SimpleTestCase):

    def setUp(self):
        self.request = RequestFactory().get("/")
        self.request.user = Mock(is_authenticated=True)

    def tearDown(self):
        set_current_user(None)

    def test_user_is_set_during_the_request(self):
        seen = []

        def view(request):
            seen.append(get_current_user())
            return HttpResponse("ok")

        CurrentUserMiddleware(view)(self.request)
        self.assertEqual(seen, [self.request.user])

    def test_user_is_cleared_after_the_response(self):
        CurrentUserMiddleware(lambda request: HttpResponse("ok"))(self.request)
        self.assertIsNone(get_current_user())

    def test_user_is_cleared_when_the_view_raises(self):
        def view(request):
            raise RuntimeError("boom")

        with self.assertRaises(RuntimeError):
            CurrentUserMiddleware(view)(self.request)
        self.assertIsNone(get_current_user())

    def test_anonymous_user_is_not_current(self):
        self.request.user = Mock(is_authenticated=False)
        seen = []

        def view(request):
            seen.append(get_current_user())
            return HttpResponse("ok")

        CurrentUserMiddleware(view)(self.request)
        self.assertEqual(seen, [None])
