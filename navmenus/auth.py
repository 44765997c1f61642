"""
Thread-local storage for the *current request user*.

Visibility predicates receive the authenticated user as ``context.auth``
without the menu declaration having access to the request.
``core.middleware.CurrentUserMiddleware`` sets it on every request.
"""

import threading

_thread_locals = threading.local()


def set_current_user(user):
    """Called by ``CurrentUserMiddleware`` on every request."""
    _thread_locals.user = user


def get_current_user():
    user = getattr(_thread_locals, "user", None)
    if user is not None and user.is_authenticated:
        return user
    return None
