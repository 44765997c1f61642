from navmenus.auth import set_current_user


class CurrentUserMiddleware:
    """
    Stores the current authenticated user in thread-local storage so that
    menu visibility predicates (which have no access to the request) can
    check it as ``context.auth``.

    Must be placed **after** ``AuthenticationMiddleware`` in MIDDLEWARE.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        set_current_user(getattr(request, "user", None))
        try:
            return self.get_response(request)
        finally:
            set_current_user(None)
