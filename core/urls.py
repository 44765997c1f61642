from django.urls import path

from navmenus.views import menu_view

urlpatterns = [
    path("menus/<str:name>/", menu_view, name="menu"),
]
