from .base import Presenter
from .bootstrap import (
    NavbarPresenter,
    NavbarRightPresenter,
    NavPillsPresenter,
    NavTabPresenter,
    SidebarPresenter,
)

__all__ = [
    "Presenter",
    "NavbarPresenter",
    "NavbarRightPresenter",
    "NavPillsPresenter",
    "NavTabPresenter",
    "SidebarPresenter",
]
