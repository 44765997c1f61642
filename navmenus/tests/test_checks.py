"""
Tests for the MENUS system checks.
"""

from django.test import SimpleTestCase, override_settings

from navmenus.checks import check_menu_settings
from navmenus.conf import FALLBACK_STYLES, get_menu_settings


class MenuSettingsTests(SimpleTestCase):

    @override_settings(MENUS={"ordering": True})
    def test_missing_keys_fall_back(self):
        settings = get_menu_settings()
        self.assertTrue(settings["ordering"])
        self.assertEqual(settings["styles"], FALLBACK_STYLES)

    @override_settings(MENUS=None)
    def test_no_menus_setting(self):
        self.assertFalse(get_menu_settings()["ordering"])


class MenuChecksTests(SimpleTestCase):

    def test_defaults_are_valid(self):
        self.assertEqual(check_menu_settings(None), [])

    @override_settings(MENUS={"styles": ["navbar"]})
    def test_styles_must_be_a_dict(self):
        errors = check_menu_settings(None)
        self.assertEqual([e.id for e in errors], ["navmenus.E001"])

    @override_settings(MENUS={"styles": {"bad": "navmenus.presenters.Missing"}})
    def test_unimportable_presenter(self):
        errors = check_menu_settings(None)
        self.assertEqual([e.id for e in errors], ["navmenus.E002"])
        self.assertIn("navmenus.presenters.Missing", errors[0].msg)

    @override_settings(MENUS={"default_presenter": "nowhere.Presenter"})
    def test_unimportable_default_presenter(self):
        errors = check_menu_settings(None)
        self.assertEqual([e.id for e in errors], ["navmenus.E002"])
