"""
Tests for the settings list controller.

Rows are located by their label so the tests read like the screen.
"""
import pytest
from PySide6.QtGui import QGuiApplication

from core.device import BiometryType, DeviceInfo, InterfaceIdiom
from core.settings.options import (
    COOKIE_PICKER_ORDER,
    CookieAcceptPolicy,
    PasswordManagerShortcutBehavior,
    TabBarVisibility,
)
from core.settings.preferences import General, Privacy, Shields
from ui import strings
from ui.option_picker import OptionSelectionView
from ui.screens import ClearPrivateDataView, PasscodeSettingsView, SettingsContentView
from ui.settings_controller import SettingsController
from ui.settings_list import AccessoryKind, IndexPath
from versioning import COMMUNITY_URL, PRIVACY_URL, TERMS_OF_USE_URL

PHONE = DeviceInfo(idiom=InterfaceIdiom.PHONE, system_name="ios", system_version="11.4",
                   model_name="iPhone")
PAD = DeviceInfo(idiom=InterfaceIdiom.PAD, system_name="ios", system_version="11.4",
                 model_name="iPad")


@pytest.fixture
def make_controller(store, navigator, delegate, presenter, qtbot):
    def _make(device=PHONE, **kwargs):
        ctrl = SettingsController(store, navigator, device=device, delegate=delegate,
                                  action_presenter=presenter, **kwargs)
        ctrl.show_in()
        return ctrl
    return _make


def find_row(ctrl, text):
    for s_idx, section in enumerate(ctrl.model.sections):
        for r_idx, row in enumerate(section.rows):
            if row.text == text:
                return IndexPath(s_idx, r_idx), row
    raise AssertionError(f"No row labelled {text!r}")


def activate(ctrl, text):
    path, _ = find_row(ctrl, text)
    ctrl.list_view.activate(path)


class TestSections:
    def test_section_headers_in_order(self, make_controller):
        ctrl = make_controller()
        headers = [s.header for s in ctrl.model.sections]
        assert headers == [
            strings.GENERAL_SECTION_TITLE,
            strings.PRIVACY,
            strings.SECURITY,
            strings.SHIELD_DEFAULTS,
            strings.SUPPORT,
            strings.ABOUT,
        ]

    def test_section_and_row_uuids_unique(self, make_controller):
        ctrl = make_controller()
        assert len({s.uuid for s in ctrl.model.sections}) == len(ctrl.model.sections)
        for section in ctrl.model.sections:
            assert len({r.uuid for r in section.rows}) == len(section.rows)

    def test_bool_rows_reflect_store(self, store, make_controller):
        store.set_value(Shields.BLOCK_SCRIPTS, True)
        store.set_value(General.SAVE_LOGINS, False)
        ctrl = make_controller()

        _, scripts = find_row(ctrl, strings.BLOCK_SCRIPTS)
        _, logins = find_row(ctrl, strings.SAVE_LOGINS)
        assert scripts.accessory.kind is AccessoryKind.SWITCH_TOGGLE
        assert scripts.accessory.value is True
        assert logins.accessory.value is False

        path, _ = find_row(ctrl, strings.BLOCK_SCRIPTS)
        assert ctrl.list_view.row_widget(path).switch.isChecked()

    def test_option_rows_show_current_label(self, store, make_controller):
        store.set_value(Privacy.COOKIE_ACCEPT_POLICY, CookieAcceptPolicy.NEVER.raw_value)
        ctrl = make_controller()
        _, row = find_row(ctrl, strings.COOKIE_CONTROL)
        assert row.detail_text == "Block all cookies"
        assert row.accessory.kind is AccessoryKind.DISCLOSURE_INDICATOR

    def test_unknown_stored_option_has_no_detail(self, store, make_controller):
        store.set_value(General.PASSWORD_MANAGER_SHORTCUT_BEHAVIOR, 42)
        ctrl = make_controller()
        _, row = find_row(ctrl, strings.PASSWORD_MANAGER_BUTTON)
        assert row.detail_text is None


class TestBoolRows:
    def test_toggle_writes_only_its_key(self, store, make_controller):
        ctrl = make_controller()
        changes = []
        store.settings_changed.connect(lambda key, value: changes.append((key, value)))

        path, _ = find_row(ctrl, strings.FINGERPRINTING_PROTECTION)
        ctrl.list_view.row_widget(path).switch.click()

        assert changes == [(Shields.FINGERPRINTING_PROTECTION.key, True)]
        assert store.value(Shields.FINGERPRINTING_PROTECTION) is True
        assert ctrl.model.row_at(path).accessory.value is True

    def test_toggle_off_again(self, store, make_controller):
        ctrl = make_controller()
        path, _ = find_row(ctrl, strings.BLOCK_POPUPS)
        switch = ctrl.list_view.row_widget(path).switch
        switch.click()
        assert store.value(General.BLOCK_POPUPS) is False
        switch.click()
        assert store.value(General.BLOCK_POPUPS) is True


class TestTabBarVisibility:
    def test_phone_picker_updates_preference_and_detail(self, store, navigator, make_controller):
        assert store.value(General.TAB_BAR_VISIBILITY) == 0
        ctrl = make_controller(PHONE)
        path, row = find_row(ctrl, strings.SHOW_TABS_BAR)
        assert row.detail_text == "Always show"

        ctrl.list_view.activate(path)
        picker = navigator.current_widget()
        assert isinstance(picker, OptionSelectionView)
        assert picker.header_text == strings.SHOW_TABS_BAR
        assert picker.selected_option is TabBarVisibility.ALWAYS

        picker.select(TabBarVisibility.NEVER)

        assert store.value(General.TAB_BAR_VISIBILITY) == 2
        assert ctrl.model.row_at(path).detail_text == "Never show"
        assert ctrl.list_view.row_widget(path).detail_label.text() == "Never show"

    def test_pad_uses_switch(self, store, make_controller):
        ctrl = make_controller(PAD)
        path, row = find_row(ctrl, strings.SHOW_TABS_BAR)
        assert row.accessory.kind is AccessoryKind.SWITCH_TOGGLE
        assert row.accessory.value is True

        ctrl.list_view.row_widget(path).switch.click()
        assert store.value(General.TAB_BAR_VISIBILITY) == TabBarVisibility.NEVER.raw_value

        ctrl.list_view.row_widget(path).switch.click()
        assert store.value(General.TAB_BAR_VISIBILITY) == TabBarVisibility.ALWAYS.raw_value

    def test_pad_switch_off_for_landscape_only(self, store, make_controller):
        store.set_value(General.TAB_BAR_VISIBILITY, TabBarVisibility.LANDSCAPE_ONLY.raw_value)
        ctrl = make_controller(PAD)
        _, row = find_row(ctrl, strings.SHOW_TABS_BAR)
        assert row.accessory.value is False


class TestOptionPickers:
    def test_password_manager_picker(self, store, navigator, make_controller):
        ctrl = make_controller()
        path, _ = find_row(ctrl, strings.PASSWORD_MANAGER_BUTTON)
        ctrl.list_view.activate(path)

        picker = navigator.current_widget()
        assert picker.options == PasswordManagerShortcutBehavior.all_cases()
        assert picker.footer_text == strings.PASSWORD_MANAGER_BUTTON_FOOTER

        picker.select(PasswordManagerShortcutBehavior.BITWARDEN)
        assert store.value(General.PASSWORD_MANAGER_SHORTCUT_BEHAVIOR) == 3
        assert ctrl.model.row_at(path).detail_text == "bitwarden"

    def test_cookie_picker_order_and_selection(self, store, navigator, make_controller):
        ctrl = make_controller()
        path, _ = find_row(ctrl, strings.COOKIE_CONTROL)
        ctrl.list_view.activate(path)

        picker = navigator.current_widget()
        assert picker.options == COOKIE_PICKER_ORDER

        picker.select(CookieAcceptPolicy.ONLY_FROM_MAIN_DOCUMENT_DOMAIN)
        assert store.value(Privacy.COOKIE_ACCEPT_POLICY) == 2
        assert ctrl.model.row_at(path).detail_text == "Block 3rd party cookies"

    def test_unknown_stored_value_preselects_nothing(self, store, navigator, make_controller):
        store.set_value(Privacy.COOKIE_ACCEPT_POLICY, 99)
        ctrl = make_controller()
        activate(ctrl, strings.COOKIE_CONTROL)
        assert navigator.current_widget().selected_option is None

    def test_non_numeric_stored_value_preselects_nothing(self, store, navigator, make_controller):
        store.set(Privacy.COOKIE_ACCEPT_POLICY.key, "bogus")
        ctrl = make_controller()
        path, row = find_row(ctrl, strings.COOKIE_CONTROL)
        assert row.detail_text is None

        ctrl.list_view.activate(path)
        picker = navigator.current_widget()
        assert picker.selected_option is None

        picker.select(CookieAcceptPolicy.NEVER)
        assert ctrl.model.row_at(path).detail_text == "Block all cookies"

    def test_picker_stays_until_back(self, navigator, make_controller):
        ctrl = make_controller()
        activate(ctrl, strings.COOKIE_CONTROL)
        navigator.current_widget().select(CookieAcceptPolicy.NEVER)
        assert navigator.depth == 2
        navigator.pop()
        assert navigator.current_widget() is ctrl

    def test_stale_row_after_section_removed_is_noop(self, store, navigator, make_controller):
        ctrl = make_controller()
        activate(ctrl, strings.COOKIE_CONTROL)
        picker = navigator.current_widget()

        ctrl.model.sections = [s for s in ctrl.model.sections if s.header != strings.PRIVACY]
        picker.select(CookieAcceptPolicy.NEVER)

        assert store.value(Privacy.COOKIE_ACCEPT_POLICY) == CookieAcceptPolicy.NEVER.raw_value
        for section in ctrl.model.sections:
            assert all(r.detail_text != "Block all cookies" for r in section.rows)


class TestNavigationRows:
    def test_clear_private_data_pushed(self, navigator, make_controller):
        ctrl = make_controller()
        activate(ctrl, strings.CLEAR_PRIVATE_DATA)
        assert isinstance(navigator.current_widget(), ClearPrivateDataView)
        assert navigator.bar.title_label.text() == strings.CLEAR_PRIVATE_DATA

    @pytest.mark.parametrize("biometry,title", [
        (BiometryType.NONE, strings.PASSCODE),
        (BiometryType.TOUCH_ID, strings.TOUCH_ID_PASSCODE),
        (BiometryType.FACE_ID, strings.FACE_ID_PASSCODE),
    ])
    def test_passcode_row_title_follows_biometry(self, navigator, make_controller, biometry, title):
        device = DeviceInfo(idiom=InterfaceIdiom.PHONE, biometry=biometry)
        ctrl = make_controller(device)
        activate(ctrl, title)
        assert isinstance(navigator.current_widget(), PasscodeSettingsView)

    @pytest.mark.parametrize("text,url", [
        (strings.PRIVACY_POLICY, PRIVACY_URL),
        (strings.TERMS_OF_USE, TERMS_OF_USE_URL),
    ])
    def test_content_pages(self, navigator, make_controller, text, url):
        ctrl = make_controller()
        activate(ctrl, text)
        page = navigator.current_widget()
        assert isinstance(page, SettingsContentView)
        assert page.url == url

    def test_default_search_engine_does_nothing(self, navigator, make_controller):
        ctrl = make_controller()
        activate(ctrl, strings.DEFAULT_SEARCH_ENGINE)
        assert navigator.depth == 1


class TestExternalActions:
    def test_report_a_bug_opens_url_and_finishes(self, delegate, make_controller, qtbot):
        ctrl = make_controller()
        path, row = find_row(ctrl, strings.REPORT_A_BUG)
        assert row.accessory.kind is AccessoryKind.BUTTON

        with qtbot.waitSignal(ctrl.finished, timeout=1000):
            ctrl.list_view.row_widget(path).button.click()

        assert delegate.opened_urls == [COMMUNITY_URL]
        assert delegate.finished == [ctrl]

    def test_done_button_finishes(self, delegate, make_controller):
        ctrl = make_controller()
        ctrl.done_button.click()
        assert delegate.finished == [ctrl]

    def test_about_row_presents_sheet_and_copies_info(self, presenter, make_controller):
        ctrl = make_controller()
        _, row = find_row(ctrl, ctrl.version_string)
        row.selection()

        title, actions, cancel = presenter.sheets[0]
        assert title == ctrl.version_string
        assert cancel == strings.CANCEL
        label, handler = actions[0]
        assert label == strings.COPY_APP_INFO_TO_CLIPBOARD

        handler()
        assert QGuiApplication.clipboard().text() == "\n".join(ctrl.app_info())
        assert ctrl.app_info() == [ctrl.version_string, "Device iPhone ios 11.4"]
