"""
Settings list controller.

Builds the settings sections once from the current preference values
and wires every row's activation: switches write straight to the store,
option rows push an OptionSelectionView, navigation rows push
sub-screens and the support/about rows call out to the host.
"""
from __future__ import annotations

from dataclasses import replace
from functools import partial
from typing import Callable, List, Optional, Sequence, Type

from PySide6.QtCore import Signal
from PySide6.QtWidgets import QPushButton, QVBoxLayout, QWidget

from core.device import DeviceInfo
from core.logging.logger import get_logger
from core.settings.options import (
    COOKIE_PICKER_ORDER,
    CookieAcceptPolicy,
    PasswordManagerShortcutBehavior,
    RepresentableOption,
    TabBarVisibility,
)
from core.settings.preference_store import PreferenceStore
from core.settings.preferences import General, Preference, Privacy, Shields
from ui import strings
from ui.external_actions import (
    ActionPresenter,
    MessageBoxActionPresenter,
    SettingsDelegate,
    copy_strings_to_clipboard,
)
from ui.navigation import NavigationStack
from ui.option_picker import OptionSelectionView
from ui.screens import ClearPrivateDataView, PasscodeSettingsView, SettingsContentView, passcode_title
from ui.settings_list import (
    Accessory,
    Row,
    Section,
    SettingsListModel,
    SettingsListView,
    bool_row,
    disclosure_row,
    option_detail_text,
)
from versioning import APP_BUILD, APP_VERSION, COMMUNITY_URL, PRIVACY_URL, TERMS_OF_USE_URL

logger = get_logger(__name__)


class SettingsController(QWidget):
    """
    Root settings screen.

    Args:
        store: Preference store every row reads from and writes to
        navigator: Navigation host sub-screens are pushed onto
        device: Device description (idiom, biometry, model strings)
        delegate: Receives "open URL in new tab" and "finished" calls
        action_presenter: Presents the About action sheet
        clear_handler: Receives the data kinds to clear from the
            Clear Private Data screen
        parent: Parent widget
    """

    finished = Signal()

    def __init__(self, store: PreferenceStore,
                 navigator: NavigationStack,
                 device: Optional[DeviceInfo] = None,
                 delegate: Optional[SettingsDelegate] = None,
                 action_presenter: Optional[ActionPresenter] = None,
                 clear_handler: Optional[Callable[[List[str]], None]] = None,
                 parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.setObjectName("settingsController")

        self._store = store
        self._navigator = navigator
        self._device = device or DeviceInfo()
        self.settings_delegate = delegate
        self._action_presenter = action_presenter or MessageBoxActionPresenter()
        self._clear_handler = clear_handler

        self.done_button = QPushButton(strings.DONE)
        self.done_button.setObjectName("settingsDoneButton")
        self.done_button.clicked.connect(self.finish)

        self.model = SettingsListModel(parent=self)
        self.model.sections = [
            self._general_section(),
            self._privacy_section(),
            self._security_section(),
            self._shields_section(),
            self._support_section(),
            self._about_section(),
        ]
        self.list_view = SettingsListView(self.model, self)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self.list_view)

        logger.info("Settings controller created (idiom=%s)", self._device.idiom.value)

    def show_in(self, navigator: Optional[NavigationStack] = None) -> None:
        """Push this screen as the navigator's root with its Done button."""
        (navigator or self._navigator).push(self, strings.SETTINGS, self.done_button)

    def finish(self) -> None:
        if self.settings_delegate is not None:
            self.settings_delegate.settings_did_finish(self)
        self.finished.emit()

    # ------------------------------------------------------------------
    # Sections
    # ------------------------------------------------------------------

    def _general_section(self) -> Section:
        general = Section(
            header=strings.GENERAL_SECTION_TITLE,
            rows=[
                # Search engine choice lives outside settings for now.
                disclosure_row(strings.DEFAULT_SEARCH_ENGINE, selection=lambda: None),
                bool_row(strings.SAVE_LOGINS, General.SAVE_LOGINS, self._store),
                bool_row(strings.BLOCK_POPUPS, General.BLOCK_POPUPS, self._store),
            ],
        )

        if self._device.is_pad:
            general = general.appending(self._tab_bar_switch_row())
        else:
            general = general.appending(self._option_row(
                general, strings.SHOW_TABS_BAR, TabBarVisibility, General.TAB_BAR_VISIBILITY,
            ))

        return general.appending(self._option_row(
            general,
            strings.PASSWORD_MANAGER_BUTTON,
            PasswordManagerShortcutBehavior,
            General.PASSWORD_MANAGER_SHORTCUT_BEHAVIOR,
            footer=strings.PASSWORD_MANAGER_BUTTON_FOOTER,
        ))

    def _privacy_section(self) -> Section:
        privacy = Section(
            header=strings.PRIVACY,
            rows=[disclosure_row(strings.CLEAR_PRIVATE_DATA, selection=self._show_clear_private_data)],
        )
        privacy = privacy.appending(self._option_row(
            privacy, strings.COOKIE_CONTROL, CookieAcceptPolicy, Privacy.COOKIE_ACCEPT_POLICY,
            options=COOKIE_PICKER_ORDER,
        ))
        return privacy.appending(
            bool_row(strings.PRIVATE_BROWSING_ONLY, Privacy.PRIVATE_BROWSING_ONLY, self._store)
        )

    def _security_section(self) -> Section:
        title = passcode_title(self._device.biometry)
        return Section(
            header=strings.SECURITY,
            rows=[disclosure_row(title, selection=partial(self._show_passcode_settings, title))],
        )

    def _shields_section(self) -> Section:
        return Section(
            header=strings.SHIELD_DEFAULTS,
            rows=[
                bool_row(strings.BLOCK_ADS_AND_TRACKING, Shields.BLOCK_ADS_AND_TRACKING, self._store),
                bool_row(strings.HTTPS_EVERYWHERE, Shields.HTTPS_EVERYWHERE, self._store),
                bool_row(strings.BLOCK_PHISHING_AND_MALWARE, Shields.BLOCK_PHISHING_AND_MALWARE, self._store),
                bool_row(strings.BLOCK_SCRIPTS, Shields.BLOCK_SCRIPTS, self._store),
                bool_row(strings.FINGERPRINTING_PROTECTION, Shields.FINGERPRINTING_PROTECTION, self._store),
            ],
        )

    def _support_section(self) -> Section:
        return Section(
            header=strings.SUPPORT,
            rows=[
                Row(text=strings.REPORT_A_BUG, accessory=Accessory.button(),
                    selection=self._report_a_bug),
                disclosure_row(strings.PRIVACY_POLICY, selection=partial(
                    self._show_content, strings.PRIVACY_POLICY, PRIVACY_URL)),
                disclosure_row(strings.TERMS_OF_USE, selection=partial(
                    self._show_content, strings.TERMS_OF_USE, TERMS_OF_USE_URL)),
            ],
        )

    def _about_section(self) -> Section:
        return Section(
            header=strings.ABOUT,
            rows=[Row(text=self.version_string, selection=self._show_app_info_sheet)],
        )

    # ------------------------------------------------------------------
    # Row builders
    # ------------------------------------------------------------------

    def _tab_bar_switch_row(self) -> Row:
        pref = General.TAB_BAR_VISIBILITY

        def _write(on: bool) -> None:
            option = TabBarVisibility.ALWAYS if on else TabBarVisibility.NEVER
            self._store.set_value(pref, option.raw_value)

        showing = self._store.value(pref) == TabBarVisibility.ALWAYS.raw_value
        return Row(text=strings.SHOW_TABS_BAR,
                   accessory=Accessory.switch_toggle(showing, _write),
                   uuid=pref.key)

    def _option_row(self, section: Section, title: str,
                    option_type: Type[RepresentableOption], pref: Preference,
                    options: Optional[Sequence[RepresentableOption]] = None,
                    footer: Optional[str] = None) -> Row:
        """Disclosure row showing the current option, opening a picker."""
        row = disclosure_row(title, detail_text=option_detail_text(option_type, pref, self._store))
        return replace(row, selection=partial(
            self._show_option_picker,
            title=title,
            option_type=option_type,
            options=list(options) if options is not None else option_type.all_cases(),
            pref=pref,
            row_uuid=row.uuid,
            section_uuid=section.uuid,
            footer=footer,
        ))

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def _show_option_picker(self, title: str, option_type: Type[RepresentableOption],
                            options: List[RepresentableOption], pref: Preference,
                            row_uuid: str, section_uuid: str,
                            footer: Optional[str] = None) -> OptionSelectionView:
        def _changed(_previous: Optional[RepresentableOption], option: RepresentableOption) -> None:
            self._store.set_value(pref, option.raw_value)
            self.model.update_detail_text(row_uuid, section_uuid, option.display_string)

        picker = OptionSelectionView(
            options=options,
            selected_option=option_type.from_raw(self._store.get(pref.key, pref.default)),
            option_changed=_changed,
        )
        picker.header_text = title
        picker.footer_text = footer
        self._navigator.push(picker, title)
        return picker

    def _show_clear_private_data(self) -> None:
        screen = ClearPrivateDataView(self._store, clear_handler=self._clear_handler)
        self._navigator.push(screen, strings.CLEAR_PRIVATE_DATA)

    def _show_passcode_settings(self, title: str) -> None:
        self._navigator.push(PasscodeSettingsView(self._store), title)

    def _show_content(self, title: str, url: str) -> None:
        self._navigator.push(SettingsContentView(title, url), title)

    # ------------------------------------------------------------------
    # External actions
    # ------------------------------------------------------------------

    def _report_a_bug(self) -> None:
        if self.settings_delegate is not None:
            self.settings_delegate.settings_open_url_in_new_tab(COMMUNITY_URL)
        self.finish()

    @property
    def version_string(self) -> str:
        return strings.VERSION_TEMPLATE.format(APP_VERSION, APP_BUILD)

    @property
    def device_string(self) -> str:
        return strings.DEVICE_TEMPLATE.format(self._device.model_name, self._device.os_version)

    def app_info(self) -> List[str]:
        return [self.version_string, self.device_string]

    def _show_app_info_sheet(self) -> None:
        self._action_presenter.present_action_sheet(
            self,
            self.version_string,
            [(strings.COPY_APP_INFO_TO_CLIPBOARD, lambda: copy_strings_to_clipboard(self.app_info()))],
            strings.CANCEL,
        )
