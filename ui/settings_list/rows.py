"""Row builders bound to preferences."""
from __future__ import annotations

from typing import Callable, Optional, Type

from core.settings.options import RepresentableOption
from core.settings.preference_store import PreferenceStore
from core.settings.preferences import Preference
from ui.settings_list.model import Accessory, Row


def bool_row(title: str, pref: Preference, store: PreferenceStore) -> Row:
    """Switch row that writes straight through to a bool preference.

    The preference key doubles as the row uuid.
    """
    def _write(value: bool) -> None:
        store.set_value(pref, bool(value))

    return Row(
        text=title,
        accessory=Accessory.switch_toggle(store.value(pref), _write),
        uuid=pref.key,
    )


def option_detail_text(option_type: Type[RepresentableOption], pref: Preference,
                       store: PreferenceStore) -> Optional[str]:
    """Display label of the preference's current option, None if unknown."""
    option = option_type.from_raw(store.get(pref.key, pref.default))
    return option.display_string if option is not None else None


def disclosure_row(title: str, selection: Optional[Callable[[], None]] = None,
                   detail_text: Optional[str] = None) -> Row:
    return Row(text=title, detail_text=detail_text,
               accessory=Accessory.disclosure_indicator(), selection=selection)
