"""Grouped settings list: value-typed model plus its Qt rendering."""

from .model import Accessory, AccessoryKind, IndexPath, Row, Section, SettingsListModel
from .rows import bool_row, disclosure_row, option_detail_text
from .view import RowWidget, SettingsListView

__all__ = [
    'Accessory',
    'AccessoryKind',
    'IndexPath',
    'Row',
    'Section',
    'SettingsListModel',
    'RowWidget',
    'SettingsListView',
    'bool_row',
    'disclosure_row',
    'option_detail_text',
]
