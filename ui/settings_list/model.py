"""Value-typed section/row model behind a settings list.

Rows and sections are frozen dataclasses. Nothing outside the model ever
holds a live reference into it: to change a rendered row, callers look
it up by ``(row uuid, section uuid)`` and the model swaps in a modified
copy at that position, then tells the view which single row changed.
"""
from __future__ import annotations

import uuid as _uuid
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Callable, Iterable, List, NamedTuple, Optional, Sequence, Tuple

from PySide6.QtCore import QObject, Signal

from core.logging.logger import get_logger

logger = get_logger(__name__)


def _new_uuid() -> str:
    return str(_uuid.uuid4())


class AccessoryKind(Enum):
    NONE = "none"
    DISCLOSURE_INDICATOR = "disclosure_indicator"
    SWITCH_TOGGLE = "switch_toggle"
    BUTTON = "button"


@dataclass(frozen=True)
class Accessory:
    """Control attached to a row.

    ``value`` and ``on_toggle`` only apply to switch toggles.
    """
    kind: AccessoryKind = AccessoryKind.NONE
    value: bool = False
    on_toggle: Optional[Callable[[bool], None]] = field(default=None, compare=False)

    @classmethod
    def none(cls) -> "Accessory":
        return cls(AccessoryKind.NONE)

    @classmethod
    def disclosure_indicator(cls) -> "Accessory":
        return cls(AccessoryKind.DISCLOSURE_INDICATOR)

    @classmethod
    def button(cls) -> "Accessory":
        return cls(AccessoryKind.BUTTON)

    @classmethod
    def switch_toggle(cls, value: bool, on_toggle: Callable[[bool], None]) -> "Accessory":
        return cls(AccessoryKind.SWITCH_TOGGLE, bool(value), on_toggle)


@dataclass(frozen=True)
class Row:
    text: str
    detail_text: Optional[str] = None
    accessory: Accessory = field(default_factory=Accessory.none)
    selection: Optional[Callable[[], None]] = field(default=None, compare=False)
    uuid: str = field(default_factory=_new_uuid)

    @property
    def is_selectable(self) -> bool:
        return self.selection is not None


@dataclass(frozen=True)
class Section:
    header: Optional[str] = None
    rows: Tuple[Row, ...] = ()
    footer: Optional[str] = None
    uuid: str = field(default_factory=_new_uuid)

    def __post_init__(self) -> None:
        object.__setattr__(self, "rows", tuple(self.rows))
        _check_unique((row.uuid for row in self.rows), f"row uuid in section {self.header!r}")

    def appending(self, *rows: Row) -> "Section":
        """Return a copy with ``rows`` added at the end."""
        return replace(self, rows=self.rows + tuple(rows))


class IndexPath(NamedTuple):
    section: int
    row: int


def _check_unique(ids: Iterable[str], what: str) -> None:
    seen = set()
    for ident in ids:
        if ident in seen:
            raise ValueError(f"Duplicate {what}: {ident}")
        seen.add(ident)


class SettingsListModel(QObject):
    """Ordered sections of rows, patched in place after construction."""

    sections_reset = Signal()
    row_changed = Signal(int, int)  # section index, row index

    def __init__(self, sections: Sequence[Section] = (), parent: Optional[QObject] = None):
        super().__init__(parent)
        self._sections: List[Section] = []
        if sections:
            self.sections = sections

    @property
    def sections(self) -> Tuple[Section, ...]:
        return tuple(self._sections)

    @sections.setter
    def sections(self, sections: Sequence[Section]) -> None:
        sections = list(sections)
        _check_unique((s.uuid for s in sections), "section uuid")
        self._sections = sections
        logger.debug("Model reset with %d sections", len(sections))
        self.sections_reset.emit()

    def section_count(self) -> int:
        return len(self._sections)

    def row_count(self, section: int) -> int:
        return len(self._sections[section].rows)

    def row_at(self, path: IndexPath) -> Row:
        return self._sections[path.section].rows[path.row]

    def index_path(self, row_uuid: str, section_uuid: str) -> Optional[IndexPath]:
        """Locate a row by its uuid and its section's uuid.

        Returns None when either uuid is absent, e.g. because the section
        was removed since the row was built.
        """
        for s_idx, section in enumerate(self._sections):
            if section.uuid != section_uuid:
                continue
            for r_idx, row in enumerate(section.rows):
                if row.uuid == row_uuid:
                    return IndexPath(s_idx, r_idx)
            return None
        return None

    def replace_row(self, path: IndexPath, row: Row) -> None:
        """Swap the row at ``path`` for ``row``.

        Raises:
            ValueError: if the replacement changes the accessory kind or
                collides with another row's uuid in the section.
        """
        section = self._sections[path.section]
        current = section.rows[path.row]
        if row.accessory.kind is not current.accessory.kind:
            raise ValueError(
                f"Row {current.uuid} accessory is {current.accessory.kind.value}, "
                f"cannot become {row.accessory.kind.value}"
            )
        rows = list(section.rows)
        rows[path.row] = row
        self._sections[path.section] = replace(section, rows=tuple(rows))
        self.row_changed.emit(path.section, path.row)

    def update_detail_text(self, row_uuid: str, section_uuid: str, detail_text: Optional[str]) -> bool:
        """Patch one row's detail text. Returns False if the row is gone."""
        path = self.index_path(row_uuid, section_uuid)
        if path is None:
            logger.debug("Detail patch skipped, row %s not in section %s", row_uuid, section_uuid)
            return False
        self.replace_row(path, replace(self.row_at(path), detail_text=detail_text))
        return True

    def update_toggle_value(self, row_uuid: str, section_uuid: str, value: bool) -> bool:
        """Record a switch's new state so later renders show it."""
        path = self.index_path(row_uuid, section_uuid)
        if path is None:
            return False
        row = self.row_at(path)
        if row.accessory.kind is not AccessoryKind.SWITCH_TOGGLE:
            return False
        self.replace_row(path, replace(row, accessory=replace(row.accessory, value=bool(value))))
        return True
