"""Device description used to pick platform-dependent rows.

The settings screen only needs a handful of facts about the host: which
interface idiom it should present (phone or pad), what biometry the
passcode screen can advertise, and the strings that go into the
"copy app info" clipboard payload.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from PySide6.QtCore import QSysInfo

from core.logging.logger import get_logger

logger = get_logger(__name__)


class InterfaceIdiom(Enum):
    PHONE = "phone"
    PAD = "pad"


class BiometryType(Enum):
    NONE = "none"
    TOUCH_ID = "touch_id"
    FACE_ID = "face_id"


@dataclass(frozen=True)
class DeviceInfo:
    idiom: InterfaceIdiom = InterfaceIdiom.PHONE
    biometry: BiometryType = BiometryType.NONE
    system_name: str = ""
    system_version: str = ""
    model_name: str = ""

    @property
    def is_pad(self) -> bool:
        return self.idiom is InterfaceIdiom.PAD

    @property
    def os_version(self) -> str:
        return f"{self.system_name} {self.system_version}".strip()

    @classmethod
    def current(cls, idiom: InterfaceIdiom = InterfaceIdiom.PAD) -> "DeviceInfo":
        """Describe the running host.

        Desktop hosts have room for the pad layout, so that is the
        default idiom. Desktop Qt exposes no biometry API.
        """
        info = cls(
            idiom=idiom,
            biometry=BiometryType.NONE,
            system_name=QSysInfo.productType(),
            system_version=QSysInfo.productVersion(),
            model_name=QSysInfo.prettyProductName(),
        )
        logger.debug("Device info: %s", info)
        return info
