# coolcalc/core/models.py
from __future__ import annotations

import uuid
from dataclasses import dataclass, field, asdict
from enum import Enum
from typing import Any, Dict, Union


class UnknownCategory(LookupError):
    """Raised when a room type has no base load in the factor table."""


class RoomType(str, Enum):
    BEDROOM = "bedroom"
    LIVING_ROOM = "living_room"
    KITCHEN = "kitchen"
    OFFICE = "office"
    SERVER_ROOM = "server_room"
    GYM = "gym"

    @classmethod
    def parse(cls, value: Union["RoomType", str]) -> "RoomType":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value))
        except ValueError:
            raise UnknownCategory(f"Unknown room type: {value!r}") from None


@dataclass(frozen=True)
class EnvironmentalFactors:
    high_sun_exposure: bool = False
    poor_insulation: bool = False
    extra_occupants: bool = False
    high_electronic_load: bool = False

    def active(self) -> Dict[str, bool]:
        return {k: v for k, v in asdict(self).items() if v}


@dataclass(frozen=True)
class CalculationResult:
    watts: float
    kw: float
    btu: float
    hp: float
    area: float
    room_type: RoomType
    base_load: float
    adjustment_multiplier: float
    tropical: bool


def _new_id() -> str:
    return uuid.uuid4().hex


@dataclass
class RoomRecord:
    room_name: str
    area: float
    kw: float
    btu: float
    hp: float
    room_type: RoomType
    id: str = field(default_factory=_new_id)

    @classmethod
    def from_result(cls, result: CalculationResult, room_name: str) -> "RoomRecord":
        return cls(
            room_name=room_name,
            area=result.area,
            kw=result.kw,
            btu=result.btu,
            hp=result.hp,
            room_type=result.room_type,
        )

    # Stored with the camelCase keys used by earlier saves
    def to_json(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "roomName": self.room_name,
            "area": self.area,
            "kw": self.kw,
            "btu": self.btu,
            "hp": self.hp,
            "roomType": self.room_type.value,
        }

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "RoomRecord":
        return cls(
            id=str(data["id"]),
            room_name=str(data["roomName"]),
            area=float(data["area"]),
            kw=float(data["kw"]),
            btu=float(data["btu"]),
            hp=float(data["hp"]),
            room_type=RoomType.parse(data["roomType"]),
        )
