"""Dataclasses describing crop state, event payloads and configuration for rotacrop."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Dict, Literal, Optional, Tuple, Union

import json

BASE_ROTATIONS: Tuple[int, ...] = (0, 90, 180, 270)

Corner = Literal["tl", "tr", "bl", "br"]
CORNERS: Tuple[str, ...] = ("tl", "tr", "bl", "br")

ChangeAction = Literal["rotate", "crop"]


@dataclass(frozen=True)
class Size:
    """Width and height of a rectangle in image pixels."""

    width: float = 0.0
    height: float = 0.0


@dataclass(frozen=True)
class Point:
    """Displacement of a crop centre from the image centre."""

    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True)
class DefaultCrop:
    """Use the largest inscribed rectangle for the current rotation."""


@dataclass(frozen=True)
class ExplicitCrop:
    """A user-sized crop, already clamped when it was stored."""

    size: Size


CropBox = Union[DefaultCrop, ExplicitCrop]


@dataclass(frozen=True)
class CropperState:
    """One undoable crop/rotation state."""

    rotation: float = 0.0  # fine rotation, degrees in [-45, 45]
    base_rotation: int = 0  # 0 | 90 | 180 | 270
    crop: CropBox = field(default_factory=DefaultCrop)
    offset: Point = field(default_factory=Point)

    def __post_init__(self) -> None:
        if self.base_rotation not in BASE_ROTATIONS:
            raise ValueError(
                f"base_rotation must be one of {BASE_ROTATIONS}, "
                f"got {self.base_rotation!r}"
            )

    @property
    def display_angle(self) -> float:
        return self.base_rotation + self.rotation

    @property
    def explicit_size(self) -> Optional[Size]:
        if isinstance(self.crop, ExplicitCrop):
            return self.crop.size
        return None


@dataclass(frozen=True)
class CornerDrag:
    """Resize by dragging one corner handle."""

    corner: Corner


@dataclass(frozen=True)
class MoveDrag:
    """Pan the crop box; start values are captured at press time."""

    start_x: float
    start_y: float
    start_offset: Point


DragMode = Union[CornerDrag, MoveDrag]


@dataclass(frozen=True)
class CropData:
    """Crop rectangle emitted to consumers, top-left relative to image centre."""

    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class RotationData:
    rotation: float
    base_rotation: int


@dataclass(frozen=True)
class ChangeData:
    action: ChangeAction
    crop: CropData
    rotation: RotationData


@dataclass
class CropperConfig:
    """Runtime configuration for a crop session."""

    min_crop_width: float = 250.0
    min_crop_height: float = 250.0
    commit_delay_ms: int = 500  # debounce before a drag/slider value is committed

    def __post_init__(self) -> None:
        if self.min_crop_width < 0 or self.min_crop_height < 0:
            raise ValueError("Minimum crop size must not be negative.")
        if self.commit_delay_ms < 0:
            raise ValueError("commit_delay_ms must not be negative.")

    def to_json(self) -> str:
        return json.dumps(asdict(self), indent=2)

    @staticmethod
    def from_json(text: str) -> "CropperConfig":
        data: Dict = json.loads(text)
        return CropperConfig(
            min_crop_width=float(data.get("min_crop_width", 250.0)),
            min_crop_height=float(data.get("min_crop_height", 250.0)),
            commit_delay_ms=int(data.get("commit_delay_ms", 500)),
        )


__all__ = [
    "BASE_ROTATIONS",
    "CORNERS",
    "ChangeAction",
    "ChangeData",
    "Corner",
    "CornerDrag",
    "CropBox",
    "CropData",
    "CropperConfig",
    "CropperState",
    "DefaultCrop",
    "DragMode",
    "ExplicitCrop",
    "MoveDrag",
    "Point",
    "RotationData",
    "Size",
]
