"""Interactive crop session: history, debounced commits and change signals."""

from __future__ import annotations

from dataclasses import replace
from typing import Any, Optional, Tuple

import logging

from PySide6 import QtCore

from .geometry import (
    can_rotate_quarter,
    clamp_crop_dims,
    clamp_offset,
    clamp_rotation,
    crop_data_for,
    crop_is_contained,
    effective_dims,
    max_rotation_for,
    resolve_crop_size,
    resolve_offset,
)
from .history import History, HistorySnapshot
from .models import (
    CORNERS,
    ChangeData,
    CornerDrag,
    CropData,
    CropperConfig,
    CropperState,
    DefaultCrop,
    DragMode,
    ExplicitCrop,
    MoveDrag,
    Point,
    RotationData,
    Size,
)

_LOGGER = logging.getLogger(__name__)

MIN_DRAG_SIZE = 20.0


class CropSession(QtCore.QObject):
    """Owns one image's crop state and turns interactions into history entries.

    Continuous interactions (slider, drags) only stage a value and restart
    the commit timer; the staged value is committed once the timer runs out.
    Discrete actions commit straight away. Any direct history change cancels
    a pending commit first.
    """

    cropChanged = QtCore.Signal(object)  # CropData
    rotationChanged = QtCore.Signal(object)  # RotationData
    changed = QtCore.Signal(object)  # ChangeData
    historyChanged = QtCore.Signal(bool, bool)  # can_undo, can_redo

    def __init__(
        self,
        config: Optional[CropperConfig] = None,
        parent: Optional[QtCore.QObject] = None,
    ) -> None:
        super().__init__(parent)
        self._cfg = replace(config) if config is not None else CropperConfig()
        self._history: History[CropperState] = History(CropperState())
        self._display = Size()
        self._image_loaded = False
        self._drag: Optional[DragMode] = None
        self._prev_committed: Optional[CropperState] = None
        self._last_committed: Optional[CropperState] = self._history.committed
        self._history_flags: Tuple[bool, bool] = (False, False)

        self._commit_timer = QtCore.QTimer(self)
        self._commit_timer.setSingleShot(True)
        self._commit_timer.setInterval(self._cfg.commit_delay_ms)
        self._commit_timer.timeout.connect(self._on_commit_timeout)

    # ----------------------------- Properties ---------------------------------

    @property
    def config(self) -> CropperConfig:
        return self._cfg

    @property
    def state(self) -> CropperState:
        return self._history.state

    @property
    def committed(self) -> CropperState:
        return self._history.committed

    @property
    def can_undo(self) -> bool:
        return self._history.can_undo

    @property
    def can_redo(self) -> bool:
        return self._history.can_redo

    @property
    def image_loaded(self) -> bool:
        return self._image_loaded

    @property
    def display_size(self) -> Size:
        return self._display

    @property
    def effective_dims(self) -> Size:
        return effective_dims(self._display, self.state.base_rotation)

    @property
    def crop_size(self) -> Size:
        return self._crop_size_for(self.state)

    @property
    def offset(self) -> Point:
        return self._offset_for(self.state)

    @property
    def max_rotation(self) -> float:
        return max_rotation_for(
            self.state,
            self.effective_dims,
            self._cfg.min_crop_width,
            self._cfg.min_crop_height,
        )

    @property
    def crop_data(self) -> CropData:
        return self._crop_data_for(self.state)

    @property
    def rotation_data(self) -> RotationData:
        return RotationData(self.state.rotation, self.state.base_rotation)

    @property
    def can_rotate_90(self) -> bool:
        return can_rotate_quarter(
            self._display,
            self.state.base_rotation,
            self._cfg.min_crop_width,
            self._cfg.min_crop_height,
        )

    @property
    def is_commit_pending(self) -> bool:
        return self._commit_timer.isActive()

    @property
    def drag(self) -> Optional[DragMode]:
        return self._drag

    def get_history(self) -> HistorySnapshot[CropperState]:
        return self._history.get_history()

    # ----------------------------- Image lifecycle ----------------------------

    def load_image(self, width: float, height: float) -> None:
        """Start over with a new image of the given display size."""
        if width <= 0 or height <= 0:
            raise ValueError(f"Image size must be positive, got {width}x{height}.")
        self._cancel_pending_commit()
        self._drag = None
        self._display = Size(float(width), float(height))
        self._image_loaded = True
        self._prev_committed = None
        self._history.reset(CropperState())
        self._sync()

    def clear_image(self) -> None:
        self._cancel_pending_commit()
        self._drag = None
        self._display = Size()
        self._image_loaded = False
        self._history.reset(CropperState())
        self._sync()

    def resize_display(self, width: float, height: float) -> None:
        size = Size(float(width), float(height))
        if size == self._display:
            return
        self._display = size
        self._enforce_rotation_limit()

    def set_min_size(self, width: float, height: float) -> None:
        self._cfg = replace(
            self._cfg, min_crop_width=float(width), min_crop_height=float(height)
        )
        self._enforce_rotation_limit()

    # ----------------------------- Interactions -------------------------------

    def set_rotation(self, degrees: float) -> None:
        """Slider input; committed after the debounce delay."""
        self._update_state(rotation=clamp_rotation(float(degrees), self.max_rotation))

    def begin_corner_drag(self, corner: str) -> None:
        if corner not in CORNERS:
            raise ValueError(f"Unknown corner {corner!r}; expected one of {CORNERS}.")
        self._drag = CornerDrag(corner)  # type: ignore[arg-type]

    def begin_move(self, x: float, y: float) -> None:
        self._drag = MoveDrag(float(x), float(y), self.state.offset)

    def drag_to(self, x: float, y: float) -> None:
        """Pointer motion, in coordinates relative to the workspace centre."""
        drag = self._drag
        if drag is None:
            return
        dims = self.effective_dims
        state = self.state
        if isinstance(drag, MoveDrag):
            crop = self.crop_size
            new_offset = clamp_offset(
                drag.start_offset.x + (x - drag.start_x),
                drag.start_offset.y + (y - drag.start_y),
                crop.width,
                crop.height,
                dims.width,
                dims.height,
                state.rotation,
            )
            self._update_state(offset=new_offset)
        elif isinstance(drag, CornerDrag):
            # Resizing keeps the box centred.
            mx = -x if drag.corner in ("tl", "bl") else x
            my = -y if drag.corner in ("tl", "tr") else y
            new_size = clamp_crop_dims(
                max(mx * 2.0, MIN_DRAG_SIZE),
                max(my * 2.0, MIN_DRAG_SIZE),
                dims.width,
                dims.height,
                state.rotation,
                self._cfg.min_crop_width,
                self._cfg.min_crop_height,
            )
            self._update_state(crop=ExplicitCrop(new_size), offset=Point())
            self._enforce_rotation_limit()
        else:
            raise TypeError(f"Unknown drag mode {drag!r}")

    def end_drag(self) -> None:
        self._drag = None

    # ----------------------------- Discrete actions ---------------------------

    def rotate_90(self) -> bool:
        if not self.can_rotate_90:
            _LOGGER.debug("rotate_90 skipped: swapped image below minimum crop size")
            return False
        self._commit_now(
            base_rotation=(self.state.base_rotation + 90) % 360,
            rotation=0.0,
            crop=DefaultCrop(),
            offset=Point(),
        )
        return True

    def rotate_180(self) -> None:
        self._commit_now(
            base_rotation=(self.state.base_rotation + 180) % 360,
            rotation=0.0,
            crop=DefaultCrop(),
            offset=Point(),
        )

    def reset_rotation(self) -> bool:
        """Back to an upright image with the default crop.

        Does nothing when neither rotation is set.
        """
        state = self.state
        if state.rotation == 0 and state.base_rotation == 0:
            return False
        self._commit_now(
            rotation=0.0, base_rotation=0, crop=DefaultCrop(), offset=Point()
        )
        return True

    def reset_crop(self) -> None:
        self._commit_now(crop=DefaultCrop(), offset=Point())

    def undo(self) -> None:
        self._cancel_pending_commit()
        self._history.undo()
        self._sync()

    def redo(self) -> None:
        self._cancel_pending_commit()
        self._history.redo()
        self._sync()

    def commit_pending(self) -> None:
        """Commit a pending debounced value right away."""
        if not self._commit_timer.isActive():
            return
        self._commit_timer.stop()
        self._on_commit_timeout()

    # ----------------------------- Internals ----------------------------------

    def _crop_size_for(self, state: CropperState) -> Size:
        dims = effective_dims(self._display, state.base_rotation)
        return resolve_crop_size(
            state, dims, self._cfg.min_crop_width, self._cfg.min_crop_height
        )

    def _offset_for(self, state: CropperState) -> Point:
        dims = effective_dims(self._display, state.base_rotation)
        return resolve_offset(state, self._crop_size_for(state), dims)

    def _crop_data_for(self, state: CropperState) -> CropData:
        return crop_data_for(self._crop_size_for(state), self._offset_for(state))

    def _update_state(self, **changes: Any) -> None:
        self._history.stage(replace(self._history.state, **changes))
        self._commit_timer.start()

    def _commit_now(self, **changes: Any) -> None:
        self._cancel_pending_commit()
        self._history.commit(replace(self._history.state, **changes))
        self._sync()

    def _cancel_pending_commit(self) -> None:
        if self._commit_timer.isActive():
            self._commit_timer.stop()

    @QtCore.Slot()
    def _on_commit_timeout(self) -> None:
        self._history.commit()
        self._sync()

    def _enforce_rotation_limit(self) -> None:
        rotation = self.state.rotation
        clamped = clamp_rotation(rotation, self.max_rotation)
        if clamped != rotation:
            _LOGGER.debug("rotation %.2f clamped to %.2f", rotation, clamped)
            self._update_state(rotation=clamped)

    def _sync(self) -> None:
        committed = self._history.committed
        if committed is not self._last_committed:
            self._last_committed = committed
            if self._image_loaded:
                self._emit_committed(committed)

        flags = (self._history.can_undo, self._history.can_redo)
        if flags != self._history_flags:
            self._history_flags = flags
            self.historyChanged.emit(*flags)

        self._enforce_rotation_limit()

    def _emit_committed(self, committed: CropperState) -> None:
        prev = self._prev_committed
        self._prev_committed = committed
        rotation_changed = (
            prev is None
            or committed.rotation != prev.rotation
            or committed.base_rotation != prev.base_rotation
        )

        crop = self._crop_data_for(committed)
        dims = effective_dims(self._display, committed.base_rotation)
        if not crop_is_contained(
            crop.x + crop.width / 2.0,
            crop.y + crop.height / 2.0,
            crop.width,
            crop.height,
            dims.width,
            dims.height,
            committed.rotation,
            tolerance=0.5,
        ):
            _LOGGER.warning(
                "Committed crop %.1fx%.1f leaves the image at %.1f degrees; "
                "minimum crop size is not feasible",
                crop.width,
                crop.height,
                committed.rotation,
            )
        rotation = RotationData(committed.rotation, committed.base_rotation)
        self.cropChanged.emit(crop)
        self.rotationChanged.emit(rotation)
        self.changed.emit(
            ChangeData(
                action="rotate" if rotation_changed else "crop",
                crop=crop,
                rotation=rotation,
            )
        )


__all__ = ["CropSession", "MIN_DRAG_SIZE"]
