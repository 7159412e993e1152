"""Editor session: command reducer plus render/export bookkeeping.

The GUI turns user actions into commands. ``reduce`` maps a state and a
command to the next state; ``EditorSession`` owns the current state, issues
numbered render snapshots and keeps the newest committed render for export.
"""

from dataclasses import dataclass, field, replace
from typing import Optional, Union

from models.adjustments import AdjustmentVector
from models.errors import MissingImageError
from models.render_snapshot import RenderResult, RenderSnapshot, SourceImage
from models.transform_state import TransformState
from engines.compositor import render
from engines.exporter import DEFAULT_FORMAT, ExportedImage, export
from engines.filter_catalog import NONE_FILTER, normalize_filter_id
from utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class SelectFilter:
    filter_id: str


@dataclass(frozen=True)
class SetAdjustment:
    name: str
    value: float


@dataclass(frozen=True)
class RotateLeft:
    pass


@dataclass(frozen=True)
class RotateRight:
    pass


@dataclass(frozen=True)
class FlipHorizontal:
    pass


@dataclass(frozen=True)
class FlipVertical:
    pass


@dataclass(frozen=True)
class Download:
    fmt: str = DEFAULT_FORMAT


Command = Union[
    SelectFilter, SetAdjustment, RotateLeft, RotateRight, FlipHorizontal, FlipVertical, Download
]


@dataclass(frozen=True)
class EditorState:
    source: Optional[SourceImage] = None
    filter_id: str = NONE_FILTER
    adjustments: AdjustmentVector = field(default_factory=AdjustmentVector)
    transform: TransformState = field(default_factory=TransformState)

    @property
    def has_image(self) -> bool:
        return self.source is not None


def load_state(source: Optional[SourceImage]) -> EditorState:
    """Fresh state for a newly loaded image: no filter, neutral sliders, no transform."""
    return EditorState(source=source)


def reduce(state: EditorState, command: Command) -> EditorState:
    """Apply one edit command. ``Download`` leaves the state unchanged."""
    if isinstance(command, SelectFilter):
        return replace(state, filter_id=normalize_filter_id(command.filter_id))
    if isinstance(command, SetAdjustment):
        return replace(state, adjustments=state.adjustments.with_value(command.name, command.value))
    if isinstance(command, RotateLeft):
        return replace(state, transform=state.transform.rotate_left())
    if isinstance(command, RotateRight):
        return replace(state, transform=state.transform.rotate_right())
    if isinstance(command, FlipHorizontal):
        return replace(state, transform=state.transform.toggle_flip_horizontal())
    if isinstance(command, FlipVertical):
        return replace(state, transform=state.transform.toggle_flip_vertical())
    if isinstance(command, Download):
        return state
    raise TypeError(f"Unknown command: {command!r}")


class EditorSession:
    """Holds the editing state for one loaded image at a time."""

    def __init__(self):
        self._state = EditorState()
        self._issued = 0
        self._load_sequence = 0
        self._latest: Optional[RenderResult] = None

    @property
    def state(self) -> EditorState:
        return self._state

    @property
    def latest_result(self) -> Optional[RenderResult]:
        return self._latest

    @property
    def has_image(self) -> bool:
        return self._state.has_image

    def load(self, source: SourceImage) -> RenderSnapshot:
        """Replace the image, reset all edits and issue the first snapshot."""
        self._state = load_state(source)
        self._latest = None
        snapshot = self.snapshot()
        self._load_sequence = snapshot.sequence
        logger.info("Loaded %s (%dx%d)", source.name, source.width, source.height)
        return snapshot

    def clear(self) -> None:
        self._state = EditorState()
        self._latest = None
        self._issued += 1
        self._load_sequence = self._issued

    def snapshot(self) -> RenderSnapshot:
        """Issue a numbered snapshot of the current state."""
        if self._state.source is None:
            raise MissingImageError("No image loaded")
        self._issued += 1
        return RenderSnapshot(
            source=self._state.source,
            filter_id=self._state.filter_id,
            adjustments=self._state.adjustments,
            transform=self._state.transform,
            sequence=self._issued,
        )

    def apply(self, command: Command) -> RenderSnapshot:
        """Reduce an edit command and return the snapshot to render."""
        if not self.has_image:
            raise MissingImageError("No image loaded")
        self._state = reduce(self._state, command)
        return self.snapshot()

    def commit(self, result: RenderResult) -> bool:
        """
        Accept a finished render unless it is stale.

        A result is stale when a newer one is already committed or when it was
        issued for an image that has since been replaced.
        """
        if result.sequence < self._load_sequence:
            logger.debug("Dropped render #%d from a previous image", result.sequence)
            return False
        if self._latest is not None and result.sequence <= self._latest.sequence:
            logger.debug("Dropped stale render #%d (have #%d)", result.sequence, self._latest.sequence)
            return False
        self._latest = result
        return True

    def export(self, fmt: str = DEFAULT_FORMAT) -> ExportedImage:
        """Encode the latest committed render."""
        return export(self._latest, fmt)

    def dispatch(self, command: Command) -> Union[RenderResult, ExportedImage]:
        """
        Synchronous path: apply, render and commit; or export for ``Download``.

        A ``Download`` straight after ``load`` renders the current state first,
        so the unedited image can be exported without any edit command.
        """
        if isinstance(command, Download):
            if self.has_image and self._latest is None:
                self.render_current()
            return self.export(command.fmt)
        result = render(self.apply(command))
        self.commit(result)
        return result

    def render_current(self) -> RenderResult:
        """Render and commit the current state without changing it."""
        result = render(self.snapshot())
        self.commit(result)
        return result
