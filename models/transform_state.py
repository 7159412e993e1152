"""Geometric transform state: quarter-turn rotation plus two flips."""

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class TransformState:
    """Rotation in degrees clockwise (0/90/180/270) and mirror flags."""

    rotation: int = 0
    flip_horizontal: bool = False
    flip_vertical: bool = False

    def __post_init__(self):
        if self.rotation % 90 != 0:
            raise ValueError(f"Rotation must be a multiple of 90, got {self.rotation}")
        object.__setattr__(self, 'rotation', int(self.rotation) % 360)

    def rotate_left(self) -> 'TransformState':
        return replace(self, rotation=self.rotation - 90)

    def rotate_right(self) -> 'TransformState':
        return replace(self, rotation=self.rotation + 90)

    def toggle_flip_horizontal(self) -> 'TransformState':
        return replace(self, flip_horizontal=not self.flip_horizontal)

    def toggle_flip_vertical(self) -> 'TransformState':
        return replace(self, flip_vertical=not self.flip_vertical)

    @property
    def swaps_dimensions(self) -> bool:
        return self.rotation % 180 != 0

    def is_identity(self) -> bool:
        return self.rotation == 0 and not self.flip_horizontal and not self.flip_vertical
