"""Data models supporting the peg solitaire engine."""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from typing import Optional, Tuple

from .constants import (BOARD_TYPES, FIXED_LAYOUT_SIZE, MIN_DIMENSION, BoardType,
                        board_type_info)
from .exceptions import MoveError, ParamsError


Coord = Tuple[int, int]
MoveKey = Tuple[int, int, int, int]

_MOVE_PATTERN = re.compile(r"^\s*(-?\d+),(-?\d+)-(-?\d+),(-?\d+)\s*$")
_PARAMS_PATTERN = re.compile(r"^(\d*)(?:x(\d*))?(.*)$")


@dataclass(frozen=True)
class MoveCandidate:
    """A reverse jump used during generation.

    ``(x, y)`` is where the reverse move starts (a peg that becomes a hole)
    and ``(dx, dy)`` is its unit direction; the midpoint and far point are
    the two cells that become pegs. During play the same line is walked
    backwards: a peg on the far point jumps the midpoint into the origin.
    """

    x: int
    y: int
    dx: int
    dy: int
    cost: int = 0

    @property
    def key(self) -> MoveKey:
        return (self.y, self.x, self.dy, self.dx)

    @property
    def sort_key(self) -> Tuple[int, int, int, int, int]:
        return (self.cost,) + self.key

    @property
    def origin(self) -> Coord:
        return (self.x, self.y)

    @property
    def midpoint(self) -> Coord:
        return (self.x + self.dx, self.y + self.dy)

    @property
    def far_point(self) -> Coord:
        return (self.x + 2 * self.dx, self.y + 2 * self.dy)

    def cells(self) -> Tuple[Coord, Coord, Coord]:
        return (self.origin, self.midpoint, self.far_point)

    def to_forward_move(self) -> "ForwardMove":
        fx, fy = self.far_point
        return ForwardMove(sx=fx, sy=fy, tx=self.x, ty=self.y)

    @classmethod
    def from_key(cls, key: MoveKey, cost: int) -> "MoveCandidate":
        y, x, dy, dx = key
        return cls(x=x, y=y, dx=dx, dy=dy, cost=cost)


@dataclass(frozen=True)
class ForwardMove:
    """A real gameplay jump from ``(sx, sy)`` to ``(tx, ty)``."""

    sx: int
    sy: int
    tx: int
    ty: int

    @property
    def midpoint(self) -> Coord:
        return ((self.sx + self.tx) // 2, (self.sy + self.ty) // 2)

    def cells(self) -> Tuple[Coord, Coord, Coord]:
        return ((self.sx, self.sy), self.midpoint, (self.tx, self.ty))

    def is_straight_jump(self) -> bool:
        dx = abs(self.tx - self.sx)
        dy = abs(self.ty - self.sy)
        return max(dx, dy) == 2 and min(dx, dy) == 0

    def encode(self) -> str:
        return f"{self.sx},{self.sy}-{self.tx},{self.ty}"

    @classmethod
    def decode(cls, text: str) -> "ForwardMove":
        match = _MOVE_PATTERN.match(text)
        if not match:
            raise MoveError(f"Unparseable move: {text!r}")
        sx, sy, tx, ty = (int(group) for group in match.groups())
        return cls(sx=sx, sy=sy, tx=tx, ty=ty)

    def __str__(self) -> str:
        return self.encode()


@dataclass(frozen=True)
class GameParams:
    """Board size and shape selection."""

    width: int = FIXED_LAYOUT_SIZE
    height: int = FIXED_LAYOUT_SIZE
    board_type: BoardType = BoardType.CROSS

    def encode(self, full: bool = True) -> str:
        text = f"{self.width}x{self.height}"
        if full:
            text += board_type_info(self.board_type).key
        return text

    def decode(self, text: str) -> "GameParams":
        """Return a copy updated from ``WxH[type]``.

        A bare ``N`` means a square board; an unrecognised type suffix
        leaves the current board type in place.
        """

        match = _PARAMS_PATTERN.match(text.strip())
        if match is None:
            raise ParamsError(f"Unparseable parameters: {text!r}")
        width_text, height_text, suffix = match.groups()
        width = int(width_text) if width_text else 0
        if height_text is None:
            height = width
        else:
            height = int(height_text) if height_text else 0
        board_type = self.board_type
        for info in BOARD_TYPES:
            if suffix == info.key:
                board_type = info.identifier
        return replace(self, width=width, height=height, board_type=board_type)

    @classmethod
    def from_string(cls, text: str) -> "GameParams":
        return cls().decode(text)

    def validate(self) -> None:
        if self.width < MIN_DIMENSION or self.height < MIN_DIMENSION:
            raise ParamsError("Width and height must both be greater than three")
        if self.board_type in (BoardType.CROSS, BoardType.OCTAGON):
            if self.width != FIXED_LAYOUT_SIZE or self.height != FIXED_LAYOUT_SIZE:
                raise ParamsError(
                    f"This board type is only supported at "
                    f"{FIXED_LAYOUT_SIZE}x{FIXED_LAYOUT_SIZE}"
                )


DEFAULT_PARAMS = GameParams()

PRESETS: Tuple[GameParams, ...] = (
    GameParams(7, 7, BoardType.CROSS),
    GameParams(7, 7, BoardType.OCTAGON),
    GameParams(5, 5, BoardType.RANDOM),
    GameParams(7, 7, BoardType.RANDOM),
    GameParams(9, 9, BoardType.RANDOM),
)


def preset_name(params: GameParams) -> str:
    name = board_type_info(params.board_type).title
    if params.board_type == BoardType.RANDOM:
        name += f" {params.width}x{params.height}"
    return name


def find_preset(name: str) -> Optional[GameParams]:
    wanted = name.strip().lower()
    for params in PRESETS:
        if preset_name(params).lower() == wanted:
            return params
    return None
