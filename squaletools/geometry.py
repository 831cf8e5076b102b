"""Fixed-point 3D rotation and projection of wireframe objects."""

from __future__ import annotations

from array import array
from dataclasses import dataclass
from itertools import chain

ZOFF = 95
XOFF = 70
YOFF = 70
SCREEN_CENTER = 256 // 2
FACE_STRIDE = 16
QUARTER_TURN = 64

# Signed 8-bit sine/cosine table, 256 steps per turn (plus a closing entry).
_SIN_COS_HEX = (
    "00030609 0c0f1215 181c1f22 25282a2d 30333639 3c3e4144 46494b4e 50535557"
    "5a5c5e60 62646668 696b6d6e 70717374 75767778 797a7b7c 7c7d7e7e 7e7f7f7f"
    "7f7f7f7f 7e7e7e7d 7d7c7b7a 7a797876 75747371 706f6d6b 6a686664 62605e5c"
    "5a585553 514e4c49 4744413f 3c393634 312e2b28 25221f1c 19161310 0d090603"
    "00fdfaf7 f4f1edea e7e4e1de dbd8d5d2 d0cdcac7 c4c2bfbc bab7b4b2 b0adaba9"
    "a6a4a2a0 9e9c9a98 96959392 908f8d8c 8b8a8887 87868584 83838282 82818181"
    "81818181 82828283 83848586 86878889 8b8c8d8e 90919395 96989a9c 9ea0a2a4"
    "a6a8abad afb2b4b7 b9bcbec1 c4c7c9cc cfd2d5d8 dbdee1e4 e7eaedf0 f3f6f9fd"
    "00"
)

SIN_COS: tuple[int, ...] = tuple(array("b", bytes.fromhex(_SIN_COS_HEX)))

Line = tuple[int, int, int, int]


def _int16(value: int) -> int:
    return ((value + 0x8000) & 0xFFFF) - 0x8000


def _div(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


@dataclass(frozen=True)
class Dot:
    """A point in 3D space with 16-bit signed coordinates."""

    x: int
    y: int
    z: int


@dataclass(frozen=True)
class Object3D:
    """A wireframe object: ``faces`` triangles of 16 signed bytes each.

    Each face holds three vertices as ``x, y, z, flag`` followed by four
    padding bytes. The flags of vertices 0, 1 and 2 enable the edges
    0-1, 1-2 and 0-2 respectively.
    """

    faces: int
    vertex: tuple[int, ...]

    def __post_init__(self) -> None:
        if self.faces < 0:
            raise ValueError("face count must not be negative")
        if len(self.vertex) < self.faces * FACE_STRIDE:
            raise ValueError("vertex data too short for the face count")


def _trig(angle: int) -> tuple[int, int]:
    angle &= 0xFF
    return SIN_COS[angle], SIN_COS[(angle + QUARTER_TURN) & 0xFF]


def rotate_x(point: Dot, angle: int) -> Dot:
    """Rotate ``point`` around the x axis by ``angle`` (256 steps per turn)."""
    cosv, sinv = _trig(angle)
    y = _int16(_div(point.y * cosv - point.z * sinv, 128))
    z = _int16(_div(point.y * sinv + point.z * cosv, 128))
    return Dot(point.x, y, z)


def rotate_y(point: Dot, angle: int) -> Dot:
    """Rotate ``point`` around the y axis by ``angle`` (256 steps per turn)."""
    cosv, sinv = _trig(angle)
    x = _int16(_div(point.x * cosv - point.z * sinv, 128))
    z = _int16(_div(point.x * sinv + point.z * cosv, 128))
    return Dot(x, point.y, z)


def rotate_z(point: Dot, angle: int) -> Dot:
    """Rotate ``point`` around the z axis by ``angle`` (256 steps per turn)."""
    cosv, sinv = _trig(angle)
    x = _int16(_div(point.x * cosv - point.y * sinv, 128))
    y = _int16(_div(point.x * sinv + point.y * cosv, 128))
    return Dot(x, y, point.z)


def _project(point: Dot, xrotate: int, yrotate: int, zrotate: int) -> tuple[int, int]:
    if xrotate & 0xFF:
        point = rotate_x(point, xrotate + QUARTER_TURN)
    if yrotate & 0xFF:
        point = rotate_y(point, yrotate + QUARTER_TURN)
    if zrotate & 0xFF:
        point = rotate_z(point, zrotate + QUARTER_TURN)
    depth = point.z + ZOFF
    sx = _div(_int16(point.x << 6), depth) + SCREEN_CENTER + XOFF
    sy = _div(_int16(point.y << 6), depth) + SCREEN_CENTER + YOFF
    return sx & 0xFF, sy & 0xFF


def calc_polygon(polygon, xrotate: int, yrotate: int, zrotate: int) -> list[Line]:
    """Rotate and project one face, returning its enabled edges as screen lines."""
    values = tuple(polygon)
    if len(values) < 12:
        raise ValueError("a polygon needs at least 12 values")
    flags = (values[3], values[7], values[11])
    needed = (flags[0] or flags[2], flags[0] or flags[1], flags[1] or flags[2])

    points: dict[int, tuple[int, int]] = {}
    for index, wanted in enumerate(needed):
        if wanted:
            x, y, z = values[index * 4 : index * 4 + 3]
            points[index] = _project(Dot(x, y, z), xrotate, yrotate, zrotate)

    return [
        points[a] + points[b]
        for flag, (a, b) in zip(flags, ((0, 1), (1, 2), (0, 2)))
        if flag
    ]


def calc_object(obj: Object3D, xrotate: int, yrotate: int, zrotate: int) -> list[Line]:
    """Return the screen lines of every face of ``obj``."""
    lines = []
    for face in range(obj.faces):
        start = face * FACE_STRIDE
        lines.extend(calc_polygon(obj.vertex[start : start + FACE_STRIDE], xrotate, yrotate, zrotate))
    return lines


def _mesh(*faces) -> Object3D:
    """Build an object from faces given as three ``(x, y, z, flag)`` vertices."""
    padding = (0, 0, 0, 0)
    vertex = tuple(chain.from_iterable(chain.from_iterable((*face, padding)) for face in faces))
    return Object3D(len(faces), vertex)


BOX01 = _mesh(
    ((-16, -30, -29, 1), (-16, 32, -29, 0), (44, -30, -29, 0)),
    ((44, 32, -29, 1), (44, -30, -29, 0), (-16, 32, -29, 0)),
    ((-16, -30, 31, 1), (-16, -30, -29, 0), (44, -30, 31, 0)),
    ((44, -30, -29, 1), (44, -30, 31, 0), (-16, -30, -29, 1)),
    ((-16, 32, 31, 1), (-16, -30, 31, 0), (44, 32, 31, 0)),
    ((44, -30, 31, 1), (44, 32, 31, 0), (-16, -30, 31, 1)),
    ((-16, 32, -29, 1), (-16, 32, 31, 0), (44, 32, -29, 1)),
    ((44, 32, 31, 1), (44, 32, -29, 0), (-16, 32, 31, 1)),
)

HEDRA01 = _mesh(
    ((37, 33, -5, 1), (-37, 33, -5, 1), (0, -3, 47, 1)),
    ((-37, -40, -5, 1), (37, -40, -5, 1), (0, -3, 47, 1)),
    ((37, -40, -5, 1), (0, -3, -57, 1), (37, 33, -5, 1)),
    ((-37, -40, -5, 1), (-37, 33, -5, 1), (0, -3, -57, 1)),
)

_APEX = (3, -4, 34, 1)
_BASE_CENTER = (3, -4, -10, 1)
_BASE = ((-35, -54, -10), (58, -32, -10), (40, 45, -10), (-52, 23, -10))
_BASE_EDGES = tuple(zip(_BASE, _BASE[1:] + _BASE[:1]))

PYRAMID01 = _mesh(
    *((_APEX, (*a, 0), (*b, 0)) for a, b in _BASE_EDGES),
    *(((*a, 0), _BASE_CENTER, (*b, 1)) for a, b in _BASE_EDGES),
)

OBJECTS = (HEDRA01, BOX01, PYRAMID01)