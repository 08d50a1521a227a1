from enum import Enum

from opensearchdsl.errors import InvalidArgument


class Direction(str, Enum):
    ASC = 'asc'
    DESC = 'desc'


class SortMode(str, Enum):
    MIN = 'min'
    MAX = 'max'
    SUM = 'sum'
    AVG = 'avg'
    MEDIAN = 'median'


class DistanceType(str, Enum):
    ARC = 'arc'
    PLANE = 'plane'


class ScoreMode(str, Enum):
    MULTIPLY = 'multiply'
    SUM = 'sum'
    FIRST = 'first'
    MIN = 'min'
    MAX = 'max'
    AVG = 'avg'


class BoostMode(str, Enum):
    MULTIPLY = 'multiply'
    SUM = 'sum'
    REPLACE = 'replace'
    MIN = 'min'
    MAX = 'max'
    AVG = 'avg'


class FieldModifier(str, Enum):
    NONE = 'none'
    LOG = 'log'
    LOG1P = 'log1p'
    LOG2P = 'log2p'
    LN = 'ln'
    LN1P = 'ln1p'
    LN2P = 'ln2p'
    SQUARE = 'square'
    SQRT = 'sqrt'
    RECIPROCAL = 'reciprocal'


class DecayMode(str, Enum):
    LINEAR = 'linear'
    EXP = 'exp'
    GAUSS = 'gauss'


class MultiValueMode(str, Enum):
    MIN = 'min'
    MAX = 'max'
    AVG = 'avg'
    SUM = 'sum'


def parse_direction(direction) -> str:
    """Normalize an ordering direction to `asc` or `desc`, in any casing."""
    if not isinstance(direction, str):
        raise InvalidArgument(f'`direction` must be either `asc` or `desc`, got {direction!r}')
    try:
        return Direction(direction.lower()).value
    except ValueError:
        raise InvalidArgument(f'`direction` must be either `asc` or `desc`, got {direction!r}') from None


def parse_choice(enum_cls, value, option: str) -> str:
    if isinstance(value, enum_cls):
        return value.value
    try:
        return enum_cls(value).value
    except ValueError:
        choices = ', '.join(f'`{e.value}`' for e in enum_cls)
        raise InvalidArgument(f'`{option}` must be one of {choices}, got {value!r}') from None
