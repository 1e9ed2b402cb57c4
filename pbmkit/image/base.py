from __future__ import annotations

import copy
from typing import Any, Generic, List, Optional, Sequence, Tuple, TypeVar

from ..errors import UnsupportedFormat

S = TypeVar("S")

MAX_SAMPLE = 255


class Image(Generic[S]):
    """Rectangular grid of samples shared by the three Netpbm depths.

    Rows are stored top to bottom; ``get(x, y)`` addresses column ``x`` of
    row ``y``. Subclasses supply the blank sample, sample validation and the
    tonal operations.
    """

    MAGIC_NUMBERS: Tuple[str, ...] = ()

    def __init__(
        self,
        width: int,
        height: int,
        magic_number: Optional[str] = None,
        data: Optional[Sequence[Sequence[S]]] = None,
    ) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"Invalid image size: {width}x{height}")
        self._width = width
        self._height = height
        self._magic_number = self.MAGIC_NUMBERS[0]
        if magic_number is not None:
            self.set_magic_number(magic_number)
        if data is None:
            self._data: List[List[S]] = [[self._blank_sample() for _ in range(width)] for _ in range(height)]
        else:
            self._data = self._validated_rows(data)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def magic_number(self) -> str:
        return self._magic_number

    @property
    def rows(self) -> List[List[S]]:
        """Return a copy of the grid, one list per row."""
        return [list(row) for row in self._data]

    def size(self) -> Tuple[int, int]:
        return self._width, self._height

    def get(self, x: int, y: int) -> S:
        return self._data[y][x]

    def set(self, x: int, y: int, value: S) -> None:
        self._check_sample(value)
        self._data[y][x] = value

    def set_magic_number(self, magic_number: str) -> None:
        if magic_number not in self.MAGIC_NUMBERS:
            raise UnsupportedFormat(
                f"{type(self).__name__} cannot be tagged {magic_number!r}, expected one of {self.MAGIC_NUMBERS}"
            )
        self._magic_number = magic_number

    def flip(self) -> None:
        """Mirror every row left to right."""
        for row in self._data:
            row.reverse()

    def flop(self) -> None:
        """Mirror the row order top to bottom."""
        self._data.reverse()

    def rotate90cw(self) -> None:
        # destination row j is source column j read bottom to top
        self._data = [[self._data[self._height - 1 - i][j] for i in range(self._height)] for j in range(self._width)]
        self._width, self._height = self._height, self._width

    def invert(self) -> None:
        raise NotImplementedError

    def copy(self):
        return copy.deepcopy(self)

    def save(self, path: str) -> None:
        from ..codec import save

        save(self, path)

    def _blank_sample(self) -> S:
        raise NotImplementedError

    def _check_sample(self, value: S) -> None:
        raise NotImplementedError

    def _validated_rows(self, data: Sequence[Sequence[S]]) -> List[List[S]]:
        if len(data) != self._height:
            raise ValueError(f"Expected {self._height} rows, got {len(data)}")
        rows = []
        for row in data:
            if len(row) != self._width:
                raise ValueError(f"Expected rows of {self._width} samples, got {len(row)}")
            for value in row:
                self._check_sample(value)
            rows.append(list(row))
        return rows

    def _same_header(self, other: "Image[Any]") -> bool:
        return (
            type(self) is type(other)
            and self.size() == other.size()
            and self._magic_number == other._magic_number
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Image):
            return NotImplemented
        return self._same_header(other) and self._data == other._data

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._width}x{self._height}, {self._magic_number})"


class ScaledImage(Image[S]):
    """Image whose samples range over ``0..max_value``."""

    def __init__(
        self,
        width: int,
        height: int,
        max_value: int = MAX_SAMPLE,
        magic_number: Optional[str] = None,
        data: Optional[Sequence[Sequence[S]]] = None,
    ) -> None:
        self._max_value = self._checked_max_value(max_value)
        super().__init__(width, height, magic_number, data)

    @property
    def max_value(self) -> int:
        return self._max_value

    def set_max_value(self, max_value: int) -> None:
        """Rescale every sample to the new range, rounding half up."""
        max_value = self._checked_max_value(max_value)
        if max_value == self._max_value:
            return
        old = self._max_value
        self._data = [[self._rescale_sample(value, max_value, old) for value in row] for row in self._data]
        self._max_value = max_value

    def _same_header(self, other: "Image[Any]") -> bool:
        return super()._same_header(other) and self._max_value == getattr(other, "_max_value", None)

    def _rescale_sample(self, value: S, new: int, old: int) -> S:
        raise NotImplementedError

    @staticmethod
    def _checked_max_value(max_value: int) -> int:
        if not 1 <= max_value <= MAX_SAMPLE:
            raise ValueError(f"Max value must be between 1 and {MAX_SAMPLE}, got {max_value}")
        return max_value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._width}x{self._height}, {self._magic_number}, max={self._max_value})"


def rescale(value: int, new: int, old: int) -> int:
    """Scale ``value`` from ``0..old`` to ``0..new``, rounding half up."""
    return (2 * value * new + old) // (2 * old)
