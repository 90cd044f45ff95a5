"""Triangular color table keyed by unordered vertex pairs."""

from typing import Iterator

from ..constants import COLOR_RAMP, MAX_CHANNEL

Color = tuple[int, int, int]


def _clamp(value: int) -> int:
    return max(0, min(MAX_CHANNEL, value))


def blend_color(i: int, j: int, num_points: int) -> Color:
    """
    Color for the line between vertices i and j.

    Red ramps with i and green with j; blue takes the complement of their
    mean, giving an orange-to-blue blend across the polygon.
    """
    red = _clamp(i * COLOR_RAMP // num_points)
    green = _clamp(j * COLOR_RAMP // num_points)
    blue = _clamp(MAX_CHANNEL - (red + green) // 2)
    return (red, green, blue)


def pair_index(i: int, j: int) -> int:
    """Flat storage slot of the unordered pair {i, j}."""
    if i == j:
        raise ValueError(f"No line joins vertex {i} to itself")
    if i < j:
        i, j = j, i
    return i * (i - 1) // 2 + j


class ColorTable:
    """
    Immutable colors for every unordered vertex pair.

    Only pairs with i > j are stored, packed row after row into a flat tuple:
    row i holds i entries, so the table has num_points * (num_points - 1) / 2
    entries in total.
    """

    def __init__(self, num_points: int):
        self.num_points = num_points
        self._colors: tuple[Color, ...] = tuple(
            blend_color(i, j, num_points)
            for i in range(num_points)
            for j in range(i)
        )

    def __len__(self) -> int:
        return len(self._colors)

    def __getitem__(self, pair: tuple[int, int]) -> Color:
        i, j = pair
        for index in (i, j):
            if not 0 <= index < self.num_points:
                raise IndexError(f"Vertex {index} out of range for {self.num_points} points")
        return self._colors[pair_index(i, j)]

    def row(self, i: int) -> tuple[Color, ...]:
        """Colors of the lines from vertex i to every lower vertex."""
        if not 0 <= i < self.num_points:
            raise IndexError(f"Vertex {i} out of range for {self.num_points} points")
        start = i * (i - 1) // 2
        return self._colors[start:start + i]

    def items(self) -> Iterator[tuple[tuple[int, int], Color]]:
        """Yield ((i, j), color) for every stored pair, i > j, in storage order."""
        position = 0
        for i in range(self.num_points):
            for j in range(i):
                yield (i, j), self._colors[position]
                position += 1
