"""
Плоские буферы точек в порядке "точка за точкой" (point-major).

Точка i занимает индексы [i*N, (i+1)*N) плоского массива. PointMatrix
владеет таким буфером и даёт доступ по (строка, столбец) с проверкой
границ, не раскрывая арифметику смещений вызывающему коду.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from pkmeans.errors import KMeansConfigError


class PointMatrix:
    """
    Матрица (rows, cols) поверх плоского float64-буфера.

    as_array() и flat возвращают представления без копирования, поэтому
    изменения через 2-D вид видны в плоском буфере и наоборот.
    """

    def __init__(self, buffer: Sequence[float] | np.ndarray, rows: int, cols: int) -> None:
        if rows <= 0 or cols <= 0:
            raise KMeansConfigError(
                f"PointMatrix dimensions must be positive, got ({rows}, {cols})"
            )
        flat = np.asarray(buffer, dtype=np.float64)
        if flat.ndim != 1:
            raise KMeansConfigError(f"Expected a flat buffer, got shape {flat.shape}")
        if flat.size != rows * cols:
            raise KMeansConfigError(
                f"Buffer of length {flat.size} does not hold {rows}x{cols} values"
            )
        self._flat = flat
        self.rows = rows
        self.cols = cols

    @classmethod
    def from_array(cls, arr: np.ndarray) -> PointMatrix:
        """Копирует 2-D массив в новый плоский буфер."""
        arr = np.ascontiguousarray(arr, dtype=np.float64)
        if arr.ndim != 2:
            raise KMeansConfigError(f"Expected a 2-D array, got shape {arr.shape}")
        return cls(arr.reshape(-1).copy(), arr.shape[0], arr.shape[1])

    @property
    def shape(self) -> tuple[int, int]:
        return self.rows, self.cols

    @property
    def flat(self) -> np.ndarray:
        return self._flat

    def as_array(self) -> np.ndarray:
        return self._flat.reshape(self.rows, self.cols)

    def _check_row(self, i: int) -> None:
        if not 0 <= i < self.rows:
            raise IndexError(f"row {i} out of range [0, {self.rows})")

    def row(self, i: int) -> np.ndarray:
        self._check_row(i)
        return self._flat[i * self.cols : (i + 1) * self.cols]

    def __getitem__(self, index: tuple[int, int]) -> float:
        i, j = index
        self._check_row(i)
        if not 0 <= j < self.cols:
            raise IndexError(f"column {j} out of range [0, {self.cols})")
        return float(self._flat[i * self.cols + j])

    def __setitem__(self, index: tuple[int, int], value: float) -> None:
        i, j = index
        self._check_row(i)
        if not 0 <= j < self.cols:
            raise IndexError(f"column {j} out of range [0, {self.cols})")
        self._flat[i * self.cols + j] = value

    def __len__(self) -> int:
        return self.rows

    def __repr__(self) -> str:
        return f"PointMatrix(rows={self.rows}, cols={self.cols})"
