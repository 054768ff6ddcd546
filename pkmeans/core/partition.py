"""
Разбиение диапазона индексов точек между воркерами.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from pkmeans.errors import KMeansConfigError


@dataclass(frozen=True)
class Partition:
    """Полуинтервал индексов точек [start, end) для одного воркера."""

    start: int
    end: int

    @property
    def size(self) -> int:
        return self.end - self.start

    @property
    def is_empty(self) -> bool:
        return self.end <= self.start

    def as_slice(self) -> slice:
        return slice(self.start, self.end)


def make_partitions(M: int, n_workers: int) -> List[Partition]:
    """
    Делит [0, M) на n_workers смежных непересекающихся диапазонов.

    start_i = floor(M / W) * i, end_i = min(floor(M / W) * (i + 1), M);
    последний диапазон забирает остаток от деления и заканчивается на M.
    При W > M часть диапазонов пустая: это не ошибка, такие воркеры
    просто ничего не делают.

    Args:
        M: Количество точек
        n_workers: Количество воркеров W

    Returns:
        Список из ровно n_workers разбиений, покрывающих [0, M)

    Raises:
        KMeansConfigError: Если M <= 0 или n_workers <= 0
    """
    if M <= 0:
        raise KMeansConfigError(f"number of points must be positive, got M={M}")
    if n_workers <= 0:
        raise KMeansConfigError(
            f"number of workers must be positive, got n_workers={n_workers}"
        )

    per_worker = M // n_workers
    partitions = [
        Partition(per_worker * i, min(per_worker * (i + 1), M))
        for i in range(n_workers - 1)
    ]
    # Хвост с остатком достаётся последнему воркеру
    partitions.append(Partition(per_worker * (n_workers - 1), M))
    return partitions
