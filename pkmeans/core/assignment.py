from __future__ import annotations

import numpy as np

from pkmeans.core.distance import euclidean_distance
from pkmeans.core.partition import Partition

# Стартовое значение минимального расстояния: первый центроид всегда выигрывает
DISTANCE_SENTINEL: float = 1e30


def assign_partition(
    points: np.ndarray,
    centroids: np.ndarray,
    labels: np.ndarray,
    partition: Partition,
) -> None:
    """
    Назначает каждую точку из partition ближайшему центроиду.

    Центроиды перебираются по возрастанию индекса, сравнение строгое (<),
    поэтому при равенстве расстояний остаётся центроид с меньшим индексом.
    Пишет только в labels[start:end]; points и centroids только читает.
    """
    if partition.is_empty:
        return

    block = points[partition.as_slice()]
    min_dist = np.full(block.shape[0], DISTANCE_SENTINEL, dtype=np.float64)
    best = np.zeros(block.shape[0], dtype=labels.dtype)

    for k in range(centroids.shape[0]):
        d = euclidean_distance(block, centroids[k])
        closer = d < min_dist
        min_dist[closer] = d[closer]
        best[closer] = k

    labels[partition.as_slice()] = best
