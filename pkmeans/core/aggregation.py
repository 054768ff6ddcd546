from __future__ import annotations

import numpy as np


def compute_centroids(
    points: np.ndarray, labels: np.ndarray, centroids: np.ndarray
) -> np.ndarray:
    """
    Пересчитывает центроиды как среднее назначенных им точек (in place).

    Пустой кластер получает count=1 и нулевую сумму, т.е. его центроид
    схлопывается в начало координат. Предыдущая позиция не сохраняется,
    кластер не переинициализируется.

    Args:
        points: Точки (M, N), только чтение
        labels: Назначения (M,), значения в [0, K)
        centroids: Центроиды (K, N), перезаписываются

    Returns:
        Число точек в каждом кластере до ограничения снизу единицей (K,)
    """
    K = centroids.shape[0]
    sums = np.zeros_like(centroids, dtype=np.float64)
    # add.at суммирует по точкам строго по порядку, без буферизации дублей
    np.add.at(sums, labels, points)
    counts = np.bincount(labels, minlength=K).astype(np.int64)

    divisor = np.maximum(counts, 1)
    centroids[...] = sums / divisor[:, None]
    return counts
