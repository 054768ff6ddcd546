from __future__ import annotations

import numpy as np

from pkmeans.core.distance import euclidean_distance


def compute_cost(
    points: np.ndarray, labels: np.ndarray, centroids: np.ndarray
) -> np.ndarray:
    """
    Стоимость по кластерам: сумма (не среднее) расстояний от точек
    кластера до его текущего центроида. Возвращает вектор длины K.
    """
    K = centroids.shape[0]
    dists = euclidean_distance(points, centroids[labels])
    return np.bincount(labels, weights=dists, minlength=K).astype(np.float64)
