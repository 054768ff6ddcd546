"""
Плоский интерфейс K-means поверх буферов в порядке point-major.

Вызывающий код передаёт три буфера и скаляры; центроиды и назначения
перезаписываются на месте. Подходит для обмена данными с внешними
генераторами, загрузчиками и CLI без промежуточных 2-D структур.
"""

from __future__ import annotations

from typing import Any, MutableSequence

import numpy as np

from pkmeans.core.base import KMeansResult
from pkmeans.core.cpu_threaded import DEFAULT_N_WORKERS, KMeansCPUThreaded, ThreadingConfig
from pkmeans.data.buffers import PointMatrix
from pkmeans.data.validation import (
    validate_buffer_length,
    validate_label_dtype,
    validate_scalars,
)


def kmeans_thread(
    data: MutableSequence[float] | np.ndarray,
    cluster_centroids: MutableSequence[float] | np.ndarray,
    cluster_assignments: MutableSequence[int] | np.ndarray,
    M: int,
    N: int,
    K: int,
    epsilon: float,
    n_workers: int = DEFAULT_N_WORKERS,
    max_iters: int | None = None,
    logger: Any | None = None,
) -> KMeansResult:
    """
    Запускает многопоточный K-means на плоских буферах.

    Args:
        data: M*N координат точек, data[i*N:(i+1)*N]: точка i; не изменяется
        cluster_centroids: K*N координат начальных центроидов; по завершении
            содержит итоговые центроиды
        cluster_assignments: Буфер длины M; по завершении
            cluster_assignments[i]: индекс ближайшего кластера точки i
        M: Количество точек
        N: Размерность
        K: Количество кластеров
        epsilon: Порог сходимости по изменению стоимости каждого кластера
        n_workers: Количество воркеров фазы назначения
        max_iters: Необязательный лимит итераций (по умолчанию без лимита)
        logger: Необязательный логгер

    Returns:
        KMeansResult (результат также записан в переданные буферы)

    Raises:
        KMeansConfigError: При некорректных скалярах или длинах буферов;
            бросается до начала вычислений
    """
    validate_scalars(M, N, K, epsilon, n_workers, max_iters)
    validate_buffer_length("data", len(data), M * N)
    validate_buffer_length("centroid", len(cluster_centroids), K * N)
    validate_buffer_length("assignment", len(cluster_assignments), M)
    if isinstance(cluster_assignments, np.ndarray):
        validate_label_dtype(cluster_assignments.dtype, K)

    points = PointMatrix(data, M, N)
    centroids = PointMatrix(cluster_centroids, K, N)
    labels = np.zeros(M, dtype=np.int64)

    model = KMeansCPUThreaded(
        n_clusters=K,
        tol=epsilon,
        max_iters=max_iters,
        threads=ThreadingConfig(n_workers=n_workers),
        logger=logger,
    )
    result = model.fit(points.as_array(), centroids.as_array(), labels)

    centroids.as_array()[...] = model.centroids
    if centroids.flat is not cluster_centroids:
        # Буфер вызывающего кода не float64 ndarray: копируем обратно поэлементно
        cluster_centroids[:] = centroids.flat.tolist()
    if isinstance(cluster_assignments, np.ndarray):
        cluster_assignments[:] = labels
    else:
        cluster_assignments[:] = labels.tolist()

    return result
