"""
Проверка входных данных K-means до начала итераций.

Все нарушения предусловий сообщаются через KMeansConfigError, чтобы
вызывающий код получил ошибку сразу, а не неопределённый результат.
"""

from __future__ import annotations

import math

import numpy as np

from pkmeans.errors import KMeansConfigError


def validate_model_params(
    n_clusters: int, epsilon: float, max_iters: int | None = None
) -> None:
    """
    Проверяет параметры модели, известные до появления данных.

    Raises:
        KMeansConfigError: Если K <= 0, epsilon < 0 или NaN, либо max_iters
            задан и <= 0
    """
    _check_positive_int("K", n_clusters)
    if math.isnan(epsilon) or epsilon < 0:
        raise KMeansConfigError(f"epsilon must be non-negative, got {epsilon!r}")
    if max_iters is not None:
        _check_positive_int("max_iters", max_iters)


def _check_positive_int(name: str, value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)) or value <= 0:
        raise KMeansConfigError(f"{name} must be a positive integer, got {value!r}")


def validate_scalars(
    M: int,
    N: int,
    K: int,
    epsilon: float,
    n_workers: int = 1,
    max_iters: int | None = None,
) -> None:
    """
    Проверяет скалярные параметры плоского интерфейса.

    Raises:
        KMeansConfigError: Если M, N, K, n_workers <= 0, epsilon < 0 или NaN,
            либо max_iters задан и <= 0
    """
    for name, value in (("M", M), ("N", N), ("n_workers", n_workers)):
        _check_positive_int(name, value)
    validate_model_params(K, epsilon, max_iters)


def validate_problem(
    points: np.ndarray, centroids: np.ndarray, n_clusters: int
) -> None:
    """
    Проверяет согласованность форм точек и центроидов.

    Args:
        points: Массив точек (M, N)
        centroids: Начальные центроиды (K, N)
        n_clusters: Ожидаемое число кластеров K

    Raises:
        KMeansConfigError: Если формы не двумерные, пустые или N/K не совпадают
    """
    if points.ndim != 2 or points.shape[0] == 0 or points.shape[1] == 0:
        raise KMeansConfigError(
            f"points must be a non-empty (M, N) array, got shape {points.shape}"
        )
    if centroids.ndim != 2:
        raise KMeansConfigError(
            f"centroids must be a (K, N) array, got shape {centroids.shape}"
        )
    if centroids.shape[0] != n_clusters or n_clusters <= 0:
        raise KMeansConfigError(
            f"Expected {n_clusters} centroids, got {centroids.shape[0]}"
        )
    if centroids.shape[1] != points.shape[1]:
        raise KMeansConfigError(
            f"Dimensionality mismatch: points have N={points.shape[1]}, "
            f"centroids have N={centroids.shape[1]}"
        )


def validate_buffer_length(name: str, buffer_len: int, expected: int) -> None:
    """Длина плоского буфера должна совпадать с произведением размеров."""
    if buffer_len != expected:
        raise KMeansConfigError(
            f"{name} buffer has length {buffer_len}, expected {expected}"
        )


def validate_labels_buffer(labels: np.ndarray, M: int, n_clusters: int) -> None:
    """Буфер назначений: целочисленный ndarray формы (M,), вмещающий индекс K - 1."""
    if not isinstance(labels, np.ndarray) or labels.shape != (M,):
        raise KMeansConfigError(
            f"labels buffer must be an array of shape ({M},), "
            f"got {getattr(labels, 'shape', type(labels).__name__)}"
        )
    validate_label_dtype(labels.dtype, n_clusters)


def validate_label_dtype(dtype: np.dtype, n_clusters: int) -> None:
    """Целочисленный dtype, в который помещаются индексы 0..K-1 без переполнения."""
    if not np.issubdtype(dtype, np.integer):
        raise KMeansConfigError(f"labels buffer must be integer, got {dtype}")
    if np.iinfo(dtype).max < n_clusters - 1:
        raise KMeansConfigError(
            f"labels dtype {dtype} cannot hold cluster index {n_clusters - 1}"
        )
