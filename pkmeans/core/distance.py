"""
Метрика расстояния для K-means.

Одна и та же функция используется и при назначении точек кластерам,
и при подсчёте стоимости, поэтому «ближайший центроид» и «стоимость»
определены согласованно.
"""

from __future__ import annotations

import numpy as np


def euclidean_distance(x: np.ndarray, y: np.ndarray) -> np.ndarray | float:
    """
    Евклидово (L2) расстояние sqrt(sum_i (x_i - y_i)^2).

    Суммирование идёт по последней оси, поэтому функция работает как для
    пары векторов длины N, так и для блока точек (n, N) против одного
    центроида (N,): результат тогда имеет форму (n,).

    Args:
        x: Первый вектор или блок векторов
        y: Второй вектор (той же размерности N)

    Returns:
        Неотрицательное расстояние (скаляр или массив по точкам)
    """
    diff = np.asarray(x, dtype=np.float64) - np.asarray(y, dtype=np.float64)
    return np.sqrt(np.sum(diff * diff, axis=-1))
