from __future__ import annotations


class KMeansConfigError(ValueError):
    """
    Некорректная конфигурация запуска K-means.

    Бросается до начала итераций: M, N, K или число воркеров <= 0,
    отрицательный/NaN epsilon, размеры буферов не совпадают с M·N, K·N, M.
    """
