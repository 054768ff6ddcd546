"""
Метрики производительности параллельного K-means.

Ускорение и эффективность считаются относительно последовательного
прогона (один воркер) на тех же данных.
"""

from __future__ import annotations


def speedup(t_serial: float, t_parallel: float) -> float:
    """
    Ускорение S = t_serial / t_parallel.

    Raises:
        ZeroDivisionError: Если t_parallel равно нулю
    """
    if t_parallel == 0:
        raise ZeroDivisionError("Parallel time cannot be zero")
    return t_serial / t_parallel


def efficiency(speedup: float, n_workers: int) -> float:
    """
    Параллельная эффективность E = S / W.

    Идеальное значение 1.0 (линейное ускорение по числу воркеров).

    Raises:
        ZeroDivisionError: Если n_workers равно нулю
    """
    if n_workers == 0:
        raise ZeroDivisionError("Number of workers cannot be zero")
    return speedup / n_workers


def throughput(M: int, K: int, N: int, n_iters: int, total_time: float) -> float:
    """
    Пропускная способность: (M * K * N * n_iters) / total_time.

    Числитель: количество покоординатных операций расстояния за весь
    прогон, т.е. результат в операциях в секунду.

    Raises:
        ZeroDivisionError: Если total_time равно нулю
    """
    if total_time == 0:
        raise ZeroDivisionError("Total time cannot be zero")
    return (M * K * N * n_iters) / total_time
