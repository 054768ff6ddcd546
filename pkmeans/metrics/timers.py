"""
Таймеры для замеров фаз K-means.

Timer: контекстный менеджер на time.perf_counter(); PhaseTimings
накапливает суммарное время фаз назначения, обновления центроидов и
подсчёта стоимости за один вызов fit(...).
"""
from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Any


class Timer:
    """
    Контекстный менеджер для замера времени участка кода.

    Пример:
        with Timer() as t:
            model.fit(X, centroids)
        print(t.elapsed, t.elapsed_ms)
    """

    def __init__(self) -> None:
        self.start: float = 0.0
        self.end: float = 0.0
        self.elapsed: float = 0.0

    def __enter__(self) -> Timer:
        self.start = time.perf_counter()
        return self

    def __exit__(self, *args: Any) -> None:
        self.end = time.perf_counter()
        self.elapsed = self.end - self.start

    @property
    def elapsed_ms(self) -> float:
        return self.elapsed * 1000.0


@dataclass
class PhaseTimings:
    """Суммарные тайминги фаз (секунды) за один запуск."""

    t_assign_total: float = 0.0
    t_update_total: float = 0.0
    t_cost_total: float = 0.0

    @property
    def t_iter_total(self) -> float:
        return self.t_assign_total + self.t_update_total + self.t_cost_total

    def reset(self) -> None:
        self.t_assign_total = 0.0
        self.t_update_total = 0.0
        self.t_cost_total = 0.0

    def as_dict(self) -> dict[str, float]:
        return {
            "T_assign_total": self.t_assign_total,
            "T_update_total": self.t_update_total,
            "T_cost_total": self.t_cost_total,
            "T_iter_total": self.t_iter_total,
        }
