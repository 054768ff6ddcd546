from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List

import numpy as np

from pkmeans.core.aggregation import compute_centroids
from pkmeans.core.convergence import (
    COST_SENTINEL,
    max_cost_change,
    stopping_condition_met,
)
from pkmeans.core.cost import compute_cost
from pkmeans.data.validation import (
    validate_labels_buffer,
    validate_model_params,
    validate_problem,
)
from pkmeans.metrics.timers import PhaseTimings, Timer


class OrchestratorState(str, Enum):
    INITIALIZING = "initializing"
    ITERATING = "iterating"
    CONVERGED = "converged"
    EXHAUSTED = "exhausted"


class TerminationReason(str, Enum):
    CONVERGED = "converged"
    # достигнут max_iters до сходимости
    EXHAUSTED = "exhausted"


@dataclass
class KMeansResult:
    """Итог одного вызова fit(...)."""

    n_iters: int
    termination: TerminationReason
    cost: np.ndarray
    counts: np.ndarray
    cost_history: List[float] = field(default_factory=list)

    @property
    def converged(self) -> bool:
        return self.termination is TerminationReason.CONVERGED

    @property
    def empty_clusters(self) -> List[int]:
        """Индексы кластеров, которым на последней итерации не досталось точек."""
        return [int(k) for k in np.flatnonzero(self.counts == 0)]


class KMeansBase(ABC):
    """
    Базовый класс для реализаций K-means (алгоритм Ллойда).

    Отвечает за цикл итераций и сбор таймингов по фазам:
    - T_назначения: assign_clusters (единственная параллельная фаза);
    - T_обновления: пересчёт центроидов по назначениям;
    - T_стоимости: стоимость по кластерам для проверки сходимости.

    Остановка: ни для одного k не выполняется |prev_cost[k] - curr_cost[k]| > tol,
    но не раньше первой итерации. По умолчанию
    число итераций не ограничено (max_iters=None); при заданном max_iters
    исчерпание лимита возвращается как TerminationReason.EXHAUSTED.
    """

    def __init__(
        self,
        n_clusters: int,
        tol: float = 1e-6,
        max_iters: int | None = None,
        logger: Any | None = None,
    ):
        validate_model_params(n_clusters, tol, max_iters)
        self.K = n_clusters
        self.tol = tol  # epsilon: допустимое изменение стоимости кластера
        self.max_iters = max_iters
        self.logger = logger

        self.state = OrchestratorState.INITIALIZING
        self.centroids: np.ndarray | None = None
        self.labels: np.ndarray | None = None
        self.counts: np.ndarray | None = None
        self.prev_cost: np.ndarray | None = None
        self.curr_cost: np.ndarray | None = None
        self.result: KMeansResult | None = None

        self.timings = PhaseTimings()
        self.n_iters_actual: int = 0

    # тайминги в виде атрибутов, как у остальных моделей
    @property
    def t_assign_total(self) -> float:
        return self.timings.t_assign_total

    @property
    def t_update_total(self) -> float:
        return self.timings.t_update_total

    @property
    def t_cost_total(self) -> float:
        return self.timings.t_cost_total

    @property
    def t_iter_total(self) -> float:
        return self.timings.t_iter_total

    def _should_log(self, i: int, done: bool) -> bool:
        return i == 0 or (i + 1) % 10 == 0 or done

    def fit(
        self,
        X: np.ndarray,
        initial_centroids: np.ndarray,
        labels: np.ndarray | None = None,
    ) -> KMeansResult:
        """
        Основной цикл: назначение → пересчёт центроидов → стоимость → проверка.

        Args:
            X: Точки (M, N), только чтение
            initial_centroids: Начальные центроиды (K, N); копируются,
                результат лежит в self.centroids
            labels: Необязательный буфер назначений (M,) целого типа,
                перезаписывается на каждой итерации

        Returns:
            KMeansResult с причиной остановки и финальной стоимостью
        """
        X = np.asarray(X, dtype=np.float64)
        initial_centroids = np.asarray(initial_centroids, dtype=np.float64)
        validate_problem(X, initial_centroids, self.K)
        M = X.shape[0]
        if labels is not None:
            validate_labels_buffer(labels, M, self.K)

        self.state = OrchestratorState.INITIALIZING
        self.centroids = initial_centroids.copy()
        self.labels = labels if labels is not None else np.zeros(M, dtype=np.int64)
        self.prev_cost = np.full(self.K, COST_SENTINEL, dtype=np.float64)
        self.curr_cost = np.zeros(self.K, dtype=np.float64)
        self.counts = np.zeros(self.K, dtype=np.int64)
        self.timings.reset()
        self.n_iters_actual = 0
        cost_history: List[float] = []

        self.state = OrchestratorState.ITERATING
        # Первая итерация выполняется при любом tol
        while self.n_iters_actual == 0 or not stopping_condition_met(
            self.prev_cost, self.curr_cost, self.tol
        ):
            if self.max_iters is not None and self.n_iters_actual >= self.max_iters:
                self.state = OrchestratorState.EXHAUSTED
                break

            self.prev_cost[:] = self.curr_cost

            with Timer() as t_assign:
                self.assign_clusters(X, self.centroids, self.labels)
            with Timer() as t_update:
                self.counts = self.update_centroids(X, self.labels, self.centroids)
            with Timer() as t_cost:
                self.curr_cost[:] = compute_cost(X, self.labels, self.centroids)

            self.timings.t_assign_total += t_assign.elapsed
            self.timings.t_update_total += t_update.elapsed
            self.timings.t_cost_total += t_cost.elapsed
            self.n_iters_actual += 1
            cost_history.append(float(self.curr_cost.sum()))

            i = self.n_iters_actual - 1
            converged = stopping_condition_met(self.prev_cost, self.curr_cost, self.tol)
            empty = np.flatnonzero(self.counts == 0)
            if self.logger and empty.size:
                self.logger.warning(
                    f"  Iteration {i + 1}: empty clusters {empty.tolist()} "
                    f"collapsed to the origin"
                )
            if self.logger and self._should_log(i, converged):
                status = " (converged)" if converged else ""
                self.logger.info(
                    f"  Iteration {i + 1}{status} "
                    f"(T_assign={t_assign.elapsed:.6f}s, "
                    f"T_update={t_update.elapsed:.6f}s, "
                    f"T_cost={t_cost.elapsed:.6f}s, "
                    f"max_change={max_cost_change(self.prev_cost, self.curr_cost):.2e})"
                )
        else:
            self.state = OrchestratorState.CONVERGED

        if self.state is OrchestratorState.CONVERGED:
            termination = TerminationReason.CONVERGED
            if self.logger:
                self.logger.info(
                    f"  Convergence reached after {self.n_iters_actual} iterations "
                    f"(total_cost={self.curr_cost.sum():.6e}, tol={self.tol:.2e})"
                )
        else:
            termination = TerminationReason.EXHAUSTED
            if self.logger:
                self.logger.warning(
                    f"  Did not converge within max_iters={self.max_iters} "
                    f"(max_change={max_cost_change(self.prev_cost, self.curr_cost):.2e})"
                )

        self.result = KMeansResult(
            n_iters=self.n_iters_actual,
            termination=termination,
            cost=self.curr_cost.copy(),
            counts=self.counts.copy(),
            cost_history=cost_history,
        )
        return self.result

    @abstractmethod
    def assign_clusters(
        self, X: np.ndarray, centroids: np.ndarray, labels: np.ndarray
    ) -> None:
        """Шаг назначения: перезаписывает labels целиком."""
        raise NotImplementedError

    def update_centroids(
        self, X: np.ndarray, labels: np.ndarray, centroids: np.ndarray
    ) -> np.ndarray:
        """Шаг обновления центроидов (последовательно, после барьера)."""
        return compute_centroids(X, labels, centroids)
