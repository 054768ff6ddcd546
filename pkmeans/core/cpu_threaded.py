from __future__ import annotations

from dataclasses import dataclass
from functools import partial
from multiprocessing.pool import ThreadPool
from typing import Any, List, Optional

import numpy as np

from pkmeans.core.assignment import assign_partition
from pkmeans.core.base import KMeansBase, KMeansResult
from pkmeans.core.partition import Partition, make_partitions
from pkmeans.errors import KMeansConfigError

DEFAULT_N_WORKERS = 16


@dataclass(frozen=True)
class ThreadingConfig:
    """Параметры многопоточного K-means."""

    # Фиксированное число воркеров: не зависит ни от M, ни от числа ядер
    n_workers: int = DEFAULT_N_WORKERS

    def __post_init__(self) -> None:
        if isinstance(self.n_workers, bool) or self.n_workers <= 0:
            raise KMeansConfigError(
                f"n_workers must be a positive integer, got {self.n_workers!r}"
            )


class KMeansCPUThreaded(KMeansBase):
    """
    K-Means на CPU с пулом потоков (fork-join по статическим разбиениям).

    Пул создаётся один раз на fit и закрывается в finally. На каждой
    итерации pool.map раздаёт воркерам непересекающиеся диапазоны точек;
    возврат из map: барьер: все записи в labels к этому моменту видны
    последовательному коду (обновление центроидов, стоимость).
    Центроиды в фазе назначения только читаются, поэтому блокировки не нужны.
    """

    def __init__(
        self,
        n_clusters: int,
        tol: float = 1e-6,
        max_iters: int | None = None,
        threads: ThreadingConfig = ThreadingConfig(),
        logger: Any | None = None,
    ) -> None:
        super().__init__(
            n_clusters=n_clusters, tol=tol, max_iters=max_iters, logger=logger
        )
        self.threads = threads

        # Пул и разбиения переиспользуются в рамках fit
        self._pool: Optional[ThreadPool] = None
        self._partitions: Optional[List[Partition]] = None

    # --- Пул и разбиение ---

    def _ensure_pool_and_partitions(self, X: np.ndarray) -> None:
        """Ленивая инициализация пула и разбиений."""
        if self._pool is not None and self._partitions is not None:
            return

        n_workers = int(self.threads.n_workers)
        self._partitions = make_partitions(X.shape[0], n_workers)
        self._pool = ThreadPool(processes=n_workers)

        if self.logger:
            non_empty = sum(1 for p in self._partitions if not p.is_empty)
            self.logger.debug(
                f"  Thread pool started: n_workers={n_workers}, "
                f"non-empty partitions={non_empty}"
            )

    def _close_pool(self) -> None:
        """Закрыть пул после fit."""
        if self._pool is not None:
            self._pool.close()
            self._pool.join()
        self._pool = None
        self._partitions = None

    # ---------- Assignment (parallel over partitions) ----------

    def assign_clusters(
        self, X: np.ndarray, centroids: np.ndarray, labels: np.ndarray
    ) -> None:
        self._ensure_pool_and_partitions(X)
        assert self._pool is not None and self._partitions is not None

        worker = partial(assign_partition, X, centroids, labels)
        # map блокирует до завершения всех воркеров; исключения пробрасываются
        self._pool.map(worker, self._partitions, chunksize=1)

    def fit(
        self,
        X: np.ndarray,
        initial_centroids: np.ndarray,
        labels: np.ndarray | None = None,
    ) -> KMeansResult:
        """fit с переиспользованием пула и гарантированным закрытием."""
        try:
            return super().fit(X, initial_centroids, labels)
        finally:
            self._close_pool()
