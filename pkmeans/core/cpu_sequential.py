# core/cpu_sequential.py
from __future__ import annotations

import numpy as np

from .assignment import assign_partition
from .base import KMeansBase
from .partition import Partition


class KMeansCPUSequential(KMeansBase):
    """Однопоточная реализация (baseline): один диапазон [0, M) на вызывающем потоке."""

    def assign_clusters(
        self, X: np.ndarray, centroids: np.ndarray, labels: np.ndarray
    ) -> None:
        assign_partition(X, centroids, labels, Partition(0, X.shape[0]))
