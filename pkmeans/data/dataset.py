"""
Представление и загрузка датасетов для K-means.

Текстовый формат (его же пишет pkmeans.data.generate.save_dataset_txt):
# Метаданные в JSON (первая строка, должна содержать "K")
# Центроиды (K строк: метка + координаты)
# Данные (M строк: метка + координаты)
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import numpy as np

logger = logging.getLogger("pkmeans")


class Dataset:
    """
    Точки, начальные центроиды и (опционально) истинные метки.

    points и initial_centroids: float64 массивы (M, N) и (K, N).
    """

    def __init__(
        self,
        points: np.ndarray,
        initial_centroids: np.ndarray,
        labels_true: np.ndarray | None = None,
        meta: dict[str, Any] | None = None,
    ) -> None:
        self.points = np.ascontiguousarray(points, dtype=np.float64)
        self.initial_centroids = np.ascontiguousarray(initial_centroids, dtype=np.float64)
        self.labels_true = labels_true
        self.meta: dict[str, Any] = dict(meta or {})

    @property
    def M(self) -> int:
        return int(self.points.shape[0])

    @property
    def N(self) -> int:
        return int(self.points.shape[1])

    @property
    def K(self) -> int:
        return int(self.initial_centroids.shape[0])

    def describe(self) -> dict[str, Any]:
        """Размеры задачи для логов и отчётов."""
        return {"M": self.M, "N": self.N, "K": self.K, **self.meta}

    @classmethod
    def from_file(cls, path: str | Path) -> Dataset:
        """
        Загружает датасет из текстового файла.

        Raises:
            ValueError: Если нет метаданных с K, строка не парсится или
                размерности строк различаются (с указанием файла и строки)
        """
        path = Path(path)
        logger.info(f"Loading dataset from {path}")

        meta: dict[str, Any] | None = None
        centroids: list[np.ndarray] = []
        points: list[np.ndarray] = []
        labels: list[int] = []

        with open(path, "r", encoding="utf-8") as f:
            for lineno, raw in enumerate(f, start=1):
                line = raw.strip()
                if not line:
                    continue
                if line.startswith("#"):
                    # Первый JSON-комментарий: метаданные, остальное пропускаем
                    if meta is None and line[1:].strip().startswith("{"):
                        try:
                            meta = json.loads(line[1:].strip())
                        except json.JSONDecodeError as e:
                            raise ValueError(f"{path}:{lineno}: bad metadata: {e}") from e
                    continue

                if meta is None or "K" not in meta:
                    raise ValueError(f"{path}:{lineno}: data before metadata with 'K'")

                parts = line.split()
                try:
                    label = int(parts[0])
                    values = np.array(parts[1:], dtype=np.float64)
                except ValueError as e:
                    raise ValueError(f"{path}:{lineno}: cannot parse row: {e}") from e

                if centroids and values.shape != centroids[0].shape:
                    raise ValueError(
                        f"{path}:{lineno}: expected {centroids[0].size} coordinates, "
                        f"got {values.size}"
                    )

                # Первые K строк: центроиды
                if len(centroids) < int(meta["K"]):
                    centroids.append(values)
                else:
                    points.append(values)
                    labels.append(label)

        if meta is None or not points:
            raise ValueError(f"{path}: no metadata or no data points found")

        dataset = cls(
            points=np.vstack(points),
            initial_centroids=np.vstack(centroids),
            labels_true=np.array(labels, dtype=np.int64),
            meta=meta,
        )
        logger.info(
            f"Dataset loaded: points.shape={dataset.points.shape}, "
            f"initial_centroids.shape={dataset.initial_centroids.shape}"
        )
        return dataset
