"""
Генерация синтетических датасетов и начальных центроидов.

Данные: кластеризованные «облака» из sklearn.make_blobs, нормированные
StandardScaler. Начальные центроиды: K различных случайных точек
(простая случайная инициализация, без k-means++).
"""

from __future__ import annotations

import json
import time
from pathlib import Path
from typing import Any

import numpy as np
from sklearn.datasets import make_blobs
from sklearn.preprocessing import StandardScaler

from pkmeans.data.dataset import Dataset
from pkmeans.errors import KMeansConfigError


def generate_blobs(
    M: int,
    N: int,
    K: int,
    cluster_std: float = 1.0,
    seed: int = 42,
) -> tuple[np.ndarray, np.ndarray]:
    """
    Синтетические точки вокруг K центров.

    Args:
        M: Количество точек
        N: Размерность пространства
        K: Количество центров
        cluster_std: Стандартное отклонение кластеров
        seed: Seed для воспроизводимости

    Returns:
        Кортеж (points, labels): points (M, N) float64, labels (M,)
    """
    points, labels = make_blobs(
        n_samples=M,
        n_features=N,
        centers=K,
        cluster_std=cluster_std,
        center_box=(-10.0, 10.0),
        random_state=seed,
    )
    points = StandardScaler().fit_transform(points)
    return np.ascontiguousarray(points, dtype=np.float64), labels.astype(np.int64)


def seed_centroids(points: np.ndarray, K: int, seed: int = 42) -> np.ndarray:
    """
    Выбирает K различных точек как начальные центроиды.

    Raises:
        KMeansConfigError: Если K <= 0 или K > M
    """
    M = points.shape[0]
    if K <= 0 or K > M:
        raise KMeansConfigError(f"Cannot seed K={K} centroids from M={M} points")
    rng = np.random.default_rng(seed)
    idx = rng.choice(M, size=K, replace=False)
    return points[np.sort(idx)].copy()


def make_dataset(
    M: int, N: int, K: int, cluster_std: float = 1.0, seed: int = 42
) -> Dataset:
    """Синтетический Dataset с метаданными генерации."""
    points, labels = generate_blobs(M, N, K, cluster_std=cluster_std, seed=seed)
    meta: dict[str, Any] = {
        "M": M,
        "N": N,
        "K": K,
        "cluster_std": cluster_std,
        "seed": seed,
        "generated": time.strftime("%Y-%m-%d %H:%M:%S"),
        "data_type": "synthetic_blobs",
        "normalized": True,
    }
    return Dataset(points, seed_centroids(points, K, seed), labels_true=labels, meta=meta)


def save_dataset_txt(dataset: Dataset, filepath: str | Path) -> Path:
    """
    Сохраняет датасет в текстовом формате, который читает Dataset.from_file.

    Returns:
        Путь к записанному файлу
    """
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)

    labels = (
        dataset.labels_true
        if dataset.labels_true is not None
        else np.zeros(dataset.M, dtype=np.int64)
    )
    meta = {**dataset.meta, "M": dataset.M, "N": dataset.N, "K": dataset.K}

    with open(filepath, "w", encoding="utf-8") as f:
        f.write("# " + json.dumps(meta, ensure_ascii=False) + "\n")
        f.write("\n")

        f.write("# Centroids (label, x1, x2, ..., xN)\n")
        for k, centroid in enumerate(dataset.initial_centroids):
            f.write(f"{k} " + " ".join(f"{c:.8f}" for c in centroid) + "\n")
        f.write("\n")

        f.write("# Data points (label, x1, x2, ..., xN)\n")
        for label, point in zip(labels, dataset.points):
            f.write(f"{int(label)} " + " ".join(f"{c:.8f}" for c in point) + "\n")

    return filepath
