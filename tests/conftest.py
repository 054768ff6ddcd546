"""
Общие фикстуры для всех тестов.
"""

import numpy as np
import pytest


@pytest.fixture
def four_points_dataset():
    """Четыре точки в 2D: две пары по разные стороны от x=5."""
    X = np.array([
        [0.0, 0.0],
        [0.0, 1.0],
        [10.0, 0.0],
        [10.0, 1.0],
    ])
    initial_centroids = np.array([
        [0.0, 0.0],
        [10.0, 0.0],
    ])
    return X, initial_centroids


@pytest.fixture
def small_dataset():
    """Небольшой датасет (2D, 2 явно разделённых кластера)."""
    np.random.seed(42)
    cluster1 = np.random.randn(30, 2) + [0, 0]
    cluster2 = np.random.randn(30, 2) + [8, 8]
    X = np.vstack([cluster1, cluster2])
    initial_centroids = np.array([
        [-1.0, -1.0],
        [9.0, 9.0],
    ])
    return X, initial_centroids


@pytest.fixture
def medium_dataset():
    """Средний датасет (10D, 3 кластера, M не делится на число воркеров)."""
    np.random.seed(42)
    cluster1 = np.random.randn(51, 10) + [0] * 10
    cluster2 = np.random.randn(50, 10) + [5] * 10
    cluster3 = np.random.randn(52, 10) + [-5] * 10
    X = np.vstack([cluster1, cluster2, cluster3])
    initial_centroids = np.array([
        [-1.0] * 10,
        [6.0] * 10,
        [-6.0] * 10,
    ])
    return X, initial_centroids


@pytest.fixture
def overlapping_dataset():
    """Перекрывающиеся облака: назначения меняются несколько итераций."""
    np.random.seed(7)
    X = np.vstack([
        np.random.randn(120, 3),
        np.random.randn(120, 3) + [1.5, 0.0, 0.0],
        np.random.randn(120, 3) + [0.0, 1.5, 0.0],
    ])
    initial_centroids = X[[0, 1, 2, 3]].copy()
    return X, initial_centroids
