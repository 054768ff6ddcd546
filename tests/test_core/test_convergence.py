"""
Тесты критерия остановки по стоимости кластеров.
"""

import numpy as np
import pytest
from pkmeans.core.convergence import (
    COST_SENTINEL,
    max_cost_change,
    stopping_condition_met,
)


class TestStoppingCondition:
    """Тесты stopping_condition_met."""

    def test_identical_costs(self):
        """Совпадающие стоимости: остановка."""
        assert stopping_condition_met(np.array([1.0, 2.0]), np.array([1.0, 2.0]), 0.0)

    def test_boundary_is_inclusive(self):
        """Изменение ровно epsilon ещё считается сходимостью."""
        assert stopping_condition_met(np.array([1.0, 2.0]), np.array([1.5, 2.0]), 0.5)

    def test_single_cluster_keeps_running(self):
        """Один кластер со сдвигом больше epsilon не даёт остановиться."""
        prev = np.array([5.0, 5.0, 5.0])
        curr = np.array([5.0, 5.0, 5.2])
        assert not stopping_condition_met(prev, curr, 0.1)

    def test_crafted_sequence_stops_only_when_last_cluster_settles(self):
        """Последовательность, где только последний кластер долго не сходится."""
        eps = 0.1
        sequence = [
            [5.0, 5.0, 9.0],
            [5.0, 5.0, 7.0],
            [5.0, 5.0, 6.0],
            [5.0, 5.0, 5.95],
            [5.0, 5.0, 5.9],
        ]
        stops = [
            stopping_condition_met(np.array(a), np.array(b), eps)
            for a, b in zip(sequence, sequence[1:])
        ]
        assert stops == [False, False, True, True]

    def test_sentinel_forces_first_iteration(self):
        """Стартовое значение prev_cost гарантирует хотя бы одну итерацию."""
        prev = np.full(3, COST_SENTINEL)
        curr = np.zeros(3)
        assert not stopping_condition_met(prev, curr, 1e6)

    def test_max_cost_change(self):
        """Максимальный сдвиг по кластерам."""
        assert max_cost_change(np.array([1.0, 4.0]), np.array([1.5, 2.0])) == pytest.approx(2.0)

    def test_nan_change_does_not_block_stop(self):
        """NaN-сдвиг (inf - inf) не считается превышением epsilon."""
        prev = np.array([np.inf, 3.0])
        curr = np.array([np.inf, 3.0])
        assert stopping_condition_met(prev, curr, 1e-6)
        assert stopping_condition_met(np.array([np.nan]), np.array([1.0]), 1e-6)

    def test_infinite_change_keeps_running(self):
        """Переход от стартового значения к inf: итерации продолжаются."""
        assert not stopping_condition_met(np.array([COST_SENTINEL]), np.array([np.inf]), 1e-6)
