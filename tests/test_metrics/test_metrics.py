"""
Тесты метрик производительности.
"""

import pytest
from pkmeans.metrics.metrics import efficiency, speedup, throughput


class TestSpeedup:
    """Тесты ускорения относительно однопоточного прогона."""

    def test_speedup_basic(self):
        """10 с последовательно, 2.5 с на пуле потоков: ускорение 4."""
        assert speedup(10.0, 2.5) == 4.0

    def test_speedup_slowdown(self):
        """Пул может оказаться медленнее: ускорение < 1."""
        assert speedup(1.0, 4.0) == pytest.approx(0.25)

    def test_speedup_zero_parallel_time(self):
        """Нулевое параллельное время."""
        with pytest.raises(ZeroDivisionError):
            speedup(10.0, 0.0)


class TestEfficiency:
    """Тесты параллельной эффективности."""

    def test_efficiency_default_workers(self):
        """Ускорение 8 на 16 воркерах: эффективность 0.5."""
        assert efficiency(8.0, 16) == 0.5

    def test_efficiency_single_worker(self):
        """Один воркер: эффективность равна ускорению."""
        assert efficiency(0.9, 1) == pytest.approx(0.9)

    def test_efficiency_zero_workers(self):
        """Ноль воркеров."""
        with pytest.raises(ZeroDivisionError):
            efficiency(2.0, 0)


class TestThroughput:
    """Тесты пропускной способности."""

    def test_throughput_basic(self):
        """M*K*N*n_iters / T."""
        # 1000 точек, 4 кластера, 2 измерения, 5 итераций за 0.5 с
        assert throughput(1000, 4, 2, 5, 0.5) == pytest.approx(80_000.0)

    def test_throughput_scales_with_iterations(self):
        """Вдвое больше итераций за то же время: вдвое выше пропускная способность."""
        assert throughput(100, 2, 2, 10, 1.0) == 2 * throughput(100, 2, 2, 5, 1.0)

    def test_throughput_zero_time(self):
        """Нулевое время."""
        with pytest.raises(ZeroDivisionError):
            throughput(100, 2, 2, 1, 0.0)
