"""
Тесты плоского буфера точек PointMatrix.
"""

import numpy as np
import pytest
from pkmeans.data.buffers import PointMatrix
from pkmeans.errors import KMeansConfigError


class TestPointMatrix:
    """Тесты доступа по (строка, столбец) к плоскому буферу."""

    def test_point_major_layout(self):
        """Точка i занимает [i*N, (i+1)*N)."""
        m = PointMatrix([1.0, 2.0, 3.0, 4.0, 5.0, 6.0], rows=3, cols=2)

        assert m.shape == (3, 2)
        assert len(m) == 3
        np.testing.assert_array_equal(m.row(1), [3.0, 4.0])
        assert m[2, 0] == 5.0
        np.testing.assert_array_equal(m.as_array(), [[1.0, 2.0], [3.0, 4.0], [5.0, 6.0]])

    def test_views_share_memory(self):
        """2-D вид и плоский буфер: одна и та же память."""
        buf = np.zeros(6)
        m = PointMatrix(buf, rows=2, cols=3)

        m.as_array()[1, 2] = 7.0
        m[0, 1] = 3.0

        assert buf[5] == 7.0
        assert buf[1] == 3.0
        assert m.flat is buf

    @pytest.mark.parametrize("index", [(3, 0), (-1, 0), (0, 2), (0, -1)])
    def test_bounds_checked(self, index):
        """Выход за границы: IndexError, а не чтение соседней точки."""
        m = PointMatrix(np.zeros(6), rows=3, cols=2)
        with pytest.raises(IndexError):
            m[index]

    def test_row_bounds_checked(self):
        """row() тоже проверяет индекс."""
        m = PointMatrix(np.zeros(6), rows=3, cols=2)
        with pytest.raises(IndexError):
            m.row(3)

    def test_length_mismatch(self):
        """Длина буфера должна быть rows*cols."""
        with pytest.raises(KMeansConfigError):
            PointMatrix(np.zeros(5), rows=3, cols=2)

    def test_non_flat_buffer_rejected(self):
        """2-D массив не принимается как плоский буфер."""
        with pytest.raises(KMeansConfigError):
            PointMatrix(np.zeros((3, 2)), rows=3, cols=2)

    def test_from_array_copies(self):
        """from_array создаёт собственный буфер."""
        arr = np.array([[1.0, 2.0], [3.0, 4.0]])
        m = PointMatrix.from_array(arr)
        arr[0, 0] = 100.0

        assert m[0, 0] == 1.0
        np.testing.assert_array_equal(m.flat, [1.0, 2.0, 3.0, 4.0])
