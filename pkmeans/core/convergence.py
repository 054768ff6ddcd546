from __future__ import annotations

import numpy as np

# Начальная "предыдущая" стоимость: гарантирует хотя бы одну итерацию
COST_SENTINEL: float = 1e30


def stopping_condition_met(
    prev_cost: np.ndarray, curr_cost: np.ndarray, epsilon: float
) -> bool:
    """
    True, если ни для одного кластера k не выполняется |prev[k] - curr[k]| > epsilon.

    Один кластер со сдвигом больше epsilon продолжает итерации; NaN-сдвиг
    (inf - inf при переполнении стоимости) превышением не считается.
    """
    change = np.abs(np.asarray(prev_cost) - np.asarray(curr_cost))
    return not bool(np.any(change > epsilon))


def max_cost_change(prev_cost: np.ndarray, curr_cost: np.ndarray) -> float:
    """Максимальное изменение стоимости по кластерам (для логов)."""
    return float(np.max(np.abs(np.asarray(prev_cost) - np.asarray(curr_cost))))
