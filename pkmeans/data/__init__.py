from .buffers import PointMatrix
from .dataset import Dataset
from .validation import validate_problem, validate_scalars

__all__ = ["PointMatrix", "Dataset", "validate_problem", "validate_scalars"]
