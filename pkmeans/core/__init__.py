from .assignment import DISTANCE_SENTINEL, assign_partition
from .aggregation import compute_centroids
from .api import kmeans_thread
from .base import KMeansBase, KMeansResult, OrchestratorState, TerminationReason
from .convergence import COST_SENTINEL, stopping_condition_met
from .cost import compute_cost
from .cpu_sequential import KMeansCPUSequential
from .cpu_threaded import DEFAULT_N_WORKERS, KMeansCPUThreaded, ThreadingConfig
from .distance import euclidean_distance
from .partition import Partition, make_partitions

__all__ = [
    "COST_SENTINEL",
    "DEFAULT_N_WORKERS",
    "DISTANCE_SENTINEL",
    "KMeansBase",
    "KMeansCPUSequential",
    "KMeansCPUThreaded",
    "KMeansResult",
    "OrchestratorState",
    "Partition",
    "TerminationReason",
    "ThreadingConfig",
    "assign_partition",
    "compute_centroids",
    "compute_cost",
    "euclidean_distance",
    "kmeans_thread",
    "make_partitions",
    "stopping_condition_met",
]
