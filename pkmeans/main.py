# main.py
from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Any, Dict, List, Optional

from pkmeans.core.base import KMeansBase, KMeansResult
from pkmeans.core.cpu_sequential import KMeansCPUSequential
from pkmeans.core.cpu_threaded import (
    DEFAULT_N_WORKERS,
    KMeansCPUThreaded,
    ThreadingConfig,
)
from pkmeans.data.dataset import Dataset
from pkmeans.data.validation import validate_scalars
from pkmeans.metrics.metrics import efficiency, speedup, throughput
from pkmeans.metrics.timers import Timer
from pkmeans.utils.logging import PrefixedLogger, format_problem_prefix, setup_logger

EXIT_CONVERGED = 0
EXIT_EXHAUSTED = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pkmeans",
        description="Многопоточный K-means (алгоритм Ллойда) на CPU.",
    )
    parser.add_argument(
        "--data",
        type=Path,
        default=None,
        help="Файл датасета в текстовом формате; без него генерируются blobs.",
    )
    parser.add_argument("--points", type=int, default=10_000, help="M для синтетики.")
    parser.add_argument("--dims", type=int, default=2, help="N для синтетики.")
    parser.add_argument("--clusters", type=int, default=4, help="K для синтетики.")
    parser.add_argument("--std", type=float, default=1.0, help="cluster_std для синтетики.")
    parser.add_argument("--seed", type=int, default=42, help="Seed данных и центроидов.")
    parser.add_argument(
        "--workers",
        type=int,
        default=DEFAULT_N_WORKERS,
        help="Количество воркеров фазы назначения.",
    )
    parser.add_argument(
        "--epsilon",
        type=float,
        default=1e-6,
        help="Порог сходимости по изменению стоимости каждого кластера.",
    )
    parser.add_argument(
        "--max-iters",
        type=int,
        default=None,
        help="Лимит итераций; по умолчанию итерации до сходимости без лимита.",
    )
    parser.add_argument(
        "--compare",
        action="store_true",
        help="Дополнительно запустить однопоточный baseline и посчитать ускорение.",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Куда записать JSON с центроидами, назначениями и таймингами.",
    )
    return parser


def _load_dataset(args: argparse.Namespace) -> Dataset:
    if args.data is not None:
        return Dataset.from_file(args.data)
    validate_scalars(
        args.points, args.dims, args.clusters, args.epsilon, args.workers, args.max_iters
    )
    # sklearn нужен только для синтетики
    from pkmeans.data.generate import make_dataset

    return make_dataset(args.points, args.dims, args.clusters, args.std, args.seed)


def _run(model: KMeansBase, dataset: Dataset) -> tuple[KMeansResult, float]:
    with Timer() as t_fit:
        result = model.fit(dataset.points, dataset.initial_centroids)
    return result, float(t_fit.elapsed)


def _record(
    model: KMeansBase, result: KMeansResult, dataset: Dataset, t_fit: float, n_workers: int
) -> Dict[str, Any]:
    assert model.centroids is not None and model.labels is not None
    return {
        "M": dataset.M,
        "N": dataset.N,
        "K": dataset.K,
        "W": n_workers,
        "n_iters": result.n_iters,
        "termination": result.termination.value,
        "cost": result.cost.tolist(),
        "counts": result.counts.tolist(),
        "empty_clusters": result.empty_clusters,
        "cost_history": result.cost_history,
        "centroids": model.centroids.tolist(),
        "assignments": model.labels.tolist(),
        "T_fit": t_fit,
        **model.timings.as_dict(),
        "throughput_ops": throughput(
            dataset.M, dataset.K, dataset.N, result.n_iters, t_fit
        )
        if t_fit > 0
        else 0.0,
    }


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logger = setup_logger()

    try:
        dataset = _load_dataset(args)
        prefix = format_problem_prefix({**dataset.describe(), "W": args.workers})
        model = KMeansCPUThreaded(
            n_clusters=dataset.K,
            tol=args.epsilon,
            max_iters=args.max_iters,
            threads=ThreadingConfig(n_workers=args.workers),
            logger=PrefixedLogger(logger, prefix),
        )
    except ValueError as e:  # KMeansConfigError и ошибки разбора файла
        parser.error(str(e))

    logger.info(f"{prefix} Running threaded K-means")
    result, t_fit = _run(model, dataset)
    record = _record(model, result, dataset, t_fit, args.workers)
    logger.info(
        f"{prefix} Finished: {result.termination.value} after {result.n_iters} iterations, "
        f"T_fit={t_fit:.6f}s, total_cost={result.cost.sum():.6e}"
    )
    if result.empty_clusters:
        logger.warning(f"{prefix} Empty clusters at the end: {result.empty_clusters}")

    if args.compare:
        baseline = KMeansCPUSequential(
            n_clusters=dataset.K,
            tol=args.epsilon,
            max_iters=args.max_iters,
            logger=PrefixedLogger(logger, format_problem_prefix(dataset.describe())),
        )
        logger.info(f"{prefix} Running sequential baseline")
        _, t_serial = _run(baseline, dataset)
        s = speedup(t_serial, t_fit)
        record["T_fit_serial"] = t_serial
        record["speedup"] = s
        record["efficiency"] = efficiency(s, args.workers)
        logger.info(
            f"{prefix} Speedup={s:.3f}, efficiency={record['efficiency']:.3f} "
            f"(T_serial={t_serial:.6f}s)"
        )

    if args.output is not None:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        with open(args.output, "w", encoding="utf-8") as f:
            json.dump(record, f, ensure_ascii=False)
        logger.info(f"Results saved to {args.output}")

    return EXIT_CONVERGED if result.converged else EXIT_EXHAUSTED


if __name__ == "__main__":
    raise SystemExit(main())
