"""Glue helpers exposed for CLI and integration harnesses."""

from .io import (
    compute_euclid,
    load_candidates,
    load_config,
    load_matrices,
    load_nodes,
    load_vehicles,
    validate_candidates,
    validate_inputs,
)
from .pipeline import (
    assemble_data,
    build_arg_parser,
    build_params,
    load_and_run,
    main,
    rank_candidates,
    rank_indicators,
    run_pipeline,
)

__all__ = [
    "assemble_data",
    "build_arg_parser",
    "build_params",
    "compute_euclid",
    "load_and_run",
    "load_candidates",
    "load_config",
    "load_matrices",
    "load_nodes",
    "load_vehicles",
    "main",
    "rank_candidates",
    "rank_indicators",
    "run_pipeline",
    "validate_candidates",
    "validate_inputs",
]
