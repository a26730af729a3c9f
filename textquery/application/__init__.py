"""Application layer: config-driven construction of query pipelines."""

from .command_registry import (
    COMMAND_REGISTRY,
    build_command,
    build_pipeline,
    run_query,
)

__all__ = [
    "COMMAND_REGISTRY",
    "build_command",
    "build_pipeline",
    "run_query",
]
