# Shared utilities for all modules. Explicit re-exports for a clean public API.

from .errors import (
    DatasetParseError as DatasetParseError,
    DimensionMismatch as DimensionMismatch,
    GradfitError as GradfitError,
    InvalidHyperparameter as InvalidHyperparameter,
)
from .io import (
    ensure_dir as ensure_dir,
    load_yaml as load_yaml,
    save_json as save_json,
)
from .logs import setup_logging as setup_logging
from .manifest import Manifest as Manifest, write_manifest as write_manifest
from .timers import Timer as Timer, timed as timed

__all__ = [
    "GradfitError",
    "DimensionMismatch",
    "InvalidHyperparameter",
    "DatasetParseError",
    "ensure_dir",
    "load_yaml",
    "save_json",
    "setup_logging",
    "Manifest",
    "write_manifest",
    "Timer",
    "timed",
]
