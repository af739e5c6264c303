"""CLI commands for liftlog."""

from .export import export
from .import_data import import_data
from .init import init
from .serve import serve
from .weight import weight
from .workouts import workouts

__all__ = [
    "export",
    "import_data",
    "init",
    "serve",
    "weight",
    "workouts",
]
