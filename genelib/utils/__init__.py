"""Utility exports for GeneLib."""

from .config_loader import ConfigLoader, LoadedConfig
from .logger import RunLogger
from .rng import make_rng

__all__ = ["ConfigLoader", "LoadedConfig", "RunLogger", "make_rng"]
