"""MedSim — Модуль конфігурації"""
from .settings import (
    MedSimConfig,
    get_default_config,
    ClientConfig,
    SandboxConfig,
    ScoringConfig,
)
from .loader import save_config, load_config, save_yaml, load_yaml

__all__ = [
    "MedSimConfig",
    "get_default_config",
    "ClientConfig",
    "SandboxConfig",
    "ScoringConfig",
    "save_config",
    "load_config",
    "save_yaml",
    "load_yaml",
]
