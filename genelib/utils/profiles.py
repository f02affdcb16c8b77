"""
Predefined configuration profiles for GeneLib.

Profiles provide convenient shortcuts for common experimentation modes such as
quick smoke runs or wide searches. They are merged on top of the defaults
before user overrides are applied.
"""

from __future__ import annotations

from typing import Dict

from omegaconf import OmegaConf


PROFILES: Dict[str, Dict[str, object]] = {
    "fast": {
        "engine": {
            "pop_size": 30,
            "top_k": 4,
            "mutation_rate": 0.9,
        },
        "demo": {
            "report_top": 3,
        },
    },
    "balanced": {
        "engine": {
            "pop_size": 100,
            "top_k": 4,
            "mutation_rate": 0.8,
        },
    },
    "exhaustive": {
        "engine": {
            "pop_size": 400,
            "top_k": 12,
            "mutation_rate": 0.6,
            "parent_sampling": "bounded",
        },
        "demo": {
            "report_top": 10,
        },
    },
}


def list_profiles() -> Dict[str, Dict[str, object]]:
    """Return a copy of the registered profiles."""

    return {name: OmegaConf.to_container(OmegaConf.create(conf), resolve=True) for name, conf in PROFILES.items()}


def get_profile(name: str) -> Dict[str, object]:
    """Return a profile configuration by name."""

    if name not in PROFILES:
        raise KeyError(f"Unknown profile '{name}'. Available profiles: {list(PROFILES)}")
    return OmegaConf.to_container(OmegaConf.create(PROFILES[name]), resolve=True)  # type: ignore[return-value]
