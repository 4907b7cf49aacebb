"""Benchmark configuration, with environment overrides."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Optional, Tuple

STRUCTURES = ("bst", "max_heap", "min_heap", "simple_trie", "counting_trie")
KEY_STRUCTURES = ("bst", "max_heap", "min_heap")
TRIE_STRUCTURES = ("simple_trie", "counting_trie")

SEED_ENV = "STRUCTBENCH_SEED"
SIZE_ENV = "STRUCTBENCH_SIZE"
REPEAT_ENV = "STRUCTBENCH_REPEAT"


@dataclass
class BenchConfig:
    """
    Configuration for run_benchmark
        structures: tuple, subset of STRUCTURES to measure
        size: int, number of keys / words per run
        repeat: int, timed runs per (structure, phase)
        key_kind: str, "int" or "ip" keys for the BST and heaps
        key_order: str, insertion order of keys (see KEY_ORDERS)
        prefix_freq: float, prefix clustering of trie words, in [0, 1)
        seed: int, seed shared by every workload generator
    """
    structures: Tuple[str, ...] = STRUCTURES
    size: int = 1_000
    repeat: int = 3
    key_kind: str = "int"
    key_order: str = "random"
    prefix_freq: float = 0.0
    seed: Optional[int] = 0

    def __post_init__(self):
        self.structures = tuple(self.structures)
        unknown = [s for s in self.structures if s not in STRUCTURES]
        if unknown:
            raise ValueError(f"unknown structures: {unknown}")
        if not self.structures:
            raise ValueError("at least one structure must be selected")
        if self.size < 1:
            raise ValueError("size must be positive")
        if self.repeat < 1:
            raise ValueError("repeat must be positive")
        if self.key_kind not in ("int", "ip"):
            raise ValueError("key_kind must be 'int' or 'ip'")
        if not 0.0 <= self.prefix_freq < 1.0:
            raise ValueError("prefix_freq must be between 0 and 1")

    @classmethod
    def from_env(cls, **overrides) -> "BenchConfig":
        """Build a config from STRUCTBENCH_* variables; keyword overrides win."""
        values = {}
        if os.environ.get(SEED_ENV):
            values["seed"] = int(os.environ[SEED_ENV])
        if os.environ.get(SIZE_ENV):
            values["size"] = int(os.environ[SIZE_ENV])
        if os.environ.get(REPEAT_ENV):
            values["repeat"] = int(os.environ[REPEAT_ENV])
        values.update(overrides)
        return cls(**values)

    def with_overrides(self, **overrides) -> "BenchConfig":
        return replace(self, **overrides)
