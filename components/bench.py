"""
Timing harness for the structures package.

Each selected structure is rebuilt from the same workload for every repeat and
timed over three phases:

- ``build``: insert / add every key or word.
- ``query``: ``has`` for every key or word (``peek`` for the heaps).
- ``teardown``: ``remove`` every key or word (``pop`` until empty for heaps).

Results come back as a long-form `pandas.DataFrame`, one row per
(structure, phase), which is what the dashboard plots.
"""

from __future__ import annotations

import time
from typing import Callable, Dict, List, Optional

import numpy as np
import pandas as pd

from components.config import KEY_STRUCTURES, TRIE_STRUCTURES, BenchConfig
from components.work_loads.workload import WorkLoad
from structures.bst import BinarySearchTree
from structures.counting_trie import CountingTrie
from structures.heap import MaxHeap, MinHeap
from structures.log import get_logger
from structures.simple_trie import SimpleTrie

logger = get_logger("bench")

PHASES = ("build", "query", "teardown")
RESULT_COLUMNS = ["structure", "phase", "n", "repeat", "mean_s", "std_s", "min_s", "ops_per_s"]


def ascii_lower_index(ch):
    return ord(ch) - ord("a")


def _factories() -> Dict[str, Callable[[], object]]:
    return {
        "bst": BinarySearchTree,
        "max_heap": MaxHeap,
        "min_heap": MinHeap,
        "simple_trie": lambda: SimpleTrie(26, ascii_lower_index),
        "counting_trie": CountingTrie,
    }


def _phases(name, structure, items) -> Dict[str, Callable[[], None]]:
    if name in ("max_heap", "min_heap"):
        def build():
            for item in items:
                structure.insert(item)

        def query():
            for _ in items:
                structure.peek()

        def teardown():
            while structure.pop() is not None:
                pass
    elif name == "bst":
        def build():
            for item in items:
                structure.insert(item)

        def query():
            for item in items:
                structure.has(item)

        def teardown():
            for item in items:
                structure.remove(item)
    else:
        def build():
            for item in items:
                structure.add(item)

        def query():
            for item in items:
                structure.has(item)

        def teardown():
            for item in items:
                structure.remove(item)
    return {"build": build, "query": query, "teardown": teardown}


def make_workloads(config: BenchConfig) -> Dict[str, List]:
    """Generate the key and word lists the selected structures need."""
    workload = WorkLoad(seed=config.seed)
    data = {}
    if any(s in KEY_STRUCTURES for s in config.structures):
        if config.key_kind == "ip":
            data["keys"] = workload.ips(config.size, order=config.key_order)
        else:
            data["keys"] = workload.ints(config.size, order=config.key_order)
    if any(s in TRIE_STRUCTURES for s in config.structures):
        data["words"] = workload.words(config.size, p_freq=config.prefix_freq)
    return data


def time_structure(name, items, repeat) -> Dict[str, np.ndarray]:
    """Return per-phase wall-clock seconds over `repeat` fresh instances."""
    factory = _factories()[name]
    timings = {phase: np.empty(repeat) for phase in PHASES}
    for r in range(repeat):
        structure = factory()
        phases = _phases(name, structure, items)
        for phase in PHASES:
            start = time.perf_counter()
            phases[phase]()
            timings[phase][r] = time.perf_counter() - start
        if len(structure) != 0:
            raise RuntimeError(f"{name}: {len(structure)} item(s) left after teardown")
    return timings


def run_benchmark(config: Optional[BenchConfig] = None, data: Optional[Dict[str, List]] = None) -> pd.DataFrame:
    """Time every selected structure and return one row per (structure, phase).

    Parameters
    ----------
    config : BenchConfig | None
        Defaults to `BenchConfig.from_env()`.
    data : dict | None
        Pre-generated ``{"keys": [...], "words": [...]}``; generated from
        `config` when omitted.
    """
    if config is None:
        config = BenchConfig.from_env()
    if data is None:
        data = make_workloads(config)

    rows = []
    for name in config.structures:
        items = data["words"] if name in TRIE_STRUCTURES else data["keys"]
        logger.info("benchmark %s: n=%d repeat=%d", name, len(items), config.repeat)
        timings = time_structure(name, items, config.repeat)
        for phase in PHASES:
            t = timings[phase]
            mean = float(t.mean())
            rows.append({
                "structure": name,
                "phase": phase,
                "n": len(items),
                "repeat": config.repeat,
                "mean_s": mean,
                "std_s": float(t.std()),
                "min_s": float(t.min()),
                "ops_per_s": (len(items) / mean) if mean > 0 else float("inf"),
            })
    return pd.DataFrame(rows, columns=RESULT_COLUMNS)


def summarize(results: pd.DataFrame) -> pd.DataFrame:
    """Pivot `run_benchmark` output to one row per structure, ops/s per phase."""
    table = results.pivot_table(index="structure", columns="phase", values="ops_per_s", aggfunc="mean")
    return table.reindex(columns=[p for p in PHASES if p in table.columns])


def trie_shape(words) -> pd.DataFrame:
    """Node count and average branching factor of both tries built from `words`."""
    simple = SimpleTrie(26, ascii_lower_index)
    simple.batch_add(words)
    counting = CountingTrie(words)
    rows = []
    for name, trie in (("simple_trie", simple), ("counting_trie", counting)):
        rows.append({
            "structure": name,
            "stored": len(trie),
            "nodes": trie.count_nodes(),
            "avg_branch_factor": trie.count_nodes(get_avg_branch_factor=True),
        })
    return pd.DataFrame(rows)
