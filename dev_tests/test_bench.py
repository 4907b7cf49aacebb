import os
import unittest
from unittest import mock

import pandas as pd

from components.bench import PHASES, RESULT_COLUMNS, make_workloads, run_benchmark, summarize, trie_shape
from components.config import STRUCTURES, BenchConfig


class TestBenchConfig(unittest.TestCase):
    def test_defaults(self):
        config = BenchConfig()
        self.assertEqual(config.structures, STRUCTURES)
        self.assertEqual(config.repeat, 3)

    def test_validation(self):
        with self.assertRaises(ValueError):
            BenchConfig(structures=("splay_tree",))
        with self.assertRaises(ValueError):
            BenchConfig(structures=())
        with self.assertRaises(ValueError):
            BenchConfig(size=0)
        with self.assertRaises(ValueError):
            BenchConfig(key_kind="float")
        with self.assertRaises(ValueError):
            BenchConfig(prefix_freq=1.5)

    def test_from_env(self):
        env = {"STRUCTBENCH_SEED": "9", "STRUCTBENCH_SIZE": "250", "STRUCTBENCH_REPEAT": "2"}
        with mock.patch.dict(os.environ, env):
            config = BenchConfig.from_env(repeat=5)
        self.assertEqual(config.seed, 9)
        self.assertEqual(config.size, 250)
        self.assertEqual(config.repeat, 5)


class TestRunBenchmark(unittest.TestCase):
    def test_every_structure_and_phase(self):
        config = BenchConfig(size=200, repeat=2, seed=1)
        results = run_benchmark(config)
        self.assertIsInstance(results, pd.DataFrame)
        self.assertEqual(list(results.columns), RESULT_COLUMNS)
        self.assertEqual(len(results), len(STRUCTURES) * len(PHASES))
        self.assertTrue((results["n"] == 200).all())
        self.assertTrue((results["ops_per_s"] > 0).all())
        self.assertTrue((results["min_s"] <= results["mean_s"]).all())

        table = summarize(results)
        self.assertEqual(sorted(table.index), sorted(STRUCTURES))
        self.assertEqual(list(table.columns), list(PHASES))

    def test_ip_keys_with_duplicates(self):
        config = BenchConfig(structures=("bst", "min_heap"), size=100, repeat=1, key_kind="ip", seed=2)
        results = run_benchmark(config)
        self.assertEqual(set(results["structure"]), {"bst", "min_heap"})

    def test_only_needed_workloads_generated(self):
        data = make_workloads(BenchConfig(structures=("counting_trie",), size=50, seed=3))
        self.assertEqual(set(data), {"words"})
        self.assertEqual(len(data["words"]), 50)

    def test_trie_shape(self):
        shape = trie_shape(["a", "ab", "ac", "b", "b"])
        rows = shape.set_index("structure")
        self.assertEqual(rows.loc["simple_trie", "stored"], 4)
        self.assertEqual(rows.loc["counting_trie", "stored"], 5)
        self.assertEqual(rows.loc["simple_trie", "nodes"], 5)
        self.assertEqual(rows.loc["counting_trie", "nodes"], 5)


if __name__ == "__main__":
    unittest.main(verbosity=2)
