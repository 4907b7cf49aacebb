import ipaddress
import random
from typing import Dict, Optional, List
from dataclasses import dataclass

import numpy as np
from faker import Faker

KEY_ORDERS = ("random", "sorted", "reversed", "duplicates")

## === Config Class === ##

@dataclass
class KeyConfig:
    """
    Configuration for KeyGenerator
        low, high: int, half-open range [low, high) for integer keys
        order: str, one of KEY_ORDERS; "sorted"/"reversed" produce the
               degenerate insertion orders for an unbalanced BST
        duplicate_share: float, fraction of keys redrawn from earlier keys
                         when order == "duplicates"
        public_share: float, proportion of public IPs
        private_weights: dict, weights for private IPs {a: x, b: x, c: x}
        seed: int, seed for random number generator
    """
    low: int = 0
    high: int = 1_000_000
    order: str = "random"
    duplicate_share: float = 0.5
    public_share: float = 0.9  # fraction of public IPs
    private_weights: Optional[Dict[str, float]] = None  # weights for {'a','b','c'}
    seed: Optional[int] = None  # seed for random number generator

    def __post_init__(self):
        if self.high <= self.low:
            raise ValueError("high must be greater than low")
        if self.order not in KEY_ORDERS:
            raise ValueError(f"order must be one of {KEY_ORDERS}, got {self.order!r}")
        if not 0.0 <= self.duplicate_share < 1.0:
            raise ValueError("duplicate_share must be in [0, 1)")
        if not 0.0 <= self.public_share <= 1.0:
            raise ValueError("public_share must be in [0, 1]")
        if self.private_weights is None:
            self.private_weights = {'a': 0.35, 'b': 0.10, 'c': 0.55}
        else:
            missing = [k for k in ('a','b','c') if k not in self.private_weights]
            if missing:
                raise ValueError(f"private_weights missing keys: {missing}")
            if any(self.private_weights[k] < 0 for k in ('a','b','c')):
                raise ValueError("private_weights must be non-negative")
            if sum(self.private_weights[k] for k in ('a','b','c')) == 0:
                raise ValueError("Sum of private_weights must be > 0")
            srtd = {cls: self.private_weights[cls] for cls in sorted(self.private_weights.keys())}
            self.private_weights = srtd


class KeyGenerator:
    """Ordered keys for the BST and heap benchmarks: integers and IPv4 addresses."""

    def __init__(self, config: KeyConfig):
        self.config = config
        self.rng = random.Random(self.config.seed)
        self.np_rng = np.random.default_rng(self.config.seed)

        self.fake = Faker()
        if self.config.seed is not None:
            self.fake.seed_instance(self.config.seed)
        self.priv_classes, self.weights = zip(*self.config.private_weights.items())

    def _arrange(self, keys: np.ndarray) -> np.ndarray:
        order = self.config.order
        if order == "sorted":
            return np.sort(keys)
        if order == "reversed":
            return np.sort(keys)[::-1]
        if order == "duplicates":
            n = len(keys)
            redraw = self.np_rng.random(n) < self.config.duplicate_share
            redraw[0] = False
            # every redrawn key copies one drawn before it
            sources = (self.np_rng.random(n) * np.arange(n)).astype(np.int64)
            keys = keys.copy()
            for i in np.flatnonzero(redraw):
                keys[i] = keys[sources[i]]
        return keys

    def ints(self, n) -> List[int]:
        if n <= 0:
            raise ValueError("n must be positive")
        keys = self.np_rng.integers(self.config.low, self.config.high, size=n)
        return [int(k) for k in self._arrange(keys)]

    def _priv_class(self):
        return self.rng.choices(self.priv_classes, weights=self.weights, k=1)[0]

    def single_ip(self) -> ipaddress.IPv4Address:
        if self.rng.random() > self.config.public_share:
            cls = self._priv_class()
            return ipaddress.IPv4Address(self.fake.ipv4_private(address_class=cls))
        return ipaddress.IPv4Address(self.fake.ipv4_public())

    def ips(self, n) -> List[ipaddress.IPv4Address]:
        if n <= 0:
            raise ValueError("n must be positive")
        keys = [self.single_ip() for _ in range(n)]
        if self.config.order == "sorted":
            keys.sort()
        elif self.config.order == "reversed":
            keys.sort(reverse=True)
        return keys
