#!/usr/bin/env python3
from components.work_loads.en_word_generator import generate_random_words, gen_words_with_prefix_freq
from components.work_loads.key_generator import KeyConfig, KeyGenerator


class WorkLoad:
    def __init__(self, seed=None):
        self.seed = seed

    def words(self, num_words, p_freq=0, unique=False):
        if p_freq > 0:
            return gen_words_with_prefix_freq(num_words, p_freq, self.seed, unique)
        else:
            return generate_random_words(num_words, self.seed, unique)

    def ints(self, num_keys, order="random", low=0, high=1_000_000):
        config = KeyConfig(low=low, high=high, order=order, seed=self.seed)
        return KeyGenerator(config).ints(num_keys)

    def ips(self, num_keys, order="random", public_share=0.9):
        config = KeyConfig(order=order, public_share=public_share, seed=self.seed)
        return KeyGenerator(config).ips(num_keys)
