"""
Global symbol -> count table shared by all workers of one aggregation.
Every update holds the lock of the symbol's stripe, so adds for the same
symbol never interleave while adds for symbols on other stripes run freely.
"""

import threading

lock_stripes = 64
default_min_count = 2


class CountTable:
    def __init__(self, stripes = lock_stripes):
        if stripes < 1:
            raise ValueError('stripes must be at least 1')
        self.table = {}
        self.locks = [threading.Lock() for _ in range(stripes)]

    def lock_for(self, sym):
        return self.locks[hash(sym) % len(self.locks)]

    def add(self, sym, count = 1):
        with self.lock_for(sym):
            self.table[sym] = self.table.get(sym, 0) + count

    def merge(self, local_counts):
        for sym, count in local_counts.items():
            self.add(sym, count)

    def counts(self):
        return dict(self.table)

    # only call once every merge has finished
    def duplicates(self, min_count = default_min_count):
        if min_count < 1:
            raise ValueError('min_count must be at least 1, got ' + str(min_count))
        return set(sym for sym, count in self.table.items() if count >= min_count)

    def __len__(self):
        return len(self.table)
