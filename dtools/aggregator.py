"""
Parallel duplicate aggregation.

The input is split into contiguous chunks (one per worker), every chunk is
counted on its own thread, and each thread merges its local counts into a
shared CountTable as soon as it is done. Once every thread has been joined
the table is scanned for symbols seen at least min_count times.

states: partitioning -> dispatching -> merging -> barrier -> filtering -> done
        any task failure ends in failed
"""

import os
from tqdm import tqdm
from dtools.chunks import partition, count_chunk
from dtools.countTable import CountTable, default_min_count
from dtools.errors import AggregationError, InvalidRangeError, TaskExecutionError
from dtools.workPool import WorkPool

PENDING = 'pending'
PARTITIONING = 'partitioning'
DISPATCHING = 'dispatching'
MERGING = 'merging'
BARRIER = 'barrier'
FILTERING = 'filtering'
DONE = 'done'
FAILED = 'failed'


def default_workers(length):
    return max(1, min(os.cpu_count() or 1, length))


def check_workers(workers):
    if isinstance(workers, bool) or not isinstance(workers, int):
        raise ValueError('worker count must be a positive integer, got ' + repr(workers))
    if workers < 1:
        raise ValueError('worker count must be a positive integer, got ' + str(workers))
    return workers


def check_min_count(min_count):
    if min_count < 1:
        raise ValueError('min_count must be at least 1, got ' + str(min_count))
    return min_count


class DuplicateAggregator:
    def __init__(self, sequence, workers = None, progress = False):
        self.sequence = sequence
        self.length = len(sequence)
        if workers is None:
            self.workers = default_workers(self.length)
        else:
            # more workers than symbols would only produce empty chunks
            self.workers = max(1, min(check_workers(workers), self.length))
        self.progress = progress
        self.table = CountTable()
        self.chunks = []
        self.failures = []
        self.state = PENDING

    def count_and_merge(self, chunk):
        local_counts = count_chunk(self.sequence, chunk)
        self.table.merge(local_counts)
        return len(local_counts)

    def collect(self, works):
        failures = []
        for w in works:
            if not w.failed():
                continue
            chunk = w.args[0]
            if isinstance(w.error, InvalidRangeError):
                failures.append(w.error)
            else:
                failures.append(TaskExecutionError(chunk, w.error))
        return failures

    def run(self):
        if self.state in (BARRIER, DONE):
            return
        if self.state != PENDING:
            raise RuntimeError('aggregation already ran and ended in state ' + self.state)

        self.state = PARTITIONING
        self.chunks = partition(self.length, self.workers)

        self.state = DISPATCHING
        wpool = WorkPool(self.workers)
        for chunk in tqdm(self.chunks, desc='chunks', unit=' chunk', disable=not self.progress):
            wpool.start_work(self.count_and_merge, chunk)

        # workers merge on their own threads, the only wait is the join below
        self.state = MERGING
        works = wpool.wait_for_all()

        self.state = BARRIER
        self.failures = self.collect(works)
        if len(self.failures) > 0:
            self.state = FAILED
            raise AggregationError(self.failures)

    def counts(self):
        self.run()
        self.state = DONE
        return self.table.counts()

    def duplicates(self, min_count = default_min_count):
        check_min_count(min_count)
        self.run()
        self.state = FILTERING
        ret = self.table.duplicates(min_count)
        self.state = DONE
        return ret


def aggregate_counts(sequence, workers = None, progress = False):
    return DuplicateAggregator(sequence, workers, progress).counts()


def aggregate_duplicates(sequence, workers = None, min_count = default_min_count, progress = False):
    """
    Returns the set of symbols occurring at least min_count times in sequence.
    Raises ValueError for a bad worker count or min_count, AggregationError when
    any chunk failed.
    """
    check_min_count(min_count)
    return DuplicateAggregator(sequence, workers, progress).duplicates(min_count)
