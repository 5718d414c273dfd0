"""
Partitioning of an input sequence into contiguous chunks, and per-chunk counting.
A chunk is a half-open range [start, end) into the sequence.
"""

from collections import Counter, namedtuple
from dtools.errors import InvalidRangeError

ChunkRange = namedtuple('ChunkRange', ['start', 'end'])


def chunk_size(length, workers):
    # ceil(length / workers)
    return -(-length // workers)


def partition(length, workers):
    if workers < 1:
        raise ValueError('workers must be at least 1, got ' + str(workers))
    ret = []
    if length == 0:
        return ret
    size = chunk_size(length, workers)
    for i in range(0, length, size):
        start = i
        end = min(length, i + size)
        if start >= end:
            continue
        ret.append(ChunkRange(start, end))
    return ret


def count_chunk(sequence, chunk):
    start, end = chunk
    if start < 0 or start > end or end > len(sequence):
        raise InvalidRangeError(start, end, len(sequence))
    return dict(Counter(sequence[start:end]))
