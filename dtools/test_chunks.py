from unittest import TestCase

from dtools.chunks import ChunkRange, chunk_size, partition, count_chunk
from dtools.errors import InvalidRangeError

def covered(chunks):
    ret = []
    for start, end in chunks:
        ret.extend(range(start, end))
    return ret

class TestPartition(TestCase):
    def test_covers_every_index_once(self):
        for n in range(1, 40):
            for p in range(1, n + 5):
                chunks = partition(n, p)
                assert(covered(chunks) == list(range(n)))
                for c in chunks:
                    assert(c.start < c.end)

    def test_chunks_are_consecutive(self):
        chunks = partition(10, 3)
        assert(chunks == [ChunkRange(0, 4), ChunkRange(4, 8), ChunkRange(8, 10)])

    def test_more_workers_than_symbols(self):
        chunks = partition(3, 8)
        assert(chunks == [ChunkRange(0, 1), ChunkRange(1, 2), ChunkRange(2, 3)])

    def test_empty_input(self):
        assert(partition(0, 4) == [])

    def test_chunk_size_rounds_up(self):
        assert(chunk_size(10, 3) == 4)
        assert(chunk_size(9, 3) == 3)
        assert(chunk_size(1, 5) == 1)

    def test_bad_worker_count(self):
        with self.assertRaises(ValueError):
            partition(10, 0)

class TestCountChunk(TestCase):
    def test_counts_only_its_range(self):
        seq = 'helloworld'
        assert(count_chunk(seq, ChunkRange(0, 5)) == {'h': 1, 'e': 1, 'l': 2, 'o': 1})
        assert(count_chunk(seq, ChunkRange(5, 10)) == {'w': 1, 'o': 1, 'r': 1, 'l': 1, 'd': 1})

    def test_empty_range(self):
        assert(count_chunk('abc', ChunkRange(2, 2)) == {})

    def test_plain_tuple(self):
        assert(count_chunk(['x', 'y', 'x'], (0, 3)) == {'x': 2, 'y': 1})

    def test_invalid_ranges(self):
        for chunk in [ChunkRange(-1, 2), ChunkRange(3, 2), ChunkRange(0, 4)]:
            with self.assertRaises(InvalidRangeError) as ctx:
                count_chunk('abc', chunk)
            assert(ctx.exception.length == 3)

    def test_unhashable_symbol(self):
        with self.assertRaises(TypeError):
            count_chunk(['a', ['b']], ChunkRange(0, 2))
