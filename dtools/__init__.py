from dtools.errors import AggregationError, InvalidRangeError, TaskExecutionError
from dtools.chunks import ChunkRange, partition, count_chunk
from dtools.countTable import CountTable
from dtools.workPool import WorkPool
from dtools.count_multi import count_multi, count_symbols
from dtools.aggregator import DuplicateAggregator, aggregate_counts, aggregate_duplicates, default_workers
