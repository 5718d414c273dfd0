"""
Errors raised while counting chunks and aggregating their counts
"""


class InvalidRangeError(ValueError):
    def __init__(self, start, end, length):
        ValueError.__init__(self, 'invalid chunk [%d, %d) for a sequence of length %d' % (start, end, length))
        self.start = start
        self.end = end
        self.length = length


class TaskExecutionError(Exception):
    def __init__(self, chunk, error):
        Exception.__init__(self, 'chunk %s failed: %s: %s' % (chunk, type(error).__name__, error))
        self.chunk = chunk
        self.error = error


class AggregationError(Exception):
    """
    Raised once all dispatched chunks have finished and at least one of them failed.
    failures holds every TaskExecutionError / InvalidRangeError that was collected.
    """
    def __init__(self, failures):
        msg = '%d of the dispatched chunks failed' % len(failures)
        if len(failures) > 0:
            msg = msg + ', first: ' + str(failures[0])
        Exception.__init__(self, msg)
        self.failures = list(failures)
