import threading


class Work(threading.Thread):
    """
    A thread that keeps what its target returned, or the exception it raised.
    """
    def __init__(self, func, args):
        threading.Thread.__init__(self, daemon=True)
        self.func = func
        self.args = args
        self.result = None
        self.error = None

    def run(self):
        try:
            self.result = self.func(*self.args)
        except Exception as e:
            self.error = e

    def failed(self):
        return self.error is not None


class WorkPool:
    def __init__(self, concurrency):
        if concurrency < 1:
            raise ValueError('concurrency must be at least 1, got ' + str(concurrency))
        self.total_concurrency = concurrency
        self.works = []
        self.done = []

    # blocks on the oldest running work while the pool is full
    def start_work(self, func, *args):
        if len(self.works) >= self.total_concurrency:
            w = self.works[0]
            w.join()
            self.done.append(w)
            self.works = self.works[1:]
        w = Work(func, args)
        self.works.append(w)
        w.start()
        return w

    def wait_for_all(self):
        for w in self.works:
            w.join()
        self.done.extend(self.works)
        self.works = []
        return self.done

    def running(self):
        return len(self.works)
