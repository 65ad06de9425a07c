"""
Timing and lightweight profiling of calculation stages.
"""
import sys
import time
import datetime
import threading
from functools import wraps


class ScriptTime(object):
    def __init__(self, profile=False):
        """
        Tracks the elapsed time of a script and, if *profile* is enabled, the call counts and durations of functions
        wrapped with ``profilefn``.

        :param bool profile: toggle for profiling functions
        """
        self._start_seconds = time.time()
        self._start_clock = time.localtime()
        self._end_seconds = None
        self.profile = profile
        self.profiles = {}  # function name: [number of calls, total duration, shortest, longest]
        self._lock = threading.Lock()

    def __repr__(self):
        return f'{self.__class__.__name__}({self.start_time})'

    @property
    def start_time(self):
        return time.strftime('%I:%M:%S %p', self._start_clock)

    @property
    def elapsed_time(self):
        if self._end_seconds is None:
            return time.time() - self._start_seconds
        return self._end_seconds - self._start_seconds

    def clearprofiles(self):
        """clears the profile data"""
        with self._lock:
            self.profiles = {}

    def record(self, name, duration):
        """
        Adds a call of the named function to the profile data.

        :param str name: function name
        :param float duration: duration of the call (s)
        """
        with self._lock:
            if name not in self.profiles:
                self.profiles[name] = [0, 0., duration, duration]
            data = self.profiles[name]
            data[0] += 1
            data[1] += duration
            data[2] = min(data[2], duration)
            data[3] = max(data[3], duration)

    def profilefn(self, fn):
        """generates a profiled version of the supplied function"""
        if self.profile is not True:
            return fn

        @wraps(fn)
        def with_profiling(*args, **kwargs):
            start = time.perf_counter()
            try:
                return fn(*args, **kwargs)
            finally:
                self.record(fn.__name__, time.perf_counter() - start)

        return with_profiling

    def printprofiles(self, stream=sys.stdout):
        """prints the data for the profiled functions"""
        stream.write('\nFunction profile data:\n')
        stream.write('%25s  %6s  %15s  %15s  %15s\n' % ('function', 'called', 'avg', 'max', 'min'))
        for fname, (called, total, shortest, longest) in sorted(self.profiles.items()):
            stream.write('%25s  %6d  %15s  %15s  %15s\n' % (
                fname,
                called,
                datetime.timedelta(seconds=total / called),
                datetime.timedelta(seconds=longest),
                datetime.timedelta(seconds=shortest),
            ))

    def printelapsed(self, stream=sys.stdout):
        """prints the elapsed time of the object"""
        stream.write(f'Elapsed time: {datetime.timedelta(seconds=self.elapsed_time)}\n')

    def triggerend(self):
        """triggers endpoint and calculates elapsed time since start"""
        self._end_seconds = time.time()


# profiler shared by the calculation stages
st = ScriptTime(profile=True)
