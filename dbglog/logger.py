"""
Debug print helpers that show variable values with a source file banner and
a call trail.

    dbglog('app.py', ['main', 'load'], 'path', path, 'size', size)
    --------app.py--------
     > main() > load():

    path: /tmp/x
    size: 12

The trail is whatever the caller passes; no stack inspection is done.
Curried forms avoid repeating labels:

    log = dbglog.bind_file('app.py').bind_trace('load')
    log('path', path, size=size)

A failed debug call never raises; the failure is handed to the sink's error
channel instead, or printed to stderr if that channel fails as well.
"""

import sys
from . import rendering, sink as sinks
from .formatter import VTMLFormatter, pair_entries

__public__ = ['DebugLogger', 'FileLogger', 'StackLogger', 'dbglog']


def _split_args(args, names):
    """ Peel the leading positional labels off `args`.  Labels are taken
    positionally only so any keyword name stays free for an entry. """
    if len(args) < len(names):
        missing = ', '.join(repr(x) for x in names[len(args):])
        raise TypeError('missing required positional argument(s): %s' %
                        missing)
    return args[:len(names)] + (args[len(names):],)


class DebugLogger(object):
    """ Callable debug printer: `(file, trace, *logs, **named)`.

    `logs` alternate between a name and its value.  Keyword arguments are
    extra entries that follow the positional ones; any name is allowed,
    including `self`, `file` and `trace`. """

    def __init__(self, sink=None, formatter=None):
        self._sink = sink
        self.formatter = formatter if formatter is not None \
            else VTMLFormatter()

    @property
    def sink(self):
        if self._sink is None:
            self._sink = sinks.ConsoleSink()
        return self._sink

    def __call__(*args, **named):
        self, file, trace, logs = _split_args(args, ('self', 'file',
                                                     'trace'))
        sink = self.sink
        try:
            entries = pair_entries(logs, named)
            sink.write_line(*self.formatter.parts(file, trace, entries))
        except Exception as e:
            self.report_error(sink, e)

    def report_error(self, sink, exc):
        """ Hand `exc` to the sink's error channel, or to stderr if that
        fails too. """
        try:
            sink.write_error(exc)
        except Exception as e:
            rendering.print_exception(e, file=sys.stderr, plain=True)

    def bind_file(self, file):
        """ Return a `FileLogger` that always uses `file`. """
        return FileLogger(self, file)


class FileLogger(object):
    """ A `DebugLogger` call with the file label preset:
    `(trace, *logs, **named)`. """

    def __init__(self, logger, file):
        self._logger = logger
        self._file = file

    def __repr__(self):
        return '<%s file=%r>' % (type(self).__name__, self._file)

    @property
    def file(self):
        return self._file

    def __call__(*args, **named):
        self, trace, logs = _split_args(args, ('self', 'trace'))
        self._logger(self._file, trace, *logs, **named)

    def bind_trace(self, trace):
        """ Return a `StackLogger` that always uses `trace`. """
        return StackLogger(self, trace)


class StackLogger(object):
    """ A `FileLogger` call with the trace label preset too.  A list trace
    is copied so later changes to the caller's list are not seen, and `trace`
    hands back a fresh list each time. """

    def __init__(self, file_logger, trace):
        self._file_logger = file_logger
        self._is_list = isinstance(trace, list)
        self._trace = tuple(trace) if self._is_list else trace

    def __repr__(self):
        return '<%s file=%r trace=%r>' % (type(self).__name__, self.file,
                                          self.trace)

    @property
    def file(self):
        return self._file_logger.file

    @property
    def trace(self):
        return list(self._trace) if self._is_list else self._trace

    def __call__(*args, **named):
        self, logs = _split_args(args, ('self',))
        self._file_logger(self.trace, *logs, **named)


dbglog = DebugLogger()
