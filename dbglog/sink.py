"""
Output sinks.  A sink is anything with `write_line(*parts)` for normal
output and `write_error(*parts)` for reporting a failed debug call.
"""

import logging
import pprint
import sys
from . import coloring, rendering
from .logging import VTMLHandler
from .rendering import vtml

__public__ = ['ConsoleSink', 'FileSink', 'LoggingSink']


class ConsoleSink(object):
    """ Print parts to stdout and failures to stderr.  The streams default to
    whatever `sys.stdout` and `sys.stderr` are at write time.  With the
    default `color='auto'` labels are colored only on a terminal. """

    def __init__(self, file=None, errfile=None, color='auto'):
        self._file = file
        self._errfile = errfile
        self.color = coloring.normalize_color(color)

    @property
    def file(self):
        return self._file if self._file is not None else sys.stdout

    @property
    def errfile(self):
        return self._errfile if self._errfile is not None else sys.stderr

    def render(self, part, color):
        if isinstance(part, vtml.VTMLBuffer) and not color:
            return part.text()
        return part

    def write_line(self, *parts):
        stream = self.file
        color = coloring.use_color(self.color, stream)
        print(*[self.render(x, color) for x in parts], file=stream)

    def write_error(self, *parts):
        stream = self.errfile
        color = coloring.use_color(self.color, stream)
        for x in parts:
            if isinstance(x, BaseException):
                rendering.print_exception(x, file=stream, plain=not color)
            else:
                print(self.render(x, color), file=stream)


class FileSink(object):
    """ Append plain text to a debug file.  Only used when constructed
    explicitly. """

    def __init__(self, filename):
        self.filename = filename

    def render(self, part):
        if isinstance(part, vtml.VTMLBuffer):
            return part.text()
        elif isinstance(part, (list, dict)):
            return pprint.pformat(part, width=1)
        else:
            return str(part)

    def write(self, text):
        with open(self.filename, 'a') as f:
            f.write(text + '\n')

    def write_line(self, *parts):
        self.write(' '.join(self.render(x) for x in parts))

    def write_error(self, *parts):
        lines = []
        for x in parts:
            if isinstance(x, BaseException):
                lines.extend(vtml.vtmlrender(line, plain=True).text()
                             for line in rendering.format_exception(x))
            else:
                lines.append(self.render(x))
        self.write('\n'.join(lines))


class EscapedValue(object):
    """ Defer `str()` of a value and escape it so a VTML handler shows it
    verbatim. """

    __slots__ = ('value',)

    def __init__(self, value):
        self.value = value

    def __str__(self):
        return vtml.vtmlescape(str(self.value))


class LoggingSink(object):
    """ Route debug output to a `logging.Logger`.  Values are passed as lazy
    `%s` args so they are only rendered if a handler emits the record.

    With `handler=True` a `VTMLHandler` is attached; labels then keep their
    color markup and values are escaped so they are never read as markup. """

    def __init__(self, logger='dbglog', level=logging.DEBUG, handler=None,
                 markup=None):
        if isinstance(logger, str):
            logger = logging.getLogger(logger)
        self.logger = logger
        self.level = level
        if handler is True:
            handler = VTMLHandler()
        if handler is not None:
            self.logger.addHandler(handler)
        if markup is None:
            markup = isinstance(handler, VTMLHandler)
        self.markup = markup

    def render(self, part):
        if isinstance(part, vtml.VTMLBuffer):
            return format(part, 'vtml') if self.markup else part.text()
        return EscapedValue(part) if self.markup else part

    def write_line(self, *parts):
        fmt = ' '.join(['%s'] * len(parts))
        self.logger.log(self.level, fmt, *[self.render(x) for x in parts])

    def write_error(self, *parts):
        for x in parts:
            if isinstance(x, BaseException):
                self.logger.error('%s: %s', type(x).__name__,
                                  self.render(x), exc_info=x)
            else:
                self.logger.error('%s', self.render(x))
