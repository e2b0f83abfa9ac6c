"""
Render a failed debug call's exception as VTML lines, chained exceptions
first, in the same order `python` itself prints them.
"""

import traceback
from . import vtml

CAUSE_MESSAGE = 'The above exception was the direct cause of the ' \
                'following exception:'
CONTEXT_MESSAGE = 'During handling of the above exception, another ' \
                  'exception occurred:'

HEADER = '<b><u>Traceback (most recent call last)</u></b>'
FRAME = '<dim>%-3s</dim> <cyan>File</cyan> "<blue>%s</blue>", line ' \
        '<u>%d</u>, in <b>%s</b>'
SUMMARY = '<b><red>%s</red>: %s</b>'


def _chained(exc):
    if exc.__cause__ is not None:
        return exc.__cause__, CAUSE_MESSAGE
    if exc.__context__ is not None and not exc.__suppress_context__:
        return exc.__context__, CONTEXT_MESSAGE
    return None, None


def format_exception(exc, indent=0, pad='  '):
    """ Yield VTML lines for `exc`.  Each exception further down a chain is
    indented one more `pad` than the one it led to.  Source text and the
    message are escaped so they print verbatim. """
    esc = vtml.vtmlescape
    parent, joiner = _chained(exc)
    if parent is not None:
        indent += yield from format_exception(parent, indent, pad)
    lead = pad * indent
    if joiner:
        yield '\n%s%s\n' % (lead, joiner)
    yield lead + HEADER
    frames = traceback.extract_tb(exc.__traceback__)
    for depth, frame in zip(range(len(frames), 0, -1), frames):
        yield lead + FRAME % ('%d.' % depth, esc(frame.filename),
                              frame.lineno, esc(frame.name))
        if frame.line:
            yield '%s      %s' % (lead, esc(frame.line))
    yield lead + SUMMARY % (type(exc).__name__, esc(str(exc)))
    return 1


def print_exception(*args, file=None, plain=None, **kwargs):
    """ Print the formatted output of an exception object. """
    for line in format_exception(*args, **kwargs):
        vtml.vtmlprint(line, file=file, plain=plain)
