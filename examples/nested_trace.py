"""
Preset the file and trace labels once and reuse them.
"""

import dbglog

log = dbglog.bind_file('nested_trace.py')


def outer(items):
    trace = log.bind_trace(['outer', 'inner'])
    for i, x in enumerate(items):
        trace('index', i, 'item:', x, extra={"even": not i % 2})
    # A bad name is reported on stderr instead of raising.
    trace(None, 'oops')


outer(['a', 'b'])
