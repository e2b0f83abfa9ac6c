"""
Public interface.
"""

import importlib

for x in ['formatter', 'sink', 'logger', 'rendering']:
    module = importlib.import_module('.%s' % x, 'dbglog')
    for sym in module.__public__:
        globals()[sym] = getattr(module, sym)

bind_file = dbglog.bind_file
