"""
Send debug output through the logging module with a tty aware handler.
"""

import logging
import dbglog

logging.getLogger('dbglog').setLevel(logging.DEBUG)
log = dbglog.DebugLogger(sink=dbglog.LoggingSink(handler=True))
log('to_logging.py', 'main', 'config', {"retries": 3, "verbose": True})
