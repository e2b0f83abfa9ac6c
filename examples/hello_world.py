"""
Print a few values with a file banner and call trail.
"""

from dbglog import dbglog


def load(path):
    size = len(path)
    dbglog(__file__, 'load', 'path', path, 'size', size)
    return size


load('/tmp/hello.txt')
