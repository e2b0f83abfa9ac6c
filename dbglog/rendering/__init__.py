"""
Terminal rendering helpers.
"""

from .vtml import VTMLBuffer, vtmlescape, vtmlrender, vtmlprint
from .traceback import format_exception, print_exception

__public__ = ['VTMLBuffer', 'vtmlescape', 'vtmlrender', 'vtmlprint',
              'format_exception', 'print_exception']
