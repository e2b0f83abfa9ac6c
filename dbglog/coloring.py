"""
Color mode handling for terminal output.
"""

COLOR_MODES = ('auto', 'always', 'never')


def normalize_color(value):
    """ Accept a bool or one of `COLOR_MODES`. """
    if value is True:
        return 'always'
    elif value is False:
        return 'never'
    elif value in COLOR_MODES:
        return value
    raise ValueError("Invalid color mode: %r; Expected one of: %s" % (value,
                     ', '.join(COLOR_MODES)))


def use_color(mode, stream):
    """ `auto` means color only when `stream` is a terminal. """
    if mode == 'auto':
        isatty = getattr(stream, 'isatty', None)
        return bool(isatty and isatty())
    return mode == 'always'
