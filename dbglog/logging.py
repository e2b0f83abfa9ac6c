"""
A logging handler that's tty aware.
"""

import logging
from . import coloring, rendering


class VTMLHandler(logging.StreamHandler):
    """ Parse VTML messages to colorize and embolden logs.  Markup is
    stripped when the stream is not a terminal. """

    def __init__(self, *args, fmt=None, level_prefmt=None, field_prefmt=None,
                 color='auto', **kwargs):
        super().__init__(*args, **kwargs)
        self.color = coloring.normalize_color(color)
        self.setFormatter(VTMLLogFormatter(fmt=fmt, level_prefmt=level_prefmt,
                                           field_prefmt=field_prefmt))

    def format(self, record):
        plain = not coloring.use_color(self.color, self.stream)
        return str(rendering.vtmlrender(super().format(record), plain=plain))


class VTMLLogFormatter(logging.Formatter):

    default_fmt = ' '.join((
        '[%(asctime)s]',
        '[%(name)s]',
        '[%(levelname)s]',
        '%(message)s'
    ))
    default_level_prefmt = {
        logging.DEBUG: '<dim>%s</dim>',
        logging.INFO: '%s',
        logging.WARNING: '<b>%s</b>',
        logging.ERROR: '<red>%s</red>',
        logging.CRITICAL: '<red><b>%s</b></red>',
    }
    default_field_prefmt = {
        "asctime": '<blue>%s</blue>',
        "filename": '<magenta>%s</magenta>',
        "funcName": '<yellow>%s</yellow>',
        "lineno": '<cyan>%s</cyan>',
        "name": '<green>%s</green>',
    }

    def __init__(self, fmt=None, field_prefmt=None, level_prefmt=None,
                 **kwargs):
        fmt = fmt or self.default_fmt
        field_prefmt = field_prefmt or self.default_field_prefmt
        self.field_prefmt = dict((k, v) for k, v in field_prefmt.items()
                                 if '%%(%s)' % k in fmt)
        self.level_prefmt = level_prefmt or self.default_level_prefmt
        self.asctime_prefmt = self.field_prefmt.pop('asctime', None)
        super().__init__(fmt=fmt, **kwargs)

    def formatException(self, ei):
        return '\n'.join(rendering.format_exception(ei[1]))

    def formatTime(self, *args, **kwargs):
        s = super().formatTime(*args, **kwargs)
        return self.asctime_prefmt % s if self.asctime_prefmt else s

    def format(self, record):
        # Work on a copy so other handlers see the undecorated record.
        record = logging.makeLogRecord(record.__dict__)
        level_fmt = self.level_prefmt.get(record.levelno, '%s')
        record.levelname = level_fmt % record.levelname
        for key, fmt in self.field_prefmt.items():
            setattr(record, key, fmt % getattr(record, key))
        return super().format(record)
