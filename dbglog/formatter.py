"""
Text rules for a debug message.

A message is a list of parts: a file banner, a trace line and then a name
part followed by the untouched value for every entry.  Punctuation is only
added when the caller's labels don't already carry it.
"""

import collections
from .rendering import vtml

__public__ = ['Entry', 'MISSING', 'Formatter', 'VTMLFormatter',
              'pair_entries']

Entry = collections.namedtuple('Entry', 'name value')


class _Missing(object):

    def __repr__(self):
        return 'MISSING'

    def __bool__(self):
        return False


MISSING = _Missing()


def pair_entries(logs, named=None):
    """ Pair up alternating `name, value` args into `Entry` tuples.  Keyword
    entries follow the positional ones.  A trailing name without a value is
    paired with `MISSING`. """
    entries = []
    it = iter(logs)
    for name in it:
        entries.append(Entry(name, next(it, MISSING)))
    if named:
        entries.extend(Entry(k, v) for k, v in named.items())
    return entries


class Formatter(object):
    """ Plain text formatter. """

    pad = '-' * 8
    trace_lead = '> '
    trace_sep = ' > '
    trace_end = ':\n'

    def banner(self, file):
        return '{0}{1}{0}\n'.format(self.pad, file)

    def trace_elements(self, trace):
        if isinstance(trace, str):
            trace = [trace]
        elements = []
        for x in trace:
            if not isinstance(x, str):
                raise TypeError("Trace elements must be `str`, not `%s`" %
                                type(x).__name__)
            elements.append(x if x.endswith(')') else '%s()' % x)
        return elements

    def trace(self, trace):
        return '%s%s%s' % (self.trace_lead,
                           self.trace_sep.join(self.trace_elements(trace)),
                           self.trace_end)

    def name(self, name):
        if not isinstance(name, str):
            raise TypeError("Entry names must be `str`, not `%s`" %
                            type(name).__name__)
        lead = '' if name.startswith('\n') else '\n'
        tail = '' if name.endswith(':') else ':'
        return lead + name + tail

    def parts(self, file, trace, entries):
        """ Return the list of print parts for a message. """
        parts = [self.banner(file), self.trace(trace)]
        for name, value in entries:
            parts.append(self.name(name))
            if value is not MISSING:
                parts.append(value)
        return parts


class VTMLFormatter(Formatter):
    """ Same text as `Formatter` but label parts are `VTMLBuffer` objects
    decorated with the tags in `field_tags`.  Label text is never parsed as
    markup and values are never touched. """

    default_field_tags = {
        "pad": ('dim',),
        "file": ('b', 'magenta'),
        "trace": ('cyan',),
        "name": ('b',),
    }

    def __init__(self, field_tags=None):
        self.field_tags = field_tags or self.default_field_tags

    def decorate(self, field, text):
        buf = vtml.VTMLBuffer()
        tags = self.field_tags.get(field, ())
        for tag in tags:
            buf.append_tag(tag)
        buf.append_str(text)
        if tags:
            buf.append_reset()
        return buf

    def banner(self, file):
        pad = self.decorate('pad', self.pad)
        return pad + self.decorate('file', '%s' % (file,)) + pad + '\n'

    def trace(self, trace):
        buf = vtml.VTMLBuffer(self.trace_lead)
        for i, x in enumerate(self.trace_elements(trace)):
            if i:
                buf += self.trace_sep
            buf += self.decorate('trace', x)
        return buf + self.trace_end

    def name(self, name):
        text = super().name(name)
        return vtml.VTMLBuffer('\n') + self.decorate('name', text[1:])
