"""
VT100 markup (VTML) for colored debug output.

Markup is a tiny SGML dialect, e.g. `<b><cyan>load()</cyan></b>`.  Rendering
produces a `VTMLBuffer` which knows the difference between visible text and
the escape opcodes that decorate it.
"""

import enum
import html.parser

TAGS = {
    'b': 1,
    'dim': 2,
    'i': 3,
    'u': 4,
    'reverse': 7,
    'black': 30,
    'red': 31,
    'green': 32,
    'yellow': 33,
    'blue': 34,
    'magenta': 35,
    'cyan': 36,
    'white': 37,
}


# Private-use code points standing in for characters the HTML state machine
# must not see: `&` is swapped on every feed, `<` only where vtmlescape()
# marked text as literal.
AMP_MARK = '\ue2c6'
LT_MARK = '\ue2c7'


def vtmlescape(text):
    """ Mark `text` so vtmlrender() shows it verbatim instead of reading any
    tags in it. """
    return text.replace('<', LT_MARK)


class VTMLParser(html.parser.HTMLParser):
    """ Turn VTML markup into a `VTMLBuffer`.  Tags we don't know about are
    treated as plain text so labels like `<lambda>` survive intact. """

    def __init__(self):
        super().__init__(convert_charrefs=False)

    def feed(self, data):
        assert not self.closed
        if AMP_MARK in data:
            raise ValueError("Reserved code point in markup: %r" % AMP_MARK)
        super().feed(data.replace('&', AMP_MARK))

    def reset(self):
        self.closed = False
        self.vbuf = VTMLBuffer()
        self.open_tags = []
        super().reset()

    def handle_starttag(self, tag, attrs):
        if tag in TAGS:
            self.open_tags.append(tag)
        else:
            self.handle_data(self.get_starttag_text())

    def handle_startendtag(self, tag, attrs):
        self.handle_data(self.get_starttag_text())

    def handle_endtag(self, tag):
        if tag not in TAGS:
            self.handle_data("</%s>" % tag)
        elif self.open_tags and self.open_tags[-1] == tag:
            self.open_tags.pop()
            self.vbuf.append_reset()
        else:
            raise SyntaxError("Bad close tag: %s" % tag)

    def handle_data(self, data):
        for tag in self.open_tags:
            self.vbuf.append_tag(tag)
        self.vbuf.append_str(data.replace(AMP_MARK, '&')
                                 .replace(LT_MARK, '<'))

    def handle_comment(self, data):
        self.handle_data('<!--%s-->' % data)

    def handle_decl(self, decl):
        self.handle_data('<!%s>' % decl)

    def close(self):
        assert not self.closed
        super().close()
        if self.open_tags:
            self.vbuf.append_reset()
        self.closed = True


class VTMLBuffer(object):
    """ A str-like object whose length and `text()` ignore the nonvisual
    vt100 opcodes it carries. """

    ops = enum.Enum('ops', 'reset tag str')
    _reset_opcode = '\033[0m'

    def __init__(self, value=None):
        self._values = []
        if value is not None:
            if isinstance(value, str):
                self.append_str(value)
            elif isinstance(value, VTMLBuffer):
                self.extend(value)
            else:
                raise TypeError("Init value must be `str` or `VTMLBuffer`")

    def __len__(self):
        return len(self.text())

    def __str__(self):
        buf = []
        for op, val in self._values:
            if op == self.ops.str:
                buf.append(val)
            elif op == self.ops.tag:
                buf.append('\033[%dm' % TAGS[val])
            else:
                buf.append(self._reset_opcode)
        return ''.join(buf)

    def __repr__(self):
        return '<VTMLBuffer %r>' % self.text()

    def __eq__(self, other):
        return str(self) == str(other)

    def __format__(self, fmt):
        """ Support re-embedding as markup with the `vtml` format spec. E.g.
            >>> '<u>{:vtml}</u>'.format(vtmlrender('<b>file</b>'))
            '<u><b>file</b></u>'
        """
        if fmt != 'vtml':
            return format(str(self), fmt)
        buf = []
        tag_stack = []
        for op, val in self._values:
            if op == self.ops.str:
                buf.append(vtmlescape(val))
            elif op == self.ops.tag:
                tag_stack.append(val)
                buf.append('<%s>' % val)
            elif tag_stack:
                buf.extend('</%s>' % x for x in reversed(tag_stack))
                del tag_stack[:]
        return ''.join(buf)

    def __add__(self, other):
        new = VTMLBuffer(self)
        new += other
        return new

    def __iadd__(self, other):
        if isinstance(other, str):
            self.append_str(other)
        elif isinstance(other, VTMLBuffer):
            self.extend(other)
        else:
            raise TypeError("Invalid concatenation type: %s" % type(other))
        return self

    def append_reset(self):
        self._values.append((self.ops.reset, None))

    def append_tag(self, tag):
        self._values.append((self.ops.tag, tag))

    def append_str(self, value):
        self._values.append((self.ops.str, value))

    def extend(self, buf):
        if not isinstance(buf, VTMLBuffer):
            raise TypeError("Expected `VTMLBuffer`")
        self._values.extend(buf._values)

    def text(self):
        """ Return just the text content of this string without opcodes. """
        return ''.join(val for op, val in self._values if op == self.ops.str)

    def plain(self):
        return VTMLBuffer(self.text())


def vtmlrender(vtmarkup, plain=None, strict=False):
    """ Look for vt100 markup and render vt opcodes into a VTMLBuffer.
    Malformed markup is rendered as literal text unless `strict` is set. """
    if isinstance(vtmarkup, VTMLBuffer):
        return vtmarkup.plain() if plain else vtmarkup
    if not isinstance(vtmarkup, str):
        return VTMLBuffer(str(vtmarkup))
    parser = VTMLParser()
    try:
        parser.feed(vtmarkup)
        parser.close()
    except (SyntaxError, ValueError):
        if strict:
            raise
        return VTMLBuffer(str(vtmarkup))
    buf = parser.vbuf
    return buf.plain() if plain else buf


def vtmlprint(*values, plain=None, strict=None, **options):
    """ Follow normal print() signature but look for vt100 codes for richer
    output. """
    print(*[vtmlrender(x, plain=plain, strict=strict) for x in values],
          **options)
