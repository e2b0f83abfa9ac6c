"""
Sink and color setting tests.
"""

import contextlib
import io
import logging
import tempfile
import unittest
import dbglog
from dbglog import coloring
from dbglog.logging import VTMLHandler


def raised(exc):
    try:
        raise exc
    except Exception as e:
        return e


class TTYStringIO(io.StringIO):

    def isatty(self):
        return True


class ColorTests(unittest.TestCase):

    def test_normalize_color(self):
        self.assertEqual(coloring.normalize_color(True), 'always')
        self.assertEqual(coloring.normalize_color(False), 'never')
        self.assertEqual(coloring.normalize_color('auto'), 'auto')
        self.assertRaises(ValueError, coloring.normalize_color, 'sometimes')

    def test_console_sink_bad_color(self):
        self.assertRaises(ValueError, dbglog.ConsoleSink, color='sometimes')
        self.assertRaises(ValueError, VTMLHandler, color='sometimes')

    def test_use_color(self):
        buf = io.StringIO()
        self.assertFalse(coloring.use_color('auto', buf))
        self.assertTrue(coloring.use_color('always', buf))
        self.assertFalse(coloring.use_color('never', buf))
        self.assertTrue(coloring.use_color('auto', TTYStringIO()))

    def test_console_sink_auto_tty(self):
        out = TTYStringIO()
        self.assertEqual(dbglog.ConsoleSink().color, 'auto')
        log = dbglog.DebugLogger(sink=dbglog.ConsoleSink(file=out))
        log('F', 't', 'x', 1)
        self.assertIn('\033[', out.getvalue())

    def test_default_sink_console(self):
        self.assertIsInstance(dbglog.DebugLogger().sink, dbglog.ConsoleSink)


class ConsoleSinkTests(unittest.TestCase):

    def test_stdout_at_write_time(self):
        sink = dbglog.ConsoleSink(color='never')
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            sink.write_line('a', 1)
            self.assertIs(sink.file, out)
        self.assertEqual(out.getvalue(), 'a 1\n')

    def test_write_error_text(self):
        err = io.StringIO()
        sink = dbglog.ConsoleSink(errfile=err, color='never')
        sink.write_error('plain message')
        self.assertEqual(err.getvalue(), 'plain message\n')

    def test_write_error_exception(self):
        err = io.StringIO()
        sink = dbglog.ConsoleSink(errfile=err, color='always')
        sink.write_error(raised(ValueError('bad value')))
        self.assertIn('ValueError', err.getvalue())
        self.assertIn('bad value', err.getvalue())
        self.assertIn('\033[', err.getvalue())


class FileSinkTests(unittest.TestCase):

    def setUp(self):
        self.tdir = tempfile.TemporaryDirectory()
        self.filename = '%s/debug.log' % self.tdir.name
        self.log = dbglog.DebugLogger(sink=dbglog.FileSink(self.filename))

    def tearDown(self):
        self.tdir.cleanup()

    def read(self):
        with open(self.filename) as f:
            return f.read()

    def test_append(self):
        self.log('F', 't', 'x', 1)
        self.log('G', 't', 'y', 2)
        self.assertEqual(self.read().count('--------'), 4)
        self.assertIn('--------G--------', self.read())

    def test_pformat_containers(self):
        self.log('F', 't', 'items', ['a', 'b'])
        self.assertIn("['a',\n 'b']", self.read())

    def test_error(self):
        self.log('F', 't', None, 1)
        content = self.read()
        self.assertIn('Traceback (most recent call last)', content)
        self.assertIn('TypeError', content)
        self.assertNotIn('<b>', content)


class LoggingSinkTests(unittest.TestCase):

    def test_line(self):
        log = dbglog.DebugLogger(sink=dbglog.LoggingSink('dbglog.test.line'))
        with self.assertLogs('dbglog.test.line', level='DEBUG') as cm:
            log('F', 'load', 'x', 1)
        record, = cm.records
        self.assertEqual(record.levelno, logging.DEBUG)
        self.assertEqual(record.getMessage(),
                         '--------F--------\n > load():\n \nx: 1')

    def test_lazy_args(self):
        obj = object()
        sink = dbglog.LoggingSink('dbglog.test.lazy', level=logging.INFO)
        log = dbglog.DebugLogger(sink=sink)
        with self.assertLogs('dbglog.test.lazy', level='INFO') as cm:
            log('F', 't', 'obj', obj)
        self.assertIs(cm.records[0].args[-1], obj)

    def test_error(self):
        log = dbglog.DebugLogger(sink=dbglog.LoggingSink('dbglog.test.err'))
        with self.assertLogs('dbglog.test.err', level='ERROR') as cm:
            log('F', 't', None, 1)
        record, = cm.records
        self.assertEqual(record.levelno, logging.ERROR)
        self.assertIs(record.exc_info[0], TypeError)

    def test_vtml_handler(self):
        stream = io.StringIO()
        logger = logging.getLogger('dbglog.test.vtml')
        logger.setLevel(logging.DEBUG)
        logger.propagate = False
        handler = VTMLHandler(stream, color='never')
        sink = dbglog.LoggingSink(logger, handler=handler)
        try:
            self.assertTrue(sink.markup)
            dbglog.DebugLogger(sink=sink)('F', 'load', 'x', 1)
        finally:
            logger.removeHandler(handler)
        output = stream.getvalue()
        self.assertIn('--------F--------', output)
        self.assertIn('> load():', output)
        self.assertIn('[dbglog.test.vtml]', output)
        self.assertNotIn('<b>', output)
        self.assertNotIn('\033[', output)

    def test_vtml_handler_color(self):
        stream = io.StringIO()
        logger = logging.getLogger('dbglog.test.vtmlcolor')
        logger.setLevel(logging.DEBUG)
        logger.propagate = False
        handler = VTMLHandler(stream, color='always')
        logger.addHandler(handler)
        try:
            sink = dbglog.LoggingSink(logger, level=logging.ERROR)
            sink.write_error(raised(KeyError('nope')))
        finally:
            logger.removeHandler(handler)
        output = stream.getvalue()
        self.assertIn('\033[31m', output)
        self.assertIn('Traceback (most recent call last)', output)
        self.assertIn('KeyError', output)

    def test_vtml_handler_leaves_values(self):
        stream = io.StringIO()
        logger = logging.getLogger('dbglog.test.vtmlvalues')
        logger.setLevel(logging.DEBUG)
        logger.propagate = False
        handler = VTMLHandler(stream, color='never')
        sink = dbglog.LoggingSink(logger, handler=handler)
        try:
            log = dbglog.DebugLogger(sink=sink)
            log('F', 't', 'html', '<b>bold</b>', 'stray', '</u>',
                'amp', 'a &amp; b')
        finally:
            logger.removeHandler(handler)
        output = stream.getvalue()
        self.assertIn('<b>bold</b>', output)
        self.assertIn('</u>', output)
        self.assertIn('a &amp; b', output)
        self.assertIn('--------F--------', output)
        for tag in ('<dim>', '<blue>', '<magenta>', '<cyan>'):
            self.assertNotIn(tag, output)
