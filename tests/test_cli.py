import io
import os
import sys
import tempfile
from unittest import TestCase
from unittest.mock import patch
from rectmerge.cli import main, parse_args
from rectmerge.models import EPSILON


class TestCli(TestCase):
    def setUp(self):
        fd, self.path = tempfile.mkstemp('.txt')
        with os.fdopen(fd, 'w') as f:
            f.write('# two tiles sharing x=1\n0 0 1 1\n1 0 2 1\n')

    def tearDown(self):
        os.remove(self.path)

    def test_defaults(self):
        args = parse_args([])
        self.assertEqual('-', args.input)
        self.assertEqual('polygons', args.mode)
        self.assertEqual(EPSILON, args.epsilon)

    def test_polygons(self):
        """Default output is one polygon per line"""
        out = io.StringIO()
        self.assertEqual(0, main([self.path], stdout=out))
        self.assertEqual('0 0 0 1 2 1 2 0\n', out.getvalue())

    def test_edges(self):
        out = io.StringIO()
        self.assertEqual(0, main(['--edges', self.path], stdout=out))
        lines = out.getvalue().splitlines()
        self.assertEqual(4, len(lines))
        self.assertIn('0 0 2 0', lines)
        self.assertIn('0 0 0 1', lines)

    def test_stdin(self):
        out = io.StringIO()
        with patch('sys.stdin', io.StringIO('0 0 1 1\n')):
            self.assertEqual(0, main(['-'], stdout=out))
        self.assertEqual('0 0 0 1 1 1 1 0\n', out.getvalue())

    def test_invalid_geometry(self):
        """Merge errors are reported on stderr with a non-zero status and no output"""
        out, err = io.StringIO(), io.StringIO()
        with patch('sys.stdin', io.StringIO('0 0 1 1\n3 0 2 1\n')), patch('sys.stderr', err):
            self.assertEqual(1, main([], stdout=out))
        self.assertEqual('', out.getvalue())
        self.assertTrue(err.getvalue().startswith('Error: Invalid rectangle'))

    def test_parse_error(self):
        err = io.StringIO()
        with patch('sys.stdin', io.StringIO('0 0 1\n')), patch('sys.stderr', err):
            self.assertEqual(1, main([], stdout=io.StringIO()))
        self.assertIn('Line 1', err.getvalue())

    def test_missing_file(self):
        err = io.StringIO()
        with patch('sys.stderr', err):
            self.assertEqual(1, main([self.path + '.missing'], stdout=io.StringIO()))
        self.assertIn('cannot read', err.getvalue())

    def test_plot(self):
        """--plot hands the rectangles and merged loops to plot_merge"""
        with patch('rectmerge.util.diagram.plot_merge') as plot_merge:
            self.assertEqual(0, main(['--edges', '--plot', 'out.png', self.path], stdout=io.StringIO()))
        rects, polygons = plot_merge.call_args[0]
        self.assertEqual(2, len(rects))
        self.assertEqual(1, len(polygons))
        self.assertEqual({'filename': 'out.png', 'show': False}, plot_merge.call_args[1])

    def test_full_precision_output(self):
        """Coordinates are written without rounding"""
        out = io.StringIO()
        with patch('sys.stdin', io.StringIO('0 0 1234567.5 1\n')):
            self.assertEqual(0, main([], stdout=out))
        self.assertEqual('0 0 0 1 1234567.5 1 1234567.5 0\n', out.getvalue())

    def test_non_finite_input(self):
        """NaN coordinates are reported as invalid geometry"""
        out, err = io.StringIO(), io.StringIO()
        with patch('sys.stdin', io.StringIO('0 0 nan 1\n')), patch('sys.stderr', err):
            self.assertEqual(1, main([], stdout=out))
        self.assertEqual('', out.getvalue())
        self.assertIn('non-finite', err.getvalue())

    def test_epsilon_must_be_positive(self):
        """A zero, negative or non-numeric tolerance is a usage error"""
        for value in ('0', '-1e-3', 'nan', 'abc'):
            err = io.StringIO()
            with patch('sys.stderr', err), self.assertRaises(SystemExit) as cm:
                main(['--epsilon', value, self.path], stdout=io.StringIO())
            self.assertEqual(2, cm.exception.code, value)
            self.assertIn('--epsilon', err.getvalue())

    def test_plot_without_diagram_libraries(self):
        """--plot fails with an error message, and no output, when the plotting module cannot be imported"""
        out, err = io.StringIO(), io.StringIO()
        with patch.dict(sys.modules, {'rectmerge.util.diagram': None}), patch('sys.stderr', err):
            self.assertEqual(1, main(['--plot', 'out.png', self.path], stdout=out))
        self.assertEqual('', out.getvalue())
        self.assertTrue(err.getvalue().startswith('Error: --plot is unavailable'))
