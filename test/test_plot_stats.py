import numpy as np
import os
import sys
import tempfile
import unittest

sys.path.append(os.path.join(os.path.dirname(os.path.abspath(__file__)), '..'))
from fqstats.errors import PlotFileError
import fqstats.plot_stats as ps
import fqstats.position_counts as pc

'''
usage:
python3 -m unittest test_plot_stats.py
'''


class TestPlotStats(unittest.TestCase):

    def test_mean_quals_1(self):
        '''
        'I' is phred 40 and '!' is phred 0, so two reads average to 20
        '''
        counts = pc.PositionCounts()
        pc.count_fastq(['@a', 'AA', '+', 'I!', '@b', 'AA', '+', '!!'], counts)
        df = ps.mean_quals(counts, 2)
        self.assertEqual(list(df['position']), [1, 2])
        self.assertEqual(list(df['mean_quality']), [20.0, 0.0])

    def test_mean_quals_2(self):
        '''
        a position with bases but no quality characters is NaN
        '''
        counts = pc.PositionCounts()
        pc.count_fastq(['@a', 'AAA', '+', 'II'], counts)
        df = ps.mean_quals(counts, 3)
        self.assertEqual(df['mean_quality'][1], 40.0)
        self.assertTrue(np.isnan(df['mean_quality'][2]))

    def test_save_quality_plot_1(self):
        counts = pc.PositionCounts()
        pc.count_fastq(['@a', 'ACGT', '+', '#5?I'], counts)
        with tempfile.TemporaryDirectory() as tmp:
            plot_file = os.path.join(tmp, 'quals.png')
            df = ps.save_quality_plot(counts, 4, plot_file)
            self.assertTrue(os.path.exists(plot_file))
        self.assertEqual(list(df['mean_quality']), [2.0, 20.0, 30.0, 40.0])

    def test_check_plot_file_1(self):
        with tempfile.TemporaryDirectory() as tmp:
            ps.check_plot_file(os.path.join(tmp, 'quals.png'))
            ps.check_plot_file(os.path.join(tmp, 'quals.pdf'))
            ps.check_plot_file(os.path.join(tmp, 'quals'))

    def test_check_plot_file_2(self):
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(PlotFileError) as cm:
                ps.check_plot_file(os.path.join(tmp, 'x.notaformat'))
        self.assertIn('format notaformat is not supported', str(cm.exception))

    def test_check_plot_file_3(self):
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(PlotFileError):
                ps.check_plot_file(os.path.join(tmp, 'missing', 'q.png'))


if __name__ == '__main__':
    unittest.main()
