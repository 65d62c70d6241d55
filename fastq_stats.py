#!/usr/bin/env python
"""
File: fastq_stats.py
Description:
  Main script in fastq_stats. Reports what bases were called at what
  quality at each read position across one or more gzipped fastq files:
    - per-position A, C, G, T, N counts
    - per-position phred+33 quality score counts
    - optional plot of mean quality per position
License: Apache-2.0 license
"""

import argparse
import sys
import zlib

from fqstats.errors import FastqStatsError
from fqstats.open_fastq import open_fastq
from fqstats.plot_stats import check_plot_file, save_quality_plot
from fqstats.position_counts import PositionCounts, count_fastq
from fqstats.write_stats import write_stats


DESCRIPTION = '''fastq_stats reports summary stats on fastq files.

You use it to get an overview of what bases were called at what quality at
each base position. Useful for seeing what difference re-calling bases made
(compare the output of this program on original fastqs to the output on
re-called fastqs).'''


class StatsParser(argparse.ArgumentParser):
    '''
    argparse exits 2 on a usage error, fastq_stats exits 1
    '''

    def error(self, message):
        self.print_usage(sys.stderr)
        sys.exit(f'ERROR: {message}')


def parse_user_input(argv=None):
    parser = StatsParser(
        prog='fastq_stats',
        description=DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter)

    parser.add_argument('fastq', type=str, nargs='+',
                        help='gzip-compressed fastq file(s), e.g. *.fastq.gz')

    parser.add_argument('-plot', type=str, required=False,
                        help='optional: save a plot of mean quality per position to this file (e.g. quals.png)')

    parser.add_argument('-v', dest='verbose', action='store_true',
                        help='print progress for each file to stderr')

    args = parser.parse_args(argv)

    return args


def parse_fastqs(args, counts):
    '''
    stream every input file, in the order given, into the same counts
    '''
    for path in args.fastq:
        if args.verbose:
            print(f'reading {path}', file=sys.stderr)
        with open_fastq(path) as f:
            records = count_fastq(f, counts)
        if args.verbose:
            print(f'{records} sequences in {path}', file=sys.stderr)

    return counts


def main(argv=None):
    args = parse_user_input(argv)
    counts = PositionCounts()

    try:
        if args.plot:
            check_plot_file(args.plot)
        parse_fastqs(args, counts)
    except (FastqStatsError, OSError, EOFError, zlib.error) as e:
        sys.exit(f'ERROR: {e}')

    last = write_stats(counts)

    if not args.plot:
        return
    if last == 0:
        print('no sequences to plot', file=sys.stderr)
        return

    try:
        save_quality_plot(counts, last, args.plot)
    except (OSError, ValueError) as e:
        sys.exit(f'ERROR: {e}')
    if args.verbose:
        print(f'saved quality plot to {args.plot}', file=sys.stderr)


if __name__ == '__main__':
    main()
