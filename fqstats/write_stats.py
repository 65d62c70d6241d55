#!/usr/bin/env python

import numpy as np
import pandas as pd
import sys

from fqstats.position_counts import BASES


PHRED_OFFSET = 33


def get_cutoff(bases):
    '''
    return the number of leading positions to report: the index of the
    first row whose base counts sum to zero, or every row if none do
    '''
    empty = np.flatnonzero(bases.sum(axis=1) == 0)
    if empty.size:
        return int(empty[0])

    return bases.shape[0]


def bases_df(counts, last):
    """
    1-indexed position followed by the A, C, G, T, N counts
    """
    df = pd.DataFrame(counts.bases[:last], columns=list(BASES))
    df.insert(0, 'position', np.arange(1, last + 1))

    return df


def quals_df(counts, last):
    """
    1-indexed position followed by counts for phred 0 upwards; raw byte
    columns below the phred+33 zero point are dropped
    """
    phred = counts.quals[:last, PHRED_OFFSET:]
    df = pd.DataFrame(phred, columns=list(range(phred.shape[1])))
    df.insert(0, 'position', np.arange(1, last + 1))

    return df


def write_table(df, out):
    if df.shape[0] == 0:
        return
    df.to_csv(out, header=False, index=False, lineterminator='\n')


def write_stats(counts, out=None):
    '''
    print the record count and the base and quality tables, both cut off
    at the first position with no base calls
    '''
    if out is None:
        out = sys.stdout

    last = get_cutoff(counts.bases)

    out.write(f'sequences: {counts.records}\n')
    out.write('bases (A,C,G,T,N):\n')
    write_table(bases_df(counts, last), out)
    out.write(f'quals (0..{counts.quals.shape[1] - PHRED_OFFSET - 1}):\n')
    write_table(quals_df(counts, last), out)

    return last
