#!/usr/bin/env python

import numpy as np

from fqstats.classify_lines import classify_lines, HEADER, SEQUENCE, QUALITY
from fqstats.errors import UnknownBaseError, QualityRangeError


BASES = 'ACGTN'
MAX_QUAL = 127
INITIAL_CAPACITY = 512


def base_index():
    '''
    lookup of byte value -> column in the base table, -1 for anything
    that is not an uppercase A, C, G, T or N
    '''
    lookup = np.full(256, -1, dtype=np.int64)
    for idx, base in enumerate(BASES):
        lookup[ord(base)] = idx

    return lookup


BASE_INDEX = base_index()


class PositionCounts():
    '''
    per-position base and quality count tables plus the number of
    records they were built from

    bases: rows are zero-based read positions, columns are A, C, G, T, N
    quals: rows are zero-based read positions, columns are raw quality
           bytes 0..126 (no phred offset applied)
    '''

    def __init__(self, capacity=INITIAL_CAPACITY):
        self.records = 0
        self.bases = np.zeros((capacity, len(BASES)), dtype=np.int64)
        self.quals = np.zeros((capacity, MAX_QUAL), dtype=np.int64)

    @property
    def capacity(self):
        return self.bases.shape[0]

    def grow(self, length):
        '''
        extend both tables with empty rows so that a line of the given
        length fits, at least doubling the current number of rows
        '''
        if length <= self.capacity:
            return

        new_cap = max(length, self.capacity * 2)
        extra = new_cap - self.capacity
        self.bases = np.vstack(
            [self.bases, np.zeros((extra, len(BASES)), dtype=np.int64)])
        self.quals = np.vstack(
            [self.quals, np.zeros((extra, MAX_QUAL), dtype=np.int64)])


def to_array(line):
    if isinstance(line, str):
        line = line.encode('latin-1')

    return np.frombuffer(line, dtype=np.uint8)


def handle_bases(line, counts):
    """
    increment counts.bases at (offset, base) for every base in a sequence
    line; any symbol outside ACGTN stops the run before the line is counted
    """
    seq = to_array(line)
    if seq.size == 0:
        return

    cols = BASE_INDEX[seq]
    bad = np.flatnonzero(cols < 0)
    if bad.size:
        raise UnknownBaseError(chr(seq[bad[0]]))

    counts.grow(seq.size)
    counts.bases[np.arange(seq.size), cols] += 1


def handle_quals(line, counts):
    """
    increment counts.quals at (offset, raw byte) for every character of
    a quality line
    """
    qual = to_array(line)
    if qual.size == 0:
        return

    high = np.flatnonzero(qual >= MAX_QUAL)
    if high.size:
        raise QualityRangeError(int(qual[high[0]]))

    counts.grow(qual.size)
    counts.quals[np.arange(qual.size), qual] += 1


def count_fastq(lines, counts):
    '''
    stream the lines of one fastq file into counts

    header lines bump the record count, sequence and quality lines update
    the position tables, separator lines are ignored

    returns the number of records seen in this stream
    '''
    records = 0
    for role, line in classify_lines(lines):
        if role == HEADER:
            records += 1
            counts.records += 1
        elif role == SEQUENCE:
            handle_bases(line, counts)
        elif role == QUALITY:
            handle_quals(line, counts)

    return records
