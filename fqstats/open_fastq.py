#!/usr/bin/env python

import gzip

from fqstats.errors import NotGzipError


GZIP_MAGIC = b'\x1f\x8b'


def test_gzip(f):
    """
    read the first two bytes of the input file and compare them to the
    gzip magic number
    """
    with open(f, 'rb') as f_o:
        return f_o.read(2) == GZIP_MAGIC


def open_fastq(f):
    '''
    open a gzip-compressed fastq file as a binary line stream

    the caller is expected to use the returned handle as a context
    manager so it is closed whether or not the file is read to the end
    '''
    if not test_gzip(f):
        raise NotGzipError(f)

    return gzip.open(f, 'rb')

