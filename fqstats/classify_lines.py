#!/usr/bin/env python

HEADER = 1
SEQUENCE = 2
SEPARATOR = 3
QUALITY = 4


def classify_lines(lines):
    '''
    yield (role, line) for every line of a single fastq stream

    roles cycle header, sequence, separator, quality every 4 lines,
    always starting at header; nothing about the record is validated,
    so a stream with a missing line desyncs silently
    '''
    role = 0
    for line in lines:
        role = role % 4 + 1
        yield role, strip_newline(line)


def strip_newline(line):
    """
    drop a trailing \\n or \\r\\n from either a bytes or str line
    """
    if isinstance(line, bytes):
        return line.rstrip(b'\r\n')

    return line.rstrip('\r\n')
