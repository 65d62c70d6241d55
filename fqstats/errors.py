#!/usr/bin/env python


class FastqStatsError(Exception):
    '''
    base class for problems found in the fastq input itself
    '''


class UnknownBaseError(FastqStatsError):

    def __init__(self, symbol):
        self.symbol = symbol
        super().__init__(f'unknown base {symbol}')


class QualityRangeError(FastqStatsError):

    def __init__(self, value):
        self.value = value
        super().__init__(f'quality score byte {value} is outside 0..126')


class NotGzipError(FastqStatsError):

    def __init__(self, path):
        self.path = path
        super().__init__(f'{path} is not gzip compressed')


class PlotFileError(FastqStatsError):

    def __init__(self, path, reason):
        self.path = path
        super().__init__(f'cannot save plot to {path}: {reason}')
