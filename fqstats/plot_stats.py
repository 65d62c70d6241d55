#!/usr/bin/env python

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
import numpy as np
import os
import pandas as pd
import seaborn as sns
from matplotlib.backend_bases import FigureCanvasBase

from fqstats.errors import PlotFileError
from fqstats.write_stats import PHRED_OFFSET


def check_plot_file(plot_file):
    '''
    fail before any fastq is read if the plot could not be saved: the
    image format must be one matplotlib writes and the directory must
    exist and be writable
    '''
    ext = os.path.splitext(plot_file)[1][1:].lower()
    if not ext:
        ext = matplotlib.rcParams['savefig.format']
    if ext not in FigureCanvasBase.get_supported_filetypes():
        raise PlotFileError(plot_file, f'format {ext} is not supported')

    plot_dir = os.path.dirname(os.path.abspath(plot_file))
    if not os.path.isdir(plot_dir):
        raise PlotFileError(plot_file, f'directory {plot_dir} not found')
    if not os.access(plot_dir, os.W_OK):
        raise PlotFileError(plot_file, f'directory {plot_dir} is not writable')


def mean_quals(counts, last):
    '''
    mean phred score at each of the first 'last' positions; positions
    with no quality characters are NaN
    '''
    phred = counts.quals[:last, PHRED_OFFSET:]
    scores = np.arange(phred.shape[1])
    totals = phred.sum(axis=1)
    with np.errstate(invalid='ignore', divide='ignore'):
        means = (phred * scores).sum(axis=1) / totals

    return pd.DataFrame({'position': np.arange(1, last + 1),
                         'mean_quality': np.where(totals > 0, means, np.nan)})


def save_quality_plot(counts, last, plot_file):
    """
    line plot of mean phred quality by read position, saved to plot_file
    """
    df = mean_quals(counts, last)
    ax = sns.lineplot(data=df, x='position', y='mean_quality', color='blue')
    ax.set_xlabel('position')
    ax.set_ylabel('mean phred quality')
    plt.savefig(plot_file, bbox_inches='tight', facecolor='white',
                transparent=False)
    plt.close()

    return df
