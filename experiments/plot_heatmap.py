# experiments/plot_heatmap.py
"""
Draw a heatmap of generator timings: columns = universe size, rows = generator
mode, cell = mean time (us) for one sweep phase, coloured on a log10 scale.

CSV expected columns: universe_size, phase, mode, time_us
 - universe_size: int (e.g. 1000, 10000...)
 - phase: small | medium | high | full
 - mode: qpr | bitmap | naive
 - time_us: int

Usage:
    python plot_heatmap.py --csv results/experiments_XXXX.csv --phase full --out heatmap.png
"""

import argparse
import pandas as pd
import numpy as np
import matplotlib.pyplot as plt
import os

REQUIRED = {'universe_size', 'phase', 'mode', 'time_us'}


def prepare_pivot(df, phase):
    # mean time for each (mode, universe_size) of the selected phase
    agg = df[df['phase'] == phase].groupby(['mode', 'universe_size'], as_index=False)['time_us'].mean()
    pivot = agg.pivot(index='mode', columns='universe_size', values='time_us')
    return pivot.sort_index()


def _annotate(ax, data):
    # raw microseconds on top of the log-scaled colours
    for (i, j), val in np.ndenumerate(data):
        label = 'N/A' if np.isnan(val) else f"{val:.0f}"
        ax.text(j, i, label, ha='center', va='center', fontsize=9,
                color='gray' if np.isnan(val) else 'white')


def plot_heatmap(pivot, title='Generator timings', out_file=None, annotate=True, show=False):
    """
    Colour = log10 of the mean time, so the naive baseline does not flatten
    the other rows. The figure is closed after saving unless `show` is set.
    """
    data = pivot.values.astype(float)  # NaN for missing (mode, universe) pairs
    log_data = np.log10(np.where(data > 0, data, np.nan))

    fig, ax = plt.subplots(figsize=(1.2*pivot.shape[1]+3, 0.6*pivot.shape[0]+2))
    im = ax.imshow(log_data, aspect='auto', interpolation='nearest', cmap='viridis')
    ax.set(xticks=range(pivot.shape[1]), yticks=range(pivot.shape[0]),
           xlabel='Universe size', ylabel='Generator', title=title)
    ax.set_xticklabels([f"{c:,}" for c in pivot.columns], rotation=45, ha='right')
    ax.set_yticklabels(pivot.index)

    if annotate:
        _annotate(ax, data)

    fig.colorbar(im, ax=ax, fraction=0.046, pad=0.04, label='log10(time in us)')
    fig.tight_layout()
    if out_file:
        os.makedirs(os.path.dirname(out_file) or '.', exist_ok=True)
        fig.savefig(out_file, dpi=300)
        print(f"Heatmap saved to {out_file}")
        if not show:
            plt.close(fig)
    return fig


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument('--csv', required=True, help='Path to experiments CSV')
    parser.add_argument('--phase', default='full', help='small | medium | high | full')
    parser.add_argument('--out', default='results/heatmap_timings.png', help='Output PNG path')
    parser.add_argument('--title', default=None, help='Plot title')
    parser.add_argument('--show', action='store_true', help='Open a window with the plot')
    args = parser.parse_args()

    df = pd.read_csv(args.csv)
    if not REQUIRED.issubset(set(df.columns)):
        raise SystemExit(f"CSV must contain columns: {REQUIRED}. Found: {df.columns.tolist()}")

    df['universe_size'] = df['universe_size'].astype(int)
    df['time_us'] = df['time_us'].astype(float)

    pivot = prepare_pivot(df, args.phase)
    if pivot.empty:
        raise SystemExit(f"No rows for phase '{args.phase}'")
    plot_heatmap(pivot, title=args.title or f"Generator timings ({args.phase} count)",
                 out_file=args.out, show=args.show)
    if args.show:
        plt.show()


if __name__ == '__main__':
    main()
