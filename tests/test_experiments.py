import csv
import io

import matplotlib
matplotlib.use('Agg')

import matplotlib.pyplot as plt
import pandas as pd
import pytest

from experiments import plot_heatmap, run_experiments
from uniqseq.errors import DuplicateDetected


def test_sweep_phases():
    assert list(run_experiments.sweep_phases(1000)) == [
        ('small', 10, 100, 1),
        ('medium', 400, 600, 100),
        ('high', 800, 1000, 100),
        ('full', 50, 1000, 500),
    ]


def test_sweep_phases_small_universe_steps_forward():
    assert all(inc >= 1 for _, _, _, inc in run_experiments.sweep_phases(100))


@pytest.mark.parametrize('mode', run_experiments.MODES)
def test_time_strategy_with_check(mode):
    assert run_experiments.time_strategy(mode, 200, 10, 200, 50, check_valid=True) >= 0


def test_time_strategy_detects_duplicates(monkeypatch):
    monkeypatch.setitem(run_experiments.CHOOSERS, 'broken', lambda count, universe, seed: [1, 1])
    with pytest.raises(DuplicateDetected):
        run_experiments.time_strategy('broken', 10, 2, 3, 1, check_valid=True)


def test_run_universe_writes_rows(capsys):
    out = io.StringIO()
    run_experiments.run_universe(csv.writer(out), 100, ['qpr', 'bitmap'], True, 1)
    rows = list(csv.reader(io.StringIO(out.getvalue())))
    assert len(rows) == 8
    assert {row[2] for row in rows} == {'qpr', 'bitmap'}
    assert "Time for 'qpr' (universeSize: 100" in capsys.readouterr().out


def test_prepare_pivot_and_plot(tmp_path):
    df = pd.DataFrame({
        'universe_size': [1000, 1000, 10000, 1000, 1000],
        'phase': ['full', 'full', 'full', 'full', 'small'],
        'mode': ['qpr', 'qpr', 'qpr', 'bitmap', 'qpr'],
        'time_us': [10.0, 30.0, 200.0, 50.0, 999.0],
    })
    pivot = plot_heatmap.prepare_pivot(df, 'full')
    assert pivot.loc['qpr', 1000] == 20.0
    assert pivot.loc['qpr', 10000] == 200.0
    assert pivot.index.tolist() == ['bitmap', 'qpr']
    out = tmp_path / 'heatmap.png'
    fig = plot_heatmap.plot_heatmap(pivot, out_file=str(out))
    assert out.exists()
    assert not plt.fignum_exists(fig.number)


def test_plot_kept_open_when_shown(tmp_path):
    pivot = pd.DataFrame({1000: [5.0]}, index=['qpr'])
    fig = plot_heatmap.plot_heatmap(pivot, out_file=str(tmp_path / 'h.png'), show=True)
    assert plt.fignum_exists(fig.number)
    plt.close(fig)
