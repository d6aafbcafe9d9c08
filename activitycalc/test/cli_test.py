#!/usr/bin/env python3
# -*- coding: utf-8 -*-
import pandas as pd
import pytest

from activitycalc._util import cli


def test_single(capsys):
    status = cli.parse(['single', 'Running', '--actions', '1000',
                        '--duration', '1', '--weight', '70'])
    out = capsys.readouterr().out
    assert status == 0
    assert out.startswith('Training type: Running\n')
    assert 'Calories burned: 87.96\n' in out


def test_single_unknown(capsys):
    status = cli.parse(['single', 'Cycling', '--actions', '1000',
                        '--duration', '1', '--weight', '70'])
    assert status == 1
    assert capsys.readouterr().out == 'unknown training type\n'


def test_single_walking_needs_height():
    with pytest.raises(SystemExit) as excinfo:
        cli.parse(['single', 'Walking', '--actions', '1000',
                   '--duration', '1', '--weight', '70'])
    assert excinfo.value.code == 2


def test_single_swimming_needs_pool():
    for pool_args in ([], ['--pool-length', '25'], ['--pool-crossings', '40']):
        with pytest.raises(SystemExit) as excinfo:
            cli.parse(['single', 'Swimming', '--duration', '1',
                       '--weight', '70'] + pool_args)
        assert excinfo.value.code == 2


def test_table(tmp_path):
    source = tmp_path / 'workouts.csv'
    target = tmp_path / 'summaries.csv'
    source.write_text('kind,action_count,duration_h,weight_kg,height_cm,'
                      'pool_length_m,pool_crossings\n'
                      'Running,1000,1,70,,,\n'
                      'Swimming,,1,70,,25,40\n')

    assert cli.parse(['table', str(source), '--output', str(target)]) == 0

    written = pd.read_csv(str(target))
    assert list(written['kind']) == ['Running', 'Swimming']
    assert written['speed_kmh'].round(2).tolist() == [0.65, 1.0]
    assert written['calories_kcal'].round(2).tolist() == [87.96, 154.0]


def test_table_without_kind_columns(tmp_path, capsys):
    source = tmp_path / 'workouts.csv'
    source.write_text('kind,action_count,duration_h,weight_kg\n'
                      'Running,1000,1,70\n'
                      'Walking,9000,1.5,75\n')

    assert cli.parse(['table', str(source)]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 3
    assert lines[2].endswith('NA,NA,NA')
