#!/usr/bin/env python3
# -*- coding: utf-8 -*-
import numpy as np
import pandas as pd
import pytest

from activitycalc import energy, kinematics
from activitycalc.report import Workout
from activitycalc._types import WorkoutLog
from activitycalc._util.exceptions import RequiredColumnError


workouts = [
    Workout('Running', 1000, 1, 70),
    Workout('Walking', 9000, 1.5, 75, height_cm=175),
    Workout('Swimming', duration_h=1, weight_kg=70,
            pool_length_m=25, pool_crossings=40),
]
log = WorkoutLog.from_workouts(workouts)


def test_from_workouts():
    assert isinstance(log, WorkoutLog)
    assert list(log['kind']) == ['Running', 'Walking', 'Swimming']
    assert len(log) == 3


def test_metrics():
    assert np.allclose(log.distance_km().values,
                       [0.65, 5.85, kinematics.distance(40)])
    assert np.allclose(log.speed_kmh().values, [0.65, 3.9, 1.0])
    assert np.allclose(log.calories_kcal().values, [
        energy.running_calories(1000, 70, 1),
        energy.walking_calories(9000, 1.5, 75, 1.75),
        energy.swimming_calories(25, 40, 1, 70)])


def test_metric_series_alignment():
    subset = log.iloc[1:]
    assert isinstance(subset, WorkoutLog)
    speeds = subset.speed_kmh()
    assert speeds.name == 'speed_kmh'
    assert list(speeds.index) == [1, 2]


def test_summaries():
    summaries = log.summaries()
    assert isinstance(summaries, WorkoutLog)
    for column in ('distance_km', 'speed_kmh', 'calories_kcal'):
        assert column in summaries
        assert column not in log


def test_unknown_kind_gives_nan():
    mixed = WorkoutLog(pd.DataFrame({
        'kind': ['Running', 'Cycling'],
        'action_count': [1000, 1000],
        'duration_h': [1.0, 1.0],
        'weight_kg': [70.0, 70.0],
    }))
    calories = mixed.calories_kcal()
    assert np.isclose(calories[0], energy.running_calories(1000, 70, 1))
    assert np.isnan(calories[1])


def test_missing_column():
    with pytest.raises(RequiredColumnError):
        WorkoutLog(pd.DataFrame({'kind': ['Running']})).distance_km()


def test_empty_log():
    empty = WorkoutLog.from_workouts([])
    assert len(empty) == 0
    assert len(empty.calories_kcal()) == 0


def test_missing_kind_columns_give_nan(caplog):
    base = {'duration_h': [1.0], 'weight_kg': [70.0]}
    logs = {
        'Running': WorkoutLog(pd.DataFrame(dict(base, kind=['Running']))),
        'Walking': WorkoutLog(pd.DataFrame(
            dict(base, kind=['Walking'], action_count=[9000]))),
        'Swimming': WorkoutLog(pd.DataFrame(
            dict(base, kind=['Swimming'], pool_length_m=[25]))),
    }
    with caplog.at_level('WARNING', logger='activitycalc._types.workoutlog'):
        for label, partial_log in logs.items():
            summaries = partial_log.summaries()
            for column in ('distance_km', 'speed_kmh', 'calories_kcal'):
                assert np.isnan(summaries[column][0])
    assert 'without action_count' in caplog.text
    assert 'without height_cm' in caplog.text
    assert 'without pool_crossings' in caplog.text


def test_workouts_without_kind_fields():
    partial_log = WorkoutLog.from_workouts([
        Workout('Walking', 9000, 1.5, 75),
        Workout('Running', 1000, 1, 70),
    ])
    calories = partial_log.calories_kcal()
    assert np.isnan(calories[0])
    assert np.isclose(calories[1], energy.running_calories(1000, 70, 1))
