#!/usr/bin/env python3
# -*- coding: utf-8 -*-
import logging

import numpy as np
from pandas import DataFrame

from activitycalc.report import ActivityKind, Workout, summarize
from activitycalc._types.base import DataFrameSubclass, new_column_sugar
from activitycalc._util.exceptions import UnknownActivityError


logger = logging.getLogger(__name__)

COLUMNS = list(Workout.__slots__)
REQUIRED_COLUMNS = ('kind', 'duration_h', 'weight_kg')
METRIC_COLUMNS = ('distance_km', 'speed_kmh', 'calories_kcal')
KIND_COLUMNS = {
    ActivityKind.RUNNING: ('action_count',),
    ActivityKind.WALKING: ('action_count', 'height_cm'),
    ActivityKind.SWIMMING: ('pool_length_m', 'pool_crossings'),
}


class WorkoutLog(DataFrameSubclass):
    """One workout per row, with columns named after the `Workout` fields.

    Columns that only matter for some activity kinds can be left out
    entirely, or hold NaN on rows where they don't apply.
    """

    @classmethod
    def from_workouts(cls, workouts):
        records = (workout.as_dict() for workout in workouts)
        return cls(DataFrame.from_records(records, columns=COLUMNS))

    @new_column_sugar(needs=REQUIRED_COLUMNS, name='distance_km')
    def distance_km(self):
        return self._metric('distance_km')

    @new_column_sugar(needs=REQUIRED_COLUMNS, name='speed_kmh')
    def speed_kmh(self):
        return self._metric('speed_kmh')

    @new_column_sugar(needs=REQUIRED_COLUMNS, name='calories_kcal')
    def calories_kcal(self):
        return self._metric('calories_kcal')

    def summaries(self):
        """A copy of the log with the metric columns appended."""
        out = self.copy()
        for column in METRIC_COLUMNS:
            out[column] = getattr(self, column)()
        return out

    # Private methods
    # ---------------
    def _metric(self, field):
        return np.array([np.nan if summary is None else getattr(summary, field)
                         for summary in self._gen_summaries()],
                        dtype='float64')

    def _gen_summaries(self):
        """Summary per row, or None where the kind isn't recognised or a
        field that kind needs is missing."""
        for index, row in self.iterrows():
            try:
                workout = Workout(**{name: row[name] for name in COLUMNS
                                     if name in row.index})
            except UnknownActivityError:
                logger.warning('row %r: unknown training type %r',
                               index, row['kind'])
                yield None
                continue

            missing = [name for name in KIND_COLUMNS[workout.kind]
                       if name not in row.index or row[name] is None]
            if missing:
                logger.warning('row %r: %s workout without %s', index,
                               workout.kind.label, ', '.join(missing))
                yield None
            else:
                yield summarize(workout)
