#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Workout summaries.

Each activity kind has its own recipe for distance, speed and calories. A
`Workout` is run through the recipe for its kind by `summarize`, and
`format_summary` renders the result as a fixed five-line report.

`generate_report` wraps the two for callers holding raw values and a textual
activity label. It is total: an unrecognised label gives back the
`UNKNOWN_ACTIVITY` sentinel instead of raising.

"""
from collections import namedtuple
from enum import Enum
import logging

from activitycalc import energy, kinematics
from activitycalc.constants import CM_IN_M
from activitycalc._util.exceptions import UnknownActivityError


logger = logging.getLogger(__name__)

REPORT_TEMPLATE = ('Training type: {label}\n'
                   'Duration: {duration_h:.2f} h.\n'
                   'Distance: {distance_km:.2f} km.\n'
                   'Speed: {speed_kmh:.2f} km/h\n'
                   'Calories burned: {calories_kcal:.2f}\n')


class ActivityKind(Enum):
    RUNNING = 'Running'
    WALKING = 'Walking'
    SWIMMING = 'Swimming'

    @classmethod
    def from_label(cls, label):
        """Exact label lookup. Members are passed straight through.

        Raises
        ------
        UnknownActivityError
            If `label` isn't one of the member values.
        """
        if isinstance(label, cls):
            return label
        try:
            return cls(label)
        except ValueError:
            raise UnknownActivityError(label) from None

    @property
    def label(self):
        return self.value


class Workout:
    """A single workout's raw counters.

    Only the fields relevant to `kind` need values: `height_cm` is read for
    walking, `pool_length_m` and `pool_crossings` for swimming, and
    `action_count` for running and walking.
    """
    __slots__ = ('kind', 'action_count', 'duration_h', 'weight_kg',
                 'height_cm', 'pool_length_m', 'pool_crossings')

    def __init__(self, kind, action_count=0, duration_h=0.0, weight_kg=0.0,
                 height_cm=None, pool_length_m=None, pool_crossings=None):
        self.kind = ActivityKind.from_label(kind)
        self.action_count = action_count
        self.duration_h = duration_h
        self.weight_kg = weight_kg
        self.height_cm = height_cm
        self.pool_length_m = pool_length_m
        self.pool_crossings = pool_crossings

    def __repr__(self):
        fields = ', '.join('{}={!r}'.format(name, getattr(self, name))
                           for name in self.__slots__)
        return '{}({})'.format(type(self).__name__, fields)

    def __eq__(self, other):
        if not isinstance(other, Workout):
            return NotImplemented
        return all(getattr(self, name) == getattr(other, name)
                   for name in self.__slots__)

    def as_dict(self):
        """Field values keyed by name, with `kind` as its label."""
        record = {name: getattr(self, name) for name in self.__slots__}
        record['kind'] = self.kind.label
        return record


Summary = namedtuple(
    'Summary', 'kind duration_h distance_km speed_kmh calories_kcal')


class UnknownActivityReport(str):
    """What `generate_report` returns for a label it doesn't recognise.

    Compares equal to the plain sentinel text, but can be told apart from a
    real report with ``isinstance``. The rejected label is kept on `label`.
    """
    def __new__(cls, label=None):
        self = super().__new__(cls, UnknownActivityError._default_message)
        self.label = label
        return self


UNKNOWN_ACTIVITY = UnknownActivityReport()


# Per-kind recipes
# ----------------
def _running(workout):
    return (kinematics.distance(workout.action_count),
            kinematics.mean_speed(workout.action_count, workout.duration_h),
            energy.running_calories(workout.action_count, workout.weight_kg,
                                    workout.duration_h))


def _walking(workout):
    height_m = workout.height_cm / CM_IN_M
    return (kinematics.distance(workout.action_count),
            kinematics.mean_speed(workout.action_count, workout.duration_h),
            energy.walking_calories(workout.action_count, workout.duration_h,
                                    workout.weight_kg, height_m))


def _swimming(workout):
    # NOTE: distance applies the step length to the crossing count; the
    # stroke length constant is left unused.
    return (kinematics.distance(workout.pool_crossings),
            kinematics.swimming_mean_speed(workout.pool_length_m,
                                           workout.pool_crossings,
                                           workout.duration_h),
            energy.swimming_calories(workout.pool_length_m,
                                     workout.pool_crossings,
                                     workout.duration_h, workout.weight_kg))


RECIPES = {
    ActivityKind.RUNNING: _running,
    ActivityKind.WALKING: _walking,
    ActivityKind.SWIMMING: _swimming,
}


def summarize(workout):
    """Distance, speed and calories for a workout.

    Parameters
    ----------
    workout : Workout

    Returns
    -------
    Summary

    Raises
    ------
    UnknownActivityError
        If ``workout.kind`` has no recipe.
    """
    try:
        recipe = RECIPES[workout.kind]
    except KeyError:
        raise UnknownActivityError(workout.kind) from None

    logger.debug('summarizing %s workout', workout.kind.label)
    distance_km, speed_kmh, calories_kcal = recipe(workout)
    return Summary(workout.kind, workout.duration_h,
                   distance_km, speed_kmh, calories_kcal)


def format_summary(summary):
    """Render a `Summary` with the fixed report layout."""
    return REPORT_TEMPLATE.format(label=summary.kind.label,
                                  duration_h=summary.duration_h,
                                  distance_km=summary.distance_km,
                                  speed_kmh=summary.speed_kmh,
                                  calories_kcal=summary.calories_kcal)


def generate_report(action_count, kind_label, duration_h, weight_kg,
                    height_cm, pool_length_m, pool_crossings):
    """Text report for a workout given as raw values.

    Parameters
    ----------
    action_count : int
        Steps for running or walking. Ignored for swimming.
    kind_label : str or ActivityKind
        'Running', 'Walking' or 'Swimming'. Matched exactly.
    duration_h : float
        Workout duration in hours.
    weight_kg : float
        Body mass in kilograms.
    height_cm : float
        Body height in centimetres; only read for walking.
    pool_length_m, pool_crossings : int
        Pool length in metres and number of crossings; only read for
        swimming.

    Returns
    -------
    str
        The formatted report, or an `UnknownActivityReport` (equal to
        `UNKNOWN_ACTIVITY`) if `kind_label` isn't recognised.
    """
    try:
        workout = Workout(kind_label, action_count, duration_h, weight_kg,
                          height_cm, pool_length_m, pool_crossings)
    except UnknownActivityError:
        logger.warning('unknown training type %r', kind_label)
        return UnknownActivityReport(kind_label)

    return format_summary(summarize(workout))
