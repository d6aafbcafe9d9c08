__version__ = '0.1.0'
# Workout metrics from raw activity counters: distance, mean speed and energy
# expenditure for running, walking and swimming, plus the fixed-layout text
# summaries built from them.
from activitycalc.kinematics import distance, mean_speed, swimming_mean_speed
from activitycalc.energy import (
    running_calories, walking_calories, swimming_calories)
from activitycalc.report import (
    ActivityKind, Summary, UNKNOWN_ACTIVITY, UnknownActivityReport, Workout,
    format_summary, generate_report, summarize)
from activitycalc._types import WorkoutLog
