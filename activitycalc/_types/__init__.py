from activitycalc._types.base import *
from activitycalc._types.workoutlog import WorkoutLog
