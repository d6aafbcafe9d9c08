#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Calibration constants.

These are fixed values; the formulas in `kinematics` and `energy` depend on
them being reproduced exactly.

"""

# Units
M_IN_KM = 1000      # metres in a kilometre
MIN_IN_H = 60       # minutes in an hour
CM_IN_M = 100       # centimetres in a metre
KMH_IN_MS = 0.278   # km/h --> m/s

# Strides
STRIDE_LENGTH_M = 0.65        # one running or walking step
SWIM_STROKE_LENGTH_M = 1.38   # one swimming stroke (not used by any formula)

# Walking
WALKING_WEIGHT_MULTIPLIER = 0.035
WALKING_HEIGHT_MULTIPLIER = 0.029

# Swimming
SWIMMING_SPEED_SHIFT = 1.1
SWIMMING_WEIGHT_MULTIPLIER = 2

# Running
RUNNING_SPEED_MULTIPLIER = 18
RUNNING_SPEED_SHIFT = 1.79
