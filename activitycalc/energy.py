#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Energy expenditure, one closed-form estimate per activity kind.

All results are in kilocalories.

"""
from activitycalc.constants import (
    KMH_IN_MS, M_IN_KM, MIN_IN_H,
    RUNNING_SPEED_MULTIPLIER, RUNNING_SPEED_SHIFT,
    SWIMMING_SPEED_SHIFT, SWIMMING_WEIGHT_MULTIPLIER,
    WALKING_HEIGHT_MULTIPLIER, WALKING_WEIGHT_MULTIPLIER)
from activitycalc.kinematics import mean_speed, swimming_mean_speed


def running_calories(action_count, weight_kg, duration_h):
    """Calories spent running.

    Parameters
    ----------
    action_count : int
        Number of steps.
    weight_kg : float
        Body mass in kilograms.
    duration_h : float
        Workout duration in hours.

    Examples
    --------
        >>> '{:.2f}'.format(running_calories(1000, 70, 1))
        '87.96'
    """
    speed = mean_speed(action_count, duration_h)
    return ((RUNNING_SPEED_MULTIPLIER * speed * RUNNING_SPEED_SHIFT)
            * weight_kg / M_IN_KM * duration_h * MIN_IN_H)


def walking_calories(action_count, duration_h, weight_kg, height_m):
    """Calories spent walking.

    Parameters
    ----------
    action_count : int
        Number of steps.
    duration_h : float
        Workout duration in hours.
    weight_kg : float
        Body mass in kilograms.
    height_m : float
        Body height in *metres*. Callers holding centimetres must divide by
        ``constants.CM_IN_M`` first.
    """
    speed_ms = mean_speed(action_count, duration_h) * KMH_IN_MS
    return ((WALKING_WEIGHT_MULTIPLIER * weight_kg
             + (speed_ms**2 / height_m)
             * WALKING_HEIGHT_MULTIPLIER * weight_kg)
            * duration_h * MIN_IN_H)


def swimming_calories(pool_length_m, pool_crossings, duration_h, weight_kg):
    """Calories spent swimming."""
    speed = swimming_mean_speed(pool_length_m, pool_crossings, duration_h)
    return ((speed * SWIMMING_SPEED_SHIFT)
            * SWIMMING_WEIGHT_MULTIPLIER * weight_kg * duration_h)
