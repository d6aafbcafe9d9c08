#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Distance and speed from raw action counts.

"""
from activitycalc.constants import M_IN_KM, STRIDE_LENGTH_M


def distance(action_count):
    """Distance covered for a number of actions.

    Parameters
    ----------
    action_count : int
        Steps when running or walking; pool crossings when swimming.

    Returns
    -------
    float
        Distance in kilometres.

    Examples
    --------
        >>> distance(1000)
        0.65
    """
    return action_count * STRIDE_LENGTH_M / M_IN_KM


def mean_speed(action_count, duration_h):
    """Mean speed over a workout, in km/h.

    A zero duration means no motion, so the speed is 0 rather than an error.
    """
    if duration_h == 0:
        return 0
    return distance(action_count) / duration_h


def swimming_mean_speed(pool_length_m, pool_crossings, duration_h):
    """Mean speed in the pool, in km/h.

    Parameters
    ----------
    pool_length_m : int
        Length of the pool in metres.
    pool_crossings : int
        How many times the pool was crossed.
    duration_h : float
        Workout duration in hours. Zero gives a speed of 0.
    """
    if duration_h == 0:
        return 0
    return pool_length_m * pool_crossings / M_IN_KM / duration_h
