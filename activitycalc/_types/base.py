#!/usr/bin/env python3
# -*- coding: utf-8 -*-
from functools import wraps

from pandas import DataFrame, Series

from activitycalc._util import exceptions


__all__ = ('DataFrameSubclass', 'new_column_sugar')  # using * import elsewhere


class DataFrameSubclass(DataFrame):
    """DataFrame that stays itself through slicing and copying."""
    _metadata = []

    @property
    def _constructor(self):
        return self.__class__

    def __finalize__(self, other, method=None, **kwargs):
        """Propagate metadata from other to self."""
        for name in self._metadata:
            object.__setattr__(self, name, getattr(other, name, None))
        return self


def new_column_sugar(needs: tuple, name=None):
    """Decorator for WorkoutLog methods that compute one value per row.

    Parameters
    ----------
    needs : tuple
        Column names that must be present.
    name : str, optional
        The name for the returned Series object.

    Returns
    -------
    Series
        Aligned with the log's index, suitable for joining back onto it.

    Raises
    ------
    RequiredColumnError
        If a column specified in `needs` is not present.
    """
    def real_decorator(func):
        @wraps(func)
        def wrapper(self, *args, **kwargs):
            for need in needs:
                if need not in self:
                    raise exceptions.RequiredColumnError(need)

            out = func(self, *args, **kwargs)
            return Series(out, index=self.index, name=name, dtype='float64')
        return wrapper
    return real_decorator
