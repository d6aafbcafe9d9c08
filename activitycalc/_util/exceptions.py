#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Exceptions for this package.

"""


class ActivityCalcError(Exception):
    """Base exception."""
    _default_message = ''

    def __init__(self, message=None):
        super().__init__(message if message else self._default_message)


class UnknownActivityError(ActivityCalcError, ValueError):
    _default_message = 'unknown training type'

    def __init__(self, label=None):
        self.label = label
        if label is None:
            super().__init__()
        else:
            super().__init__('unknown training type: {!r}'.format(label))


class RequiredColumnError(ActivityCalcError):
    def __init__(self, column):
        super().__init__('{!r} column not found'.format(column))
