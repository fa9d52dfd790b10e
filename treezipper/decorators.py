# Licensed under the LGPL: https://www.gnu.org/licenses/old-licenses/lgpl-2.1.en.html

"""A few useful function/method decorators."""

from __future__ import annotations

from typing import Any

import wrapt

from treezipper.exceptions import ZipperNavigationError


def _raise_navigation_error(error: Any) -> Any:
    raise ZipperNavigationError(kind=error.kind, location=error.location)


@wrapt.decorator
def raise_on_left(func, instance, args, kwargs):
    """Turn a method returning an Either into one returning the Right's value.

    A Left is converted into a ZipperNavigationError carrying the failure
    kind and the location it happened at.  All methods wrapped with
    raise_on_left *must* return an Either whose Left holds a ZipperError.
    """
    return func(*args, **kwargs).either(lambda value: value, _raise_navigation_error)
