# Licensed under the LGPL: https://www.gnu.org/licenses/old-licenses/lgpl-2.1.en.html

"""This module contains exceptions used in the treezipper library."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from treezipper.const import Kind
    from treezipper.zipper import Zipper

__all__ = (
    "TreeZipperError",
    "UnsupportedOperation",
    "ZipperNavigationError",
)


class TreeZipperError(Exception):
    """Base exception class for all treezipper related exceptions.

    TreeZipperError and its subclasses are structured, intended to hold
    objects representing state when the exception is thrown.  Field
    values are passed to the constructor as keyword-only arguments.
    Each subclass has its own set of standard fields.  Field values are
    used to lazily generate the error message: self.message.format()
    will be called with the field names and values supplied as keyword
    arguments.
    """

    def __init__(self, message: str = "", **kws: Any) -> None:
        super().__init__(message)
        self.message = message
        for key, value in kws.items():
            setattr(self, key, value)

    def __str__(self) -> str:
        return self.message.format(**vars(self))


class ZipperNavigationError(TreeZipperError):
    """Raised by the unsafe zipper operations when a move is impossible.

    Standard attributes:
        kind: The Kind of failure.
        location: The Zipper at which the failure occurred.
    """

    def __init__(
        self,
        message: str = "Navigation error - {kind}",
        kind: Kind | None = None,
        location: Zipper | None = None,
        **kws: Any,
    ) -> None:
        self.kind = kind
        self.location = location
        super().__init__(message, **kws)


class UnsupportedOperation(TreeZipperError):
    """Raised when an operation is given a value it cannot work with.

    This signals a broken adapter contract or an accessor used on the
    wrong variant of a value, never an ordinary navigation failure.

    Standard attributes:
        operation: Name of the operation that was attempted.
        parameter: The offending value.
    """

    def __init__(
        self,
        message: str = "Method {operation!r} called with unsupported "
        "parameter type {parameter_type}",
        operation: str | None = None,
        parameter: Any = None,
        **kws: Any,
    ) -> None:
        self.operation = operation
        self.parameter = parameter
        super().__init__(message, **kws)

    @property
    def parameter_type(self) -> str:
        return type(self.parameter).__name__

    def __str__(self) -> str:
        return self.message.format(
            parameter_type=self.parameter_type, **vars(self)
        )
