# Licensed under the LGPL: https://www.gnu.org/licenses/old-licenses/lgpl-2.1.en.html

import pytest

from treezipper import decorators
from treezipper.const import Kind
from treezipper.either import Left, Right
from treezipper.exceptions import ZipperNavigationError
from treezipper.zipper import ZipperError


class Cursor:
    @decorators.raise_on_left
    def succeed(self, value):
        return Right(value)

    @decorators.raise_on_left
    def fail(self):
        return Left(ZipperError(Kind.UP_AT_ROOT, self))


def test_right_is_unwrapped():
    assert Cursor().succeed(42) == 42


def test_left_raises_with_kind_and_location():
    cursor = Cursor()
    with pytest.raises(ZipperNavigationError) as context:
        cursor.fail()
    assert context.value.kind is Kind.UP_AT_ROOT
    assert context.value.location is cursor
    assert str(context.value) == "Navigation error - up_at_root"


def test_wrapped_method_keeps_its_name():
    assert Cursor.succeed.__name__ == "succeed"
