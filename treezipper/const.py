# Licensed under the LGPL: https://www.gnu.org/licenses/old-licenses/lgpl-2.1.en.html

import enum


class Kind(enum.Enum):
    """The ways a zipper can fail to move or edit."""

    DOWN_AT_LEAF = "down_at_leaf"
    UP_AT_ROOT = "up_at_root"
    LEFT_AT_ROOT = "left_at_root"
    LEFT_AT_LEFTMOST = "left_at_leftmost"
    RIGHT_AT_ROOT = "right_at_root"
    RIGHT_AT_RIGHTMOST = "right_at_rightmost"
    REMOVE_AT_ROOT = "remove_at_root"

    def __str__(self) -> str:
        return self.value
