# Licensed under the LGPL: https://www.gnu.org/licenses/old-licenses/lgpl-2.1.en.html

"""An immutable zipper for walking and editing arbitrary trees.

The zipper does not need the tree to have parent pointers or to be
mutable: three functions passed to ``zip_on`` tell it how the tree is
built, and every move or edit returns a new zipper.

Main modules are:

* zipper, with ``zip_on`` and the Zipper class itself

* context, the immutable description of the rest of the tree around
  a zipper's focus

* either, the Left/Right results of the ``safe_`` operations

* traversal, pre-order and breadth-first walks built on the zipper

* adapters and trees, ready-made adapters and tree types
"""

from treezipper.__pkginfo__ import __version__, version
from treezipper.adapters import isa, sequence_zipper
from treezipper.const import Kind
from treezipper.context import Context, RootContext, TraversalEnd
from treezipper.either import Either, Left, Right
from treezipper.exceptions import (
    TreeZipperError,
    UnsupportedOperation,
    ZipperNavigationError,
)
from treezipper.trampoline import Continuation, bounce, trampoline
from treezipper.traversal import BreadthFirstTraversal, PreOrderTraversal, Traversal
from treezipper.zipper import Adapter, Zipper, ZipperError, zip_on
