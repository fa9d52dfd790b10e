# Licensed under the LGPL: https://www.gnu.org/licenses/old-licenses/lgpl-2.1.en.html

"""treezipper packaging information"""

# For an official release, use dev_version = None
numversion = (0, 3, 0)
dev_version = None

version = ".".join(str(num) for num in numversion)
if dev_version is not None:
    version += "-dev" + str(dev_version)

__version__ = version

extras_require = {
    "test": ["pytest>=6.0", "hypothesis>=6.0"],
}
install_requires = [
    "wrapt>=1.11",
]

# pylint: disable=redefined-builtin; why license is a builtin anyway?
license = "LGPL-2.1-or-later"

author = "treezipper contributors"
author_email = "treezipper@users.noreply.github.com"

description = "An immutable zipper for walking and editing arbitrary trees."

classifiers = [
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Programming Language :: Python",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: Implementation :: CPython",
    "Programming Language :: Python :: Implementation :: PyPy",
]
