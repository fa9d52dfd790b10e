# Licensed under the LGPL: https://www.gnu.org/licenses/old-licenses/lgpl-2.1.en.html

"""Setup script for treezipper."""
import os
import sys

from setuptools import find_packages, setup


class TreeZipperIncompatiblePythonError(Exception):
    def __init__(self) -> None:
        super().__init__(
            "treezipper needs python 3.8 or later, "
            f"you're using {'.'.join([str(v) for v in sys.version_info[:3]])}."
        )


if sys.version_info < (3, 8):
    raise TreeZipperIncompatiblePythonError()

real_path = os.path.realpath(__file__)
treezipper_dir = os.path.dirname(real_path)
pkginfo = os.path.join(treezipper_dir, "treezipper", "__pkginfo__.py")

__pkginfo__ = {}
with open(pkginfo, "rb") as fobj:
    exec(compile(fobj.read(), pkginfo, "exec"), __pkginfo__)

with open(os.path.join(treezipper_dir, "README.rst")) as fobj:
    long_description = fobj.read()


def install():
    return setup(
        name="treezipper",
        version=__pkginfo__["version"],
        license=__pkginfo__["license"],
        description=__pkginfo__["description"],
        long_description=long_description,
        author=__pkginfo__["author"],
        author_email=__pkginfo__["author_email"],
        classifiers=__pkginfo__["classifiers"],
        packages=find_packages(exclude=["tests", "tests.*"]),
        python_requires=">=3.8",
        install_requires=__pkginfo__["install_requires"],
        extras_require=__pkginfo__["extras_require"],
    )


if __name__ == "__main__":
    install()
