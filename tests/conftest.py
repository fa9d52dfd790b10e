# Licensed under the LGPL: https://www.gnu.org/licenses/old-licenses/lgpl-2.1.en.html

import pytest

DEFAULT_STRESS_DEPTH = 10000


def pytest_addoption(parser):
    parser.addoption(
        "--stress-depth",
        type=int,
        default=DEFAULT_STRESS_DEPTH,
        help="depth of the degenerate trees built by the stress tests",
    )


@pytest.fixture(scope="session")
def stress_depth(request) -> int:
    return request.config.getoption("--stress-depth", default=DEFAULT_STRESS_DEPTH)
