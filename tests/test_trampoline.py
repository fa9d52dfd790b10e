# Licensed under the LGPL: https://www.gnu.org/licenses/old-licenses/lgpl-2.1.en.html

import sys

from treezipper.trampoline import Continuation, bounce, trampoline


def test_returns_first_final_value() -> None:
    assert trampoline(5, lambda n: n * 2) == 10


def test_resumes_continuations_until_a_final_value() -> None:
    calls = []

    def step(n):
        calls.append(n)
        if n == 0:
            return "done"
        return bounce(lambda: n - 1)

    assert trampoline(3, step) == "done"
    assert calls == [3, 2, 1, 0]


def test_bounce_defers_call() -> None:
    calls = []
    continuation = bounce(calls.append, 1)
    assert isinstance(continuation, Continuation)
    assert not calls
    continuation.resume()
    assert calls == [1]


def test_runs_far_deeper_than_the_recursion_limit() -> None:
    depth = sys.getrecursionlimit() * 10

    def count_down(n):
        if n == 0:
            return "landed"
        return bounce(count_down_by_one, n)

    def count_down_by_one(n):
        return n - 1

    assert trampoline(depth, count_down) == "landed"
