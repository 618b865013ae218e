"""Functional self-check of the linked list, reporting progress on a stream."""

from __future__ import annotations

import sys
from typing import Optional, Sequence, TextIO

from singlylinked.linked_list import LinkedList


class CheckFailed(Exception):
    """A functional check did not hold."""


def _test(out: TextIO, name: str) -> None:
    print(f"Running test {name}", file=out, flush=True)


def _subtest(out: TextIO, name: str) -> None:
    print(f"    Executing subtest {name}", file=out, flush=True)


def _require(condition: bool, message: str) -> None:
    if not condition:
        raise CheckFailed(message)


def check_empty_list_properties(out: Optional[TextIO] = None) -> None:
    """Check the invariants of a freshly created list."""
    out = out if out is not None else sys.stdout
    _test(out, "check_empty_list_properties")

    _subtest(out, "linked_list_create")
    ll = LinkedList()
    _require(ll.head is None, "ll->head is non-null in empty linked_list")

    _subtest(out, "empty_linked_list_iterator")
    try:
        ll.iterator(0)
    except IndexError:
        pass
    else:
        raise CheckFailed(
            "linked_list_create_iterator returned an iterator for an empty linked_list"
        )

    print("PASS!", file=out, flush=True)


def _check_iteration(ll: LinkedList, label: str) -> None:
    it = ll.iterator(0)
    for expected in range(1, 5):
        _require(
            it.data == expected,
            f"Iterator does not contain correct data for linked_list ({label})",
        )
        _require(
            it.current_index == expected - 1,
            f"Iterator does not contain correct index for linked_list ({label})",
        )
        it.advance()


def check_insertion_functionality(out: Optional[TextIO] = None) -> None:
    """Check insertion at both ends using an iterator."""
    out = out if out is not None else sys.stdout
    _test(out, "check_insertion_functionality")

    _subtest(out, "insert_end")
    ll = LinkedList()
    for i in range(1, 5):
        ll.insert_end(i)

    _subtest(out, "iterate_over_linked_list_1")
    _check_iteration(ll, "#1")

    _subtest(out, "insert_front")
    ll = LinkedList()
    _require(len(ll) == 0, "linked_list (#2) size is non-zero when created")
    for i in range(4, 0, -1):
        ll.insert_front(i)
    _require(len(ll) == 4, "linked_list (#2) size was not equal to 4")

    _subtest(out, "iterate_over_linked_list_2")
    _check_iteration(ll, "#2")
    _require(len(ll) == 4, "linked_list (#2) size was not equal to 4")

    print("PASS!", file=out, flush=True)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run every check; return 0 on success and 1 on the first failure."""
    del argv
    out = sys.stdout
    try:
        check_empty_list_properties(out)
        check_insertion_functionality(out)
    except CheckFailed as exc:
        print(f"    FAIL! {exc}", file=out, flush=True)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())