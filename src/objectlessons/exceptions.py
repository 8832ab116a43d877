# src/objectlessons/exceptions.py
"""
How ``finally`` interacts with propagating errors and process exit.
"""

import os
import sys
from typing import Any, Dict, List


def try_without_except():
    """
    ``finally`` runs, then the ZeroDivisionError propagates to the caller.

    Expected output before the traceback:
        Inside try block
        Finally block executed
    """
    try:
        print("Inside try block")
        result = 10 / 0
    finally:
        print("Finally block executed")
    return result


def exit_in_handler(hard: bool = False, exit_code: int = 0):
    """
    Terminate the process from inside an ``except`` block.

    ``sys.exit`` raises SystemExit, so the ``finally`` block still runs.
    ``os._exit`` ends the process on the spot and the ``finally`` block never
    prints.
    """
    try:
        print("Inside try block.")
        10 / 0
    except ZeroDivisionError as ex:
        print(f"Inside except block. {ex!r}")
        if hard:
            sys.stdout.flush()
            os._exit(exit_code)
        sys.exit(exit_code)
    finally:
        print("Inside finally block.")


class TracedResource:
    """Context manager that closes ``resource`` and records when it is entered and exited."""

    def __init__(self, name: str, resource):
        self.name = name
        self.resource = resource
        self.events: List[str] = []

    def __enter__(self):
        self.events.append("enter")
        print(f"{self.name}: opened")
        return self.resource

    def __exit__(self, exc_type, exc, tb):
        self.resource.close()
        outcome = "error" if exc_type else "ok"
        self.events.append(f"exit:{outcome}")
        print(f"{self.name}: closed ({outcome})")
        return False  # Never suppress the error


def with_resource(path: str) -> Dict[str, Any]:
    """
    Read the first line of ``path`` with no ``except`` clause.

    The handle is traced only once ``open()`` has succeeded, so a missing file
    raises FileNotFoundError before anything is opened or closed.
    """
    traced = TracedResource(path, open(path, encoding="utf-8"))
    with traced as fh:
        line = fh.readline().rstrip("\n")
    print(line)
    return {"line": line, "closed": fh.closed, "events": traced.events}
