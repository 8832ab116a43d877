# src/objectlessons/conditionals.py
"""
What an ``if`` actually guards.

Take away: give every ``if`` an indented block of its own. A body of ``pass``
guards nothing, and a one-line ``if`` guards only the statement on its line.
"""

from typing import Dict, List


def print_alien_or_not(is_alien: bool) -> List[str]:
    lines = ["Inside print_alien_or_not() function."]
    if is_alien:
        lines.append("It is an alien!")
    for line in lines:
        print(line)
    return lines


def print_alien_or_not_with_empty_body(is_alien: bool) -> List[str]:
    lines = ["Inside print_alien_or_not_with_empty_body() function."]
    # The body is `pass`; the append below sits outside the if block.
    if is_alien:
        pass
    lines.append("It is an alien!")
    for line in lines:
        print(line)
    return lines


def print_alien_or_not_with_one_line_body(is_alien: bool) -> List[str]:
    lines = ["Inside print_alien_or_not_with_one_line_body() function."]
    # Only the statement after the colon is guarded.
    if is_alien: lines.append("It is an alien!")  # noqa: E701
    lines.append("And I'm scared of alien!")
    for line in lines:
        print(line)
    return lines


def if_without_block() -> Dict[str, Dict[bool, List[str]]]:
    """Run each helper with True and False."""
    results = {}
    for helper in (
        print_alien_or_not,
        print_alien_or_not_with_empty_body,
        print_alien_or_not_with_one_line_body,
    ):
        results[helper.__name__] = {flag: helper(flag) for flag in (True, False)}
    return results
