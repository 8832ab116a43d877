# tests/test_conditionals.py
"""
Unit tests for the if-without-block lesson.
"""

import pytest

from objectlessons.conditionals import (
    if_without_block,
    print_alien_or_not,
    print_alien_or_not_with_empty_body,
    print_alien_or_not_with_one_line_body,
)


class TestIfWithoutBlock:
    """Test what each if form guards."""

    def test_guarded_body(self):
        assert print_alien_or_not(True)[1:] == ["It is an alien!"]
        assert print_alien_or_not(False)[1:] == []

    @pytest.mark.parametrize("flag", [True, False])
    def test_empty_body_guards_nothing(self, flag):
        assert print_alien_or_not_with_empty_body(flag)[1:] == ["It is an alien!"]

    def test_one_line_body_guards_one_statement(self):
        assert print_alien_or_not_with_one_line_body(True)[1:] == [
            "It is an alien!",
            "And I'm scared of alien!",
        ]
        assert print_alien_or_not_with_one_line_body(False)[1:] == [
            "And I'm scared of alien!",
        ]

    def test_lesson_runs_every_helper(self, capsys):
        results = if_without_block()

        assert set(results) == {
            "print_alien_or_not",
            "print_alien_or_not_with_empty_body",
            "print_alien_or_not_with_one_line_body",
        }
        out = capsys.readouterr().out
        assert out.count("Inside print_alien_or_not() function.") == 2
        assert out.count("It is an alien!") == 4
        assert out.count("And I'm scared of alien!") == 2
