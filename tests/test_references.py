# tests/test_references.py
"""
Unit tests for the object-reference lesson.
"""

from objectlessons import House
from objectlessons.references import object_reference


class TestObjectReference:
    """Test reference aliasing."""

    def test_final_colours(self):
        observed = object_reference()

        assert observed == {
            "blue_house": "yellow",
            "another_house": "green",
            "green_house": "green",
        }

    def test_output(self, capsys):
        object_reference()
        out = capsys.readouterr().out.split()

        assert out == ["blue", "blue", "yellow", "yellow", "green", "green", "yellow"]

    def test_alias_mutation(self):
        """Test that a mutation through one name is visible through the other."""
        house = House("blue")
        alias = house
        alias.colour = "red"

        assert house.colour == "red"
        assert alias is house

    def test_repr(self):
        assert repr(House("blue")) == "House(colour='blue')"
