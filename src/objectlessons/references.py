# src/objectlessons/references.py
"""
Reference assignment: two names, one object.
"""

from typing import Dict

from .models import House


def object_reference() -> Dict[str, str]:
    """Mutating through an alias is visible everywhere; rebinding the alias is not."""
    blue_house = House("blue")
    another_house = blue_house  # Both names refer to the same House

    print(blue_house.colour)  # blue
    print(another_house.colour)  # blue

    another_house.colour = "yellow"
    print(blue_house.colour)  # yellow
    print(another_house.colour)  # yellow

    green_house = House("green")
    another_house = green_house  # Rebinds the name only

    print(green_house.colour)  # green
    print(another_house.colour)  # green
    print(blue_house.colour)  # yellow

    return {
        "blue_house": blue_house.colour,
        "another_house": another_house.colour,
        "green_house": green_house.colour,
    }
