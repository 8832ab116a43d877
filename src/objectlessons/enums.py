# src/objectlessons/enums.py
"""
Enumeration types for the lesson catalogue.
"""

from enum import Enum


class Topic(Enum):
    """Areas of object semantics covered by the lessons."""
    CLASSES_AND_OBJECTS = "classes_and_objects"
    CONDITIONALS = "conditionals"
    STRINGS = "strings"
    EXCEPTIONS = "exceptions"
    INHERITANCE = "inheritance"
