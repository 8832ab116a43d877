# src/objectlessons/class_fields.py
"""
Class-level vs. instance-level attribute storage.
"""

from typing import Dict, List

from .models import InstanceNameDog, SharedNameDog, TrickDog


def class_field() -> List[str]:
    """The constructor writes to the class, so the last name wins."""
    tommy = SharedNameDog("tommy")
    lab = SharedNameDog("lab")

    return [tommy.print_name(), lab.print_name()]  # lab, lab


def instance_field() -> List[str]:
    """The constructor writes to the instance, so each dog keeps its own name."""
    tommy = InstanceNameDog("tommy")
    lab = InstanceNameDog("lab")

    return [tommy.print_name(), lab.print_name()]  # tommy, lab


def shared_mutable_default() -> Dict[str, List[str]]:
    """
    A mutable class attribute is shared until an instance rebinds the name.

    ``append`` mutates the list found on the class; assignment creates an
    instance attribute that shadows it.
    """
    saved = TrickDog.tricks
    TrickDog.tricks = []
    try:
        rex = TrickDog("rex")
        fido = TrickDog("fido")
        rex.learn("sit")
        fido.learn("roll")
        print("rex:", rex.tricks)  # ['sit', 'roll']
        print("fido:", fido.tricks)  # ['sit', 'roll']

        fido.tricks = ["beg"]  # Instance attribute shadows TrickDog.tricks
        rex.learn("stay")
        print("rex:", rex.tricks)
        print("fido:", fido.tricks)
        print("TrickDog.tricks:", TrickDog.tricks)

        return {
            "rex": list(rex.tricks),
            "fido": list(fido.tricks),
            "class": list(TrickDog.tricks),
        }
    finally:
        TrickDog.tricks = saved
