# src/objectlessons/inheritance.py
"""
Methods dispatch on the runtime class; private (name-mangled) fields do not.
"""

from typing import Any, Dict

from .models import Animal, Dog


def execute_behaviours(animal: Animal) -> Dict[str, Any]:
    """Work with any Animal through the base-class interface."""
    noise = animal.make_noise()  # Dog.make_noise, the object is a Dog
    # Animal's code reads _Animal__age, whatever the runtime class is
    print(f"animal.age: {animal.base_age}")
    return {"noise": noise, "animal_age": animal.base_age, "weight": animal.weight}


def field_not_polymorphic() -> Dict[str, Any]:
    puppy = Dog(15, "Puppy", 10)
    print(f"puppy.age: {puppy.age}")

    observed = execute_behaviours(puppy)
    observed["puppy_age"] = puppy.age
    observed["attributes"] = sorted(vars(puppy))
    print("attributes:", observed["attributes"])
    return observed
