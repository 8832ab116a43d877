# src/objectlessons/copying.py
"""
Shallow vs. deep copies of containers holding object references.
"""

import copy
from typing import Any, Dict, Sequence

import torch

from .models import Employee


def shares_elements(a: Sequence[Any], b: Sequence[Any]) -> bool:
    """True when both sequences hold the very same objects, position by position."""
    return len(a) == len(b) and all(x is y for x, y in zip(a, b))


def list_of_objects() -> Dict[str, Any]:
    """Mutate an element and see which lists observe the change."""
    e1 = Employee("e1", "Pratheev", 25)
    e2 = Employee("e2", "Raj", 18)
    l1 = [e1, e2]

    alias = l1  # Same list object
    l2 = list(l1)  # Shallow copy: new list, same Employee objects
    l3 = [Employee.from_employee(e) for e in l1]  # New Employee objects
    l4 = copy.deepcopy(l1)

    print("l1 ids:", [hex(id(e)) for e in l1])
    print("l2 ids:", [hex(id(e)) for e in l2])

    e1.age = 40
    print("l1:   ", l1)
    print("alias:", alias)
    print("l2:   ", l2)
    print("l3:   ", l3)
    print("l4:   ", l4)

    return {
        "original": l1,
        "alias": alias,
        "shallow": l2,
        "copy_constructor": l3,
        "deep": l4,
        "alias_is_original": alias is l1,
        "shallow_is_original": l2 is l1,
        "shallow_shares_elements": shares_elements(l1, l2),
        "deep_shares_elements": shares_elements(l1, l4),
    }


def tensor_view() -> Dict[str, Any]:
    """A tensor view shares storage with its base, a clone owns its own."""
    base = torch.arange(4)
    view = base.view(2, 2)
    clone = base.clone()

    base[0] = 100
    print("base: ", base.tolist())
    print("view: ", view.tolist())
    print("clone:", clone.tolist())
    print("view shares storage:", view.data_ptr() == base.data_ptr())
    print("clone shares storage:", clone.data_ptr() == base.data_ptr())

    return {
        "base": base.tolist(),
        "view": view.tolist(),
        "clone": clone.tolist(),
        "view_shares_storage": view.data_ptr() == base.data_ptr(),
        "clone_shares_storage": clone.data_ptr() == base.data_ptr(),
    }
