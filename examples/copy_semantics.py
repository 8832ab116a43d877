# examples/copy_semantics.py
"""
Check aliasing vs. copying on your own objects
"""

import copy

import torch

from objectlessons import Employee
from objectlessons.copying import shares_elements


def containers_example():
    print("=== Containers ===")
    team = [Employee("e1", "Ada", 36), Employee("e2", "Alan", 41)]
    candidates = {
        "alias": team,
        "slice": team[:],
        "list()": list(team),
        "copy.copy": copy.copy(team),
        "copy.deepcopy": copy.deepcopy(team),
        "from_employee": [Employee.from_employee(e) for e in team],
    }

    team[0].age += 1
    for label, other in candidates.items():
        sees_change = other[0].age == team[0].age
        print(f"  {label:<14} shares elements: {shares_elements(team, other)!s:<5}  sees change: {sees_change}")


def tensors_example():
    print("\n=== Tensors ===")
    base = torch.ones(2, 3)
    candidates = {
        "view": base.view(6),
        "slice": base[0],
        "transpose": base.t(),
        "clone": base.clone(),
        "contiguous copy": base.t().contiguous(),
    }

    base.zero_()
    for label, other in candidates.items():
        print(f"  {label:<16} sees change: {bool((other == 0).all())}")


if __name__ == "__main__":
    containers_example()
    tensors_example()
