# src/objectlessons/strings.py
"""
String identity (``is``) vs. string equality (``==``), and content hashing.

Identity results for literals rely on CPython interning string constants.
"""

import sys
from typing import Dict, Optional


def _build(*pieces: str) -> str:
    # join() always allocates a new string object at run time
    return "".join(pieces)


def string_identity() -> Dict[str, bool]:
    """Compare literals, run-time built strings and stripped strings."""
    first_name = "John"
    second_name = "John"  # Same constant object as first_name
    third_name = _build("Jo", "hn")  # New object
    fourth_name = _build("Jo", "hn")  # Another new object

    results = {
        "first_is_second": first_name is second_name,  # True
        "first_is_third": first_name is third_name,  # False
        "third_is_fourth": third_name is fourth_name,  # False
        "first_eq_second": first_name == second_name,  # True
        "first_eq_third": first_name == third_name,  # True
        "third_eq_fourth": third_name == fourth_name,  # True
    }
    print(results["first_is_second"])
    print(results["first_is_third"])
    print(results["third_is_fourth"])
    print("-----")
    print(results["first_eq_second"])
    print(results["first_eq_third"])
    print(results["third_eq_fourth"])
    print("-----")

    # Methods that "modify" a string return a new one
    fifth_name = "  John  ".strip()
    results["first_is_fifth"] = first_name is fifth_name  # False
    results["first_eq_fifth"] = first_name == fifth_name  # True
    print(results["first_is_fifth"])
    print(results["first_eq_fifth"])
    print("-----")

    results["interned_is_first"] = sys.intern(third_name) is first_name  # True
    print(results["interned_is_first"])

    return results


def content_hash(text: Optional[str]) -> int:
    """
    Hash computed from the content only: ``h = 31*h + unit`` over the
    UTF-16 code units of ``text``, wrapped to a signed 32-bit integer.
    Characters outside the BMP contribute their two surrogate units.

    Equal strings always hash equal, however they were created.
    """
    if text is None:
        raise TypeError("content_hash() argument must be str, not None")

    data = text.encode("utf-16-be", "surrogatepass")
    h = 0
    for i in range(0, len(data), 2):
        unit = (data[i] << 8) | data[i + 1]
        h = (31 * h + unit) & 0xFFFFFFFF
    if h >= 0x80000000:
        h -= 0x100000000
    return h


def string_hash() -> None:
    """
    Equal content gives equal hashes; hashing None fails.

    The final call raises TypeError and ends the lesson.
    """
    my_string = "Raj"
    my_string2 = _build("R", "aj")
    hashes = [content_hash(my_string), content_hash(my_string2), content_hash("Raj")]
    for value in hashes:
        print(value)  # 81915

    # The builtin hash() is salted per process but still content based
    print(hash(my_string) == hash(my_string2))  # True

    s1 = None
    print(content_hash(s1))  # TypeError
