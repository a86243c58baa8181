#!/usr/bin/env python3
"""
Demo scenario for the Grade value object.
"""

import sys
import os

# Add the project root to the Python path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from encapsulation.core.grade import Grade
from encapsulation.core.exceptions import ValidationError
from encapsulation.logging import configure_logging


def run_demo():
    """Walk a Grade through valid and rejected updates."""
    configure_logging("WARNING")

    print("=" * 60)
    print("GRADE ENCAPSULATION - DEMO")
    print("=" * 60)

    grade = Grade("Alice", 85, "CS101")

    print("\n1. Reading fields through accessors...")
    show_grade(grade)

    print("\n2. Updating with valid values...")
    demonstrate_updates(grade, [
        ("student name", grade.set_student_name, "Bob"),
        ("numeric grade", grade.set_numeric_grade, 92),
        ("course code", grade.set_course_code, "CS102"),
    ])
    show_grade(grade)

    print("\n3. Updating with rejected values...")
    demonstrate_updates(grade, [
        ("student name", grade.set_student_name, ""),
        ("numeric grade", grade.set_numeric_grade, 150),
        ("course code", grade.set_course_code, "   "),
    ])
    show_grade(grade)

    print("\n4. The constructor stores values as given...")
    unchecked = Grade("Carol", -5, "CS103")
    print(f"  {unchecked!r} valid={unchecked.is_valid()}")

    print("\n5. The validating factory refuses them...")
    try:
        Grade.create("Carol", -5, "CS103")
    except ValidationError as e:
        print(f"  Rejected ({e.error_code}): {e.message}")

    print("\n" + "=" * 60)
    print("DEMO COMPLETED SUCCESSFULLY!")
    print("=" * 60)


def show_grade(grade):
    print(f"  Student: {grade.get_student_name()}")
    print(f"  Grade:   {grade.get_numeric_grade()}")
    print(f"  Course:  {grade.get_course_code()}")


def demonstrate_updates(grade, updates):
    for label, setter, value in updates:
        accepted = setter(value)
        print(f"  set {label} to {value!r}: {'accepted' if accepted else 'rejected'}")


if __name__ == "__main__":
    run_demo()
