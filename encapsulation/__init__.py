"""
Encapsulation: an access-modifier exercise

A small object model showing private state behind validated mutators
(Grade) and a demo driver that prints a few encapsulated objects.
"""

__version__ = "1.0.0"
__author__ = "ATU OOP Labs"
__description__ = "Access-modifier and encapsulation exercise"
