"""Roster: a parent/student contact directory.

Keeps parent and student contacts in memory and applies partial edits
to them while enforcing role constraints and the student-to-parent
name reference.
"""

__version__ = "0.1.0"
