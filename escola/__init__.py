"""School register of students, teachers and subjects with roll-call absences."""

__version__ = "0.1.0"
__all__ = ["__version__"]