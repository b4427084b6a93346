"""Console register of a school's teachers and students, stored in text files."""

__version__ = "1.0.0"