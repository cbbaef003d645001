"""studentform - validation, in-memory records and export for student details."""

__version__ = "0.1.0"
