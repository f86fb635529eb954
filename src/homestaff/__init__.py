"""homestaff — household task assignment and notification core."""

__version__ = "0.3.0"
