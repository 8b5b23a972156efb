"""Book catalog: REST service over a books table and a terminal client view."""

__version__ = "0.1.0"
