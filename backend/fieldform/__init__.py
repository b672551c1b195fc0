"""FieldForm/EDGE Audit backend."""

__version__ = "1.0.0"
