"""Classic algorithms and data structures: sorting, searching, expression
conversion, array routines, linked lists, a bounded queue, binary trees,
graph algorithms and a year calendar."""

__version__ = "0.1.0"