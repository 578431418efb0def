"""Key types, bucketed hash tables, counted and traced sorting methods, and big integers with an RPN evaluator."""

__version__ = "0.1.0"