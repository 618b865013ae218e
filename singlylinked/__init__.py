"""A singly linked list of unsigned integers with a positional iterator and a self-check."""

__version__ = "0.1.0"
__all__ = ["linked_list", "selfcheck"]