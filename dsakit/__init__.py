"""Classic data structures and algorithms in plain Python."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "basics",
    "doubly_linked",
    "expressions",
    "linked_lists",
    "stacks_queues",
    "trees",
]