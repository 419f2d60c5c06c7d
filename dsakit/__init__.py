"""Classic data structures and algorithms in plain Python."""

__version__ = "0.1.0"
__all__ = [
    "dynamic_array",
    "linked_list",
    "queues",
    "sorting",
    "stacks",
    "strings",
    "workers",
]