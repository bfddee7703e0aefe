"""Fixed-capacity stack, circular queue and singly linked list, with text menus."""

__version__ = "0.1.0"
__all__ = ["circular_queue", "linked_list", "menu", "stack"]