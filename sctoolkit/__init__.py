"""Text buffers, a binary search tree, a linked list, lenient JSON, config and CSV readers, and a per-thread file logger."""

__version__ = "0.1.0"

__all__ = ["cjson", "linkedlist", "scconf", "sccsv", "schead", "sclog", "tree", "tstring"]