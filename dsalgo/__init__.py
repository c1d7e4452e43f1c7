"""Heaps, disjoint sets, stacks, queues, a doubly linked list, trees, graphs,
merge sort and postfix expressions in plain Python."""

__version__ = "0.1.0"