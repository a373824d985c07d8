"""Linked lists, stacks, queues, dynamic arrays, binary search trees, graphs and Polish notation."""

__version__ = "0.1.0"