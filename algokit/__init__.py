"""Classic data structures and algorithms: arrays, sorting, linked lists,
stacks, queues, binary trees, heaps, hash tables, graphs with shortest paths,
and locality-sensitive hashing."""

__version__ = "0.1.0"