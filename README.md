# algokit

Classic data structures and algorithms in plain Python, with no third-party
dependencies. Each structure lives in its own small module, so you can import
only what you need.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algokit.arrays` | `array_insert` (raises `IndexError` outside `0..len`), `array_delete` (ignores out-of-range indices) |
| `algokit.sorting` | `insert`, `insertion_sort`, `merge`, `merge_sort`, `counting_sort` (integers in `range(k)`, `ValueError` otherwise) |
| `algokit.linked_list` | `Node`: a singly linked list with a sentinel head (`insert_after`, `find_predecessor`, `to_list`, iteration over the following values) |
| `algokit.stack` | `Stack`: fixed-capacity stack (`push`, `top`, `pop` returning the value, `is_empty`, `is_full`, `len()`, `capacity`) |
| `algokit.ring_queue` | `Queue`: fixed-capacity FIFO queue on a ring buffer (`enqueue`, `front`, `dequeue` returning the value, `is_empty`, `is_full`, `len()`, `capacity`) |
| `algokit.formatting` | `format_value`, `format_sequence`, `print_sequence`: render sequences as `[a, b, c]`, floats in `%g` style |
| `algokit.binary_tree` | `BinaryTree` dataclass, `bst_insert`, `bst_search` (returns the node holding the value, or the one with the largest value below it, or `None`) |
| `algokit.complete_tree` | `CompleteTree`: a view of a list as a complete binary tree (`value`, `parent`, `left`, `right`, `subtree`; empty views are falsy) |
| `algokit.tree_traversal` | `height` (empty tree is -1), `df_traversal` (in order), `bf_traversal` (level by level) |
| `algokit.tree_print` | `render_binary_tree` (list of lines), `print_binary_tree` |
| `algokit.heap` | `heap_sift_up`, `heap_sift_down`, `build_heap`, `heap_sort`, `priority_enqueue`, `priority_dequeue` (max-heap by default; pass `operator.lt` for a min-heap) |
| `algokit.hash_table` | `HashTable`: separate chaining over linked lists (`insert`, `get`, `in`, `len()`, `slot_sizes`, `describe`) |
| `algokit.graph` | `Hop`, `INF`, `TEST_GRAPH`, `SPARSE_TEST_GRAPH`, `dense_to_sparse`, `graph_to_dot`, `percent_encode_dot`, `print_graph` |
| `algokit.shortest_paths` | `relax`, `bellman_ford` (returns paths and a negative-cycle flag), `dijkstra`, `dijkstra_priority`, `floyd_warshall` |
| `algokit.lsh` | `LSHTable`, `LSHFamily`, `LSHResult`, random-hyperplane hashing for cosine distance, `naive_retrieve`, `benchmark`, `main` |

Graphs are given as a dense weighted adjacency matrix, where a missing edge
has weight `math.inf`, or as a sparse adjacency list of `Hop(weight, vertex)`
entries. `graph_to_dot` and `print_graph` accept either form. Shortest-path
results hold one `Hop` per vertex: the distance from the source and the
predecessor on the best path (`-1` where there is none).

## Example

```python
from algokit.formatting import print_sequence
from algokit.sorting import counting_sort

values = [5, 3, 0, 1, 5, 3]
counting_sort(values, 6)
print_sequence(values, "After sorting: ")
# After sorting: [0, 1, 3, 3, 5, 5]
```

## Locality-sensitive hashing benchmark

The `algokit-lsh` command builds LSH tables over a random set of unit vectors
and compares them with a linear scan, printing a table of mean distance,
success rate and relative quality for a range of table counts, comparison
budgets and amplification levels:

```
algokit-lsh
algokit-lsh --dataset-size 2000 --queryset-size 200 --seed 1
```

The defaults are 10,000 data vectors, 1,000 queries and seed 0.

## What it does not do

- The shortest-path functions take adjacency matrices only; sparse graphs can
  be printed but not searched.
- There is no function that turns the predecessor entries of a shortest-path
  result into the list of vertices along a path.