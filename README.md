# structlab

Classic data structures and the algorithms built on them, in plain Python
with no third-party dependencies.

## Modules

### `structlab.structures`

- `LinkedList`: a singly linked list with `push_front`, `push_back`,
  `pop_front` and `pop_back`. It supports `len()`, iteration from front to
  back, and truth testing (empty is false).
- `Stack`: last-in, first-out, with `push`, `pop` and `peek`. Iterating a
  stack goes from the top to the bottom.
- `Queue`: first-in, first-out, with `enqueue` and `dequeue`.
- `DynamicArray`: a growable array with `push_back`, `pop_back`, `unshift`
  (insert at the front) and `shift` (drop the first element). Its
  `capacity()` starts at 2 and doubles whenever an element is added to a
  full array. It supports indexing, `len()`, iteration and equality with
  another `DynamicArray`.

Popping an empty `LinkedList` or `Stack`, peeking an empty `Stack`,
dequeuing an empty `Queue` and calling `shift` on an empty `DynamicArray`
raise `IndexError`. `DynamicArray.pop_back` on an empty array does nothing.

### `structlab.trees`

- `TreeNode`: a dataclass with `data`, `left` and `right`.
- `BinarySearchTree`: `insert(value)` places a value in the tree rooted at
  `root`; a value already present is ignored.
- `breadth_first(root)`: yields the values of a tree level by level, left
  to right.

```python
from structlab.trees import BinarySearchTree, breadth_first

tree = BinarySearchTree()
for value in (7, 6, 10, 2, 13, 1, 5, 16):
    tree.insert(value)
list(breadth_first(tree.root))  # [7, 6, 10, 2, 13, 1, 5, 16]
```

### `structlab.graph`

- `AdjacencyMatrix`: an undirected graph over vertices `0..n-1` held as a
  0/1 matrix. `insert_edge` grows the matrix to fit the larger vertex,
  `delete_edge` clears an edge (raising `IndexError` if it lies outside the
  matrix), `has_edge` tests one, `len()` gives the matrix size and
  `render()` returns the matrix as text with a numbered header. Negative
  vertices raise `IndexError`.
- `AdjacencyList`: an undirected graph held as vertex-to-neighbour sets,
  with `insert_edge`, `delete_edge` (both vertices remain),
  `delete_vertex`, `neighbours(vertex)` (ascending order) and `render()`
  (one line per vertex). `bfs(start=1)` and `dfs(start=1)` return the
  visiting order; neighbours are visited in ascending order, and the
  depth-first walk marks vertices when it pushes them, so it explores the
  largest unvisited neighbour first.

```python
from structlab.graph import AdjacencyList

graph = AdjacencyList()
for a, b in [(1, 2), (1, 3), (1, 4), (2, 4), (2, 5), (3, 6), (5, 7)]:
    graph.insert_edge(a, b)
graph.bfs(1)  # [1, 2, 3, 4, 5, 6, 7]
graph.dfs(1)  # [1, 4, 3, 6, 2, 5, 7]
```

### `structlab.notation`

- `to_postfix(infix)` and `to_prefix(infix)` convert infix expressions.
- `reverse_expression(expression)` reverses a string and swaps `(` with `)`.
- `priority(operator)` and `is_operator(char)` describe the operators.
- `build_tree(postfix)` builds an expression tree of `TreeNode`s, raising
  `ValueError` when an operator lacks operands or the expression is empty.
- `prefix_order`, `infix_order` and `postfix_order` return a tree's
  symbols in pre-, in- and post-order (the in-order form has no
  parentheses).

```python
from structlab.notation import build_tree, prefix_order, to_postfix, to_prefix

to_postfix("a+b*c")                     # "abc*+"
to_prefix("a+b*c")                      # "+a*bc"
prefix_order(build_tree("abc*+"))       # "+a*bc"
```

Operands are single ASCII letters or digits; the operators are `+`, `-`,
`*`, `/` and `^`, with `^` binding tightest and `+`/`-` loosest. Operators
of equal priority associate to the left. Any other character, such as a
space, is skipped.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command-line demos

```
structlab-bfs
```

builds a binary search tree from 7, 6, 10, 2, 13, 1, 5, 16 and prints
`7 6 10 2 13 1 5 16`.

```
structlab-graph
```

builds a sample undirected graph as an adjacency list and prints
`Adjacency List:` followed by its depth-first order from vertex 1,
`1 4 3 6 2 5 7`.

Neither command takes options beyond `--help`.

## Limits

The commands only run these fixed demos; there is no command that reads
your own data. The matrix graph has no traversal, and nothing is saved to
disk.