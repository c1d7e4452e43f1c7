# dsalgo

Classic data structures and algorithms in plain Python: heaps, disjoint sets,
stacks, queues, a doubly linked list, binary trees, binary search trees,
undirected graphs, merge sort and infix/postfix expression handling. No
third-party dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `dsalgo.disjoint_set` | `DisjointSet` with naive, by-size and two by-rank unions |
| `dsalgo.heaps` | `MaxHeap`, `MinHeap` |
| `dsalgo.stack` | `Stack` |
| `dsalgo.linked_queue` | `Queue` |
| `dsalgo.expressions` | `precedence`, `infix_to_postfix`, `evaluate_postfix` |
| `dsalgo.sorting` | `merge`, `merge_sort` |
| `dsalgo.doubly_linked_list` | `DoublyLinkedList` |
| `dsalgo.graph` | `Graph`, an undirected adjacency-list graph with BFS |
| `dsalgo.binary_tree` | `Node`, `build_tree` and traversals |
| `dsalgo.bst` | `BinarySearchTree` |

Empty containers raise exceptions rather than returning sentinel values:
popping or peeking an empty heap or stack, dequeuing an empty queue, and
deleting from an empty doubly linked list raise `IndexError`.

## Examples

### Heaps

```python
from dsalgo.heaps import MaxHeap

heap = MaxHeap()
for x in (10, 5, 15, 25, 1):
    heap.push(x)
heap.peek()   # 25
heap.pop()    # 25
heap.peek()   # 15
len(heap)     # 4
```

`MinHeap` has the same interface, with the smallest item on top.

### Disjoint sets

```python
from dsalgo.disjoint_set import DisjointSet

ds = DisjointSet()
for v in range(1, 11):
    ds.make_set(v)
ds.union_by_size(1, 2)
ds.union_by_rank(3, 4)
ds.find(1) == ds.find(2)   # True
ds.size_of(1)              # 2
5 in ds                    # True
```

Elements may be any hashable value. `find` raises `KeyError` for an element
that was never added with `make_set`. The union methods differ only in which
root ends up on top:

- `union_naive(a, b)` hangs the root of `a` under the root of `b`;
- `union_by_size(a, b)` hangs the smaller tree under the larger, ties going
  under `b`;
- `union_by_rank(a, b)` uses rank, breaking rank ties by size;
- `union_by_rank_simple(a, b)` uses rank, keeping the root of `a` on top
  when ranks are equal.

### Stack and queue

```python
from dsalgo.stack import Stack
from dsalgo.linked_queue import Queue

s = Stack()
for x in (1, 2, 3, 69):
    s.push(x)
s.peek()      # 69
s.pop()       # 69
list(s)       # [3, 2, 1]  (top to bottom)

q = Queue()
for x in (1, 2, 3):
    q.enqueue(x)
q.dequeue()   # 1
list(q)       # [2, 3]  (front to rear)
```

### Expressions

```python
from dsalgo.expressions import infix_to_postfix, evaluate_postfix, precedence

infix_to_postfix("a+b*c")     # "abc*+"
infix_to_postfix("(a+b)*c")   # "ab+c*"
evaluate_postfix("23*4+")     # 10
precedence("^")               # 3
```

Operands are single ASCII letters or digits. In `infix_to_postfix`, operators
of equal precedence, `^` included, group to the left. `evaluate_postfix`
takes single-digit operands; `/` truncates toward zero and `^` raises to a
power. Both raise `ValueError` on an unexpected character, and
`evaluate_postfix` also on a missing operand or an empty expression.

### Sorting

```python
from dsalgo.sorting import merge, merge_sort

merge_sort([5, 2, 9, 1])    # [1, 2, 5, 9]
merge([1, 4], [2, 3])       # [1, 2, 3, 4]
```

`merge_sort` accepts any iterable and returns a new list; the sort is stable.

### Doubly linked list

```python
from dsalgo.doubly_linked_list import DoublyLinkedList

dll = DoublyLinkedList()
dll.insert_last(2)
dll.insert_last(3)
dll.insert_first(1)
list(dll)             # [1, 2, 3]
list(reversed(dll))   # [3, 2, 1]
dll.delete_first()    # 1
dll.delete_last()     # 3
len(dll)              # 1
```

### Graphs

```python
from dsalgo.graph import Graph

g = Graph(5)
g.add_edge(1, 2)
g.add_edge(1, 3)
g.add_edge(2, 4)
g.bfs(1)            # [1, 2, 3, 4]
g.neighbours(1)     # [2, 3]
print(g.format())
# 0 ->
# 1 -> 2 3
# 2 -> 1 4
# 3 -> 1
# 4 -> 2
```

Vertices are `0 .. n - 1`; a vertex outside that range raises `IndexError`.

### Binary trees

```python
from dsalgo.binary_tree import (
    build_tree, breadth_first, level_order, reverse_level_order,
    preorder, inorder, postorder,
)

root = build_tree([1, 2, -1, -1, 3, -1, -1])   # pre-order, -1 marks no node
preorder(root)              # [1, 2, 3]
inorder(root)               # [2, 1, 3]
postorder(root)             # [2, 3, 1]
breadth_first(root)         # [1, 2, 3]
level_order(root)           # [[1], [2, 3]]
reverse_level_order(root)   # [[3, 2], [1]]
```

`build_tree` raises `ValueError` if the values run out before the tree is
complete, and ignores values left over after it.

### Binary search trees

```python
from dsalgo.bst import BinarySearchTree

tree = BinarySearchTree([4, 2, 6, 1, 3])
3 in tree           # True
list(tree)          # [1, 2, 3, 4, 6]
list(reversed(tree))  # [6, 4, 3, 2, 1]
tree.min(), tree.max()  # (1, 6)
tree.median()       # 3
tree.delete(4)
list(tree)          # [1, 2, 3, 6]

tree.invert()
list(tree)          # [6, 3, 2, 1]
2 in tree           # True

other = BinarySearchTree([5, 7])
tree.merge(other)
```

Equal keys go to the smaller side unless the tree is built with
`duplicates_right=True`. `delete` raises `KeyError` for a missing key;
`min`, `max` and `median` raise `ValueError` on an empty tree.

## What is not included

- There is no singly linked list; `DoublyLinkedList` covers insertion and
  deletion at either end, but has no positional, by-key or middle-element
  operations.
- The package is a library only: it installs no command-line programs and
  reads nothing from standard input. Trees, graphs and expressions are built
  from Python values passed to the functions above.