# algokit

Classic data structures and algorithms in plain Python, with no
third-party dependencies.

## Contents

| Module | Contents |
| --- | --- |
| `algokit.expressions` | Infix to postfix conversion and integer expression evaluation |
| `algokit.sorting` | Insertion, bubble, selection, shell, quick, merge (recursive and iterative), heap, radix, counting, bucket, radix exchange and address calculation sorts |
| `algokit.circular_queue` | Fixed-capacity ring-buffer queue and unbounded linked circular queue |
| `algokit.adapters` | Queues built from two stacks and stacks built from two queues |
| `algokit.binary_tree` | Level-order tree construction and iterative preorder traversal |
| `algokit.avl` | Self-balancing AVL tree |
| `algokit.btree` | B-tree with configurable minimum degree |
| `algokit.bplus_tree` | B+ tree with a linked leaf level |
| `algokit.red_black` | Red-black tree |
| `algokit.graphs` | Dijkstra, Prim, Kruskal, union-find, DFS edge classification and cycle lengths |

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

Evaluate an integer expression with `+`, `-`, `*`, `/` and parentheses.
Division truncates toward zero; a malformed expression or a division by
zero prints an error and exits with status 1, as does giving anything but
exactly one argument:

```
algokit-calc "(23-8)*3+28/4"
```

Convert an infix expression with single-character operands (letters or
digits) to postfix. The expression may be given as an argument; without
one, the first word of standard input is used:

```
algokit-postfix "a+b*c"
```

## Library use

### Expressions

```python
from algokit.expressions import evaluate, infix_to_postfix, infix_to_postfix_tokens

infix_to_postfix("a+b*c")              # "abc*+"
infix_to_postfix_tokens("12+3*4")      # ["12", "3", "4", "*", "+"]
evaluate("(23-8)*3+28/4")              # 52
```

`evaluate_postfix` accepts either a string or an iterable of tokens and
raises `ValueError` for a missing operand or an empty expression.

### Sorting

Every sort takes any iterable and returns a new sorted list.

```python
from algokit.sorting import heap_sort, merge_sort, radix_sort

merge_sort([12, 11, 13, 5, 6])         # [5, 6, 11, 12, 13]
```

`radix_sort`, `counting_sort` and `address_calculation_sort` accept only
non-negative integers, `radix_exchange_sort` only unsigned 32-bit integers,
and `bucket_sort` only numbers in `[0, 1)`; other values raise `ValueError`.

### Queues and stacks

```python
from algokit.circular_queue import ArrayCircularQueue

queue = ArrayCircularQueue(5)
queue.enqueue(10)
queue.enqueue(20)
queue.dequeue()                        # 10
list(queue)                            # [20]
```

Adding to a full `ArrayCircularQueue` raises `QueueFullError`; taking from
an empty `ArrayCircularQueue` or `LinkedCircularQueue` raises
`QueueEmptyError`. The two-stack queues (`PushCostlyQueue`,
`PopCostlyQueue`) and two-queue stacks (`PushCostlyStack`,
`PopCostlyStack`) in `algokit.adapters` take a capacity, raise
`OverflowError` when full and `EmptyError` when empty.

### Trees

```python
from algokit.avl import AVLTree
from algokit.binary_tree import build_tree, preorder

tree = AVLTree()
for key in (10, 20, 30, 40, 50, 25):
    tree.insert(key)
tree.delete(40)
25 in tree                             # True
tree.preorder()                        # [30, 20, 10, 25, 50]

preorder(build_tree([1, 2, 3, None, 4]))   # [1, 2, 4, 3]
```

`BTree(min_degree=3)` and `BPlusTree(order=3)` take their branching
parameter when created; `BTree.inorder()` lists the keys in order,
`BTree.render()` draws them indented by level, and `BPlusTree.leaves()`
walks the linked leaf level. `RedBlackTree.inorder()` returns
`(key, Color)` pairs.

### Graphs

```python
from algokit.graphs import dijkstra, kruskal_mst

graph = [
    [0, 4, 0, 0, 0, 0],
    [4, 0, 8, 0, 0, 0],
    [0, 8, 0, 7, 0, 4],
    [0, 0, 7, 0, 9, 14],
    [0, 0, 0, 9, 0, 10],
    [0, 0, 4, 14, 10, 0],
]
dijkstra(graph, 0)                     # [0, 4, 12, 19, 26, 16]
kruskal_mst(3, [(0, 1, 5), (1, 2, 1), (0, 2, 2)])
```

Adjacency matrices use `0` for "no edge". `dijkstra` gives `math.inf` for
unreachable vertices; `prim_mst` raises `ValueError` on a disconnected
graph; `kruskal_mst` accepts `Edge` objects or `(src, dest, weight)`
tuples. `classify_edges` labels every edge met by a depth-first search with
an `EdgeKind`, and `cycle_lengths` returns the shortest and longest cycle
length, or `None` for an acyclic graph.

## Limitations

`BTree` and `BPlusTree` support insertion and lookup only; they cannot
delete keys. All structures live in memory; nothing is saved to disk.