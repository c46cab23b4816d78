# dsakit

A library of classic algorithms in plain Python. It covers recursion and
backtracking, binary trees, binary search trees and general trees whose nodes
are numbered 1..n. It has no runtime dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `dsakit.combinatorics`

- `fibonacci(n)`: the n-th Fibonacci number, with `fibonacci(0) == 0`. Raises
  `ValueError` for negative `n`.
- `permutations(nums)`: every permutation, in the order that in-place swapping
  produces.
- `subsequences(items)`: every subsequence. Each element is taken before it is
  skipped, so the full sequence comes first and the empty one comes last.
- `unique_subsets(nums)` and `unique_subsets_backtracking(nums)`: the distinct
  subsets of a list that may hold repeats. The first returns them sorted
  lexicographically. The second returns them in backtracking order.
- `subset_sums(values)`: the sum of every subset, in the same take-then-skip
  order.
- `palindrome_partitions(text)`: every way to split a string into palindromes.

### `dsakit.backtracking`

- `graph_coloring(matrix, m)`: whether the graph given by an adjacency matrix
  can be coloured with `m` colours so that no two neighbours share one.
- `garden_no_adjacent(n, paths)`: a flower type from 1 to 4 for each of the
  gardens 1..n, such that joined gardens differ.
- `n_queens(n)`: every board with `n` non-attacking queens, as lists of strings
  made of `"Q"` and `"."`.
- `rat_in_maze(grid)`: every path from the top-left to the bottom-right of a
  square 0/1 grid, written as strings of the moves `R`, `L`, `D` and `U`.

### `dsakit.inversions`

- `count_inversions(values)`: the number of pairs `i < j` with
  `values[i] > values[j]`. It is counted with merge sort.

### `dsakit.tree`

- `TreeNode(val=0, left=None, right=None)`: a binary tree node. Nodes compare by
  identity.
- Traversals that return lists of values: `preorder`, `inorder`, `postorder`,
  `iterative_preorder`, `iterative_inorder`, `iterative_postorder_two_stacks`,
  `iterative_postorder_one_stack`, `morris_inorder` and `morris_preorder`. The
  Morris traversals leave the tree as they found it.
- `level_order(root)` and `zigzag_level_order(root)` return one list per level.
- `vertical_traversal(root)` returns the columns from left to right. Within a
  column, values are ordered by depth, and values at the same depth are sorted.

### `dsakit.construct`

- `serialize(root)` and `deserialize(data)`: a level-order encoding as
  comma-terminated tokens, with `#` for a missing child. `deserialize` raises
  `ValueError` on a bad token or on data that ends too early.
- `build_from_preorder_inorder(preorder, inorder)` and
  `build_from_postorder_inorder(postorder, inorder)`: rebuild a tree from two of
  its traversals. Both raise `ValueError` when a value is missing from
  `inorder`. The postorder version returns `None` when the two lengths differ.

### `dsakit.properties`

- `max_depth`, `is_balanced`, `diameter` (counted in edges), `is_same_tree`,
  `is_symmetric`.
- `count_complete_nodes`: the node count of a complete tree.
- `max_path_sum`: the largest sum along any path. It returns 0 for an empty
  tree.
- `max_width`: the widest level, counting the gaps between its outermost nodes.

### `dsakit.views`

- `right_view(root)` finds the right side view breadth first.
- `right_view_levels(root)` finds the same view depth first.
- `left_view(root)` gives the view from the left.
- `top_view(root)` and `bottom_view(root)` give one value per vertical column.
- `boundary(root)` gives the boundary anticlockwise: the root, the left edge,
  the leaves, then the right edge from the bottom up.

### `dsakit.paths`

- `path_to(root, value)`: the values from the root down to the first node that
  holds `value`. It returns an empty list when there is no such node.
- `lowest_common_ancestor(root, p, q)`: the deepest node above both `p` and `q`.
  Nodes are matched by identity.
- `nodes_at_distance(root, target, k)`: the values exactly `k` edges away from
  `target`.
- `burn_time(root, target)`: the number of steps a fire started at `target`
  needs to reach every node.

### `dsakit.transform`

These functions change the tree in place.

- `enforce_children_sum(root)`: raises values until every inner node equals the
  sum of its children.
- `flatten_recursive(root)`, `flatten_with_stack(root)` and
  `flatten_in_place(root)`: turn the tree into a right-linked chain in preorder.

### `dsakit.bst`

- `search`, `insert` and `delete`. Equal values are inserted to the right.
  `delete` hangs the right subtree of the removed node below the largest node of
  its left subtree.
- `find_ceil` and `find_floor` return -1 when there is no such value.
- `inorder_predecessor` and `inorder_successor` return a node or `None`.
- `is_valid_bst`, `lowest_common_ancestor_bst`, `bst_from_preorder`.
- `balance_bst(root)` returns a new height-balanced tree that holds the same
  values.

### `dsakit.bst_iterator`

- `BSTIterator(root, reverse=False)`: a lazy in-order iterator over the values,
  descending when `reverse` is true. It has `has_next()` and supports `next()`
  and `for` loops.
- `find_target(root, key)`: whether two different nodes add up to `key`.

### `dsakit.bst_order`

- `kth_smallest`, `kth_largest` and `kth_smallest_morris` take a 1-based `k` and
  return `None` when the tree has fewer than `k` nodes. They raise `ValueError`
  when `k < 1`.
- `largest_bst_size(root)`: the size of the largest subtree that is a valid
  search tree.
- `recover_tree(root)`: swaps back the two values that were exchanged in a
  search tree.

### `dsakit.general_tree`

Nodes are numbered 1..n, and edges are pairs `(u, v)`.

- `subordinate_counts(n, bosses)`: the number of subordinates of each employee.
  `bosses[i]` is the boss of employee `i + 2`.
- `tree_diameter(n, edges)`: the length of the longest path, in edges.
- `distance_sums(n, edges)`: for each node, the sum of its distances to all
  other nodes.
- `max_distances(n, edges)`: for each node, the distance to the node farthest
  from it.
- `greedy_matching(edges)`: the number of pairs matched when edges are taken in
  the given order and both of their ends are still free.

## Example

```python
from dsakit.construct import build_from_preorder_inorder, serialize
from dsakit.tree import level_order
from dsakit.bst import bst_from_preorder, find_ceil
from dsakit.backtracking import n_queens

root = build_from_preorder_inorder([3, 9, 20, 15, 7], [9, 3, 15, 20, 7])
print(level_order(root))       # [[3], [9, 20], [15, 7]]
print(serialize(root))

bst = bst_from_preorder([8, 5, 1, 7, 10, 12])
print(find_ceil(bst, 6))       # 7

print(len(n_queens(4)))        # 2
```

## What it does not do

dsakit is a library only. It has no command-line program, and it does not read
problem input from standard input or a file. Every function takes Python values
and returns its result.