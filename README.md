# contestkit

Solutions to well-known competitive-programming problems, together with the
small data structures they rely on. Each problem is a plain function that
takes Python values and returns Python values. Most problem modules also have
a `run(text)` function that takes the problem's whole input as a string and
returns the expected output as a string; bad or short input raises
`ValueError`.

## Problems

Number theory and strings

- `contestkit.binary_decimals` – `binary_decimals(limit)`, `is_product_of_binary_decimals(n)`, `run(text)`
- `contestkit.shuffling` – `lowest_set_bit(n)`, `run(text)`
- `contestkit.number_hunt` – `is_prime(n)`, `smallest_two_prime_product(x)`, `run(text)`
- `contestkit.novice` – `novice_pairs(n)`, `run(text)`
- `contestkit.repeating_substring` – `divisors(n)`, `mismatches_at_most_one(s, pattern)`, `shortest_nearly_repeating(s)`, `run(text)`
- `contestkit.valuable_cards` – `min_segments(values, x)`, `run(text)`

Dynamic programming

- `contestkit.dice` – `dice_combinations(n)` (modulo 1e9+7), `run(text)`
- `contestkit.knapsack` – `max_value(items, capacity)` with `(weight, value)` items; -1 when nothing fits, `run(text)`
- `contestkit.edit_distance` – `edit_distance(s, t)`, `run(text)`
- `contestkit.lis` – `longest_increasing_subsequence(values)`, `run(text)`
- `contestkit.coins` – `min_coins(coins, target)`; -1 when the target cannot be reached, `run(text)`
- `contestkit.money_sums` – `money_sums(coins)`, `run(text)`
- `contestkit.rectangle_cutting` – `min_cuts(width, height)`, `run(text)`
- `contestkit.removal_game` – `max_first_player_score(values)`, `run(text)`
- `contestkit.two_sets` – `count_equal_partitions(n)` (modulo 1e9+7), `run(text)`
- `contestkit.projects` – `max_reward(projects)` with `(start, end, reward)` projects, `run(text)`
- `contestkit.test_of_love` – `can_cross(river, jump, swim)` for a river of `L`, `W` and `C` cells, `run(text)`
- `contestkit.water_tank` – `water_tank_times(heights)`, `run(text)`

Graphs and grids

Nodes are numbered from 1.

- `contestkit.longest_path` – `longest_path(node_count, edges)`, `run(text)`
- `contestkit.shortest_routes` – `shortest_distances(node_count, edges, source)` over directed edges and `all_pairs_distances(node_count, edges)` over undirected edges; both map unreachable nodes to `None`. `run_single(text)` prints distances from node 1 (unreachable ones as `UNREACHABLE`, 10**18) and `run_pairs(text)` answers distance queries, printing -1 for unreachable pairs.
- `contestkit.bridges` – `find_bridges(node_count, edges)` returns the `(child, parent)` bridges reachable from node 1, `run(text)`
- `contestkit.word_search` – `word_exists(board, word)`

Data structures

- `contestkit.xor_trie.XorTrie` – a multiset of 30-bit integers with `add`, `remove` (raises `KeyError` when absent), `max_xor`, `len()` and `in`; the module also has `run(text)`
- `contestkit.linked_sequence.LinkedSequence` – a sequence of distinct values with `insert_after` and `remove` in constant time, iteration, `len()` and `in`; the module also has `run(text)`
- `contestkit.fenwick.FenwickTree` – `add`, `prefix_sum` and `range_sum` over positions 1..size
- `contestkit.heap.MinHeap` – a binary min-heap with `push`, `pop`, `peek`, `delete_at` and `len()`

## Example

```python
from contestkit.dice import dice_combinations
from contestkit.edit_distance import edit_distance
from contestkit.fenwick import FenwickTree
from contestkit.heap import MinHeap

dice_combinations(3)            # 4
edit_distance("love", "movie")  # 2

tree = FenwickTree(8)
tree.add(3, 5)
tree.add(6, 2)
tree.range_sum(2, 6)            # 7

heap = MinHeap([5, 3, 8])
heap.push(1)
heap.pop()                      # 1
len(heap)                       # 3
```

Feeding a whole problem input through `run`:

```python
from contestkit.lis import run

run("8\n7 3 5 3 6 2 9 8\n")  # "4\n"
```

## What it does not do

There is no command-line program: nothing reads standard input or writes to
standard output. To solve a problem from a file, read the file yourself and
pass its text to the module's `run` function.

## Requirements

Python 3.10 or newer. There are no runtime dependencies; the tests use
pytest and hypothesis, available through the `test` extra.