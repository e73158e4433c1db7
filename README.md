# algokit

Three small algorithms that use only the standard library:

- `algokit.painting`: the cheapest way to paint walls when one painter is paid and one is free.
- `algokit.courses`: the largest number of courses that can each be finished by its deadline.
- `algokit.frequency`: sorting characters by how often they occur, with the counts first gathered into a Huffman tree.

## Installation

```
pip install .
```

To install what the tests need as well:

```
pip install ".[test]"
```

## Usage

### Painting walls

`paint_walls(cost, time)` takes two sequences of integers that must be the same length. The paid painter paints wall `i` at a cost of `cost[i]` and takes `time[i]` units of time to do it. While the paid painter works, the free painter paints any other wall at one wall per unit of time and at no cost. The function returns the lowest total cost of painting every wall.

```python
from algokit.painting import paint_walls

paint_walls([1, 2, 3, 2], [1, 2, 3, 2])  # 3
paint_walls([], [])                      # 0
```

If the two sequences differ in length, it raises `ValueError`.

### Course scheduling

`schedule_course(courses)` takes an iterable of `(duration, last_day)` pairs. Courses run one after another from day 0, and each must end no later than its `last_day`. The function returns the largest number of courses that can be taken. It is greedy. It goes through the courses in order of deadline and keeps a max-heap of the durations taken so far. When a course does not fit and is shorter than the longest course taken so far, it takes the place of that longest course. The input is left unchanged.

```python
from algokit.courses import schedule_course

schedule_course([[100, 200], [200, 1300], [1000, 1250], [2000, 3200]])  # 3
```

### Frequency sort

`frequency_sort(s)` returns `s` rearranged so that more frequent characters come first, with all copies of each character kept together. An empty string gives an empty string.

```python
from algokit.frequency import frequency_sort

frequency_sort("aabbbc")  # "bbbaac"
```

Characters that occur equally often all come out in a group together. The order within such a group is not defined.

The counts are first built into a Huffman tree. You can call that step yourself:

```python
from algokit.frequency import build_huffman_tree

root = build_huffman_tree({"a": 2, "b": 3, "c": 1})
root.freq                                  # 6
root.is_leaf()                             # False
sorted(leaf.char for leaf in root.leaves())  # ['a', 'b', 'c']
```

`build_huffman_tree(frequencies)` takes a mapping from characters to counts and skips any character whose count is zero or less. It raises `ValueError` if no character is left. The tree is made of `HuffmanNode` objects, and each one has these members:

- `freq`: the count for a leaf, or the sum of the counts below it for an inner node.
- `char`: the character on a leaf, or an empty string on an inner node.
- `left` and `right`: the child nodes, or `None` on a leaf.
- `is_leaf()`: `True` when the node has no children.
- `leaves()`: yields the leaves below the node, from left to right.

The package gives no Huffman codes and does no encoding or decoding. The tree is used only to collect the character counts.

## Running the tests

```
pytest
```