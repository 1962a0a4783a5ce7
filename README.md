# sortkit

Classic searching and sorting algorithms written to be read and watched at
work. Most sorts come in two forms: a function that returns a new sorted list,
and a `*_steps` generator that yields a copy of the list after each pass,
iteration, merge or partition. The input is never modified.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Searching

`sortkit.searching`:

- `binary_search(items, target)` searches an ascending sequence and returns
  the index of a matching element. With duplicates it is not necessarily the
  leftmost one.
- `linear_search(items, target)` returns the index of the first matching
  element.

Both raise `ValueError` when `target` is not present.

## Comparison sorts

`sortkit.comparison_sorts`:

- `selection_sort(items)` / `selection_sort_steps(items)`: one step per
  position except the last.
- `bubble_sort(items)` / `bubble_sort_steps(items)`: always `n - 1` passes.
- `bubble_sort_early_exit(items)` / `bubble_sort_early_exit_steps(items)`:
  stops at the first pass that makes no swap; that pass is not yielded.
- `insertion_sort(items)` / `insertion_sort_steps(items)`: one step per
  element from the second on.

```python
from sortkit.comparison_sorts import bubble_sort, insertion_sort_steps

print(bubble_sort([5, 1, 4, 2, 8]))      # [1, 2, 4, 5, 8]

for step in insertion_sort_steps([3, 1, 2]):
    print(step)                           # [1, 3, 2] then [1, 2, 3]
```

## Divide-and-conquer sorts

`sortkit.divide_sorts`:

- `merge_sort(items)` / `merge_sort_steps(items)`: stable; yields the whole
  list after every merge of two sorted halves.
- `quick_sort(items)` / `quick_sort_steps(items)`: pivots on the last element
  of each range and yields the whole list after every partition, left parts
  first.

## Distribution sorts

`sortkit.distribution_sorts` works on non-negative integers only:

- `counting_sort(items)`
- `radix_sort(items)` / `radix_sort_steps(items)`: least significant decimal
  digit first, one step per digit of the largest value.
- `bucket_sort(items)`: one bucket per value from 0 to the maximum.

A negative value raises `ValueError`; a value that is not an integer raises
`TypeError`.

## Linked list

`sortkit.linked_list` has `Node` (with `data` and `next`) and `LinkedList`:

```python
from sortkit.linked_list import LinkedList

numbers = LinkedList([1, 2, 8, 9, 12, 16])
numbers.reverse_even_runs()
print(numbers.render())                   # 1 8 2 9 16 12
```

`LinkedList(values)` builds a list from any iterable. It supports
`append(value)`, iteration over its values, `len()`, an in-place
`bubble_sort()` that swaps the data of neighbouring nodes,
`reverse_even_runs()` which relinks every maximal run of consecutive even
values in reverse order, and `render()`, which returns the values separated by
spaces, or `Linked List is underflowed!!!` when the list is empty.

## Command line

Installing the package adds a `sortkit` command. It reads standard input: a
count, then that many integers, all separated by whitespace. For the search
commands, the next integer after the elements is the value to look for.

```
sortkit [COMMAND]
```

Commands (default `show`):

| Command | Output |
| --- | --- |
| `show` | the elements |
| `selection`, `bubble`, `bubble-early`, `insertion`, `merge`, `quick`, `radix` | each step, then `Sorted array: ...` |
| `counting`, `bucket` | `Sorted array: ...` |
| `binary`, `linear` | the index and 1-based position, or `Element not found: -1` |
| `list-sort` | the linked list before and after `bubble_sort()` |
| `reverse-even` | the linked list after `reverse_even_runs()` |

```
$ echo "5 3 1 4 1 5" | sortkit insertion
Array after iteration 1: 1 3 4 1 5
Array after iteration 2: 1 3 4 1 5
Array after iteration 3: 1 1 3 4 5
Array after iteration 4: 1 1 3 4 5
Sorted array: 1 1 3 4 5

$ echo "5 1 3 5 7 9 7" | sortkit binary
Index of the element: 3
Position of the element: 4
```

A missing or negative count, too few elements, a token that is not an
integer, a missing search value, or a negative value given to a distribution
sort prints `error: ...` to standard error and exits with status 1.

`sortkit.cli.read_numbers(text)` returns the elements announced by the leading
count, and `sortkit.cli.main(argv)` runs the command from Python and returns
the exit status.

## What it does not do

The command line is not interactive: it prints no prompts and reads all of
standard input at once. The linked list only appends at the end; it has no
insertion at a position and no deletion.