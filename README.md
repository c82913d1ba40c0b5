# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and a small
set of operations. It prints the operations it uses, one per line.

## Operations

| Name  | Effect                                                    |
|-------|-----------------------------------------------------------|
| `sa`  | swap the values of the two top elements of `a`            |
| `sb`  | swap the values of the two top elements of `b`            |
| `pa`  | move the top of `b` onto `a`                              |
| `pb`  | move the top of `a` onto `b`                              |
| `ra`  | rotate `a` up: the top goes to the bottom                 |
| `rb`  | rotate `b` up                                             |
| `rr`  | `ra` and `rb` together; nothing happens unless both can   |
| `rra` | rotate `a` down: the bottom goes to the top               |
| `rrb` | rotate `b` down                                           |
| `rrr` | `rra` and `rrb` together                                  |

An operation that cannot act (pushing from an empty stack, rotating a stack
with fewer than two elements) does nothing and is not reported. `sa` and `sb`
raise `IndexError` when the stack has fewer than two elements. `rrr` turns
`a` whenever it can, but is only reported when `b` turned as well.

## Installation

```
pip install .
```

## Command line

Numbers can be given as separate arguments or in one space-separated string:

```
push_swap 3 2 1
push_swap "4 67 3 87 23"
```

The first number is the top of stack `a`. Each number may have leading
spaces, a sign and leading zeros, and at most ten significant digits; it must
lie in the 32-bit signed range, and no value may repeat. On bad input the
command writes `ulala` (no newline) and exits with status 5. With no
arguments it prints nothing and exits with status 0.

The command always runs the sorting strategy; it does not first check whether
the input is already in order, so sorted input of more than three numbers
still produces operations.

## Library use

```python
from pushswap.sorting import solve

print(solve([3, 2, 1]))   # ['sa', 'rra']
```

`solve` takes distinct integers (raising `ValueError` for duplicates) and
returns the list of operations.

Other pieces:

- `pushswap.parsing.parse_arguments` turns command-line strings into
  integers, raising `ParseError` (a `ValueError`) for bad input;
  `rank_values` replaces each value by its rank from 1 to n; `build_stack`
  does both and returns a `Stack`.
- `pushswap.stack.Stack` holds `Node` objects top first; `Machine` holds the
  two stacks and performs the operations, passing each operation name it
  carries out to the `emit` callable it was given (by default, printing it).
- `pushswap.sorting.sort_stack` sorts the ranks in a machine's stack `a`;
  `is_sorted` tells whether `a` is in order up to a rotation (turning it with
  `ra` so that 1 is on top) while `b` is empty.

## Tests

```
pip install .[test]
pytest
```