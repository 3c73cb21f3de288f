# pushswap

This package works with two stacks. At the start, stack **a** holds a list of
distinct integers and stack **b** is empty. The goal is to sort stack **a** in
ascending order, with the smallest value on top. Only these instructions may
be used:

| Instruction | Effect |
|-------------|--------|
| `sa`, `sb`, `ss` | swap the top two elements of a, of b, or of both |
| `pa`, `pb` | move the top element of b onto a, or the top element of a onto b |
| `ra`, `rb`, `rr` | rotate a, b, or both up, so the top element moves to the bottom |
| `rra`, `rrb`, `rrr` | rotate a, b, or both down, so the bottom element moves to the top |

An instruction that cannot act leaves the stacks as they are. Examples are a
push from an empty stack, or a swap or rotation on fewer than two elements.

## Installation

```
pip install .
```

This installs two commands, `push_swap` and `checker`. You can also run them
as `python -m pushswap.solver` and `python -m pushswap.checker`.

## Input

Both commands take the integers as arguments. You can pass them as separate
arguments or inside one quoted argument, such as `push_swap "4 67 3 87 23"`.
The arguments are joined, then split on the space character only. A tab
therefore counts as part of a word, and that word is invalid.

Each word must be an optional `+` or `-` followed by one or more digits. Each
value must fit in a signed 32-bit integer, and no value may appear twice.
Input that breaks any of these rules is invalid. Input that has no words at
all is also invalid. For invalid input, the command prints `Error` to standard
error and exits with status 1.

Two edge cases behave differently:

* With no arguments, the command prints nothing and exits with status 0.
* With a single empty argument, the command prints `Error` to standard error
  and exits with status 0.

## `push_swap`

This command prints a sequence of instructions, one per line, that sorts the
given integers:

```
$ push_swap 3 2 1
ra
sa
```

If the input is already sorted, the command prints nothing.

It uses one of two methods, depending on input size:

* **Three values:** a dedicated routine handles them.
* **Larger inputs:** values below the running mean are pushed to stack b until
  three remain in a. Those three are sorted. Each element of b then returns to
  a, placed just above the smallest greater value in a. The element chosen
  each time is the one that needs the fewest rotations. Finally, a is rotated
  until its smallest value is on top.

## `checker`

This command reads instructions from standard input and runs them on the
given integers. Each instruction must be on its own line and end with a
newline. When the input runs out, the command prints one of two results:

* `OK` if stack a is sorted and stack b is empty.
* `KO` otherwise.

A line that is not a known instruction prints `Error` to standard error and
exits with status 1. So does a line without a trailing newline.

```
$ push_swap 5 1 4 2 3 | checker 5 1 4 2 3
OK
```

## Library use

```python
from pushswap.solver import solve
from pushswap.checker import check
from pushswap.stacks import Stacks, Operation, parse_operation

ops = solve([3, 2, 1])                                  # [Operation.RA, Operation.SA]
print(check([3, 2, 1], [f"{op}\n" for op in ops]))      # True

stacks = Stacks([2, 1])
stacks.apply(parse_operation("sa"))                     # or stacks.apply("sa")
print(stacks.is_sorted())                               # True
print(stacks.a, stacks.b)                               # deque([1, 2]) deque([])
```

The modules provide the following:

* **`pushswap.stacks`**
  * `Operation` is a string enum of the eleven instructions.
  * `parse_operation(text)` returns the matching `Operation` and raises
    `ValueError` for an unknown name.
  * `Stacks(values)` holds the two stacks as deques `a` and `b`, top first.
  * `Stacks.apply(op)` carries out one operation.
  * `Stacks.is_sorted()` reports whether `b` is empty and `a` is ascending.
* **`pushswap.parsing`**
  * `split_args(args)` joins the arguments and splits them into words.
  * `is_number(token)` checks that a word is an optional sign followed by
    digits.
  * `parse_int(token)` converts one word to an integer.
  * `parse_stack(args)` reads the arguments into a list of integers.
  * `parse_int` and `parse_stack` raise `InputError`, a subclass of
    `ValueError`, on bad input.
* **`pushswap.solver`**
  * `solve(values)` returns the list of operations that sorts `values`. It
    raises `ValueError` if the values are not distinct.
  * `main(argv=None)` implements the `push_swap` command.
* **`pushswap.checker`**
  * `check(values, lines)` applies the instruction lines and returns whether
    the result is sorted. It raises `ValueError` on the first invalid line.
  * `main(argv=None)` implements the `checker` command.

## Running the tests

```
pip install .[test]
pytest
```