# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and a
fixed set of moves, and prints the moves it used, one per line.

## Moves

| Move  | Effect                                            |
|-------|---------------------------------------------------|
| `sa`  | swap the top two elements of `a`                  |
| `sb`  | swap the top two elements of `b`                  |
| `ss`  | `sa` and `sb` together                            |
| `pa`  | move the top of `b` onto `a`                      |
| `pb`  | move the top of `a` onto `b`                      |
| `ra`  | rotate `a` up: the top becomes the bottom         |
| `rb`  | rotate `b` up                                     |
| `rr`  | `ra` and `rb` together                            |
| `rra` | rotate `a` down: the bottom becomes the top       |
| `rrb` | rotate `b` down                                   |
| `rrr` | `rra` and `rrb` together                          |

## Installing

    pip install .

For the tests:

    pip install ".[test]"
    pytest

## Command line

Pass the numbers as separate arguments, or as a single argument
separated by spaces. The first number is the top of stack `a`.

    push_swap 3 2 1
    push_swap "5 -1 4 0 2"

Each number is digits with an optional leading minus sign; a plus sign
is not accepted. If the input is already sorted, nothing is printed.

The command exits with status 1 and prints a message to standard error
when an argument is not a number, falls outside the 32-bit signed range,
or repeats an earlier value. With no arguments, with one empty argument,
or with one argument holding only spaces, it exits with status 1 and
prints nothing.

Two numbers are sorted with at most one `sa`, and three with at most two
moves. Larger inputs use a cost-driven strategy: elements are pushed to
`b` in order of the cheapest combined rotation cost, three stay on `a`
and are sorted in place, then the elements on `b` go back to their
positions in `a`, and `a` is finally rotated so its smallest value is on
top.

## Library

    from pushswap.algorithm import sort_values

    moves = sort_values([3, 2, 1])

`sort_values` returns the list of move names, in the same form the
command prints.

`pushswap.stacks.PushSwap` holds the two stacks as `a` and `b` and has
one method for each move (`sa`, `pb`, `rrr` and so on); every move made
is appended to its `moves` list. Each stack is a `pushswap.stacks.Stack`,
whose `values()` gives the numbers from top to bottom.

`pushswap.parsing.parse_arguments` checks and converts argument strings,
raising `pushswap.parsing.InputError` on invalid input.
`pushswap.algorithm` also exposes `sort_three` and `turk_sort`, which act
on a `PushSwap` directly.

The `pushswap.libft` sub-package holds small general helpers:
character tests (`chars`), decimal conversion (`convert`), byte-buffer
operations (`memory`), C-style string searching and bounded copying
(`strings`), string building and splitting (`transform`), writing to
file descriptors (`output`), a line-by-line descriptor reader
(`lines.LineReader`) and a singly linked list (`lists.LinkedList`).

## What it does not do

There is no checker: the package does not read a list of moves and
verify that it sorts a given input. Only the sorter and its command are
provided.