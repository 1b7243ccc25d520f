# infixcalc

A small command-line calculator for arithmetic written in infix notation.
It turns an expression into postfix form with the shunting-yard algorithm and then
evaluates the postfix form.

## Installation

```
pip install .
```

## Using the calculator

Run:

```
infixcalc
```

At the `>> ` prompt, enter one expression. Put a space between every token:

```
>> 3 + 4 * ( 2 - 1 ) * 6 + 8
35.000000
>>
```

The calculator evaluates one expression, prints the result and exits.

These tokens are accepted:

- numbers, such as `3`, `0`, `2.5` or `-4`. A token counts as a number when it begins with a nonzero number or is exactly `0`. Write zero as `0`, because a token such as `0.0` is rejected as an unknown symbol.
- the operators `+`, `-`, `*` and `/`. `*` and `/` bind more tightly than `+` and `-`. Operators of equal precedence are applied from left to right.
- parentheses `(` and `)`
- `q` or `Q` on its own. This prints `Quitting Successfully` and exits.

The calculator handles input as follows:

- An empty line or end of input makes it exit without output.
- If a line holds an unknown symbol, it prints `error: invalid symbol '<token>'`, then `invalid input re-enter`, and prompts again.
- If a line has fewer than three tokens or unmatched parentheses, it prints `invalid input re-enter` and prompts again.
- Dividing by zero prints `Error: dividing by 0`, and the exit status is 1.

Values carried between operations are rounded to five decimal places. The final result is printed with six.

## Using it as a library

```python
from infixcalc.calc import to_postfix, evaluate_postfix, calculate

postfix = to_postfix("3 + 4 * ( 2 - 1 ) * 6 + 8")
print(postfix)                     # ['3', '4', '2', '1', '-', '*', '6', '*', '+', '8', '+']
print(evaluate_postfix(postfix))   # 35.0
print(calculate("10 / 4"))         # 2.5
```

The module `infixcalc.calc` provides these functions:

- `to_postfix(line)` returns a list of postfix tokens.
- `evaluate_postfix(postfix)` returns the result of the last operation.
- `calculate(line)` checks that the line has at least three tokens and then evaluates it.
- `precedence(token)` and `is_number(token)` classify a single token.
- `apply_operator(op, first, last)` computes a single operation.

Errors are raised as `CalcError`. An unknown token raises its subclass `InvalidSymbolError`, whose `token` attribute holds the offending text. `CalcError` is raised for:

- unmatched parentheses
- a missing operand
- an expression with no operator
- division by zero

`QuitRequested` is raised when the input is `q` or `Q`.

The `Stack` and `Queue` containers in `infixcalc.containers` can also be used on their own:

```python
from infixcalc.containers import Stack, Queue

stack = Stack()
for item in "abc":
    stack.push(item)
print(str(stack))   # stack: abc
print(stack.pop())  # c

queue = Queue()
for item in "abc":
    queue.enqueue(item)
print(str(queue))       # a b c
print(queue.dequeue())  # a
```

Both support `len()`, iteration and `is_empty()`. `pop`, `peek` and `dequeue` raise `IndexError` when the container is empty.

## Limitations

- The calculator reads a single expression per run. It has no history and no variables.
- Tokens must be separated by spaces. `3+4` is not split into three tokens.

## Running the tests

```
pip install .[test]
pytest
```