"""Infix arithmetic calculator using the shunting-yard algorithm."""

from __future__ import annotations

import argparse
import re
import sys

from .containers import Queue, Stack

MIN_TOKENS = 3

_NUMBER_PREFIX = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

_QUIT_TOKENS = frozenset({"q", "Q"})


class CalcError(Exception):
    """Raised when an expression cannot be parsed or evaluated."""


class InvalidSymbolError(CalcError):
    """Raised for a token that is neither a number nor a known operator."""

    def __init__(self, token: str) -> None:
        super().__init__(f"invalid symbol '{token}'")
        self.token = token


class QuitRequested(Exception):
    """Raised when the input asks the calculator to quit."""


def _leading_number(text: str) -> float:
    """Value of the longest numeric prefix of ``text``, or 0.0 if there is none."""
    match = _NUMBER_PREFIX.match(text)
    return float(match.group().strip()) if match else 0.0


def precedence(token: str) -> int:
    """Precedence class of ``token``.

    1 for ``+``/``-``, 2 for ``*``/``/``, 3 for ``(``, 4 for ``)``,
    0 for the quit command and -1 for anything else.
    """
    if token in ("+", "-"):
        return 1
    if token in ("*", "/"):
        return 2
    if token == "(":
        return 3
    if token == ")":
        return 4
    if token in _QUIT_TOKENS:
        return 0
    return -1


def is_number(token: str) -> bool:
    """True when ``token`` starts with a nonzero number or is exactly ``"0"``."""
    return _leading_number(token) != 0.0 or token == "0"


def _tokens(line: str) -> list[str]:
    return [tok for tok in line.rstrip("\n").split(" ") if tok]


def _flush_operators(prec: int, op_stack: Stack, output: Queue) -> None:
    while not op_stack.is_empty():
        top_prec = precedence(op_stack.peek())
        if top_prec == 3 or prec > top_prec:
            break
        output.enqueue(op_stack.pop())


def to_postfix(line: str) -> list[str]:
    """Convert a space-separated infix expression to a list of postfix tokens."""
    op_stack = Stack()
    output = Queue()
    for tok in _tokens(line):
        if is_number(tok):
            output.enqueue(tok)
            continue
        prec = precedence(tok)
        if prec in (1, 2):
            _flush_operators(prec, op_stack, output)
            op_stack.push(tok)
        elif prec == 3:
            op_stack.push(tok)
        elif prec == 4:
            while True:
                if op_stack.is_empty():
                    raise CalcError("unmatched ')'")
                top = op_stack.pop()
                if top == "(":
                    break
                output.enqueue(top)
        elif prec == 0:
            raise QuitRequested()
        else:
            raise InvalidSymbolError(tok)

    while not op_stack.is_empty():
        top = op_stack.pop()
        if top == "(":
            raise CalcError("unmatched '('")
        output.enqueue(top)
    return list(output)


def apply_operator(op: str, first: float, last: float) -> float:
    """Compute ``first op last`` for one of ``+ - * /``."""
    if op == "+":
        return first + last
    if op == "-":
        return first - last
    if op == "*":
        return first * last
    if op == "/":
        if last == 0.0:
            raise CalcError("dividing by 0")
        return first / last
    raise InvalidSymbolError(op)


def evaluate_postfix(postfix: list[str]) -> float:
    """Evaluate postfix tokens and return the result of the last operation.

    Intermediate results are kept to five decimal places.
    """
    values: list[float] = []
    result: float | None = None
    last_index = len(postfix) - 1
    for index, tok in enumerate(postfix):
        if is_number(tok):
            values.append(_leading_number(tok))
            continue
        if len(values) < 2:
            raise CalcError(f"missing operand for '{tok}'")
        last = values.pop()
        first = values.pop()
        result = apply_operator(tok, first, last)
        if index != last_index:
            values.append(float(f"{result:.5f}"))
    if result is None:
        raise CalcError("no operator in expression")
    return result


def calculate(line: str) -> float:
    """Evaluate an infix expression of at least three space-separated tokens."""
    postfix = to_postfix(line)
    if len(_tokens(line)) < MIN_TOKENS:
        raise CalcError("expression too short")
    return evaluate_postfix(postfix)


def main(argv: list[str] | None = None) -> int:
    """Prompt for one expression, re-prompting on bad input, and print its value."""
    parser = argparse.ArgumentParser(
        description="Evaluate a space-separated infix arithmetic expression."
    )
    parser.parse_args(argv)

    out = sys.stdout
    first_attempt = True
    while True:
        if not first_attempt:
            out.write("invalid input re-enter\n")
        first_attempt = False

        out.write(">> ")
        out.flush()
        line = sys.stdin.readline()
        if not line or not _tokens(line):
            return 0
        try:
            postfix = to_postfix(line)
        except QuitRequested:
            out.write("Quitting Successfully")
            return 0
        except InvalidSymbolError as exc:
            out.write(f"error: {exc}")
            continue
        except CalcError:
            continue
        if len(_tokens(line)) < MIN_TOKENS:
            continue
        break

    try:
        answer = evaluate_postfix(postfix)
    except CalcError as exc:
        out.write(f"Error: {exc}")
        return 1
    out.write(f"{answer:f}\n")
    out.write(">>\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())