"""Infix to postfix conversion and integer expression evaluation."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterable, Sequence

OPERATORS = frozenset("+-*/")

_PROG = "calc"
_INFIX_PATTERN = re.compile(r"[0-9]+|.", re.DOTALL)
_POSTFIX_PATTERN = re.compile(r"[0-9]+|[-+*/]")


def precedence(op: str) -> int:
    """Return the binding strength of an operator; 0 for anything else."""
    if op in ("*", "/"):
        return 2
    if op in ("+", "-"):
        return 1
    return 0


def is_operator(c: str) -> bool:
    """Tell whether ``c`` is one of the four arithmetic operators."""
    return c in OPERATORS


def _is_digits(item: str) -> bool:
    return bool(item) and item.isascii() and item.isdigit()


def _is_operand_char(c: str) -> bool:
    return c.isascii() and c.isalnum()


def _shunt(item: str, stack: list[str], output: list[str]) -> None:
    """Feed one non-operand item through the operator stack."""
    if item == "(":
        stack.append(item)
    elif item == ")":
        while stack and stack[-1] != "(":
            output.append(stack.pop())
        if stack:
            stack.pop()
    elif is_operator(item):
        while stack and precedence(stack[-1]) >= precedence(item):
            output.append(stack.pop())
        stack.append(item)


def infix_to_postfix(infix: str) -> str:
    """Convert an infix expression of single-character operands to postfix.

    Letters and digits are operands; anything that is neither an operand,
    an operator nor a parenthesis is skipped.  An unmatched opening
    parenthesis is emitted as it is left on the stack.
    """
    output: list[str] = []
    stack: list[str] = []
    for c in infix:
        if _is_operand_char(c):
            output.append(c)
        else:
            _shunt(c, stack, output)
    output.extend(reversed(stack))
    return "".join(output)


def infix_to_postfix_tokens(infix: str) -> list[str]:
    """Convert an infix expression with multi-digit integers to postfix tokens."""
    output: list[str] = []
    stack: list[str] = []
    for match in _INFIX_PATTERN.finditer(infix):
        item = match.group()
        if _is_digits(item):
            output.append(item)
        else:
            _shunt(item, stack, output)
    output.extend(reversed(stack))
    return output


def _apply(op: str, a: int, b: int) -> int:
    if op == "+":
        return a + b
    if op == "-":
        return a - b
    if op == "*":
        return a * b
    if b == 0:
        raise ZeroDivisionError("division by zero")
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def evaluate_postfix(postfix: str | Iterable[str]) -> int:
    """Evaluate a postfix expression of non-negative integers.

    ``postfix`` is either a string, scanned for numbers and operators, or an
    iterable of tokens.  Division truncates toward zero.
    """
    if isinstance(postfix, str):
        items: Iterable[str] = _POSTFIX_PATTERN.findall(postfix)
    else:
        items = postfix
    stack: list[int] = []
    for item in items:
        if _is_digits(item):
            stack.append(int(item))
        elif is_operator(item):
            if len(stack) < 2:
                raise ValueError(f"missing operand for {item!r}")
            b = stack.pop()
            a = stack.pop()
            stack.append(_apply(item, a, b))
    if not stack:
        raise ValueError("empty expression")
    return stack[-1]


def evaluate(expression: str) -> int:
    """Evaluate an infix integer expression."""
    return evaluate_postfix(infix_to_postfix_tokens(expression))


def postfix_main(argv: Sequence[str] | None = None) -> int:
    """Print the postfix form of an expression given as argument or on stdin."""
    args = sys.argv[1:] if argv is None else list(argv)
    if args:
        infix = args[0]
    else:
        print("Enter infix expression: ", end="", flush=True)
        words = sys.stdin.read().split()
        infix = words[0] if words else ""
    print(f"Postfix expression: {infix_to_postfix(infix)}")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Evaluate the single expression given on the command line."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print(f'Usage: {_PROG} "expression"')
        return 1
    try:
        result = evaluate(args[0])
    except (ValueError, ZeroDivisionError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print(result)
    return 0