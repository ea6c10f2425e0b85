"""Conversion of infix expressions to postfix and prefix notation.

Operands are single characters and operators are binary. Parentheses group
sub-expressions.
"""

from __future__ import annotations

from typing import Dict, List

__all__ = ["ExpressionError", "infix_to_postfix", "infix_to_prefix"]


class ExpressionError(ValueError):
    """Raised for malformed infix expressions."""


_POSTFIX_PRECEDENCE: Dict[str, int] = {
    "^": 3,
    "%": 3,
    "*": 2,
    "/": 2,
    "+": 1,
    "-": 1,
}

# Priorities used while scanning right to left. An operator's priority
# outside the stack is compared with the priority of the one on top of the
# stack; the asymmetry fixes associativity: left to right for + - * / %,
# right to left for ^.
_OUTSIDE_PRIORITY: Dict[str, int] = {
    "^": 5,
    "*": 4,
    "/": 4,
    "%": 4,
    "+": 2,
    "-": 2,
}
_INSIDE_PRIORITY: Dict[str, int] = {
    "^": 6,
    "*": 3,
    "/": 3,
    "%": 3,
    "+": 1,
    "-": 1,
}


def _is_operand(ch: str) -> bool:
    return ch.isascii() and ch.isalnum()


def infix_to_postfix(expression: str) -> str:
    """Convert an infix expression to postfix notation.

    Operands are ASCII letters and digits. Operators of equal precedence
    associate to the left, ``^`` and ``%`` included.
    """
    output: List[str] = []
    stack: List[str] = []
    for ch in expression:
        if _is_operand(ch):
            output.append(ch)
        elif ch == "(":
            stack.append(ch)
        elif ch == ")":
            while True:
                if not stack:
                    raise ExpressionError("unmatched ')'")
                top = stack.pop()
                if top == "(":
                    break
                output.append(top)
        elif ch in _POSTFIX_PRECEDENCE:
            precedence = _POSTFIX_PRECEDENCE[ch]
            while (
                stack
                and stack[-1] != "("
                and precedence <= _POSTFIX_PRECEDENCE[stack[-1]]
            ):
                output.append(stack.pop())
            stack.append(ch)
        else:
            raise ExpressionError(f"unexpected character {ch!r}")
    while stack:
        top = stack.pop()
        if top == "(":
            raise ExpressionError("unmatched '('")
        output.append(top)
    return "".join(output)


def infix_to_prefix(expression: str) -> str:
    """Convert an infix expression to prefix notation.

    Any character that is neither an operator nor a parenthesis is taken
    as an operand. ``^`` associates to the right, the other operators to
    the left.
    """
    emitted: List[str] = []
    stack: List[str] = []
    for ch in reversed(expression):
        if ch == "(":
            while True:
                if not stack:
                    raise ExpressionError("unmatched '('")
                top = stack.pop()
                if top == ")":
                    break
                emitted.append(top)
        elif ch == ")":
            stack.append(ch)
        elif ch not in _OUTSIDE_PRIORITY:
            emitted.append(ch)
        else:
            priority = _OUTSIDE_PRIORITY[ch]
            while stack and _INSIDE_PRIORITY.get(stack[-1], 0) > priority:
                emitted.append(stack.pop())
            stack.append(ch)
    while stack:
        top = stack.pop()
        if top == ")":
            raise ExpressionError("unmatched ')'")
        emitted.append(top)
    return "".join(reversed(emitted))