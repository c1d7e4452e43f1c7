"""Infix-to-postfix conversion and postfix evaluation."""

_PRECEDENCE = {"+": 1, "-": 1, "*": 2, "/": 2, "^": 3}


def precedence(op):
    """Return the binding strength of ``op``; 0 for anything else."""
    return _PRECEDENCE.get(op, 0)


def _is_operand(ch):
    return ch.isascii() and ch.isalnum()


def infix_to_postfix(expression):
    """Convert an infix expression of single-character operands to postfix.

    Operators of equal precedence, ``^`` included, group to the left.
    """
    output = []
    stack = []
    for ch in expression:
        if _is_operand(ch):
            output.append(ch)
        elif ch == "(":
            stack.append(ch)
        elif ch == ")":
            while stack and stack[-1] != "(":
                output.append(stack.pop())
            if stack:
                stack.pop()
        elif ch in _PRECEDENCE:
            while stack and precedence(ch) <= precedence(stack[-1]):
                output.append(stack.pop())
            stack.append(ch)
        else:
            raise ValueError(f"unexpected character {ch!r} in expression")
    output.extend(reversed(stack))
    return "".join(output)


def _truncating_divide(b, a):
    quotient = abs(b) // abs(a)
    return -quotient if (b < 0) != (a < 0) else quotient


def _apply(op, b, a):
    if op == "+":
        return b + a
    if op == "-":
        return b - a
    if op == "*":
        return b * a
    if op == "/":
        return _truncating_divide(b, a)
    return int(b**a)


def evaluate_postfix(expression):
    """Evaluate a postfix expression of single-digit operands.

    Division truncates toward zero and ``^`` raises to a power.
    """
    stack = []
    for ch in expression:
        if "0" <= ch <= "9":
            stack.append(int(ch))
        elif ch in _PRECEDENCE:
            if len(stack) < 2:
                raise ValueError(f"operator {ch!r} is missing an operand")
            a = stack.pop()
            b = stack.pop()
            stack.append(_apply(ch, b, a))
        else:
            raise ValueError(f"unexpected character {ch!r} in expression")
    if not stack:
        raise ValueError("empty expression")
    return stack[-1]