"""Evaluation of arithmetic formulas with named variables.

Formulas are turned into postfix order with a shunting-yard pass and
then evaluated on a stack. Binary operators are written infix
(``3min7``), functions take a parenthesised argument (``sin(X)``) and
``!`` is postfix. ``+``, ``-``, ``%``, ``min`` and ``max`` share the
lowest precedence and are not reordered against each other.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence, Union


@dataclass(frozen=True)
class Operator:
    """An operator or parenthesis token."""

    symbol: str
    precedence: int
    arity: int


OPERATORS: tuple = (
    Operator("(", 0, 0),
    Operator(")", 0, 0),
    Operator("+", 0, 2),
    Operator("-", 0, 2),
    Operator("*", 1, 2),
    Operator("/", 1, 2),
    Operator("^", 2, 2),
    Operator("%", 0, 2),
    Operator("sin", 0, 1),
    Operator("cos", 0, 1),
    Operator("tan", 0, 1),
    Operator("arcsin", 0, 1),
    Operator("arccos", 0, 1),
    Operator("arctan", 0, 1),
    Operator("!", 1, 1),
    Operator("min", 0, 2),
    Operator("max", 0, 2),
)

Token = Union[float, Operator]

_NUMBER = re.compile(r"(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|(?i:infinity|inf|nan)")
_WHITESPACE = " \t\n\r"


def _divide(a: float, b: float) -> float:
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def _power(a: float, b: float) -> float:
    try:
        return math.pow(a, b)
    except OverflowError:
        return math.inf
    except ValueError:
        return math.nan


def _modulo(a: float, b: float) -> float:
    divisor = int(b)
    if divisor == 0:
        raise ZeroDivisionError("integer modulo by zero")
    return math.fmod(int(a), divisor)


def _domain(function: Callable[[float], float]) -> Callable[[float, float], float]:
    def apply(_a: float, b: float) -> float:
        try:
            return function(b)
        except ValueError:
            return math.nan

    return apply


def _factorial(_a: float, b: float) -> float:
    return float(math.prod(range(1, int(b) + 1)))


_APPLY: Dict[str, Callable[[float, float], float]] = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": _divide,
    "^": _power,
    "%": _modulo,
    "sin": _domain(math.sin),
    "cos": _domain(math.cos),
    "tan": _domain(math.tan),
    "arcsin": _domain(math.asin),
    "arccos": _domain(math.acos),
    "arctan": _domain(math.atan),
    "!": _factorial,
    "min": lambda a, b: a if a < b else b,
    "max": lambda a, b: a if a > b else b,
}


def _match_operator(text: str, pos: int) -> Optional[Operator]:
    for operator in OPERATORS:
        if text.startswith(operator.symbol, pos):
            return operator
    return None


def to_postfix(formula: str) -> List[Token]:
    """Convert an infix formula to a postfix list of numbers and operators."""
    output: List[Token] = []
    stack: List[Operator] = []
    pos = 0
    while pos < len(formula):
        if formula[pos] in _WHITESPACE:
            pos += 1
            continue
        operator = _match_operator(formula, pos)
        if operator is None:
            match = _NUMBER.match(formula, pos)
            if match is None:
                raise ValueError(f"unexpected character {formula[pos]!r} at position {pos}")
            output.append(float(match.group()))
            pos = match.end()
            continue
        if operator.symbol == ")":
            while stack and stack[-1].symbol != "(":
                output.append(stack.pop())
            if not stack:
                raise ValueError(f"unbalanced ')' at position {pos}")
            stack.pop()
        else:
            if operator.precedence > 0 and stack:
                top = stack[-1]
                if top.precedence == operator.precedence and operator.symbol != "^":
                    output.append(stack.pop())
            stack.append(operator)
        pos += len(operator.symbol)
    output.extend(reversed(stack))
    return output


def evaluate_postfix(tokens: Sequence[Token]) -> float:
    """Evaluate postfix tokens; missing operands count as zero.

    A token that is not an arithmetic operator (a stray parenthesis)
    repeats the previous result. An empty sequence evaluates to 0.0.
    """
    stack: List[float] = []
    result = 0.0
    for token in tokens:
        if isinstance(token, Operator):
            a = b = 0.0
            if token.arity > 0 and stack:
                b = stack.pop()
            if token.arity == 2 and stack:
                a = stack.pop()
            apply = _APPLY.get(token.symbol)
            if apply is not None:
                result = apply(a, b)
        else:
            result = float(token)
        stack.append(result)
    return stack[-1] if stack else 0.0


def _format_number(value: float) -> str:
    return "%g" % value


class Formula:
    """A formula with named variables; ``PI`` is predefined.

    Variables are substituted as text with six significant digits. A
    number written directly next to a variable name multiplies it
    (``2X`` is ``2*X``).
    """

    def __init__(self, formula: str = "") -> None:
        self.formula = formula
        self.variables: Dict[str, float] = {"PI": math.pi}

    def set_formula(self, formula: str) -> None:
        """Replace the formula text."""
        self.formula = formula

    def add_variable(self, key: str, value: float) -> None:
        """Define or redefine a variable."""
        if not key:
            raise ValueError("variable name must not be empty")
        self.variables[key] = float(value)

    def calculate(self) -> float:
        """Evaluate the formula with the current variables."""
        text = "".join(ch for ch in self.formula if ch not in _WHITESPACE)
        names = sorted(self.variables)
        for name in names:
            escaped = re.escape(name)
            text = re.sub(rf"{escaped}(?=[0-9.])", lambda m: m.group() + "*", text)
            text = re.sub(rf"(?<=[0-9.]){escaped}", lambda m: "*" + m.group(), text)
        for name in names:
            text = text.replace(name, _format_number(self.variables[name]))
        return evaluate_postfix(to_postfix(text))

    def __float__(self) -> float:
        return self.calculate()