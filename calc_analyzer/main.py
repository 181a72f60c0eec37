# main.py

"""
Interactive Calculator & Data Analyzer
--------------------------------------
Reads two numbers and an operator, computes the result with one of six arithmetic
operations, prints a short analysis of the result (sign, integrality, parity,
magnitude) and asks whether to go again.

Layout
------
- Input validation: parse_number, parse_operator and their retry loops
- Operations: add, subtract, multiply, divide, modulo, power, calculate
- Results: Numeric, ErrorMessage, Other (tagged result variant) and classify_result
- Session: the Running/Terminated loop
- Entry point: main()

Reading and writing lines goes through two plain callables, ``read_line(prompt) -> str``
and ``write_line(text)``, so the loop can be driven by input()/print(), a prompt_toolkit
session, or a test.
"""

from __future__ import annotations

import logging
import math
import re
import sys
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, Callable, ClassVar, Dict, List, Optional, Union

from prompt_toolkit import PromptSession

from calc_analyzer.config import configure_logging, load_settings
from calc_analyzer.errors import ConfigError, InvalidNumberError, InvalidOperatorError

logger = logging.getLogger(__name__)

Number = Union[int, float]
LineReader = Callable[[str], str]
LineWriter = Callable[[str], None]

INVALID_NUMBER_MESSAGE = "Invalid input! Please enter a valid number."
INVALID_OPERATOR_MESSAGE = "Invalid operator! Please enter one of: +, -, *, /, %, **"
DIVISION_BY_ZERO_MESSAGE = "Error: Division by zero!"
UNKNOWN_OPERATOR_MESSAGE = "Error: Unknown operator!"
UNDEFINED_RESULT_MESSAGE = "Result is undefined or null, something went wrong!"

VALID_OPERATORS = ('+', '-', '*', '/', '%', '**')

# --------------------------
# Input validation
# --------------------------

# Optionally signed decimal literal: 12, -3.5, +.5, 7., 1e3, 2.5E-2
_NUMBER_RE = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?", re.ASCII)


def parse_number(text: str) -> Number:
    """Parse a line of user input as a finite number.

    Surrounding whitespace is ignored. Integer literals come back as int, anything
    with a fraction or exponent as float. Raises InvalidNumberError otherwise.
    """
    raw = text.strip()
    if not raw or _NUMBER_RE.fullmatch(raw) is None:
        raise InvalidNumberError(f"Not a number: {text!r}")
    value = float(raw)
    if not math.isfinite(value):
        raise InvalidNumberError(f"Number out of range: {text!r}")
    if '.' in raw or 'e' in raw.lower():
        return value
    return int(raw)


def parse_operator(text: str) -> str:
    """Return text unchanged if it is exactly one of VALID_OPERATORS."""
    if text not in VALID_OPERATORS:
        raise InvalidOperatorError(f"Unknown operator: {text!r}")
    return text


def get_valid_number_input(prompt: str, read_line: Optional[LineReader] = None,
                           write_line: Optional[LineWriter] = None) -> Number:
    """Prompt until the user enters a valid number.

    read_line and write_line default to input() and print().
    """
    read_line = read_line or input
    write_line = write_line or print
    while True:
        text = read_line(prompt)
        try:
            return parse_number(text)
        except InvalidNumberError as e:
            logger.debug(f"Rejected number input: {e}")
            write_line(INVALID_NUMBER_MESSAGE)


def get_valid_operator_input(prompt: str, read_line: Optional[LineReader] = None,
                             write_line: Optional[LineWriter] = None) -> str:
    """Prompt until the user enters a valid operator."""
    read_line = read_line or input
    write_line = write_line or print
    while True:
        text = read_line(prompt)
        try:
            return parse_operator(text)
        except InvalidOperatorError as e:
            logger.debug(f"Rejected operator input: {e}")
            write_line(INVALID_OPERATOR_MESSAGE)

# --------------------------
# Operations
# --------------------------

def add(a: Number, b: Number) -> Number:
    return a + b

def subtract(a: Number, b: Number) -> Number:
    return a - b

def multiply(a: Number, b: Number) -> Number:
    return a * b

def divide(a: Number, b: Number) -> Union[Number, str]:
    """Divide a by b; a zero divisor gives the division-by-zero message instead of a number."""
    if b == 0:
        return DIVISION_BY_ZERO_MESSAGE
    return a / b

def modulo(a: Number, b: Number) -> Number:
    """Remainder of a / b whose sign follows the dividend.

    Unlike divide there is no guard for a zero divisor: the result is NaN.
    """
    if b == 0:
        return math.nan
    if isinstance(a, int) and isinstance(b, int):
        remainder = abs(a) % abs(b)
        return -remainder if a < 0 else remainder
    return math.fmod(a, b)

def power(a: Number, b: Number) -> float:
    """Raise a to the power b using real exponentiation.

    A negative base with a fractional exponent has no real result and gives NaN,
    overflow gives a signed infinity and zero to a negative power gives infinity.
    """
    base, exponent = float(a), float(b)
    if base < 0 and not exponent.is_integer():
        return math.nan
    try:
        return base ** exponent
    except ZeroDivisionError:
        return math.inf
    except OverflowError:
        odd_exponent = exponent.is_integer() and int(exponent) % 2 == 1
        return -math.inf if base < 0 and odd_exponent else math.inf


OPERATIONS: Dict[str, Callable[[Number, Number], Any]] = {
    '+': add,
    '-': subtract,
    '*': multiply,
    '/': divide,
    '%': modulo,
    '**': power,
}

# --------------------------
# Results
# --------------------------

@dataclass(frozen=True)
class Numeric:
    """A real, non-NaN result."""
    value: Number
    kind: ClassVar[str] = 'numeric'

@dataclass(frozen=True)
class ErrorMessage:
    """A computation that could not produce a number."""
    text: str
    kind: ClassVar[str] = 'error-message'

@dataclass(frozen=True)
class Other:
    """NaN, a non-real value, or no value at all."""
    value: Any = None
    kind: ClassVar[str] = 'other'


CalculationResult = Union[Numeric, ErrorMessage, Other]


def to_result(value: Any) -> CalculationResult:
    """Tag a raw operation result with its kind."""
    if isinstance(value, str):
        return ErrorMessage(value)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return Other(value)
    if isinstance(value, float) and math.isnan(value):
        return Other(value)
    return Numeric(value)


def calculate(a: Number, operator: str, b: Number) -> CalculationResult:
    """Apply the operation selected by operator to a and b."""
    operation = OPERATIONS.get(operator)
    if operation is None:
        return ErrorMessage(UNKNOWN_OPERATOR_MESSAGE)
    return to_result(operation(a, b))


def format_number(value: Any) -> str:
    """Render a value for display; integral floats print without a trailing '.0'."""
    if isinstance(value, float):
        if math.isnan(value):
            return 'NaN'
        if math.isinf(value):
            return 'Infinity' if value > 0 else '-Infinity'
        if value.is_integer() and abs(value) < 1e21:
            return str(int(value))
        return _format_float(value)
    return str(value)


def _format_float(value: float) -> str:
    # JavaScript-style: plain decimals from 1e-6 up, unpadded exponents otherwise (1e-7, 1e+21)
    text = repr(value)
    mantissa, sep, exp = text.partition('e')
    if not sep:
        return text
    exponent = int(exp)
    if -7 < exponent < 0:
        return format(Decimal(text), 'f')
    return f"{mantissa}e{'-' if exponent < 0 else '+'}{abs(exponent)}"


def _result_text(result: CalculationResult) -> str:
    if isinstance(result, ErrorMessage):
        return result.text
    return format_number(result.value)


def _is_integer(value: Number) -> bool:
    if isinstance(value, int):
        return True
    return value.is_integer()


def classify_result(a: Number, operator: str, b: Number, result: CalculationResult,
                    write_line: Optional[LineWriter] = None) -> None:
    """Print the calculation and an analysis of its result."""
    write_line = write_line or print
    write_line("\n--- Result ---")
    write_line(f"{format_number(a)} {operator} {format_number(b)} = {_result_text(result)}")

    write_line("\n--- Data Analysis ---")
    write_line(f"Result type: {result.kind}")

    if isinstance(result, Numeric):
        value = result.value
        if value > 0:
            write_line("The result is Positive.")
        elif value < 0:
            write_line("The result is Negative.")
        else:
            write_line("The result is Zero.")

        integer = _is_integer(value)
        if integer:
            write_line("The result is an Integer.")
        else:
            write_line("The result is a Floating-point number.")

        even = integer and value % 2 == 0
        if integer:
            write_line(f"The result is {'Even' if even else 'Odd'}.")

        # Only positive integers get a compound tag.
        if value > 0 and integer and even:
            write_line("Special: The result is Positive and Even!")
        elif value > 0 and integer and not even:
            write_line("Special: The result is Positive and Odd!")

        if abs(value) >= 100:
            write_line("The result is a large number (|value| >= 100).")
    elif isinstance(result, ErrorMessage):
        write_line(f"Error occurred: {result.text}")
    else:
        write_line(UNDEFINED_RESULT_MESSAGE)

# --------------------------
# Session
# --------------------------

class SessionState(Enum):
    RUNNING = 'running'
    TERMINATED = 'terminated'


class Session:
    """
    Runs calculation cycles until the user answers 'no' or 'n'.
    """
    STOP_ANSWERS = ('no', 'n')

    def __init__(self, read_line: Optional[LineReader] = None, write_line: Optional[LineWriter] = None):
        self.read_line = read_line or input
        self.write_line = write_line or print
        self.state = SessionState.RUNNING
        self.cycles = 0

    def print_welcome(self) -> None:
        self.write_line("===========================================")
        self.write_line("Welcome to Interactive Calculator & Data Analyzer!")
        self.write_line("===========================================\n")

    def print_farewell(self) -> None:
        self.write_line("\nThank you for using the Interactive Calculator & Data Analyzer!")
        self.write_line("Goodbye! 👋")

    def run_cycle(self) -> CalculationResult:
        """Read the inputs, calculate, and print the analysis for one calculation."""
        self.write_line("\n--- New Calculation ---")
        num1 = get_valid_number_input("Enter the first number: ", self.read_line, self.write_line)
        num2 = get_valid_number_input("Enter the second number: ", self.read_line, self.write_line)
        operator = get_valid_operator_input("Enter an operator (+, -, *, /, %, **): ",
                                            self.read_line, self.write_line)

        result = calculate(num1, operator, num2)
        logger.debug(f"{num1!r} {operator} {num2!r} -> {result!r}")
        classify_result(num1, operator, num2, result, self.write_line)
        self.cycles += 1
        return result

    def should_stop(self, answer: str) -> bool:
        return answer.lower() in self.STOP_ANSWERS

    def run(self) -> int:
        """Run until the user opts out. Returns the number of completed calculations."""
        logger.info("Session started")
        self.print_welcome()
        while self.state is SessionState.RUNNING:
            self.run_cycle()
            self.write_line("\n--- Continue? ---")
            answer = self.read_line("Do you want to perform another calculation? (yes/no): ")
            if self.should_stop(answer):
                self.state = SessionState.TERMINATED
        self.print_farewell()
        logger.info(f"Session finished after {self.cycles} calculation(s)")
        return self.cycles

# --------------------------
# Entry point
# --------------------------

def make_line_reader(plain: bool = False) -> LineReader:
    """Use a prompt_toolkit session on a terminal, builtin input() otherwise."""
    if plain or not sys.stdin.isatty():
        return input
    session = PromptSession()
    return session.prompt


def main(argv: Optional[List[str]] = None) -> int:
    try:
        settings = load_settings(argv)
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2
    configure_logging(settings.log_level)

    session = Session(make_line_reader(settings.plain_input), print)
    try:
        session.run()
    except EOFError:
        print()
        logger.info("Input closed, exiting")
    except KeyboardInterrupt:
        print()
        logger.info("Interrupted, exiting")
        return 130
    return 0

if __name__ == '__main__':
    sys.exit(main())
