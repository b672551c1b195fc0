"""
Conditional logic engine for form fields.

Decides which fields are visible for an in-progress data mapping and
evaluates calculated fields. Every function here is pure, so callers may
re-run them on each change to the data.

Calculation formulas are arithmetic over numbers and field references::

    (field['hours'] * field["rate"]) + 25

Supported: ``+ - * /``, unary minus, parentheses and decimal literals.
"""

import logging
import math
import re
from typing import Any, Dict, Iterable, List, Mapping, Optional, Set, Tuple

from fieldform.models.form import ConditionalRule, FormField, RuleOperator

logger = logging.getLogger(__name__)

_NUMERIC_TEXT = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")

_TOKEN = re.compile(
    r"""
    (?P<number>\d+(?:\.\d*)?|\.\d+)
    |field\[(?P<quote>['"])(?P<field>[^'"]+)(?P=quote)\]
    |(?P<op>[-+*/()])
    """,
    re.VERBOSE,
)

_FIELD_REFERENCE = re.compile(r"""field\[['"](?P<field>[^'"]+)['"]\]""")

_DISALLOWED = re.compile(r"[^0-9+\-*/().\s]")


class FormulaError(ValueError):
    """A calculation formula could not be parsed or evaluated."""


def to_number(value: Any) -> float:
    """
    Coerce a form value to a number.
    
    Blank strings count as 0; anything non-numeric becomes NaN so that
    every ordered comparison against it is false.
    """
    if isinstance(value, bool):
        return 1.0 if value else 0.0
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return 0.0
        if _NUMERIC_TEXT.fullmatch(text):
            return float(text)
    return math.nan


def to_text(value: Any) -> str:
    """Coerce a form value to the string used for equality and containment."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (list, tuple)):
        return ",".join(to_text(item) for item in value)
    return str(value)


def evaluate_condition(rule: ConditionalRule, data: Mapping[str, Any]) -> bool:
    """Check one rule against the current data. Unanswered fields never match."""
    field_value = data.get(rule.field_id)
    if field_value is None:
        return False
    
    if rule.operator == RuleOperator.EQUALS:
        return to_text(field_value) == to_text(rule.value)
    if rule.operator == RuleOperator.NOT_EQUALS:
        return to_text(field_value) != to_text(rule.value)
    if rule.operator == RuleOperator.CONTAINS:
        return to_text(rule.value).lower() in to_text(field_value).lower()
    if rule.operator == RuleOperator.GREATER_THAN:
        return to_number(field_value) > to_number(rule.value)
    if rule.operator == RuleOperator.LESS_THAN:
        return to_number(field_value) < to_number(rule.value)
    return False


def should_show_field(field: FormField, data: Mapping[str, Any]) -> bool:
    """A field is shown when it has no rules or all of its rules hold."""
    if not field.conditional_rules:
        return True
    return all(evaluate_condition(rule, data) for rule in field.conditional_rules)


def get_visible_fields(fields: Iterable[FormField], data: Mapping[str, Any]) -> List[FormField]:
    """Filter ``fields`` down to the visible ones, keeping their order."""
    return [field for field in fields if should_show_field(field, data)]


def _tokenize(text: str) -> List[Tuple[str, Any]]:
    tokens = []
    position = 0
    while position < len(text):
        if text[position].isspace():
            position += 1
            continue
        match = _TOKEN.match(text, position)
        if not match:
            raise FormulaError(f"Unexpected character {text[position]!r} at position {position}")
        if match.group("number") is not None:
            tokens.append(("number", float(match.group("number"))))
        elif match.group("field") is not None:
            tokens.append(("field", match.group("field")))
        else:
            tokens.append(("op", match.group("op")))
        position = match.end()
    return tokens


class _Parser:
    """Recursive-descent parser producing a small expression tree."""
    
    max_depth = 100
    
    def __init__(self, tokens: List[Tuple[str, Any]]):
        self.tokens = tokens
        self.index = 0
        self.depth = 0
    
    def peek(self) -> Optional[Tuple[str, Any]]:
        if self.index < len(self.tokens):
            return self.tokens[self.index]
        return None
    
    def take(self) -> Tuple[str, Any]:
        token = self.peek()
        if token is None:
            raise FormulaError("Unexpected end of formula")
        self.index += 1
        return token
    
    def parse(self) -> tuple:
        if not self.tokens:
            raise FormulaError("Empty formula")
        tree = self.expression()
        if self.peek() is not None:
            raise FormulaError(f"Unexpected {self.peek()[1]!r} after end of expression")
        return tree
    
    def expression(self) -> tuple:
        node = self.term()
        while self.peek() in (("op", "+"), ("op", "-")):
            operator = self.take()[1]
            node = ("binary", operator, node, self.term())
        return node
    
    def term(self) -> tuple:
        node = self.factor()
        while self.peek() in (("op", "*"), ("op", "/")):
            operator = self.take()[1]
            node = ("binary", operator, node, self.factor())
        return node
    
    def factor(self) -> tuple:
        self.depth += 1
        if self.depth > self.max_depth:
            raise FormulaError(f"Formula is nested more than {self.max_depth} levels deep")
        try:
            return self._factor()
        finally:
            self.depth -= 1
    
    def _factor(self) -> tuple:
        kind, value = self.take()
        if kind == "number":
            return ("number", value)
        if kind == "field":
            return ("field", value)
        if value == "-":
            return ("negate", self.factor())
        if value == "+":
            return self.factor()
        if value == "(":
            node = self.expression()
            if self.take() != ("op", ")"):
                raise FormulaError("Expected ')'")
            return node
        raise FormulaError(f"Unexpected {value!r}")


class Formula:
    """A parsed calculation formula."""
    
    def __init__(self, source: str):
        self.source = source
        self._tree = _Parser(_tokenize(source)).parse()
    
    @property
    def field_ids(self) -> Set[str]:
        """Ids of every field the formula references."""
        found: Set[str] = set()
        stack = [self._tree]
        while stack:
            node = stack.pop()
            if node[0] == "field":
                found.add(node[1])
            elif node[0] == "negate":
                stack.append(node[1])
            elif node[0] == "binary":
                stack.extend(node[2:])
        return found
    
    def evaluate(self, data: Mapping[str, Any]) -> float:
        try:
            return self._evaluate(self._tree, data)
        except RecursionError:
            raise FormulaError("Formula is too long to evaluate") from None
    
    def _evaluate(self, node: tuple, data: Mapping[str, Any]) -> float:
        kind = node[0]
        if kind == "number":
            return node[1]
        if kind == "field":
            # Missing and empty answers count as zero.
            raw = data.get(node[1]) or 0
            value = to_number(raw)
            if math.isnan(value):
                raise FormulaError(f"Field {node[1]!r} is not numeric: {raw!r}")
            return value
        if kind == "negate":
            return -self._evaluate(node[1], data)
        
        _, operator, left_node, right_node = node
        left = self._evaluate(left_node, data)
        right = self._evaluate(right_node, data)
        if operator == "+":
            return left + right
        if operator == "-":
            return left - right
        if operator == "*":
            return left * right
        if right == 0:
            raise FormulaError("Division by zero")
        return left / right


def parse_formula(source: str) -> Formula:
    """Parse a formula, raising FormulaError if it is malformed."""
    return Formula(source)


def compute_calculation(source: str, data: Mapping[str, Any]) -> float:
    """Evaluate a formula, raising FormulaError on any problem."""
    return parse_formula(source).evaluate(data)


def sanitize_calculation(source: str, data: Mapping[str, Any]) -> str:
    """
    Substitute field values into a formula and keep only arithmetic characters.
    
    Missing or empty answers become 0. Anything outside digits, ``+ - * /``,
    parentheses, the decimal point and whitespace is dropped from both the
    formula and the substituted values, so ``"$1,000"`` reads as ``1000``.
    """
    def substitute(match):
        return to_text(data.get(match.group("field")) or 0)
    
    return _DISALLOWED.sub("", _FIELD_REFERENCE.sub(substitute, source))


def evaluate_calculation(source: str, data: Mapping[str, Any]) -> float:
    """
    Evaluate a formula for display, falling back to 0 when it fails.
    
    Unlike ``compute_calculation`` this is lenient: stray characters in the
    formula or in the answers are ignored (see ``sanitize_calculation``).
    """
    try:
        return parse_formula(sanitize_calculation(source, data)).evaluate({})
    except FormulaError as exc:
        logger.debug("Calculation %r failed: %s", source, exc)
        return 0


def calculate_fields(
    fields: Iterable[FormField], data: Mapping[str, Any]
) -> Tuple[Dict[str, float], Dict[str, str]]:
    """
    Evaluate every calculated field.
    
    Returns the values that could be computed and, separately, an error
    message for each field whose formula failed.
    """
    values: Dict[str, float] = {}
    errors: Dict[str, str] = {}
    for field in fields:
        if not field.calculation:
            continue
        try:
            values[field.id] = compute_calculation(field.calculation, data)
        except FormulaError as exc:
            errors[field.id] = str(exc)
    return values, errors
