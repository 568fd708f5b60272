"""
ExpressionRegistry - Explicit operator registration pattern

Bounded Context: Operator registration and dispatch
Responsibilities:
  - Register operator parsers
  - Reject unknown operators before parsing
  - Provide introspection (available_operators, get_help)

Threading: Thread-safe (uses lock for write operations)
Pattern: Registry with explicit registration
"""

from typing import Any, Callable, Dict, Set
import threading

from sextant_expression.distance import Distance
from sextant_expression.errors import ParseError
from sextant_expression.expression import Expression
from sextant_expression.logging import LogEvent, create_logger

logger = create_logger("expression.registry")

ExpressionParser = Callable[[Any], Expression]


class ExpressionRegistry:
    """
    Registry mapping operator names to parsers.

    Key Features:
      - Fail-fast: Unknown operators rejected with ParseError
      - Introspection: Can query available operators at runtime
      - Self-Documenting: Each operator has a description

    Thread Safety:
      - Uses lock for write operations (register)
      - Read operations are lock-free (dict reads)

    Example:
        registry = ExpressionRegistry()
        registry.register('distance', Distance.parse, "Distance to a GeoJSON geometry")

        expression = registry.parse(["distance", {"type": "Point", "coordinates": [0, 0]}])
    """

    def __init__(self):
        self._parsers: Dict[str, ExpressionParser] = {}
        self._descriptions: Dict[str, str] = {}
        self._lock = threading.Lock()

    def register(self, operator: str, parser: ExpressionParser, description: str) -> None:
        """
        Register an operator with its parser.

        Args:
            operator: Operator name as written in style JSON
            parser: Callable receiving the full expression array
            description: Human-readable description for help text

        Raises:
            ValueError: If operator already registered
        """
        with self._lock:
            if operator in self._parsers:
                raise ValueError(f"Operator '{operator}' already registered")

            self._parsers[operator] = parser
            self._descriptions[operator] = description

        logger.debug(
            event=LogEvent.OPERATOR_REGISTERED,
            message=f"Registered operator '{operator}'",
            metadata={'operator': operator},
        )

    def parse(self, value: Any) -> Expression:
        """
        Parse an expression array by dispatching on its operator.

        Args:
            value: Expression array, e.g. ["distance", {...}, "Miles"]

        Returns:
            Expression node built by the registered parser

        Raises:
            ParseError: If value is not an operator array, the operator is
                unknown, or the operator's parser rejects it
        """
        if not isinstance(value, (list, tuple)) or not value:
            raise ParseError("Expected an array with at least one element.")

        operator = value[0]
        if not isinstance(operator, str):
            raise ParseError(
                f"Expression name must be a string, but found {type(operator).__name__} instead."
            )

        parser = self._parsers.get(operator)
        if parser is None:
            raise ParseError(f"Unknown expression \"{operator}\".")

        return parser(value)

    def is_available(self, operator: str) -> bool:
        """Check if operator is registered."""
        return operator in self._parsers

    @property
    def available_operators(self) -> Set[str]:
        """Get set of registered operators (snapshot)."""
        return set(self._parsers.keys())

    def get_help(self) -> Dict[str, str]:
        """Get descriptions of all registered operators."""
        return self._descriptions.copy()


def default_registry() -> ExpressionRegistry:
    """Registry with every built-in operator."""
    registry = ExpressionRegistry()
    registry.register('distance', Distance.parse, "Distance from the feature to a GeoJSON geometry")
    return registry
