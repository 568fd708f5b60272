"""
Structured Log Event Types
==========================

Bounded Context: Observability Event Taxonomy

This module defines typed event names for structured logging.

Design:
- Enum-based (prevents typos, enables autocomplete)
- Hierarchical naming (namespace.category.action)
- Searchable in log aggregators (Elasticsearch, CloudWatch Insights)

Event Naming Convention:
    <component>.<category>.<action>

    component: expression, config, error
    category: parse, evaluation
    action: failed, loaded

Example Log Query (CloudWatch Insights):
    fields @timestamp, event, message, metadata.operator
    | filter event = "expression.parse.failed"
    | stats count() by bin(5m)
"""

from enum import Enum


class LogEvent(str, Enum):
    """
    Typed log event names for structured logging.

    Categories:
    - expression.*: Expression lifecycle
    - config.*: Configuration loading
    - error.*: Error conditions
    """

    # ========== Expression Events ==========
    EXPRESSION_PARSED = "expression.parsed"
    """Expression node constructed from its argument array."""

    EXPRESSION_PARSE_FAILED = "expression.parse.failed"
    """Argument array rejected by the parser."""

    EXPRESSION_EVALUATED = "expression.evaluated"
    """Expression evaluated against a feature."""

    EXPRESSION_EVALUATION_FAILED = "expression.evaluation.failed"
    """Evaluation rejected the context or feature."""

    OPERATOR_REGISTERED = "expression.operator.registered"
    """Operator parser added to a registry."""

    # ========== Config Events ==========
    CONFIG_LOADED = "config.loaded"
    """Configuration file loaded and validated."""

    # ========== Error Events ==========
    SERIALIZATION_ERROR = "error.serialization"
    """Failed to encode an expression back to plain values."""
