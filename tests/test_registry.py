import pytest

from sextant_expression import Distance, ExpressionRegistry, ParseError, default_registry

ORIGIN = {"type": "Point", "coordinates": [0.0, 0.0]}


def test_default_registry_knows_distance():
    registry = default_registry()
    assert registry.is_available("distance")
    assert registry.available_operators == {"distance"}
    assert "distance" in registry.get_help()


def test_parse_dispatches_to_parser():
    expr = default_registry().parse(["distance", ORIGIN, "Miles"])
    assert expr == Distance.parse(["distance", ORIGIN, "Miles"])


def test_parser_errors_propagate():
    with pytest.raises(ParseError, match="found 0 instead"):
        default_registry().parse(["distance"])


@pytest.mark.parametrize("value, message", [
    ([], "Expected an array with at least one element."),
    ("distance", "Expected an array with at least one element."),
    ([7, ORIGIN], "Expression name must be a string, but found int instead."),
    (["within", ORIGIN], 'Unknown expression "within".'),
])
def test_invalid_expressions(value, message):
    with pytest.raises(ParseError) as exc:
        default_registry().parse(value)
    assert str(exc.value) == message


def test_duplicate_registration_rejected():
    registry = default_registry()
    with pytest.raises(ValueError, match="already registered"):
        registry.register("distance", Distance.parse, "again")


def test_custom_operator():
    calls = []

    def parse_marker(value):
        calls.append(value)
        return Distance.parse(["distance", ORIGIN])

    registry = ExpressionRegistry()
    registry.register("marker", parse_marker, "Test operator")

    registry.parse(["marker", 1])
    assert calls == [["marker", 1]]
    assert registry.get_help() == {"marker": "Test operator"}


def test_available_operators_is_a_snapshot():
    registry = default_registry()
    operators = registry.available_operators
    operators.add("bogus")
    assert not registry.is_available("bogus")
