"""
Tests for JSON Schema Contract Validators

Комплексное тестирование JSON Schema валидаторов:
- Валидность самих схем
- Валидация правильных данных
- Детекция нарушений required полей и типов
- Детекция нарушений pattern/enum
- Интеграция с Pydantic моделями дерева (model_dump → load)
"""

import pytest
from jsonschema import ValidationError

from exprstep.core.contracts import (
    EvaluationRequestValidator,
    ExpressionTreeValidator,
    SchemaLoader,
    load_evaluation_request,
    load_expression_tree,
    validate_evaluation_request,
    validate_expression_tree,
)
from exprstep.core.errors import (
    ArityMismatchError,
    InvalidIdentifierError,
    ReservedIdentifierError,
)
from exprstep.core.math.numeric import Integer, Rational, Real
from exprstep.tree import build_recursively, evaluate, tokenize


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_evaluation_request():
    """Валидный evaluation_request для тестирования."""
    return {
        "tokens": ["(", "+", "x", "(", "*", "rate", "2", ")", ")"],
        "bindings": {
            "x": "1/2",
            "rate": "0.25",
        },
    }


@pytest.fixture
def sample_tree():
    """Дерево со всеми видами узлов и литералов."""
    return build_recursively(tokenize("(+ x (* 2 1/2) (sqrt 2.5) (- 7))"))


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Тесты загрузчика схем."""

    @pytest.mark.parametrize("schema_name", ["evaluation_request", "expression_tree"])
    def test_schemas_are_valid(self, schema_name):
        schema = SchemaLoader().load_schema(schema_name)
        assert schema["$schema"] == "https://json-schema.org/draft/2020-12/schema"

    def test_schema_cached(self):
        loader = SchemaLoader()
        assert loader.load_schema("expression_tree") is loader.load_schema("expression_tree")

    def test_missing_schema(self):
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")


# =============================================================================
# EVALUATION REQUEST
# =============================================================================


class TestEvaluationRequest:
    """evaluation_request контракт."""

    def test_valid(self, valid_evaluation_request):
        validate_evaluation_request(valid_evaluation_request)
        EvaluationRequestValidator().validate(valid_evaluation_request)

    def test_load(self, valid_evaluation_request):
        tokens, bindings = load_evaluation_request(valid_evaluation_request)

        assert tokens == valid_evaluation_request["tokens"]
        assert bindings == {"x": Rational.of(1, 2), "rate": Real("0.25")}

    def test_load_and_evaluate(self, valid_evaluation_request):
        tokens, bindings = load_evaluation_request(valid_evaluation_request)
        assert evaluate(build_recursively(tokens), bindings) == Integer(1)

    def test_empty_bindings(self):
        tokens, bindings = load_evaluation_request({"tokens": ["42"], "bindings": {}})
        assert tokens == ["42"]
        assert bindings == {}

    def test_missing_bindings(self):
        with pytest.raises(ValidationError):
            validate_evaluation_request({"tokens": ["1"]})

    def test_empty_tokens(self):
        with pytest.raises(ValidationError):
            validate_evaluation_request({"tokens": [], "bindings": {}})

    def test_token_with_whitespace(self):
        with pytest.raises(ValidationError):
            validate_evaluation_request({"tokens": ["+ 1"], "bindings": {}})

    @pytest.mark.parametrize("literal", ["abc", "1/x", "", "1 2"])
    def test_binding_not_a_literal(self, valid_evaluation_request, literal):
        valid_evaluation_request["bindings"]["x"] = literal
        with pytest.raises(ValidationError):
            validate_evaluation_request(valid_evaluation_request)

    def test_binding_not_a_string(self, valid_evaluation_request):
        valid_evaluation_request["bindings"]["x"] = 5
        with pytest.raises(ValidationError):
            validate_evaluation_request(valid_evaluation_request)

    def test_additional_property(self, valid_evaluation_request):
        valid_evaluation_request["extra"] = True
        with pytest.raises(ValidationError):
            EvaluationRequestValidator().validate(valid_evaluation_request)

    def test_invalid_binding_name(self):
        with pytest.raises(InvalidIdentifierError):
            load_evaluation_request({"tokens": ["x1"], "bindings": {"x1": "1"}})

    @pytest.mark.parametrize("name", ["e", "pi"])
    def test_reserved_binding_name(self, name):
        """Константы не передаются через bindings."""
        with pytest.raises(ReservedIdentifierError) as exc_info:
            load_evaluation_request({"tokens": [name], "bindings": {name: "3"}})

        assert exc_info.value.name == name


# =============================================================================
# EXPRESSION TREE
# =============================================================================


class TestExpressionTree:
    """expression_tree контракт."""

    def test_model_dump_is_valid(self, sample_tree):
        validate_expression_tree(sample_tree.model_dump(mode="json"))

    def test_round_trip(self, sample_tree):
        assert load_expression_tree(sample_tree.model_dump(mode="json")) == sample_tree

    def test_literal_root(self):
        tree = load_expression_tree({"kind": "literal", "value": "10.0"})
        assert tree.value == Real(10)

    def test_unknown_operator(self):
        data = {"kind": "operation", "operator": "foo", "operands": []}
        with pytest.raises(ValidationError):
            validate_expression_tree(data)

    def test_unknown_kind(self):
        with pytest.raises(ValidationError):
            ExpressionTreeValidator().validate({"kind": "variable", "name": "x"})

    def test_bad_literal(self):
        with pytest.raises(ValidationError):
            validate_expression_tree({"kind": "literal", "value": "abc"})

    def test_nested_error_detected(self):
        data = {
            "kind": "operation",
            "operator": "+",
            "operands": [{"kind": "literal", "value": 1}],
        }
        with pytest.raises(ValidationError):
            validate_expression_tree(data)

    def test_arity_checked_on_load(self):
        data = {"kind": "operation", "operator": "ln", "operands": []}
        with pytest.raises(ArityMismatchError):
            load_expression_tree(data)

    def test_identifier_checked_on_load(self):
        with pytest.raises(InvalidIdentifierError):
            load_expression_tree({"kind": "identifier", "name": "x1"})
