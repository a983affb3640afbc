"""Composable validators for untrusted JSON.

A schema is built from small validator objects (``Number``, ``String``,
``ArrayOf``, ``Struct``, ``TaggedUnion`` ...). Each one renders itself to a
JSON Schema fragment, which ``jsonschema`` uses to collect every structural
problem in one pass, and knows how to narrow an already-valid value into
its Python shape.

    >>> decode(ArrayOf(Number()), [1, 2, 3], name="ids")
    (1, 2, 3)
"""
import json
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional, Sequence

from jsonschema import Draft202012Validator

from hnitems.errors import Failure, ValidationError


class Absent:
    """Marker for an optional field whose key was missing from the input."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "ABSENT"

    def __reduce__(self):
        return (Absent, ())


ABSENT = Absent()


class Validator:
    def json_schema(self) -> Dict[str, Any]:
        raise NotImplementedError

    def narrow(self, value: Any) -> Any:
        return value

    def describe(self) -> str:
        return _describe(self.json_schema())

    @property
    def checker(self) -> Draft202012Validator:
        checker = self.__dict__.get("_checker")
        if checker is None:
            checker = self.__dict__["_checker"] = Draft202012Validator(self.json_schema())
        return checker

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.describe()}>"


class Number(Validator):
    # Loose on purpose: 3.0 is accepted for integer fields such as ids.
    def json_schema(self):
        return {"type": "number"}


class String(Validator):
    def json_schema(self):
        return {"type": "string"}


class NonEmptyString(Validator):
    def json_schema(self):
        return {"type": "string", "minLength": 1}


class Boolean(Validator):
    def json_schema(self):
        return {"type": "boolean"}


class Literal(Validator):
    def __init__(self, value: str):
        self.value = value

    def json_schema(self):
        return {"const": self.value}


class ArrayOf(Validator):
    def __init__(self, items: Validator):
        self.items = items

    def json_schema(self):
        return {"type": "array", "items": self.items.json_schema()}

    def narrow(self, value):
        return tuple(self.items.narrow(element) for element in value)


class OptionalField(Validator):
    """Accepts a missing key; a present key must satisfy ``inner``."""

    def __init__(self, inner: Validator):
        self.inner = inner

    def json_schema(self):
        return self.inner.json_schema()

    def narrow(self, value):
        return self.inner.narrow(value)


def optional(inner: Validator) -> OptionalField:
    return OptionalField(inner)


class Struct(Validator):
    """An object with declared fields. Undeclared keys are ignored.

    Structs intersect with ``&``: the result declares the fields of both
    and builds values with the left operand's factory.
    """

    def __init__(self, fields: Dict[str, Validator], factory: Callable[..., Any] = dict):
        self.fields = dict(fields)
        self.factory = factory

    def json_schema(self):
        return {
            "type": "object",
            "properties": {name: field.json_schema() for name, field in self.fields.items()},
            "required": [
                name for name, field in self.fields.items()
                if not isinstance(field, OptionalField)
            ],
        }

    def narrow(self, value):
        values = {}
        for name, field in self.fields.items():
            values[name] = field.narrow(value[name]) if name in value else ABSENT
        return self.factory(**values)

    def merge(self, *others: "Struct") -> "Struct":
        fields = dict(self.fields)
        for other in others:
            fields.update(other.fields)
        return Struct(fields, self.factory)

    def __and__(self, other: "Struct") -> "Struct":
        return self.merge(other)

    def build(self, factory: Callable[..., Any]) -> "Struct":
        return Struct(self.fields, factory)


class TaggedUnion(Validator):
    """One of several structs, chosen by the literal value of ``tag``.

    The variant is looked up by tag value, so an object is only ever checked
    against the variant it claims to be.
    """

    def __init__(self, tag: str, variants: Sequence[Struct]):
        self.tag = tag
        self.variants = {}
        for variant in variants:
            literal = variant.fields.get(tag)
            if not isinstance(literal, Literal):
                raise TypeError(f"variant {variant!r} has no literal {tag!r} field")
            if literal.value in self.variants:
                raise ValueError(f"duplicate variant tag {literal.value!r}")
            self.variants[literal.value] = variant

    @property
    def tags(self) -> List[str]:
        return list(self.variants)

    def variant_for(self, value: Any) -> Optional[Struct]:
        if not isinstance(value, dict):
            return None
        tag = value.get(self.tag)
        if not isinstance(tag, str):
            return None
        return self.variants.get(tag)

    def tag_failure(self, value: Any, name: str) -> Failure:
        if not isinstance(value, dict):
            return Failure(name, "object", _actual(value))
        actual = _actual(value[self.tag]) if self.tag in value else "undefined"
        return Failure(_format_path(name, [self.tag]), self.describe(), actual)

    def json_schema(self):
        return {
            "type": "object",
            "required": [self.tag],
            "properties": {self.tag: {"enum": self.tags}},
            "allOf": [
                {
                    "if": {"required": [self.tag], "properties": {self.tag: {"const": tag}}},
                    "then": variant.json_schema(),
                }
                for tag, variant in self.variants.items()
            ],
        }

    def describe(self) -> str:
        return "one of " + " | ".join(repr(tag) for tag in self.tags)

    def narrow(self, value):
        return self.variant_for(value).narrow(value)


def failures(schema: Validator, value: Any, name: str = "item") -> List[Failure]:
    """Return every problem with ``value``; an empty list means it is valid.

    Identical failures reported twice for the same path are kept once;
    distinct failures on one path are all kept.
    """
    if isinstance(schema, TaggedUnion):
        variant = schema.variant_for(value)
        if variant is None:
            return [schema.tag_failure(value, name)]
        schema = variant

    collected: List[Failure] = []
    for error in schema.checker.iter_errors(value):
        for failure in _convert(error, name):
            if failure not in collected:
                collected.append(failure)
    return collected


def decode(schema: Validator, value: Any, name: str = "item", subject: Optional[str] = None) -> Any:
    """Validate ``value`` against ``schema`` and return the narrowed value.

    Raises ValidationError carrying all failures; nothing is returned for a
    partially valid value.
    """
    problems = failures(schema, value, name)
    if problems:
        raise ValidationError(problems, subject or name)
    return schema.narrow(value)


def _convert(error, name: str) -> Iterator[Failure]:
    if error.validator == "required":
        for key in error.validator_value:
            if key not in error.instance:
                expected = _describe(error.schema.get("properties", {}).get(key, {}))
                yield Failure(_format_path(name, [*error.absolute_path, key]), expected, "undefined")
        return
    yield Failure(_format_path(name, error.absolute_path), _describe(error.schema), _actual(error.instance))


def _format_path(name: str, parts: Iterable[Any]) -> str:
    path = name
    for part in parts:
        path += f"[{part}]" if isinstance(part, int) else f".{part}"
    return path


def _describe(schema: Dict[str, Any]) -> str:
    if "const" in schema:
        return repr(schema["const"])
    if "enum" in schema:
        return "one of " + " | ".join(repr(value) for value in schema["enum"])
    kind = schema.get("type")
    if kind == "array":
        return f"array of {_describe(schema.get('items', {}))}"
    if kind == "string" and schema.get("minLength"):
        return "non-empty string"
    return kind or "value"


def _actual(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return f"boolean {json.dumps(value)}"
    if isinstance(value, (int, float)):
        return f"number {value!r}"
    if isinstance(value, str):
        shown = json.dumps(value[:40]) + ("..." if len(value) > 40 else "")
        return f"string {shown}"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__
