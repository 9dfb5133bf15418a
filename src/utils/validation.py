"""
Schema validation for quiz configurations, question catalogs and attempts.

Records usually arrive from form posts or database rows, so integers often
come in as strings and rows carry columns the engine does not know about.
With auto-repair on, the validator works on a copy, drops keys the schema
forbids, turns numeric strings into the numbers the schema asks for, and
reports every change in `ValidationResult.repairs`.
"""

import json
from copy import deepcopy
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from jsonschema import Draft7Validator, FormatChecker, ValidationError

from ..config import config


@dataclass
class ValidationResult:
    """
    Outcome of validating one record.

    Attributes:
        valid: True when the (possibly repaired) record satisfies the schema
        errors: Readable error messages, empty when valid
        data: The record that was checked; a repaired copy if repairs ran
        repairs: Changes made by auto-repair
    """

    valid: bool
    errors: list[str]
    data: Any = None
    repairs: list[str] = field(default_factory=list)

    def __bool__(self) -> bool:
        return self.valid

    def __str__(self) -> str:
        if not self.valid:
            lines = [f"✗ Validation failed with {len(self.errors)} error(s):"]
            lines.extend(f"  - {error}" for error in self.errors)
            return "\n".join(lines)
        suffix = f" ({len(self.repairs)} repair(s) applied)" if self.repairs else ""
        return f"✓ Validation passed{suffix}"


def _to_integer(value: str):
    try:
        number = float(value)
    except ValueError:
        return value
    return int(number) if number.is_integer() else value


def _to_number(value: str):
    try:
        return float(value)
    except ValueError:
        return value


_COERCIONS = {"integer": _to_integer, "number": _to_number}


class SchemaValidator:
    """
    Draft 7 JSON Schema validator with optional auto-repair.

    Usage:
        validator = SchemaValidator(config.paths.attempt_schema)
        result = validator.validate(record, auto_repair=True)
        if not result:
            raise ValueError(result.errors)
    """

    def __init__(self, schema_path: Path | str):
        self.schema_path = Path(schema_path)
        self.schema = json.loads(self.schema_path.read_text(encoding="utf-8"))
        self.validator = Draft7Validator(self.schema, format_checker=FormatChecker())

    def validate(self, data: dict, auto_repair: bool = False) -> ValidationResult:
        """
        Check `data` against the schema.

        Args:
            data: Record to check; never modified
            auto_repair: Retry once on a repaired copy when the record is invalid

        Returns:
            ValidationResult
        """
        errors = [self._describe(error) for error in self.validator.iter_errors(data)]
        if not errors:
            return ValidationResult(valid=True, errors=[], data=data)
        if not auto_repair:
            return ValidationResult(valid=False, errors=errors, data=data)

        repaired = deepcopy(data)
        repairs: list[str] = []
        self._repair(repaired, self.schema, repairs, "root")
        result = self.validate(repaired, auto_repair=False)
        result.repairs = repairs
        return result

    @staticmethod
    def _describe(error: ValidationError) -> str:
        location = ".".join(str(part) for part in error.path) or "root"
        rule = "/".join(str(part) for part in error.schema_path)
        return f"{location}: {error.message} (rule /{rule})"

    def _repair(self, node: Any, schema: Any, repairs: list[str], path: str) -> None:
        """Walk `node` alongside `schema`, fixing it in place."""
        if not isinstance(schema, dict):
            return

        if isinstance(node, list):
            item_schema = schema.get("items")
            for index, item in enumerate(node):
                self._repair(item, item_schema, repairs, f"{path}[{index}]")
            return

        if not isinstance(node, dict):
            return

        properties = schema.get("properties", {})
        if schema.get("additionalProperties") is False:
            for key in [k for k in node if k not in properties]:
                del node[key]
                repairs.append(f"Removed unknown key '{key}' at {path}")

        for key, subschema in properties.items():
            if key not in node:
                continue
            value = node[key]
            coerce = _COERCIONS.get(subschema.get("type"))
            if isinstance(value, str) and coerce is not None:
                coerced = coerce(value)
                if coerced is not value:
                    node[key] = coerced
                    repairs.append(f"Coerced {path}.{key}: '{value}' → {coerced}")
            else:
                self._repair(value, subschema, repairs, f"{path}.{key}")


class QuizConfigurationValidator(SchemaValidator):
    """
    Validator for adaptive quiz configuration records.

    Adds checks JSON Schema cannot express:
    - lowestlevel <= startinglevel <= highestlevel
    - minimumquestions <= maximumquestions
    """

    def __init__(self, schema_path: Optional[Path] = None):
        super().__init__(schema_path or config.paths.quiz_configuration_schema)

    def validate(self, data: dict, auto_repair: bool = True) -> ValidationResult:
        result = super().validate(data, auto_repair=auto_repair)
        if not result.valid:
            return result

        record = result.data
        errors = []

        lowest = record["lowestlevel"]
        highest = record["highestlevel"]
        starting = record["startinglevel"]
        if lowest > highest:
            errors.append(f"lowestlevel ({lowest}) must be <= highestlevel ({highest})")
        elif not lowest <= starting <= highest:
            errors.append(
                f"startinglevel ({starting}) must be within [{lowest}, {highest}]"
            )

        minimum = record.get("minimumquestions")
        if minimum is not None and minimum > record["maximumquestions"]:
            errors.append(
                f"minimumquestions ({minimum}) must be <= maximumquestions "
                f"({record['maximumquestions']})"
            )

        if errors:
            return ValidationResult(valid=False, errors=errors, data=record, repairs=result.repairs)
        return result


class QuestionCatalogValidator(SchemaValidator):
    """Validator for question catalog documents; question IDs must be unique."""

    def __init__(self, schema_path: Optional[Path] = None):
        super().__init__(schema_path or config.paths.question_catalog_schema)

    def validate(self, data: dict, auto_repair: bool = False) -> ValidationResult:
        result = super().validate(data, auto_repair=auto_repair)
        if not result.valid:
            return result

        seen = set()
        duplicates = set()
        for question in result.data["questions"]:
            if question["id"] in seen:
                duplicates.add(question["id"])
            seen.add(question["id"])

        if duplicates:
            dups_str = ", ".join(str(d) for d in sorted(duplicates))
            return ValidationResult(
                valid=False,
                errors=[f"Duplicate question IDs found: {dups_str} (IDs must be unique)"],
                data=result.data,
                repairs=result.repairs,
            )
        return result


class AttemptValidator(SchemaValidator):
    """Validator for persisted attempt records."""

    def __init__(self, schema_path: Optional[Path] = None):
        super().__init__(schema_path or config.paths.attempt_schema)


def validate_quiz_configuration(data: dict, auto_repair: bool = True) -> ValidationResult:
    """Convenience function to validate a quiz configuration record."""
    return QuizConfigurationValidator().validate(data, auto_repair=auto_repair)


def validate_question_catalog(data: dict) -> ValidationResult:
    """Convenience function to validate a question catalog document."""
    return QuestionCatalogValidator().validate(data)
