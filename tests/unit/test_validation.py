"""
Unit tests for schema validation of quiz configurations, catalogs and attempts.
"""

import pytest

from src.errors import ConfigurationError
from src.models.quiz_configuration import QuizConfiguration
from src.utils.validation import (
    AttemptValidator,
    QuizConfigurationValidator,
    ValidationResult,
    validate_question_catalog,
    validate_quiz_configuration,
)


@pytest.fixture
def quiz_record():
    return {
        "id": 1,
        "lowestlevel": 1,
        "highestlevel": 10,
        "startinglevel": 3,
        "maximumquestions": 20,
        "minimumquestions": 5,
    }


class TestQuizConfigurationValidation:
    def test_valid_record(self, quiz_record):
        result = validate_quiz_configuration(quiz_record)
        assert result.valid
        assert result.errors == []
        assert result.repairs == []

    def test_missing_field(self, quiz_record):
        del quiz_record["startinglevel"]
        result = validate_quiz_configuration(quiz_record)
        assert not result.valid
        assert any("startinglevel" in e for e in result.errors)

    def test_numeric_strings_are_coerced(self, quiz_record):
        quiz_record["highestlevel"] = "10"
        quiz_record["startinglevel"] = "3"
        result = validate_quiz_configuration(quiz_record)
        assert result.valid
        assert result.data["highestlevel"] == 10
        assert len(result.repairs) == 2
        # Original input is left untouched
        assert quiz_record["highestlevel"] == "10"

    def test_non_integer_strings_are_not_coerced(self, quiz_record):
        quiz_record["highestlevel"] = "10.5"
        assert not validate_quiz_configuration(quiz_record).valid

    def test_unknown_keys_are_stripped(self, quiz_record):
        quiz_record["course"] = 17
        result = validate_quiz_configuration(quiz_record)
        assert result.valid
        assert "course" not in result.data
        assert any("course" in r for r in result.repairs)

    def test_no_repair_when_disabled(self, quiz_record):
        quiz_record["course"] = 17
        assert not QuizConfigurationValidator().validate(quiz_record, auto_repair=False).valid

    def test_starting_level_outside_range(self, quiz_record):
        quiz_record["startinglevel"] = 12
        result = validate_quiz_configuration(quiz_record)
        assert not result.valid
        assert "startinglevel" in result.errors[0]

    def test_lowest_above_highest(self, quiz_record):
        quiz_record["lowestlevel"] = 11
        result = validate_quiz_configuration(quiz_record)
        assert not result.valid
        assert "lowestlevel" in result.errors[0]

    def test_minimum_above_maximum(self, quiz_record):
        quiz_record["minimumquestions"] = 30
        result = validate_quiz_configuration(quiz_record)
        assert not result.valid
        assert "minimumquestions" in result.errors[0]


class TestQuizConfigurationFromDict:
    def test_builds_configuration(self, quiz_record):
        quiz = QuizConfiguration.from_dict(quiz_record)
        assert quiz.startinglevel == 3
        assert quiz.minimumquestions == 5
        assert quiz.to_dict()["maximumquestions"] == 20

    def test_invalid_raises_configuration_error(self, quiz_record):
        quiz_record["maximumquestions"] = 0
        with pytest.raises(ConfigurationError) as excinfo:
            QuizConfiguration.from_dict(quiz_record)
        assert excinfo.value.errors
        assert isinstance(excinfo.value, ValueError)

    @pytest.mark.parametrize(
        "field, value",
        [("maximumquestions", 0), ("startinglevel", "abc"), ("highestlevel", None)],
    )
    def test_unrepairable_record_raises_configuration_error(self, quiz_record, field, value):
        quiz_record[field] = value
        with pytest.raises(ConfigurationError):
            QuizConfiguration.from_dict(quiz_record)

    def test_missing_field_raises_configuration_error(self, quiz_record):
        del quiz_record["lowestlevel"]
        with pytest.raises(ConfigurationError) as excinfo:
            QuizConfiguration.from_dict(quiz_record)
        assert any("lowestlevel" in e for e in excinfo.value.errors)

    def test_configuration_is_frozen(self, quiz_record):
        quiz = QuizConfiguration.from_dict(quiz_record)
        with pytest.raises(AttributeError):
            quiz.startinglevel = 4


class TestCatalogAndAttemptValidation:
    def test_catalog_duplicate_ids(self):
        result = validate_question_catalog(
            {"questions": [{"id": 3, "level": 1}, {"id": 3, "level": 1}]}
        )
        assert not result.valid
        assert "3" in result.errors[0]

    def test_catalog_valid(self):
        assert validate_question_catalog({"questions": [{"id": 3, "level": 1}]})

    def test_attempt_state_enum(self):
        validator = AttemptValidator()
        record = {"id": 1, "uniqueid": 0, "questionsattempted": 0, "attemptstate": "paused"}
        assert not validator.validate(record).valid
        record["attemptstate"] = "complete"
        assert validator.validate(record).valid


def test_validation_result_str():
    assert "passed" in str(ValidationResult(True, []))
    assert "1 error" in str(ValidationResult(False, ["boom"]))


def test_unrepairable_record_is_repaired_only_once():
    validator = QuizConfigurationValidator()
    record = {"id": 1, "lowestlevel": 1, "highestlevel": 10, "startinglevel": 3, "maximumquestions": 0, "extra": 1}

    result = validator.validate(record)

    assert not result.valid
    assert result.repairs == ["Removed unknown key 'extra' at root"]
