from __future__ import annotations

import unittest

import httpx

from stratbot.exceptions import (
    ConfigurationError,
    DataProviderError,
    NotFoundError,
    StratBotError,
    ValidationError,
    get_error_response,
)


class ExceptionHierarchyTests(unittest.TestCase):
    def test_hierarchy(self) -> None:
        self.assertTrue(issubclass(ConfigurationError, StratBotError))
        self.assertTrue(issubclass(ValidationError, StratBotError))
        self.assertTrue(issubclass(NotFoundError, DataProviderError))
        self.assertTrue(issubclass(DataProviderError, StratBotError))

    def test_code_defaults_to_class_name(self) -> None:
        self.assertEqual(ConfigurationError("no key").code, "ConfigurationError")
        self.assertEqual(StratBotError("boom", code="CUSTOM").code, "CUSTOM")

    def test_not_found_details(self) -> None:
        error = NotFoundError("Topic with ID Z not found.", topic_id="Z", provider="WorldBank")
        self.assertEqual(str(error), "Topic with ID Z not found.")
        self.assertEqual(
            error.to_dict(),
            {
                "error": "NotFoundError",
                "message": "Topic with ID Z not found.",
                "details": {"topic_id": "Z", "provider": "WorldBank"},
            },
        )

    def test_validation_error_paths(self) -> None:
        errors = [
            {"type": "missing", "loc": ("records", 0, "id"), "msg": "Field required"},
            {"type": "string_type", "loc": ("meta", "sourceid"), "msg": "Input should be a valid string"},
        ]
        error = ValidationError("Failed to parse response", errors=errors)
        self.assertEqual(error.paths, [("records", 0, "id"), ("meta", "sourceid")])
        self.assertEqual(error.details, {"errors": errors})

    def test_validation_error_without_diagnostics(self) -> None:
        error = ValidationError("bad", field="date")
        self.assertEqual(error.paths, [])
        self.assertEqual(error.details, {"field": "date"})


class ErrorResponseTests(unittest.TestCase):
    def test_stratbot_error(self) -> None:
        response = get_error_response(ConfigurationError("no key", details={"required_any_of": ["OPENAI_API_KEY"]}))
        self.assertEqual(response["error"], "ConfigurationError")
        self.assertEqual(response["details"], {"required_any_of": ["OPENAI_API_KEY"]})

    def test_foreign_exception(self) -> None:
        response = get_error_response(httpx.ReadTimeout("timed out"))
        self.assertEqual(response, {"error": "ReadTimeout", "message": "timed out", "details": {}})


if __name__ == "__main__":
    unittest.main()
