"""Tests for structured logging and redaction."""

import io
import json
import logging

from readmegen.core.logging import StructuredFormatter, redact_sensitive, setup_logging


class TestRedaction:
    """Tests for secret redaction."""

    def test_redacts_key_query_param(self):
        url = "https://gemini.test/v1beta/models/m:generateContent?key=AIzaSECRET&alt=json"
        redacted = redact_sensitive(url)
        assert "AIzaSECRET" not in redacted
        assert "alt=json" in redacted

    def test_redacts_config_dict(self):
        data = {
            "gemini": {"api_key": "AIzaSECRET", "api_base_url": "https://gemini.test"},
            "github": {"token": "ghp_secret", "api_base_url": "https://api.github.com"},
        }
        redacted = redact_sensitive(data)
        assert redacted["gemini"]["api_key"] == "***REDACTED***"
        assert redacted["github"]["token"] == "***REDACTED***"
        assert redacted["gemini"]["api_base_url"] == "https://gemini.test"

    def test_unset_secrets_stay_none(self):
        assert redact_sensitive({"token": None}) == {"token": None}

    def test_plain_text_untouched(self):
        assert redact_sensitive("Fetched octocat/Hello-World") == "Fetched octocat/Hello-World"

    def test_words_containing_token_untouched(self):
        message = "Fetched huggingface/tokenizers: 3 languages, 12 top-level entries"
        assert redact_sensitive(message) == message

    def test_redacts_bearer_header(self):
        redacted = redact_sensitive("Authorization: Bearer ghp_secret")
        assert "ghp_secret" not in redacted
        assert redacted == "Authorization=***REDACTED***"

    def test_redacts_token_assignment(self):
        assert redact_sensitive("access_token=abc123 sent") == "access_token=***REDACTED*** sent"


class TestStructuredFormatter:
    """Tests for JSON log output."""

    def test_includes_context_fields(self):
        record = logging.LogRecord("readmegen", logging.INFO, __file__, 1, "generating", None, None)
        record.owner = "octocat"
        record.archetype = "library"

        data = json.loads(StructuredFormatter().format(record))

        assert data["message"] == "generating"
        assert data["level"] == "INFO"
        assert data["owner"] == "octocat"
        assert data["archetype"] == "library"
        assert "repo" not in data


def test_setup_logging_quiets_httpx():
    setup_logging("DEBUG", structured=True)

    assert logging.getLogger().level == logging.DEBUG
    assert isinstance(logging.getLogger().handlers[0].formatter, StructuredFormatter)
    assert logging.getLogger("httpx").level == logging.WARNING


def test_plain_output_is_redacted():
    stream = io.StringIO()
    setup_logging("INFO", structured=False, stream=stream)

    logging.getLogger("readmegen.test").info("POST https://gemini.test/x?key=AIzaSECRET")

    assert "AIzaSECRET" not in stream.getvalue()
    assert "key=***REDACTED***" in stream.getvalue()
