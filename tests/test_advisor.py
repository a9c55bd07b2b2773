"""Tests for coolcalc.services.advisor (mocked, no network calls)."""
from unittest.mock import MagicMock, patch

import pytest
import requests

from coolcalc.core.models import RoomType
from coolcalc.core.translations import Language, tr
from coolcalc.services.advisor import GENERATION_CONFIG, CoolingAdvisor, build_prompt


def _response(payload):
    resp = MagicMock()
    resp.json.return_value = payload
    resp.raise_for_status = MagicMock()
    return resp


OK_PAYLOAD = {"candidates": [{"content": {"parts": [{"text": "Use a 1.5 HP inverter unit."}]}}]}


class TestBuildPrompt:
    def test_english(self):
        prompt = build_prompt(25, RoomType.OFFICE, "  west windows ", Language.EN)
        assert "office of 25 square meters" in prompt
        assert '"west windows"' in prompt
        assert "max 100 words" in prompt

    def test_french(self):
        prompt = build_prompt(25, "kitchen", "", Language.FR)
        assert prompt.startswith("En tant qu'ingénieur CVC")
        assert "kitchen" in prompt

    def test_unknown_language_uses_english(self):
        assert build_prompt(10, RoomType.GYM, "", "de").startswith("Acting as an HVAC engineer")


class TestAnalyze:
    @patch("coolcalc.services.advisor.requests.post")
    def test_success(self, mock_post):
        mock_post.return_value = _response(OK_PAYLOAD)
        advisor = CoolingAdvisor(api_key="k", model="test-model")

        assert advisor.analyze(20, RoomType.BEDROOM, "", Language.EN) == "Use a 1.5 HP inverter unit."
        assert advisor.last_error is None

        args, kwargs = mock_post.call_args
        assert "models/test-model:generateContent" in args[0]
        assert kwargs["headers"]["x-goog-api-key"] == "k"
        assert kwargs["json"]["generationConfig"] == GENERATION_CONFIG
        assert kwargs["timeout"] == advisor.timeout

    @patch("coolcalc.services.advisor.requests.post")
    def test_no_key_skips_request(self, mock_post, monkeypatch):
        monkeypatch.delenv("GEMINI_API_KEY", raising=False)
        monkeypatch.delenv("API_KEY", raising=False)
        advisor = CoolingAdvisor()
        assert advisor.analyze(20, RoomType.BEDROOM, "", Language.FR) == tr("advisor_fallback", Language.FR)
        assert advisor.last_error
        mock_post.assert_not_called()

    def test_key_from_environment(self, monkeypatch):
        monkeypatch.setenv("GEMINI_API_KEY", "env-key")
        assert CoolingAdvisor().available()

    @pytest.mark.parametrize("error", [
        requests.ConnectionError("down"),
        requests.Timeout("slow"),
    ])
    @patch("coolcalc.services.advisor.requests.post")
    def test_network_failure_falls_back(self, mock_post, error):
        mock_post.side_effect = error
        advisor = CoolingAdvisor(api_key="k")
        assert advisor.analyze(20, RoomType.BEDROOM, "", Language.EN) == tr("advisor_fallback", Language.EN)
        assert advisor.last_error

    @patch("coolcalc.services.advisor.requests.post")
    def test_http_error_falls_back(self, mock_post):
        resp = _response({})
        resp.raise_for_status.side_effect = requests.HTTPError("403")
        mock_post.return_value = resp
        advisor = CoolingAdvisor(api_key="k")
        assert advisor.analyze(20, RoomType.BEDROOM, "", Language.ZH) == tr("advisor_fallback", Language.ZH)

    @pytest.mark.parametrize("payload", [
        {},
        {"candidates": []},
        {"candidates": [{"content": {"parts": [{"text": "  "}]}}]},
        {"candidates": [{"content": {"parts": None}}]},
        {"candidates": [{"content": {"parts": [{"text": None}]}}]},
        {"candidates": [{"content": {"parts": "text"}}]},
        [],
    ])
    @patch("coolcalc.services.advisor.requests.post")
    def test_unusable_payload_falls_back(self, mock_post, payload):
        mock_post.return_value = _response(payload)
        advisor = CoolingAdvisor(api_key="k")
        assert advisor.analyze(20, RoomType.BEDROOM, "", Language.EN) == tr("advisor_fallback", Language.EN)
        assert advisor.last_error

    @patch("coolcalc.services.advisor.requests.post")
    def test_invalid_json_falls_back(self, mock_post):
        resp = _response(None)
        resp.json.side_effect = ValueError("no json")
        mock_post.return_value = resp
        advisor = CoolingAdvisor(api_key="k")
        assert advisor.analyze(20, RoomType.BEDROOM, "", Language.EN) == tr("advisor_fallback", Language.EN)
