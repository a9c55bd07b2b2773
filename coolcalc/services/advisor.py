# coolcalc/services/advisor.py
from __future__ import annotations

import os
from typing import Any, Dict, Optional, Union

import requests

from ..core.models import RoomType
from ..core.translations import Language, tr
from .logger import get_logger

DEFAULT_MODEL = "gemini-3-flash-preview"
REQUEST_TIMEOUT_SECONDS = 20

GENERATION_CONFIG: Dict[str, float] = {
    "temperature": 0.7,
    "topK": 40,
    "topP": 0.95,
}

_PROMPTS: Dict[Language, str] = {
    Language.EN: (
        "Acting as an HVAC engineer using ASHRAE standards, analyze a {room_type} of {area} square meters. "
        'Additional context: "{description}". Provide a brief (max 100 words) professional advice on specific '
        "cooling challenges for this space and if any adjustments to standard capacity are needed."
    ),
    Language.FR: (
        "En tant qu'ingénieur CVC utilisant les normes ASHRAE, analysez une pièce de type {room_type} de {area} "
        'mètres carrés. Contexte supplémentaire : "{description}". Fournissez un bref conseil professionnel '
        "(max 100 mots) sur les défis spécifiques de refroidissement pour cet espace et si des ajustements à la "
        "capacité standard sont nécessaires."
    ),
    Language.ZH: (
        "请以遵循ASHRAE标准的暖通空调工程师身份，分析一个面积为{area}平方米的{room_type}。"
        "补充说明：“{description}”。请用不超过100字给出专业建议，说明该空间的具体制冷难点，"
        "以及是否需要调整标准制冷量。"
    ),
}


class AdvisorError(RuntimeError):
    """The advisory service gave no usable answer."""


def build_prompt(area: float, room_type: Union[RoomType, str], description: str,
                 lang: Union[Language, str] = Language.EN) -> str:
    lang = Language.parse(lang)
    return _PROMPTS[lang].format(
        room_type=RoomType.parse(room_type).value,
        area=area,
        description=(description or "").strip(),
    )


def _extract_text(data: Dict[str, Any]) -> str:
    try:
        parts = data["candidates"][0]["content"]["parts"]
    except (KeyError, IndexError, TypeError):
        raise AdvisorError("Response has no candidate content") from None
    if not isinstance(parts, list):
        raise AdvisorError("Response candidate has no parts")
    text = "".join(
        p["text"] for p in parts if isinstance(p, dict) and isinstance(p.get("text"), str)
    ).strip()
    if not text:
        raise AdvisorError("Response candidate is empty")
    return text


class CoolingAdvisor:
    """
    Optional helper asking a Gemini model for short cooling advice.

    Docs: https://ai.google.dev/api/generate-content

    Any failure (no key, HTTP error, timeout, odd payload) yields the
    localized fallback sentence; the reason is kept in ``last_error``.
    """

    BASE_URL = "https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent"

    def __init__(self, api_key: Optional[str] = None, model: Optional[str] = None,
                 timeout: float = REQUEST_TIMEOUT_SECONDS):
        if api_key is None:
            api_key = os.getenv("GEMINI_API_KEY") or os.getenv("API_KEY")
        self.api_key = api_key
        self.model = model or os.getenv("COOLCALC_ADVISOR_MODEL") or DEFAULT_MODEL
        self.timeout = timeout
        self.last_error: Optional[str] = None
        self._log = get_logger("advisor")

    def available(self) -> bool:
        return bool(self.api_key)

    def analyze(self, area: float, room_type: Union[RoomType, str], description: str,
                lang: Union[Language, str] = Language.EN) -> str:
        lang = Language.parse(lang)
        self.last_error = None

        if not self.available():
            self.last_error = "No GEMINI_API_KEY found in environment."
            self._log.info("Advisor unavailable: %s", self.last_error)
            return tr("advisor_fallback", lang)

        payload = {
            "contents": [{"parts": [{"text": build_prompt(area, room_type, description, lang)}]}],
            "generationConfig": dict(GENERATION_CONFIG),
        }
        try:
            resp = requests.post(
                self.BASE_URL.format(model=self.model),
                headers={"x-goog-api-key": self.api_key, "Content-Type": "application/json"},
                json=payload,
                timeout=self.timeout,
            )
            resp.raise_for_status()
            return _extract_text(resp.json())
        except (requests.RequestException, ValueError, AdvisorError) as e:
            self.last_error = str(e)
            self._log.exception("Advisor request failed: %s", e)
            return tr("advisor_fallback", lang)
