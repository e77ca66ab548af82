import json
from types import SimpleNamespace

import httpx
import pytest
from openai import APIConnectionError

from medassist.llm import LLMError, OpenAIService


class FakeCompletions:
    def __init__(self, content=None, error=None):
        self.content = content
        self.error = error
        self.kwargs = None

    def create(self, **kwargs):
        self.kwargs = kwargs
        if self.error:
            raise self.error
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def service(**kw):
    completions = FakeCompletions(**kw)
    client = SimpleNamespace(chat=SimpleNamespace(completions=completions))
    return OpenAIService(client=client, model="test-model"), completions


def test_analyze_symptoms_parses_json():
    svc, completions = service(content=json.dumps({"urgencyLevel": "high"}))
    out = svc.analyze_symptoms({"symptoms": ["chest pain"], "severity": "severe", "duration": "1 hour", "age": 54})
    assert out == {"urgencyLevel": "high"}
    assert completions.kwargs["model"] == "test-model"
    assert completions.kwargs["response_format"] == {"type": "json_object"}
    prompt = completions.kwargs["messages"][1]["content"]
    assert "chest pain" in prompt
    assert "Age: 54" in prompt
    assert "Medical History: None provided" in prompt


def test_roadmap_prompt_includes_preferences():
    svc, completions = service(content="{}")
    svc.generate_health_roadmap({"health_goals": ["sleep better"], "preferences": {"activity_level": "moderate"}})
    prompt = completions.kwargs["messages"][1]["content"]
    assert "sleep better" in prompt
    assert "Activity level: moderate" in prompt


def test_empty_content_is_empty_object():
    svc, _ = service(content=None)
    assert svc.generate_diet_plan({"diet_type": "vegan", "calorie_target": 2000}) == {}


def test_invalid_json_raises():
    svc, _ = service(content="not json")
    with pytest.raises(LLMError):
        svc.analyze_symptoms({"symptoms": []})


def test_non_object_json_raises():
    svc, _ = service(content="[1, 2]")
    with pytest.raises(LLMError):
        svc.analyze_symptoms({"symptoms": []})


def test_api_error_raises():
    request = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")
    svc, _ = service(error=APIConnectionError(request=request))
    with pytest.raises(LLMError):
        svc.generate_diet_plan({"diet_type": "keto"})
