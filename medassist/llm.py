"""OpenAI-backed generation of symptom assessments, roadmaps and diet plans."""
import json
import logging
from typing import Any, Dict, List, Optional

from openai import OpenAI, OpenAIError

from .config import OPENAI_API_KEY, OPENAI_MODEL, OPENAI_TIMEOUT_SECONDS

logger = logging.getLogger(__name__)


class LLMError(Exception):
    pass


def _join(items: Optional[List[str]], empty: str) -> str:
    return ", ".join(items) if items else empty


SYMPTOM_SYSTEM = (
    "You are a medical AI assistant providing symptom analysis. "
    "Always emphasize that this is not a substitute for professional medical care."
)

SYMPTOM_PROMPT = """
You are a medical AI assistant. Analyze the following symptoms and provide a comprehensive assessment.

Patient Information:
- Symptoms: {symptoms}
- Severity: {severity}
- Duration: {duration}
- Age: {age}
- Gender: {gender}
- Medical History: {history}
- Current Medications: {medications}

Please provide:
1. Top 3-5 possible conditions with probability percentages
2. Immediate recommendations
3. Urgency level (low/medium/high/emergency)
4. Detailed analysis
5. Red flag symptoms to watch for
6. Follow-up questions to ask

Respond with a JSON object:
{{
  "possibleConditions": [{{"condition": "string", "probability": number, "description": "string"}}],
  "recommendations": ["string"],
  "urgencyLevel": "low|medium|high|emergency",
  "detailedAnalysis": "string",
  "redFlags": ["string"],
  "followUpQuestions": ["string"]
}}

IMPORTANT: This is for informational purposes only and should not replace professional medical advice.
"""

ROADMAP_SYSTEM = "You are a health and wellness AI coach creating personalized health roadmaps."

ROADMAP_PROMPT = """
Based on the following user profile, create a personalized health roadmap:

User Profile:
- Age: {age}
- Gender: {gender}
- Current conditions: {conditions}
- Current medications: {medications}
- Health goals: {goals}
- Activity level: {activity_level}
- Time commitment: {time_commitment}
- Focus areas: {focus_areas}

Create a comprehensive 12-week health roadmap with short-term goals (1-4 weeks),
medium-term goals (1-3 months), long-term goals (3-12 months), weekly action items,
milestones and checkpoints.

Respond with a JSON object:
{{
  "shortTermGoals": [{{"goal": "string", "targetDate": "string", "actionItems": ["string"], "successMetrics": ["string"]}}],
  "mediumTermGoals": [...],
  "longTermGoals": [...],
  "weeklyPlan": [{{"week": number, "focus": "string", "tasks": ["string"], "checkpoints": ["string"]}}],
  "recommendations": ["string"]
}}
"""

DIET_SYSTEM = "You are a nutritionist AI creating personalized meal plans based on health conditions and preferences."

DIET_PROMPT = """
Create a personalized 7-day diet plan based on:

Preferences:
- Diet type: {diet_type}
- Allergies: {allergies}
- Restrictions: {restrictions}
- Health conditions: {conditions}
- Calorie target: {calorie_target}
- Preferred cuisines: {cuisines}
- Age: {age}
- Gender: {gender}
- Weight: {weight}
- Height: {height}

Provide a 7-day meal plan (breakfast, lunch, dinner, 2 snacks) with nutrition per meal,
a shopping list organized by category, and preparation tips.

Respond with a JSON object:
{{
  "weeklyPlan": {{
    "monday": {{
      "breakfast": {{"name": "string", "ingredients": ["string"], "calories": number, "protein": number,
                    "carbs": number, "fat": number, "prepTime": number, "instructions": ["string"]}},
      "lunch": {{...}}, "dinner": {{...}}, "snacks": [{{...}}]
    }}
  }},
  "shoppingList": {{"proteins": [], "vegetables": [], "fruits": [], "grains": [], "dairy": [], "other": []}},
  "nutritionalSummary": {{"dailyAverageCalories": number, "dailyAverageProtein": number,
                          "dailyAverageCarbs": number, "dailyAverageFat": number}}
}}
"""


class OpenAIService:
    def __init__(self, client: Optional[OpenAI] = None, model: str = OPENAI_MODEL):
        self._client = client
        self.model = model

    @property
    def client(self) -> OpenAI:
        if self._client is None:
            self._client = OpenAI(api_key=OPENAI_API_KEY or None, timeout=OPENAI_TIMEOUT_SECONDS)
        return self._client

    def _complete_json(self, system: str, prompt: str, temperature: float, max_tokens: int) -> Dict[str, Any]:
        try:
            # client construction fails without an API key, so it stays inside the try
            response = self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": system},
                    {"role": "user", "content": prompt},
                ],
                temperature=temperature,
                max_tokens=max_tokens,
                response_format={"type": "json_object"},
            )
        except OpenAIError as e:
            logger.error("OpenAI API error: %s", e)
            raise LLMError(str(e)) from e

        raw = (response.choices[0].message.content or "").strip() or "{}"
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.error("LLM returned invalid JSON: %s", raw[:500])
            raise LLMError("invalid JSON from model") from e
        if not isinstance(data, dict):
            raise LLMError("expected a JSON object from model")
        return data

    def analyze_symptoms(self, req: Dict[str, Any]) -> Dict[str, Any]:
        prompt = SYMPTOM_PROMPT.format(
            symptoms=_join(req.get("symptoms"), "None"),
            severity=req.get("severity"),
            duration=req.get("duration"),
            age=req.get("age") or "Not specified",
            gender=req.get("gender") or "Not specified",
            history=_join(req.get("medical_history"), "None provided"),
            medications=_join(req.get("current_medications"), "None provided"),
        )
        return self._complete_json(SYMPTOM_SYSTEM, prompt, temperature=0.3, max_tokens=2000)

    def generate_health_roadmap(self, req: Dict[str, Any]) -> Dict[str, Any]:
        prefs = req.get("preferences") or {}
        prompt = ROADMAP_PROMPT.format(
            age=req.get("age") or "Not specified",
            gender=req.get("gender") or "Not specified",
            conditions=_join(req.get("medical_conditions"), "None"),
            medications=_join(req.get("current_medications"), "None"),
            goals=_join(req.get("health_goals"), "General wellness"),
            activity_level=prefs.get("activity_level") or "Not specified",
            time_commitment=prefs.get("time_commitment") or "Not specified",
            focus_areas=_join(prefs.get("focus_areas"), "Any"),
        )
        return self._complete_json(ROADMAP_SYSTEM, prompt, temperature=0.4, max_tokens=3000)

    def generate_diet_plan(self, req: Dict[str, Any]) -> Dict[str, Any]:
        prompt = DIET_PROMPT.format(
            diet_type=req.get("diet_type"),
            allergies=_join(req.get("allergies"), "None"),
            restrictions=_join(req.get("restrictions"), "None"),
            conditions=_join(req.get("health_conditions"), "None"),
            calorie_target=req.get("calorie_target"),
            cuisines=_join(req.get("cuisines"), "Any"),
            age=req.get("age") or "Not specified",
            gender=req.get("gender") or "Not specified",
            weight=req.get("weight") or "Not specified",
            height=req.get("height") or "Not specified",
        )
        return self._complete_json(DIET_SYSTEM, prompt, temperature=0.4, max_tokens=4000)


_service: Optional[OpenAIService] = None


def get_llm() -> OpenAIService:
    global _service
    if _service is None:
        _service = OpenAIService()
    return _service
