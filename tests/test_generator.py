"""Tests for provider-assisted action plan generation."""
from __future__ import annotations

import threading

from conftest import make_context, make_requirement, make_result

from actions.aggregator import generate_deterministic
from actions.generator import (
    build_best_practice_prompt,
    build_product_context_summary,
    generate_with_provider,
)
from actions.aggregator import merge_actions
from providers.base import LLMProvider, LLMRequest, LLMResponse


class FakeProvider:
    """Provider double that records requests and can fail selected actions."""

    id = "fake"
    name = "Fake"
    model = "fake-model"

    def __init__(self, fail_titles: tuple[str, ...] = (), reply: str = "Tailored guidance."):
        self.fail_titles = fail_titles
        self.reply = reply
        self.requests: list[LLMRequest] = []
        self._lock = threading.Lock()

    def complete(self, request: LLMRequest) -> LLMResponse:
        with self._lock:
            self.requests.append(request)
        prompt = request.messages[0].content
        if any(f"Title: {t}\n" in prompt for t in self.fail_titles):
            raise RuntimeError("provider unavailable")
        return LLMResponse(content=f"  {self.reply}  ")


def _results(count: int = 7):
    actions = [
        make_requirement(id=f"act-{i}", title=f"Action {i}", priority="important", jurisdictions=("uk",))
        for i in range(count)
    ]
    return [make_result("uk", actions=actions)]


class TestGenerateWithProvider:
    """Tests for tailored guidance and per-action fallback."""

    def test_fake_provider_satisfies_protocol(self):
        assert isinstance(FakeProvider(), LLMProvider)

    def test_guidance_comes_from_provider(self, now):
        provider = FakeProvider()
        outcome = generate_with_provider(make_context(), _results(), provider, now)

        assert outcome.errors == []
        assert len(provider.requests) == 7
        assert all(i.best_practice == "Tailored guidance." for i in outcome.action_plan.all_items())

    def test_request_settings_from_config(self, now):
        provider = FakeProvider()
        generate_with_provider(make_context(), _results(1), provider, now)

        request = provider.requests[0]
        assert request.max_tokens == 500
        assert request.temperature == 0.3
        assert "compliance advisor" in request.system_prompt

    def test_failure_falls_back_per_action(self, now):
        """One failing action records an error and keeps the deterministic text."""
        provider = FakeProvider(fail_titles=("Action 3",))
        results = _results()

        outcome = generate_with_provider(make_context(), results, provider, now)
        deterministic = generate_deterministic(results, now)

        assert [e.action_id for e in outcome.errors] == ["act-3"]
        assert outcome.errors[0].error.startswith("Failed to generate best practice: ")
        by_id = {i.id: i for i in outcome.action_plan.all_items()}
        expected = {i.id: i for i in deterministic.all_items()}
        assert by_id["act-3"].best_practice == expected["act-3"].best_practice
        assert by_id["act-0"].best_practice == "Tailored guidance."

    def test_plan_shape_matches_deterministic(self, now):
        """Only best-practice text differs from the deterministic plan."""
        results = [
            make_result("eu-gdpr", actions=[make_requirement(id="x", priority="critical")]),
            make_result("uk", actions=[make_requirement(id="x", priority="recommended", jurisdictions=("uk",))]),
        ]
        outcome = generate_with_provider(make_context(), results, FakeProvider(fail_titles=("Do the thing",)), now)
        deterministic = generate_deterministic(results, now)

        assert outcome.action_plan == deterministic

    def test_blank_reply_is_a_failure(self, now):
        outcome = generate_with_provider(make_context(), _results(2), FakeProvider(reply=""), now)
        assert len(outcome.errors) == 2


class TestPrompt:
    """Tests for the prompt sent to the provider."""

    def test_context_summary(self, chatbot_context):
        summary = build_product_context_summary(chatbot_context)
        assert "Product type: generator" in summary
        assert "Target markets: eu-ai-act, eu-gdpr, china" in summary
        assert "GenAI: generates text content" in summary
        assert "Agentic AI" not in summary

    def test_action_section(self, chatbot_context):
        merged = merge_actions([
            make_requirement(id="a", title="Label outputs", priority="critical", jurisdictions=("china",)),
            make_requirement(id="a", title="Label outputs", priority="important", jurisdictions=("eu-ai-act",)),
        ])[0]
        prompt = build_best_practice_prompt(merged, chatbot_context)
        assert "Title: Label outputs" in prompt
        assert "Applicable jurisdictions: china, eu-ai-act" in prompt
        assert "Priority: critical" in prompt
        assert "Return ONLY the guidance paragraph" in prompt
