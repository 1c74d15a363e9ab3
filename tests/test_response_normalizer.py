"""Response normalization: overrides, closing sentences, fallbacks and short-circuits."""

import pytest

from agents.generation_invoker import NO_OUTPUT
from core.errors import GenerationFailedError
from tasks.assistant_tasks import MANDATORY_CLOSING
from tasks.case_analysis_tasks import STRATEGY_DISCLAIMER
from tasks.evidence_tasks import EMPTY_TIMELINE_SUMMARY
from tools.response_normalizer import normalize, short_circuit


def test_every_override_replaces_model_text(registry) -> None:
    overridden = [registry.get_task_definition(n) for n in registry.task_names()]
    overridden = [t for t in overridden if t.overrides]
    assert {t.name for t in overridden} == {
        "suggest_legal_strategies",
        "analyze_document_content",
        "analyze_violation_report",
        "generate_negotiation_advice",
        "generate_procedural_roadmap",
    }
    for task in overridden:
        out = normalize({"disclaimer": "Totally legal advice."}, task, {})
        for field, literal in task.overrides.items():
            assert out[field] == literal, task.name


def test_closing_sentence_is_appended_once(registry) -> None:
    task = registry.get_task_definition("interactive_assistant")

    out = normalize({"responseText": "Discovery is the exchange of evidence."}, task, {})
    assert out["responseText"] == "Discovery is the exchange of evidence.\n\n" + MANDATORY_CLOSING

    already = "Discovery explained. " + MANDATORY_CLOSING
    assert normalize({"responseText": already}, task, {})["responseText"] == already

    assert normalize({"responseText": ""}, task, {})["responseText"] == MANDATORY_CLOSING


def test_no_output_uses_fallback_with_overrides(registry) -> None:
    task = registry.get_task_definition("suggest_legal_strategies")
    out = normalize(NO_OUTPUT, task, {})
    assert out["suggestedStrategies"] == []
    assert out["suggestedMotions"] == []
    assert out["disclaimer"] == STRATEGY_DISCLAIMER

    out["suggestedStrategies"].append("mutated")
    assert task.fallback["suggestedStrategies"] == []


def test_no_output_without_fallback_fails(registry) -> None:
    task = registry.get_task_definition("analyze_violation_report")
    with pytest.raises(GenerationFailedError) as exc:
        normalize(NO_OUTPUT, task, {})
    assert str(exc.value) == "AI failed to provide a violation report analysis."


def test_normalize_leaves_model_response_untouched(registry) -> None:
    task = registry.get_task_definition("analyze_document_content")
    response = {"summary": "A notice.", "potentialIssues": ["Deadlines"], "keywords": [], "disclaimer": "x"}
    out = normalize(response, task, {})
    assert response["disclaimer"] == "x"
    out["potentialIssues"].append("More")
    assert response["potentialIssues"] == ["Deadlines"]


def test_short_circuit_only_when_condition_holds(registry) -> None:
    timeline = registry.get_task_definition("analyze_timeline_events")
    assert short_circuit(timeline, {"events": []}) == {
        "analysisSummary": EMPTY_TIMELINE_SUMMARY,
        "potentialFocusAreas": [],
    }
    events = [{"date": "2024-05-01", "type": "Deadline", "description": "File answer"}]
    assert short_circuit(timeline, {"events": events}) is None

    laws = registry.get_task_definition("suggest_relevant_laws")
    assert short_circuit(laws, {"caseDetails": "anything"}) is None
