"""Dispatcher end to end with a mocked invoker: validation, routing and error mapping."""

import pytest

from agents.generation_invoker import NO_OUTPUT, GenerationInvoker
from agents.task_dispatcher import UNEXPECTED_ERROR_MESSAGE, TaskDispatcher
from core.errors import SchemaViolationError, TransportError
from tasks.assistant_tasks import MANDATORY_CLOSING
from tasks.evidence_tasks import DOCUMENT_ANALYSIS_DISCLAIMER, EMPTY_TIMELINE_SUMMARY
from tasks.registry import build_default_registry

CASE_NARRATIVE = (
    "I was evicted from my apartment without any written notice and the landlord changed "
    "the locks while I was at work, keeping all of my belongings inside."
)


def test_relevant_laws_returns_model_output(dispatcher, invoker) -> None:
    invoker.invoke.return_value = {"relevantLaws": "X", "confidenceScore": 0.7}

    result = dispatcher.dispatch("suggest_relevant_laws", {"caseDetails": CASE_NARRATIVE})

    assert result == {"relevantLaws": "X", "confidenceScore": 0.7}
    prompt, schema = invoker.invoke.call_args.args
    assert CASE_NARRATIVE in prompt
    assert schema.name == "SuggestRelevantLawsOutput"


def test_document_disclaimer_is_replaced(dispatcher, invoker) -> None:
    invoker.invoke.return_value = {
        "summary": "A summons to appear.",
        "potentialIssues": ["Check the appearance date"],
        "keywords": ["summons"],
        "disclaimer": "Trust me.",
    }

    result = dispatcher.dispatch("analyze_document_content", {"documentLabel": "Summons"})

    assert result["disclaimer"] == DOCUMENT_ANALYSIS_DISCLAIMER
    assert result["summary"] == "A summons to appear."


def test_assistant_appends_mandatory_closing(dispatcher, invoker) -> None:
    invoker.invoke.return_value = {"responseText": "Discovery is the exchange of evidence."}

    result = dispatcher.dispatch("interactive_assistant", {"userQuery": "What is discovery?"})

    assert result["responseText"].endswith(MANDATORY_CLOSING)
    assert result["responseText"].startswith("Discovery is the exchange of evidence.")


def test_missing_required_field_is_reported_without_calling_model(dispatcher, invoker) -> None:
    result = dispatcher.dispatch("analyze_violation_report", {
        "narrative": CASE_NARRATIVE,
        "violationCategory": "Unlawful eviction",
    })

    assert "jurisdiction" in result["error"]
    assert result["error"].startswith("Invalid input:")
    invoker.invoke.assert_not_called()


def test_custom_length_message_is_surfaced(dispatcher, invoker) -> None:
    result = dispatcher.dispatch("suggest_relevant_laws", {"caseDetails": "Too short."})

    assert result == {"error": "Invalid input: caseDetails: Case details must be at least 50 characters long."}
    invoker.invoke.assert_not_called()


def test_empty_timeline_short_circuits(dispatcher, invoker) -> None:
    result = dispatcher.dispatch("analyze_timeline_events", {"events": []})

    assert result == {"analysisSummary": EMPTY_TIMELINE_SUMMARY, "potentialFocusAreas": []}
    invoker.invoke.assert_not_called()


def test_empty_document_list_short_circuits_filing_decision(dispatcher, invoker) -> None:
    result = dispatcher.dispatch("suggest_filing_decision", {
        "caseDetails": CASE_NARRATIVE,
        "caseCategory": "civil",
        "relevantLaws": "Implied warranty of habitability",
        "dueProcessViolationScore": "High Risk",
        "suggestedDocumentTypes": [],
    })

    assert result["topSuggestions"] == []
    assert "No initial document types" in result["filingAdvice"]
    invoker.invoke.assert_not_called()


def test_no_output_falls_back_or_fails(dispatcher, invoker) -> None:
    invoker.invoke.return_value = NO_OUTPUT

    assistant = dispatcher.dispatch("interactive_assistant", {"userQuery": "Can I sue?"})
    assert assistant["responseText"].startswith("I apologize")
    assert assistant["responseText"].endswith(MANDATORY_CLOSING)

    laws = dispatcher.dispatch("suggest_relevant_laws", {"caseDetails": CASE_NARRATIVE})
    assert laws["error"].startswith("AI failed to suggest relevant laws.")


def test_unknown_task(dispatcher, invoker) -> None:
    assert dispatcher.dispatch("draft_my_will", {}) == {"error": "Unknown task: 'draft_my_will'"}
    invoker.invoke.assert_not_called()


def test_transport_and_schema_errors_become_error_results(dispatcher, invoker) -> None:
    invoker.invoke.side_effect = TransportError()
    result = dispatcher.dispatch("interactive_assistant", {"userQuery": "What is bail?"})
    assert result == {"error": str(TransportError())}

    invoker.invoke.side_effect = SchemaViolationError()
    result = dispatcher.dispatch("interactive_assistant", {"userQuery": "What is bail?"})
    assert result == {"error": str(SchemaViolationError())}


def test_unexpected_exception_is_contained(dispatcher, invoker) -> None:
    invoker.invoke.side_effect = KeyError("boom")
    result = dispatcher.dispatch("interactive_assistant", {"userQuery": "What is bail?"})
    assert result == {"error": UNEXPECTED_ERROR_MESSAGE}


def test_analyze_case_routes_by_category(dispatcher, invoker) -> None:
    invoker.invoke.return_value = {"relevantLaws": "Fourth Amendment", "confidenceScore": 0.5}

    for category, schema_name in [
        ("criminal", "CriminalLawSuggestionsOutput"),
        ("civil", "CivilLawSuggestionsOutput"),
        ("general", "SuggestRelevantLawsOutput"),
    ]:
        result = dispatcher.analyze_case({"caseDetails": CASE_NARRATIVE, "caseCategory": category})
        assert result["relevantLaws"] == "Fourth Amendment"
        assert invoker.invoke.call_args.args[1].name == schema_name


def test_analyze_case_rejects_bad_form(dispatcher, invoker) -> None:
    result = dispatcher.analyze_case({"caseDetails": CASE_NARRATIVE, "caseCategory": "family"})
    assert result["error"].startswith("Invalid input: caseCategory")
    invoker.invoke.assert_not_called()


def _live_dispatcher(registry, model) -> TaskDispatcher:
    return TaskDispatcher(registry, GenerationInvoker(model, max_attempts=1, min_wait=0, max_wait=0))


def test_relevant_laws_output_passes_through_real_invoker(registry, fake_model) -> None:
    model = fake_model([{"relevantLaws": "X", "confidenceScore": 0.7}])

    result = _live_dispatcher(registry, model).dispatch("suggest_relevant_laws", {"caseDetails": CASE_NARRATIVE})

    assert result == {"relevantLaws": "X", "confidenceScore": 0.7}
    assert len(model.prompts) == 1


@pytest.mark.parametrize("task_name", build_default_registry().task_names())
def test_empty_input_is_rejected_for_every_task(dispatcher, invoker, task_name) -> None:
    result = dispatcher.dispatch(task_name, {})

    assert result["error"].startswith("Invalid input:")
    invoker.invoke.assert_not_called()


DISCLAIMER_CASES = {
    "suggest_legal_strategies": (
        {
            "caseDetails": CASE_NARRATIVE,
            "caseCategory": "civil",
            "dueProcessViolationAssessment": "High Risk: no notice",
            "relevantLaws": "Wrongful eviction statutes",
        },
        {
            "suggestedStrategies": ["Document the lockout"],
            "suggestedMotions": ["Motion for temporary restraining order"],
            "reasoning": "The landlord used self-help eviction.",
        },
    ),
    "analyze_document_content": (
        {"documentLabel": "Eviction notice"},
        {"summary": "A notice to vacate.", "potentialIssues": ["Deadline"], "keywords": ["eviction"]},
    ),
    "analyze_violation_report": (
        {"narrative": CASE_NARRATIVE, "violationCategory": "Unlawful eviction", "jurisdiction": "Cook County, IL"},
        {
            "potentialDueProcessElements": ["Right to notice"],
            "suggestedKeywords": ["self-help eviction"],
            "conceptualNextSteps": "Gather your lease and photos, then speak with an attorney.",
        },
    ),
    "generate_negotiation_advice": (
        {
            "caseSummary": "Landlord is withholding my security deposit.",
            "negotiationGoal": "Recover the full deposit",
            "userStance": "WILLING_TO_BE_FLEXIBLE",
        },
        {
            "generalAdvice": ["Open with the lease terms"],
            "pointsToConsider": ["What is your BATNA?"],
            "potentialTacticsToWatchFor": ["Anchoring"],
        },
    ),
    "generate_procedural_roadmap": (
        {
            "caseDetails": CASE_NARRATIVE,
            "caseCategory": "civil",
            "currentStage": "Just received the complaint",
            "jurisdictionInfo": "Cook County Circuit Court",
        },
        {
            "roadmapSteps": [
                {"stepName": "File Answer", "description": "Respond to the complaint.", "isTask": True},
                {"stepName": "Discovery", "description": "Exchange evidence.", "isTask": True},
                {"stepName": "Hearing", "description": "The court hears the case.", "isTask": False},
            ],
        },
    ),
}


def test_disclaimer_cases_cover_every_overriding_task(registry) -> None:
    overriding = {n for n in registry.task_names() if registry.get_task_definition(n).overrides}
    assert overriding == set(DISCLAIMER_CASES)


@pytest.mark.parametrize("task_name", sorted(DISCLAIMER_CASES))
def test_dispatch_always_returns_canonical_disclaimer(registry, fake_model, task_name) -> None:
    task_input, model_output = DISCLAIMER_CASES[task_name]
    model = fake_model([dict(model_output, disclaimer="This is legal advice.")])

    result = _live_dispatcher(registry, model).dispatch(task_name, task_input)

    assert "error" not in result
    for field, literal in registry.get_task_definition(task_name).overrides.items():
        assert result[field] == literal
