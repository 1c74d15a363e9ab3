"""Prompt rendering: substitution, conditional blocks, iteration, determinism."""

from tools.prompt_binder import bind, render


def test_render_substitutes_fields_verbatim() -> None:
    prompt = render('Case: "{{{caseDetails}}}" ({{{caseCategory}}})',
                    {"caseDetails": 'Tenant & "landlord" <dispute>', "caseCategory": "civil"})
    assert prompt == 'Case: "Tenant & "landlord" <dispute>" (civil)'


def test_render_is_deterministic(registry) -> None:
    task = registry.get_task_definition("analyze_violation_report")
    data = {
        "narrative": "Officers searched my car without a warrant or consent during a stop.",
        "violationCategory": "Unlawful search",
        "jurisdiction": "Travis County, TX",
        "eventDate": "2024-03-02",
    }
    first = bind(task.prompt_template, task.input_schema, data)
    second = bind(task.prompt_template, task.input_schema, dict(data))
    assert first == second


def test_absent_optional_field_omits_its_block(registry) -> None:
    task = registry.get_task_definition("analyze_document_content")

    without = bind(task.prompt_template, task.input_schema, {"documentLabel": "Eviction notice"})
    assert "User's Description" not in without
    assert "(Conceptual) Filename" not in without
    assert "User's General Case Context" not in without
    assert 'Label/Title: "Eviction notice"' in without

    with_context = bind(task.prompt_template, task.input_schema, {
        "documentLabel": "Eviction notice",
        "documentDescription": "Three-day notice taped to my door",
        "caseContext": "Landlord dispute",
    })
    assert '- User\'s Description: "Three-day notice taped to my door"' in with_context
    assert '"Landlord dispute"' in with_context
    assert "(Conceptual) Filename" not in with_context


def test_array_field_renders_one_line_per_element(registry) -> None:
    task = registry.get_task_definition("analyze_timeline_events")
    prompt = bind(task.prompt_template, task.input_schema, {"events": [
        {"date": "2024-05-01", "type": "Court Hearing", "description": "Motion hearing"},
        {"date": "2024-05-09", "type": "Deadline", "description": "File answer"},
    ]})
    assert "- Date: 2024-05-01, Type: Court Hearing, Description: Motion hearing" in prompt
    assert "- Date: 2024-05-09, Type: Deadline, Description: File answer" in prompt
    assert prompt.count("- Date:") == 2


def test_list_of_strings_iterates(registry) -> None:
    task = registry.get_task_definition("suggest_filing_decision")
    prompt = bind(task.prompt_template, task.input_schema, {
        "caseDetails": "Arrested after a traffic stop.",
        "caseCategory": "criminal",
        "relevantLaws": "Terry v. Ohio",
        "dueProcessViolationScore": "Moderate Risk",
        "suggestedDocumentTypes": ["motion", "discoveryRequest"],
    })
    assert "- motion" in prompt
    assert "- discoveryRequest" in prompt


def test_every_registered_template_renders(registry) -> None:
    """Every template parses and leaves no unrendered tags behind."""
    for name in registry.task_names():
        task = registry.get_task_definition(name)
        prompt = bind(task.prompt_template, task.input_schema, {})
        assert "{{" not in prompt, name
