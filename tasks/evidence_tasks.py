# tasks/evidence_tasks.py
from core.schemas import FieldSpec, FieldType, SchemaSpec
from core.task import ShortCircuit, TaskDefinition
from tasks.shared import text, text_list

DOCUMENT_ANALYSIS_DISCLAIMER = (
    "This analysis is conceptual, based on the document's description and type. No actual "
    "file content or OCR was processed by the AI in this prototype. Always review original "
    "documents carefully and consult a qualified legal professional."
)

VIOLATION_ANALYSIS_DISCLAIMER = (
    "This analysis is AI-generated for informational purposes and is not legal advice. It is "
    "based on the information provided and does not constitute a legal finding. Consult a "
    "qualified legal professional for advice on your specific situation."
)

EMPTY_TIMELINE_SUMMARY = "The timeline is currently empty. Add events to receive an AI analysis."


ANALYZE_DOCUMENT_CONTENT = TaskDefinition(
    name="analyze_document_content",
    input_schema=SchemaSpec("DocumentEvidenceInput", [
        text("documentLabel", "The user-provided label or title for the document.", min_length=1),
        text("documentDescription", "The user's description of the document's content or relevance.", required=False),
        text("fileName", "The original filename of the document, if uploaded.", required=False),
        text(
            "caseContext",
            "Optional broader case context provided by the user from their case summary.",
            required=False,
        ),
    ]),
    output_schema=SchemaSpec("DocumentEvidenceAnalysisOutput", [
        text(
            "summary",
            "A brief summary of what this document likely contains and its purpose, "
            "based on its description and type.",
        ),
        text_list(
            "potentialIssues",
            "A list of 2-3 potential legal issues, due process concerns, or important points "
            "a user should pay close attention to in such a document.",
        ),
        text_list("keywords", "A list of 3-5 relevant keywords or tags for this document.", max_items=5),
        text("disclaimer", "A standard disclaimer about the conceptual nature of the analysis."),
    ]),
    prompt_template="""You are an AI Legal Assistant for DUE PROCESS AI. Your task is to conceptually analyze a document based on metadata provided by the user.
Assume that if this were a real document, OCR and text extraction have been performed successfully.
Your analysis should be based on the likely content of a document with the given label, description, and filename.

Document Details Provided by User:
- Label/Title: "{{{documentLabel}}}"
{{#documentDescription}}
- User's Description: "{{{documentDescription}}}"
{{/documentDescription}}
{{#fileName}}
- (Conceptual) Filename: "{{{fileName}}}"
{{/fileName}}

{{#caseContext}}
User's General Case Context (for background understanding only, do not refer to it as "their case"):
"{{{caseContext}}}"
{{/caseContext}}

Based on this information, provide the following:
1.  'summary': A brief summary (2-3 sentences) of what this type of document likely contains and its general purpose in a legal context.
2.  'potentialIssues': A list of 2-3 potential legal issues, due process concerns, or important points a user should generally pay close attention to when reviewing such a document (e.g., "Verify service of process details if it's a summons," "Check for specific deadlines mentioned," "Ensure all named parties are correct and complete," "Cross-reference dates with known events"). Be general and informative.
3.  'keywords': A list of 3-5 relevant keywords or tags that would typically be associated with a document of this nature.
4.  'disclaimer': Provide *exactly* this text: "This analysis is conceptual, based on the document's description and type. No actual file content or OCR was processed by the AI in this prototype. Always review original documents carefully and consult a qualified legal professional."

Ensure your output strictly adheres to the defined schema. If the document label/description is very vague (e.g., "my file"), state that in the summary and provide very general potential issues.
Focus on being helpful and informative within the scope of a conceptual analysis. Do not invent specific facts not inferable from the label/description.
""",
    overrides={"disclaimer": DOCUMENT_ANALYSIS_DISCLAIMER},
    failure_message="AI failed to provide a conceptual document analysis.",
)


TIMELINE_EVENT = FieldSpec(
    name="event",
    type=FieldType.OBJECT,
    fields=(
        text("date", "The date of the event."),
        text("type", "The type or category of the event."),
        text("description", "A description of the event."),
    ),
)

ANALYZE_TIMELINE_EVENTS = TaskDefinition(
    name="analyze_timeline_events",
    input_schema=SchemaSpec("TimelineEventsInput", [
        FieldSpec(
            name="events",
            type=FieldType.ARRAY,
            items=TIMELINE_EVENT,
            description="A list of timeline events to be analyzed.",
        ),
    ]),
    output_schema=SchemaSpec("TimelineAnalysisOutput", [
        text(
            "analysisSummary",
            "A brief textual summary of the timeline, noting any patterns or clusters of events.",
        ),
        text_list(
            "potentialFocusAreas",
            "A list of 2-4 event types or sequences from the timeline that might warrant closer "
            "review or preparation by the user. This should not be legal advice.",
        ),
    ]),
    prompt_template="""You are an AI assistant helping a user review their logged case timeline.
Based on the following list of events, provide:
1.  'analysisSummary': A brief summary (2-3 sentences) of the timeline. Note any apparent clusters of activity (e.g., "multiple court-related events in May") or overall progression if discernible.
2.  'potentialFocusAreas': Identify 2-4 event types or specific events from the timeline that seem particularly important or might require the user's attention or preparation (e.g., "Upcoming court hearing for 'Motion Hearing' on [Date]", "Series of 'Interaction with Law Enforcement' entries may need detailed review", "Logged 'Deadline' for [Description] on [Date] is approaching"). Be general and factual. Do not provide legal advice or interpret the legal significance of events.

Events:
{{#events}}
- Date: {{{date}}}, Type: {{{type}}}, Description: {{{description}}}
{{/events}}

Ensure your output strictly adheres to the defined schema.
If the event list is empty or very sparse, state that in the analysisSummary and provide an empty array for potentialFocusAreas.
""",
    failure_message="AI failed to provide a timeline analysis.",
    short_circuit=ShortCircuit(
        condition=lambda data: not data.get("events"),
        output={"analysisSummary": EMPTY_TIMELINE_SUMMARY, "potentialFocusAreas": []},
    ),
)


ANALYZE_VIOLATION_REPORT = TaskDefinition(
    name="analyze_violation_report",
    input_schema=SchemaSpec("ViolationReportInput", [
        text(
            "narrative",
            "The user's detailed account of the alleged violation.",
            min_length=50,
            message="Please provide a detailed narrative of at least 50 characters.",
        ),
        text(
            "involvedParties",
            "Names of individuals, agencies, or departments allegedly involved.",
            required=False,
        ),
        text("violationCategory", "The primary category of the violation as selected by the user.", min_length=1),
        text("eventDate", "The approximate date of the event.", required=False),
        text(
            "jurisdiction",
            "The state, county, or city where the event occurred.",
            min_length=2,
            message="Please specify the jurisdiction.",
        ),
    ]),
    output_schema=SchemaSpec("ViolationAnalysisOutput", [
        text_list(
            "potentialDueProcessElements",
            "A list of 2-4 potential due process elements or rights that appear relevant based on "
            "the narrative (e.g., 'Right to notice', 'Right to be heard', 'Fourth Amendment search issue').",
        ),
        text_list(
            "suggestedKeywords",
            "A list of 3-5 relevant keywords for the user to research "
            "(e.g., 'qualified immunity', 'malicious prosecution', 'Brady violation').",
            max_items=5,
        ),
        text(
            "conceptualNextSteps",
            "A brief, general paragraph suggesting conceptual next steps, like gathering evidence, "
            "consulting the app's legal library on the suggested keywords, and speaking with an attorney.",
        ),
        text("disclaimer", "A standard disclaimer that this is AI-generated conceptual analysis, not legal advice."),
    ]),
    prompt_template="""You are an AI assistant helping a user analyze their report of a potential due process violation or official misconduct.
Your task is to provide a conceptual, informational analysis based on their narrative.

User's Report:
- Category of Violation: "{{{violationCategory}}}"
- Jurisdiction: "{{{jurisdiction}}}"
{{#eventDate}}
- Approx. Date: "{{{eventDate}}}"
{{/eventDate}}
{{#involvedParties}}
- Involved Parties/Agency: "{{{involvedParties}}}"
{{/involvedParties}}
- Narrative:
"{{{narrative}}}"

Based on this report, provide the following:
1. 'potentialDueProcessElements': Identify 2-4 potential legal or due process elements that seem most relevant from the narrative. Examples: "Right to be heard," "Fourth Amendment search issue," "Proper notice of proceedings," "Right to counsel." Be general.
2. 'suggestedKeywords': Suggest 3-5 keywords or legal terms the user could research to learn more about their situation. Examples: "qualified immunity," "malicious prosecution," "Brady violation," "procedural due process," "excessive force."
3. 'conceptualNextSteps': Provide a brief, general paragraph suggesting conceptual next steps. This should include ideas like using the app's Evidence Compiler to gather related documents, using the Legal Library to research the suggested keywords, and the importance of consulting with a qualified attorney. Do NOT give legal advice.
4. 'disclaimer': Provide *exactly* this text: "This analysis is AI-generated for informational purposes and is not legal advice. It is based on the information provided and does not constitute a legal finding. Consult a qualified legal professional for advice on your specific situation."

Ensure your output strictly adheres to the defined schema.
""",
    overrides={"disclaimer": VIOLATION_ANALYSIS_DISCLAIMER},
    failure_message="AI failed to provide a violation report analysis.",
)


EVIDENCE_TASKS = [
    ANALYZE_DOCUMENT_CONTENT,
    ANALYZE_TIMELINE_EVENTS,
    ANALYZE_VIOLATION_REPORT,
]
