# tasks/case_analysis_tasks.py
"""
Case-analysis tasks: law suggestions (general, criminal, civil), the
clarification and summary-feedback refinement loop, strategy suggestions
and the filing-decision helper.
"""
from core.schemas import SchemaSpec
from core.task import ShortCircuit, TaskDefinition
from tasks.shared import (
    DOCUMENT_TYPES, case_category, choice_list, confidence_score, text, text_list,
)

CRIMINAL_DOCUMENT_TYPES = (
    "motion", "affidavit", "complaint",
    "motionForBailReduction", "discoveryRequest", "petitionForExpungement",
)
CIVIL_DOCUMENT_TYPES = ("motion", "affidavit", "complaint")

CASE_DETAILS_MESSAGE = "Case details must be at least 50 characters long."

STRATEGY_DISCLAIMER = (
    "These are AI-generated suggestions for informational purposes only and do not "
    "constitute legal advice. All suggestions must be reviewed by a qualified legal "
    "professional. Legal strategy is complex and case-specific."
)

_ALLOWED_DOCUMENT_LIST = ", ".join(f"'{t}'" for t in DOCUMENT_TYPES)


def _case_details_input(name: str, description: str) -> SchemaSpec:
    return SchemaSpec(name, [
        text("caseDetails", description, min_length=50, message=CASE_DETAILS_MESSAGE),
    ])


def _refined_analysis_output(name: str, laws: str, documents: str, score: str) -> SchemaSpec:
    return SchemaSpec(name, [
        text("relevantLaws", laws),
        confidence_score("The confidence score of the refined suggestion for laws (0-1)."),
        choice_list("suggestedDocumentTypes", DOCUMENT_TYPES, documents),
        text("dueProcessViolationScore", score),
    ])


SUGGEST_RELEVANT_LAWS = TaskDefinition(
    name="suggest_relevant_laws",
    input_schema=_case_details_input(
        "SuggestRelevantLawsInput",
        "Detailed information about the case for which relevant laws are to be suggested.",
    ),
    output_schema=SchemaSpec("SuggestRelevantLawsOutput", [
        text("relevantLaws", "A list of relevant case laws suggested by the AI, based on the case details."),
        confidence_score("The confidence score of the suggestion for laws (0-1)."),
        choice_list(
            "suggestedDocumentTypes", DOCUMENT_TYPES,
            "A list of document types that might be relevant to generate for this case. "
            "If no specific documents seem immediately relevant, return an empty list.",
            required=False,
        ),
        text(
            "dueProcessViolationScore",
            "A qualitative assessment of potential due process violation risks based on the input, "
            "e.g. \"Low Risk\", \"Moderate Risk: Potential issues with notice\", \"High Risk: Multiple "
            "potential constitutional violations detected\". If details are sparse, indicate that a "
            "more thorough review is needed.",
            required=False,
        ),
        text_list(
            "clarifyingQuestions",
            "A list of 2-3 specific questions for the user to clarify ambiguous points or gather "
            "missing information. If the information is clear and sufficient, return an empty array.",
            required=False,
        ),
    ]),
    prompt_template=f"""You are an expert legal assistant. Based on the following case details:
1. Suggest relevant case laws.
2. Suggest types of legal documents that might be appropriate to generate for this case. You can suggest from the following list: {_ALLOWED_DOCUMENT_LIST}. Focus on the most pertinent document types.
3. Provide a confidence score (0-1) for your legal suggestions. The confidence score must be between 0 and 1.
4. Provide a 'Due Process Violation Score'. This should be a qualitative assessment of potential due process violation risks (e.g., "Low Risk", "Moderate Risk: Potential notice issue", "High Risk: Multiple concerns like lack of hearing and representation indicated"). Analyze the severity and volume of potential violations mentioned. Consider common due process elements: timely and adequate notice, opportunity to be heard, right to counsel (especially if criminal context is implied), impartial decision-maker. If details are too sparse to make a determination, state that explicitly in the score (e.g., "Indeterminate: Insufficient details to assess due process risks.").
5. Based on the details provided, if there are ambiguities or missing pieces of information that, if clarified, would significantly improve your analysis, formulate 2-3 specific clarifying questions for the user. These questions should target information gaps that hinder a more precise legal assessment or document suggestion. If the information is very clear and sufficient, you can return an empty array for clarifyingQuestions.

Case Details: {{{{{{caseDetails}}}}}}

Ensure your output strictly adheres to the defined schema.
Return a list of suggested document types. If no specific documents seem immediately relevant, return an empty list for suggestedDocumentTypes.
""",
    failure_message="AI failed to suggest relevant laws. Please add more detail to your case description and try again.",
)


CRIMINAL_LAW_SUGGESTIONS = TaskDefinition(
    name="criminal_law_suggestions",
    input_schema=_case_details_input(
        "CriminalLawSuggestionsInput",
        "Detailed information about the criminal case for which relevant laws are to be suggested.",
    ),
    output_schema=SchemaSpec("CriminalLawSuggestionsOutput", [
        text("relevantLaws", "A list of relevant criminal case laws and precedents suggested by the AI."),
        confidence_score("The confidence score of the suggestion for criminal laws (0-1)."),
        choice_list(
            "suggestedDocumentTypes", CRIMINAL_DOCUMENT_TYPES,
            "A list of document types relevant to this criminal case.",
            required=False,
        ),
    ]),
    prompt_template="""You are an expert AI legal assistant specializing in Criminal Law. Based on the case details provided, suggest relevant state and federal case laws.
Focus on:
- Constitutional precedents (e.g., Fourth, Fifth, Sixth Amendments)
- Supreme Court criminal procedure rules
- State criminal code interpretations (assume a generic US state jurisdiction if not specified, or ask for clarification if critical)
- Sentencing guidelines and relevant case law
- Landmark cases related to Miranda rights, search and seizure, right to counsel, etc.
- Issues related to bail, discovery (including Brady material and witness lists), and post-conviction relief like expungement.

Also, suggest types of legal documents (from the allowed list: 'motion', 'affidavit', 'complaint', 'motionForBailReduction', 'discoveryRequest', 'petitionForExpungement') that might be appropriate to generate for this case.
For example, if bail is an issue, suggest 'motionForBailReduction'. If the case is in early stages, 'discoveryRequest' might be relevant. If it's post-conviction and eligible, 'petitionForExpungement' could be suggested.
Provide a confidence score (a number between 0 and 1, where 1 is highest confidence) for your legal suggestions.

Case Details:
{{{caseDetails}}}

Ensure your output strictly adheres to the defined schema, including specific document types and a numeric confidence score.
If no specific documents seem immediately relevant from the allowed list, return an empty list for suggestedDocumentTypes.
""",
    failure_message="AI failed to suggest relevant criminal laws. Please add more detail to your case description and try again.",
)


CIVIL_LAW_SUGGESTIONS = TaskDefinition(
    name="civil_law_suggestions",
    input_schema=_case_details_input(
        "CivilLawSuggestionsInput",
        "Detailed information about the civil case for which relevant laws are to be suggested.",
    ),
    output_schema=SchemaSpec("CivilLawSuggestionsOutput", [
        text("relevantLaws", "A list of relevant civil case laws and precedents suggested by the AI."),
        confidence_score("The confidence score of the suggestion for civil laws (0-1)."),
        choice_list(
            "suggestedDocumentTypes", CIVIL_DOCUMENT_TYPES,
            "A list of document types relevant to this civil case.",
            required=False,
        ),
    ]),
    prompt_template="""You are an expert AI legal assistant specializing in Civil Law. Based on the case details provided, suggest relevant state and federal case laws.
Focus on areas such as:
- Contract law (breach, interpretation, formation)
- Tort law (negligence, intentional torts, product liability)
- Family law (divorce, custody, support - if applicable from details)
- Employment law (discrimination, wrongful termination, wage disputes)
- Civil rights claims (e.g., Section 1983)
- Administrative law (challenges to agency decisions)
Consider different burden of proof standards applicable in civil litigation (e.g., preponderance of the evidence).

Also, suggest types of legal documents (from the allowed list: 'motion', 'affidavit', 'complaint') that might be appropriate to generate for this case.
Provide a confidence score (a number between 0 and 1, where 1 is highest confidence) for your legal suggestions.

Case Details:
{{{caseDetails}}}

Ensure your output strictly adheres to the defined schema, including specific document types and a numeric confidence score.
If no specific documents seem immediately relevant from the allowed list, return an empty list for suggestedDocumentTypes.
""",
    failure_message="AI failed to suggest relevant civil laws. Please add more detail to your case description and try again.",
)


SUGGEST_LEGAL_STRATEGIES = TaskDefinition(
    name="suggest_legal_strategies",
    input_schema=SchemaSpec("SuggestLegalStrategiesInput", [
        text("caseDetails", "Detailed information about the case.", min_length=1),
        case_category(),
        text(
            "dueProcessViolationAssessment",
            "The AI-generated assessment of potential due process violations "
            "(e.g., \"Low Risk\", \"High Risk: Multiple concerns\").",
        ),
        text("relevantLaws", "AI-suggested relevant laws for the case."),
    ]),
    output_schema=SchemaSpec("SuggestLegalStrategiesOutput", [
        text_list("suggestedStrategies", "A list of potential legal strategies."),
        text_list("suggestedMotions", "A list of potential legal motions to consider filing."),
        text("reasoning", "The AI's reasoning behind the suggestions."),
        text("disclaimer", "A standard disclaimer that this is not legal advice."),
    ]),
    prompt_template="""You are an expert AI legal assistant. Based on the provided case details, case category, due process violation assessment, and relevant laws, suggest potential legal strategies and specific motions that could be considered. Provide a brief reasoning for your suggestions.

Case Details:
{{{caseDetails}}}

Case Category: {{{caseCategory}}}

AI Due Process Violation Assessment:
{{{dueProcessViolationAssessment}}}

AI Suggested Relevant Laws:
{{{relevantLaws}}}

Consider the severity of the due process assessment.
For "High Risk" assessments, suggestions should be more assertive or protective.
For "Criminal" cases, focus on constitutional rights, defenses, and procedural motions (e.g., motion to suppress, motion for discovery, speedy trial motions).
For "Civil" cases, focus on strategies related to evidence, claims, defenses, and procedural motions (e.g., motion to dismiss, motion for summary judgment, discovery motions).
For "General" cases, provide broader strategic advice.

Output Format:
- suggestedStrategies: An array of strings, each a concise strategy.
- suggestedMotions: An array of strings, each a specific motion (e.g., "Motion to Suppress Evidence due to Fourth Amendment violation").
- reasoning: Explain why these strategies/motions are suggested based on the input.
- disclaimer: Include the following exact text: "These are AI-generated suggestions for informational purposes only and do not constitute legal advice. All suggestions must be reviewed by a qualified legal professional. Legal strategy is complex and case-specific."

Provide at least 2-3 strategies and 1-2 motion suggestions if applicable. If the information is too sparse for specific suggestions, state that in the reasoning and provide general advice.
Prioritize actionable and relevant suggestions.
""",
    overrides={"disclaimer": STRATEGY_DISCLAIMER},
    fallback={
        "suggestedStrategies": [],
        "suggestedMotions": [],
        "reasoning": (
            "The AI was unable to generate specific strategies or motions based on the provided "
            "information. Please ensure the case details are comprehensive."
        ),
        "disclaimer": STRATEGY_DISCLAIMER,
    },
)


SUGGEST_FILING_DECISION = TaskDefinition(
    name="suggest_filing_decision",
    input_schema=SchemaSpec("SuggestFilingDecisionHelperInput", [
        text("caseDetails", "Detailed information about the case.", min_length=1),
        case_category(),
        text("relevantLaws", "AI-suggested relevant laws for the case."),
        text("dueProcessViolationScore", "AI-generated assessment of potential due process violations."),
        choice_list(
            "suggestedDocumentTypes", DOCUMENT_TYPES,
            "A list of document types initially suggested as relevant to the case.",
        ),
    ]),
    output_schema=SchemaSpec("SuggestFilingDecisionHelperOutput", [
        text("filingAdvice", "AI-generated advice on which document(s) to prioritize filing and why."),
        choice_list(
            "topSuggestions", DOCUMENT_TYPES,
            "A list of 1-2 top suggested document types to consider filing next from the initial list.",
        ),
    ]),
    prompt_template="""You are an AI Legal Filing Assistant.
Based on the provided case details, category, relevant laws, due process assessment, and a list of initially suggested document types:
1. Analyze the input.
2. From the 'suggestedDocumentTypes' list, identify the 1 or 2 most critical or impactful documents the user should consider preparing or filing next.
3. Provide clear, concise 'filingAdvice' explaining your reasoning for these top suggestions. Consider the case category and due process score in your reasoning. For example, if due process risk is high, prioritize documents that address that.
4. Populate 'topSuggestions' with the chosen 1-2 document types.

Case Details: {{{caseDetails}}}
Case Category: {{{caseCategory}}}
Relevant Laws: {{{relevantLaws}}}
Due Process Violation Score: {{{dueProcessViolationScore}}}
Initially Suggested Document Types:
{{#suggestedDocumentTypes}}
- {{{.}}}
{{/suggestedDocumentTypes}}

Ensure your output strictly adheres to the defined schema. If the list of suggestedDocumentTypes is empty or no specific documents stand out as immediately critical from the list, state that in the filingAdvice and return an empty array for topSuggestions.
""",
    fallback={
        "filingAdvice": (
            "The AI was unable to determine top suggestions based on the input. "
            "Please ensure all details are clear or try rephrasing."
        ),
        "topSuggestions": [],
    },
    short_circuit=ShortCircuit(
        condition=lambda data: not data.get("suggestedDocumentTypes"),
        output={
            "filingAdvice": (
                "No initial document types were suggested, or the list was empty. Therefore, no "
                "specific filing recommendations can be prioritized. Consider re-analyzing the case "
                "with more details or broadening the scope of document types if appropriate."
            ),
            "topSuggestions": [],
        },
    ),
)


REFINE_CASE_ANALYSIS = TaskDefinition(
    name="refine_case_analysis",
    input_schema=SchemaSpec("RefineCaseAnalysisInput", [
        text("originalCaseDetails", "The initial detailed information about the case.", min_length=1),
        text(
            "clarifications",
            "Additional information or clarifications provided by the user to refine the analysis.",
            min_length=1,
        ),
        case_category(),
    ]),
    output_schema=_refined_analysis_output(
        "RefineCaseAnalysisOutput",
        "A list of relevant case laws suggested by the AI, refined based on original details and new clarifications.",
        "A list of document types that might be relevant to generate for this case, based on the refined "
        "analysis. If no specific documents seem immediately relevant, return an empty list.",
        "A qualitative assessment of potential due process violation risks based on the refined input. "
        "If details are sparse, indicate that a more thorough review is needed.",
    ),
    prompt_template=f"""You are an expert legal assistant. You previously analyzed case details. The user has now provided clarifications.
Review the original case details, the user's new clarifications, and the case category.
Then, provide a *refined* analysis:
1. Suggest relevant case laws.
2. Suggest types of legal documents that might be appropriate from the allowed list: {_ALLOWED_DOCUMENT_LIST}.
3. Provide a new confidence score (0-1) for your *refined* legal suggestions.
4. Provide a *refined* 'Due Process Violation Score' (e.g., "Low Risk", "Moderate Risk", "High Risk", "Indeterminate").

Original Case Details:
{{{{{{originalCaseDetails}}}}}}

User's Clarifications:
{{{{{{clarifications}}}}}}

Case Category: {{{{{{caseCategory}}}}}}

Ensure your output strictly adheres to the defined schema. If no specific documents seem immediately relevant, return an empty list for suggestedDocumentTypes.
Focus on incorporating the clarifications to improve the accuracy and specificity of your suggestions.
""",
    failure_message="AI failed to provide a refined analysis.",
)


SUMMARIZE_CASE_UNDERSTANDING = TaskDefinition(
    name="summarize_case_understanding",
    input_schema=SchemaSpec("SummarizeCaseInput", [
        text(
            "fullCaseNarrative",
            "The complete narrative of the case, including original details and any clarifications.",
            min_length=1,
        ),
        text("relevantLaws", "The relevant laws previously identified by the AI."),
        text("dueProcessViolationScore", "The due process violation assessment previously provided by the AI."),
    ]),
    output_schema=SchemaSpec("CaseSummaryOutput", [
        text(
            "summaryText",
            "A concise summary of the AI's understanding of the key facts, main legal issues, "
            "and due process concerns.",
        ),
    ]),
    prompt_template="""You are an expert legal assistant. Based on the full case narrative and your previous analysis (identified relevant laws and due process assessment), provide a concise summary of your understanding of the case.
This summary should cover:
1. Key facts as you understand them.
2. Main legal issues you've identified.
3. Your current assessment of potential due process concerns.

This summary will be presented to the user for verification, so it should be clear and easy to understand.

Full Case Narrative:
{{{fullCaseNarrative}}}

Previously Identified Relevant Laws:
{{{relevantLaws}}}

Previously Assessed Due Process Violation Score:
{{{dueProcessViolationScore}}}

Generate the summaryText.
""",
    failure_message="AI failed to provide a case summary.",
)


REFINE_ANALYSIS_FROM_FEEDBACK = TaskDefinition(
    name="refine_analysis_from_feedback",
    input_schema=SchemaSpec("RefineFromFeedbackInput", [
        text(
            "fullCaseNarrative",
            "The complete narrative of the case, including original details and any previous clarifications.",
            min_length=1,
        ),
        text("aiGeneratedSummary", "The AI's summary of its understanding of the case, which the user has reviewed."),
        text(
            "userFeedbackOnSummary",
            "The user's corrections, additions, or feedback on the AI's summary.",
            min_length=1,
        ),
        case_category(),
    ]),
    output_schema=_refined_analysis_output(
        "RefinedAnalysisOutput",
        "A list of relevant case laws suggested by the AI, refined based on user feedback to the AI summary.",
        "A list of document types relevant to this case, based on the refined analysis from summary "
        "feedback. If no specific documents seem immediately relevant, return an empty list.",
        "A qualitative assessment of potential due process violation risks based on the refined input "
        "after summary feedback. If details are sparse, indicate that a more thorough review is needed.",
    ),
    prompt_template=f"""You are an expert legal assistant.
You previously provided a summary of a case:
"{{{{{{aiGeneratedSummary}}}}}}"

The user has reviewed this summary and provided the following feedback/corrections:
"{{{{{{userFeedbackOnSummary}}}}}}"

Now, considering the original full case narrative provided below, your previous summary, and the user's specific feedback on that summary, provide a new, comprehensive, and *refined* case analysis.

Original Full Case Narrative:
"{{{{{{fullCaseNarrative}}}}}}"

Case Category: {{{{{{caseCategory}}}}}}

Your refined analysis should include:
1. Suggested relevant case laws.
2. Suggested types of legal documents that might be appropriate from the allowed list: {_ALLOWED_DOCUMENT_LIST}.
3. A new confidence score (0-1) for your *refined* legal suggestions.
4. A *refined* 'Due Process Violation Score' (e.g., "Low Risk", "Moderate Risk", "High Risk", "Indeterminate").

Ensure your output strictly adheres to the defined schema. If no specific documents seem immediately relevant, return an empty list for suggestedDocumentTypes.
Focus on incorporating the user's feedback on your summary to improve the accuracy and specificity of the overall case analysis.
""",
    failure_message="AI failed to provide a refined analysis based on summary feedback.",
)


CASE_ANALYSIS_TASKS = [
    SUGGEST_RELEVANT_LAWS,
    CRIMINAL_LAW_SUGGESTIONS,
    CIVIL_LAW_SUGGESTIONS,
    SUGGEST_LEGAL_STRATEGIES,
    SUGGEST_FILING_DECISION,
    REFINE_CASE_ANALYSIS,
    SUMMARIZE_CASE_UNDERSTANDING,
    REFINE_ANALYSIS_FROM_FEEDBACK,
]
