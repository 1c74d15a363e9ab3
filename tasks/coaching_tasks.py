# tasks/coaching_tasks.py
"""
Practice and preparation tasks: courtroom phrasing, mock trial scripts,
negotiation coaching and procedural roadmaps.
"""
from core.schemas import FieldSpec, FieldType, SchemaSpec
from core.task import TaskDefinition
from tasks.shared import case_category, choice, text, text_list

STATEMENT_CONTEXTS = (
    "ADDRESSING_JUDGE",
    "OPENING_STATEMENT",
    "DIRECT_EXAMINATION",
    "CROSS_EXAMINATION",
    "MAKING_OBJECTION",
    "PRESENTING_EVIDENCE",
    "CLOSING_ARGUMENT",
    "RESPONDING_TO_QUESTION_FROM_JUDGE",
    "NEGOTIATION_WITH_OPPOSING_COUNSEL",
    "OTHER_COURTROOM_STATEMENT",
)

PROCEEDING_TYPES = (
    "SMALL_CLAIMS_PLAINTIFF",
    "SMALL_CLAIMS_DEFENDANT",
    "EVICTION_HEARING_TENANT",
    "EVICTION_HEARING_LANDLORD",
    "CIVIL_MOTION_MOVANT",
    "CIVIL_MOTION_RESPONDENT",
    "TRAFFIC_TICKET_DEFENSE",
    "GENERAL_CIVIL_TRIAL_PLAINTIFF",
    "GENERAL_CIVIL_TRIAL_DEFENDANT",
)

NEGOTIATION_STANCES = (
    "SEEKING_QUICK_RESOLUTION",
    "WILLING_TO_BE_FLEXIBLE",
    "HOLDING_FIRM_ON_KEY_POINTS",
    "EXPLORING_ALL_OPTIONS",
    "FOCUSED_ON_NON_MONETARY_TERMS",
    "PREPARING_FOR_LENGTHY_NEGOTIATION",
)

NEGOTIATION_DISCLAIMER = (
    "This information is for educational purposes only and does not constitute legal or "
    "professional negotiation advice. Always consult with a qualified professional for "
    "guidance tailored to your specific situation."
)

ROADMAP_DISCLAIMER = (
    "This procedural roadmap is AI-generated general information based on common legal "
    "pathways and should not be considered legal advice. Actual procedures, deadlines, and "
    "requirements vary significantly by jurisdiction, specific court rules, and the unique "
    "facts of your case. Always consult official court rules for your specific jurisdiction "
    "and seek guidance from a qualified legal professional."
)


GENERATE_COURTROOM_PHRASING = TaskDefinition(
    name="generate_courtroom_phrasing",
    input_schema=SchemaSpec("GenerateCourtroomPhrasingInput", [
        text(
            "keyPointsOrTopic",
            "The key points the user wants to convey or the general topic of the statement to be made in court.",
            min_length=10,
            message=(
                "Please describe the key points you want to make or the topic of your "
                "statement (at least 10 characters)."
            ),
        ),
        choice("statementContext", STATEMENT_CONTEXTS, "The context in which the user will make this statement."),
        text("caseSummary", "Optional summary of the user's case for better contextual suggestions.", required=False),
    ]),
    output_schema=SchemaSpec("GenerateCourtroomPhrasingOutput", [
        FieldSpec(
            name="suggestedPhrasings",
            type=FieldType.ARRAY,
            min_items=1,
            max_items=3,
            description="1 to 3 AI-generated statements suitable for the context, with optional rationale.",
            items=FieldSpec(
                name="phrasing",
                type=FieldType.OBJECT,
                fields=(
                    text("phrasing", "An AI-generated statement suitable for the context."),
                    text(
                        "rationale",
                        "A brief explanation for why this statement is effective or appropriate.",
                        required=False,
                    ),
                ),
            ),
        ),
        text_list(
            "generalTips",
            "Up to 3 general communication tips relevant to the chosen context "
            "(e.g., 'When addressing the judge, always say Your Honor').",
            max_items=3,
        ),
    ]),
    prompt_template="""You are an expert courtroom communication coach and legal drafter AI. Your role is to help users by generating effective statements for them to use in legal settings.

The user wants to make a statement covering the following key points or topic:
"{{{keyPointsOrTopic}}}"

This statement will be made in the following context: {{{statementContext}}}

{{#caseSummary}}
For additional context, here is a summary of the user's case:
"{{{caseSummary}}}"
{{/caseSummary}}

Based on this, please provide:
1.  'suggestedPhrasings': An array of 1 to 3 distinct, well-phrased statements that effectively convey the user's key points or address the topic within the given context. For each, provide the 'phrasing' (the full statement) and a 'rationale' explaining why this phrasing is effective, appropriate, or strategically sound for the courtroom.
2.  'generalTips': An array of up to 3 general communication tips specifically relevant to the provided 'statementContext'.

Focus on creating practical, actionable statements and advice. Avoid legal advice on the merits of the case; concentrate solely on crafting clear and impactful communication.
Ensure your output strictly adheres to the defined schema.
If the key points/topic are very vague, try to generate helpful general statements for the context, or note that more specificity would yield better results in the rationale.
For contexts like OPENING_STATEMENT or CLOSING_ARGUMENT, if the topic is broad, generate a concise key segment or introductory/concluding phrases.
""",
    failure_message="AI failed to generate phrasing suggestions.",
)


GENERATE_MOCK_TRIAL_SCRIPT = TaskDefinition(
    name="generate_mock_trial_script",
    input_schema=SchemaSpec("GenerateMockTrialScriptInput", [
        text("caseNarrative", "The user's detailed case narrative or summary.", min_length=1),
        choice("proceedingType", PROCEEDING_TYPES, "The type of legal proceeding to simulate."),
        text(
            "userRoleInProceeding",
            "The role the user will play in the simulation (e.g., Plaintiff, Defendant, Tenant).",
            min_length=1,
        ),
    ]),
    output_schema=SchemaSpec("GenerateMockTrialScriptOutput", [
        FieldSpec(
            name="steps",
            type=FieldType.ARRAY,
            description=(
                "An array of steps representing the mock trial script. "
                "Should be between 7 and 12 steps total."
            ),
            items=FieldSpec(
                name="step",
                type=FieldType.OBJECT,
                fields=(
                    text(
                        "role",
                        "The 'speaker' or actor in this step (e.g., Judge, You (as Plaintiff), "
                        "Opposing Counsel, Witness).",
                    ),
                    text(
                        "lineOrPrompt",
                        "The dialogue for AI roles, or a prompt for the user if isUserInput is true.",
                    ),
                    FieldSpec(
                        name="isUserInput",
                        type=FieldType.BOOLEAN,
                        required=False,
                        default=False,
                        description=(
                            "True if this step requires input from the user. "
                            "If true, lineOrPrompt is a prompt for the user."
                        ),
                    ),
                ),
            ),
        ),
    ]),
    prompt_template="""You are a legal simulation designer and playwright. Your task is to create a concise (7-12 steps) mock trial or hearing script based on the provided case narrative and proceeding type.

Case Narrative:
{{{caseNarrative}}}

Proceeding Type: {{{proceedingType}}}
User's Role: {{{userRoleInProceeding}}}

Instructions for the script:
1.  The script should have a clear beginning (e.g., Judge opens the hearing), middle (key questions, arguments, evidence presentation points), and end (e.g., Judge concludes).
2.  Include the following roles as appropriate for the proceeding type:
    *   "Judge"
    *   "You (as {{{userRoleInProceeding}}})" - This represents the user.
    *   An opposing role (e.g., "Opposing Counsel", "Defendant", "Landlord", "Plaintiff", "Prosecutor/Officer"). Use a generic but suitable title.
    *   Optionally, a "Witness" role if central to a simple interaction.
3.  For each step, define:
    *   'role': The speaker.
    *   'lineOrPrompt': The dialogue or a question. If 'isUserInput' is true, this should be a clear prompt for what "You (as {{{userRoleInProceeding}}})" should say or respond to.
    *   'isUserInput': Set to true ONLY for steps where "You (as {{{userRoleInProceeding}}})" needs to provide a response or statement. Otherwise, it's false.
4.  Ensure there are at least 2-3 steps where 'isUserInput' is true for "You (as {{{userRoleInProceeding}}})".
5.  The dialogue should be simplified for a mock simulation, focusing on common interactions and procedural points.
6.  The total number of steps in the 'steps' array should be between 7 and 12.

Example of a step where the user provides input:
{
  "role": "You (as Plaintiff)",
  "lineOrPrompt": "Please state your name for the record and briefly explain your claim.",
  "isUserInput": true
}

Example of a step for an AI role:
{
  "role": "Judge",
  "lineOrPrompt": "Thank you. Does the defense have any questions for this witness?",
  "isUserInput": false
}

Focus on creating a logical flow that gives the user a chance to practice speaking and responding in a simulated legal context relevant to their narrative and chosen proceeding.
Ensure your output strictly adheres to the defined output schema, especially the 'steps' array structure.
""",
    failure_message="AI failed to generate a mock trial script.",
)


GENERATE_NEGOTIATION_ADVICE = TaskDefinition(
    name="generate_negotiation_advice",
    input_schema=SchemaSpec("GenerateNegotiationAdviceInput", [
        text(
            "caseSummary",
            "A summary of the user's case or situation requiring negotiation.",
            min_length=30,
            message="Please provide a brief summary of your case (at least 30 characters).",
        ),
        text(
            "negotiationGoal",
            "The user's primary objective for the negotiation.",
            min_length=10,
            message="Please state your primary goal for this negotiation (at least 10 characters).",
        ),
        choice("userStance", NEGOTIATION_STANCES, "The user's general approach or attitude towards the negotiation."),
    ]),
    output_schema=SchemaSpec("GenerateNegotiationAdviceOutput", [
        text_list("generalAdvice", "A list of 2-4 general negotiation tips tailored to the user's stance and goal."),
        text_list(
            "pointsToConsider",
            "A list of 2-3 key questions or factors the user should reflect on before or during the negotiation.",
        ),
        text_list(
            "potentialTacticsToWatchFor",
            "A list of 1-3 common negotiation tactics the other side might use, relevant to the user's context.",
        ),
        text("disclaimer", "Standard disclaimer that this is informational and not legal/negotiation advice."),
    ]),
    prompt_template="""You are an AI Negotiation Coach. Based on the user's case summary, negotiation goal, and stance, provide actionable advice.

Case Summary: {{{caseSummary}}}
Negotiation Goal: {{{negotiationGoal}}}
User's Stance: {{{userStance}}}

Please generate:
1.  'generalAdvice': 2-4 general negotiation tips tailored to their stance and goal. For example, if they are "SEEKING_QUICK_RESOLUTION", advice might focus on identifying acceptable compromises early. If "HOLDING_FIRM_ON_KEY_POINTS", advice might focus on clearly articulating those points and their non-negotiable nature.
2.  'pointsToConsider': 2-3 key questions or factors the user should reflect on. For example, "What is your Best Alternative To a Negotiated Agreement (BATNA)?", "What are the other side's likely interests and priorities?", "What are the full costs (time, money, stress) of not reaching an agreement?".
3.  'potentialTacticsToWatchFor': 1-3 common negotiation tactics the other side might employ, given the context. For example, "Anchoring (making an extreme first offer)" or "Good Cop/Bad Cop routine."
4.  'disclaimer': Set this to "This information is for educational purposes only and does not constitute legal or professional negotiation advice. Always consult with a qualified professional for guidance tailored to your specific situation."

Focus on providing practical, general guidance. Do NOT suggest specific monetary amounts, settlement terms, or predict outcomes.
Ensure your output strictly adheres to the defined schema.
""",
    overrides={"disclaimer": NEGOTIATION_DISCLAIMER},
    failure_message="AI failed to generate negotiation advice.",
)


ROADMAP_STEP = FieldSpec(
    name="roadmapStep",
    type=FieldType.OBJECT,
    fields=(
        text(
            "stepName",
            "A concise name for the procedural step or task (e.g., 'File Answer to Complaint', "
            "'Prepare for Bail Hearing').",
        ),
        text(
            "description",
            "A brief explanation of what this step involves, why it's important, or what typically happens.",
        ),
        text(
            "estimatedDueDate",
            "A general, estimated timeframe or deadline for this step (e.g., 'Typically 30 days "
            "after service'). Avoid specific calendar dates.",
            required=False,
        ),
        FieldSpec(
            name="isTask",
            type=FieldType.BOOLEAN,
            description=(
                "True if this step is an actionable task for the user; false if it is an "
                "informational or event-based step."
            ),
        ),
        text_list(
            "relatedDocuments",
            "A list of document types commonly associated with this step. Max 3 documents.",
            required=False,
            max_items=3,
        ),
    ),
)

GENERATE_PROCEDURAL_ROADMAP = TaskDefinition(
    name="generate_procedural_roadmap",
    input_schema=SchemaSpec("GenerateProceduralRoadmapInput", [
        text(
            "caseDetails",
            "Sufficient details of the legal case, including key facts, parties involved, and "
            "general nature of the dispute or charges.",
            min_length=50,
            message="Case details must be at least 50 characters.",
        ),
        case_category(),
        text(
            "currentStage",
            "The user's description of the current stage of their case.",
            min_length=10,
            message="Current stage description is too short.",
        ),
        text(
            "jurisdictionInfo",
            "Information about the court or jurisdiction.",
            min_length=5,
            message="Jurisdiction information is too short.",
        ),
    ]),
    output_schema=SchemaSpec("GenerateProceduralRoadmapOutput", [
        FieldSpec(
            name="roadmapSteps",
            type=FieldType.ARRAY,
            items=ROADMAP_STEP,
            min_items=3,
            max_items=10,
            description=(
                "An array of 3-10 procedural steps or tasks relevant to the user's case stage "
                "and category, ordered logically."
            ),
        ),
        text(
            "disclaimer",
            "A standard disclaimer stating that this is AI-generated general information, not legal advice.",
        ),
    ]),
    prompt_template="""You are an AI Legal Procedural Assistant.
Based on the provided case details, case category, current stage, and jurisdiction information, generate a procedural roadmap.
The roadmap should consist of 3 to 10 logically ordered steps or tasks that are likely to occur or need to be addressed next.

For each step in 'roadmapSteps':
- 'stepName': Provide a concise name for the step (e.g., "File Answer to Complaint", "Prepare for Preliminary Hearing").
- 'description': Briefly explain what the step involves or its significance.
- 'estimatedDueDate': Give a GENERAL estimated timeframe or deadline (e.g., "Typically 21-30 days after being served", "Approx. 2-4 weeks before trial", "Usually within 24-72 hours of arrest"). AVOID specific calendar dates. If no typical timeframe, state "Varies greatly".
- 'isTask': Set to true if this is an actionable item for the user (e.g., filing a document, preparing for an event). Set to false for events largely out of user's direct action (e.g., "Court reviews motion").
- 'relatedDocuments': If applicable, list 1-3 key document types related to this step (e.g., "Summons", "Motion for Discovery", "Plea Agreement Form").

Case Details: {{{caseDetails}}}
Case Category: {{{caseCategory}}}
Current Stage: {{{currentStage}}}
Jurisdiction Info: {{{jurisdictionInfo}}}

Focus on common procedural pathways. For criminal cases, consider steps like arraignment, bail, discovery, plea negotiations, motions, trial. For civil cases, consider service, answer, discovery, motions, settlement, trial.

Finally, provide a 'disclaimer': "This procedural roadmap is AI-generated general information based on common legal pathways and should not be considered legal advice. Actual procedures, deadlines, and requirements vary significantly by jurisdiction, specific court rules, and the unique facts of your case. Always consult official court rules for your specific jurisdiction and seek guidance from a qualified legal professional."

Ensure your output strictly adheres to the defined schema.
""",
    overrides={"disclaimer": ROADMAP_DISCLAIMER},
    failure_message="AI failed to generate a procedural roadmap.",
)


COACHING_TASKS = [
    GENERATE_COURTROOM_PHRASING,
    GENERATE_MOCK_TRIAL_SCRIPT,
    GENERATE_NEGOTIATION_ADVICE,
    GENERATE_PROCEDURAL_ROADMAP,
]
