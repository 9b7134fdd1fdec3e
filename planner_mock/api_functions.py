from enum import Enum

from .business_logic import (
    get_user_projects,
    get_project,
    create_project,
    update_project_status,
    get_vision,
    save_vision,
    get_usecases,
    add_usecase,
    get_ninety_day_plan,
    save_ninety_day_plan,
    get_raci_entries,
    save_raci_entries,
    get_values,
    save_value,
    generate_proposal,
    initialize_sheets,
    get_current_user,
)


class UnknownOperationError(LookupError):
    """Raised when a caller names an operation the preview does not provide."""


class Operation(Enum):
    GET_USER_PROJECTS = "apiGetUserProjects"
    GET_PROJECT = "apiGetProject"
    CREATE_PROJECT = "apiCreateProject"
    UPDATE_PROJECT_STATUS = "apiUpdateProjectStatus"
    GET_VISION = "apiGetVision"
    SAVE_VISION = "apiSaveVision"
    GET_USECASES = "apiGetUsecases"
    ADD_USECASE = "apiAddUsecase"
    GET_NINETY_DAY_PLAN = "apiGetNinetyDayPlan"
    SAVE_NINETY_DAY_PLAN = "apiSaveNinetyDayPlan"
    GET_RACI_ENTRIES = "apiGetRACIEntries"
    SAVE_RACI_ENTRIES = "apiSaveRACIEntries"
    GET_VALUES = "apiGetValues"
    SAVE_VALUE = "apiSaveValue"
    GENERATE_PROPOSAL = "apiGenerateProposal"
    INITIALIZE_SHEETS = "apiInitializeSheets"
    GET_CURRENT_USER = "apiGetCurrentUser"


def resolve_operation(tag):
    """Accept an Operation or its API name."""
    if isinstance(tag, Operation):
        return tag
    try:
        return Operation(tag)
    except ValueError:
        raise UnknownOperationError(f"Unknown operation: {tag}") from None


# Operation descriptions served to the planning UI. Parameters are positional,
# in the order listed.
FUNCTION_DEFINITIONS = [
    {
        "name": Operation.GET_USER_PROJECTS.value,
        "description": "List every project visible to the current user, newest first.",
        "parameters": [],
    },
    {
        "name": Operation.GET_PROJECT.value,
        "description": "Fetch one project. Fails with 'Project not found' for an unknown id.",
        "parameters": [
            {"name": "projectId", "type": "string", "description": "Project id in PRJ-YYYYMMDD-NNNN format."}
        ],
    },
    {
        "name": Operation.CREATE_PROJECT.value,
        "description": "Create a draft project for a customer and return it with its generated id.",
        "parameters": [{"name": "customerName", "type": "string"}],
    },
    {
        "name": Operation.UPDATE_PROJECT_STATUS.value,
        "description": "Change a project's status and refresh its updated timestamp.",
        "parameters": [
            {"name": "projectId", "type": "string"},
            {"name": "status", "type": "string", "enum": ["下書き", "確定", "アーカイブ"]},
        ],
    },
    {
        "name": Operation.GET_VISION.value,
        "description": "Fetch the vision statement for a project, or null.",
        "parameters": [{"name": "projectId", "type": "string"}],
    },
    {
        "name": Operation.SAVE_VISION.value,
        "description": "Save the vision for visionData.projectId, replacing any previous one.",
        "parameters": [
            {
                "name": "visionData",
                "type": "object",
                "description": "projectId, visionText, decisionRules, successMetrics, notes.",
            }
        ],
    },
    {
        "name": Operation.GET_USECASES.value,
        "description": "List the use cases of a project.",
        "parameters": [{"name": "projectId", "type": "string"}],
    },
    {
        "name": Operation.ADD_USECASE.value,
        "description": "Append a use case to usecaseData.projectId and return its generated id.",
        "parameters": [
            {
                "name": "usecaseData",
                "type": "object",
                "description": "projectId, challenge, goal, expectedImpact, ninetyDayGoal, score, priority.",
            }
        ],
    },
    {
        "name": Operation.GET_NINETY_DAY_PLAN.value,
        "description": "Fetch the 90-day plan of a use case, or null.",
        "parameters": [
            {"name": "usecaseId", "type": "string"},
            {"name": "projectId", "type": "string", "description": "Accepted but not used for lookup."},
        ],
    },
    {
        "name": Operation.SAVE_NINETY_DAY_PLAN.value,
        "description": "Save the 90-day plan for planData.usecaseId, replacing any previous one.",
        "parameters": [
            {
                "name": "planData",
                "type": "object",
                "description": "usecaseId, projectId, structure, requiredData, risks, communicationPlan, milestones (JSON text).",
            }
        ],
    },
    {
        "name": Operation.GET_RACI_ENTRIES.value,
        "description": "List the RACI assignments of a project.",
        "parameters": [{"name": "projectId", "type": "string"}],
    },
    {
        "name": Operation.SAVE_RACI_ENTRIES.value,
        "description": "Replace all RACI assignments of a project.",
        "parameters": [
            {"name": "projectId", "type": "string"},
            {"name": "entries", "type": "array", "description": "Objects with pillar, task, assignee, raci."},
        ],
    },
    {
        "name": Operation.GET_VALUES.value,
        "description": "List the value tracking records of a project.",
        "parameters": [{"name": "projectId", "type": "string"}],
    },
    {
        "name": Operation.SAVE_VALUE.value,
        "description": "Save a value record, replacing the project's record for the same use case.",
        "parameters": [
            {
                "name": "valueData",
                "type": "object",
                "description": "usecaseId, projectId, quantitativeImpact, qualitativeImpact, evidence, nextInvestment.",
            }
        ],
    },
    {
        "name": Operation.GENERATE_PROPOSAL.value,
        "description": "Return a placeholder proposal document URL. Nothing is stored.",
        "parameters": [{"name": "projectId", "type": "string"}],
    },
    {
        "name": Operation.INITIALIZE_SHEETS.value,
        "description": "Wipe local storage and reload the sample data.",
        "parameters": [],
    },
    {
        "name": Operation.GET_CURRENT_USER.value,
        "description": "Return the demo user's email.",
        "parameters": [],
    },
]

# Map operations to their implementations
FUNCTION_MAP = {
    Operation.GET_USER_PROJECTS: get_user_projects,
    Operation.GET_PROJECT: get_project,
    Operation.CREATE_PROJECT: create_project,
    Operation.UPDATE_PROJECT_STATUS: update_project_status,
    Operation.GET_VISION: get_vision,
    Operation.SAVE_VISION: save_vision,
    Operation.GET_USECASES: get_usecases,
    Operation.ADD_USECASE: add_usecase,
    Operation.GET_NINETY_DAY_PLAN: get_ninety_day_plan,
    Operation.SAVE_NINETY_DAY_PLAN: save_ninety_day_plan,
    Operation.GET_RACI_ENTRIES: get_raci_entries,
    Operation.SAVE_RACI_ENTRIES: save_raci_entries,
    Operation.GET_VALUES: get_values,
    Operation.SAVE_VALUE: save_value,
    Operation.GENERATE_PROPOSAL: generate_proposal,
    Operation.INITIALIZE_SHEETS: initialize_sheets,
    Operation.GET_CURRENT_USER: get_current_user,
}
