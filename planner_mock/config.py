import os

ARTIFICIAL_DELAY = {
    "script_run": float(os.environ.get("PREVIEW_SCRIPT_RUN_DELAY", "0.15")),  # Simulated round trip to the scripting backend
}


# Local storage settings
STORAGE_CONFIG = {
    "path": os.environ.get("PREVIEW_STORAGE_PATH", "mock_storage.json"),
    "persist": os.environ.get("PREVIEW_STORAGE_PERSIST", "1") != "0",  # Set to "0" to keep everything in memory
}

STORAGE_KEYS = {
    "PROJECTS": "mock_projects",
    "VISIONS": "mock_visions",
    "USECASES": "mock_usecases",
    "RACI": "mock_raci",
    "VALUES": "mock_values",
    "PLANS": "mock_plans",
}


# Demo identity returned by apiGetCurrentUser and stamped on new projects
MOCK_USER_EMAIL = "demo@example.com"

PROJECT_STATUSES = ["下書き", "確定", "アーカイブ"]
DEFAULT_PROJECT_STATUS = PROJECT_STATUSES[0]

ID_PREFIXES = {
    "project": "PRJ",
    "usecase": "UC",
}

PROPOSAL_URL_TEMPLATE = "https://docs.google.com/document/d/mock-proposal-{project_id}"
