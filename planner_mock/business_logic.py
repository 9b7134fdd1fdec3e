import logging
import re
from datetime import datetime, timezone

from planner_mock.config import (
    DEFAULT_PROJECT_STATUS,
    ID_PREFIXES,
    MOCK_USER_EMAIL,
    PROPOSAL_URL_TEMPLATE,
    STORAGE_KEYS,
)

logger = logging.getLogger(__name__)

PROJECT_NOT_FOUND = "Project not found"


def utc_now():
    return datetime.now(timezone.utc)


def log_notification(message):
    logger.warning(f"Alert: {message}")


class ApiContext:
    """Everything a handler needs: the store, the demo identity, a clock and
    a way to put a blocking notification in front of the user."""

    def __init__(self, store, user_email=MOCK_USER_EMAIL, clock=utc_now, notify=log_notification):
        self.store = store
        self.user_email = user_email
        self.clock = clock
        self.notify = notify

    def timestamp(self):
        """Current time as ISO-8601 UTC with millisecond precision."""
        return self.clock().astimezone(timezone.utc).isoformat(timespec="milliseconds").replace(
            "+00:00", "Z"
        )


def generate_id(prefix, existing_ids, today):
    """Return PREFIX-YYYYMMDD-NNNN, one past the highest sequence used today."""
    date_str = today.strftime("%Y%m%d")
    pattern = re.compile(rf"^{re.escape(prefix)}-{date_str}-(\d+)$")
    used = [int(m.group(1)) for m in (pattern.match(i or "") for i in existing_ids) if m]
    sequence = max(used, default=0) + 1
    return f"{prefix}-{date_str}-{sequence:04d}"


def _not_found():
    return {"success": False, "error": PROJECT_NOT_FOUND}


def _find_project_index(projects, project_id):
    return next((i for i, p in enumerate(projects) if p.get("projectId") == project_id), -1)


# Projects


def get_user_projects(ctx):
    projects = ctx.store.read(STORAGE_KEYS["PROJECTS"]) or []
    return {"success": True, "data": projects}


def get_project(ctx, project_id):
    projects = ctx.store.read(STORAGE_KEYS["PROJECTS"]) or []
    idx = _find_project_index(projects, project_id)
    if idx == -1:
        return _not_found()
    return {"success": True, "data": projects[idx]}


def create_project(ctx, customer_name):
    """Create a draft project owned by the current user and put it first."""
    projects = ctx.store.read(STORAGE_KEYS["PROJECTS"]) or []
    now = ctx.timestamp()
    new_project = {
        "projectId": generate_id(
            ID_PREFIXES["project"], [p.get("projectId") for p in projects], ctx.clock()
        ),
        "customerName": customer_name,
        "createdDate": now,
        "updatedDate": now,
        "creatorEmail": ctx.user_email,
        "editorEmails": ctx.user_email,
        "status": DEFAULT_PROJECT_STATUS,
    }
    projects.insert(0, new_project)
    ctx.store.write(STORAGE_KEYS["PROJECTS"], projects)
    logger.info(f"Created project {new_project['projectId']} for {customer_name}")
    return {"success": True, "data": new_project}


def update_project_status(ctx, project_id, status):
    projects = ctx.store.read(STORAGE_KEYS["PROJECTS"]) or []
    idx = _find_project_index(projects, project_id)
    if idx == -1:
        return _not_found()
    projects[idx]["status"] = status
    projects[idx]["updatedDate"] = ctx.timestamp()
    ctx.store.write(STORAGE_KEYS["PROJECTS"], projects)
    return {"success": True, "message": "Status updated"}


# Vision


def get_vision(ctx, project_id):
    visions = ctx.store.read(STORAGE_KEYS["VISIONS"]) or {}
    return {"success": True, "data": visions.get(project_id)}


def save_vision(ctx, vision_data):
    """Upsert the vision for its project and touch the project's updatedDate.

    Only vision saves refresh the parent timestamp; the other child
    collections leave the project untouched.
    """
    project_id = vision_data.get("projectId")
    visions = ctx.store.read(STORAGE_KEYS["VISIONS"]) or {}
    visions[project_id] = vision_data
    ctx.store.write(STORAGE_KEYS["VISIONS"], visions)

    projects = ctx.store.read(STORAGE_KEYS["PROJECTS"]) or []
    idx = _find_project_index(projects, project_id)
    if idx != -1:
        projects[idx]["updatedDate"] = ctx.timestamp()
        ctx.store.write(STORAGE_KEYS["PROJECTS"], projects)

    return {"success": True, "message": "Vision saved"}


# Use cases


def get_usecases(ctx, project_id):
    usecases = ctx.store.read(STORAGE_KEYS["USECASES"]) or {}
    return {"success": True, "data": usecases.get(project_id) or []}


def add_usecase(ctx, usecase_data):
    usecases = ctx.store.read(STORAGE_KEYS["USECASES"]) or {}
    project_id = usecase_data.get("projectId")
    existing_ids = [
        uc.get("usecaseId") for project_usecases in usecases.values() for uc in project_usecases
    ]

    new_usecase = dict(usecase_data)
    new_usecase["usecaseId"] = generate_id(ID_PREFIXES["usecase"], existing_ids, ctx.clock())
    usecases.setdefault(project_id, []).append(new_usecase)
    ctx.store.write(STORAGE_KEYS["USECASES"], usecases)

    return {"success": True, "data": {"usecaseId": new_usecase["usecaseId"]}}


# 90-day plans


def get_ninety_day_plan(ctx, usecase_id, project_id=None):
    """Plans are keyed by use case id alone; project_id is accepted for
    signature compatibility with the production API."""
    plans = ctx.store.read(STORAGE_KEYS["PLANS"]) or {}
    return {"success": True, "data": plans.get(usecase_id)}


def save_ninety_day_plan(ctx, plan_data):
    plans = ctx.store.read(STORAGE_KEYS["PLANS"]) or {}
    plans[plan_data.get("usecaseId")] = plan_data
    ctx.store.write(STORAGE_KEYS["PLANS"], plans)
    return {"success": True, "message": "90-day plan saved"}


# RACI


def get_raci_entries(ctx, project_id):
    raci = ctx.store.read(STORAGE_KEYS["RACI"]) or {}
    return {"success": True, "data": raci.get(project_id) or []}


def save_raci_entries(ctx, project_id, entries):
    """Replace the project's whole RACI list."""
    raci = ctx.store.read(STORAGE_KEYS["RACI"]) or {}
    raci[project_id] = entries
    ctx.store.write(STORAGE_KEYS["RACI"], raci)
    return {"success": True, "message": "RACI entries saved"}


# Value tracking


def get_values(ctx, project_id):
    values = ctx.store.read(STORAGE_KEYS["VALUES"]) or {}
    return {"success": True, "data": values.get(project_id) or []}


def save_value(ctx, value_data):
    """Replace the project's value record for the same use case, or append."""
    values = ctx.store.read(STORAGE_KEYS["VALUES"]) or {}
    project_values = values.setdefault(value_data.get("projectId"), [])

    idx = next(
        (
            i
            for i, v in enumerate(project_values)
            if v.get("usecaseId") == value_data.get("usecaseId")
        ),
        -1,
    )
    if idx == -1:
        project_values.append(value_data)
    else:
        project_values[idx] = value_data

    ctx.store.write(STORAGE_KEYS["VALUES"], values)
    return {"success": True, "message": "Value saved"}


# Documents


def generate_proposal(ctx, project_id):
    """Pretend to build the proposal document. Nothing is persisted."""
    fake_url = PROPOSAL_URL_TEMPLATE.format(project_id=project_id)
    ctx.notify(
        "[Mock] Proposal generated!\n"
        "In production, this would create a Google Doc.\n\n"
        f"Mock URL: {fake_url}"
    )
    return {"success": True, "data": {"documentUrl": fake_url}}


# Utility


def initialize_sheets(ctx):
    ctx.store.reset()
    return {"success": True, "message": "Storage initialized"}


def get_current_user(ctx):
    return {"success": True, "data": {"email": ctx.user_email}}
