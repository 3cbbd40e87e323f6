"""Workspace Routes — draft edits, apply/reset, presets and view mode.

Invariants:
    - Every response carries the full workspace state (WorkspaceResponse)
    - Draft edits never persist; only apply/reset/preset/view-mode write storage
    - Apply with an invalid ceiling range returns 400 CEILING_INVALID
    - An apply replaced by a newer one returns 409 APPLY_SUPERSEDED
"""

from fastapi import APIRouter, Depends

from pursuit.schemas.criteria import (
    CriteriaBody, CriteriaPatchBody, KeywordBody, ViewModeBody, WorkspaceResponse,
)
from pursuit.services.filter_workspace import FilterWorkspace, get_workspace

router = APIRouter(prefix="/api/v1/workspace", tags=["workspace"])


def _state(workspace: FilterWorkspace) -> WorkspaceResponse:
    return WorkspaceResponse.from_snapshot(workspace.snapshot())


@router.get("", response_model=WorkspaceResponse)
async def get_workspace_state(workspace: FilterWorkspace = Depends(get_workspace)):
    """Current draft, applied criteria and panel flags."""
    return _state(workspace)


@router.put("/draft", response_model=WorkspaceResponse)
async def replace_draft(
    body: CriteriaBody, workspace: FilterWorkspace = Depends(get_workspace),
):
    """Replace the whole draft."""
    workspace.replace_draft(body.to_criteria())
    return _state(workspace)


@router.patch("/draft", response_model=WorkspaceResponse)
async def patch_draft(
    body: CriteriaPatchBody, workspace: FilterWorkspace = Depends(get_workspace),
):
    """Replace only the draft fields present in the body."""
    workspace.patch_draft(body.to_patch())
    return _state(workspace)


@router.post("/draft/keywords", response_model=WorkspaceResponse)
async def add_keyword(
    body: KeywordBody, workspace: FilterWorkspace = Depends(get_workspace),
):
    workspace.add_keyword(body.keyword)
    return _state(workspace)


@router.delete("/draft/keywords/{keyword}", response_model=WorkspaceResponse)
async def remove_keyword(
    keyword: str, workspace: FilterWorkspace = Depends(get_workspace),
):
    workspace.remove_keyword(keyword)
    return _state(workspace)


@router.post("/apply", response_model=WorkspaceResponse)
async def apply_draft(workspace: FilterWorkspace = Depends(get_workspace)):
    """Apply the draft after the simulated latency; persists last-applied criteria."""
    await workspace.apply()
    return _state(workspace)


@router.post("/reset", response_model=WorkspaceResponse)
async def reset_criteria(workspace: FilterWorkspace = Depends(get_workspace)):
    await workspace.reset()
    return _state(workspace)


@router.post("/preset", response_model=WorkspaceResponse)
async def save_preset(workspace: FilterWorkspace = Depends(get_workspace)):
    """Save the current draft as the preset."""
    await workspace.save_preset()
    return _state(workspace)


@router.post("/preset/load", response_model=WorkspaceResponse)
async def load_preset(workspace: FilterWorkspace = Depends(get_workspace)):
    """Load the preset into the draft and apply it."""
    await workspace.load_preset()
    return _state(workspace)


@router.put("/view-mode", response_model=WorkspaceResponse)
async def set_view_mode(
    body: ViewModeBody, workspace: FilterWorkspace = Depends(get_workspace),
):
    await workspace.set_view_mode(body.view_mode)
    return _state(workspace)
