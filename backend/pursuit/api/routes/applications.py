"""Application Routes — filtered/sorted results, single records, submission.

Invariants:
    - Results always come from the pure pipeline (filter -> quick search -> sort)
    - A `filters` query parameter (share link) overrides applied criteria for one request;
      an unreadable one falls back to the applied criteria
    - Unknown application ids return 404 RESOURCE_NOT_FOUND
"""

from fastapi import APIRouter, Depends, Query

from pursuit.core.domain_types import DEFAULT_SORT, SortOption
from pursuit.schemas.application import ApplicationResponse, ResultsResponse
from pursuit.services.filter_workspace import FilterWorkspace, get_workspace

router = APIRouter(prefix="/api/v1/applications", tags=["applications"])


@router.get("", response_model=ResultsResponse)
async def list_applications(
    sort: SortOption = Query(DEFAULT_SORT),
    q: str | None = Query(None, max_length=200),
    filters: str | None = Query(None, max_length=10_000),
    workspace: FilterWorkspace = Depends(get_workspace),
):
    """Visible applications with progress stats and highlight terms."""
    view = await workspace.results(sort=sort, search_term=q, filters_param=filters)
    return ResultsResponse.from_view(view)


@router.get("/{application_id}", response_model=ApplicationResponse)
async def get_application(
    application_id: str, workspace: FilterWorkspace = Depends(get_workspace),
):
    record = await workspace.get_application(application_id)
    return ApplicationResponse.from_application(record)


@router.post("/{application_id}/submit", response_model=ApplicationResponse)
async def mark_submitted(
    application_id: str, workspace: FilterWorkspace = Depends(get_workspace),
):
    """Mark an application Submitted at 100% completion."""
    record = await workspace.mark_submitted(application_id)
    return ApplicationResponse.from_application(record)
