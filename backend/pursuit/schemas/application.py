"""Application Schemas — public shape of records and result pages.

Invariants:
    - tags are emitted sorted; keywords keep record order
    - title_segments re-join to the title exactly
"""

from datetime import date

from pydantic import BaseModel

from pursuit.core.application import Application
from pursuit.core.domain_types import ApplicationStatus, SortOption
from pursuit.core.highlight_terms import split_highlights
from pursuit.schemas.criteria import CriteriaResponse
from pursuit.services.filter_workspace import ResultsView


class HighlightSegment(BaseModel):
    text: str
    match: bool


class ApplicationResponse(BaseModel):
    id: str
    title: str
    organization: str
    category: str
    tags: list[str]
    vehicle: str
    due_date: date
    status: ApplicationStatus
    percent_complete: int
    fit_score: float
    ceiling: float
    keywords: list[str]
    summary: str | None = None
    title_segments: list[HighlightSegment] = []

    @classmethod
    def from_application(
        cls, application: Application, terms: list[str] | None = None,
    ) -> "ApplicationResponse":
        return cls(
            id=application.id,
            title=application.title,
            organization=application.organization,
            category=application.category,
            tags=sorted(application.tags),
            vehicle=application.vehicle,
            due_date=application.due_date,
            status=application.status,
            percent_complete=application.percent_complete,
            fit_score=application.fit_score,
            ceiling=application.ceiling,
            keywords=list(application.keywords),
            summary=application.summary,
            title_segments=[
                HighlightSegment(text=text, match=match)
                for text, match in split_highlights(application.title, terms or [])
            ],
        )


class ProgressStatsResponse(BaseModel):
    total: int
    by_status: dict[str, int]
    average_completion: int


class ResultsResponse(BaseModel):
    total: int
    sort: SortOption
    search: str
    criteria: CriteriaResponse
    highlight_terms: list[str]
    stats: ProgressStatsResponse
    applications: list[ApplicationResponse]

    @classmethod
    def from_view(cls, view: ResultsView) -> "ResultsResponse":
        return cls(
            total=view.total,
            sort=view.sort,
            search=view.search,
            criteria=CriteriaResponse.from_criteria(view.criteria),
            highlight_terms=view.highlight_terms,
            stats=ProgressStatsResponse(**view.stats),
            applications=[
                ApplicationResponse.from_application(a, view.highlight_terms)
                for a in view.applications
            ],
        )
