"""SQL Application Repository — ApplicationRepository port over the applications table.

Invariants:
    - Rows convert to frozen core Application records on the way out
    - list_all returns records in id order (the ranker supplies the user-visible order)
    - save upserts by id
"""

from sqlalchemy import func, select

from pursuit.core.application import Application
from pursuit.core.domain_types import ApplicationId, ApplicationStatus
from pursuit.infrastructure.database import DatabaseSessionManager
from pursuit.models.application import ApplicationRow


def row_to_application(row: ApplicationRow) -> Application:
    return Application(
        id=row.id,
        title=row.title,
        organization=row.organization,
        category=row.category,
        vehicle=row.vehicle,
        due_date=row.due_date,
        status=ApplicationStatus(row.status),
        percent_complete=row.percent_complete,
        fit_score=row.fit_score,
        ceiling=row.ceiling,
        tags=frozenset(row.tags or []),
        keywords=tuple(row.keywords or []),
        summary=row.summary,
    )


def _copy_into_row(application: Application, row: ApplicationRow) -> None:
    row.title = application.title
    row.organization = application.organization
    row.category = application.category
    row.vehicle = application.vehicle
    row.due_date = application.due_date
    row.status = application.status.value
    row.percent_complete = application.percent_complete
    row.fit_score = application.fit_score
    row.ceiling = application.ceiling
    row.tags = sorted(application.tags)
    row.keywords = list(application.keywords)
    row.summary = application.summary


class SqlApplicationRepository:
    """Application records stored in SQL."""

    def __init__(self, manager: DatabaseSessionManager):
        self._manager = manager

    async def list_all(self) -> list[Application]:
        async with self._manager.session() as db:
            result = await db.execute(
                select(ApplicationRow).order_by(ApplicationRow.id),
            )
            return [row_to_application(r) for r in result.scalars().all()]

    async def get_by_id(self, application_id: ApplicationId) -> Application | None:
        async with self._manager.session() as db:
            row = await db.get(ApplicationRow, application_id)
            return row_to_application(row) if row else None

    async def save(self, application: Application) -> None:
        async with self._manager.session() as db:
            row = await db.get(ApplicationRow, application.id)
            if row is None:
                row = ApplicationRow(id=application.id)
                db.add(row)
            _copy_into_row(application, row)
            await db.commit()

    async def count(self) -> int:
        async with self._manager.session() as db:
            result = await db.execute(
                select(func.count()).select_from(ApplicationRow),
            )
            return result.scalar_one()
