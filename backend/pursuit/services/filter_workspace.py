"""Filter Workspace — draft/applied criteria orchestration around the pure core.

Invariants:
    - Draft and applied criteria are replaced wholesale, never mutated in place
    - Applied criteria are persisted (last-filters key) only when an apply completes
    - Apply is blocked while the draft ceiling range is invalid (CeilingValidationError)
    - Apply runs through LatestOnlyInvoker: a newer apply supersedes a pending one
    - Reset puts draft and applied back to defaults through the same apply path
    - The core never touches the PreferenceStore; this module does all IO

Design Decisions:
    - One workspace per process, like the single-user browser tab it replaces
      (deliberate module-level singleton, same pattern as db_manager)
    - today and the apply delay are injected callables so tests pin time and skip latency
    - A share link (filters query param) overrides applied criteria for one results
      request without touching the workspace
"""

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from datetime import date

from pursuit.core.application import Application
from pursuit.core.criteria import Criteria, default_criteria, has_active_filters
from pursuit.core.criteria_codec import (
    DecodeFailure, criteria_changed, decode_criteria, encode_criteria,
    resolve_initial_criteria, share_query,
)
from pursuit.core.domain_types import (
    DEFAULT_SORT, DEFAULT_VIEW_MODE, ApplicationId, SortOption, ViewMode,
)
from pursuit.core.errors import (
    ApplySupersededError, CeilingValidationError, ErrorContext,
    PresetNotFoundError, PresetUnreadableError, ResourceNotFoundError,
)
from pursuit.core.highlight_terms import highlight_terms
from pursuit.core.merge_criteria import (
    clone_criteria, merge_criteria, with_keyword, without_keyword,
)
from pursuit.core.progress_stats import compute_progress_stats
from pursuit.core.rank_applications import visible_applications
from pursuit.core.repository_protocols import ApplicationRepository, PreferenceStore
from pursuit.core.validate_ceiling import validate_ceiling
from pursuit.services.delayed_apply import InvocationOutcome, LatestOnlyInvoker

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PreferenceKeys:
    """Opaque storage keys under one prefix."""
    prefix: str = "pursuit"

    @property
    def last_filters(self) -> str:
        return f"{self.prefix}:lastFilters"

    @property
    def preset(self) -> str:
        return f"{self.prefix}:preset"

    @property
    def view_mode(self) -> str:
        return f"{self.prefix}:viewMode"


@dataclass
class ResultsView:
    """Everything a results page renders for one request."""
    applications: list[Application]
    criteria: Criteria
    sort: SortOption
    search: str
    highlight_terms: list[str]
    stats: dict = field(default_factory=dict)

    @property
    def total(self) -> int:
        return len(self.applications)


def _parse_view_mode(raw: str | None) -> ViewMode:
    try:
        return ViewMode(raw) if raw else DEFAULT_VIEW_MODE
    except ValueError:
        return DEFAULT_VIEW_MODE


class FilterWorkspace:
    """Draft vs applied criteria, presets and view mode for one user."""

    def __init__(
        self,
        store: PreferenceStore,
        repository: ApplicationRepository,
        keys: PreferenceKeys | None = None,
        apply_delay: Callable[[], float] = lambda: 0.0,
        today: Callable[[], date] = date.today,
        invoker: LatestOnlyInvoker | None = None,
    ):
        self._store = store
        self._repository = repository
        self._keys = keys or PreferenceKeys()
        self._apply_delay = apply_delay
        self._today = today
        self._invoker = invoker or LatestOnlyInvoker()
        self.draft: Criteria = default_criteria()
        self.applied: Criteria = default_criteria()
        self.view_mode: ViewMode = DEFAULT_VIEW_MODE
        self.has_preset: bool = False

    # ─── Startup ─────────────────────────────────────────────────

    async def load(self, search: str | None = None) -> None:
        """Rehydrate from a share-link query (first) or the stored last-applied criteria."""
        stored = await self._store.get(self._keys.last_filters)
        if stored and isinstance(decode_criteria(stored), DecodeFailure):
            logger.warning(
                "Stored criteria unreadable, using defaults",
                extra={"storage_key": self._keys.last_filters},
            )
        initial = resolve_initial_criteria(search, stored)
        self.draft = clone_criteria(initial)
        self.applied = clone_criteria(initial)
        self.view_mode = _parse_view_mode(await self._store.get(self._keys.view_mode))
        self.has_preset = bool(await self._store.get(self._keys.preset))

    # ─── Draft edits (no persistence) ────────────────────────────

    def replace_draft(self, criteria: Criteria) -> Criteria:
        self.draft = clone_criteria(criteria)
        return self.draft

    def patch_draft(self, patch: Mapping[str, object]) -> Criteria:
        self.draft = merge_criteria(self.draft, patch)
        return self.draft

    def add_keyword(self, raw: str) -> Criteria:
        self.draft = with_keyword(self.draft, raw)
        return self.draft

    def remove_keyword(self, raw: str) -> Criteria:
        self.draft = without_keyword(self.draft, raw)
        return self.draft

    @property
    def ceiling_error(self) -> str | None:
        return validate_ceiling(self.draft.ceiling_range)

    @property
    def changed(self) -> bool:
        return criteria_changed(self.draft, self.applied)

    def snapshot(self) -> dict:
        return {
            "draft": clone_criteria(self.draft),
            "applied": clone_criteria(self.applied),
            "draft_encoded": encode_criteria(self.draft),
            "applied_encoded": encode_criteria(self.applied),
            "changed": self.changed,
            "ceiling_error": self.ceiling_error,
            "has_active_filters": has_active_filters(self.applied),
            "has_preset": self.has_preset,
            "view_mode": self.view_mode,
            "share_query": share_query(self.applied),
        }

    # ─── Apply / reset ───────────────────────────────────────────

    async def _commit(self, candidate: Criteria) -> None:
        self.applied = candidate
        await self._store.set(self._keys.last_filters, encode_criteria(candidate))

    async def _apply(self, candidate: Criteria) -> Criteria:
        error = validate_ceiling(candidate.ceiling_range)
        if error:
            raise CeilingValidationError(error)
        delay = self._apply_delay()
        outcome = await self._invoker.run(lambda: self._commit(candidate), delay)
        if outcome is InvocationOutcome.SUPERSEDED:
            logger.warning("Apply superseded before its delay elapsed")
            raise ApplySupersededError()
        logger.info(
            "Criteria applied",
            extra={
                "storage_key": self._keys.last_filters,
                "delay_ms": round(delay * 1000),
            },
        )
        return clone_criteria(self.applied)

    async def apply(self) -> Criteria:
        """Apply the current draft (after the simulated latency)."""
        return await self._apply(clone_criteria(self.draft))

    async def reset(self) -> Criteria:
        """Clear draft and applied criteria."""
        self.draft = default_criteria()
        logger.info("Criteria reset")
        return await self._apply(default_criteria())

    # ─── Presets / view mode ─────────────────────────────────────

    async def save_preset(self) -> str:
        encoded = encode_criteria(self.draft)
        await self._store.set(self._keys.preset, encoded)
        self.has_preset = True
        logger.info("Preset saved", extra={"storage_key": self._keys.preset})
        return encoded

    async def load_preset(self) -> Criteria:
        """Replace the draft with the saved preset and apply it."""
        ctx = ErrorContext(storage_key=self._keys.preset)
        raw = await self._store.get(self._keys.preset)
        if not raw:
            raise PresetNotFoundError(ctx)
        parsed = decode_criteria(raw)
        if isinstance(parsed, DecodeFailure):
            logger.warning(
                f"Preset unreadable: {parsed.reason}",
                extra={"storage_key": self._keys.preset},
            )
            raise PresetUnreadableError(parsed.reason, ctx)
        self.draft = clone_criteria(parsed)
        logger.info("Preset loaded", extra={"storage_key": self._keys.preset})
        return await self._apply(clone_criteria(parsed))

    async def set_view_mode(self, mode: ViewMode) -> ViewMode:
        self.view_mode = mode
        await self._store.set(self._keys.view_mode, mode.value)
        logger.info(f"View mode set to {mode.value}")
        return mode

    # ─── Results ─────────────────────────────────────────────────

    def criteria_for_request(self, filters_param: str | None) -> Criteria:
        """Share-link criteria when the filters parameter decodes, else applied."""
        if filters_param is None:
            return clone_criteria(self.applied)
        decoded = decode_criteria(filters_param)
        if isinstance(decoded, DecodeFailure):
            logger.warning(f"Ignoring unreadable filters parameter: {decoded.reason}")
            return clone_criteria(self.applied)
        return decoded

    async def results(
        self,
        sort: SortOption = DEFAULT_SORT,
        search_term: str | None = None,
        filters_param: str | None = None,
    ) -> ResultsView:
        records = await self._repository.list_all()
        criteria = self.criteria_for_request(filters_param)
        visible = visible_applications(
            records, criteria, search_term, sort, self._today(),
        )
        logger.debug(
            "Results computed",
            extra={"sort": sort.value, "match_count": len(visible)},
        )
        return ResultsView(
            applications=visible,
            criteria=criteria,
            sort=sort,
            search=search_term or "",
            highlight_terms=highlight_terms(criteria.keywords, search_term),
            stats=compute_progress_stats(visible),
        )

    async def get_application(self, application_id: str) -> Application:
        record = await self._repository.get_by_id(ApplicationId(application_id))
        if record is None:
            raise ResourceNotFoundError(
                "Application", application_id,
                ErrorContext(application_id=application_id),
            )
        return record

    async def mark_submitted(self, application_id: str) -> Application:
        record = await self.get_application(application_id)
        updated = record.with_submitted()
        await self._repository.save(updated)
        logger.info("Application marked submitted", extra={"application_id": application_id})
        return updated


# Singleton (initialized on startup)
_workspace: FilterWorkspace | None = None


def init_workspace(workspace: FilterWorkspace) -> FilterWorkspace:
    global _workspace
    _workspace = workspace
    return workspace


def get_workspace() -> FilterWorkspace:
    """FastAPI dependency for the process-wide workspace."""
    if _workspace is None:
        raise RuntimeError("Workspace not initialized")
    return _workspace
