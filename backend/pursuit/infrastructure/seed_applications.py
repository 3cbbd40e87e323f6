"""Demo Seed — ten sample opportunities inserted into an empty database.

Invariants:
    - Seeding only happens when the applications table is empty (idempotent on restart)
    - Records go through the repository, never raw SQL
"""

import logging
from datetime import date

from pursuit.core.application import Application
from pursuit.core.domain_types import ApplicationStatus
from pursuit.infrastructure.application_repository import SqlApplicationRepository

logger = logging.getLogger(__name__)

DEMO_APPLICATIONS: tuple[Application, ...] = (
    Application(
        id="RFP-001", title="Network Modernization for Regional Offices",
        organization="GSA", category="541512", vehicle="GSA MAS",
        due_date=date(2025, 10, 30), status=ApplicationStatus.DRAFT,
        percent_complete=35, fit_score=78, ceiling=2_500_000,
        tags=frozenset({"8(a)", "WOSB"}), keywords=("network", "modernization"),
        summary="Modernize regional office infrastructure with secure, redundant "
                "networking fabric and zero-downtime migration plan.",
    ),
    Application(
        id="RFP-002", title="Cloud Migration and Security Hardening",
        organization="USDA", category="541519", vehicle="Alliant 2",
        due_date=date(2025, 11, 12), status=ApplicationStatus.READY,
        percent_complete=60, fit_score=84, ceiling=4_800_000,
        tags=frozenset({"SB"}), keywords=("cloud", "security", "migration"),
        summary="Enterprise data center exit effort migrating legacy workloads into "
                "FedRAMP High cloud landing zones with hardened baselines.",
    ),
    Application(
        id="RFP-003", title="AI-enabled Help Desk Pilot",
        organization="DOE", category="541511", vehicle="GSA MAS",
        due_date=date(2025, 10, 20), status=ApplicationStatus.SUBMITTED,
        percent_complete=100, fit_score=71, ceiling=900_000,
        tags=frozenset({"SDVOSB"}), keywords=("AI", "help desk"),
        summary="Pilot intelligent ticket triage with multi-channel intake, "
                "knowledge graph integration, and agent assist capabilities.",
    ),
    Application(
        id="RFP-004", title="Data Warehouse Optimization",
        organization="HHS", category="541512", vehicle="CIO-SP3",
        due_date=date(2025, 11, 5), status=ApplicationStatus.READY,
        percent_complete=75, fit_score=88, ceiling=3_200_000,
        tags=frozenset({"SB", "HUBZone"}), keywords=("data", "warehouse", "optimization"),
        summary="Consolidate fragmented data marts, improve ELT pipelines, and deploy "
                "adaptive governance for cross-agency analytics.",
    ),
    Application(
        id="RFP-005", title="Contact Center Modernization",
        organization="VA", category="517311", vehicle="GSA MAS",
        due_date=date(2025, 10, 25), status=ApplicationStatus.DRAFT,
        percent_complete=20, fit_score=65, ceiling=1_500_000,
        tags=frozenset({"VOSB"}), keywords=("contact center", "telephony"),
        summary="Replace legacy telephony, integrate CRM tooling, and deploy "
                "omnichannel self-service features for veteran outreach.",
    ),
    Application(
        id="RFP-006", title="Zero Trust Architecture Pilot",
        organization="DHS", category="541513", vehicle="Alliant 2",
        due_date=date(2025, 12, 1), status=ApplicationStatus.DRAFT,
        percent_complete=10, fit_score=82, ceiling=5_200_000,
        tags=frozenset({"SB"}), keywords=("zero trust", "ztaa", "security"),
        summary="Design and implement zero trust reference architecture with "
                "continuous verification and adaptive access policies.",
    ),
    Application(
        id="RFP-007", title="SaaS Licensing & Optimization",
        organization="DOC", category="541519", vehicle="GSA MAS",
        due_date=date(2025, 10, 18), status=ApplicationStatus.AWARDED,
        percent_complete=100, fit_score=69, ceiling=600_000,
        tags=frozenset({"WOSB"}), keywords=("saas", "finops"),
        summary="Centralize SaaS spend management with catalog rationalization, "
                "usage telemetry, and savings benchmarks.",
    ),
    Application(
        id="RFP-008", title="Unified Endpoint Management",
        organization="DOD", category="541512", vehicle="CIO-SP3",
        due_date=date(2025, 11, 20), status=ApplicationStatus.LOST,
        percent_complete=100, fit_score=61, ceiling=4_100_000,
        tags=frozenset({"SB"}), keywords=("uems", "device"),
        summary="Deploy unified endpoint security and compliance tooling with "
                "automated posture remediation and reporting dashboards.",
    ),
    Application(
        id="RFP-009", title="Geospatial Analytics Platform",
        organization="NOAA", category="541511", vehicle="GSA MAS",
        due_date=date(2025, 10, 28), status=ApplicationStatus.READY,
        percent_complete=70, fit_score=86, ceiling=2_800_000,
        tags=frozenset({"HUBZone"}), keywords=("geospatial", "gis"),
        summary="Build cloud-native geospatial platform enabling near-real-time "
                "analytics, visualization, and data sharing.",
    ),
    Application(
        id="RFP-010", title="Identity & Access Modernization",
        organization="SSA", category="541512", vehicle="Alliant 2",
        due_date=date(2025, 11, 8), status=ApplicationStatus.SUBMITTED,
        percent_complete=100, fit_score=79, ceiling=3_600_000,
        tags=frozenset({"SB", "8(a)"}), keywords=("iam", "identity", "sso"),
        summary="Modernize IAM stack with passwordless authentication, lifecycle "
                "automation, and FedRAMP-compliant governance.",
    ),
)


async def seed_if_empty(repository: SqlApplicationRepository) -> int:
    """Insert the demo records when no applications exist. Returns rows inserted."""
    if await repository.count():
        return 0
    for application in DEMO_APPLICATIONS:
        await repository.save(application)
    logger.info(f"Seeded {len(DEMO_APPLICATIONS)} demo applications")
    return len(DEMO_APPLICATIONS)
