from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from pathlib import Path

from .attendance.snapshot_attendance_repository import SnapshotAttendanceRepository
from .core.constants import DEFAULT_SEMESTER_FEE
from .curriculum.service import CurriculumService
from .curriculum.snapshot_career_repository import SnapshotCareerRepository
from .dashboard.factory import SummaryStrategyFactory
from .dashboard.service import StudentDashboardService
from .finance.calculator.standard_calculator import StandardBalanceCalculator
from .finance.service import FinanceService
from .finance.snapshot_payment_repository import SnapshotPaymentRepository
from .grades.calculator.weighted_calculator import WeightedGradeCalculator
from .grades.service import GradeReportService
from .grades.snapshot_grade_repository import SnapshotGradeRepository
from .store.snapshot import SnapshotConfig, SnapshotStore
from .students.snapshot_student_repository import SnapshotStudentRepository


@dataclass(frozen=True)
class Container:
    store: SnapshotStore

    students_repo: SnapshotStudentRepository
    grades_repo: SnapshotGradeRepository
    attendance_repo: SnapshotAttendanceRepository
    careers_repo: SnapshotCareerRepository
    payments_repo: SnapshotPaymentRepository

    grade_report_service: GradeReportService
    curriculum_service: CurriculumService
    finance_service: FinanceService
    dashboard_service: StudentDashboardService


def build_container(*, snapshot_path: str | Path | None = None, store: SnapshotStore | None = None, semester_fee=DEFAULT_SEMESTER_FEE) -> Container:
    if store is None:
        store = SnapshotStore.get_instance(SnapshotConfig(path=Path(snapshot_path or "data/snapshot.json")))

    students_repo = SnapshotStudentRepository(store)
    grades_repo = SnapshotGradeRepository(store)
    attendance_repo = SnapshotAttendanceRepository(store)
    careers_repo = SnapshotCareerRepository(store)
    payments_repo = SnapshotPaymentRepository(store)

    grade_report_service = GradeReportService(grades_repo, calculator=WeightedGradeCalculator())
    curriculum_service = CurriculumService(careers_repo, students_repo)
    finance_service = FinanceService(payments_repo, calculator=StandardBalanceCalculator(Decimal(str(semester_fee))))
    dashboard_service = StudentDashboardService(
        students_repo,
        attendance_repo,
        grades=grade_report_service,
        curriculum=curriculum_service,
        finance=finance_service,
        strategy_factory=SummaryStrategyFactory(),
    )

    return Container(
        store=store,
        students_repo=students_repo,
        grades_repo=grades_repo,
        attendance_repo=attendance_repo,
        careers_repo=careers_repo,
        payments_repo=payments_repo,
        grade_report_service=grade_report_service,
        curriculum_service=curriculum_service,
        finance_service=finance_service,
        dashboard_service=dashboard_service,
    )
