from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import unique_periods
from ..container import Container
from .service import module_grades_to_ui, to_ui


def register(app: Flask, container: Container) -> None:
    @app.route("/api/students/<student_id>/dashboard", endpoint="student_dashboard")
    def student_dashboard(student_id: str):
        dashboard = container.dashboard_service.for_student(student_id)
        return jsonify(to_ui(dashboard))

    @app.route("/api/students/<student_id>/grades", endpoint="student_grades")
    def student_grades(student_id: str):
        student = container.dashboard_service.get_student(student_id)
        modules = container.grade_report_service.student_modules(student.student_id)
        return jsonify([module_grades_to_ui(g) for g in modules])

    @app.route("/api/dashboard", endpoint="dashboard_by_email")
    def dashboard_by_email():
        email = (request.args.get("email") or "").strip()
        dashboard = container.dashboard_service.for_email(email)
        return jsonify(to_ui(dashboard))

    @app.route("/api/careers/<career_name>/overview", endpoint="career_overview")
    def career_overview(career_name: str):
        items = container.curriculum_service.career_overview(career_name)
        return jsonify(
            [
                {"id": i.item_id, "name": i.name, "kind": i.kind, "status": i.status.value, "students": i.students}
                for i in items
            ]
        )

    @app.route("/api/periods", endpoint="periods")
    def periods():
        return jsonify(
            {
                "default": app.config.get("DEFAULT_PERIOD"),
                "periods": unique_periods(container.students_repo.list_all()),
            }
        )

    @app.route("/api/finance/income", endpoint="finance_income")
    def finance_income():
        return jsonify({"total_income": str(container.finance_service.total_income())})
