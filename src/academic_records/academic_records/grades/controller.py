from __future__ import annotations

import io

from flask import Flask, jsonify, send_file

from ..container import Container
from .model import GradeStats


def _stats(s: GradeStats) -> dict:
    return {
        "average": str(s.average),
        "max": str(s.max_grade),
        "min": str(s.min_grade),
        "total": s.total,
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/api/modules/<module_name>/grade-report", endpoint="module_grade_report")
    def module_grade_report(module_name: str):
        report = container.grade_report_service.module_report(module_name)
        return jsonify(
            {
                "module": report.module_name,
                "total_students": report.total_students,
                "stats": _stats(report.stats),
                "students": [
                    {
                        "id": row.student_id,
                        "name": row.student_name,
                        "stats": _stats(row.stats),
                        "final_score": str(row.final_score),
                    }
                    for row in report.students
                ],
            }
        )

    @app.route("/api/modules/<module_name>/grade-report.xlsx", endpoint="module_grade_report_xlsx")
    def module_grade_report_xlsx(module_name: str):
        content = container.grade_report_service.export_module_report(module_name)
        return send_file(
            io.BytesIO(content),
            mimetype="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
            as_attachment=True,
            download_name=f"notas_{module_name}.xlsx",
        )
