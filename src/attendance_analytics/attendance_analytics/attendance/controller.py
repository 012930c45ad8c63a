from __future__ import annotations

import logging

from flask import Flask, jsonify

from ..core.exceptions import EventStoreUnavailableError, StudentNotFoundError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/students/<int:student_id>/attendance", methods=["GET"], endpoint="student_attendance")
    def student_attendance(student_id: int):
        """Attendance dashboard data for the last window (default 90 days).

        The caller is already authenticated; `provenance` tells a measured
        summary apart from one estimated from lifetime counters.
        """
        try:
            summary = container.analytics_service.get_summary(student_id)
        except StudentNotFoundError:
            return jsonify({"success": False, "message": "Student not found"}), 404
        except EventStoreUnavailableError:
            logger.warning("Attendance store unavailable for student %s", student_id, exc_info=True)
            return jsonify({"success": False, "message": "Attendance data temporarily unavailable"}), 503
        except Exception:
            logger.exception("attendance error for student %s", student_id)
            return jsonify({"success": False, "message": "Server error"}), 500

        return jsonify({"success": True, **summary.to_dict()}), 200

    @app.route("/health", methods=["GET"], endpoint="health")
    def health():
        return jsonify({"status": "ok"}), 200
