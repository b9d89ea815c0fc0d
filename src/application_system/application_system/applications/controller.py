from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_datetime, parse_optional_datetime
from ..common.validators import require_enum, require_positive
from ..core.enums import ApplicationStatus, ApplicationType
from ..core.exceptions import ConflictError, DomainError, NotFoundError, StoreError, ValidationError
from ..container import Container
from .model import NewApplication

_STATUS_CODES = {
    ValidationError: 400,
    NotFoundError: 404,
    ConflictError: 409,
    StoreError: 503,
}


def _error_response(e: DomainError):
    code = next((c for cls, c in _STATUS_CODES.items() if isinstance(e, cls)), 400)
    return jsonify({"error": str(e)}), code


def _json_body() -> dict:
    body = request.get_json(silent=True)
    if body is None:
        return {}
    if not isinstance(body, dict):
        raise ValidationError("Request body must be a JSON object")
    return body


def _int_arg(name: str, default: int = 0) -> int:
    raw = request.args.get(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValidationError(f"{name} must be an integer")


def register(app: Flask, container: Container) -> None:
    service = container.application_service

    @app.route("/applications", methods=["POST"], endpoint="create_application")
    def create_application():
        try:
            body = _json_body()
            new_application = NewApplication(
                title=str(body.get("title") or ""),
                employee_id=require_positive(body.get("emp_id"), "emp_id"),
                type=require_enum(ApplicationType, body.get("application_type"), "application_type"),
                start_date=parse_iso_datetime(str(body.get("started_date") or ""), "started_date"),
                end_date=parse_iso_datetime(str(body.get("ended_date") or ""), "ended_date"),
                note=body.get("note"),
            )
        except (ValidationError, TypeError, ValueError) as e:
            return jsonify({"success": False, "error": str(e)}), 400

        ok = service.create_application(new_application)
        return jsonify({"success": ok}), (201 if ok else 400)

    @app.route("/employees/<int:emp_id>/applications", methods=["GET"], endpoint="list_applications")
    def list_applications(emp_id: int):
        try:
            result = service.list_applications(
                employee_id=emp_id,
                application_type=require_enum(ApplicationType, request.args.get("type"), "type"),
                page=_int_arg("page"),
                size=_int_arg("size"),
                date_from=parse_optional_datetime(request.args.get("from"), "from"),
                date_to=parse_optional_datetime(request.args.get("to"), "to"),
            )
        except DomainError as e:
            return _error_response(e)
        return jsonify(result.to_dict())

    @app.route("/applications/<int:application_id>/status", methods=["PUT"], endpoint="update_application_status")
    def update_application_status(application_id: int):
        try:
            body = _json_body()
            service.update_application_status(
                application_id=application_id,
                status=require_enum(ApplicationStatus, body.get("status"), "status"),
            )
        except DomainError as e:
            return _error_response(e)
        return "", 204

    @app.route("/employees/<int:emp_id>/statistics/<int:year>", methods=["GET"], endpoint="yearly_statistics")
    def yearly_statistics(emp_id: int, year: int):
        try:
            stats = service.get_yearly_statistics(employee_id=emp_id, year=year)
        except DomainError as e:
            return _error_response(e)
        return jsonify(stats.to_dict())
