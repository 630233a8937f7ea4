import logging
import os

from flask import Flask, jsonify, request

from overpay_calc import config
from overpay_calc.formatter import dual_ledger_to_dict, journey_to_dict
from overpay_calc.journey import calculate_dual_ledger_journey, calculate_repayment_journey

logger = logging.getLogger(__name__)

app = Flask(__name__)
app.config["PREVIEW_ROWS"] = int(os.environ.get("OVERPAY_CALC_PREVIEW_ROWS", config.SCHEDULE_PREVIEW_ROWS))


def _payload() -> dict:
    """Read the request body as JSON, falling back to form fields."""
    data = request.get_json(silent=True)
    if isinstance(data, dict):
        return data
    return request.form.to_dict()


def _optional(data: dict, key: str):
    value = data.get(key)
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    return value


def _show_full_schedule(data: dict) -> bool:
    return str(data.get("show_full_schedule", "")).lower() in ("1", "true", "yes")


def _truncate(block: dict, rows: int) -> None:
    schedule = block.get("schedule")
    if schedule is None or len(schedule) <= rows:
        return
    block["truncated"] = len(schedule) - rows
    block["schedule"] = schedule[:rows]


def _error(exc: Exception):
    return jsonify({"error": str(exc)}), 400


@app.post("/api/journey")
def journey():
    data = _payload()
    try:
        result = calculate_repayment_journey(
            data.get("outstanding_balance"),
            data.get("remaining_term_months"),
            data.get("apr_percent"),
            data.get("monthly_overpayment", 0),
            expected_annual_return_percent=_optional(data, "expected_annual_return_percent"),
        )
    except ValueError as exc:
        logger.info("Rejected journey request: %s", exc)
        return _error(exc)

    body = journey_to_dict(result)
    if not _show_full_schedule(data):
        rows = app.config["PREVIEW_ROWS"]
        _truncate(body["baseline"], rows)
        _truncate(body["with_overpay"], rows)
    return jsonify(body)


@app.post("/api/compare")
def compare():
    data = _payload()
    try:
        result = calculate_dual_ledger_journey(
            data.get("outstanding_balance"),
            data.get("remaining_term_months"),
            data.get("apr_percent"),
            data.get("monthly_overpayment", 0),
            data.get("expected_annual_return_percent", 0),
            current_monthly_payment=_optional(data, "current_monthly_payment"),
        )
    except ValueError as exc:
        logger.info("Rejected comparison request: %s", exc)
        return _error(exc)

    body = dual_ledger_to_dict(result)
    if not _show_full_schedule(data):
        rows = app.config["PREVIEW_ROWS"]
        _truncate(body["baseline"], rows)
        _truncate(body["with_overpay"], rows)
        # the fair-comparison ledgers are returned in full
    return jsonify(body)


if __name__ == "__main__":
    print("Starting overpay calculator API...")
    app.run(host="0.0.0.0", port=8710, debug=True)
