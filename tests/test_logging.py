import json

from invoicemath.core.logging import get_logger, setup_logging


def test_json_events_carry_service_and_logger_name(capsys):
    setup_logging("WARNING", json_logs=True, service="invoicemath", env="test")
    logger = get_logger("invoicemath.tests")

    logger.info("filtered_out")
    logger.warning("negative_amount_formatted", amount="-5.00")

    lines = [line for line in capsys.readouterr().out.splitlines() if line.strip()]
    assert len(lines) == 1
    event = json.loads(lines[0])
    assert event["event"] == "negative_amount_formatted"
    assert event["level"] == "warning"
    assert event["logger"] == "invoicemath.tests"
    assert event["service"] == "invoicemath"
    assert event["env"] == "test"
    assert "ts" in event
