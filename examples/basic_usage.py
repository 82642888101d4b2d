"""Basic usage: gate error reports with the default adapters.

Configuration comes from REPORTGATE_* environment variables, e.g.:

    REPORTGATE_FEATURES=remote_logging
    REPORTGATE_OPTIONS_FILE=./options.json
"""

from reportgate import EligibilityGate, GateConfig


INSTALLED_VERSION = "9.2.0"


def send_report(report: dict[str, str]) -> None:
    """Stand-in for the real report transmitter."""
    print(f"Sending report: {report}")


report = {"message": "Undefined index: order_id", "severity": "error"}

with EligibilityGate.from_config(GateConfig.from_env(), current_version=INSTALLED_VERSION) as gate:
    if gate.is_allowed():
        send_report(report)
    else:
        decision = gate.evaluate()
        print(f"Not sending report: {decision.failed_check} ({decision.detail})")
