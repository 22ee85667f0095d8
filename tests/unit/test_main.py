import json
import logging
from pathlib import Path

from proxy_agent.handlers import LoggingHandler
from proxy_agent.main import main
from proxy_config import EndpointFact, ServiceFact


def write_agent_config(tmp_path: Path, *sources: Path) -> Path:
    config_path = tmp_path / "agent.yaml"
    lines = ["sources:"]
    for source in sources:
        lines.append(f"  - type: file\n    path: {source}")
    config_path.write_text("\n".join(lines) + "\n")
    return config_path


def test_check_accepts_valid_sources(tmp_path: Path):
    services = tmp_path / "services.json"
    services.write_text(
        json.dumps({"Services": [{"Name": "web", "Port": 80, "Endpoints": []}]})
    )

    assert main(["--config", str(write_agent_config(tmp_path, services)), "--check"]) == 0


def test_check_reports_invalid_and_missing_sources(tmp_path: Path):
    broken = tmp_path / "broken.json"
    broken.write_text('{"Services": [')
    missing = tmp_path / "missing.json"

    config_path = write_agent_config(tmp_path, broken, missing)

    assert main(["--config", str(config_path), "--check"]) == 1


def test_logging_handler_logs_updates(caplog):
    handler = LoggingHandler()

    with caplog.at_level(logging.INFO, logger="proxy_agent.handlers"):
        handler.on_service_update([ServiceFact("web", 80)])
        handler.on_endpoints_update([EndpointFact("web", ("10.0.0.1:80",))])
        handler.on_endpoints_update([])

    assert "web:80" in caplog.text
    assert "10.0.0.1:80" in caplog.text
    assert "endpoints set to empty list" in caplog.text


def test_check_rejects_unsupported_source_type(tmp_path: Path):
    config_path = tmp_path / "agent.yaml"
    config_path.write_text("sources:\n  - type: http\n    path: /srv/services.json\n")

    assert main(["--config", str(config_path), "--check"]) == 1


def test_missing_agent_config_exits_with_error(tmp_path: Path):
    assert main(["--config", str(tmp_path / "absent.yaml"), "--check"]) == 1
