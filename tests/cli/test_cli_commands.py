# tests/cli/test_cli_commands.py
"""
Unit tests for the ecssd Command-Line Interface (CLI).
"""

import json
from unittest.mock import AsyncMock, MagicMock

import pytest
from aws_fakes import make_container, make_ec2_instance, make_task, make_task_definition
from typer.testing import CliRunner

from ecssd import __version__
from ecssd.cli import app
from ecssd.core.aws_client import AwsClients
from ecssd.core.exceptions import PublishError
from ecssd.models.outcome import Outcome

runner = CliRunner()


@pytest.fixture
def mock_clients(mocker, fake_aws):
    """Patches the process-wide AWS clients with fakes for a one-container cluster."""
    ecs, ec2 = fake_aws(
        instances={"arn:ci/1": "i-1"},
        tasks={"arn:ci/1": [make_task("arn:task/1", "arn:td/web:3", [make_container("app")])]},
        task_definitions={
            "arn:td/web:3": make_task_definition(
                "arn:td/web:3", "web", 3, "bridge", {"app": {"PROMETHEUS_SCRAPE_PORT": "9100"}}
            )
        },
        ec2_instances={"i-1": [make_ec2_instance(ip="172.31.0.9")]},
    )
    clients = AwsClients(ecs=ecs, ec2=ec2)
    mocker.patch("ecssd.core.factory.get_aws_clients", return_value=clients)
    return clients


def test_version():
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert __version__ in result.stdout


def test_run_writes_file(mock_clients, tmp_path):
    out = tmp_path / "ecs.json"

    result = runner.invoke(app, ["run", "--output", str(out)])

    assert result.exit_code == 0, result.output
    assert "Wrote 1 targets" in result.stdout
    document = json.loads(out.read_text(encoding="utf-8"))
    assert document[0]["targets"] == ["172.31.0.9:9100"]
    assert document[0]["labels"]["TaskRevision"] == "3"


def test_run_dry_run_prints_document(mock_clients, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    result = runner.invoke(app, ["run", "--dry-run"])

    assert result.exit_code == 0, result.output
    assert "172.31.0.9:9100" in result.stdout
    assert "__metrics_path__: /metrics" in result.stdout
    assert not (tmp_path / "ecs_file_sd.yml").exists()


def test_run_missing_cluster_exits_with_error(monkeypatch):
    monkeypatch.delenv("ECS_CLUSTER")

    result = runner.invoke(app, ["run"])

    assert result.exit_code == 1


def test_run_aborted_discovery_exits_with_error(mock_clients, mocker, tmp_path):
    mocker.patch("ecssd.core.assembler.TargetAssembler.assemble", return_value=Outcome.abort("api down"))

    result = runner.invoke(app, ["run", "--output", str(tmp_path / "out.yml")])

    assert result.exit_code == 1
    assert not (tmp_path / "out.yml").exists()


def test_run_unknown_log_level_exits_with_error(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "verbose")

    result = runner.invoke(app, ["run", "--dry-run"])

    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)


def test_start_rejects_malformed_interval(monkeypatch):
    monkeypatch.setenv("SCRAPE_INTERVAL", "two minutes")

    result = runner.invoke(app, ["start"])

    assert result.exit_code == 1


def test_start_with_zero_interval_runs_once(mock_clients, tmp_path, monkeypatch):
    out = tmp_path / "ecs_file_sd.yml"
    monkeypatch.setenv("SCRAPE_INTERVAL", "0")
    monkeypatch.setenv("ECS_SD_OUTPUT_FILE", str(out))

    result = runner.invoke(app, ["start"])

    assert result.exit_code == 0, result.output
    assert out.exists()


def test_start_exits_on_publish_failure(mocker, monkeypatch):
    monkeypatch.setenv("SCRAPE_INTERVAL", "30")
    service = MagicMock()
    service.run_once = AsyncMock(side_effect=PublishError("read-only file system"))
    service.run_once.__name__ = "run_once"
    mocker.patch("ecssd.cli.start.build_service", return_value=service)

    result = runner.invoke(app, ["start"])

    assert result.exit_code == 1
    service.run_once.assert_awaited_once()
