# tests/conftest.py

from unittest.mock import MagicMock

import pytest

from aws_fakes import CLUSTER


@pytest.fixture(autouse=True)
def mock_settings_env_vars(monkeypatch):
    """
    Pytest fixture to mock environment variables for the config module.

    This fixture runs automatically for every test (`autouse=True`). It
    clears the ecssd variables and sets a predictable cluster and region so
    that the configuration never depends on the real environment.
    """
    for key in (
        "SCRAPE_INTERVAL",
        "ECS_SD_OUTPUT_FILE",
        "ECS_SD_OUTPUT_FORMAT",
        "AWS_MAX_ATTEMPTS",
        "PROMETHEUS_SCRAPE_PORT_LABEL",
        "PROMETHEUS_METRICS_PATH_LABEL",
        "PROMETHEUS_METRICS_SCHEME_LABEL",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("ECS_CLUSTER", CLUSTER)
    monkeypatch.setenv("AWS_REGION", "eu-west-1")


def make_paginator(pages_for):
    """Returns a get_paginator side effect serving pages from `pages_for(operation, kwargs)`."""

    def get_paginator(operation):
        paginator = MagicMock()
        paginator.paginate.side_effect = lambda **kwargs: pages_for(operation, kwargs)
        return paginator

    return get_paginator

@pytest.fixture
def fake_aws():
    """
    Builds MagicMock ECS and EC2 clients from plain dictionaries.

    Usage:
        ecs, ec2 = fake_aws(
            instances={"arn:ci/1": "i-1"},
            tasks={"arn:ci/1": [task_dict, ...]},
            task_definitions={"arn:td/web:1": td_dict_or_exception},
            ec2_instances={"i-1": [instance_dict, ...]},
        )
    """

    def _build(instances=None, tasks=None, task_definitions=None, ec2_instances=None):
        instances = instances or {}
        tasks = tasks or {}
        task_definitions = task_definitions or {}
        ec2_instances = ec2_instances or {}

        def pages_for(operation, kwargs):
            if operation == "list_container_instances":
                return [{"containerInstanceArns": list(instances)}]
            if operation == "list_tasks":
                task_list = tasks.get(kwargs["containerInstance"], [])
                return [{"taskArns": [t["taskArn"] for t in task_list]}]
            raise AssertionError(f"unexpected paginator {operation}")

        all_tasks = {t["taskArn"]: t for task_list in tasks.values() for t in task_list}

        def describe_task_definition(taskDefinition):
            value = task_definitions[taskDefinition]
            if isinstance(value, Exception):
                raise value
            return {"taskDefinition": value}

        ecs = MagicMock()
        ecs.get_paginator.side_effect = make_paginator(pages_for)
        ecs.describe_container_instances.side_effect = lambda cluster, containerInstances: {
            "containerInstances": [
                {"containerInstanceArn": arn, "ec2InstanceId": instances[arn]} for arn in containerInstances
            ],
            "failures": [],
        }
        ecs.describe_tasks.side_effect = lambda cluster, tasks: {
            "tasks": [all_tasks[arn] for arn in tasks],
            "failures": [],
        }
        ecs.describe_task_definition.side_effect = describe_task_definition

        ec2 = MagicMock()
        ec2.describe_instances.side_effect = lambda InstanceIds: {
            "Reservations": [{"Instances": ec2_instances.get(InstanceIds[0], [])}]
        }
        return ecs, ec2

    return _build

