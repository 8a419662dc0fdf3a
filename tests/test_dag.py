import pytest

from shootgen.dag import build_dag, plan, topo_levels
from shootgen.errors import DAGError
from shootgen.model import CloudProvider, DAGStep, StepDefinition
from shootgen.templates import step_create_shoot


def _step(name, *deps):
    return DAGStep(name=name, definition=StepDefinition(name="noop"), depends_on=list(deps))


def test_generator_runs_before_create(shoot_cfg):
    steps, name = step_create_shoot(CloudProvider.AWS, "", [], shoot_cfg)
    assert plan(steps) == [[f"{name}-gen"], [name]]


def test_external_dependencies_are_allowed(shoot_cfg):
    steps, _ = step_create_shoot(CloudProvider.GCP, "", ["prepare"], shoot_cfg)

    with pytest.raises(DAGError):
        build_dag(steps)

    adj, indeg = build_dag(steps, external=["prepare"])
    assert "prepare" not in adj
    assert indeg == {"create-shoot-gcp-gen": 0, "create-shoot-gcp": 1}


def test_composed_testrun(shoot_cfg):
    aws, aws_name = step_create_shoot(CloudProvider.AWS, "", ["prepare"], shoot_cfg)
    azure, azure_name = step_create_shoot(CloudProvider.AZURE, "", ["prepare"], shoot_cfg)
    steps = [_step("prepare"), *aws, *azure, _step("tests", aws_name, azure_name)]

    assert plan(steps) == [
        ["prepare"],
        ["create-shoot-aws-gen", "create-shoot-azure-gen"],
        ["create-shoot-aws", "create-shoot-azure"],
        ["tests"],
    ]


def test_duplicate_names():
    with pytest.raises(DAGError) as excinfo:
        build_dag([_step("a"), _step("a")])
    assert excinfo.value.details["duplicates"] == ["a"]


def test_missing_dependency():
    with pytest.raises(DAGError) as excinfo:
        build_dag([_step("a", "ghost")])
    assert "ghost" in excinfo.value.message


def test_cycle():
    adj, indeg = build_dag([_step("a", "b"), _step("b", "a"), _step("c")])
    with pytest.raises(DAGError) as excinfo:
        topo_levels(adj, indeg)
    assert excinfo.value.details["stuck"] == ["a", "b"]
