# serialize.py
from __future__ import annotations

import json
from typing import Any, Dict, List

from .model import ConfigElement, ConfigType, DAGStep, StepDefinition


def step_to_dict(step: DAGStep) -> Dict[str, Any]:
    """
    Convert a DAGStep to the dictionary form the testrun engine consumes.
    This is the reverse of step_from_dict().
    """
    config = [
        {"type": ce.type.value, "name": ce.name, "value": ce.value}
        for ce in step.definition.config
    ]

    return {
        "name": step.name,
        "definition": {
            "name": step.definition.name,
            "config": config,
        },
        "dependsOn": list(step.depends_on),
        "useGlobalArtifacts": step.use_global_artifacts,
        "artifactsFrom": step.artifacts_from,
        "annotations": dict(step.annotations) if step.annotations is not None else None,
    }


def step_from_dict(step_dict: Dict[str, Any]) -> DAGStep:
    definition = step_dict.get("definition") or {}
    config = [
        ConfigElement(
            type=ConfigType(ce.get("type", ConfigType.ENV.value)),
            name=ce["name"],
            value=ce.get("value", ""),
        )
        for ce in definition.get("config") or []
    ]

    annotations = step_dict.get("annotations")
    return DAGStep(
        name=step_dict["name"],
        definition=StepDefinition(name=definition.get("name", ""), config=config),
        depends_on=list(step_dict.get("dependsOn") or []),
        use_global_artifacts=bool(step_dict.get("useGlobalArtifacts", False)),
        artifacts_from=step_dict.get("artifactsFrom") or "",
        annotations=dict(annotations) if annotations is not None else None,
    )


def steps_to_json(steps: List[DAGStep], indent: int | None = 2) -> str:
    return json.dumps([step_to_dict(s) for s in steps], indent=indent)
