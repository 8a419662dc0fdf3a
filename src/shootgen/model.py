# model.py
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional


class CloudProvider(str, Enum):
    """Target infrastructure a shoot is created on."""
    AWS = "aws"
    GCP = "gcp"
    AZURE = "azure"
    ALICLOUD = "alicloud"
    OPENSTACK = "openstack"

    def __str__(self) -> str:
        return self.value


class ConfigType(str, Enum):
    ENV = "env"
    FILE = "file"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ConfigElement:
    """A single typed key/value entry handed to a step."""
    type: ConfigType
    name: str
    value: str


def env(name: str, value: str) -> ConfigElement:
    """Create an environment-variable config element."""
    return ConfigElement(type=ConfigType.ENV, name=name, value=value)


@dataclass(frozen=True)
class StepDefinition:
    name: str
    config: List[ConfigElement] = field(default_factory=list)


@dataclass(frozen=True)
class DAGStep:
    """
    A named unit of work for the testrun DAG.

    `depends_on` holds the names of steps that must run BEFORE this one.

    Frozen only at the top level: `depends_on` and `definition.config` are
    plain lists owned by whoever received the step. Builders never share
    them between steps or calls.
    """
    name: str
    definition: StepDefinition
    depends_on: List[str] = field(default_factory=list)
    use_global_artifacts: bool = False
    artifacts_from: str = ""
    annotations: Optional[Dict[str, str]] = None


@dataclass(frozen=True)
class CreateShootConfig:
    """
    User inputs for a create-shoot step.

    `allow_privileged_containers` is tri-state: None leaves the setting out
    of the generated config entirely.
    """
    shoot_name: str
    namespace: str
    k8s_version: str
    allow_privileged_containers: Optional[bool] = None
    shoot_annotations: Dict[str, str] = field(default_factory=dict)
