# config.py
from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import ConfigError
from .model import CreateShootConfig


class ShootConfigFile(BaseModel):
    """On-disk (JSON) form of a CreateShootConfig."""
    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    shoot_name: str = Field(alias="shootName", min_length=1)
    namespace: str = Field(min_length=1)
    k8s_version: str = Field(alias="k8sVersion", min_length=1)
    allow_privileged_containers: Optional[bool] = Field(default=None, alias="allowPrivilegedContainers")
    shoot_annotations: Dict[str, str] = Field(default_factory=dict, alias="shootAnnotations")

    def to_config(self) -> CreateShootConfig:
        return CreateShootConfig(
            shoot_name=self.shoot_name,
            namespace=self.namespace,
            k8s_version=self.k8s_version,
            allow_privileged_containers=self.allow_privileged_containers,
            shoot_annotations=dict(self.shoot_annotations),
        )


def load_shoot_config(path: str | Path) -> CreateShootConfig:
    """
    Load a create-shoot config from a JSON file.

    Raises:
      ConfigError: file missing or unreadable, not valid JSON, or not matching the schema
    """
    cfg_path = Path(path).expanduser()
    if not cfg_path.exists():
        raise ConfigError(f"Config file not found: {cfg_path}", path=str(cfg_path))

    try:
        text = cfg_path.read_text(encoding="utf-8")
    except (UnicodeDecodeError, OSError) as e:
        raise ConfigError(f"Config file is not readable: {cfg_path}", path=str(cfg_path), error=str(e)) from e

    try:
        raw = json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Config file is not valid JSON: {cfg_path}", path=str(cfg_path), error=str(e)) from e

    try:
        return ShootConfigFile.model_validate(raw).to_config()
    except ValidationError as e:
        errors = [f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()]
        raise ConfigError(f"Invalid shoot config: {cfg_path}", path=str(cfg_path), errors=errors) from e
