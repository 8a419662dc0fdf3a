# errors.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass
class ShootgenError(Exception):
    """
    Structured error with enough context for:
      - clean CLI output
      - debugging without full tracebacks
    """
    kind: str
    message: str
    details: Dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        lines = [f"{self.kind}: {self.message}"]
        for k, v in self.details.items():
            lines.append(f"{k}={v}")
        return "\n".join(lines)


class UnsupportedProviderError(ShootgenError):
    """Raised when no provider table exists for the requested cloud provider."""

    def __init__(self, provider: Any):
        super().__init__(
            kind="unsupported_provider",
            message=f"unsupported cloudprovider {provider}",
            details={"provider": str(provider)},
        )
        self.provider = provider


class DAGError(ShootgenError):
    def __init__(self, message: str, **details: Any):
        super().__init__(kind="invalid_dag", message=message, details=details)


class ConfigError(ShootgenError):
    def __init__(self, message: str, **details: Any):
        super().__init__(kind="invalid_config", message=message, details=details)
