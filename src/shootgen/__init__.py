from .errors import ConfigError, DAGError, ShootgenError, UnsupportedProviderError
from .model import CloudProvider, ConfigElement, ConfigType, CreateShootConfig, DAGStep, StepDefinition
from .templates import default_shoot_config, step_create_shoot, supported_providers

__all__ = [
    "step_create_shoot",
    "default_shoot_config",
    "supported_providers",
    "CloudProvider",
    "ConfigElement",
    "ConfigType",
    "CreateShootConfig",
    "DAGStep",
    "StepDefinition",
    "ShootgenError",
    "UnsupportedProviderError",
    "DAGError",
    "ConfigError",
]
