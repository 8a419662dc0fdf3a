# templates.py
from __future__ import annotations

from typing import Callable, Dict, List, Optional, Sequence, Tuple, Union

from .constants import (
    CREATE_SHOOT_DEFINITION,
    GEN_STEP_SUFFIX,
    ConfigAllowPrivilegedContainers,
    ConfigCloudprofileName,
    ConfigCloudproviderName,
    ConfigControlplaneProviderPath,
    ConfigControlplaneProviderPathName,
    ConfigInfrastructureProviderPath,
    ConfigInfrastructureProviderPathName,
    ConfigK8sVersionName,
    ConfigProjectNamespaceName,
    ConfigProviderTypeName,
    ConfigRegionName,
    ConfigSecretBindingName,
    ConfigSeedName,
    ConfigSeedValue,
    ConfigShootAnnotations,
    ConfigShootName,
    ConfigZoneName,
)
from .errors import UnsupportedProviderError
from .model import CloudProvider, ConfigElement, CreateShootConfig, DAGStep, StepDefinition, env

ProviderBuilder = Callable[
    [str, Sequence[str], List[ConfigElement]],
    Tuple[DAGStep, List[ConfigElement]],
]

# Shared by every generator step. A tuple, so callers always build a new list.
DEFAULT_PROVIDER_CONFIG: Tuple[ConfigElement, ...] = (
    env(ConfigControlplaneProviderPathName, ConfigControlplaneProviderPath),
    env(ConfigInfrastructureProviderPathName, ConfigInfrastructureProviderPath),
)


def marshal_map(values: Optional[Dict[str, str]]) -> str:
    """Serialize a map as `k1=v1,k2=v2` with keys in sorted order."""
    if not values:
        return ""
    return ",".join(f"{k}={values[k]}" for k in sorted(values))


def default_shoot_config(cfg: CreateShootConfig) -> List[ConfigElement]:
    """Config entries every create-shoot step gets, independent of the provider."""
    config = [
        env(ConfigShootName, cfg.shoot_name),
        env(ConfigProjectNamespaceName, cfg.namespace),
        env(ConfigK8sVersionName, cfg.k8s_version),
        env(ConfigSeedName, ConfigSeedValue),
        env(ConfigShootAnnotations, marshal_map(cfg.shoot_annotations)),
    ]

    # unset means "let the create step decide", so nothing is emitted
    if cfg.allow_privileged_containers is not None:
        config.append(
            env(ConfigAllowPrivilegedContainers, str(bool(cfg.allow_privileged_containers)).lower())
        )

    return config


# ---------------------------------------------------------------------
# Provider tables
# ---------------------------------------------------------------------

def _generator_step(
    name: str,
    provider: CloudProvider,
    dependencies: Sequence[str],
    zone: str | None,
) -> DAGStep:
    config = list(DEFAULT_PROVIDER_CONFIG)
    if zone is not None:
        config.append(env(ConfigZoneName, zone))

    return DAGStep(
        name=f"{name}{GEN_STEP_SUFFIX}",
        definition=StepDefinition(name=f"gen-provider-{provider.value}", config=config),
        depends_on=list(dependencies),
        use_global_artifacts=False,
        artifacts_from="",
        annotations=None,
    )


def _provider_config(provider: CloudProvider, region: str, zone: str | None) -> List[ConfigElement]:
    p = provider.value
    config = [
        env(ConfigCloudproviderName, p),
        env(ConfigProviderTypeName, p),
        env(ConfigCloudprofileName, p),
        env(ConfigSecretBindingName, f"core-{p}-{p}"),
        env(ConfigRegionName, region),
    ]
    if zone is not None:
        config.append(env(ConfigZoneName, zone))
    return config


def aws_shoot_config(
    name: str, dependencies: Sequence[str], cfg: List[ConfigElement]
) -> Tuple[DAGStep, List[ConfigElement]]:
    step = _generator_step(name, CloudProvider.AWS, dependencies, zone="eu-west-1b")
    return step, [*cfg, *_provider_config(CloudProvider.AWS, "eu-west-1", "eu-west-1b")]


def gcp_shoot_config(
    name: str, dependencies: Sequence[str], cfg: List[ConfigElement]
) -> Tuple[DAGStep, List[ConfigElement]]:
    step = _generator_step(name, CloudProvider.GCP, dependencies, zone="europe-west1-b")
    return step, [*cfg, *_provider_config(CloudProvider.GCP, "europe-west1", "europe-west1-b")]


def azure_shoot_config(
    name: str, dependencies: Sequence[str], cfg: List[ConfigElement]
) -> Tuple[DAGStep, List[ConfigElement]]:
    # Azure shoots are zoneless here
    step = _generator_step(name, CloudProvider.AZURE, dependencies, zone=None)
    return step, [*cfg, *_provider_config(CloudProvider.AZURE, "westeurope", None)]


PROVIDER_BUILDERS: Dict[CloudProvider, ProviderBuilder] = {
    CloudProvider.AWS: aws_shoot_config,
    CloudProvider.GCP: gcp_shoot_config,
    CloudProvider.AZURE: azure_shoot_config,
}


def supported_providers() -> List[CloudProvider]:
    return [p for p in CloudProvider if p in PROVIDER_BUILDERS]


def default_step_name(provider: CloudProvider) -> str:
    return f"create-shoot-{provider.value}"


def _resolve_provider(provider: Union[CloudProvider, str]) -> CloudProvider:
    try:
        resolved = CloudProvider(provider)
    except ValueError:
        raise UnsupportedProviderError(provider) from None
    if resolved not in PROVIDER_BUILDERS:
        raise UnsupportedProviderError(resolved)
    return resolved


# ---------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------

def step_create_shoot(
    provider: Union[CloudProvider, str],
    name: str,
    dependencies: Sequence[str],
    cfg: CreateShootConfig,
) -> Tuple[List[DAGStep], str]:
    """
    Build the generator + create-shoot steps for one provider.

    Returns:
      ([generator_step, create_step], create_step_name)

    The generator step depends on `dependencies`; the create step depends
    only on the generator step. An empty `name` falls back to
    "create-shoot-<provider>".

    Raises:
      UnsupportedProviderError: no provider table exists for `provider`.
    """
    resolved = _resolve_provider(provider)
    if not name:
        name = default_step_name(resolved)

    generator_step, step_config = PROVIDER_BUILDERS[resolved](
        name, dependencies, default_shoot_config(cfg)
    )

    create_step = DAGStep(
        name=name,
        definition=StepDefinition(name=CREATE_SHOOT_DEFINITION, config=step_config),
        depends_on=[generator_step.name],
        use_global_artifacts=False,
        artifacts_from="",
        annotations=None,
    )
    return [generator_step, create_step], name
