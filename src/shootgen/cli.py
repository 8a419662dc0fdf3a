# cli.py
from __future__ import annotations

import sys
from dataclasses import replace
from typing import Dict, Tuple

import click

from shootgen.config import load_shoot_config
from shootgen.dag import plan as plan_steps
from shootgen.errors import ShootgenError, UnsupportedProviderError
from shootgen.model import CloudProvider, CreateShootConfig
from shootgen.serialize import steps_to_json
from shootgen.templates import default_step_name, step_create_shoot, supported_providers
from shootgen.ui.console import Console, get_console, set_console


def _parse_annotations(ctx, param, values: Tuple[str, ...]) -> Dict[str, str]:
    annotations: Dict[str, str] = {}
    for item in values:
        key, sep, value = item.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"expected key=value, got {item!r}")
        annotations[key] = value
    return annotations


_SHOOT_OPTIONS = [
    click.option(
        "--provider",
        required=True,
        envvar="SHOOTGEN_PROVIDER",
        type=click.Choice([p.value for p in CloudProvider]),
        help="Cloud provider the shoot is created on",
    ),
    click.option("--name", default="", envvar="SHOOTGEN_STEP_NAME", help="Create step name (defaults to create-shoot-<provider>)"),
    click.option("--depends-on", "dependencies", multiple=True, envvar="SHOOTGEN_DEPENDS_ON", help="Upstream step the generator step depends on (repeatable)"),
    click.option("--config", "config_path", default=None, envvar="SHOOTGEN_CONFIG", type=click.Path(dir_okay=False), help="JSON file with the shoot config"),
    click.option("--shoot-name", default=None, envvar="SHOOTGEN_SHOOT_NAME", help="Name of the shoot"),
    click.option("--namespace", default=None, envvar="SHOOTGEN_NAMESPACE", help="Project namespace of the shoot"),
    click.option("--k8s-version", default=None, envvar="SHOOTGEN_K8S_VERSION", help="Kubernetes version of the shoot"),
    click.option(
        "--annotation",
        "annotations",
        multiple=True,
        envvar="SHOOTGEN_ANNOTATIONS",
        callback=_parse_annotations,
        help="Shoot annotation as key=value (repeatable)",
    ),
    click.option(
        "--allow-privileged-containers",
        type=click.BOOL,
        default=None,
        envvar="SHOOTGEN_ALLOW_PRIVILEGED_CONTAINERS",
        help="true/false; left out of the shoot config when not given",
    ),
]


def shoot_options(fn):
    """Options shared by every command that builds create-shoot steps."""
    for option in reversed(_SHOOT_OPTIONS):
        fn = option(fn)
    return fn


def _apply_overrides(
    cfg: CreateShootConfig,
    shoot_name: str | None,
    namespace: str | None,
    k8s_version: str | None,
    annotations: Dict[str, str],
    allow_privileged_containers: bool | None,
) -> CreateShootConfig:
    """Options given on the command line win over the values from --config."""
    overrides = {}
    if shoot_name:
        overrides["shoot_name"] = shoot_name
    if namespace:
        overrides["namespace"] = namespace
    if k8s_version:
        overrides["k8s_version"] = k8s_version
    if annotations:
        overrides["shoot_annotations"] = {**cfg.shoot_annotations, **annotations}
    if allow_privileged_containers is not None:
        overrides["allow_privileged_containers"] = allow_privileged_containers
    return replace(cfg, **overrides)


def _build_config(
    config_path: str | None,
    shoot_name: str | None,
    namespace: str | None,
    k8s_version: str | None,
    annotations: Dict[str, str],
    allow_privileged_containers: bool | None,
) -> CreateShootConfig:
    if config_path:
        get_console().print_debug(f"Loading shoot config from {config_path}")
        return _apply_overrides(
            load_shoot_config(config_path),
            shoot_name, namespace, k8s_version, annotations, allow_privileged_containers,
        )

    missing = [
        opt
        for opt, value in (
            ("--shoot-name", shoot_name),
            ("--namespace", namespace),
            ("--k8s-version", k8s_version),
        )
        if not value
    ]
    if missing:
        raise click.UsageError(f"Missing option(s) {', '.join(missing)} (or pass --config)")

    return CreateShootConfig(
        shoot_name=shoot_name,
        namespace=namespace,
        k8s_version=k8s_version,
        allow_privileged_containers=allow_privileged_containers,
        shoot_annotations=annotations,
    )


def _report_error(e: ShootgenError) -> None:
    console = get_console()
    suggestion = None
    if isinstance(e, UnsupportedProviderError):
        supported = ", ".join(p.value for p in supported_providers())
        suggestion = f"Supported providers: {supported}"
    console.print_error(
        e.kind,
        e.message,
        details=[f"{k}={v}" for k, v in e.details.items()] or None,
        suggestion=suggestion,
    )


def _render(provider, name, dependencies, config_path, shoot_name, namespace, k8s_version, annotations, allow_privileged_containers):
    cfg = _build_config(config_path, shoot_name, namespace, k8s_version, annotations, allow_privileged_containers)
    steps, final_name = step_create_shoot(provider, name, list(dependencies), cfg)
    get_console().print_debug(f"Built {len(steps)} step(s), final step: {final_name}")
    return steps, final_name


@click.group()
@click.option(
    "--debug",
    is_flag=True,
    default=False,
    envvar="SHOOTGEN_DEBUG",
    help="Enable debug mode (show stack traces and detailed output)",
)
def cli(debug):
    """shootgen — create-shoot step descriptors for testruns."""
    console = Console(debug=debug)
    set_console(console)


@cli.command()
@shoot_options
@click.option("--compact", is_flag=True, default=False, help="Print JSON on a single line")
def render(provider, name, dependencies, config_path, shoot_name, namespace, k8s_version, annotations, allow_privileged_containers, compact):
    """Print the generator and create-shoot steps as JSON."""
    console = get_console()
    try:
        steps, _final_name = _render(
            provider, name, dependencies, config_path, shoot_name, namespace,
            k8s_version, annotations, allow_privileged_containers,
        )
        console.print_output(steps_to_json(steps, indent=None if compact else 2))
    except ShootgenError as e:
        _report_error(e)
        sys.exit(1)
    except click.ClickException:
        raise
    except Exception as e:
        console.print_exception(e)
        sys.exit(1)


@cli.command()
@shoot_options
def plan(provider, name, dependencies, config_path, shoot_name, namespace, k8s_version, annotations, allow_privileged_containers):
    """Print the execution stages of the generated steps."""
    console = get_console()
    try:
        steps, final_name = _render(
            provider, name, dependencies, config_path, shoot_name, namespace,
            k8s_version, annotations, allow_privileged_containers,
        )
        levels = plan_steps(steps, external=dependencies)
        console.print_header(f"PLAN: {final_name}")
        if dependencies:
            console.print_info(f"Upstream: {', '.join(dependencies)}")
        for idx, level in enumerate(levels, start=1):
            console.print_plan_stage(idx, level)
    except ShootgenError as e:
        _report_error(e)
        sys.exit(1)
    except click.ClickException:
        raise
    except Exception as e:
        console.print_exception(e)
        sys.exit(1)


@cli.command()
def providers():
    """List the providers steps can be built for."""
    console = get_console()
    console.print_info("Supported providers:")
    for p in supported_providers():
        console.print_provider(p.value, default_step_name(p))


if __name__ == "__main__":
    cli()
