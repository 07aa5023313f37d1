"""CLI entry point for chromedriver-picker."""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

import click

from chromedriver_picker import __version__
from chromedriver_picker.l1_entities.platform import Platform


@click.command()
@click.option(
    '-c',
    '--config',
    'config_path',
    default=None,
    type=click.Path(exists=True),
    help='Path to YAML config file.',
)
@click.option(
    '--chrome-version',
    default=None,
    help='Chrome version to resolve or pre-fill (e.g. 131.0.6778.140).',
)
@click.option(
    '-p',
    '--platform',
    'platform_name',
    default=None,
    type=click.Choice([p.value for p in Platform]),
    help='Platform to select (defaults to the configured default_platform).',
)
@click.option(
    '--print-url',
    is_flag=True,
    help='Print the download URL for --chrome-version and exit (no TUI).',
)
@click.option(
    '--detect',
    is_flag=True,
    help='Detect the local browser version and bitness, print them and exit (no TUI).',
)
@click.option(
    '--user-agent',
    default=None,
    help='Browser identification string used when structured detection finds nothing.',
)
@click.option('--no-ads', is_flag=True, help='Hide the advertising placeholders.')
@click.version_option(version=__version__)
def cli(config_path, chrome_version, platform_name, print_url, detect, user_agent, no_ads):
    """chromedriver-picker -- build Chrome-for-Testing chromedriver download links."""
    from chromedriver_picker.l3_interface_adapters.gateways.yaml_config_loader import (  # noqa: PLC0415 -- deferred: yaml stack not loaded on --help
        YamlConfigLoader,
    )
    from chromedriver_picker.l4_frameworks_and_drivers.infra_config import (  # noqa: PLC0415 -- deferred: not needed for --help
        InfraConfig,
        build_app_config,
    )
    from chromedriver_picker.l4_frameworks_and_drivers.logging_setup import (  # noqa: PLC0415 -- deferred: not needed for --help
        setup_file_logging,
    )

    config_loader = YamlConfigLoader()

    try:
        overrides: dict = {}
        if platform_name:
            overrides['default_platform'] = platform_name
        if user_agent is not None:
            overrides['detection'] = {'user_agent': user_agent}
        if no_ads:
            overrides['ads'] = {'enabled': False}
        raw = config_loader.load_raw(config_path, overrides=overrides if overrides else None)
        config = build_app_config(raw)
        infra = InfraConfig.model_validate(raw)
    except FileNotFoundError as e:
        click.echo(f'Error: {e}', err=True)
        sys.exit(1)

    setup_file_logging(_log_dir(infra), infra.logging.level)

    if print_url:
        _print_url(chrome_version, config.default_platform)
        return

    from chromedriver_picker.l4_frameworks_and_drivers.container import (  # noqa: PLC0415 -- deferred: gateways not loaded for --print-url
        DependencyContainer,
    )

    container = DependencyContainer(config, infra=infra)

    if detect:
        result = asyncio.run(container.controller.detect())
        click.echo(f'version: {result.version or "-"}')
        click.echo(f'bitness: {result.bitness or "-"}')
        return

    from chromedriver_picker.l4_frameworks_and_drivers.app import (  # noqa: PLC0415 -- deferred: Textual TUI not loaded for --help or --print-url
        PickerApp,
    )

    app = PickerApp(
        config=config,
        controller=container.controller,
        ad_queue=container.ad_queue,
        initial_version=(chrome_version or '').strip(),
    )
    app.run()


def _log_dir(infra) -> Path:
    from chromedriver_picker.l3_interface_adapters.gateways.paths import LOG_DIR  # noqa: PLC0415 -- deferred: platformdirs not loaded on --help

    return Path(infra.logging.directory) if infra.logging.directory else LOG_DIR


def _print_url(chrome_version: str | None, platform: Platform) -> None:
    from chromedriver_picker.l2_use_cases.resolver import Resolver  # noqa: PLC0415 -- deferred: not needed for --help

    if chrome_version is None:
        click.echo('Error: --print-url requires --chrome-version.', err=True)
        sys.exit(1)

    resolver = Resolver(platform)
    if not resolver.set_version(chrome_version):
        click.echo(
            f'Error: {chrome_version.strip()!r} is not a version like 131.0.6778.140.',
            err=True,
        )
        sys.exit(1)
    click.echo(resolver.download_target.url)
