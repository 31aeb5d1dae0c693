"""LookupConfig helpers: opt-in environment overrides, validation and a summary table.

The application identity (bundle identifier and current version) is always
passed in by the caller. Only the lookup tuning settings listed in ENV_KEYS
can come from an environment mapping, and only when the caller asks for it.
"""

import logging
import os
from dataclasses import fields
from typing import Any, Dict, Mapping, Optional
from urllib.parse import urlparse

from rich.console import Console
from rich.table import Table

from .exceptions import InvalidRequestConfiguration
from .models import LookupConfig

logger = logging.getLogger(__name__)

# LookupConfig field -> environment variable
ENV_KEYS = {
    'lookup_url': 'APPSTORE_LOOKUP_URL',
    'country': 'APPSTORE_COUNTRY',
    'timeout': 'APPSTORE_TIMEOUT',
    'verbose': 'APPSTORE_VERBOSE',
    'patch_optional': 'APPSTORE_PATCH_OPTIONAL',
}

TRUE_VALUES = ('true', 'yes', '1', 'on')


def _parse_timeout(raw: str) -> Optional[float]:
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError:
        raise InvalidRequestConfiguration(f"{ENV_KEYS['timeout']} is not a number: {raw!r}") from None


def config_from_env(identifier: str, current_version: str,
                    environ: Optional[Mapping[str, str]] = None) -> LookupConfig:
    """Build a LookupConfig for the given identity, tuned from the environment.

    Args:
        identifier: Bundle identifier of the running application
        current_version: Installed version string
        environ: Mapping to read ENV_KEYS from (default: os.environ)

    Raises:
        InvalidRequestConfiguration: APPSTORE_TIMEOUT is not a number
    """
    env = os.environ if environ is None else environ
    overrides: Dict[str, Any] = {}

    for field_name, key in ENV_KEYS.items():
        raw = (env.get(key) or '').strip()
        if not raw:
            continue
        if field_name == 'timeout':
            overrides[field_name] = _parse_timeout(raw)
        elif field_name in ('verbose', 'patch_optional'):
            overrides[field_name] = raw.lower() in TRUE_VALUES
        else:
            overrides[field_name] = raw

    if overrides:
        logger.debug(f"Lookup settings from environment: {sorted(overrides)}")

    return LookupConfig(identifier=identifier, current_version=current_version, **overrides)


def validate_config(config: LookupConfig) -> Dict[str, Any]:
    """Check a LookupConfig before use

    Returns:
        Dictionary with 'valid', 'warnings' and 'errors'
    """
    results = {
        'valid': True,
        'warnings': [],
        'errors': [],
    }

    if not (config.identifier or '').strip():
        results['errors'].append("identifier is empty")
    if not (config.current_version or '').strip():
        results['errors'].append("current_version is empty")

    parsed = urlparse(config.lookup_url or '')
    if parsed.scheme not in ('http', 'https') or not parsed.netloc:
        results['errors'].append(f"invalid lookup_url: {config.lookup_url}")
    elif parsed.scheme != 'https':
        results['warnings'].append(f"lookup_url is not HTTPS: {config.lookup_url}")

    if config.country and (len(config.country) != 2 or not config.country.isalpha()):
        results['warnings'].append(f"non-standard country code: {config.country}")

    if config.timeout is not None and config.timeout <= 0:
        results['errors'].append(f"timeout must be positive: {config.timeout}")

    results['valid'] = not results['errors']
    return results


def show_config_summary(config: LookupConfig, console: Optional[Console] = None):
    """Print a LookupConfig as a table, with the environment variable behind each setting"""
    console = console or Console()

    table = Table(title="App Store Lookup", show_header=True, header_style="bold cyan")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")
    table.add_column("Env override", style="yellow")

    for field in fields(config):
        value = getattr(config, field.name)
        table.add_row(field.name, '-' if value is None else str(value), ENV_KEYS.get(field.name, ''))

    console.print(table)

    for warning in validate_config(config)['warnings']:
        console.print(f"[yellow]Warning: {warning}[/yellow]")
