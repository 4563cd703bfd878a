"""YAML configuration for the key-center resolver.

A configuration file is optional. When present it may set:

```yaml
locator:
  normalise_query: true
  span: 1
logging:
  level: INFO
```
"""

import dataclasses
import logging
import os
import typing

import yaml

import keycenter.circle


logger = logging.getLogger(__name__)


DEFAULT_CONFIG_PATH = "keycenter.yaml"

LOG_LEVELS: typing.Tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclasses.dataclass(frozen=True)
class LocatorSettings:

	"""
	Resolver settings read from configuration.

	Attributes:
		normalise_query: Re-spell chord roots in sharps before lookup.
		span: Neighbours either side of the key center to highlight.
		log_level: Name of the logging level for the command line.
	"""

	normalise_query: bool = True
	span: int = 1
	log_level: str = "INFO"


def load_config (config_path: str = DEFAULT_CONFIG_PATH) -> dict:

	"""
	Load configuration from a YAML file, or return an empty dict if it is missing.
	"""

	if not os.path.exists(config_path):
		logger.warning(f"Config file {config_path} not found. Using defaults.")
		return {}

	with open(config_path, 'r') as f:
		data = yaml.safe_load(f)

	if data is None:
		return {}

	if not isinstance(data, dict):
		raise ValueError(f"Config file {config_path} must contain a mapping, got {type(data).__name__}")

	return data


def settings_from_config (config: typing.Dict[str, typing.Any]) -> LocatorSettings:

	"""Build validated :class:`LocatorSettings` from a loaded config dict.

	Missing sections and keys fall back to the defaults.

	Raises:
		ValueError: If a value has the wrong type or is out of range.
	"""

	locator_section = config.get('locator') or {}
	logging_section = config.get('logging') or {}

	for section_name, section in (('locator', locator_section), ('logging', logging_section)):
		if not isinstance(section, dict):
			raise ValueError(f"{section_name} must be a mapping, got {type(section).__name__}")

	normalise_query = locator_section.get('normalise_query', True)
	span = locator_section.get('span', 1)
	log_level = logging_section.get('level', "INFO")

	if not isinstance(normalise_query, bool):
		raise ValueError(f"locator.normalise_query must be true or false, got {normalise_query!r}")

	max_span = keycenter.circle.CIRCLE_SIZE // 2 - 1

	# bool is a subclass of int.
	if isinstance(span, bool) or not isinstance(span, int) or not 0 <= span <= max_span:
		raise ValueError(f"locator.span must be an integer 0-{max_span}, got {span!r}")

	if not isinstance(log_level, str) or log_level.upper() not in LOG_LEVELS:
		raise ValueError(f"Unknown logging.level: {log_level!r}. Available: {', '.join(LOG_LEVELS)}")

	return LocatorSettings(normalise_query=normalise_query, span=span, log_level=log_level.upper())
