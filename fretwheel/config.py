"""YAML configuration.

Every key is optional; anything missing falls back to the defaults below.

```yaml
selection:
  root: C
  scale: major
fretboard:
  tuning: [E, B, G, D, A, E]
  frets: 24
highlight:
  dark_colors: [brown, blue, violet, green, purple, teal]
```
"""

import dataclasses
import logging
import os
import typing

import yaml

import fretwheel.fretboard
import fretwheel.highlight
import fretwheel.pitch_classes
import fretwheel.scales
import fretwheel.selection_state


logger = logging.getLogger(__name__)


DEFAULT_CONFIG_PATH = "fretwheel.yaml"


@dataclasses.dataclass(frozen=True)
class Settings:

	"""Validated configuration values."""

	root: str = fretwheel.selection_state.DEFAULT_ROOT
	scale_type: str = fretwheel.selection_state.DEFAULT_SCALE_TYPE
	tuning: typing.Tuple[str, ...] = fretwheel.fretboard.STANDARD_TUNING
	frets: int = fretwheel.fretboard.DEFAULT_FRETS
	dark_colors: typing.Tuple[str, ...] = fretwheel.highlight.DEFAULT_DARK_COLORS


def _section (data: typing.Dict[str, typing.Any], name: str) -> typing.Dict[str, typing.Any]:

	section = data.get(name) or {}

	if not isinstance(section, dict):
		raise ValueError(f"Config section '{name}' must be a mapping")

	return section


def _string_list (value: typing.Any, key: str) -> typing.Tuple[str, ...]:

	if not isinstance(value, list) or not value:
		raise ValueError(f"Config value '{key}' must be a non-empty list")

	return tuple(str(item) for item in value)


def parse_config (data: typing.Optional[typing.Dict[str, typing.Any]]) -> Settings:

	"""Validate a config mapping (as loaded from YAML) and build ``Settings``.

	Note spellings and scale names go through the same normalizers the rest
	of the package uses, so a typo fails here rather than at first highlight.

	Raises:
		ValueError: For malformed values (``UnknownPitchClass`` for bad note names).
	"""

	if data is None:
		return Settings()

	if not isinstance(data, dict):
		raise ValueError("Config root must be a mapping")

	defaults = Settings()
	selection = _section(data, "selection")
	fretboard = _section(data, "fretboard")
	highlight = _section(data, "highlight")

	root = str(selection.get("root", defaults.root))
	fretwheel.pitch_classes.normalize(root)

	scale_type = fretwheel.scales.scale_type_from_name(str(selection.get("scale", defaults.scale_type)))

	tuning = defaults.tuning
	if "tuning" in fretboard:
		tuning = _string_list(fretboard["tuning"], "fretboard.tuning")
		for name in tuning:
			fretwheel.pitch_classes.normalize(name)

	frets = fretboard.get("frets", defaults.frets)
	if not isinstance(frets, int) or isinstance(frets, bool) or frets < 0:
		raise ValueError(f"Config value 'fretboard.frets' must be a non-negative integer, got {frets!r}")

	dark_colors = defaults.dark_colors
	if "dark_colors" in highlight:
		dark_colors = _string_list(highlight["dark_colors"], "highlight.dark_colors")

	return Settings(
		root = root,
		scale_type = scale_type,
		tuning = tuning,
		frets = frets,
		dark_colors = dark_colors
	)


def load_config (config_path: str = DEFAULT_CONFIG_PATH) -> Settings:

	"""
	Load configuration from a YAML file, or defaults if the file does not exist.
	"""

	if not os.path.exists(config_path):
		logger.warning(f"Config file {config_path} not found. Using defaults.")
		return Settings()

	with open(config_path, 'r') as f:
		return parse_config(yaml.safe_load(f))
