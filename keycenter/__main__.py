import argparse
import logging
import sys
import typing

import keycenter.circle
import keycenter.config
import keycenter.locator


logger = logging.getLogger(__name__)


def main (argv: typing.Optional[typing.List[str]] = None) -> int:

	"""
	Resolve chord names given on the command line and print their circle positions.
	"""

	parser = argparse.ArgumentParser(prog="keycenter", description="Locate chord key centers on the Circle of Fifths")
	parser.add_argument("names", nargs="+", metavar="NAME", help="Chord name, e.g. \"D# Minor\"")
	parser.add_argument("--config", default=keycenter.config.DEFAULT_CONFIG_PATH, help=f"YAML config file (default: {keycenter.config.DEFAULT_CONFIG_PATH})")
	parser.add_argument("--raw", action="store_true", help="Match chord roots verbatim, without re-spelling flats as sharps")
	parser.add_argument("--span", type=int, default=None, help="Neighbours to highlight either side of the key center")
	args = parser.parse_args(argv)

	logging.basicConfig(level=logging.INFO)

	config = keycenter.config.load_config(args.config)
	settings = keycenter.config.settings_from_config(config)

	logging.getLogger().setLevel(settings.log_level)

	normalise_query = settings.normalise_query and not args.raw
	span = settings.span if args.span is None else args.span

	if not 0 <= span <= keycenter.circle.CIRCLE_SIZE // 2 - 1:
		parser.error(f"--span must be 0-{keycenter.circle.CIRCLE_SIZE // 2 - 1}")

	all_found = True

	for name in args.names:

		chord = {"name": name}
		index = keycenter.locator.locate_index(chord, normalise_query=normalise_query)
		active = keycenter.locator.active_keys(chord, span=span, normalise_query=normalise_query)

		if index < 0:
			logger.info(f"No key center for {name!r}")
			all_found = False

		print(f"{name}\t{index}\t{' '.join(active.major + active.minor)}")

	return 0 if all_found else 1


if __name__ == "__main__":
	sys.exit(main())
