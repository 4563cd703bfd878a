"""The Circle of Fifths table and segment helpers.

Defines :class:`CircleEntry` (one position on the circle, with its relative
major and minor keys) and :data:`CIRCLE_OF_FIFTHS`, the twelve positions in
clockwise order starting at C. Position numbers are stable: downstream
highlighting code relies on C=0, G=1, … F=11.

The bottom of the circle carries enharmonic twins (F#/Gb, Db/C#, and on the
minor ring G#m/Abm, D#m/Ebm, A#m/Bbm). Both spellings of a twin normalise to
the same sharps-only label, so a position can be found from either.
"""

import dataclasses
import typing

import keycenter.notes


MINOR_MARKER = "m"

CIRCLE_SIZE = 12


@dataclasses.dataclass(frozen=True)
class CircleEntry:

	"""
	One position on the Circle of Fifths.

	Attributes:
		major: Conventional spelling of the major key (e.g. ``"Db"``).
		minor: Conventional spelling of the relative minor, with the minor
			marker (e.g. ``"A#m"``).
		enharmonic_major: Alternative spelling of the major key, if any.
		enharmonic_minor: Alternative spelling of the minor key, if any.
	"""

	major: str
	minor: str
	enharmonic_major: typing.Optional[str] = None
	enharmonic_minor: typing.Optional[str] = None


	def major_tonics (self) -> typing.Tuple[str, ...]:

		"""
		Return the major tonic spellings, primary first.
		"""

		if self.enharmonic_major is None:
			return (self.major,)

		return (self.major, self.enharmonic_major)


	def minor_tonics (self) -> typing.Tuple[str, ...]:

		"""
		Return the minor tonic spellings without the minor marker, primary first.
		"""

		if self.enharmonic_minor is None:
			return (strip_minor_marker(self.minor),)

		return (strip_minor_marker(self.minor), strip_minor_marker(self.enharmonic_minor))


	def tonics (self, is_minor: bool) -> typing.Tuple[str, ...]:

		"""
		Return the tonic spellings for the minor or the major ring.
		"""

		return self.minor_tonics() if is_minor else self.major_tonics()


CIRCLE_OF_FIFTHS: typing.Tuple[CircleEntry, ...] = (
	CircleEntry(major="C", minor="Am"),
	CircleEntry(major="G", minor="Em"),
	CircleEntry(major="D", minor="Bm"),
	CircleEntry(major="A", minor="F#m"),
	CircleEntry(major="E", minor="C#m"),
	CircleEntry(major="B", minor="G#m", enharmonic_minor="Abm"),
	CircleEntry(major="F#", minor="D#m", enharmonic_major="Gb", enharmonic_minor="Ebm"),
	CircleEntry(major="Db", minor="A#m", enharmonic_major="C#", enharmonic_minor="Bbm"),
	CircleEntry(major="Ab", minor="Fm"),
	CircleEntry(major="Eb", minor="Cm"),
	CircleEntry(major="Bb", minor="Gm"),
	CircleEntry(major="F", minor="Dm"),
)


def strip_minor_marker (key_name: str) -> str:

	"""Remove the trailing minor marker from a minor key name (``"F#m"`` → ``"F#"``)."""

	if key_name.endswith(MINOR_MARKER):
		return key_name[:-len(MINOR_MARKER)]

	return key_name


def _check_index (index: int) -> None:

	if not 0 <= index < CIRCLE_SIZE:
		raise IndexError(f"Circle position {index!r} out of range. Expected 0-{CIRCLE_SIZE - 1}.")


def segment_key (index: int, is_minor: bool = False) -> str:

	"""Return the identifier of a circle segment.

	Major segments are named after their primary spelling and minor segments
	after their primary minor key, so a UI can address them directly.

	Example:
		```python
		segment_key(0)                  # → "major-C"
		segment_key(9, is_minor=True)   # → "minor-Cm"
		```
	"""

	_check_index(index)
	entry = CIRCLE_OF_FIFTHS[index]

	if is_minor:
		return f"minor-{entry.minor}"

	return f"major-{entry.major}"


def segment_root (index: int, is_minor: bool = False) -> str:

	"""Return the sharps-only root a host should select for a clicked segment.

	Parameters:
		index: Circle position (0-11).
		is_minor: Whether the click landed on the inner (minor) ring.

	Returns:
		The canonical root label, e.g. ``"D#"`` for the Eb segment.
	"""

	_check_index(index)

	return keycenter.notes.normalise(CIRCLE_OF_FIFTHS[index].tonics(is_minor)[0])


def is_selected (index: int, selected_root: typing.Optional[str]) -> bool:

	"""
	Return whether the major segment at ``index`` is the host's selected root.
	"""

	return segment_root(index) == selected_root


def neighbours (index: int, span: int = 1) -> typing.List[int]:

	"""Return the positions within ``span`` steps of ``index``, clockwise.

	The circle wraps, so the neighbours of C (0) are F (11) and G (1).

	Example:
		```python
		neighbours(0)      # → [11, 0, 1]
		neighbours(6, 2)   # → [4, 5, 6, 7, 8]
		```
	"""

	_check_index(index)

	if not 0 <= span <= CIRCLE_SIZE // 2 - 1:
		raise ValueError(f"Neighbour span {span!r} out of range. Expected 0-{CIRCLE_SIZE // 2 - 1}.")

	return [(index + offset) % CIRCLE_SIZE for offset in range(-span, span + 1)]


def validate_circle (entries: typing.Sequence[CircleEntry]) -> None:

	"""Check that a circle table is consistent.

	Every ring must hold each of the twelve pitch classes once, and the two
	spellings of an enharmonic twin must name the same pitch class.

	Raises:
		ValueError: If the table breaks either rule or names an unknown note.
	"""

	if len(entries) != CIRCLE_SIZE:
		raise ValueError(f"Circle must have {CIRCLE_SIZE} entries, got {len(entries)}")

	for is_minor in (False, True):

		ring_pcs = []

		for entry in entries:

			pcs = {keycenter.notes.note_name_to_pc(tonic) for tonic in entry.tonics(is_minor)}

			if len(pcs) != 1:
				raise ValueError(f"Enharmonic spellings of {entry!r} name different pitch classes")

			ring_pcs.append(pcs.pop())

		if sorted(ring_pcs) != list(range(CIRCLE_SIZE)):
			side = "minor" if is_minor else "major"
			raise ValueError(f"The {side} ring does not cover each pitch class once: {ring_pcs}")


validate_circle(CIRCLE_OF_FIFTHS)
