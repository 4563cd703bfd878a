import logging

import keycenter
import keycenter.chords
import keycenter.circle

logging.basicConfig(level=logging.INFO)

logger = logging.getLogger(__name__)

# Chords as a detector would report them while someone plays through a I-vi-IV-V in Eb.
detected = [
	keycenter.chords.DetectedChord(name="D# Major", root="D#", quality="major"),
	keycenter.chords.DetectedChord(name="C Minor", root="C", quality="minor"),
	keycenter.chords.DetectedChord(name="G# Major", root="G#", quality="major"),
	keycenter.chords.DetectedChord(name="A# Dominant 7", root="A#", quality="dominant_7th"),
]

for chord in detected:

	result = keycenter.locate(chord)

	if not result:
		logger.info(f"{chord.name}: no key center")
		continue

	entry = keycenter.circle.CIRCLE_OF_FIFTHS[result.index]
	active = keycenter.active_keys(chord)

	logger.info(f"{chord.name}: {entry.major} / {entry.minor} (position {result.index}), highlight {', '.join(active.major + active.minor)}")
