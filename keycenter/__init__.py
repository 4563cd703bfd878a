"""
keycenter - locate a chord's key center on the Circle of Fifths.

A chord detector names chords with a sharps-only root and a quality in words
(``"D# Minor"``, ``"G Dominant 7"``). The Circle of Fifths is written the way
musicians write it, with flats on the left-hand side and enharmonic twins at
the bottom (F#/Gb, Db/C#). keycenter reconciles the two spellings and tells a
host application which of the twelve circle positions to highlight.

- **Locate.** ``locate({"name": "C Minor"})`` returns ``Found(index=9)``, the
  Eb/Cm position. Minor qualities search the inner ring, everything else the
  outer ring.
- **Normalise.** ``normalise("Bb")`` returns ``"A#"``, the host's spelling.
- **Highlight.** ``active_keys({"name": "C Major"})`` returns the key center
  and its neighbours (F, C, G) as segment identifiers.

Positions are fixed and clockwise from C: C=0, G=1, D=2, … F=11.

Minimal example:

    ```python
    import keycenter

    keycenter.locate_index({"name": "D# Minor"})   # → 6
    keycenter.locate_index({"name": "H Major"})    # → -1
    ```

Package-level exports: ``locate``, ``locate_index``, ``active_keys``,
``normalise``, ``Found``, ``NotFound``, ``NOT_FOUND``, ``CIRCLE_OF_FIFTHS``.
"""

import keycenter.circle
import keycenter.locator
import keycenter.notes


locate = keycenter.locator.locate
locate_index = keycenter.locator.locate_index
active_keys = keycenter.locator.active_keys
normalise = keycenter.notes.normalise
Found = keycenter.locator.Found
NotFound = keycenter.locator.NotFound
NOT_FOUND = keycenter.locator.NOT_FOUND
CIRCLE_OF_FIFTHS = keycenter.circle.CIRCLE_OF_FIFTHS
