"""Instruction text compilation for the retro photo transform.

The generation service receives one text part alongside the uploaded image(s).
That text is assembled here from three pieces:

    [Composition clause]   (two-image requests only)
    [Crop clause]          (always: strict 3:2, focused on the main subject)
    [Retro filter]         (fixed film-emulation template with a date stamp)

Composition Clause
------------------
With a second image the request first asks the model to merge the two
pictures. When the user typed a composition instruction it is quoted
verbatim; when the instruction is empty or whitespace-only a generic
"creatively blend" clause is used instead, so blank text is never echoed.

Retro Filter Templates
----------------------
The filter wording is a configuration constant rather than logic. Two
variants ship:

- ``detailed``: the full seven-point 1980s point-and-shoot description.
  Kept byte-for-byte stable because the service's output style is tuned to it.
- ``short``: a compact single-paragraph version.

Both carry a ``{date_stamp}`` placeholder for the orange date overlay.

Usage
-----
::

    stamp = format_date_stamp(date.today())
    prompt = build_prompt(True, "sunset beach", stamp)
"""

from __future__ import annotations

from datetime import date

RETRO_FILTER_DETAILED = (
    "The image must be authentically transformed to look like a photo taken with a typical "
    "1980s point-and-shoot 35mm film camera. The goal is a nostalgic, film-like quality that "
    "feels like a real memory. Key characteristics to apply:\n"
    "1. **Direct On-Camera Flash:** Emulate the harsh, direct look of a built-in camera flash. "
    "This should create sharp-edged shadows directly behind subjects, slightly flatten the "
    "scene's depth, and make surfaces facing the camera bright.\n"
    "2. **Imperfect Focus & Motion:** The image should be slightly blurry. This can be achieved "
    "through a gentle softness typical of consumer-grade plastic lenses AND a subtle motion "
    "blur, as if from a slight handshake during a slow shutter exposure. The focus should not "
    "be perfectly crisp.\n"
    "3. **Film Grain:** Add a prominent, natural-looking film grain, characteristic of high-ASA "
    "film like Kodak Gold 400 or Fujicolor Superia 400. The grain should be visible but not "
    "overwhelming.\n"
    "4. **Color Palette:** Introduce subtle, warm color shifts. Colors should have a rich, "
    "slightly saturated filmic look, with a gentle lean towards magenta in the shadows and a "
    "warm yellow/golden cast in the highlights. Avoid a heavily washed-out or faded "
    "appearance.\n"
    "5. **Dynamic Range:** Emulate the limited dynamic range of film, with slightly crushed "
    "blacks (less detail in dark areas) and soft, bloomed highlights that are not sharply "
    "clipped.\n"
    "6. **Lens Artifacts:** Introduce subtle chromatic aberration (slight color fringing on "
    "high-contrast edges) and a mild, natural vignetting (darkening of the corners). "
    "Occasional, minor light leaks (a soft red or orange flare near the edge of the frame) "
    "can be added for authenticity, but they should not dominate the image.\n"
    "7. **Date Stamp:** In the bottom right corner, add a classic, slightly pixelated orange "
    "or yellow digital date stamp showing this date: {date_stamp}.\n"
    "The final result should have that special 'kick' of authenticity – make it look like "
    "a real, treasured snapshot discovered in a dusty photo album from 1986."
)

RETRO_FILTER_SHORT = (
    "Make it look like a photo taken with a 1980s point-and-shoot film camera: harsh direct "
    "flash with flash falloff, slight blur, visible film grain, warm slightly saturated "
    "colors, subtle chromatic aberration and vignetting, and an orange digital date stamp "
    "in the bottom right corner showing {date_stamp}."
)

RETRO_FILTER_TEMPLATES: dict[str, str] = {
    "detailed": RETRO_FILTER_DETAILED,
    "short": RETRO_FILTER_SHORT,
}

_BLEND_CLAUSE = "First, creatively blend these two images into a single, cohesive scene."
_COMPOSE_CLAUSE = (
    'First, take these two images and compose them into a single scene based on this '
    'description: "{instruction}".'
)
_COMPOSITE_CROP_CLAUSE = (
    "Second, crop the resulting composite image to a strict 3:2 aspect ratio, focusing on "
    "the main subject. Finally, apply this transformation to the cropped 3:2 image: "
)
_SINGLE_CROP_CLAUSE = (
    "First, crop this image to a strict 3:2 aspect ratio, focusing on the main subject. "
    "Then, apply this transformation to the cropped 3:2 image: "
)


def format_date_stamp(day: date, year: str = "86") -> str:
    """Format the date overlay text, e.g. ``'86 03 07``.

    The month and day come from ``day``; the year is fixed so every photo
    reads as if it was taken in the same summer.
    """
    return f"'{year} {day.month:02d} {day.day:02d}"


def resolve_retro_filter(style: str) -> str:
    """Return the retro filter template registered under ``style``.

    Raises:
        KeyError: If no template is registered under that name
    """
    try:
        return RETRO_FILTER_TEMPLATES[style]
    except KeyError:
        available = ", ".join(sorted(RETRO_FILTER_TEMPLATES))
        raise KeyError(f"Unknown retro filter style '{style}'. Available: {available}") from None


def build_prompt(
    has_secondary: bool,
    instruction_text: str,
    date_stamp: str,
    *,
    retro_filter: str | None = None,
) -> str:
    """Compile the instruction string sent to the generation service.

    Args:
        has_secondary: Whether a second image accompanies the primary one.
        instruction_text: Free-text composition instruction. Only used when
            ``has_secondary`` is true; empty or whitespace-only text selects
            the generic blend clause.
        date_stamp: Literal text for the date overlay (see
            :func:`format_date_stamp`).
        retro_filter: Filter template containing a ``{date_stamp}``
            placeholder. Defaults to :data:`RETRO_FILTER_DETAILED`.

    Returns:
        The complete instruction text. Deterministic for the same inputs.
    """
    template = RETRO_FILTER_DETAILED if retro_filter is None else retro_filter
    filter_text = template.replace("{date_stamp}", date_stamp)

    if not has_secondary:
        return f"{_SINGLE_CROP_CLAUSE}{filter_text}"

    # Blankness is judged on the trimmed text, but the user's wording is
    # quoted exactly as typed.
    if instruction_text and instruction_text.strip():
        composition = _COMPOSE_CLAUSE.format(instruction=instruction_text)
    else:
        composition = _BLEND_CLAUSE

    return f"{composition} {_COMPOSITE_CROP_CLAUSE}{filter_text}"
