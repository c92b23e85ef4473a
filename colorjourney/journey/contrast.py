from typing import Optional, Union

from boundednumbers.functions import clamp

from ..types.color_types import RGBColor, LabColor, ColorTriple
from ..conversions import rgb_to_oklab, oklab_to_rgb, oklab_to_lch, lch_to_oklab
from ..utils.color_utils import delta_e, clamp_rgb
from ..utils.num_utils import normalize_hue
from .dynamics import MAX_CHROMA

MAX_ITERATIONS = 5
LIGHTNESS_SHARE = 0.5
HUE_STEP = 0.2  # radians added per iteration (~11°)
ACHROMATIC_EPSILON = 1e-5
GAMUT_ROUNDS = 3


def enforce_minimum(
    color: Union[LabColor, ColorTriple],
    reference: Union[LabColor, ColorTriple],
    min_delta_e: float,
) -> LabColor:
    """
    Push ``color`` away from ``reference`` until their ΔE reaches ``min_delta_e``.

    Each iteration first moves lightness by half the shortfall (up when the
    reference is dark, down when it is light); if that is not enough the
    hue is rotated by a growing step and chroma scaled up, capped at 0.4.

    Best effort: after ``MAX_ITERATIONS`` the last adjustment is returned,
    even if it is still short of the threshold.
    """
    current = LabColor(*color)
    reference = LabColor(*reference)
    direction = 1.0 if reference.L < 0.5 else -1.0

    for iteration in range(MAX_ITERATIONS):
        de = delta_e(current, reference)
        if de >= min_delta_e:
            break

        shortfall = min_delta_e - de
        L = float(clamp(current.L + direction * shortfall * LIGHTNESS_SHARE, 0.0, 1.0))
        current = current._replace(L=L)

        de = delta_e(current, reference)
        if de >= min_delta_e:
            break

        shortfall = min_delta_e - de
        lch = oklab_to_lch(current)
        h = normalize_hue(lch.h + HUE_STEP * iteration)
        C = lch.C
        if C > ACHROMATIC_EPSILON:
            C = min(C * (1.0 + shortfall * 0.5), MAX_CHROMA)
        current = lch_to_oklab(lch._replace(C=C, h=h))

    return current


def enforce_contrast_single_step(
    color: Union[LabColor, ColorTriple],
    reference: Union[LabColor, ColorTriple],
    min_delta_e: float,
) -> LabColor:
    """
    One-shot contrast nudge.

    Places lightness ``0.7 * min_delta_e`` past the reference (on the side
    the color already sits), then boosts chroma by 15% if that alone is
    not enough.
    """
    color = LabColor(*color)
    reference = LabColor(*reference)
    if delta_e(color, reference) >= min_delta_e:
        return color

    sign = 1.0 if color.L - reference.L >= 0 else -1.0
    adjusted = color._replace(
        L=float(clamp(reference.L + sign * min_delta_e * 0.7, 0.0, 1.0))
    )
    if delta_e(adjusted, reference) >= min_delta_e:
        return adjusted

    lch = oklab_to_lch(adjusted)
    return lch_to_oklab(lch._replace(C=float(clamp(lch.C * 1.15, 0.0, MAX_CHROMA))))


def apply_minimum_contrast(
    color: Union[RGBColor, ColorTriple],
    previous: Optional[Union[RGBColor, ColorTriple]],
    min_delta_e: float,
) -> RGBColor:
    """
    RGB front end to :func:`enforce_minimum`.

    Returns ``color`` unchanged when there is no ``previous`` color;
    otherwise the adjusted color, clamped to the RGB gamut. When the
    threshold stays out of reach the best separated candidate is returned.
    """
    if previous is None:
        return RGBColor(*color)

    prev_lab = rgb_to_oklab(previous)
    curr_lab = rgb_to_oklab(color)
    if delta_e(curr_lab, prev_lab) >= min_delta_e:
        return RGBColor(*color)

    # refine from the clamped color
    best, best_de = RGBColor(*color), delta_e(curr_lab, prev_lab)
    for _ in range(GAMUT_ROUNDS):
        adjusted = clamp_rgb(oklab_to_rgb(enforce_minimum(curr_lab, prev_lab, min_delta_e)))
        curr_lab = rgb_to_oklab(adjusted)
        de = delta_e(curr_lab, prev_lab)
        if de >= min_delta_e:
            return adjusted
        if de > best_de:
            best, best_de = adjusted, de

    return best
