"""Penner easing curves over a :class:`Progress`.

Every curve takes ``(progress, start, end)`` and returns the value reached at
``progress.fraction``. The shaping functions below map ``f`` in ``[0, 1]`` to
the eased ratio with ``shape(1) == 1``.

Note: at ``fraction == 0`` every curve returns ``end``, not ``start``. Callers
that need the start value at time zero must special-case it themselves.
"""
from __future__ import annotations

import math
from typing import Callable, Dict

from .progress import Progress

ShapeFn = Callable[[float], float]
EasingFn = Callable[[Progress, float, float], float]

BACK_OVERSHOOT = 1.70158
BACK_IN_OUT_FACTOR = 1.525
BOUNCE_SCALE = 7.5625
BOUNCE_DIVISOR = 2.75
ELASTIC_PERIOD = 0.3
ELASTIC_IN_OUT_PERIOD = 0.45


def interpolate(shape: ShapeFn, progress: Progress, start: float, end: float) -> float:
    f = progress.fraction
    if f > 0:
        return start + (end - start) * shape(f)
    return end


# --- shaping functions -----------------------------------------------------


def _linear(f: float) -> float:
    return f


def _sine_in(f: float) -> float:
    return 1.0 - math.cos(f * math.pi / 2.0)


def _sine_out(f: float) -> float:
    return math.sin(f * math.pi / 2.0)


def _sine_in_out(f: float) -> float:
    return (1.0 - math.cos(math.pi * f)) / 2.0


def _quadratic_in(f: float) -> float:
    return f * f


def _quadratic_out(f: float) -> float:
    return f * (2.0 - f)


def _quadratic_in_out(f: float) -> float:
    if f < 0.5:
        return 2.0 * f * f
    u = 2.0 * f - 1.0
    return (u * (2.0 - u) + 1.0) / 2.0


def _cubic_in(f: float) -> float:
    return f**3


def _cubic_out(f: float) -> float:
    return 1.0 - (1.0 - f) ** 3


def _cubic_in_out(f: float) -> float:
    if f < 0.5:
        return 4.0 * f**3
    u = 2.0 * f - 2.0
    return (u**3 + 2.0) / 2.0


def _circular_in(f: float) -> float:
    return 1.0 - math.sqrt(1.0 - f * f)


def _circular_out(f: float) -> float:
    u = f - 1.0
    return math.sqrt(1.0 - u * u)


def _circular_in_out(f: float) -> float:
    u = 2.0 * f
    if u < 1.0:
        return (1.0 - math.sqrt(1.0 - u * u)) / 2.0
    u -= 2.0
    return (math.sqrt(1.0 - u * u) + 1.0) / 2.0


def _exponential_in(f: float) -> float:
    if f == 0:
        return 0.0
    return 2.0 ** (10.0 * (f - 1.0))


def _exponential_out(f: float) -> float:
    if f == 1:
        return 1.0
    return 1.0 - 2.0 ** (-10.0 * f)


def _exponential_in_out(f: float) -> float:
    if f == 0:
        return 0.0
    if f == 1:
        return 1.0
    u = 2.0 * f - 1.0
    if f < 0.5:
        return 2.0 ** (10.0 * u) / 2.0
    return (2.0 - 2.0 ** (-10.0 * u)) / 2.0


def _back_in(f: float) -> float:
    s = BACK_OVERSHOOT
    return f * f * ((s + 1.0) * f - s)


def _back_out(f: float) -> float:
    s = BACK_OVERSHOOT
    u = f - 1.0
    return u * u * ((s + 1.0) * u + s) + 1.0


def _back_in_out(f: float) -> float:
    s = BACK_OVERSHOOT * BACK_IN_OUT_FACTOR
    u = 2.0 * f
    if u < 1.0:
        return u * u * ((s + 1.0) * u - s) / 2.0
    u -= 2.0
    return (u * u * ((s + 1.0) * u + s) + 2.0) / 2.0


def _bounce_out(f: float) -> float:
    if f < 1.0 / BOUNCE_DIVISOR:
        return BOUNCE_SCALE * f * f
    if f < 2.0 / BOUNCE_DIVISOR:
        u = f - 1.5 / BOUNCE_DIVISOR
        return BOUNCE_SCALE * u * u + 0.75
    if f < 2.5 / BOUNCE_DIVISOR:
        u = f - 2.25 / BOUNCE_DIVISOR
        return BOUNCE_SCALE * u * u + 0.9375
    u = f - 2.625 / BOUNCE_DIVISOR
    return BOUNCE_SCALE * u * u + 0.984375


def _bounce_in(f: float) -> float:
    return 1.0 - _bounce_out(1.0 - f)


def _bounce_in_out(f: float) -> float:
    if f < 0.5:
        return _bounce_in(f * 2.0) * 0.5
    return _bounce_out(f * 2.0 - 1.0) * 0.5 + 0.5


def _elastic_in(f: float) -> float:
    if f == 0 or f == 1:
        return float(f)
    p = ELASTIC_PERIOD
    s = p / 4.0
    u = f - 1.0
    return -(2.0 ** (10.0 * u)) * math.sin((u - s) * (2.0 * math.pi) / p)


def _elastic_out(f: float) -> float:
    if f == 0 or f == 1:
        return float(f)
    p = ELASTIC_PERIOD
    s = p / 4.0
    return 2.0 ** (-10.0 * f) * math.sin((f - s) * (2.0 * math.pi) / p) + 1.0


def _elastic_in_out(f: float) -> float:
    if f == 0 or f == 1:
        return float(f)
    p = ELASTIC_IN_OUT_PERIOD
    s = p / 4.0
    u = 2.0 * f - 1.0
    wave = math.sin((u - s) * (2.0 * math.pi) / p)
    if u < 0:
        return -0.5 * (2.0 ** (10.0 * u)) * wave
    return 2.0 ** (-10.0 * u) * wave * 0.5 + 1.0


# --- public curves ---------------------------------------------------------


def linear(progress: Progress, start: float, end: float) -> float:
    return interpolate(_linear, progress, start, end)


linear_in = linear
linear_out = linear
linear_in_out = linear


def sine_in(progress: Progress, start: float, end: float) -> float:
    return interpolate(_sine_in, progress, start, end)


def sine_out(progress: Progress, start: float, end: float) -> float:
    return interpolate(_sine_out, progress, start, end)


def sine_in_out(progress: Progress, start: float, end: float) -> float:
    return interpolate(_sine_in_out, progress, start, end)


def quadratic_in(progress: Progress, start: float, end: float) -> float:
    return interpolate(_quadratic_in, progress, start, end)


def quadratic_out(progress: Progress, start: float, end: float) -> float:
    return interpolate(_quadratic_out, progress, start, end)


def quadratic_in_out(progress: Progress, start: float, end: float) -> float:
    return interpolate(_quadratic_in_out, progress, start, end)


def cubic_in(progress: Progress, start: float, end: float) -> float:
    return interpolate(_cubic_in, progress, start, end)


def cubic_out(progress: Progress, start: float, end: float) -> float:
    return interpolate(_cubic_out, progress, start, end)


def cubic_in_out(progress: Progress, start: float, end: float) -> float:
    return interpolate(_cubic_in_out, progress, start, end)


def circular_in(progress: Progress, start: float, end: float) -> float:
    return interpolate(_circular_in, progress, start, end)


def circular_out(progress: Progress, start: float, end: float) -> float:
    return interpolate(_circular_out, progress, start, end)


def circular_in_out(progress: Progress, start: float, end: float) -> float:
    return interpolate(_circular_in_out, progress, start, end)


def exponential_in(progress: Progress, start: float, end: float) -> float:
    return interpolate(_exponential_in, progress, start, end)


def exponential_out(progress: Progress, start: float, end: float) -> float:
    return interpolate(_exponential_out, progress, start, end)


def exponential_in_out(progress: Progress, start: float, end: float) -> float:
    return interpolate(_exponential_in_out, progress, start, end)


def back_in(progress: Progress, start: float, end: float) -> float:
    return interpolate(_back_in, progress, start, end)


def back_out(progress: Progress, start: float, end: float) -> float:
    return interpolate(_back_out, progress, start, end)


def back_in_out(progress: Progress, start: float, end: float) -> float:
    return interpolate(_back_in_out, progress, start, end)


def bounce_in(progress: Progress, start: float, end: float) -> float:
    return interpolate(_bounce_in, progress, start, end)


def bounce_out(progress: Progress, start: float, end: float) -> float:
    return interpolate(_bounce_out, progress, start, end)


def bounce_in_out(progress: Progress, start: float, end: float) -> float:
    return interpolate(_bounce_in_out, progress, start, end)


def elastic_in(progress: Progress, start: float, end: float) -> float:
    return interpolate(_elastic_in, progress, start, end)


def elastic_out(progress: Progress, start: float, end: float) -> float:
    return interpolate(_elastic_out, progress, start, end)


def elastic_in_out(progress: Progress, start: float, end: float) -> float:
    return interpolate(_elastic_in_out, progress, start, end)


EASINGS: Dict[str, EasingFn] = {
    "linear": linear,
    "linear_in": linear_in,
    "linear_out": linear_out,
    "linear_in_out": linear_in_out,
    "sine_in": sine_in,
    "sine_out": sine_out,
    "sine_in_out": sine_in_out,
    "quadratic_in": quadratic_in,
    "quadratic_out": quadratic_out,
    "quadratic_in_out": quadratic_in_out,
    "cubic_in": cubic_in,
    "cubic_out": cubic_out,
    "cubic_in_out": cubic_in_out,
    "circular_in": circular_in,
    "circular_out": circular_out,
    "circular_in_out": circular_in_out,
    "exponential_in": exponential_in,
    "exponential_out": exponential_out,
    "exponential_in_out": exponential_in_out,
    "back_in": back_in,
    "back_out": back_out,
    "back_in_out": back_in_out,
    "bounce_in": bounce_in,
    "bounce_out": bounce_out,
    "bounce_in_out": bounce_in_out,
    "elastic_in": elastic_in,
    "elastic_out": elastic_out,
    "elastic_in_out": elastic_in_out,
}


def get_easing(name: str) -> EasingFn:
    normalized = name.strip().lower().replace("-", "_")
    try:
        return EASINGS[normalized]
    except KeyError:
        raise ValueError(f"unknown easing curve: {name!r}") from None


def ease(name: str, progress: Progress, start: float, end: float) -> float:
    return get_easing(name)(progress, start, end)


__all__ = ["EASINGS", "get_easing", "ease", "interpolate", *EASINGS]
