"""Allocation constants.

Every allocator, validator and phase builder imports its tunables from here.
"""

# Phase bucketing: effective days are split into at most this many phases
PHASE_COUNT = 4

PHASE_CONFIGS: tuple[tuple[str, str], ...] = (
    ("Início", "🌱"),
    ("Ramp", "📈"),
    ("Pico", "🚀"),
    ("Final", "⭐"),
)

# Intensity bounds; values outside are clamped, never rejected
MIN_INTENSITY = 0.0
MAX_INTENSITY = 1.0
