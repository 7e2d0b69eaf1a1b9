"""
Film grammar and tone vocabulary used when reasoning about shot construction.

Static reference data plus two lookups: tone word -> technical parameters, and
narrative beat -> suggested shot type / camera movement.
"""

from __future__ import annotations

from typing import Dict, Tuple

FILM_GRAMMAR: Dict[str, Dict[str, object]] = {
    "shot_types": {
        "extreme wide": {"narrative": "establish scale, show isolation", "emotional": "awe, context"},
        "wide": {"narrative": "establish location, relationships", "emotional": "orientation"},
        "medium wide": {"narrative": "action in context", "emotional": "balance"},
        "medium": {"narrative": "dialogue, interaction", "emotional": "neutral, conversational"},
        "medium close": {"narrative": "focus on expression", "emotional": "engagement"},
        "close-up": {"narrative": "emphasize emotion/detail", "emotional": "intimacy, intensity"},
        "extreme close-up": {"narrative": "isolate detail", "emotional": "tension, significance"},
    },
    "camera_movement": {
        "static": {"energy": "low", "use": "establishing, dialogue, product beauty"},
        "pan": {"energy": "medium", "use": "reveals space, follows action"},
        "tilt": {"energy": "medium", "use": "reveals scale, vertical movement"},
        "dolly": {"energy": "medium-high", "use": "following action, building tension"},
        "push in": {"energy": "building", "use": "increasing intensity, realization"},
        "pull out": {"energy": "releasing", "use": "endings, revelations"},
        "tracking": {"energy": "high", "use": "following subject, urgency"},
        "handheld": {"energy": "high", "use": "action, authenticity"},
    },
    "lighting_setups": {
        "high key": {"contrast": "low", "mood": "upbeat, commercial, clean"},
        "low key": {"contrast": "high", "mood": "moody, dramatic, mysterious"},
        "natural": {"contrast": "varies", "mood": "authentic, documentary"},
        "rembrandt": {"contrast": "medium", "mood": "classic, dignified"},
        "backlit": {"contrast": "high", "mood": "ethereal, dramatic separation"},
    },
    "color_temperature": {
        "2700K": "warm amber, candlelight, intimacy",
        "3200K": "warm tungsten, indoor cozy",
        "4500K": "neutral, balanced indoor",
        "5600K": "daylight, neutral outdoor",
        "6500K": "cool blue, overcast, clinical",
    },
}

TONE_TRANSLATIONS: Dict[str, str] = {
    "whimsical": "playful camera movements, bright saturated colors, slight wide-angle distortion, bouncy timing",
    "moody": "low-key lighting, lifted blacks, desaturated palette except accent colors, slower camera movements",
    "energetic": "dynamic camera movement, quick cuts, high contrast, saturated colors, dutch angles",
    "elegant": "smooth slow camera movements, shallow depth of field, soft diffused lighting, muted luxury palette",
    "raw": "handheld camera, available light, high grain, documentary style, imperfect framing",
    "dreamy": "soft focus edges, diffused lighting, pastel palette, slow motion, lens flares",
    "intense": "tight framing, high contrast, desaturated, fast push-ins, shallow DOF",
    "warm": "golden hour lighting, tungsten color temperature, soft shadows, earth tone palette",
    "clinical": "high-key lighting, cool color temperature, sharp focus, symmetrical framing",
    "nostalgic": "film grain, slightly desaturated, warm color cast, vintage lens characteristics",
    "luxurious": "rich blacks, selective focus, metallic accents, slow elegant movement, diffused highlights",
    "playful": "bright colors, dynamic angles, quick movements, slight exaggeration in scale",
}

# (keywords, shot type, movement, rationale), checked in order; first match wins.
_BEAT_RULES: Tuple[Tuple[Tuple[str, ...], str, str, str], ...] = (
    (("establish", "intro", "open"), "wide", "static or slow pan",
     "Wide shots establish context and orient the viewer"),
    (("reveal", "discover"), "medium to close-up", "push in or crane reveal",
     "Movement toward subject builds anticipation for reveal"),
    (("action", "dynamic"), "medium wide", "tracking or handheld",
     "Shows action in context with energetic camera work"),
    (("emotion", "reaction", "moment"), "close-up", "static or subtle push",
     "Close framing emphasizes emotional content"),
    (("product", "hero", "beauty"), "medium close to close-up", "slow dolly or static",
     "Controlled movement showcases product with production value"),
    (("end", "resolve", "conclude"), "medium to wide", "pull out or static",
     "Pulling back releases tension and provides closure"),
)

_DEFAULT_SUGGESTION = {
    "shot_type": "medium",
    "movement": "context-dependent",
    "rationale": "Default neutral framing - specify narrative intent for better suggestion",
}


def translate_tone(tone: str) -> str:
    """Technical parameters for a tone word, or the word itself if unknown."""
    return TONE_TRANSLATIONS.get(tone.strip().lower(), tone)


def suggest_film_grammar(narrative_beat: str) -> Dict[str, str]:
    beat = narrative_beat.lower()
    for keywords, shot_type, movement, rationale in _BEAT_RULES:
        if any(word in beat for word in keywords):
            return {"shot_type": shot_type, "movement": movement, "rationale": rationale}
    return dict(_DEFAULT_SUGGESTION)


__all__ = ["FILM_GRAMMAR", "TONE_TRANSLATIONS", "translate_tone", "suggest_film_grammar"]
