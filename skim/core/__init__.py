"""Core reading engine — tokenizer, word formatting, pacing and playback.

WHY: The core package holds the parts of skim with real invariants:
index bounds, WPM limits, ORP placement and tick pacing. Keeping them
free of any UI import means every rule is testable with plain pytest.

HOW: tokenizer.py turns text into words, words.py truncates words and
finds their ORP, clock.py turns WPM into one-shot wake-ups, playback.py
is the state machine that owns the read position, eta.py estimates the
remaining reading time from a playback snapshot.

RULES:
- No Textual or Rich imports in this package
- PlaybackMachine is the only writer of playback state
- Commands clamp out-of-range requests; they never raise
"""
