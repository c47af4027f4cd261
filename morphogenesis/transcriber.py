"""
morphogenesis/transcriber.py - Turn genome text into symbol and morphogen counts
"""
from dataclasses import dataclass, field
from typing import Dict

from .alphabet import (ALPHABET, CODE_MORPHOGENS, MORPHOGENS, STEMS,
                       STEM_TOP, STOP)


def _empty_histogram() -> Dict[str, float]:
    return {symbol: 0 for symbol in ALPHABET}


def _empty_stems() -> Dict[str, Dict[str, float]]:
    return {stem: {m: 0 for m in MORPHOGENS} for stem in STEMS}


@dataclass
class Transcript:
    """Counts produced by one transcription pass"""
    histogram: Dict[str, float] = field(default_factory=_empty_histogram)
    stems: Dict[str, Dict[str, float]] = field(default_factory=_empty_stems)


def transcribe(genome: str, start_sequence: str) -> Transcript:
    """Scan every segment that follows an occurrence of ``start_sequence``.

    Text before the first occurrence is ignored. Within a segment the target
    stem starts at top; stem symbols retarget the following morphogens and
    the stop promoter ends the segment. Counts from all segments are summed.
    """
    transcript = Transcript()
    if not start_sequence:
        return transcript

    for segment in genome.split(start_sequence)[1:]:
        target = STEM_TOP
        for symbol in segment:
            if symbol not in transcript.histogram:
                continue
            transcript.histogram[symbol] += 1
            if symbol == STOP:
                break
            if symbol in STEMS:
                target = symbol
            elif symbol in CODE_MORPHOGENS:
                transcript.stems[target][symbol] += 1

    return transcript
