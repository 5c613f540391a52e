"""Sport Enum."""

from __future__ import annotations

from enum import Enum


class Sport(str, Enum):
    """장소에서 지원하는 종목 (고정 어휘)."""

    FOOTBALL = "football"
    BASKETBALL = "basketball"
    TENNIS = "tennis"
    VOLLEYBALL = "volleyball"
    HANDBALL = "handball"
    RUGBY = "rugby"
    NATATION = "natation"
    RUNNING = "running"
    CYCLISME = "cyclisme"
    FITNESS = "fitness"
    MUSCULATION = "musculation"
    YOGA = "yoga"
    PILATES = "pilates"
    DANSE = "danse"
    ESCALADE = "escalade"
    BADMINTON = "badminton"
    SQUASH = "squash"
    PING_PONG = "ping-pong"
    BOXE = "boxe"
    ARTS_MARTIAUX = "arts-martiaux"
    AQUAFITNESS = "aquafitness"
    CROSSFIT = "crossfit"
    ATHLETISME = "athlétisme"
    JUDO = "judo"
    KARATE = "karaté"
    AIKIDO = "aikido"
    PLONGEE = "plongée"
    AUTRE = "autre"

    @classmethod
    def parse(cls, value: str) -> "Sport | None":
        """대소문자 무관 파싱. 어휘에 없으면 None."""
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None
