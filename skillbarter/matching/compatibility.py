# skillbarter/matching/compatibility.py
"""
Compatibility Scoring
Scores how well a teacher's proficiency suits a learner's
"""

from typing import Optional, Union

from skillbarter.models.skill import ProficiencyLevel


LEVEL_ORDINALS = {
    ProficiencyLevel.BEGINNER.value: 1,
    ProficiencyLevel.INTERMEDIATE.value: 2,
    ProficiencyLevel.ADVANCED.value: 3,
}

# Unknown or missing levels count as beginner
DEFAULT_ORDINAL = 1

SCORE_COMFORTABLY_AHEAD = 100
SCORE_SAME_LEVEL = 80
SCORE_FAR_AHEAD = 60
SCORE_BEHIND = 40

LevelLike = Optional[Union[str, ProficiencyLevel]]


def level_ordinal(level: LevelLike) -> int:
    """Map a proficiency level name to 1 (beginner) .. 3 (advanced)."""
    if level is None:
        return DEFAULT_ORDINAL
    key = str(getattr(level, "value", level)).strip().lower()
    return LEVEL_ORDINALS.get(key, DEFAULT_ORDINAL)


def calculate_compatibility(teacher_level: LevelLike, learner_level: LevelLike) -> int:
    """
    Score a teacher/learner pairing.

    Args:
        teacher_level: Proficiency of the side offering the skill
        learner_level: Proficiency of the side needing the skill

    Returns:
        100 when the teacher is one or two levels ahead, 80 at the same
        level, 60 three levels ahead, 40 when the teacher is behind
    """
    level_diff = level_ordinal(teacher_level) - level_ordinal(learner_level)

    if 1 <= level_diff <= 2:
        return SCORE_COMFORTABLY_AHEAD
    if level_diff == 0:
        return SCORE_SAME_LEVEL
    # Unreachable while there are only three levels.
    if level_diff == 3:
        return SCORE_FAR_AHEAD
    return SCORE_BEHIND
