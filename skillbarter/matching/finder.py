# skillbarter/matching/finder.py
"""
Match Finder
Discovers counterparties whose skills complement the caller's.

Two named operations:
- broad matches: the counterparty needs something I offer OR offers
  something I need
- mutual matches: the counterparty needs something I offer AND offers
  something I need

Every read goes to the hosted database and is awaited in turn; nothing is
fanned out in parallel.
"""

import logging
from typing import Any, Callable, Dict, List, Optional, Tuple

from fastapi.concurrency import run_in_threadpool
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from skillbarter.config import settings
from skillbarter.crud import skill as skill_crud
from skillbarter.matching.compatibility import calculate_compatibility
from skillbarter.models.skill import SkillDirection, UserSkill
from skillbarter.schemas.match import MatchResult
from skillbarter.schemas.profile import ProfileSummary
from skillbarter.schemas.skill import Skill

logger = logging.getLogger(__name__)


class MatchLookupError(Exception):
    """A read from the hosted database failed while computing matches."""


class MatchFinder:
    """
    Skill-complement matching for one caller at a time.

    The `collect_*` methods raise MatchLookupError on a failed read.
    The `find_*` methods log the failure once and return an empty list.
    """

    def __init__(
        self,
        broad_limit: Optional[int] = None,
        strict_limit: Optional[int] = None,
    ):
        self.broad_limit = broad_limit if broad_limit is not None else settings.MATCH_RESULT_LIMIT
        self.strict_limit = strict_limit if strict_limit is not None else settings.STRICT_MATCH_RESULT_LIMIT

    # ======================
    # READS
    # ======================

    async def _read(self, query: Callable[..., Any], *args, **kwargs) -> Any:
        """Run one blocking query off the event loop."""
        try:
            return await run_in_threadpool(query, *args, **kwargs)
        except SQLAlchemyError as exc:
            raise MatchLookupError(str(exc)) from exc

    async def _caller_skills(self, db: Session, user_id: str) -> Tuple[List[UserSkill], List[UserSkill]]:
        user_skills = await self._read(skill_crud.get_user_skills, db, user_id)
        offered = [s for s in user_skills if s.type == SkillDirection.OFFERED.value]
        needed = [s for s in user_skills if s.type == SkillDirection.NEEDED.value]
        return offered, needed

    async def _counterparts(self, db: Session, user_id: str, skill_id: str, skill_type: SkillDirection) -> List[UserSkill]:
        return await self._read(
            skill_crud.find_counterpart_skills,
            db,
            skill_id=skill_id,
            skill_type=skill_type.value,
            exclude_user_id=user_id,
        )

    # ======================
    # RESULT ASSEMBLY
    # ======================

    @staticmethod
    def _build_result(counterpart: UserSkill, skill, score: int, match_type: SkillDirection) -> MatchResult:
        return MatchResult(
            profile=ProfileSummary.model_validate(counterpart.profile),
            skill=Skill.model_validate(skill),
            score=score,
            match_type=match_type.value,
        )

    @staticmethod
    def _keep_best(best: Dict[str, MatchResult], result: MatchResult) -> None:
        """Keep one entry per counterparty; a strictly higher score replaces it."""
        existing = best.get(result.profile.id)
        if existing is None or existing.score < result.score:
            best[result.profile.id] = result

    @staticmethod
    def _rank(best: Dict[str, MatchResult], limit: int) -> List[MatchResult]:
        ranked = sorted(best.values(), key=lambda m: m.score, reverse=True)
        return ranked[:limit]

    # ======================
    # BROAD MATCHES
    # ======================

    async def collect_broad_matches(self, db: Session, user_id: str) -> List[MatchResult]:
        """
        Counterparties who need a skill the caller offers, or offer a skill
        the caller needs.

        Args:
            db: Database session
            user_id: Caller's profile ID

        Returns:
            Up to `broad_limit` matches, best score first

        Raises:
            MatchLookupError: If any read fails
        """
        offered, needed = await self._caller_skills(db, user_id)
        if not offered or not needed:
            return []

        best: Dict[str, MatchResult] = {}

        # Users who need what I offer; I teach
        for my_skill in offered:
            needers = await self._counterparts(db, user_id, my_skill.skill_id, SkillDirection.NEEDED)
            for needer in needers:
                if needer.profile is None:
                    continue
                score = calculate_compatibility(my_skill.proficiency_level, needer.proficiency_level)
                self._keep_best(best, self._build_result(needer, needer.skill, score, SkillDirection.OFFERED))

        # Users who offer what I need; they teach
        for my_skill in needed:
            providers = await self._counterparts(db, user_id, my_skill.skill_id, SkillDirection.OFFERED)
            for provider in providers:
                if provider.profile is None:
                    continue
                score = calculate_compatibility(provider.proficiency_level, my_skill.proficiency_level)
                self._keep_best(best, self._build_result(provider, provider.skill, score, SkillDirection.NEEDED))

        return self._rank(best, self.broad_limit)

    async def find_broad_matches(self, db: Session, user_id: str) -> List[MatchResult]:
        """Broad matches, or an empty list if the lookup failed."""
        try:
            return await self.collect_broad_matches(db, user_id)
        except MatchLookupError as exc:
            logger.error("Broad match lookup failed for user %s: %s", user_id, exc)
            return []

    # ======================
    # MUTUAL (BIDIRECTIONAL) MATCHES
    # ======================

    async def collect_mutual_matches(self, db: Session, user_id: str) -> List[MatchResult]:
        """
        Counterparties who need a skill the caller offers and also offer a
        skill the caller needs.

        Issues one extra lookup per (offered, needed, candidate) triple.

        Args:
            db: Database session
            user_id: Caller's profile ID

        Returns:
            Up to `strict_limit` matches, best score first. Each entry names
            the caller's offered skill.

        Raises:
            MatchLookupError: If any read fails
        """
        offered, needed = await self._caller_skills(db, user_id)
        if not offered or not needed:
            return []

        best: Dict[str, MatchResult] = {}

        for offered_skill in offered:
            for needed_skill in needed:
                needers = await self._counterparts(db, user_id, offered_skill.skill_id, SkillDirection.NEEDED)
                for needer in needers:
                    if needer.profile is None:
                        continue
                    offers_back = await self._read(
                        skill_crud.user_has_skill,
                        db,
                        user_id=needer.user_id,
                        skill_id=needed_skill.skill_id,
                        skill_type=SkillDirection.OFFERED.value,
                    )
                    if not offers_back:
                        continue
                    score = calculate_compatibility(offered_skill.proficiency_level, needer.proficiency_level)
                    self._keep_best(
                        best,
                        self._build_result(needer, offered_skill.skill, score, SkillDirection.OFFERED),
                    )

        return self._rank(best, self.strict_limit)

    async def find_mutual_matches(self, db: Session, user_id: str) -> List[MatchResult]:
        """Mutual matches, or an empty list if the lookup failed."""
        try:
            return await self.collect_mutual_matches(db, user_id)
        except MatchLookupError as exc:
            logger.error("Mutual match lookup failed for user %s: %s", user_id, exc)
            return []


# ======================
# MODULE-LEVEL SHORTCUTS
# ======================

async def find_broad_matches(db: Session, user_id: str) -> List[MatchResult]:
    return await MatchFinder().find_broad_matches(db, user_id)


async def find_mutual_matches(db: Session, user_id: str) -> List[MatchResult]:
    return await MatchFinder().find_mutual_matches(db, user_id)
