from __future__ import annotations

import logging

import pytest
from sqlalchemy.exc import OperationalError

from skillbarter.crud import skill as skill_crud
from skillbarter.matching import MatchFinder, MatchLookupError, find_broad_matches, find_mutual_matches
from skillbarter.models.profile import Profile
from skillbarter.models.skill import Skill, UserSkill

FINDER_LOGGER = "skillbarter.matching.finder"


def _create_profile(db, user_id: str) -> Profile:
    profile = Profile(id=user_id, email=f"{user_id}@test.dev", full_name=user_id.title())
    db.add(profile)
    db.commit()
    return profile


def _create_skill(db, name: str, category: str = "General") -> Skill:
    skill = Skill(name=name, category=category)
    db.add(skill)
    db.commit()
    db.refresh(skill)
    return skill


def _link(db, user_id: str, skill: Skill, skill_type: str, level: str) -> None:
    db.add(UserSkill(user_id=user_id, skill_id=skill.id, type=skill_type, proficiency_level=level))
    db.commit()


def _connection_lost(*args, **kwargs):
    raise OperationalError("SELECT", {}, Exception("server closed the connection unexpectedly"))


@pytest.fixture
def marketplace(db_session):
    """
    me:    offers Python (advanced), Guitar (intermediate); needs Spanish (beginner)
    bob:   needs Python (beginner), offers Spanish (advanced)     -> both directions
    carol: needs Guitar (advanced), offers Spanish (beginner)     -> both directions
    dave:  offers Spanish (intermediate)                          -> provider only
    erin:  needs Python (advanced)                                -> needer only
    """
    db = db_session
    for user_id in ("me", "bob", "carol", "dave", "erin"):
        _create_profile(db, user_id)

    python = _create_skill(db, "Python", "Programming")
    guitar = _create_skill(db, "Guitar", "Music")
    spanish = _create_skill(db, "Spanish", "Languages")

    _link(db, "me", python, "offered", "advanced")
    _link(db, "me", guitar, "offered", "intermediate")
    _link(db, "me", spanish, "needed", "beginner")

    _link(db, "bob", python, "needed", "beginner")
    _link(db, "bob", spanish, "offered", "advanced")

    _link(db, "carol", guitar, "needed", "advanced")
    _link(db, "carol", spanish, "offered", "beginner")

    _link(db, "dave", spanish, "offered", "intermediate")

    _link(db, "erin", python, "needed", "advanced")

    return {"db": db, "python": python, "guitar": guitar, "spanish": spanish}


# ======================
# BROAD MATCHES
# ======================

@pytest.mark.asyncio
async def test_broad_matches_cover_either_direction(marketplace):
    results = await find_broad_matches(marketplace["db"], "me")

    scores = {r.profile.id: r.score for r in results}
    assert scores == {"bob": 100, "dave": 100, "carol": 80, "erin": 80}


@pytest.mark.asyncio
async def test_broad_matches_sorted_desc_and_unique(marketplace):
    results = await find_broad_matches(marketplace["db"], "me")

    ids = [r.profile.id for r in results]
    assert len(ids) == len(set(ids))
    assert "me" not in ids
    assert [r.score for r in results] == sorted((r.score for r in results), reverse=True)


@pytest.mark.asyncio
async def test_broad_keeps_higher_scoring_pairing(marketplace):
    results = await find_broad_matches(marketplace["db"], "me")

    carol = next(r for r in results if r.profile.id == "carol")
    # Guitar pairing scores 40 (carol is ahead of me); Spanish pairing scores 80.
    assert carol.score == 80
    assert carol.skill.name == "Spanish"
    assert carol.match_type == "needed"


@pytest.mark.asyncio
async def test_broad_result_carries_profile_and_skill(marketplace):
    results = await find_broad_matches(marketplace["db"], "me")

    erin = next(r for r in results if r.profile.id == "erin")
    assert erin.profile.full_name == "Erin"
    assert erin.skill.name == "Python"
    assert erin.skill.category == "Programming"
    assert erin.match_type == "offered"


@pytest.mark.asyncio
async def test_broad_matches_capped_at_limit(db_session):
    _create_profile(db_session, "me")
    python = _create_skill(db_session, "Python")
    spanish = _create_skill(db_session, "Spanish")
    _link(db_session, "me", python, "offered", "advanced")
    _link(db_session, "me", spanish, "needed", "beginner")

    for i in range(15):
        user_id = f"learner{i:02d}"
        _create_profile(db_session, user_id)
        _link(db_session, user_id, python, "needed", "beginner" if i % 2 else "advanced")

    results = await MatchFinder(broad_limit=12).find_broad_matches(db_session, "me")

    assert len(results) == 12
    # Seven beginners score 100 and rank ahead of the advanced learners.
    assert [r.score for r in results[:7]] == [100] * 7
    assert [r.score for r in results[7:]] == [80] * 5


def _crowded_market(db, count: int, offers_back: bool) -> None:
    """`count` learners who need my Python; optionally they also offer my needed Spanish."""
    _create_profile(db, "me")
    python = _create_skill(db, "Python")
    spanish = _create_skill(db, "Spanish")
    _link(db, "me", python, "offered", "advanced")
    _link(db, "me", spanish, "needed", "beginner")

    for i in range(count):
        user_id = f"learner{i:02d}"
        _create_profile(db, user_id)
        _link(db, user_id, python, "needed", "beginner" if i % 2 else "advanced")
        if offers_back:
            _link(db, user_id, spanish, "offered", "intermediate")


@pytest.mark.asyncio
async def test_default_finder_caps_broad_matches_at_twelve(db_session):
    _crowded_market(db_session, 15, offers_back=False)

    results = await MatchFinder().find_broad_matches(db_session, "me")

    assert len(results) == 12
    assert len({r.profile.id for r in results}) == 12
    assert [r.score for r in results] == sorted((r.score for r in results), reverse=True)


@pytest.mark.asyncio
async def test_default_finder_caps_mutual_matches_at_twelve(db_session):
    _crowded_market(db_session, 15, offers_back=True)

    results = await MatchFinder().find_mutual_matches(db_session, "me")

    assert len(results) == 12
    assert len({r.profile.id for r in results}) == 12
    assert {r.skill.name for r in results} == {"Python"}
    assert [r.score for r in results[:7]] == [100] * 7


@pytest.mark.asyncio
@pytest.mark.parametrize("missing", ["offered", "needed"])
async def test_broad_needs_both_directions_and_skips_lookups(db_session, monkeypatch, missing):
    _create_profile(db_session, "me")
    python = _create_skill(db_session, "Python")
    present = "needed" if missing == "offered" else "offered"
    _link(db_session, "me", python, present, "intermediate")

    calls = []
    monkeypatch.setattr(
        skill_crud,
        "find_counterpart_skills",
        lambda *args, **kwargs: calls.append(kwargs) or [],
    )

    assert await find_broad_matches(db_session, "me") == []
    assert calls == []


@pytest.mark.asyncio
async def test_unknown_user_has_no_matches(marketplace):
    assert await find_broad_matches(marketplace["db"], "nobody") == []
    assert await find_mutual_matches(marketplace["db"], "nobody") == []


# ======================
# MUTUAL MATCHES
# ======================

@pytest.mark.asyncio
async def test_mutual_matches_require_both_directions(marketplace):
    results = await find_mutual_matches(marketplace["db"], "me")

    assert [(r.profile.id, r.score) for r in results] == [("bob", 100), ("carol", 40)]


@pytest.mark.asyncio
async def test_mutual_match_names_my_offered_skill(marketplace):
    results = await find_mutual_matches(marketplace["db"], "me")

    by_id = {r.profile.id: r for r in results}
    assert by_id["bob"].skill.name == "Python"
    assert by_id["carol"].skill.name == "Guitar"
    assert all(r.match_type == "offered" for r in results)


@pytest.mark.asyncio
async def test_mutual_dedupes_counterparty_keeping_best(db_session):
    for user_id in ("me", "zoe"):
        _create_profile(db_session, user_id)
    python = _create_skill(db_session, "Python")
    rust = _create_skill(db_session, "Rust")
    spanish = _create_skill(db_session, "Spanish")

    _link(db_session, "me", python, "offered", "advanced")
    _link(db_session, "me", rust, "offered", "beginner")
    _link(db_session, "me", spanish, "needed", "beginner")

    _link(db_session, "zoe", python, "needed", "beginner")   # 100
    _link(db_session, "zoe", rust, "needed", "advanced")     # 40
    _link(db_session, "zoe", spanish, "offered", "advanced")

    results = await find_mutual_matches(db_session, "me")

    assert len(results) == 1
    assert results[0].score == 100
    assert results[0].skill.name == "Python"


@pytest.mark.asyncio
async def test_mutual_skips_lookups_without_needed_skills(db_session, monkeypatch):
    _create_profile(db_session, "me")
    python = _create_skill(db_session, "Python")
    _link(db_session, "me", python, "offered", "advanced")

    calls = []
    monkeypatch.setattr(skill_crud, "find_counterpart_skills", lambda *a, **k: calls.append(k) or [])
    monkeypatch.setattr(skill_crud, "user_has_skill", lambda *a, **k: calls.append(k) or False)

    assert await find_mutual_matches(db_session, "me") == []
    assert calls == []


# ======================
# READ FAILURES
# ======================

@pytest.mark.asyncio
@pytest.mark.parametrize("failing_query", ["get_user_skills", "find_counterpart_skills"])
async def test_broad_read_failure_returns_empty_and_logs_once(marketplace, monkeypatch, caplog, failing_query):
    monkeypatch.setattr(skill_crud, failing_query, _connection_lost)

    with caplog.at_level(logging.ERROR, logger=FINDER_LOGGER):
        results = await find_broad_matches(marketplace["db"], "me")

    assert results == []
    errors = [r for r in caplog.records if r.name == FINDER_LOGGER and r.levelno == logging.ERROR]
    assert len(errors) == 1


@pytest.mark.asyncio
@pytest.mark.parametrize("failing_query", ["get_user_skills", "find_counterpart_skills", "user_has_skill"])
async def test_mutual_read_failure_returns_empty_and_logs_once(marketplace, monkeypatch, caplog, failing_query):
    monkeypatch.setattr(skill_crud, failing_query, _connection_lost)

    with caplog.at_level(logging.ERROR, logger=FINDER_LOGGER):
        results = await find_mutual_matches(marketplace["db"], "me")

    assert results == []
    errors = [r for r in caplog.records if r.name == FINDER_LOGGER and r.levelno == logging.ERROR]
    assert len(errors) == 1


@pytest.mark.asyncio
async def test_collect_variants_surface_failures(marketplace, monkeypatch):
    monkeypatch.setattr(skill_crud, "find_counterpart_skills", _connection_lost)
    finder = MatchFinder()

    with pytest.raises(MatchLookupError):
        await finder.collect_broad_matches(marketplace["db"], "me")
    with pytest.raises(MatchLookupError):
        await finder.collect_mutual_matches(marketplace["db"], "me")
