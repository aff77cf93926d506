import pytest

from schoolcup.controller import TeamListError, TournamentController
from schoolcup.models import Score


def _first_match(ctl, competition=None):
    return ctl.state.competition(competition).matches()[0]


def _fill_scores(ctl):
    for c in ("boys", "girls"):
        cs = ctl.state.competition(c)
        cs.scores = {m.id: Score(1, 0) for m in cs.matches()}


def test_starts_from_default_and_persists_on_mutation(controller, store):
    assert controller.state.last_saved is None
    controller.set_active_competition("girls")
    reloaded = TournamentController(store)
    assert reloaded.state.active_competition == "girls"
    assert reloaded.state.last_saved is not None


def test_unknown_competition_rejected(controller):
    with pytest.raises(ValueError):
        controller.set_active_competition("mixed")


def test_record_and_clear_score(controller, store):
    m = _first_match(controller)

    parsed = controller.record_or_clear_score(m.id, "3", "1")
    assert parsed.valid
    assert controller.score_for(m.id) == Score(3, 1)
    assert TournamentController(store).score_for(m.id) == Score(3, 1)

    controller.record_or_clear_score(m.id, "", "")
    assert controller.score_for(m.id) is None
    assert TournamentController(store).score_for(m.id) is None


@pytest.mark.parametrize("home, away", [("2", ""), ("2", "x")])
def test_invalid_score_keeps_previous_value(controller, home, away):
    m = _first_match(controller)
    controller.record_or_clear_score(m.id, "1", "1")

    parsed = controller.record_or_clear_score(m.id, home, away)

    assert not parsed.valid
    assert parsed.message
    assert controller.score_for(m.id) == Score(1, 1)


def test_scores_go_to_active_competition_only(controller):
    controller.set_active_competition("girls")
    m = _first_match(controller, "girls")
    controller.record_or_clear_score(m.id, "0", "2")
    assert controller.score_for(m.id, "girls") == Score(0, 2)
    assert controller.state.competition("boys").scores == {}


def test_clear_score_button(controller):
    m = _first_match(controller)
    controller.record_or_clear_score(m.id, "4", "4")
    controller.clear_score(m.id)
    controller.clear_score(m.id)
    assert controller.score_for(m.id) is None


def test_regenerate_needs_confirmation(controller):
    _fill_scores(controller)
    assert controller.regenerate(lambda: False) is False
    assert controller.state.competition("boys").scores
    assert controller.state.last_saved is None


def test_regenerate_clears_both_competitions(controller, store):
    _fill_scores(controller)
    schedule = controller.state.competition("boys").schedule

    assert controller.regenerate(lambda: True) is True

    for c in ("boys", "girls"):
        assert controller.state.competition(c).scores == {}
    assert controller.state.competition("boys").schedule == schedule
    assert TournamentController(store).state == controller.state


def test_apply_new_team_list(controller):
    controller.set_active_competition("girls")
    _fill_scores(controller)

    applied = controller.apply_new_team_list("Alpha\n alpha\nBeta\n\nGamma\nDelta", lambda: True)

    assert applied
    assert controller.state.schools == ["Alpha", "Beta", "Gamma", "Delta"]
    for c in ("boys", "girls"):
        cs = controller.state.competition(c)
        assert cs.scores == {}
        assert len(cs.schedule) == 3
        assert {t for m in cs.matches() for t in (m.home, m.away)} == set(controller.state.schools)


def test_apply_empty_team_list_rejected(controller):
    schools = list(controller.state.schools)
    asked = []
    with pytest.raises(TeamListError):
        controller.apply_new_team_list(" \n\n", lambda: asked.append(1) or True)
    assert asked == []
    assert controller.state.schools == schools


def test_apply_declined_keeps_everything(controller):
    _fill_scores(controller)
    schools = list(controller.state.schools)
    assert controller.apply_new_team_list("A\nB", lambda: False) is False
    assert controller.state.schools == schools
    assert controller.state.competition("girls").scores


def test_single_school_gives_empty_schedules(controller):
    controller.apply_new_team_list("Only", lambda: True)
    assert controller.state.competition("boys").schedule == []
    assert controller.progress() == (0, 0)


def test_standings_and_progress(controller):
    controller.apply_new_team_list("T1\nT2", lambda: True)
    m = _first_match(controller)
    controller.record_or_clear_score(m.id, "3", "1")

    rows = controller.compute_standings()
    assert [(r.team, r.points) for r in rows] == [("T1", 3), ("T2", 0)]
    assert controller.compute_standings("girls")[0].played == 0
    assert controller.progress() == (1, 1)
    assert controller.progress("girls") == (0, 1)


def test_overlong_score_keeps_previous_value(controller):
    m = _first_match(controller)
    controller.record_or_clear_score(m.id, "2", "0")
    parsed = controller.record_or_clear_score(m.id, "9" * 5000, "1")
    assert not parsed.valid
    assert controller.score_for(m.id) == Score(2, 0)
