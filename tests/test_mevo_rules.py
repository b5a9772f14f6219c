"""
MeVO rule chain and path selection.
"""

import itertools

from neuro_pathways.engines.evt_pathway_engine import guideline_text as text
from neuro_pathways.engines.evt_pathway_engine.lvo_rules import LvoRules
from neuro_pathways.engines.evt_pathway_engine.mevo_rules import MevoRules
from neuro_pathways.engines.evt_pathway_engine.models import (
    InputState,
    LvoLocation,
    MevoLocation,
    MrsGroup,
    NihssGroup,
    OcclusionType,
    PathwayResult,
    Status,
    TimeWindow,
    Tri,
    Variant,
)
from neuro_pathways.engines.evt_pathway_engine.path_selector import select_protocol


def mevo_state(**overrides) -> InputState:
    """Favorable dominant-M2 case: NIHSS 6, disabling, good imaging, low technical risk."""
    values = dict(
        occlusion_type=OcclusionType.MEVO,
        mevo_location=MevoLocation.DOMINANT_M2,
        mevo_dependent=Tri.NO,
        time=TimeWindow.EARLY,
        nihss_numeric="6",
        mevo_disabling=Tri.YES,
        mevo_salvageable=Tri.YES,
        mevo_technical=Tri.YES,
    )
    values.update(overrides)
    return InputState(**values)


def test_every_mevo_state_yields_one_result():
    for loc, dep, time, score, dis, salv, tech in itertools.product(
        list(MevoLocation), list(Tri), list(TimeWindow),
        ["", "x", "2", "5", "12"], list(Tri), list(Tri), list(Tri),
    ):
        result = MevoRules.evaluate(mevo_state(
            mevo_location=loc, mevo_dependent=dep, time=time, nihss_numeric=score,
            mevo_disabling=dis, mevo_salvageable=salv, mevo_technical=tech,
        ))
        assert isinstance(result, PathwayResult)
        assert result.status.value
        assert result.reason
        assert result.eligible == (result.status == Status.EVT_REASONABLE)


def test_favorable_dominant_m2_is_evt_reasonable():
    result = MevoRules.evaluate(mevo_state())
    assert result.status == Status.EVT_REASONABLE
    assert result.eligible is True
    assert result.variant == Variant.SUCCESS
    assert result.criteria_name == "Selected MeVO"


def test_low_score_with_disabling_deficit_still_qualifies():
    result = MevoRules.evaluate(mevo_state(nihss_numeric="3"))
    assert result.status == Status.EVT_REASONABLE


def test_distal_location_is_no_benefit():
    for loc in (MevoLocation.DISTAL, MevoLocation.NONDOMINANT_M2,
                MevoLocation.ACA, MevoLocation.PCA):
        result = MevoRules.evaluate(mevo_state(mevo_location=loc))
        assert result.status == Status.AVOID_EVT
        assert "No Benefit" in result.criteria_name
        assert result.relevant_trials == ("ESCAPE-MeVO", "DISTAL")


def test_no_benefit_precedes_technical_risk():
    result = MevoRules.evaluate(mevo_state(
        mevo_location=MevoLocation.ACA, mevo_technical=Tri.NO,
    ))
    assert result.details == text.MEVO_NO_BENEFIT


def test_dependency_is_checked_first():
    result = MevoRules.evaluate(mevo_state(mevo_dependent=Tri.YES))
    assert result.status == Status.AVOID_EVT
    assert result.reason == "Baseline Dependency"


def test_non_disabling_low_score_avoids_evt():
    result = MevoRules.evaluate(mevo_state(nihss_numeric="3", mevo_disabling=Tri.NO))
    assert result.reason == "Non-disabling Deficit"

    # unparseable score is not read as zero
    result = MevoRules.evaluate(mevo_state(nihss_numeric="", mevo_disabling=Tri.NO))
    assert result.reason != "Non-disabling Deficit"


def test_unfavorable_imaging_text_follows_window():
    expected = {
        TimeWindow.EARLY: text.MEVO_UNFAVORABLE_EARLY,
        TimeWindow.LATE: text.MEVO_UNFAVORABLE_LATE,
        TimeWindow.UNKNOWN: text.MEVO_UNFAVORABLE_ANY,
    }
    for time, details in expected.items():
        result = MevoRules.evaluate(mevo_state(time=time, mevo_salvageable=Tri.NO))
        assert result.reason == "Unfavorable Imaging"
        assert result.details == details


def test_best_medical_therapy_defaults():
    risky = MevoRules.evaluate(mevo_state(mevo_technical=Tri.NO))
    assert risky.status == Status.BMT_PREFERRED
    assert risky.reason == "High Technical Risk"

    undecided = MevoRules.evaluate(mevo_state(mevo_technical=Tri.UNKNOWN))
    assert undecided.status == Status.BMT_PREFERRED
    assert undecided.reason == "Standard MeVO Criteria"

    no_location = MevoRules.evaluate(mevo_state(mevo_location=MevoLocation.UNKNOWN))
    assert no_location.reason == "Standard MeVO Criteria"


# ─── Path selector ───

def test_select_protocol_routes_by_occlusion_type():
    assert select_protocol(InputState()) is None

    mevo = mevo_state()
    assert select_protocol(mevo) == MevoRules.evaluate(mevo)

    lvo = InputState(
        occlusion_type=OcclusionType.LVO, lvo_location=LvoLocation.ANTERIOR,
        lvo=Tri.YES, mrs=MrsGroup.INDEPENDENT, time=TimeWindow.EARLY,
        nihss=NihssGroup.NIHSS_10_19, aspects="8",
    )
    assert select_protocol(lvo) == LvoRules.evaluate(lvo)
    assert select_protocol(lvo).status == Status.ELIGIBLE
