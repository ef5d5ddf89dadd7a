"""End-to-end tests for calculate_market_sizing."""

import re
from datetime import datetime

import pytest
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from pydantic import ValidationError

from terrain.engines.market_sizing import calculate_market_sizing
from terrain.engines.units import to_billions
from terrain.exceptions import IndicationNotFoundError
from terrain.reference_data import REFERENCE_DATA_VERSION, load_reference_data


class TestEndToEnd:
    def test_nsclc_example(self, make_input):
        result = calculate_market_sizing(make_input())
        assert len(result.revenue_projection) == 10
        assert result.revenue_projection[0].year == 2028
        assert [y.year for y in result.revenue_projection] == list(range(2028, 2038))
        assert len(result.geography_breakdown) == 1
        assert result.indication_validated is True
        assert result.reference_data_version == REFERENCE_DATA_VERSION

    def test_summary_metrics_positive(self, make_input):
        summary = calculate_market_sizing(make_input()).summary
        assert summary.tam_us.value > 0
        assert summary.sam_us.value > 0
        assert summary.som_us.value > 0
        assert summary.peak_sales_estimate.base > 0
        assert summary.peak_sales_estimate.low > 0
        assert summary.cagr_5yr > 0
        assert len(summary.market_growth_driver) >= 10

    def test_som_range_brackets_som(self, make_input):
        som = calculate_market_sizing(make_input()).summary.som_us
        low, high = som.range
        assert low < som.value < high

    def test_generated_at_is_iso(self, make_input):
        result = calculate_market_sizing(make_input())
        payload = result.model_dump(mode="json")
        parsed = datetime.fromisoformat(payload["generated_at"].replace("Z", "+00:00"))
        assert parsed.tzinfo is not None

    def test_narratives(self, make_input):
        result = calculate_market_sizing(make_input())
        assert len(result.methodology) > 100
        assert len(result.assumptions) > 5
        assert "Broad eligible population" in result.assumptions
        assert len(result.competitive_context.differentiation_note) > 10
        assert len(result.pricing_analysis.payer_dynamics) > 10
        assert {s.type for s in result.data_sources} == {"public", "licensed", "proprietary"}

    def test_us_territory_label(self, make_input):
        territory = calculate_market_sizing(make_input()).geography_breakdown[0]
        assert territory.territory in ("United States", "US")


class TestInvariants:
    STAGES = ["preclinical", "phase1", "phase2", "phase3", "approved"]

    def test_all_indications_all_stages(self, make_input, reference):
        for record in reference.indications:
            for stage in self.STAGES:
                result = calculate_market_sizing(make_input(
                    indication=record.name,
                    development_stage=stage,
                    geography=["US", "EU5", "Japan", "China", "RoW"],
                ))
                f = result.patient_funnel
                assert f.us_prevalence >= f.diagnosed >= f.treated >= f.addressable >= f.capturable >= 1

                s = result.summary
                assert to_billions(s.tam_us) >= to_billions(s.sam_us) >= to_billions(s.som_us)
                for t in result.geography_breakdown:
                    assert to_billions(t.tam) >= to_billions(t.sam) >= to_billions(t.som)

                tams = [to_billions(t.tam) for t in result.geography_breakdown]
                assert tams == sorted(tams, reverse=True)

                for y in result.revenue_projection:
                    assert 0 <= y.bear <= y.base <= y.bull
                peak = s.peak_sales_estimate
                assert peak.low <= peak.base <= peak.high

                wac = result.pricing_analysis.recommended_wac
                assert wac.conservative <= wac.base <= wac.premium
                assert 0 < result.pricing_analysis.gross_to_net_estimate < 1

    def test_synonym_resolves_same_funnel(self, make_input):
        by_synonym = calculate_market_sizing(make_input(indication="NSCLC"))
        by_name = calculate_market_sizing(make_input(indication="Non-Small Cell Lung Cancer"))
        assert by_synonym.patient_funnel.us_prevalence == by_name.patient_funnel.us_prevalence

    def test_unknown_indication(self, make_input):
        with pytest.raises(IndicationNotFoundError) as exc:
            calculate_market_sizing(make_input(indication="Totally Fake Disease XYZ123"))
        assert re.search(r"indication not found", str(exc.value), re.IGNORECASE)

    def test_distinct_disease_is_not_sized_as_a_neighbour(self, make_input):
        with pytest.raises(IndicationNotFoundError):
            calculate_market_sizing(make_input(indication="Type 1 Diabetes"))


class TestMonotonicity:
    def test_three_geographies_sorted(self, make_input):
        result = calculate_market_sizing(make_input(geography=["US", "EU5", "Japan"]))
        assert len(result.geography_breakdown) == 3
        tams = [to_billions(t.tam) for t in result.geography_breakdown]
        assert tams == sorted(tams, reverse=True)

    def test_more_geographies_grow_global_tam(self, make_input):
        us_only = calculate_market_sizing(make_input(geography=["US"]))
        four = calculate_market_sizing(make_input(geography=["US", "EU5", "Japan", "China"]))
        assert to_billions(four.summary.global_tam) > to_billions(us_only.summary.global_tam)

    def test_phase3_som_exceeds_preclinical(self, make_input):
        phase3 = calculate_market_sizing(make_input(development_stage="phase3"))
        preclinical = calculate_market_sizing(make_input(development_stage="preclinical"))
        assert to_billions(phase3.summary.som_us) > to_billions(preclinical.summary.som_us)

    def test_approved_peak_exceeds_phase1(self, make_input):
        approved = calculate_market_sizing(make_input(development_stage="approved"))
        phase1 = calculate_market_sizing(make_input(development_stage="phase1"))
        assert approved.summary.peak_sales_estimate.base > phase1.summary.peak_sales_estimate.base

    def test_stage_strictly_increases_projection(self, make_input):
        stages = ["preclinical", "phase1", "phase2", "phase3", "approved"]
        peaks = [
            calculate_market_sizing(make_input(development_stage=s)).summary.peak_sales_estimate.base
            for s in stages
        ]
        assert all(a < b for a, b in zip(peaks, peaks[1:]))

    def test_premium_tam_exceeds_conservative(self, make_input):
        premium = calculate_market_sizing(make_input(pricing_assumption="premium"))
        conservative = calculate_market_sizing(make_input(pricing_assumption="conservative"))
        assert to_billions(premium.summary.tam_us) > to_billions(conservative.summary.tam_us)
        assert premium.summary.peak_sales_estimate.base > conservative.summary.peak_sales_estimate.base

    def test_narrower_segment_reduces_addressable(self, make_input):
        broad = calculate_market_sizing(make_input())
        narrow = calculate_market_sizing(make_input(patient_segment="EGFR mutated 2L+"))
        assert narrow.patient_funnel.addressable < broad.patient_funnel.addressable

    def test_later_line_narrower_than_first_line(self, make_input):
        later = calculate_market_sizing(make_input(patient_segment="2L relapsed refractory"))
        first = calculate_market_sizing(make_input(patient_segment="first-line treatment naive"))
        assert later.patient_funnel.addressable < first.patient_funnel.addressable

    def test_subtype_reduces_addressable(self, make_input):
        broad = calculate_market_sizing(make_input())
        subtype = calculate_market_sizing(make_input(subtype="KRAS G12C-mutant"))
        assert subtype.patient_funnel.addressable < broad.patient_funnel.addressable


class TestTherapyAreas:
    def test_alzheimers_large_population(self, make_input):
        result = calculate_market_sizing(make_input(indication="Alzheimer's Disease"))
        assert result.patient_funnel.us_prevalence > 100000

    def test_duchenne_rare_population(self, make_input):
        result = calculate_market_sizing(make_input(indication="Duchenne Muscular Dystrophy"))
        assert result.patient_funnel.us_prevalence < 50000
        assert result.therapy_area == "rare_disease"


class TestDeterminismAndIsolation:
    def test_identical_inputs_identical_outputs(self, make_input):
        a = calculate_market_sizing(make_input()).model_dump(exclude={"generated_at"})
        b = calculate_market_sizing(make_input()).model_dump(exclude={"generated_at"})
        assert a == b

    def test_input_not_mutated(self, make_input):
        market_input = make_input(geography=["US", "US", "EU5"])
        before = market_input.model_dump()
        result = calculate_market_sizing(market_input)
        assert market_input.model_dump() == before
        assert len(result.geography_breakdown) == 2

    def test_missing_competitive_data_still_complete(self, make_input):
        sparse = load_reference_data(competitive={})
        result = calculate_market_sizing(make_input(), reference=sparse)
        assert result.competitive_context.crowding_score == 1
        assert not result.competitive_context.data_available
        assert len(result.revenue_projection) == 10

    def test_missing_comparables_still_complete(self, make_input):
        sparse = load_reference_data(comparables=[])
        result = calculate_market_sizing(make_input(), reference=sparse)
        assert result.pricing_analysis.selection_basis == "default"
        assert result.summary.tam_us.value > 0


class TestInputValidation:
    def test_empty_geography_rejected(self, make_input):
        with pytest.raises(ValidationError):
            make_input(geography=[])

    def test_unknown_geography_rejected(self, make_input):
        with pytest.raises(ValidationError):
            make_input(geography=["Atlantis"])

    def test_launch_year_range(self, make_input):
        with pytest.raises(ValidationError):
            make_input(launch_year=1999)

    def test_blank_optional_is_absent(self, make_input):
        market_input = make_input(patient_segment="   ")
        assert market_input.patient_segment is None

    def test_input_is_frozen(self, make_input):
        market_input = make_input()
        with pytest.raises(ValidationError):
            market_input.indication = "AML"
