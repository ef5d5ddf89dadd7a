"""Tests for the market-sizing engine components."""

import re
import pytest
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from terrain.exceptions import IndicationNotFoundError
from terrain.reference_data import IndicationRecord
from terrain.engines.indication_resolver import (
    MIN_MATCH_CONFIDENCE, normalize, resolve_indication, score_match, search_indications,
)
from terrain.engines.patient_funnel import compute_funnel, segment_factor, subtype_share
from terrain.engines.pricing import analyze_pricing, recommend_wac
from terrain.engines.competitive_context import link_context
from terrain.engines.geography import allocate, dedupe_geographies
from terrain.engines.risk_adjustment import (
    get_phase_index, probability_of_success, scenario_multipliers,
)
from terrain.engines.revenue_projection import (
    annual_uptake, peak_sales_estimate, project_revenue,
)
from terrain.engines.units import to_billions, to_money_metric, to_usd


def _bare_record(**overrides):
    fields = dict(
        name="Test Dermatosis",
        synonyms=frozenset(),
        therapy_area="dermatology",
        us_prevalence=50000,
        us_incidence=2000,
        diagnosis_rate=0.8,
        treatment_rate=0.5,
    )
    fields.update(overrides)
    return IndicationRecord(**fields)


class TestIndicationResolver:
    def test_normalize(self):
        assert normalize("  Alzheimer's   Disease ") == "alzheimers disease"
        assert normalize("HIV/AIDS") == "hiv aids"

    def test_canonical_name_case_insensitive(self, reference):
        record = resolve_indication("non-small cell LUNG cancer", reference.index)
        assert record.name == "Non-Small Cell Lung Cancer"

    def test_synonym_and_name_resolve_to_same_record(self, reference):
        by_synonym = resolve_indication("NSCLC", reference.index)
        by_name = resolve_indication("Non-Small Cell Lung Cancer", reference.index)
        assert by_synonym is by_name

    def test_apostrophe_insensitive(self, reference):
        assert resolve_indication("Alzheimers Disease", reference.index).name == "Alzheimer's Disease"

    def test_prefix_match(self, reference):
        record = resolve_indication("sickle cell crisis", reference.index)
        assert record.name == "Sickle Cell Disease"

    def test_partial_query_does_not_resolve(self, reference):
        for query in ["lung", "alzh", "Heart", "Cancer"]:
            with pytest.raises(IndicationNotFoundError):
                resolve_indication(query, reference.index)

    @pytest.mark.parametrize("query", [
        "Type 1 Diabetes",
        "Small Cell Lung Cancer",
        "Breast Cancer",
        "HIV-2 infection",
    ])
    def test_related_but_distinct_disease_not_found(self, reference, query):
        with pytest.raises(IndicationNotFoundError):
            resolve_indication(query, reference.index)

    def test_numbers_and_negations_still_resolve_when_consistent(self, reference):
        assert resolve_indication("type 2 diabetes in adults", reference.index).name == "Type 2 Diabetes"
        assert resolve_indication("HIV-1 infection", reference.index).name == "HIV/AIDS"
        assert resolve_indication("stage 4 NSCLC", reference.index).name == "Non-Small Cell Lung Cancer"

    def test_substring_match(self, reference):
        record = resolve_indication("metastatic NSCLC", reference.index)
        assert record.name == "Non-Small Cell Lung Cancer"

    def test_token_overlap_match(self, reference):
        record = resolve_indication("Cancer Colorectal", reference.index)
        assert record.name == "Colorectal Cancer"

    def test_unknown_indication_raises(self, reference):
        with pytest.raises(IndicationNotFoundError) as exc:
            resolve_indication("Totally Fake Disease XYZ123", reference.index)
        assert re.search(r"indication not found", str(exc.value), re.IGNORECASE)

    def test_not_found_is_value_error(self, reference):
        with pytest.raises(ValueError):
            resolve_indication("zzzz qqqq", reference.index)

    def test_resolution_is_repeatable(self, reference):
        first = resolve_indication("metastatic colon cancer", reference.index)
        for _ in range(5):
            assert resolve_indication("METASTATIC COLON CANCER", reference.index) is first

    def test_score_tiers_ordered(self):
        exact, _ = score_match("lung cancer", "lung cancer")
        prefix, prefix_tier = score_match("lung", "lung cancer")
        substring, substring_tier = score_match("stage nsclc", "nsclc")
        token, token_tier = score_match("cancer lung", "lung cancer")
        assert exact == 1.0
        assert (prefix_tier, substring_tier, token_tier) == ("prefix", "substring", "token")
        assert exact > prefix > substring > token

    def test_score_bounds(self):
        for query, candidate in [("a", "b"), ("", "x"), ("als", "als"), ("ms", "multiple sclerosis")]:
            score, _ = score_match(query, candidate)
            assert 0.0 <= score <= 1.0

    def test_token_overlap_below_threshold(self):
        score, _ = score_match("totally fake disease xyz123", "alzheimer disease")
        assert score < MIN_MATCH_CONFIDENCE

    def test_search_partial_word(self, reference):
        matches = search_indications("alzh", index=reference.index)
        assert matches[0]["name"] == "Alzheimer's Disease"

    def test_search_ranks_negated_record_below_threshold(self, reference):
        matches = search_indications("small cell lung cancer", index=reference.index)
        nsclc = [m for m in matches if m["name"] == "Non-Small Cell Lung Cancer"]
        assert nsclc and nsclc[0]["score"] < MIN_MATCH_CONFIDENCE

    def test_search_limit_and_blank(self, reference):
        assert len(search_indications("cancer", limit=2, index=reference.index)) <= 2
        assert search_indications("   ", index=reference.index) == []


class TestPatientFunnel:
    def test_nsclc_counts(self, nsclc):
        funnel = compute_funnel(nsclc, "phase2")
        assert funnel.us_prevalence == 235000
        assert funnel.diagnosed == 199750
        assert funnel.treated == 155805
        assert funnel.addressable == 155805
        assert abs(funnel.capturable_rate - 0.10) < 1e-6

    def test_monotonic_for_all_indications(self, reference):
        for record in reference.indications:
            for stage in ["preclinical", "phase1", "phase2", "phase3", "approved"]:
                f = compute_funnel(record, stage, patient_segment="EGFR mutated 2L+", subtype="unknown")
                assert f.us_prevalence >= f.diagnosed >= f.treated >= f.addressable >= f.capturable >= 1

    def test_floors_at_one(self):
        tiny = _bare_record(us_prevalence=2, diagnosis_rate=0.1, treatment_rate=0.1)
        f = compute_funnel(tiny, "preclinical", patient_segment="2L relapsed refractory")
        assert f.diagnosed == f.treated == f.addressable == f.capturable == 1

    def test_capture_rate_increases_with_stage(self, nsclc):
        stages = ["preclinical", "phase1", "phase2", "phase3", "approved"]
        capturable = [compute_funnel(nsclc, s).capturable for s in stages]
        assert capturable == sorted(capturable)
        assert len(set(capturable)) == len(capturable)

    def test_segment_factor_neutral_when_absent(self):
        assert segment_factor(None) == (1.0, [])
        assert segment_factor("adult patients") == (1.0, [])

    def test_segment_categories(self):
        factor, categories = segment_factor("EGFR mutated 2L+")
        assert categories == ["biomarker_selected", "later_line"]
        assert abs(factor - 0.35 * 0.45) < 1e-9
        assert segment_factor("first-line treatment naive") == (0.85, ["first_line"])

    def test_later_line_narrower_than_first_line(self, nsclc):
        later = compute_funnel(nsclc, "phase2", patient_segment="2L relapsed refractory")
        first = compute_funnel(nsclc, "phase2", patient_segment="first-line treatment naive")
        broad = compute_funnel(nsclc, "phase2")
        assert later.addressable < first.addressable < broad.addressable

    def test_subtype_share(self, nsclc):
        assert abs(subtype_share(nsclc, None) - 1.0) < 1e-9
        assert abs(subtype_share(nsclc, "EGFR-mutant") - 0.17) < 1e-9
        assert abs(subtype_share(nsclc, "Some rare variant") - 0.30) < 1e-9

    def test_subtype_share_whole_words_only(self, nsclc):
        assert abs(subtype_share(nsclc, "a") - 0.30) < 1e-9
        assert abs(subtype_share(nsclc, "adeno") - 0.30) < 1e-9
        assert abs(subtype_share(nsclc, "egfr mutant") - 0.17) < 1e-9
        assert abs(subtype_share(nsclc, "EGFR") - 0.17) < 1e-9

    def test_combined_subtype_takes_narrowest_share(self, nsclc):
        assert abs(subtype_share(nsclc, "Adenocarcinoma, EGFR-mutant") - 0.17) < 1e-9

    def test_incidence_reported_not_chained(self, nsclc):
        f = compute_funnel(nsclc, "phase2")
        assert f.us_incidence == 236740
        assert f.diagnosed <= f.us_prevalence


class TestPricingAnalyzer:
    def test_indication_comparables(self, nsclc, reference):
        pricing = analyze_pricing(nsclc, "base", reference.comparables)
        assert pricing.selection_basis == "indication"
        assert pricing.recommended_wac.base == 188000
        assert pricing.selected_wac == pricing.recommended_wac.base
        assert 0 < len(pricing.comparable_drugs) <= 6

    def test_tiers_ordered(self, reference):
        for record in reference.indications:
            for assumption in ["conservative", "base", "premium"]:
                wac = analyze_pricing(record, assumption, reference.comparables).recommended_wac
                assert wac.conservative < wac.base < wac.premium

    def test_assumption_selects_tier_without_moving_tiers(self, nsclc, reference):
        low = analyze_pricing(nsclc, "conservative", reference.comparables)
        high = analyze_pricing(nsclc, "premium", reference.comparables)
        assert low.recommended_wac == high.recommended_wac
        assert low.selected_wac < high.selected_wac

    def test_single_price_still_strictly_ordered(self):
        tiers = recommend_wac([100000])
        assert tiers == {"conservative": 75000, "base": 100000, "premium": 135000}

    def test_therapy_area_fallback(self, reference):
        pdac = resolve_indication("PDAC", reference.index)
        pricing = analyze_pricing(pdac, "base", reference.comparables)
        assert pricing.selection_basis == "therapy_area"
        assert pricing.comparable_drugs

    def test_mechanism_fallback(self, reference):
        pdac = resolve_indication("PDAC", reference.index)
        pricing = analyze_pricing(pdac, "base", reference.comparables, mechanism="PARP inhibitor")
        assert pricing.selection_basis == "mechanism"
        assert {d.name for d in pricing.comparable_drugs} == {"Lynparza", "Zejula", "Rubraca"}

    def test_default_price_when_no_comparables(self, reference):
        pricing = analyze_pricing(_bare_record(), "base", reference.comparables)
        assert pricing.selection_basis == "default"
        assert pricing.recommended_wac.base == 80000
        assert pricing.comparable_drugs == []

    def test_gross_to_net_and_narratives(self, reference):
        for record in reference.indications:
            pricing = analyze_pricing(record, "base", reference.comparables)
            assert 0 < pricing.gross_to_net_estimate < 1
            assert len(pricing.payer_dynamics) > 10
            assert len(pricing.pricing_rationale) > 10

    def test_net_price_below_wac(self, nsclc, reference):
        pricing = analyze_pricing(nsclc, "base", reference.comparables)
        for drug in pricing.comparable_drugs:
            assert drug.current_net_price < drug.launch_wac


class TestCompetitiveContext:
    def test_reads_snapshot(self, nsclc, reference):
        context = link_context(nsclc, reference.competitive)
        assert context.crowding_score == 9
        assert context.data_available
        assert "Keytruda" in context.leading_products
        assert "Crowded" in context.differentiation_note

    def test_baseline_when_missing(self, reference):
        context = link_context(_bare_record(competitive_key="nope"), reference.competitive)
        assert context.crowding_score == 1
        assert context.approved_products == 0
        assert context.phase3_programs == 0
        assert not context.data_available
        assert len(context.differentiation_note) > 10

    def test_baseline_without_key(self):
        context = link_context(_bare_record(), {})
        assert context.crowding_score == 1

    def test_note_names_asset(self, nsclc, reference):
        context = link_context(nsclc, reference.competitive, mechanism="KRAS G12D inhibitor")
        assert "KRAS G12D inhibitor" in context.differentiation_note


class TestGeographyAllocator:
    def _inputs(self, record, reference):
        funnel = compute_funnel(record, "phase2")
        pricing = analyze_pricing(record, "base", reference.comparables)
        return funnel, pricing

    def test_single_us_entry(self, nsclc, reference):
        funnel, pricing = self._inputs(nsclc, reference)
        breakdown = allocate(funnel, pricing, ["US"], nsclc, reference.territories)
        assert len(breakdown) == 1
        assert breakdown[0].territory == "United States"
        assert breakdown[0].tam.confidence == "high"

    def test_sorted_by_tam(self, nsclc, reference):
        funnel, pricing = self._inputs(nsclc, reference)
        breakdown = allocate(funnel, pricing, ["Japan", "US", "EU5"], nsclc, reference.territories)
        tams = [to_billions(t.tam) for t in breakdown]
        assert len(breakdown) == 3
        assert tams == sorted(tams, reverse=True)

    def test_tam_sam_som_ordered_everywhere(self, reference):
        codes = list(reference.territories)
        for record in reference.indications:
            funnel, pricing = self._inputs(record, reference)
            for t in allocate(funnel, pricing, codes, record, reference.territories):
                assert to_billions(t.tam) >= to_billions(t.sam) >= to_billions(t.som)

    def test_deduplicates(self, nsclc, reference):
        assert dedupe_geographies(["US", "us", "United States", "EU5"], reference.territories) == ["US", "EU5"]
        funnel, pricing = self._inputs(nsclc, reference)
        breakdown = allocate(funnel, pricing, ["US", "US"], nsclc, reference.territories)
        assert len(breakdown) == 1

    def test_unknown_territory_uses_conservative_default(self, nsclc, reference):
        funnel, pricing = self._inputs(nsclc, reference)
        breakdown = allocate(funnel, pricing, ["US", "Atlantis"], nsclc, reference.territories)
        unknown = [t for t in breakdown if t.code == "Atlantis"][0]
        assert unknown.tam.confidence == "low"
        assert unknown.regulatory_status == "Regulatory pathway under evaluation"
        assert to_billions(unknown.tam) < to_billions(breakdown[0].tam)

    def test_record_override_applied(self, reference):
        cf = resolve_indication("CF", reference.index)
        assert cf.geography_multipliers["Japan"].source == "record"
        assert cf.geography_multipliers["EU5"].source == "therapy_area"


class TestRiskAdjustment:
    def test_phase_index(self):
        assert get_phase_index("preclinical") == 0
        assert get_phase_index("approved") == 4

    def test_unknown_phase(self):
        with pytest.raises(ValueError):
            get_phase_index("phase4")

    def test_pos_increases_with_stage(self):
        for area in ["oncology", "neurology", "unknown_area"]:
            pos = [probability_of_success(s, area) for s in
                   ["preclinical", "phase1", "phase2", "phase3", "approved"]]
            assert pos == sorted(pos)
            assert len(set(pos)) == 5
            assert pos[-1] == 1.0

    def test_scenarios_ordered(self):
        for stage in ["preclinical", "phase1", "phase2", "phase3", "approved"]:
            m = scenario_multipliers(stage)
            assert m["bear"] < m["base"] < m["bull"]


class TestRevenueProjection:
    def test_uptake_shape(self):
        first = annual_uptake(2028, 2028)
        assert 0 < first < 0.2
        assert abs(annual_uptake(2034, 2028) - 1.0) < 1e-6
        assert abs(annual_uptake(2037, 2028) - 0.75) < 1e-6
        assert annual_uptake(2027, 2028) == 0.0

    def test_ten_years_ordered(self, nsclc, reference):
        funnel = compute_funnel(nsclc, "phase2")
        pricing = analyze_pricing(nsclc, "base", reference.comparables)
        breakdown = allocate(funnel, pricing, ["US", "EU5"], nsclc, reference.territories)
        projection = project_revenue(breakdown, pricing, "phase2", 2030, nsclc.therapy_area)
        assert [y.year for y in projection] == list(range(2030, 2040))
        for y in projection:
            assert 0 <= y.bear <= y.base <= y.bull
        peak = peak_sales_estimate(projection)
        assert peak.low <= peak.base <= peak.high
        assert peak.base == max(y.base for y in projection)


class TestUnits:
    def test_units(self):
        assert to_money_metric(2.5e9).unit == "B"
        assert to_money_metric(2.5e9).value == 2.5
        assert to_money_metric(1.5e6).unit == "M"
        assert to_money_metric(15000).unit == "K"

    def test_always_positive(self):
        assert to_money_metric(0.0).value > 0

    def test_round_trip_close(self):
        assert abs(to_usd(to_money_metric(3.21e8)) - 3.21e8) < 1e4

    def test_monotonic_across_unit_boundary(self):
        just_below = to_billions(to_money_metric(999_999_000))
        just_above = to_billions(to_money_metric(1_000_000_000))
        assert just_below <= just_above
