"""
Tests for the plain-language personality analysis.
"""

from explanation.personality_analysis import (
    DEFAULT_RECOMMENDATIONS,
    TRAIT_DESCRIPTIONS,
    describe_trait,
    generate_career_recommendations,
    generate_personality_analysis,
    identify_development_areas,
    identify_strengths,
    overall_score,
)

from conftest import make_scores


class TestAnalysis:
    def test_one_paragraph_per_trait(self):
        text = generate_personality_analysis(make_scores(60))
        paragraphs = text.split("\n\n")
        assert len(paragraphs) == 5
        assert paragraphs[0].startswith("Openness: 60%\n")

    def test_high_and_low_threshold(self):
        assert describe_trait("openness", 60) == TRAIT_DESCRIPTIONS["openness"]["high"]
        assert describe_trait("openness", 59) == TRAIT_DESCRIPTIONS["openness"]["low"]

    def test_uses_scores(self):
        text = generate_personality_analysis(make_scores(20, extraversion=90))
        assert "Extraversion: 90%" in text
        assert TRAIT_DESCRIPTIONS["extraversion"]["high"] in text
        assert TRAIT_DESCRIPTIONS["openness"]["low"] in text

    def test_accepts_plain_mapping(self):
        text = generate_personality_analysis(make_scores(75).to_dict())
        assert "Conscientiousness: 75%" in text


class TestStrengths:
    def test_high_traits_and_emotional_stability(self):
        scores = make_scores(
            openness=80, conscientiousness=70, extraversion=50, agreeableness=40, neuroticism=20,
        )
        assert identify_strengths(scores) == [
            "Creative thinking",
            "Openness to novelty",
            "Orderliness",
            "Responsibility",
            "Goal orientation",
            "Emotional stability",
            "Stress resilience",
        ]

    def test_high_neuroticism(self):
        strengths = identify_strengths(make_scores(50, neuroticism=85))
        assert strengths == ["Emotional sensitivity", "Attention to detail"]

    def test_middling_profile_has_none(self):
        assert identify_strengths(make_scores(50)) == []


class TestDevelopmentAreas:
    def test_low_traits(self):
        scores = make_scores(
            openness=80, conscientiousness=70, extraversion=50, agreeableness=40, neuroticism=20,
        )
        assert identify_development_areas(scores) == ["Developing collaboration skills", "Empathy"]

    def test_high_neuroticism_needs_stress_management(self):
        areas = identify_development_areas(make_scores(50, neuroticism=70))
        assert areas == ["Coping with stress", "Emotional regulation"]

    def test_low_neuroticism_is_not_a_development_area(self):
        assert identify_development_areas(make_scores(50, neuroticism=5)) == []

    def test_everything_low(self):
        areas = identify_development_areas(make_scores(10))
        assert "Time management" in areas
        assert "Networking" in areas
        assert len(areas) == len(set(areas))


class TestCareerRecommendations:
    def test_open_and_conscientious(self):
        scores = make_scores(50, openness=80, conscientiousness=80)
        assert generate_career_recommendations(scores) == [
            "Research and development (R&D)",
            "Product Manager",
            "UX/UI Designer",
        ]

    def test_outgoing_and_agreeable(self):
        scores = make_scores(50, extraversion=80, agreeableness=80)
        assert generate_career_recommendations(scores) == [
            "HR Manager",
            "Marketing Manager",
            "Sales Representative",
            "Project Manager",
        ]

    def test_conscientious_and_stable(self):
        scores = make_scores(50, conscientiousness=80, neuroticism=30)
        assert generate_career_recommendations(scores) == [
            "Operations Manager",
            "Financial Analyst",
            "Quality Assurance",
        ]

    def test_open_and_outgoing(self):
        scores = make_scores(50, openness=80, extraversion=80)
        assert generate_career_recommendations(scores) == [
            "Content Creator",
            "Marketing Creative",
            "Event Manager",
        ]

    def test_conscientious_and_reserved(self):
        scores = make_scores(50, conscientiousness=80, extraversion=30)
        assert generate_career_recommendations(scores) == [
            "Software Developer",
            "Data Analyst",
            "Accountant",
            "Engineer",
        ]

    def test_thresholds_are_inclusive(self):
        scores = make_scores(50, conscientiousness=70, neuroticism=40)
        assert generate_career_recommendations(scores)[0] == "Operations Manager"

    def test_no_rule_matches(self):
        assert generate_career_recommendations(make_scores(50)) == DEFAULT_RECOMMENDATIONS

    def test_several_rules_in_order_without_duplicates(self):
        scores = make_scores(
            openness=80, conscientiousness=80, extraversion=30, agreeableness=50, neuroticism=20,
        )
        recommendations = generate_career_recommendations(scores)
        assert recommendations[:3] == ["Research and development (R&D)", "Product Manager", "UX/UI Designer"]
        assert recommendations[3] == "Operations Manager"
        assert recommendations[-1] == "Engineer"
        assert len(recommendations) == 10
        assert len(recommendations) == len(set(recommendations))


class TestOverallScore:
    def test_mean_of_traits(self):
        scores = make_scores(
            openness=80, conscientiousness=65, extraversion=40, agreeableness=100, neuroticism=0,
        )
        assert overall_score(scores) == 57

    def test_rounding(self):
        assert overall_score(make_scores(
            openness=10, conscientiousness=20, extraversion=30, agreeableness=40, neuroticism=51,
        )) == 30
        assert overall_score(make_scores(
            openness=10, conscientiousness=20, extraversion=30, agreeableness=40, neuroticism=53,
        )) == 31

    def test_uniform_profile(self):
        assert overall_score(make_scores(60).to_dict()) == 60
