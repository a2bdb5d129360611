"""Tests sections : classement par type, modèles tolérants, alias JSON."""
import pytest
from pydantic import ValidationError

from cinqueterre.renderer.base import RenderMode, classify
from cinqueterre.sections import (
    MAX_ITEMS,
    CollectionEmbedSection,
    FaqSection,
    FooterSection,
    HeroSection,
    SectionKind,
    StatsSection,
    parse_section,
)


# ── classify ─────────────────────────────────────────────────────────────────

@pytest.mark.parametrize("type_name,kind", [
    ("hero-section", SectionKind.HERO),
    ("split-hero", SectionKind.HERO),
    ("stats-section", SectionKind.STATS),
    ("feature-section", SectionKind.FEATURE),
    ("content-section", SectionKind.CONTENT),
    ("faq-section", SectionKind.FAQ),
    ("cta-section", SectionKind.CTA),
    ("collection-embed", SectionKind.COLLECTION_EMBED),
    ("mystery-widget", SectionKind.UNKNOWN),
    ("", SectionKind.UNKNOWN),
])
def test_classify_build(type_name, kind):
    assert classify(type_name, RenderMode.BUILD) is kind


def test_classify_first_matching_tag_wins():
    assert classify("hero-stats") is SectionKind.HERO
    assert classify("feature-content") is SectionKind.FEATURE


def test_classify_build_is_case_sensitive():
    assert classify("Hero-Section", RenderMode.BUILD) is SectionKind.UNKNOWN
    assert classify("Hero-Section", RenderMode.PREVIEW) is SectionKind.HERO


def test_classify_mode_specific_kinds():
    assert classify("testimonial-section", RenderMode.BUILD) is SectionKind.UNKNOWN
    assert classify("testimonial-section", RenderMode.PREVIEW) is SectionKind.TESTIMONIAL
    assert classify("footer-section", RenderMode.BUILD) is SectionKind.UNKNOWN
    assert classify("footer-section", RenderMode.PREVIEW) is SectionKind.FOOTER
    assert classify("map-section", RenderMode.PREVIEW) is SectionKind.MAP
    assert classify("collection-embed", RenderMode.PREVIEW) is SectionKind.UNKNOWN


# ── Modèles ──────────────────────────────────────────────────────────────────

def test_hero_background_image_alias():
    s = parse_section(SectionKind.HERO, {"type": "hero-section", "backgroundImage": "/bg.jpg"})
    assert isinstance(s, HeroSection)
    assert s.image == "/bg.jpg"


def test_hero_defaults_and_null_list():
    s = HeroSection.model_validate({"type": "hero-section", "buttons": None})
    assert s.title is None
    assert s.buttons == []


def test_button_variant():
    s = HeroSection.model_validate({"buttons": [{"text": "Go"}, {"text": "Back", "variant": "secondary"}]})
    assert [b.is_secondary for b in s.buttons] == [False, True]


def test_hero_wrong_shape_raises():
    with pytest.raises(ValidationError):
        HeroSection.model_validate({"buttons": "nope"})


def test_stat_number_alias_and_numeric_values():
    s = StatsSection.model_validate({"stats": [
        {"number": "5", "label": "Villages"},
        {"value": 300, "label": "Jours"},
    ]})
    assert [st.value for st in s.stats] == ["5", "300"]


def test_localized_rejects_booleans_quietly():
    s = StatsSection.model_validate({"title": True})
    assert s.title is None


def test_faq_items_and_short_keys():
    s = FaqSection.model_validate({"items": [{"q": "Q1", "a": "A1"}]})
    assert len(s.faqs) == 1
    assert s.faqs[0].question == "Q1"
    assert s.faqs[0].answer == "A1"


def test_collection_caps_visible_items():
    s = CollectionEmbedSection.model_validate({
        "items": [{"title": f"Item {i}"} for i in range(MAX_ITEMS + 3)],
        "showViewAll": True,
        "viewAllUrl": "/all",
    })
    assert len(s.items) == MAX_ITEMS + 3
    assert len(s.visible_items) == MAX_ITEMS
    assert s.show_view_all is True
    assert s.view_all_url == "/all"
    assert s.display.columns == 3


def test_footer_aliases_round_trip():
    s = FooterSection.model_validate({
        "companyName": "Cinqueterre.travel",
        "socialLinks": [{"platform": "instagram", "url": "https://instagram.com/x"}],
        "columns": [{"title": "Villages", "links": [{"label": "Vernazza", "url": "/vernazza"}]}],
    })
    assert s.company_name == "Cinqueterre.travel"
    dumped = s.model_dump(by_alias=True)
    assert dumped["companyName"] == "Cinqueterre.travel"
    assert dumped["columns"][0]["links"][0]["url"] == "/vernazza"


def test_unknown_fields_are_kept():
    s = HeroSection.model_validate({"type": "hero-section", "layout": "wide"})
    assert s.model_extra == {"layout": "wide"}


# ── Champs secondaires tolérants ─────────────────────────────────────────────

def test_non_string_variant_ignored():
    s = HeroSection.model_validate({"variant": 2, "title": "Welcome", "buttons": [{"text": "Go", "variant": 1}]})
    assert s.variant is None
    assert s.title == "Welcome"
    assert s.buttons[0].is_secondary is False


@pytest.mark.parametrize("display", [None, "wide", [], {"columns": None}, {"columns": 0}, {"columns": -2}])
def test_collection_display_falls_back_to_three_columns(display):
    s = CollectionEmbedSection.model_validate({"display": display, "items": [{"title": "Card A"}]})
    assert s.display.columns == 3


def test_collection_display_columns_kept():
    assert CollectionEmbedSection.model_validate({"display": {"columns": 4}}).display.columns == 4


def test_faq_falls_back_to_items_when_faqs_empty():
    for faqs in (None, []):
        s = FaqSection.model_validate({"faqs": faqs, "items": [{"question": "Q1", "answer": "A1"}]})
        assert [f.question for f in s.faqs] == ["Q1"]


def test_faq_prefers_faqs_over_items():
    s = FaqSection.model_validate({"faqs": [{"q": "A"}], "items": [{"q": "B"}]})
    assert [f.question for f in s.faqs] == ["A"]
