"""
Renderer HTML des sections : dispatch par type + un renderer par SectionKind.

Chaque renderer est une fonction pure (section validée, contexte) → fragment.
Les textes passent par ctx.text() (localisé + échappé) ; les URLs et les
icônes sont insérées telles quelles (contenu rédigé de confiance).
"""
import json
import logging
from typing import Any, Callable, Dict

from pydantic import ValidationError

from ..core.i18n import escape
from ..sections import (
    BaseSection,
    Button,
    CollectionEmbedSection,
    ContentSection,
    CtaSection,
    FaqSection,
    FeatureSection,
    HeroSection,
    SectionKind,
    StatsSection,
    TestimonialSection,
    parse_section,
)
from .base import RenderContext, classify
from .rich_text import render_items

log = logging.getLogger(__name__)

DEBUG_DUMP_LIMIT = 500


# ── Point d'entrée public ───────────────────────────────────────────────────

def render_section(raw: Any, ctx: RenderContext) -> str:
    """Dispatch d'une section brute (dict JSON) vers son renderer. Ne lève jamais."""
    section = raw if isinstance(raw, dict) else {}
    type_name = section.get("type")
    if not isinstance(type_name, str):
        type_name = ""

    kind = classify(type_name, ctx.mode)
    if kind is SectionKind.UNKNOWN:
        return render_placeholder(type_name, raw, ctx)

    try:
        model = parse_section(kind, section)
    except ValidationError as e:
        log.warning("Section %r invalide (%d erreur(s)), placeholder rendu", type_name, e.error_count())
        return render_placeholder(type_name, raw, ctx)

    return _RENDERERS[kind](model, ctx)


def render_sections(body: Any, ctx: RenderContext) -> str:
    if not isinstance(body, list):
        return ""
    return "\n".join(render_section(s, ctx) for s in body)


# ── Fragments communs ───────────────────────────────────────────────────────

def _heading(text: str, ctx: RenderContext, margin: str = "3rem", align: str = "center") -> str:
    if not text:
        return ""
    t = ctx.theme
    return (
        f'<h2 style="font-size:2rem;font-weight:600;color:{t.navy};margin-bottom:{margin};'
        f'text-align:{align};font-family:{t.font_serif}">{text}</h2>'
    )


def _eyebrow(text: str, color: str) -> str:
    if not text:
        return ""
    return (
        f'<p class="eyebrow" style="color:{color};font-weight:500;margin-bottom:1rem;'
        f'text-transform:uppercase;letter-spacing:0.1em;font-size:0.875rem">{text}</p>'
    )


def _button(b: Button, ctx: RenderContext, primary_style: str, secondary_style: str) -> str:
    variant = "secondary" if b.is_secondary else "primary"
    style = secondary_style if b.is_secondary else primary_style
    href = ctx.t(b.url) or "#"
    return (
        f'<a href="{href}" class="btn btn--{variant}" style="display:inline-block;{style};'
        f'padding:0.75rem 2rem;border-radius:0.25rem;text-decoration:none;font-weight:600;'
        f'transition:all 0.2s">{ctx.text(b.text)}</a>'
    )


def _button_row(buttons_html: str) -> str:
    return (
        '<div class="buttons" style="display:flex;flex-wrap:wrap;justify-content:center;gap:1rem">'
        f"{buttons_html}</div>"
    )


# ── Renderers par type ──────────────────────────────────────────────────────

def render_hero(s: HeroSection, ctx: RenderContext) -> str:
    t = ctx.theme
    image = ctx.t(s.image)
    subtitle = ctx.text(s.subtitle)

    bg_html = ""
    if image:
        bg_html = (
            f"<div class=\"hero-section__bg\" style=\"position:absolute;inset:0;background-image:url('{image}');"
            f'background-size:cover;background-position:center;opacity:0.5"></div>'
        )
    subtitle_html = ""
    if subtitle:
        subtitle_html = (
            f'<p class="subtitle" style="font-size:1.25rem;color:rgba(255,255,255,0.85);margin-bottom:2rem;'
            f'max-width:42rem;margin-left:auto;margin-right:auto;line-height:1.75">{subtitle}</p>'
        )
    buttons = "".join(
        _button(
            b, ctx,
            primary_style=f"background:{t.brand};color:{t.white}",
            secondary_style=f"background:transparent;color:{t.white};border:2px solid {t.white}",
        )
        for b in s.buttons
    )

    return f"""
  <section class="hero-section" style="position:relative;padding:6rem 1.5rem;background:{t.navy};overflow:hidden;min-height:60vh;display:flex;align-items:center">
    {bg_html}
    <div style="position:absolute;inset:0;background:{t.hero_gradient}"></div>
    <div style="position:relative;max-width:56rem;margin:0 auto;text-align:center;width:100%">
      {_eyebrow(ctx.text(s.eyebrow), t.brand)}
      <h1 style="font-size:3rem;font-weight:600;color:{t.white};margin-bottom:1.5rem;line-height:1.2;font-family:{t.font_serif}">{ctx.text(s.title)}</h1>
      {subtitle_html}
      {_button_row(buttons)}
    </div>
  </section>"""


def render_stats(s: StatsSection, ctx: RenderContext) -> str:
    t = ctx.theme
    items = ""
    for stat in s.stats:
        description = ctx.text(stat.description)
        desc_html = (
            f'<div class="stat__description" style="color:{t.gray};font-size:0.875rem;margin-top:0.25rem">{description}</div>'
            if description else ""
        )
        items += f"""
        <div class="stat" style="text-align:center">
          <div class="stat__value" style="font-size:2.5rem;font-weight:600;color:{t.brand};margin-bottom:0.5rem;font-family:{t.font_serif}">{ctx.text(stat.value)}</div>
          <div class="stat__label" style="color:{t.navy};font-weight:500">{ctx.text(stat.label)}</div>
          {desc_html}
        </div>"""

    return f"""
  <section class="stats-section" style="padding:4rem 1.5rem;background:{t.cream}">
    <div style="max-width:72rem;margin:0 auto">
      {_eyebrow(ctx.text(s.eyebrow), t.brand)}
      {_heading(ctx.text(s.title), ctx)}
      <div class="stats-grid" style="display:grid;grid-template-columns:repeat(4,1fr);gap:2rem">{items}
      </div>
    </div>
  </section>"""


def render_feature(s: FeatureSection, ctx: RenderContext) -> str:
    t = ctx.theme
    subtitle = ctx.text(s.subtitle)
    subtitle_html = (
        f'<p style="color:{t.gray};text-align:center;margin-bottom:3rem;max-width:42rem;'
        f'margin-left:auto;margin-right:auto">{subtitle}</p>'
        if subtitle else ""
    )

    cards = ""
    for f in s.features:
        icon = ctx.t(f.icon)
        icon_html = (
            f'<div class="feature-icon" style="font-size:2rem;margin-bottom:1rem;color:{t.brand}">{icon}</div>'
            if icon else ""
        )
        cards += f"""
        <div class="feature-card" style="background:{t.cream};padding:1.5rem;border-radius:0.5rem;border:1px solid {t.border}">
          {icon_html}
          <h3 style="font-size:1.125rem;font-weight:600;color:{t.navy};margin-bottom:0.5rem">{ctx.text(f.title)}</h3>
          <p style="color:{t.gray};font-size:0.9375rem;line-height:1.6">{ctx.text(f.description)}</p>
        </div>"""

    return f"""
  <section class="feature-section" style="padding:4rem 1.5rem;background:{t.background}">
    <div style="max-width:72rem;margin:0 auto">
      {_eyebrow(ctx.text(s.eyebrow), t.brand)}
      {_heading(ctx.text(s.title), ctx, margin="1rem")}
      {subtitle_html}
      <div class="feature-grid" style="display:grid;grid-template-columns:repeat(3,1fr);gap:2rem">{cards}
      </div>
    </div>
  </section>"""


def render_content(s: ContentSection, ctx: RenderContext) -> str:
    t = ctx.theme
    title = escape(ctx.t(s.title) or ctx.t(s.headline))
    subtitle = escape(ctx.t(s.subtitle) or ctx.t(s.eyebrow))
    image = ctx.t(s.image)
    columns = "1fr 1fr" if image else "1fr"

    subtitle_html = f'<p style="color:{t.brand};margin-bottom:1rem">{subtitle}</p>' if subtitle else ""
    image_html = ""
    if image:
        image_html = (
            f'<div class="content-image"><img src="{image}" alt="" style="border-radius:0.5rem;width:100%;'
            f'aspect-ratio:4/3;object-fit:cover;box-shadow:0 4px 6px -1px rgba(0,0,0,0.1)" /></div>'
        )

    return f"""
  <section class="content-section" style="padding:4rem 1.5rem;background:{t.cream}">
    <div style="max-width:72rem;margin:0 auto;display:grid;grid-template-columns:{columns};gap:3rem;align-items:center">
      <div>
        {_heading(title, ctx, margin="1rem", align="left")}
        {subtitle_html}
        <div class="prose" style="color:{t.gray};line-height:1.75">{render_items(s.content, ctx)}</div>
      </div>
      {image_html}
    </div>
  </section>"""


def render_faq(s: FaqSection, ctx: RenderContext) -> str:
    t = ctx.theme
    items = ""
    for faq in s.faqs:
        question, answer = ctx.text(faq.question), ctx.text(faq.answer)
        if ctx.is_preview:
            # Variante repliable (<details>) côté preview
            items += f"""
        <details class="faq-item" style="background:{t.cream};border-radius:0.5rem;border:1px solid {t.border}">
          <summary style="padding:1rem 1.5rem;cursor:pointer;font-weight:500;color:{t.navy}">{question}</summary>
          <div class="faq-answer" style="padding:0 1.5rem 1rem;color:{t.gray};line-height:1.6">{answer}</div>
        </details>"""
        else:
            items += f"""
        <div class="faq-item" style="background:{t.cream};padding:1.5rem;border-radius:0.5rem;border:1px solid {t.border}">
          <h3 style="font-size:1rem;font-weight:600;color:{t.navy};margin-bottom:0.75rem">{question}</h3>
          <p class="faq-answer" style="color:{t.gray};line-height:1.6">{answer}</p>
        </div>"""

    return f"""
  <section class="faq-section" style="padding:4rem 1.5rem;background:{t.background}">
    <div style="max-width:48rem;margin:0 auto">
      {_heading(ctx.text(s.title), ctx)}
      <div class="faq-list" style="display:flex;flex-direction:column;gap:1.5rem">{items}
      </div>
    </div>
  </section>"""


def render_cta(s: CtaSection, ctx: RenderContext) -> str:
    t = ctx.theme
    eyebrow = ctx.text(s.eyebrow)
    subtitle = ctx.text(s.subtitle)

    eyebrow_html = (
        f'<p class="eyebrow" style="font-weight:500;margin-bottom:0.5rem;text-transform:uppercase;'
        f'letter-spacing:0.1em;font-size:0.875rem;opacity:0.9">{eyebrow}</p>'
        if eyebrow else ""
    )
    subtitle_html = (
        f'<p class="subtitle" style="font-size:1.125rem;margin-bottom:2rem;opacity:0.9">{subtitle}</p>'
        if subtitle else ""
    )
    buttons = "".join(
        _button(
            b, ctx,
            primary_style=f"background:{t.white};color:{t.brand}",
            secondary_style=f"background:transparent;color:{t.white};border:2px solid {t.white}",
        )
        for b in s.buttons
    )

    return f"""
  <section class="cta-section" style="padding:4rem 1.5rem;background:linear-gradient(135deg,{t.brand} 0%,{t.brand_hover} 100%);color:{t.white}">
    <div style="max-width:48rem;margin:0 auto;text-align:center">
      {eyebrow_html}
      <h2 style="font-size:2rem;font-weight:600;margin-bottom:1rem;font-family:{t.font_serif}">{ctx.text(s.title)}</h2>
      {subtitle_html}
      {_button_row(buttons)}
    </div>
  </section>"""


def render_collection_embed(s: CollectionEmbedSection, ctx: RenderContext) -> str:
    t = ctx.theme
    items = s.visible_items

    if not items:
        return f"""
  <section class="collection-section" style="padding:4rem 1.5rem;background:{t.cream}">
    <div style="max-width:72rem;margin:0 auto;text-align:center">
      <p class="collection-empty" style="color:{t.gray}">Collection items will be displayed here.</p>
    </div>
  </section>"""

    cards = ""
    for item in items:
        image = ctx.t(item.image)
        summary = ctx.text(item.summary)
        village = ctx.text(item.village)
        if image:
            media = (
                f"<div style=\"position:relative;aspect-ratio:16/9;background-image:url('{image}');"
                f'background-size:cover;background-position:center">'
                f'<div style="position:absolute;inset:0;background:{t.card_gradient}"></div></div>'
            )
        else:
            media = f'<div style="aspect-ratio:16/9;background:{t.cream}"></div>'
        summary_html = (
            f'<p style="color:{t.gray};font-size:0.875rem;line-height:1.5;display:-webkit-box;'
            f'-webkit-line-clamp:2;-webkit-box-orient:vertical;overflow:hidden">{summary}</p>'
            if summary else ""
        )
        village_html = (
            f'<p class="collection-card__village" style="color:{t.brand};font-size:0.75rem;text-transform:uppercase;'
            f'letter-spacing:0.05em;margin-top:0.5rem">{village}</p>'
            if village else ""
        )
        cards += f"""
        <a href="{ctx.t(item.url) or '#'}" class="collection-card" style="display:block;background:{t.surface};border-radius:0.5rem;overflow:hidden;border:1px solid {t.border};text-decoration:none;transition:border-color 0.2s;box-shadow:0 1px 3px rgba(0,0,0,0.1)">
          {media}
          <div style="padding:1rem">
            <h3 style="font-size:1rem;font-weight:600;color:{t.navy};margin-bottom:0.5rem">{ctx.text(item.title)}</h3>
            {summary_html}
            {village_html}
          </div>
        </a>"""

    view_all = ""
    if s.show_view_all:
        view_all = (
            f'<div style="text-align:center;margin-top:2rem"><a href="{ctx.t(s.view_all_url) or "#"}" '
            f'style="color:{t.brand};text-decoration:none;font-weight:500">View All →</a></div>'
        )

    return f"""
  <section class="collection-section" style="padding:4rem 1.5rem;background:{t.cream}">
    <div style="max-width:72rem;margin:0 auto">
      {_heading(ctx.text(s.heading), ctx)}
      <div class="collection-grid" style="display:grid;grid-template-columns:repeat({s.display.columns},1fr);gap:1.5rem">{cards}
      </div>
      {view_all}
    </div>
  </section>"""


def render_testimonial(s: TestimonialSection, ctx: RenderContext) -> str:
    t = ctx.theme
    role = ctx.text(s.role)
    role_html = f'<div class="role" style="opacity:0.8">{role}</div>' if role else ""
    return f"""
  <section class="testimonial-section" style="padding:4rem 1.5rem;background:{t.brand};color:{t.white};text-align:center">
    <div style="max-width:48rem;margin:0 auto">
      <svg class="quote-icon" viewBox="0 0 24 24" fill="currentColor" style="width:3rem;height:3rem;margin-bottom:1.5rem;opacity:0.5">
        <path d="M14.017 21v-7.391c0-5.704 3.731-9.57 8.983-10.609l.995 2.151c-2.432.917-3.995 3.638-3.995 5.849h4v10h-9.983zm-14.017 0v-7.391c0-5.704 3.748-9.57 9-10.609l.996 2.151c-2.433.917-3.996 3.638-3.996 5.849h3.983v10h-9.983z"/>
      </svg>
      <blockquote style="font-size:1.5rem;font-style:italic;margin-bottom:2rem;font-family:{t.font_serif}">{ctx.text(s.quote)}</blockquote>
      <div class="author" style="font-weight:600">{ctx.text(s.author)}</div>
      {role_html}
    </div>
  </section>"""


def render_map(s: BaseSection, ctx: RenderContext) -> str:
    t = ctx.theme
    return (
        f'\n  <section class="map-section" style="padding:4rem 1.5rem;background:{t.cream};text-align:center">'
        f'<div style="max-width:72rem;margin:0 auto"><p class="placeholder" style="color:{t.gray}">'
        f"[Interactive Map]</p></div></section>"
    )


def render_footer(s: BaseSection, ctx: RenderContext) -> str:
    # Le pied de page du document est remplacé par celui du gabarit de page
    return ""


def render_placeholder(type_name: str, raw: Any, ctx: RenderContext) -> str:
    """Fragment visible pour un type inconnu ou une section invalide."""
    t = ctx.theme
    debug_html = ""
    if ctx.is_preview:
        dump = json.dumps(raw, indent=2, ensure_ascii=False, default=str)[:DEBUG_DUMP_LIMIT]
        debug_html = (
            f'<pre style="font-size:0.75rem;background:{t.white};padding:1rem;border-radius:0.5rem;'
            f'overflow:auto;margin-top:0.5rem">{escape(dump)}...</pre>'
        )
    return f"""
  <section class="placeholder-section" style="padding:2rem 1.5rem;background:{t.cream};border-left:4px solid {t.brand}">
    <div style="max-width:72rem;margin:0 auto">
      <div style="font-size:0.875rem;font-family:monospace;color:{t.gray}">[{escape(type_name)}]</div>
      {debug_html}
    </div>
  </section>"""


_RENDERERS: Dict[SectionKind, Callable[[Any, RenderContext], str]] = {
    SectionKind.HERO:             render_hero,
    SectionKind.STATS:            render_stats,
    SectionKind.FEATURE:          render_feature,
    SectionKind.CONTENT:          render_content,
    SectionKind.FAQ:              render_faq,
    SectionKind.CTA:              render_cta,
    SectionKind.TESTIMONIAL:      render_testimonial,
    SectionKind.COLLECTION_EMBED: render_collection_embed,
    SectionKind.FOOTER:           render_footer,
    SectionKind.MAP:              render_map,
}
