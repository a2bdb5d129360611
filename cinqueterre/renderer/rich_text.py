"""
Texte riche des sections content.

Formes acceptées :
  "Para 1\\n\\nPara 2"                          → un <p> par bloc
  {"en": "...", "fr": "..."}                    → localisé puis découpé comme ci-dessus
  ["texte", {"type": "subheading", "text": ...},
   {"type": "callout", "text": ...},
   {"type": "list", "items": ["a", "b"]}]       → item par item (défaut : paragraph)

Le **gras** est développé sur le texte localisé non échappé (contenu de confiance).
Seuls les sous-titres sont échappés.
"""
from typing import Any

from ..core.i18n import escape, expand_bold
from .base import RenderContext


def _strong_style(ctx: RenderContext) -> str:
    return f"color:{ctx.theme.navy}"


def _item_text(value: Any, ctx: RenderContext) -> str:
    if isinstance(value, (str, dict)):
        return ctx.t(value)
    return "" if value is None else str(value)


def render_paragraph(text: str, ctx: RenderContext) -> str:
    return f'<p style="margin-bottom:1rem">{expand_bold(text, _strong_style(ctx))}</p>'


def render_item(item: Any, ctx: RenderContext) -> str:
    t = ctx.theme
    if isinstance(item, str):
        return render_paragraph(item, ctx)
    if not isinstance(item, dict):
        return ""

    kind = item.get("type") or "paragraph"
    text = ctx.t(item.get("text"))

    if kind == "subheading":
        return (
            f'<h3 style="font-size:1.25rem;font-weight:600;color:{t.navy};margin:1.5rem 0 0.75rem">'
            f"{escape(text)}</h3>"
        )
    if kind == "callout":
        return (
            f'<div class="callout" style="background:{t.cream};border-left:4px solid {t.brand};'
            f'padding:1rem 1.25rem;margin:1rem 0;border-radius:0 0.25rem 0.25rem 0">'
            f'<p style="color:{t.navy};font-style:italic">{expand_bold(text)}</p></div>'
        )
    if kind == "list":
        entries = item.get("items") or []
        if not isinstance(entries, list):
            entries = []
        lis = "".join(
            f'<li style="margin-bottom:0.5rem;color:{t.gray}">'
            f"{expand_bold(_item_text(li, ctx), _strong_style(ctx))}</li>"
            for li in entries
        )
        return f'<ul style="margin:1rem 0;padding-left:1.5rem;list-style:disc">{lis}</ul>'

    # paragraph + types inconnus
    return render_paragraph(text, ctx)


def render_items(items: Any, ctx: RenderContext) -> str:
    """Items de contenu → HTML. Entrée vide ou inattendue → ""."""
    if not items:
        return ""
    if isinstance(items, dict):
        items = ctx.t(items)
    if isinstance(items, str):
        return "".join(
            render_paragraph(block, ctx)
            for block in items.split("\n\n")
            if block.strip()
        )
    if not isinstance(items, list):
        return ""
    return "".join(render_item(item, ctx) for item in items)
