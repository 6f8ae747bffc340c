"""
Printable record of a completed one-on-one.

WeasyPrint needs Pango/Cairo on the host, so it is imported only when a PDF
is actually produced; ``?format=html`` returns the same page as HTML.
"""
from django.http import HttpResponse
from django.template.loader import render_to_string
from django.utils import timezone
from django.utils.text import slugify

from .next_actions import sort_next_actions

TEMPLATE_NAME = "meetings/one_on_one_pdf.html"


def one_on_one_context(one_on_one) -> dict:
    return {
        "one_on_one": one_on_one,
        "agendas": one_on_one.agendas.all(),
        "minutes": one_on_one.minutes.all(),
        "next_actions": sort_next_actions(one_on_one.next_actions.all()),
        "generated_at": timezone.now(),
    }


def export_filename(one_on_one) -> str:
    # 1on1-2026-03-10-gen-member.pdf
    when = timezone.localtime(one_on_one.scheduled_at).strftime("%Y-%m-%d")
    member = slugify(one_on_one.member.name) or f"member-{one_on_one.member_id}"
    return f"1on1-{when}-{member}.pdf"


def render_one_on_one_pdf(request, one_on_one):
    html = render_to_string(TEMPLATE_NAME, one_on_one_context(one_on_one), request=request)
    if request.GET.get("format") == "html":
        return HttpResponse(html)

    from weasyprint import HTML

    document = HTML(string=html, base_url=request.build_absolute_uri("/")).write_pdf()
    response = HttpResponse(document, content_type="application/pdf")
    disposition = "attachment" if request.GET.get("download") else "inline"
    response["Content-Disposition"] = f'{disposition}; filename="{export_filename(one_on_one)}"'
    return response
