"""
HTML body and subject line of the internal new-lead email.

The email is always in Spanish: it is read by the Vuelatour team, not by the
visitor. Every value coming from the form is HTML-escaped before it is placed
in the markup.
"""

from __future__ import annotations

import re
from datetime import date
from html import escape
from typing import List, Optional, Tuple

from vuelatour.services.lead_form.dates import format_long_date_with_weekday
from vuelatour.services.lead_form.fields import OTHER
from vuelatour.models.notification_models import QuoteNotificationPayload

NOT_SPECIFIED_F = "No especificada"
NOT_SPECIFIED_M = "No especificado"

ACCENT = "#e63946"
LABEL_STYLE = "padding: 8px 0; color: #64748b; font-size: 14px; width: 140px;"
VALUE_STYLE = "padding: 8px 0; color: #1e293b; font-size: 14px; font-weight: 500;"
SECTION_TITLE_STYLE = (
    "margin: 0 0 15px 0; color: #102a43; font-size: 16px; font-weight: 600; "
    f"border-bottom: 2px solid {ACCENT}; padding-bottom: 8px;"
)


def format_slug(slug: str) -> str:
    """`playa-del-carmen` -> `Playa Del Carmen`."""
    return " ".join(word[:1].upper() + word[1:] for word in slug.split("-"))


def format_email_date(value: Optional[str]) -> str:
    """Spanish long date with weekday; `No especificada` when missing."""
    if not value:
        return NOT_SPECIFIED_F
    try:
        return format_long_date_with_weekday(value) or NOT_SPECIFIED_F
    except ValueError:
        return value


def departure_label(payload: QuoteNotificationPayload) -> Optional[str]:
    if payload.departure_location == OTHER:
        return payload.departure_location_other
    return payload.departure_location


def destination_label(payload: QuoteNotificationPayload) -> str:
    if payload.destination == OTHER:
        return payload.destination_other or ""
    return format_slug(payload.destination) if payload.destination else ""


def tour_label(payload: QuoteNotificationPayload) -> str:
    return format_slug(payload.tour) if payload.tour else ""


def build_subject(payload: QuoteNotificationPayload) -> str:
    """Subject line used by the team's inbox filters."""
    if payload.is_charter:
        destination = (
            payload.destination_other if payload.destination == OTHER else payload.destination
        )
        target = format_slug(destination) if destination else "destino personalizado"
        return f"Nueva Cotización: Vuelo a {target} - {payload.name}"
    if payload.service_type == "tour":
        target = format_slug(payload.tour) if payload.tour else "aéreo"
        return f"Nueva Cotización: Tour {target} - {payload.name}"
    return f"Nuevo Mensaje de Contacto - {payload.name}"


def _row(label: str, value: str, value_style: str = VALUE_STYLE) -> str:
    return (
        "<tr>"
        f'<td style="{LABEL_STYLE}">{escape(label)}</td>'
        f'<td style="{value_style}">{value}</td>'
        "</tr>"
    )


def _section(title: str, body: str) -> str:
    return (
        '<tr><td style="padding: 0 40px 20px 40px;">'
        f'<h2 style="{SECTION_TITLE_STYLE}">{title}</h2>'
        f'<table role="presentation" cellspacing="0" cellpadding="0" border="0" width="100%">{body}</table>'
        "</td></tr>"
    )


def _trip_rows(payload: QuoteNotificationPayload) -> List[Tuple[str, str]]:
    if payload.is_charter:
        rows = [
            ("Origen:", escape(departure_label(payload) or NOT_SPECIFIED_M)),
            ("Destino:", escape(destination_label(payload) or NOT_SPECIFIED_M)),
            ("Fecha de ida:", escape(format_email_date(payload.travel_date))),
            ("Hora de salida:", escape(payload.departure_time or NOT_SPECIFIED_F)),
        ]
        if payload.return_date:
            rows.append(("Fecha de regreso:", escape(format_email_date(payload.return_date))))
            if payload.return_time:
                rows.append(("Hora de regreso:", escape(payload.return_time)))
        if payload.aircraft_selected:
            rows.append(("Aeronave:", escape(payload.aircraft_selected)))
        return rows
    passengers = payload.number_of_passengers
    return [
        ("Tour:", escape(tour_label(payload))),
        ("Pasajeros:", escape(str(passengers) if passengers else NOT_SPECIFIED_M)),
        ("Fecha:", escape(format_email_date(payload.travel_date))),
        ("Hora:", escape(payload.departure_time or NOT_SPECIFIED_F)),
    ]


def render_quote_email(payload: QuoteNotificationPayload, year: Optional[int] = None) -> str:
    """Render the full HTML document for one lead."""
    year = year or date.today().year
    is_charter = payload.is_charter
    if is_charter:
        service_label, badge = "Vuelo Privado (Charter)", "✈️ VUELO PRIVADO"
        badge_colors = ("#dbeafe", "#1e40af")
    elif payload.service_type == "tour":
        service_label, badge = "Tour Aéreo", "🎯 TOUR AÉREO"
        badge_colors = ("#dcfce7", "#166534")
    else:
        service_label, badge = "Mensaje de Contacto", "✉️ CONTACTO"
        badge_colors = ("#f1f5f9", "#334155")

    name = escape(payload.name)
    email = escape(payload.email)
    phone = escape(payload.phone or "")

    client_rows = "".join(
        [
            _row("Nombre:", name),
            _row("Email:", f'<a href="mailto:{email}" style="color: {ACCENT}; text-decoration: none;">{email}</a>'),
            _row("Teléfono:", f'<a href="tel:{phone}" style="color: {ACCENT}; text-decoration: none;">{phone}</a>'),
        ]
    )
    sections = [_section("👤 Información del Cliente", client_rows)]

    if payload.service_type is not None:
        trip_rows = "".join(_row(label, value) for label, value in _trip_rows(payload))
        if payload.pre_selected_price:
            price = escape(str(payload.pre_selected_price))
            trip_rows += _row(
                "Precio cotizado:",
                f"Desde ${price} USD",
                f"padding: 8px 0; color: {ACCENT}; font-size: 14px; font-weight: 600;",
            )
        title = "🛫 Detalles del Vuelo" if is_charter else "🎫 Detalles del Tour"
        sections.append(_section(title, trip_rows))

    if payload.message:
        sections.append(
            '<tr><td style="padding: 0 40px 30px 40px;">'
            f'<h2 style="{SECTION_TITLE_STYLE}">💬 Mensaje del Cliente</h2>'
            f'<div style="background-color: #f8fafc; border-left: 4px solid {ACCENT}; padding: 15px; border-radius: 0 8px 8px 0;">'
            f'<p style="margin: 0; color: #475569; font-size: 14px; line-height: 1.6;">{escape(payload.message)}</p>'
            "</div></td></tr>"
        )

    reply_topic = escape(destination_label(payload) if is_charter else tour_label(payload))
    whatsapp_number = re.sub(r"[^0-9]", "", payload.phone or "")
    cta = (
        '<tr><td style="padding: 0 40px 30px 40px;">'
        '<table role="presentation" cellspacing="0" cellpadding="0" border="0" width="100%">'
        '<tr><td align="center">'
        f'<a href="mailto:{email}?subject=Re: Cotización Vuelatour - {reply_topic}" '
        f'style="display: inline-block; background-color: {ACCENT}; color: #ffffff; padding: 14px 28px; '
        'border-radius: 8px; text-decoration: none; font-weight: 600; font-size: 14px;">Responder al Cliente</a>'
        "</td></tr>"
    )
    if whatsapp_number:
        cta += (
            '<tr><td align="center" style="padding-top: 12px;">'
            f'<a href="https://wa.me/{whatsapp_number}" style="display: inline-block; background-color: #25d366; '
            'color: #ffffff; padding: 12px 24px; border-radius: 8px; text-decoration: none; font-weight: 500; '
            'font-size: 13px;">💬 Contactar por WhatsApp</a>'
            "</td></tr>"
        )
    cta += "</table></td></tr>"
    sections.append(cta)
    body = "".join(sections)

    return f"""<!DOCTYPE html>
<html>
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>Nueva Solicitud de Cotización - Vuelatour</title>
</head>
<body style="margin: 0; padding: 0; background-color: #f4f4f5; font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, Arial, sans-serif;">
  <table role="presentation" cellspacing="0" cellpadding="0" border="0" width="100%" style="background-color: #f4f4f5;">
    <tr>
      <td style="padding: 40px 20px;">
        <table role="presentation" cellspacing="0" cellpadding="0" border="0" width="600" style="margin: 0 auto; background-color: #ffffff; border-radius: 12px; overflow: hidden;">
          <tr>
            <td style="background-color: #102a43; padding: 30px 40px; text-align: center;">
              <h1 style="margin: 0; color: #ffffff; font-size: 24px; font-weight: 600;">Nueva Solicitud de Cotización</h1>
              <p style="margin: 10px 0 0 0; color: #94a3b8; font-size: 14px;">{service_label}</p>
            </td>
          </tr>
          <tr>
            <td style="padding: 20px 40px 0 40px;">
              <table role="presentation" cellspacing="0" cellpadding="0" border="0" width="100%">
                <tr>
                  <td style="background-color: {badge_colors[0]}; color: {badge_colors[1]}; padding: 8px 16px; border-radius: 20px; font-size: 12px; font-weight: 600; text-align: center;">{badge}</td>
                </tr>
              </table>
            </td>
          </tr>
          <tr><td style="padding-top: 30px;"></td></tr>
          {body}
          <tr>
            <td style="background-color: #f8fafc; padding: 20px 40px; text-align: center; border-top: 1px solid #e2e8f0;">
              <p style="margin: 0; color: #94a3b8; font-size: 12px;">
                Este correo fue generado automáticamente desde el formulario de contacto de
                <a href="https://vuelatour.com" style="color: {ACCENT}; text-decoration: none;">vuelatour.com</a>
              </p>
              <p style="margin: 8px 0 0 0; color: #cbd5e1; font-size: 11px;">© {year} Vuelatour. Todos los derechos reservados.</p>
            </td>
          </tr>
        </table>
      </td>
    </tr>
  </table>
</body>
</html>
"""
