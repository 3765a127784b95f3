# apps/core/htmx.py
"""
Negocjacja kształtu odpowiedzi dla klienta htmx.

Każdy widok renderujący decyduje przez ``negotiate()``, czy zwrócić pełną
stronę (z nawigacją i sidebarem), czy sam fragment do podmiany w DOM.
Dyrektywy dla klienta (``updateLocation``, powiadomienia) trafiają do
nagłówków odpowiedzi, nigdy do treści.
"""
import json
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict

from django.http import HttpResponse, HttpResponseRedirect
from django.shortcuts import render, resolve_url

logger = logging.getLogger(__name__)

HX_REQUEST = 'HX-Request'
HX_BOOSTED = 'HX-Boosted'
HX_TRIGGER = 'HX-Trigger'
HX_TRIGGER_AFTER_SWAP = 'HX-Trigger-After-Swap'

UPDATE_LOCATION_EVENT = 'updateLocation'
NOTIFICATION_EVENT = 'notification'


class ResponseShape(str, Enum):
    PAGE = 'page'
    FRAGMENT = 'fragment'


class NotificationVariant(str, Enum):
    SUCCESS = 'success'
    INFO = 'info'
    WARNING = 'warning'
    ERROR = 'error'


def negotiate(is_fragment: bool, boosted: bool) -> ResponseShape:
    """Boosted nawigacja nadal dostaje pełną stronę."""
    if is_fragment and not boosted:
        return ResponseShape.FRAGMENT
    return ResponseShape.PAGE


def _header_flag(request, name: str) -> bool:
    return request.headers.get(name, '').lower() == 'true'


@dataclass(frozen=True)
class HxHeaderInfo:
    is_htmx: bool
    boosted: bool

    @classmethod
    def from_request(cls, request) -> 'HxHeaderInfo':
        return cls(
            is_htmx=_header_flag(request, HX_REQUEST),
            boosted=_header_flag(request, HX_BOOSTED),
        )

    @property
    def shape(self) -> ResponseShape:
        return negotiate(self.is_htmx, self.boosted)


class HttpResponseSeeOther(HttpResponseRedirect):
    status_code = 303


def see_other(to, *args, **kwargs) -> HttpResponseSeeOther:
    """Jak ``redirect()``, ale 303 (po POST przeglądarka robi GET)."""
    return HttpResponseSeeOther(resolve_url(to, *args, **kwargs))


def hx_trigger_notification(
        title: str,
        message: str,
        variant: NotificationVariant = NotificationVariant.SUCCESS,
        close: bool = True,
) -> tuple:
    """Zwraca parę (nagłówek, wartość) z powiadomieniem dla klienta."""
    payload = {
        NOTIFICATION_EVENT: {
            'title': title,
            'message': message,
            'variant': NotificationVariant(variant).value,
            'close': close,
        }
    }
    return HX_TRIGGER, json.dumps(payload)


def attach_notification(
        response: HttpResponse,
        title: str,
        message: str,
        variant: NotificationVariant = NotificationVariant.SUCCESS,
        close: bool = True,
) -> HttpResponse:
    header, value = hx_trigger_notification(title, message, variant, close)
    response[header] = value
    return response


def attach_update_location(response: HttpResponse) -> HttpResponse:
    response[HX_TRIGGER_AFTER_SWAP] = UPDATE_LOCATION_EVENT
    return response


def render_with_location(request, template_name: str, context: Dict, status: int = 200) -> HttpResponse:
    return attach_update_location(render(request, template_name, context, status=status))


def render_negotiated(
        request,
        page_template: str,
        build_page: Callable[[], Dict],
        fragment_template: str,
        build_fragment: Callable[[], Dict],
) -> HttpResponse:
    """
    Renderuje stronę albo fragment, zależnie od nagłówków htmx.

    Buildery kontekstu wołane są leniwie, żeby zapytania potrzebne tylko
    pełnej stronie (sidebar, cała tablica) nie szły przy fragmencie.
    """
    shape = HxHeaderInfo.from_request(request).shape
    logger.debug("Rendering %s for %s", shape.value, request.path)

    if shape is ResponseShape.FRAGMENT:
        return render_with_location(request, fragment_template, build_fragment())
    return render_with_location(request, page_template, build_page())
