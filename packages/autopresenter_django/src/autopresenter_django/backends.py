# autopresenter_django/backends.py
"""
Template backend that presents every context variable before rendering.

Drop-in replacement for Django's own backend:

    TEMPLATES = [
        {
            "BACKEND": "autopresenter_django.backends.PresenterTemplates",
            "DIRS": [],
            "APP_DIRS": True,
            "OPTIONS": {
                "context_processors": [...],
                # optional; defaults to the registered decorator
                "decorator": "myproject.presenters.SiteDecorator",
            },
        },
    ]

All other OPTIONS are passed to the Django engine unchanged.
"""

import logging
from typing import Any

from autopresenter import Decorator
from django.template import TemplateDoesNotExist
from django.template.backends.django import DjangoTemplates
from django.template.backends.django import Template as DjangoTemplate
from django.template.backends.django import reraise

from .context import make_context
from .registry import get_decorator, load_decorator_class
from .settings import get_settings

logger = logging.getLogger(__name__)

__all__ = ["PresenterTemplates", "Template"]


class PresenterTemplates(DjangoTemplates):
    """`DjangoTemplates` whose templates render with presented variables."""

    def __init__(self, params: dict[str, Any]) -> None:
        params = params.copy()
        options = params.pop("OPTIONS", {}).copy()
        # The Django engine rejects unknown options, so take ours out first.
        decorator_path = options.pop("decorator", None)
        params["OPTIONS"] = options
        super().__init__(params)

        self._decorator: Decorator | None = None
        if decorator_path:
            self._decorator = load_decorator_class(decorator_path)()
            logger.debug("autopresenter.backend.decorator engine=%s decorator=%s", self.name, decorator_path)

    def get_decorator(self) -> Decorator | None:
        """Decorator for the next render, or None when presentation is disabled."""
        if not get_settings().enabled:
            return None
        return self._decorator or get_decorator()

    def from_string(self, template_code: str) -> "Template":
        return Template(self.engine.from_string(template_code), self)

    def get_template(self, template_name: str) -> "Template":
        try:
            return Template(self.engine.get_template(template_name), self)
        except TemplateDoesNotExist as exc:
            reraise(exc, self)


class Template(DjangoTemplate):
    def render(self, context: dict[str, Any] | None = None, request: Any = None) -> str:
        context = make_context(
            context,
            request,
            decorator=self.backend.get_decorator(),
            exclude=get_settings().exclude,
            autoescape=self.backend.engine.autoescape,
        )
        try:
            return self.template.render(context)
        except TemplateDoesNotExist as exc:
            reraise(exc, self.backend)
