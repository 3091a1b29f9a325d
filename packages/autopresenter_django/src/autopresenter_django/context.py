# autopresenter_django/context.py
"""
Render-time presentation of template variables.

Django has no "before render" hook that sees both the shared variables
(context processors) and the variables passed to a single render, so the
hook lives in the context itself. `bind_template()` runs when a template
starts rendering a context:

1. the parent implementation applies context processors;
2. every variable in every layer (shared and local) is replaced, in place,
   by `decorator.decorate(value)`.

Step 2 runs after all other variable population and before any node
renders. The builtins layer (`True`/`False`/`None`) and excluded names are
left alone. The caller's dict is never touched: `make_context` always
renders from a copy of it.
"""

import logging
from collections.abc import Iterable
from contextlib import contextmanager
from typing import Any, Iterator

from autopresenter import Decorator
from autopresenter.tracing import service_span_sync
from django.template.context import Context, RequestContext

logger = logging.getLogger(__name__)

__all__ = [
    "PresentingContextMixin",
    "PresentingContext",
    "PresentingRequestContext",
    "make_context",
]


class PresentingContextMixin:
    """Context mixin that decorates variables when a template binds."""

    decorator: Decorator | None = None
    exclude: frozenset[str] = frozenset()

    @contextmanager
    def bind_template(self, template: Any) -> Iterator[None]:
        with super().bind_template(template):
            self.present_variables(getattr(template, "name", None))
            yield

    def present_variables(self, template_name: str | None = None) -> int:
        """Decorate every non-builtin variable in place; return how many were visited."""
        if self.decorator is None:
            return 0

        count = 0
        with service_span_sync(
            "autopresenter.context.present",
            attributes={"autopresenter.template": template_name, "autopresenter.decorator": type(self.decorator).__name__},
        ) as span:
            # dicts[0] holds the builtins
            for layer in self.dicts[1:]:
                for name, value in list(layer.items()):
                    if name in self.exclude:
                        continue
                    layer[name] = self.decorator.decorate(value)
                    count += 1
            span.set_attribute("autopresenter.variables", count)

        logger.debug("autopresenter.context.presented template=%s variables=%d", template_name, count)
        return count


class PresentingContext(PresentingContextMixin, Context):
    pass


class PresentingRequestContext(PresentingContextMixin, RequestContext):
    pass


def make_context(
    context: dict[str, Any] | None,
    request: Any = None,
    *,
    decorator: Decorator | None,
    exclude: Iterable[str] = (),
    **kwargs: Any,
) -> Context:
    """Create a presenting context from a template context dict and optional request.

    Mirrors `django.template.context.make_context`; `decorator=None` renders
    without presentation.
    """
    if context is not None and not isinstance(context, dict):
        raise TypeError(f"context must be a dict rather than {context.__class__.__name__}.")
    if request is None:
        # Context keeps the given dict as a layer; copy it so presenting never writes to the caller's dict.
        ctx = PresentingContext(dict(context) if context is not None else None, **kwargs)
    else:
        # Local variables sit above the processors layer so they win on clashes.
        original_context = context
        ctx = PresentingRequestContext(request, **kwargs)
        if original_context:
            ctx.push(original_context)
    ctx.decorator = decorator
    ctx.exclude = frozenset(exclude)
    return ctx
