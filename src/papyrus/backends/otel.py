from opentelemetry import context as otel_context
from opentelemetry.baggage.propagation import W3CBaggagePropagator
from opentelemetry.context import Context
from opentelemetry.trace.propagation.tracecontext import TraceContextTextMapPropagator

from papyrus.builder import RequestBuilder
from papyrus.provider import RequestModifier


class TracingModifier(RequestModifier):
    """Propagates the current trace context and baggage as W3C headers."""

    def __init__(self, context: Context | None = None):
        self.context = context

    def modify(self, builder: RequestBuilder) -> None:
        ctx = self.context if self.context is not None else otel_context.get_current()

        headers: dict[str, str] = {}
        W3CBaggagePropagator().inject(headers, ctx)
        TraceContextTextMapPropagator().inject(headers, ctx)

        for key, value in headers.items():
            builder.add_header(key, value)
