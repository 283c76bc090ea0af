# core/orchestrator.py
"""
    One run: capture the host identity, resolve which providers to show,
    then render their facts in order with autowrap turned off for the
    duration.
"""
from __future__ import annotations
import logging
import signal
import sys
import tempfile
import threading
from contextlib import contextmanager
from typing import Iterable, Mapping, Optional, TextIO

from core.config import Settings
from core.escapes import autowrap
from core.models import RenderContext
from core.registry import ProviderRegistry, resolve_order
from reports.formatter import LineRenderer
from shared.system import get_system_info

logger = logging.getLogger(__name__)


def alignment_width(order: Iterable[str], override: Optional[int] = None) -> int:
    """Column offset shared by every value: longest name + 1, or `override`."""
    if override is not None:
        return max(override, 0)
    return max((len(name) for name in order), default=0) + 1


def _raise_exit(signum, frame):
    raise SystemExit(128 + signum)


@contextmanager
def terminal_session(ctx: RenderContext):
    """
    Autowrap is disabled while facts are printed and re-enabled on the way
    out, whatever the way out is. SIGTERM is turned into SystemExit so it
    unwinds through here as well.
    """
    installed = threading.current_thread() is threading.main_thread()
    if installed:
        previous = signal.signal(signal.SIGTERM, _raise_exit)

    if ctx.color:
        ctx.stream.write(autowrap(ctx, False))
    try:
        yield
    finally:
        if ctx.color:
            ctx.stream.write(autowrap(ctx, True))
            ctx.stream.flush()
        if installed:
            signal.signal(signal.SIGTERM, previous if previous is not None else signal.SIG_DFL)


def build_context(settings: Settings, environ: Mapping[str, str], order: list[str],
                  stream: TextIO) -> RenderContext:
    return RenderContext(
        host=get_system_info(),
        color=settings.color,
        label_color=settings.label_color,
        value_color=settings.value_color,
        separator=settings.separator,
        align=alignment_width(order, settings.align),
        term=settings.term,
        environ=dict(environ),
        stream=stream,
    )


def run(settings: Settings, environ: Mapping[str, str], stream: Optional[TextIO] = None,
        registry: Optional[ProviderRegistry] = None) -> int:
    stream = stream if stream is not None else sys.stdout
    registry = registry if registry is not None else ProviderRegistry()

    tempfile.tempdir = settings.tmpdir

    if settings.source:
        registry.load_extension(settings.source)

    order = resolve_order(settings.info)
    ctx = build_context(settings, environ, order, stream)
    logger.debug("host %s, order %s, align %d", ctx.host, order, ctx.align)

    renderer = LineRenderer(ctx)
    with terminal_session(ctx):
        for name in order:
            provider = registry.get(name)
            if provider is None:
                logger.debug("no provider named %r, skipped", name)
                continue

            try:
                fact = provider(ctx)
            except Exception as e:
                logger.debug("provider %s failed: %s", name, e, exc_info=True)
                continue

            if fact is not None:
                renderer.render_fact(fact)

        # No ascii art is drawn, so there is no height to pad up to.
        renderer.pad(0)

    return 0
