"""
    Report formatting: one aligned, colorized line per fact.
"""
from core.escapes import esc, sgr
from core.models import Fact, RenderContext


def normalize(value: str) -> str:
    """Collapse whitespace runs to single spaces and trim both ends."""
    return " ".join(value.split())


class LineRenderer:
    def __init__(self, ctx: RenderContext):
        self.ctx = ctx
        self.lines_rendered = 0

    def render(self, label: str, value, suppress_separator: bool = False) -> None:
        if not value:
            return

        ctx = self.ctx
        parts = [
            sgr(ctx, f"3{ctx.label_color}"),
            sgr(ctx, 1),
            label,
            sgr(ctx, 0),
        ]
        if not suppress_separator:
            parts.append(ctx.separator)

        # Step back over the label, then forward the shared width, so every
        # value starts in the same column. Plain output pads with spaces to
        # the same column instead.
        if ctx.color:
            parts.append(esc("CUB", len(label)))
            parts.append(esc("CUF", ctx.align))
        else:
            parts.append(" " * max(ctx.align - len(label), 0))

        parts += [
            sgr(ctx, f"3{ctx.value_color}"),
            normalize(value),
            sgr(ctx, 0),
            "\n",
        ]
        ctx.stream.write("".join(parts))
        self.lines_rendered += 1

    def render_fact(self, fact: Fact) -> None:
        if fact.blank_before and fact.value:
            self.blank_line()
        self.render(fact.label, fact.value, suppress_separator=not fact.show_separator)

    def blank_line(self) -> None:
        self.ctx.stream.write("\n")

    def pad(self, height: int = 0) -> None:
        """Blank lines up to `height` rows of output; nothing when already taller."""
        for _ in range(height - self.lines_rendered):
            self.blank_line()
