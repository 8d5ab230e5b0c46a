from animation_engine.easing.curves import Bezier, EasingKind, Power
from animation_engine.timeline.timeline import Timeline


def _describe_kind(kind: EasingKind) -> str:
    if isinstance(kind, Bezier):
        return f"bezier({kind.c1.x:g},{kind.c1.y:g} {kind.c2.x:g},{kind.c2.y:g})"
    if isinstance(kind, Power):
        return f"power({kind.exponent:g})"
    return type(kind).__name__.lower()


def format_timeline(timeline: Timeline) -> str:
    lines = ["=" * 60, "TIMELINE DEBUG VIEW", "=" * 60]

    lines.append(
        f"Span: {timeline.start_time} → {timeline.end_time()} "
        f"({timeline.segment_count()} segments)"
    )
    lines.append(
        f"Range: {timeline.min_value():g} .. {timeline.max_value():g}\n"
    )

    stages = timeline.stages()
    lines.append(f"   ● {stages[0]}  value {timeline.start_value:g}")

    if timeline.is_empty():
        lines.append("   (no segments)")

    for i, segment in enumerate(timeline.segments):
        lines.append(f"   ├─ {_describe_kind(segment.kind)} over {segment.sustain_time}")
        lines.append(f"   ● {stages[i + 1]}  value {segment.end_value:g}")

    lines.append("=" * 60)
    return "\n".join(lines)


def debug_print_timeline(timeline: Timeline):
    print("\n" + format_timeline(timeline) + "\n")
