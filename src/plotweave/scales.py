"""Scale collection keyed by aesthetic."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from plotweave.components import Scale
from plotweave.diagnostics import notify

POSITION_AESTHETICS = frozenset(
    {
        "x",
        "xmin",
        "xmax",
        "xend",
        "xintercept",
        "xlower",
        "xmiddle",
        "xupper",
        "x0",
        "y",
        "ymin",
        "ymax",
        "yend",
        "yintercept",
        "ylower",
        "ymiddle",
        "yupper",
        "y0",
    }
)


@dataclass(slots=True)
class ScalesList:
    """Ordered scales; each aesthetic is covered by at most one scale."""

    scales: list[Scale] = field(default_factory=list)

    def find(self, aesthetic: str) -> list[bool]:
        return [aesthetic in scale.aesthetics for scale in self.scales]

    def has_scale(self, aesthetic: str) -> bool:
        return any(self.find(aesthetic))

    def get_scales(self, aesthetic: str) -> Scale | None:
        for scale in self.scales:
            if aesthetic in scale.aesthetics:
                return scale
        return None

    def add(self, scale: Scale | None) -> None:
        """Add ``scale``, replacing any scale that covers the same aesthetic."""
        if scale is None:
            return

        kept = [existing for existing in self.scales if not _overlaps(existing, scale)]
        replaced = [existing for existing in self.scales if _overlaps(existing, scale)]
        if replaced:
            aesthetic = replaced[0].aesthetics[0]
            notify(
                f"Scale for {aesthetic} is already present.\n"
                f"Adding another scale for {aesthetic}, which will replace the existing scale."
            )

        self.scales = [*kept, scale]

    def non_position_scales(self) -> ScalesList:
        return ScalesList(
            [
                scale
                for scale in self.scales
                if not any(a in POSITION_AESTHETICS for a in scale.aesthetics)
            ]
        )

    def clone(self) -> ScalesList:
        return ScalesList(list(self.scales))

    def __len__(self) -> int:
        return len(self.scales)

    def __iter__(self) -> Iterator[Scale]:
        return iter(self.scales)


def _overlaps(left: Scale, right: Scale) -> bool:
    return any(aesthetic in left.aesthetics for aesthetic in right.aesthetics)
