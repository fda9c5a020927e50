from dataclasses import dataclass


@dataclass(slots=True)
class TileMaterial:
    """Per-cell effect material; ``time`` drives the hover pulse."""
    texture: str
    time: float = 0.0
