"""
Catalog of the art types a user can place on a wall
"""
from enum import Enum
from typing import Any, Dict, List, Optional


class ArtType(str, Enum):
    """Art types offered by the visualizer"""

    PAINTING = "painting"
    PHOTOGRAPH = "photograph"
    SCULPTURE = "sculpture"
    GALLERY_WALL = "gallery_wall"
    ABSTRACT_ART = "abstract_art"
    CANVAS_PRINT = "canvas_print"


DEFAULT_ART_TYPE = ArtType.PAINTING

# Description fragments dropped into "please add {description} to the wall"
ART_DESCRIPTIONS: Dict[ArtType, str] = {
    ArtType.PAINTING: (
        "a beautiful, high-quality framed painting with an elegant ornate gold frame. "
        "The painting should be a tasteful landscape or abstract artwork with rich colors that complement the room"
    ),
    ArtType.PHOTOGRAPH: (
        "a professionally framed photograph with a modern, sleek black frame. "
        "The photograph should be a striking artistic photo (landscape, cityscape, or artistic portrait) "
        "that fits the room's aesthetic"
    ),
    ArtType.SCULPTURE: (
        "an elegant three-dimensional wall-mounted sculpture with interesting textures and shadows. "
        "The sculpture should be modern and artistic, creating visual interest on the wall"
    ),
    ArtType.GALLERY_WALL: (
        "a professionally curated gallery wall featuring 5-7 framed artworks of various sizes arranged in an "
        "aesthetically pleasing pattern. The frames should be a mix of styles and the artwork should be cohesive"
    ),
    ArtType.ABSTRACT_ART: (
        "a large, vibrant abstract art piece with bold colors, dynamic brushstrokes, and geometric or organic "
        "shapes that create visual energy. The piece should be properly framed or on canvas"
    ),
    ArtType.CANVAS_PRINT: (
        "a large stretched canvas print featuring contemporary artwork with modern styling. "
        "The canvas should be frameless with gallery-wrapped edges, showing a striking image that complements the space"
    ),
}

# Human-readable labels for the client's selector, in display order
ART_TYPE_LABELS: Dict[ArtType, str] = {
    ArtType.PAINTING: "Painting",
    ArtType.PHOTOGRAPH: "Framed Photograph",
    ArtType.SCULPTURE: "Wall Sculpture",
    ArtType.GALLERY_WALL: "Gallery Wall",
    ArtType.ABSTRACT_ART: "Abstract Art",
    ArtType.CANVAS_PRINT: "Canvas Print",
}


def resolve_art_type(value: Optional[str]) -> ArtType:
    """Map a client-supplied identifier to an ArtType, defaulting to painting."""
    if isinstance(value, ArtType):
        return value
    try:
        return ArtType(value)
    except ValueError:
        return DEFAULT_ART_TYPE


def describe_art(art_type: Optional[str]) -> str:
    """Description fragment for an art type; unknown or missing types describe a painting."""
    return ART_DESCRIPTIONS[resolve_art_type(art_type)]


def list_art_types() -> List[Dict[str, Any]]:
    return [{"value": art_type.value, "label": label} for art_type, label in ART_TYPE_LABELS.items()]
