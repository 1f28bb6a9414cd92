"""
Prompt templates for art visualization.

All builders are pure string functions. Strategy A uses ``single_call``;
Strategy B uses ``room_analysis`` followed by ``prompt_synthesis``.
"""

SYNTHESIZED_PROMPT_PREFIX = "A photograph of"


class ArtPrompts:
    """Prompt builders for the art visualization strategies"""

    @staticmethod
    def get_placement_requirements() -> str:
        """Compositional rules shared by every prompt that places art on a wall."""
        return """- Be placed on the most prominent wall visible in the image
- Have realistic perspective and proportions that match the room's geometry
- Include proper lighting and shadows that match the existing room lighting
- Be properly sized for the space (not too large or too small - approximately proportional to the wall space)
- Look professionally installed and naturally integrated into the room
- Maintain all other elements of the room exactly as they appear in the original image"""

    @staticmethod
    def single_call(art_description: str) -> str:
        """Image-edit instruction sent alongside the room photo."""
        return f"""Using the provided image of a room, please add {art_description} to the wall.

The artwork should:
{ArtPrompts.get_placement_requirements()}

Generate a photorealistic image showing how this room would look with the artwork installed. The result should look like a professional interior design visualization."""

    @staticmethod
    def room_analysis() -> str:
        """Stage 1 of the pipeline: describe the room, text only."""
        return """Analyze this photograph of a room in detail. Describe, in plain prose:

1. WALLS: the color, texture and finish of each visible wall, and how light falls on them
2. LIGHTING: the light sources (windows, lamps, ceiling fixtures), their direction, warmth and intensity
3. ROOM STYLE: the overall interior style, materials and color palette
4. AVAILABLE WALL SPACE: which wall is the most prominent, and how much empty space it offers for artwork
5. CAMERA PERSPECTIVE: the viewing angle, camera height, lens feel and which walls are visible
6. EXISTING DECOR: furniture, objects and decorations, with their positions relative to the walls

Be specific and concrete so the room could be recreated from your description alone.
Do NOT generate an image. Respond with descriptive text only."""

    @staticmethod
    def prompt_synthesis(room_analysis: str, art_description: str) -> str:
        """Stage 2 of the pipeline: turn the analysis into an image-generation prompt."""
        return f"""You are writing a prompt for a photorealistic image generation model.

ROOM DESCRIPTION:
{room_analysis}

ARTWORK TO ADD:
{art_description}

Write ONE image generation prompt that recreates the room described above with the artwork installed on its most prominent wall.

The prompt must:
- Begin with the exact words "{SYNTHESIZED_PROMPT_PREFIX}"
- Be a single continuous paragraph (no lists, headings or line breaks)
- Describe a photorealistic interior photograph
- Preserve the original camera angle, perspective and composition
- Keep the walls, lighting, furniture and decor exactly as described
- Show the artwork at a realistic size with lighting and shadows matching the room

Respond with the prompt only."""
