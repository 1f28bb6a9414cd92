"""
Run one art visualization against a local room photo.

Usage:
    artviz-visualize room.jpg --art-type gallery_wall
    artviz-visualize room.jpg --strategy pipeline --output room_with_art.png
"""
import argparse
import asyncio
import mimetypes
import sys
from pathlib import Path
from typing import List, Optional

from artviz.core.config import ORCHESTRATION_STRATEGIES, Settings
from artviz.core.errors import ArtVisualizationError
from artviz.core.logging import setup_logging
from artviz.services.art_catalog import ArtType, resolve_art_type
from artviz.services.art_visualization_service import ArtVisualizationService
from artviz.services.data_url import decode_data_url, encode_data_url


def default_output_path(room_image: Path, art_type: ArtType, mime_type: str) -> Path:
    extension = mimetypes.guess_extension(mime_type) or ".png"
    return room_image.with_name(f"{room_image.stem}_{art_type.value}{extension}")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Add artwork to the wall of a room photo using Gemini")
    parser.add_argument("room_image", type=Path, help="Path to the room photo")
    parser.add_argument(
        "--art-type",
        default=ArtType.PAINTING.value,
        choices=[art_type.value for art_type in ArtType],
        help="Kind of artwork to add (default: painting)",
    )
    parser.add_argument("--strategy", choices=ORCHESTRATION_STRATEGIES, help="Override ORCHESTRATION_STRATEGY")
    parser.add_argument("--output", type=Path, help="Where to write the generated image")
    return parser.parse_args(argv)


async def visualize_file(args: argparse.Namespace, settings: Settings) -> Path:
    room_image: Path = args.room_image
    mime_type = mimetypes.guess_type(room_image.name)[0] or "image/jpeg"
    data_url = encode_data_url(mime_type, room_image.read_bytes())

    service = ArtVisualizationService(settings)
    image_url = await service.visualize(data_url, args.art_type)

    generated = decode_data_url(image_url)
    output = args.output or default_output_path(room_image, resolve_art_type(args.art_type), generated.mime_type)
    output.write_bytes(generated.to_bytes())
    return output


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    overrides = {"orchestration_strategy": args.strategy} if args.strategy else {}
    settings = Settings(**overrides)
    setup_logging(settings)

    if not args.room_image.is_file():
        print(f"Room image not found: {args.room_image}", file=sys.stderr)
        return 1

    print("=" * 60)
    print(f"Visualizing {args.art_type} in {args.room_image} ({settings.orchestration_strategy})")
    print("=" * 60)

    try:
        output = asyncio.run(visualize_file(args, settings))
    except ArtVisualizationError as e:
        print(f"ERROR ({e.kind.value}): {e.message}", file=sys.stderr)
        return 1

    print(f"Saved visualization to: {output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
