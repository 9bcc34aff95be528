"""Generate one reference image for a saved profile from the command line.

Standalone helper that uses the same compiler, dispatcher and configured
provider as the API, and prints the image locator plus the exact prompt.

Usage:
    # from the repository root
    python scripts/forge_reference.py character <character_id> HEADSHOT
    python scripts/forge_reference.py set <set_id> WIDE
    python scripts/forge_reference.py composite <character_id> <set_id> --action "Piloting"
"""

import argparse
import asyncio
import sys
from pathlib import Path
from typing import Optional

# Make backend/ importable when run without installing the package
_BACKEND_PATH = Path(__file__).parent.parent / "backend"
if str(_BACKEND_PATH) not in sys.path:
    sys.path.insert(0, str(_BACKEND_PATH))

from canon_forge.core.config import get_settings  # noqa: E402
from canon_forge.core.errors import GenerationError  # noqa: E402
from canon_forge.models.generation import GenerationResult  # noqa: E402
from canon_forge.models.profile import CompositeConfig  # noqa: E402
from canon_forge.services.dispatch import GenerationDispatcher  # noqa: E402
from canon_forge.services.forge import ForgeService  # noqa: E402
from canon_forge.services.providers.factory import build_provider  # noqa: E402
from canon_forge.services.storage import ProfileStore  # noqa: E402


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate a reference image for a saved character, set or composite."
    )
    sub = parser.add_subparsers(dest="kind", required=True)

    char = sub.add_parser("character", help="Character reference image.")
    char.add_argument("profile_id")
    char.add_argument("category")

    set_ = sub.add_parser("set", help="Set reference image.")
    set_.add_argument("profile_id")
    set_.add_argument("category")

    comp = sub.add_parser("composite", help="Character placed inside a set.")
    comp.add_argument("character_id")
    comp.add_argument("set_id")
    comp.add_argument("--action", default="")
    comp.add_argument("--extra-actors", default="")
    comp.add_argument("--style", default="")
    return parser


async def run(
    args: argparse.Namespace,
    service: ForgeService,
    store: ProfileStore,
) -> GenerationResult:
    """Look up the saved profile(s) named in `args` and generate one image.

    Raises:
        LookupError: A referenced profile id is not saved.
        GenerationError: The provider call failed.
    """
    if args.kind == "character":
        profile = store.find_character(args.profile_id)
        if profile is None:
            raise LookupError(f"No saved character with id {args.profile_id}")
        return await service.generate_character_image(profile, args.category.upper())

    if args.kind == "set":
        set_profile = store.find_set(args.profile_id)
        if set_profile is None:
            raise LookupError(f"No saved set with id {args.profile_id}")
        return await service.generate_set_image(set_profile, args.category.upper())

    character = store.find_character(args.character_id)
    set_profile = store.find_set(args.set_id)
    if character is None or set_profile is None:
        raise LookupError("Composite needs a saved character and a saved set")
    config = CompositeConfig(
        character_id=character.id,
        set_id=set_profile.id,
        action=args.action,
        extra_actors=args.extra_actors,
        composition_style=args.style,
    )
    return await service.generate_composite_image(character, set_profile, config)


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    service = ForgeService(
        GenerationDispatcher(
            build_provider(settings), timeout=settings.generation_timeout_seconds
        )
    )
    store = ProfileStore(Path(settings.data_dir))

    try:
        result = asyncio.run(run(args, service, store))
    except (LookupError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except GenerationError as exc:
        print(f"generation failed [{exc.kind.value}]: {exc.message}", file=sys.stderr)
        return 1

    print(result.url)
    print()
    print(result.prompt)
    return 0


if __name__ == "__main__":
    sys.exit(main())
