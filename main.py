"""CLI entrypoint: run a generation pass or serve the booking API."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
import sys

from pydantic import ValidationError

from config import get_settings
from core import ImagePolicyKind
from utils import configure_app_logging
from utils.exceptions import JuoruFeedError


logger = logging.getLogger(__name__)


def _generate(args: argparse.Namespace) -> int:
    from intelligence.llm import get_image_provider, get_text_provider
    from pipeline.runner import run_pipeline_sync

    generator = get_settings().generator
    overrides = {
        "names_source": args.names,
        "archive_path": args.archive,
        "images_dir": args.images_dir,
        "max_items": args.max_items,
        "text_concurrency": args.concurrency,
        "image_policy": ImagePolicyKind(args.image_policy) if args.image_policy else None,
        "max_images_per_run": args.max_images,
        "image_probability": args.image_probability,
    }
    generator = generator.model_copy(update={k: v for k, v in overrides.items() if v is not None})
    config = generator.to_pipeline_config()

    text_provider = get_text_provider()
    image_provider = None
    if config.image_policy.kind != ImagePolicyKind.NONE:
        image_provider = get_image_provider()

    report = run_pipeline_sync(config, text_provider, image_provider)
    print(json.dumps(report.model_dump(mode="json"), ensure_ascii=False, indent=2))
    return 0


def _serve(args: argparse.Namespace) -> int:
    import uvicorn

    from webapp.app import create_app

    server = get_settings().server
    app = create_app(
        bookings_path=Path(args.bookings or server.bookings_path),
        static_dir=Path(args.static_dir or server.static_dir),
    )
    uvicorn.run(app, host=args.host or server.host, port=args.port or server.port)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="juoru-feed CLI")
    parser.add_argument("--verbose", action="store_true")
    sub = parser.add_subparsers(dest="command", required=True)

    gen = sub.add_parser("generate", help="Generate items for all names and merge into the archive")
    gen.add_argument("--names", default=None)
    gen.add_argument("--archive", default=None)
    gen.add_argument("--images-dir", default=None)
    gen.add_argument("--max-items", type=int, default=None)
    gen.add_argument("--concurrency", type=int, default=None)
    gen.add_argument("--image-policy", choices=[kind.value for kind in ImagePolicyKind], default=None)
    gen.add_argument("--max-images", type=int, default=None)
    gen.add_argument("--image-probability", type=float, default=None)

    serve = sub.add_parser("serve", help="Serve the booking API and the static viewer")
    serve.add_argument("--host", default=None)
    serve.add_argument("--port", type=int, default=None)
    serve.add_argument("--bookings", default=None)
    serve.add_argument("--static-dir", default=None)

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    configure_app_logging(logging.DEBUG if args.verbose else logging.INFO)

    try:
        if args.command == "generate":
            return _generate(args)
        if args.command == "serve":
            return _serve(args)
    except JuoruFeedError as exc:
        logger.error(f"{exc.__class__.__name__}: {exc}")
        return 1
    except ValidationError as exc:
        logger.error(f"Invalid configuration: {exc}")
        return 1
    return 2


if __name__ == "__main__":
    sys.exit(main())
