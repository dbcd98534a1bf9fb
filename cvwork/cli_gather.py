"""
CLI Phase 1: Gather user requirements.

Parses command-line arguments and returns UserConfig dataclass.
No side effects - just parsing and conversion.
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import List, Optional

from .cli_config import RenderStage, UserConfig


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cvwork",
        description="Render a resume work-experience section from JSON.",
        epilog="""
Examples:
  Render to a Word document:
    python -m cvwork.cli --data experience.json --output out/experience.docx

  Render into a docxtpl template containing {{r work_experience }}:
    python -m cvwork.cli --data experience.json --output out/cv.docx \\
      --renderer docx-template --template template.docx

  Preview as plain text:
    python -m cvwork.cli --data experience.json --output out/experience.txt \\
      --renderer text --width 100 --date-format "%m/%Y"
""",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument("--data", help="Section JSON file")
    parser.add_argument("--output", help="Output file")
    parser.add_argument("--renderer", default="docx",
                        help="Renderer name (see --list-renderers). Default: docx")
    parser.add_argument("--template", help="Template .docx for the docx and docx-template renderers")
    parser.add_argument("--title", help="Section title, overrides the JSON title")
    parser.add_argument("--marker", help="List marker passed to the renderer")
    parser.add_argument("--date-format", help="strftime pattern for dates. Default: %%b %%Y")
    parser.add_argument("--width", type=int, help="Line width for the text renderer")
    parser.add_argument("--list-renderers", action="store_true",
                        help="List available renderers and exit")

    # Global arguments
    parser.add_argument("--strict", action="store_true",
                        help="Treat warnings as failure (non-zero exit code).")
    parser.add_argument("--debug", action="store_true",
                        help="Verbose logs + stack traces on failure.")
    parser.add_argument("--verbosity", type=int, choices=[0, 1, 2], default=0,
                        help="0=quiet, 1=normal, 2=verbose")
    parser.add_argument("--log-file", help="Optional path to a log file.")
    return parser


def gather_user_requirements(argv: Optional[List[str]] = None) -> UserConfig:
    """
    Phase 1: Parse command-line arguments and return user configuration.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    config = UserConfig(
        strict=args.strict,
        debug=args.debug,
        verbosity=args.verbosity,
        log_file=args.log_file,
        list_renderers=args.list_renderers,
    )
    if args.list_renderers:
        return config

    if not args.data or not args.output:
        parser.error("--data and --output are required unless --list-renderers is given")
    if args.renderer == "docx-template" and not args.template:
        parser.error("--renderer docx-template requires --template")

    config.render = RenderStage(
        data=Path(args.data),
        output=Path(args.output),
        renderer=args.renderer,
        template=Path(args.template) if args.template else None,
        title=args.title,
        marker=args.marker,
        date_format=args.date_format,
        width=args.width,
    )
    return config
