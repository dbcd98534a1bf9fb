#!/usr/bin/env python3
# Copyright 2025 Ivo Mateev
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Command-line interface for cvwork.

Three-phase architecture:
1. Gather user requirements (parse args) -> UserConfig
2. Set up logging
3. Execute (render the section with explicit paths)
"""

from __future__ import annotations

import traceback
from pathlib import Path
from typing import List, Optional

from .cli_config import UserConfig
from .cli_gather import gather_user_requirements
from .logging_utils import LOG, fmt_issues, setup_logging
from .render import render_section_from_json
from .renderers import list_renderers

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_STRICT_WARNINGS = 2


def execute(config: UserConfig) -> int:
    """Phase 3: run the requested operation and return the exit code."""
    if config.list_renderers:
        for renderer in list_renderers():
            print(f"{renderer['name']:<16} {renderer['description']}")
        return EXIT_OK

    stage = config.render
    out, warnings = render_section_from_json(
        stage.data,
        stage.output,
        renderer=stage.renderer,
        title=stage.title,
        marker=stage.marker,
        date_format=stage.date_format,
        **stage.renderer_kwargs(),
    )
    status = "⚠️ " if warnings else "✅"
    LOG.info("%s %s | %s", status, out.name, fmt_issues([], warnings))

    if warnings and config.strict:
        LOG.warning("Strict mode: %d warning(s) treated as failure", len(warnings))
        return EXIT_STRICT_WARNINGS
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main CLI entry point with three-phase architecture.
    """
    # Phase 1: Gather requirements
    config = gather_user_requirements(argv)

    # Phase 2: Logging
    if config.log_file:
        Path(config.log_file).expanduser().resolve().parent.mkdir(parents=True, exist_ok=True)
    setup_logging(config.debug, log_file=config.log_file, verbosity=config.verbosity)

    try:
        # Phase 3: Execute
        return execute(config)
    except Exception as e:
        LOG.error(str(e))
        if config.debug:
            LOG.error(traceback.format_exc())
        return EXIT_ERROR

if __name__ == "__main__":
    raise SystemExit(main())
